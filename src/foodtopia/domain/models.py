"""Domain models for users and their daily goals."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Goals:
    """Daily goal targets for a user."""

    calories: int = 2000
    protein: int = 120
    carbs: int = 250
    fat: int = 65
    sugar: int = 50
    workout_minutes: int = 45


@dataclass(frozen=True)
class NewUser:
    """Payload for registering a user."""

    username: str
    password: str
    goals: Goals = field(default_factory=Goals)


@dataclass(frozen=True, kw_only=True)
class UserRecord(NewUser):
    """Represents a user stored in the database."""

    id: int
