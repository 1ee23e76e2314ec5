"""Domain models for daily progress aggregates."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta


@dataclass(frozen=True)
class DailyProgress:
    """Per-user, per-day totals derived from meals and workouts."""

    user_id: int
    day: date
    calories_consumed: float = 0.0
    protein_consumed: float = 0.0
    carbs_consumed: float = 0.0
    fat_consumed: float = 0.0
    sugar_consumed: float = 0.0
    workout_minutes: float = 0.0
    calories_burned: float = 0.0
    rowing_meters: float = 0.0
    id: int | None = None

    @classmethod
    def empty(cls, user_id: int, day: date) -> "DailyProgress":
        """Return an all-zero row for a day without events."""
        return cls(user_id=user_id, day=day)


@dataclass(frozen=True)
class WeekSummary:
    """Seven daily rows with totals and per-day averages."""

    start: date
    daily: list[DailyProgress]
    total_calories_consumed: float
    total_calories_burned: float
    total_workout_minutes: float
    total_rowing_meters: float
    avg_calories_consumed: float
    avg_protein_consumed: float


def as_utc(moment: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def day_bucket(moment: datetime | date) -> date:
    """Return the calendar day a moment falls on, truncated at UTC midnight."""
    if isinstance(moment, datetime):
        return as_utc(moment).date()
    return moment


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the half-open UTC datetime range covering a day."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)
