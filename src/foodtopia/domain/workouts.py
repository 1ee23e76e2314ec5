"""Domain models for workouts.

Workout details are a tagged union keyed by ``WorkoutType``: every type has
its own details dataclass, so the valid keys for a workout are known from
its type alone.
"""

import math
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import ClassVar

from foodtopia.domain.errors import InvalidWorkoutDetailsError


class WorkoutType(str, Enum):
    """Supported workout types."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    HIIT = "hiit"
    ROWING = "rowing"


@dataclass(frozen=True)
class CardioDetails:
    """Details for steady cardio sessions."""

    type: ClassVar[WorkoutType] = WorkoutType.CARDIO

    distance: float | None = None
    pace: str | None = None
    heart_rate: float | None = None


@dataclass(frozen=True)
class HiitDetails(CardioDetails):
    """Details for interval sessions; same fields as cardio."""

    type: ClassVar[WorkoutType] = WorkoutType.HIIT


@dataclass(frozen=True)
class StrengthDetails:
    """Details for strength sessions."""

    type: ClassVar[WorkoutType] = WorkoutType.STRENGTH

    sets: int | None = None
    reps: int | None = None
    weight: float | None = None


@dataclass(frozen=True)
class FlexibilityDetails:
    """Details for flexibility sessions."""

    type: ClassVar[WorkoutType] = WorkoutType.FLEXIBILITY

    heart_rate: float | None = None


@dataclass(frozen=True)
class RowingDetails:
    """Details for rowing sessions; the split is seconds per 500 m."""

    type: ClassVar[WorkoutType] = WorkoutType.ROWING

    rowing_meters: float | None = None
    rowing_split: str | None = None
    heart_rate: float | None = None


WorkoutDetails = CardioDetails | StrengthDetails | FlexibilityDetails | RowingDetails

_DETAILS_BY_TYPE: dict[WorkoutType, type[WorkoutDetails]] = {
    WorkoutType.CARDIO: CardioDetails,
    WorkoutType.HIIT: HiitDetails,
    WorkoutType.STRENGTH: StrengthDetails,
    WorkoutType.FLEXIBILITY: FlexibilityDetails,
    WorkoutType.ROWING: RowingDetails,
}

_CAMEL_NAMES = {
    "heart_rate": "heartRate",
    "rowing_meters": "rowingMeters",
    "rowing_split": "rowingSplit",
}
_SNAKE_NAMES = {camel: snake for snake, camel in _CAMEL_NAMES.items()}
_TEXT_FIELDS = {"pace", "rowing_split"}
_INTEGER_FIELDS = {"sets", "reps"}


def parse_workout_type(value: object) -> WorkoutType:
    """Return the WorkoutType for a raw tag."""
    try:
        return WorkoutType(value)
    except ValueError as exc:
        raise InvalidWorkoutDetailsError(f"Unknown workout type: {value!r}") from exc


def parse_workout_details(
    workout_type: WorkoutType | str, bag: dict[str, object] | None
) -> WorkoutDetails:
    """Build the details variant for a workout type from a raw bag.

    Keys may be camelCase or snake_case. ``None`` values are treated as
    absent. Keys that do not belong to the type are rejected.
    """
    resolved_type = parse_workout_type(workout_type)
    details_cls = _DETAILS_BY_TYPE[resolved_type]
    allowed = {item.name for item in fields(details_cls)}
    values: dict[str, object] = {}
    for key, value in (bag or {}).items():
        if value is None:
            continue
        name = _SNAKE_NAMES.get(key, key)
        if name not in allowed:
            raise InvalidWorkoutDetailsError(
                f"Field {key!r} is not valid for {resolved_type.value} workouts"
            )
        values[name] = _check_value(name, value)
    return details_cls(**values)


def workout_details_to_dict(details: WorkoutDetails) -> dict[str, object]:
    """Return the camelCase bag for a details variant, omitting absent fields."""
    payload: dict[str, object] = {}
    for item in fields(details):
        value = getattr(details, item.name)
        if value is not None:
            payload[_CAMEL_NAMES.get(item.name, item.name)] = value
    return payload


def _check_value(name: str, value: object) -> object:
    if name in _TEXT_FIELDS:
        if not isinstance(value, str):
            raise InvalidWorkoutDetailsError(f"Field {name!r} must be text")
        return value
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidWorkoutDetailsError(f"Field {name!r} must be a number")
    if not math.isfinite(value):
        raise InvalidWorkoutDetailsError(f"Field {name!r} must be finite")
    if name in _INTEGER_FIELDS:
        if value != int(value):
            raise InvalidWorkoutDetailsError(f"Field {name!r} must be a whole number")
        return int(value)
    return value


@dataclass(frozen=True)
class NewWorkout:
    """Payload for logging a workout."""

    user_id: int
    title: str
    logged_at: datetime
    start_time: str
    end_time: str
    calories_burned: float
    duration_minutes: float
    details: WorkoutDetails

    @property
    def type(self) -> WorkoutType:
        """Workout type, taken from the details variant."""
        return self.details.type


@dataclass(frozen=True, kw_only=True)
class Workout(NewWorkout):
    """Workout stored for a user."""

    id: int
