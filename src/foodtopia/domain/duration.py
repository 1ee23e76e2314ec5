"""Conversions between fractional-minute durations and their components.

Workouts store duration as one fractional number of minutes. Forms and
displays work with whole minutes, seconds and milliseconds instead.
"""

from dataclasses import dataclass

from foodtopia.domain.errors import InvalidMetricError
from foodtopia.domain.metrics import ensure_metric

MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000
MAX_SECONDS = 59
MAX_MILLISECONDS = 999


@dataclass(frozen=True)
class DurationParts:
    """Duration split into minutes, seconds and milliseconds."""

    minutes: int
    seconds: int
    milliseconds: int


def compose(minutes: int, seconds: int = 0, milliseconds: int = 0) -> float:
    """Return the fractional-minute value for the given components."""
    _ensure_component(minutes, "minutes", None)
    _ensure_component(seconds, "seconds", MAX_SECONDS)
    _ensure_component(milliseconds, "milliseconds", MAX_MILLISECONDS)
    return minutes + seconds / 60 + milliseconds / MS_PER_MINUTE


def decompose(value: float) -> DurationParts:
    """Split a fractional-minute value into its components.

    The value is first rounded to whole milliseconds, which keeps
    ``decompose(compose(m, s, ms))`` exact and stops 59.9995 seconds from
    being reported as 60 seconds.
    """
    total_ms = round(ensure_metric(value, "duration_minutes") * MS_PER_MINUTE)
    minutes, remainder = divmod(total_ms, MS_PER_MINUTE)
    seconds, milliseconds = divmod(remainder, MS_PER_SECOND)
    return DurationParts(minutes=minutes, seconds=seconds, milliseconds=milliseconds)


def format_duration(value: float) -> str:
    """Render a duration as ``"25 min"`` or ``"25 min 30 sec"``."""
    total_seconds = round(ensure_metric(value, "duration_minutes") * 60)
    minutes, seconds = divmod(total_seconds, 60)
    if seconds == 0:
        return f"{minutes} min"
    return f"{minutes} min {seconds} sec"


def _ensure_component(value: object, field: str, upper: int | None) -> None:
    number = ensure_metric(value, field)
    if number != int(number) or (upper is not None and number > upper):
        raise InvalidMetricError(field, value)
