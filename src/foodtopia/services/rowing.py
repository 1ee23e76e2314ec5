"""Rowing distance and split resolution.

A rowing workout carries a duration plus a distance and an average split
(seconds per 500 m). Given the duration, either of the other two determines
the third. Degenerate input yields ``None`` ("not known yet"); non-finite
numbers raise ``InvalidMetricError``.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

from foodtopia.domain.metrics import ensure_metric
from foodtopia.domain.workouts import RowingDetails

SPLIT_METERS = 500

_SPLIT_PATTERN = re.compile(r"^\s*(\d+):([0-5]?\d)(?:\.(\d{1,3}))?\s*$")


def parse_split(split: object) -> float | None:
    """Return the seconds in a ``M:SS`` or ``M:SS.fff`` split, if valid."""
    if not isinstance(split, str):
        return None
    match = _SPLIT_PATTERN.match(split)
    if match is None:
        return None
    minutes, seconds, fraction = match.groups()
    total = int(minutes) * 60 + int(seconds)
    if fraction:
        total += int(fraction) / 10 ** len(fraction)
    if total <= 0:
        return None
    return float(total)


def format_split(split_seconds: float) -> str:
    """Render split seconds as ``M:SS.ff``."""
    hundredths = round(ensure_metric(split_seconds, "split_seconds") * 100)
    minutes, remainder = divmod(hundredths, 6000)
    seconds, fraction = divmod(remainder, 100)
    return f"{minutes}:{seconds:02d}.{fraction:02d}"


def split_to_meters(split: str | None, duration_minutes: float) -> int | None:
    """Return the distance rowed at an average split over the duration."""
    total_seconds = _total_seconds(duration_minutes)
    split_seconds = parse_split(split)
    if total_seconds is None or split_seconds is None:
        return None
    return round(total_seconds / split_seconds * SPLIT_METERS)


def meters_to_split(meters: float | None, duration_minutes: float) -> str | None:
    """Return the average split for a distance rowed over the duration."""
    total_seconds = _total_seconds(duration_minutes)
    if total_seconds is None or meters is None:
        return None
    distance = ensure_metric(meters, "rowing_meters", allow_negative=True)
    if distance <= 0:
        return None
    return format_split(total_seconds / distance * SPLIT_METERS)


def _total_seconds(duration_minutes: float | None) -> float | None:
    if duration_minutes is None:
        return None
    minutes = ensure_metric(duration_minutes, "duration_minutes", allow_negative=True)
    if minutes <= 0:
        return None
    return minutes * 60


class RowingAuthority(str, Enum):
    """Which rowing field the caller supplied last."""

    DISTANCE = "distance"
    SPLIT = "split"


@dataclass
class RowingMetricsResolver:
    """Keeps distance and split consistent while a rowing workout is edited.

    The field supplied last is authoritative and only the other one is
    recomputed, on every field or duration change. Seeded with both fields
    and no authority, distance wins. Clearing a field drops the authority
    and leaves the other field as it was.
    """

    duration_minutes: float | None = None
    rowing_meters: float | None = None
    rowing_split: str | None = None
    authority: RowingAuthority | None = None

    def __post_init__(self) -> None:
        if self.authority is None:
            if self.rowing_meters is not None:
                self.authority = RowingAuthority.DISTANCE
            elif self.rowing_split:
                self.authority = RowingAuthority.SPLIT
        self._recompute()

    def set_duration(self, duration_minutes: float | None) -> None:
        """Update the duration and refresh the derived field."""
        self.duration_minutes = duration_minutes
        self._recompute()

    def set_meters(self, meters: float | None) -> None:
        """Make distance authoritative and derive the split from it."""
        self.rowing_meters = meters
        self.authority = RowingAuthority.DISTANCE if meters is not None else None
        self._recompute()

    def set_split(self, split: str | None) -> None:
        """Make the split authoritative and derive the distance from it."""
        self.rowing_split = split or None
        self.authority = RowingAuthority.SPLIT if split else None
        self._recompute()

    def details(self, heart_rate: float | None = None) -> RowingDetails:
        """Return the resolved rowing details."""
        return RowingDetails(
            rowing_meters=self.rowing_meters,
            rowing_split=self.rowing_split,
            heart_rate=heart_rate,
        )

    def _recompute(self) -> None:
        if self.duration_minutes is None:
            return
        if self.authority is RowingAuthority.DISTANCE:
            self.rowing_split = meters_to_split(
                self.rowing_meters, self.duration_minutes
            )
        elif self.authority is RowingAuthority.SPLIT:
            self.rowing_meters = split_to_meters(
                self.rowing_split, self.duration_minutes
            )


def complete_rowing_details(
    details: RowingDetails, duration_minutes: float
) -> RowingDetails:
    """Fill in whichever of distance or split is missing.

    Details with both fields, or neither, are returned unchanged.
    """
    has_meters = details.rowing_meters is not None
    has_split = bool(details.rowing_split)
    if has_meters == has_split:
        return details
    resolver = RowingMetricsResolver(
        duration_minutes=duration_minutes,
        rowing_meters=details.rowing_meters,
        rowing_split=details.rowing_split,
    )
    return replace(
        details,
        rowing_meters=resolver.rowing_meters,
        rowing_split=resolver.rowing_split,
    )
