"""Tests for rowing distance and split resolution."""

import math

import pytest

from foodtopia.domain.errors import InvalidMetricError
from foodtopia.domain.workouts import RowingDetails
from foodtopia.services.rowing import (
    RowingAuthority,
    RowingMetricsResolver,
    complete_rowing_details,
    format_split,
    meters_to_split,
    parse_split,
    split_to_meters,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("2:33", 153.0), ("2:05.5", 125.5), ("1:59.999", 119.999), (" 0:45.25 ", 45.25)],
)
def test_parse_split(raw, expected) -> None:
    assert parse_split(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "abc", "2:75", "2.30", "0:00", None, 153])
def test_parse_split_rejects_malformed(raw) -> None:
    assert parse_split(raw) is None


def test_format_split_carries_rounding_into_minutes() -> None:
    assert format_split(153) == "2:33.00"
    assert format_split(125.456) == "2:05.46"
    assert format_split(119.999) == "2:00.00"


def test_distance_to_split_scenario() -> None:
    assert meters_to_split(5000, 25.5) == "2:33.00"


def test_split_to_distance_scenario() -> None:
    assert split_to_meters("2:33.00", 25.5) == 5000


def _round_trip(meters: int, duration: float) -> tuple[int, float]:
    split = meters_to_split(meters, duration)
    return split_to_meters(split, duration) - meters, parse_split(split)


@pytest.mark.parametrize("duration", [10, 25.5, 30, 60, 120, 240])
def test_round_trip_error_follows_split_rounding(duration) -> None:
    # Splits between 1:00 and 5:00 per 500 m.
    for meters in range(int(100 * duration), int(500 * duration) + 1, 3):
        error, split_seconds = _round_trip(meters, duration)
        drift = meters * 0.005 / split_seconds

        assert abs(error) <= 0.5 + drift + 1e-6
        if drift < 1.5:
            assert abs(error) <= 1


@pytest.mark.parametrize(
    ("meters", "duration"),
    [(2000, 7), (5000, 25.5), (7321, 30), (10000, 40), (21097, 90)],
)
def test_round_trip_stays_within_a_meter(meters, duration) -> None:
    error, _ = _round_trip(meters, duration)

    assert abs(error) <= 1


def test_long_rows_can_drift_past_a_meter() -> None:
    assert meters_to_split(33169, 120) == "1:48.54"
    assert split_to_meters("1:48.54", 120) == 33167


def test_degenerate_input_is_unknown() -> None:
    assert meters_to_split(5000, 0) is None
    assert meters_to_split(0, 30) is None
    assert meters_to_split(None, 30) is None
    assert split_to_meters("0:00", 30) is None
    assert split_to_meters("2:00", -1) is None
    assert split_to_meters(None, 30) is None


def test_non_finite_input_raises() -> None:
    with pytest.raises(InvalidMetricError):
        meters_to_split(math.nan, 30)
    with pytest.raises(InvalidMetricError):
        split_to_meters("2:00", math.inf)


def test_resolver_recomputes_only_the_other_field() -> None:
    resolver = RowingMetricsResolver(duration_minutes=25.5)

    resolver.set_meters(5000)
    assert resolver.authority is RowingAuthority.DISTANCE
    assert resolver.rowing_split == "2:33.00"

    resolver.set_split("2:00.00")
    assert resolver.authority is RowingAuthority.SPLIT
    assert resolver.rowing_meters == 6375
    assert resolver.rowing_split == "2:00.00"


def test_resolver_duration_change_keeps_authority() -> None:
    resolver = RowingMetricsResolver(duration_minutes=25.5, rowing_meters=5000)

    resolver.set_duration(30)
    assert resolver.rowing_meters == 5000
    assert resolver.rowing_split == "3:00.00"

    resolver.set_split("2:00")
    resolver.set_duration(20)
    assert resolver.rowing_split == "2:00"
    assert resolver.rowing_meters == 5000


def test_resolver_seeded_with_both_fields_prefers_distance() -> None:
    resolver = RowingMetricsResolver(
        duration_minutes=25.5, rowing_meters=5000, rowing_split="9:99"
    )

    assert resolver.authority is RowingAuthority.DISTANCE
    assert resolver.rowing_split == "2:33.00"


def test_resolver_without_duration_leaves_fields() -> None:
    resolver = RowingMetricsResolver(rowing_split="2:00")

    assert resolver.authority is RowingAuthority.SPLIT
    assert resolver.rowing_meters is None

    resolver.set_duration(0)
    assert resolver.rowing_meters is None


def test_clearing_a_field_drops_authority() -> None:
    resolver = RowingMetricsResolver(duration_minutes=25.5, rowing_meters=5000)

    resolver.set_meters(None)

    assert resolver.authority is None
    assert resolver.rowing_split == "2:33.00"


def test_complete_rowing_details() -> None:
    details = complete_rowing_details(
        RowingDetails(rowing_meters=5000, heart_rate=150), 25.5
    )

    assert details == RowingDetails(
        rowing_meters=5000, rowing_split="2:33.00", heart_rate=150
    )
    both = RowingDetails(rowing_meters=4000, rowing_split="2:33.00")
    assert complete_rowing_details(both, 25.5) is both
    assert complete_rowing_details(RowingDetails(), 25.5) == RowingDetails()
