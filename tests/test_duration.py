"""Tests for fractional-minute duration conversions."""

import math

import pytest

from foodtopia.domain.duration import DurationParts, compose, decompose, format_duration
from foodtopia.domain.errors import InvalidMetricError


def test_compose_builds_fractional_minutes() -> None:
    assert compose(25, 30) == 25.5
    assert compose(0, 0, 0) == 0
    assert compose(1, 0, 500) == pytest.approx(1 + 500 / 60_000)


@pytest.mark.parametrize(
    ("minutes", "seconds", "milliseconds"),
    [(0, 0, 0), (25, 30, 0), (1, 59, 999), (59, 0, 1), (120, 7, 250), (0, 59, 999)],
)
def test_decompose_inverts_compose(minutes, seconds, milliseconds) -> None:
    value = compose(minutes, seconds, milliseconds)

    assert decompose(value) == DurationParts(minutes, seconds, milliseconds)


@pytest.mark.parametrize("minutes", [0, 1, 37, 500, 999])
def test_decompose_inverts_compose_for_every_component(minutes) -> None:
    for seconds in range(60):
        for milliseconds in range(1000):
            value = compose(minutes, seconds, milliseconds)

            assert decompose(value) == DurationParts(minutes, seconds, milliseconds)


def test_decompose_never_reports_sixty_seconds() -> None:
    parts = decompose(1 + 59.9999 / 60)

    assert parts == DurationParts(2, 0, 0)


@pytest.mark.parametrize(
    ("minutes", "seconds", "milliseconds"),
    [(-1, 0, 0), (1, 60, 0), (1, 0, 1000), (1.5, 0, 0), (math.nan, 0, 0)],
)
def test_compose_rejects_out_of_range_parts(minutes, seconds, milliseconds) -> None:
    with pytest.raises(InvalidMetricError):
        compose(minutes, seconds, milliseconds)


def test_decompose_rejects_non_finite() -> None:
    with pytest.raises(InvalidMetricError):
        decompose(math.inf)


def test_format_duration() -> None:
    assert format_duration(25) == "25 min"
    assert format_duration(25.5) == "25 min 30 sec"
    assert format_duration(0) == "0 min"
