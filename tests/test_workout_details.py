"""Tests for workout details parsing."""

import math

import pytest

from foodtopia.domain.errors import InvalidWorkoutDetailsError
from foodtopia.domain.workouts import (
    CardioDetails,
    FlexibilityDetails,
    HiitDetails,
    RowingDetails,
    StrengthDetails,
    WorkoutType,
    parse_workout_details,
    workout_details_to_dict,
)


def test_each_type_maps_to_its_variant() -> None:
    assert parse_workout_details("cardio", {"distance": 2.4}) == CardioDetails(
        distance=2.4
    )
    assert isinstance(parse_workout_details("hiit", {}), HiitDetails)
    assert parse_workout_details("strength", {"sets": 3, "reps": 12.0}) == (
        StrengthDetails(sets=3, reps=12)
    )
    assert parse_workout_details(WorkoutType.FLEXIBILITY, {"heartRate": 95}) == (
        FlexibilityDetails(heart_rate=95)
    )


def test_rowing_accepts_camel_and_snake_keys() -> None:
    camel = parse_workout_details(
        "rowing", {"rowingMeters": 5000, "rowingSplit": "2:33.00"}
    )
    snake = parse_workout_details(
        "rowing", {"rowing_meters": 5000, "rowing_split": "2:33.00"}
    )

    assert camel == snake == RowingDetails(rowing_meters=5000, rowing_split="2:33.00")


def test_none_values_are_absent() -> None:
    details = parse_workout_details("cardio", {"distance": None, "pace": "8:00"})

    assert details == CardioDetails(pace="8:00")
    assert workout_details_to_dict(details) == {"pace": "8:00"}


@pytest.mark.parametrize(
    ("workout_type", "bag"),
    [
        ("strength", {"distance": 5}),
        ("cardio", {"rowingMeters": 100}),
        ("rowing", {"sets": 3}),
        ("yoga", {}),
        ("strength", {"sets": 2.5}),
        ("cardio", {"pace": 8}),
        ("cardio", {"distance": "far"}),
        ("cardio", {"distance": math.nan}),
        ("strength", {"weight": True}),
    ],
)
def test_invalid_details_are_rejected(workout_type, bag) -> None:
    with pytest.raises(InvalidWorkoutDetailsError):
        parse_workout_details(workout_type, bag)


def test_to_dict_uses_camel_case() -> None:
    details = RowingDetails(rowing_meters=5000, rowing_split="2:33.00", heart_rate=150)

    assert workout_details_to_dict(details) == {
        "rowingMeters": 5000,
        "rowingSplit": "2:33.00",
        "heartRate": 150,
    }
