"""Tests for sample data seeding."""

from foodtopia.services.seed import DEMO_USERNAME, seed_sample_data
from tests.conftest import NOON


def test_seed_loads_catalogs_and_consistent_progress(container) -> None:
    user = seed_sample_data(container, now=NOON)

    assert user is not None
    assert user.username == DEMO_USERNAME
    assert len(container.catalog_service.list_food_items()) == 9
    assert len(container.catalog_service.list_exercises()) == 3
    assert len(container.catalog_service.list_food_suggestions()) == 2
    assert len(container.catalog_service.list_workout_suggestions()) == 2
    assert len(container.meal_service.get_meals_by_date(user.id, NOON)) == 3

    row = container.progress_service.get_daily_progress(user.id, NOON)
    assert row.calories_consumed == 1600
    assert row.protein_consumed == 97
    assert row.workout_minutes == 25
    assert row.calories_burned == 180


def test_seed_runs_once(container) -> None:
    seed_sample_data(container, now=NOON)

    assert seed_sample_data(container, now=NOON) is None
    assert len(container.catalog_service.list_food_items()) == 9
