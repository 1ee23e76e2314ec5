"""Meal logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol

from foodtopia.domain.meals import Meal, NewMeal
from foodtopia.domain.progress import as_utc, day_bucket
from foodtopia.services.progress import ProgressService, meal_nutrients

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: int) -> list[Meal]:
        """Return all meals for a user."""

    def list_meals_by_day(self, user_id: int, day: date) -> list[Meal]:
        """Return a user's meals logged on a day."""

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id, if present."""

    def insert_meal(self, payload: NewMeal) -> Meal:
        """Store a meal under a new id and return it."""

    def remove_meal(self, meal_id: int) -> Meal | None:
        """Delete a meal and return it, or return None if it does not exist."""


@dataclass
class MealService:
    """Service that persists meals and keeps daily progress in step."""

    repository: MealRepository
    progress_service: ProgressService

    def create_meal(self, payload: NewMeal) -> Meal:
        """Store a meal and refresh its day's progress."""
        meal_nutrients(payload)
        normalized = replace(
            payload,
            logged_at=as_utc(payload.logged_at),
            items=tuple(payload.items),
        )
        meal = self.repository.insert_meal(normalized)
        _logger.info(
            "Meal created: id=%s user_id=%s calories=%s",
            meal.id,
            meal.user_id,
            meal.total_calories,
        )
        self.progress_service.rebuild_day(meal.user_id, meal.logged_at)
        return meal

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal; return False when it does not exist."""
        meal = self.repository.remove_meal(meal_id)
        if meal is None:
            return False
        _logger.info("Meal deleted: id=%s user_id=%s", meal.id, meal.user_id)
        self.progress_service.rebuild_day(meal.user_id, meal.logged_at)
        return True

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id."""
        return self.repository.get_meal(meal_id)

    def list_meals(self, user_id: int) -> list[Meal]:
        """Return all meals for a user."""
        return self.repository.list_meals(user_id)

    def get_meals_by_date(self, user_id: int, day: date | datetime) -> list[Meal]:
        """Return a user's meals for the day containing ``day``."""
        return self.repository.list_meals_by_day(user_id, day_bucket(day))
