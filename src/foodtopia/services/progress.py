"""Daily progress maintenance.

A day's progress row is always rebuilt from the meals and workouts stored
for that ``(user, day)`` bucket rather than adjusted by deltas, so deletes
can never leave it out of step with the records it summarizes. Rebuilds of
one bucket are serialized with a per-bucket lock.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Protocol

from foodtopia.domain.meals import Meal, NewMeal
from foodtopia.domain.metrics import ensure_metric, ensure_optional_metric
from foodtopia.domain.progress import DailyProgress, WeekSummary, day_bucket
from foodtopia.domain.workouts import NewWorkout, RowingDetails, Workout

_logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


class ProgressRepository(Protocol):
    """Persistence interface for daily progress rows and their sources."""

    def get_daily_progress(self, user_id: int, day: date) -> DailyProgress | None:
        """Return the stored row for a day, if present."""

    def save_daily_progress(self, progress: DailyProgress) -> DailyProgress:
        """Insert or replace the row for ``(progress.user_id, progress.day)``."""

    def list_daily_progress(
        self, user_id: int, start: date, end: date
    ) -> list[DailyProgress]:
        """Return stored rows with ``start <= day < end``."""

    def list_meals_by_day(self, user_id: int, day: date) -> list[Meal]:
        """Return a user's meals logged on a day."""

    def list_workouts_by_day(self, user_id: int, day: date) -> list[Workout]:
        """Return a user's workouts logged on a day."""


@dataclass(frozen=True)
class MealNutrients:
    """Nutrients a meal contributes to its day."""

    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float


@dataclass(frozen=True)
class WorkoutEffort:
    """Effort a workout contributes to its day."""

    minutes: float
    calories_burned: float
    rowing_meters: float


def meal_nutrients(meal: NewMeal) -> MealNutrients:
    """Return a meal's contribution, validating every item value."""
    calories = protein = carbs = fat = sugar = 0.0
    for index, item in enumerate(meal.items):
        prefix = f"items[{index}]"
        calories += ensure_metric(item.calories, f"{prefix}.calories")
        protein += ensure_optional_metric(item.protein, f"{prefix}.protein")
        carbs += ensure_optional_metric(item.carbs, f"{prefix}.carbs")
        fat += ensure_optional_metric(item.fat, f"{prefix}.fat")
        sugar += ensure_optional_metric(item.sugar, f"{prefix}.sugar")
    return MealNutrients(calories, protein, carbs, fat, sugar)


def workout_effort(workout: NewWorkout) -> WorkoutEffort:
    """Return a workout's contribution, validating its numbers."""
    rowing_meters = 0.0
    details = workout.details
    if isinstance(details, RowingDetails) and details.rowing_meters is not None:
        rowing_meters = ensure_metric(details.rowing_meters, "details.rowing_meters")
    return WorkoutEffort(
        minutes=ensure_metric(workout.duration_minutes, "duration_minutes"),
        calories_burned=ensure_metric(workout.calories_burned, "calories_burned"),
        rowing_meters=rowing_meters,
    )


def compute_daily_progress(
    user_id: int, day: date, meals: list[Meal], workouts: list[Workout]
) -> DailyProgress:
    """Sum the meals and workouts of one day into a progress row."""
    total = DailyProgress.empty(user_id, day)
    for meal in meals:
        nutrients = meal_nutrients(meal)
        total = replace(
            total,
            calories_consumed=total.calories_consumed + nutrients.calories,
            protein_consumed=total.protein_consumed + nutrients.protein,
            carbs_consumed=total.carbs_consumed + nutrients.carbs,
            fat_consumed=total.fat_consumed + nutrients.fat,
            sugar_consumed=total.sugar_consumed + nutrients.sugar,
        )
    for workout in workouts:
        effort = workout_effort(workout)
        total = replace(
            total,
            workout_minutes=total.workout_minutes + effort.minutes,
            calories_burned=total.calories_burned + effort.calories_burned,
            rowing_meters=total.rowing_meters + effort.rowing_meters,
        )
    return total


@dataclass
class _BucketLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass
class ProgressService:
    """Keeps per-day progress rows consistent with meals and workouts."""

    repository: ProgressRepository
    _locks: dict[tuple[int, date], _BucketLock] = field(
        default_factory=dict, init=False, repr=False
    )
    _locks_guard: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def get_daily_progress(self, user_id: int, day: date | datetime) -> DailyProgress:
        """Return the day's row, or an all-zero row when nothing is stored."""
        bucket = day_bucket(day)
        stored = self.repository.get_daily_progress(user_id, bucket)
        return stored or DailyProgress.empty(user_id, bucket)

    def rebuild_day(self, user_id: int, day: date | datetime) -> DailyProgress:
        """Recompute and store the row for a day from its meals and workouts."""
        bucket = day_bucket(day)
        with self.bucket_lock(user_id, bucket):
            meals = self.repository.list_meals_by_day(user_id, bucket)
            workouts = self.repository.list_workouts_by_day(user_id, bucket)
            progress = compute_daily_progress(user_id, bucket, meals, workouts)
            existing = self.repository.get_daily_progress(user_id, bucket)
            if existing is None and not meals and not workouts:
                return progress
            saved = self.repository.save_daily_progress(
                replace(progress, id=existing.id if existing else None)
            )
        _logger.info(
            "Daily progress rebuilt: user_id=%s day=%s meals=%s workouts=%s",
            user_id,
            bucket.isoformat(),
            len(meals),
            len(workouts),
        )
        return saved

    def get_week(self, user_id: int, day: date | datetime) -> WeekSummary:
        """Return the Monday-based week containing ``day``."""
        bucket = day_bucket(day)
        start = bucket - timedelta(days=bucket.weekday())
        end = start + timedelta(days=DAYS_PER_WEEK)
        stored = {
            row.day: row
            for row in self.repository.list_daily_progress(user_id, start, end)
        }
        daily = []
        for offset in range(DAYS_PER_WEEK):
            current = start + timedelta(days=offset)
            daily.append(stored.get(current) or DailyProgress.empty(user_id, current))

        total_consumed = sum(row.calories_consumed for row in daily)
        total_protein = sum(row.protein_consumed for row in daily)
        return WeekSummary(
            start=start,
            daily=daily,
            total_calories_consumed=total_consumed,
            total_calories_burned=sum(row.calories_burned for row in daily),
            total_workout_minutes=sum(row.workout_minutes for row in daily),
            total_rowing_meters=sum(row.rowing_meters for row in daily),
            avg_calories_consumed=total_consumed / DAYS_PER_WEEK,
            avg_protein_consumed=total_protein / DAYS_PER_WEEK,
        )

    @contextmanager
    def bucket_lock(self, user_id: int, day: date) -> Iterator[None]:
        """Hold the lock guarding one ``(user, day)`` bucket."""
        key = (user_id, day)
        with self._locks_guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _BucketLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            # Entries live only while some thread holds or waits for them.
            with self._locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[key]
