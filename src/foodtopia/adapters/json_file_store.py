"""Record store persisted as a single JSON document on local disk."""

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from foodtopia.adapters.rows import (
    goals_to_row,
    meal_from_row,
    meal_to_row,
    payload_to_row,
    progress_from_row,
    progress_to_row,
    record_from_row,
    user_from_row,
    user_to_row,
    workout_from_row,
    workout_to_row,
)
from foodtopia.domain.catalog import (
    Exercise,
    FoodItem,
    FoodSuggestion,
    NewExercise,
    NewFoodItem,
    NewFoodSuggestion,
    NewWorkoutSuggestion,
    WorkoutSuggestion,
)
from foodtopia.domain.meals import Meal, NewMeal
from foodtopia.domain.models import Goals, NewUser, UserRecord
from foodtopia.domain.progress import DailyProgress, day_bucket
from foodtopia.domain.workouts import NewWorkout, Workout
from foodtopia.services.store import RecordStore

_logger = logging.getLogger(__name__)

COLLECTIONS = (
    "users",
    "food_items",
    "exercises",
    "meals",
    "workouts",
    "daily_progress",
    "food_suggestions",
    "workout_suggestions",
)


def _empty_document() -> dict[str, dict]:
    document: dict[str, dict] = {name: {} for name in COLLECTIONS}
    document["sequences"] = {name: 0 for name in COLLECTIONS}
    return document


@dataclass
class JsonFileRecordStore(RecordStore):
    """Client-local store; every mutation rewrites the document atomically.

    The document holds one object per collection keyed by id, plus the last
    id handed out per collection so ids survive deletes and restarts.
    """

    path: Path
    _document: dict[str, dict] = field(init=False, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._document = self._load()

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        row = self._get("users", user_id)
        return user_from_row(row) if row else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the user with a username."""
        for row in self._rows("users"):
            if row["username"] == username:
                return user_from_row(row)
        return None

    def create_user(self, payload: NewUser) -> UserRecord:
        """Create a user."""
        return user_from_row(self._insert("users", user_to_row(payload)))

    def update_user_goals(self, user_id: int, goals: Goals) -> UserRecord | None:
        """Replace a user's goals."""
        with self._lock:
            row = self._get("users", user_id)
            if row is None:
                return None
            row.update(goals_to_row(goals))
            self._put("users", row)
            return user_from_row(row)

    def list_food_items(self) -> list[FoodItem]:
        """Return all food items."""
        return [record_from_row(FoodItem, row) for row in self._rows("food_items")]

    def get_food_item(self, food_item_id: int) -> FoodItem | None:
        """Return a food item by id."""
        row = self._get("food_items", food_item_id)
        return record_from_row(FoodItem, row) if row else None

    def create_food_item(self, payload: NewFoodItem) -> FoodItem:
        """Create a food item."""
        row = self._insert("food_items", payload_to_row(payload))
        return record_from_row(FoodItem, row)

    def list_exercises(self) -> list[Exercise]:
        """Return all exercise templates."""
        return [record_from_row(Exercise, row) for row in self._rows("exercises")]

    def get_exercise(self, exercise_id: int) -> Exercise | None:
        """Return an exercise template by id."""
        row = self._get("exercises", exercise_id)
        return record_from_row(Exercise, row) if row else None

    def create_exercise(self, payload: NewExercise) -> Exercise:
        """Create an exercise template."""
        row = self._insert("exercises", payload_to_row(payload))
        return record_from_row(Exercise, row)

    def list_food_suggestions(self) -> list[FoodSuggestion]:
        """Return food suggestions."""
        return [
            record_from_row(FoodSuggestion, row)
            for row in self._rows("food_suggestions")
        ]

    def create_food_suggestion(self, payload: NewFoodSuggestion) -> FoodSuggestion:
        """Create a food suggestion."""
        row = self._insert("food_suggestions", payload_to_row(payload))
        return record_from_row(FoodSuggestion, row)

    def list_workout_suggestions(self) -> list[WorkoutSuggestion]:
        """Return workout suggestions."""
        return [
            record_from_row(WorkoutSuggestion, row)
            for row in self._rows("workout_suggestions")
        ]

    def create_workout_suggestion(
        self, payload: NewWorkoutSuggestion
    ) -> WorkoutSuggestion:
        """Create a workout suggestion."""
        row = self._insert("workout_suggestions", payload_to_row(payload))
        return record_from_row(WorkoutSuggestion, row)

    def list_meals(self, user_id: int) -> list[Meal]:
        """Return all meals for a user."""
        return [
            meal_from_row(row)
            for row in self._rows("meals")
            if row["user_id"] == user_id
        ]

    def list_meals_by_day(self, user_id: int, day: date) -> list[Meal]:
        """Return a user's meals logged on a day."""
        return [
            meal
            for meal in self.list_meals(user_id)
            if day_bucket(meal.logged_at) == day
        ]

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id."""
        row = self._get("meals", meal_id)
        return meal_from_row(row) if row else None

    def insert_meal(self, payload: NewMeal) -> Meal:
        """Store a meal under a new id."""
        return meal_from_row(self._insert("meals", meal_to_row(payload)))

    def remove_meal(self, meal_id: int) -> Meal | None:
        """Delete a meal and return it."""
        row = self._remove("meals", meal_id)
        return meal_from_row(row) if row else None

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Return all workouts for a user."""
        return [
            workout_from_row(row)
            for row in self._rows("workouts")
            if row["user_id"] == user_id
        ]

    def list_workouts_by_day(self, user_id: int, day: date) -> list[Workout]:
        """Return a user's workouts logged on a day."""
        return [
            workout
            for workout in self.list_workouts(user_id)
            if day_bucket(workout.logged_at) == day
        ]

    def get_workout(self, workout_id: int) -> Workout | None:
        """Return a workout by id."""
        row = self._get("workouts", workout_id)
        return workout_from_row(row) if row else None

    def insert_workout(self, payload: NewWorkout) -> Workout:
        """Store a workout under a new id."""
        return workout_from_row(self._insert("workouts", workout_to_row(payload)))

    def remove_workout(self, workout_id: int) -> Workout | None:
        """Delete a workout and return it."""
        row = self._remove("workouts", workout_id)
        return workout_from_row(row) if row else None

    def get_daily_progress(self, user_id: int, day: date) -> DailyProgress | None:
        """Return the stored row for a day."""
        row = self._find_progress(user_id, day)
        return progress_from_row(row) if row else None

    def save_daily_progress(self, progress: DailyProgress) -> DailyProgress:
        """Insert or replace the row for a day."""
        with self._lock:
            existing = self._find_progress(progress.user_id, progress.day)
            row = progress_to_row(progress)
            if existing is None:
                return progress_from_row(self._insert("daily_progress", row))
            row["id"] = existing["id"]
            self._put("daily_progress", row)
            return progress_from_row(row)

    def list_daily_progress(
        self, user_id: int, start: date, end: date
    ) -> list[DailyProgress]:
        """Return stored rows with ``start <= day < end``."""
        rows = [
            progress_from_row(row)
            for row in self._rows("daily_progress")
            if row["user_id"] == user_id
        ]
        return sorted(
            (row for row in rows if start <= row.day < end),
            key=lambda row: row.day,
        )

    def _find_progress(self, user_id: int, day: date) -> dict | None:
        key = day.isoformat()
        for row in self._rows("daily_progress"):
            if row["user_id"] == user_id and row["date"] == key:
                return row
        return None

    def _rows(self, collection: str) -> list[dict]:
        with self._lock:
            rows = self._document[collection].values()
            return sorted((dict(row) for row in rows), key=lambda row: row["id"])

    def _get(self, collection: str, record_id: int) -> dict | None:
        with self._lock:
            row = self._document[collection].get(str(record_id))
            return dict(row) if row is not None else None

    def _insert(self, collection: str, row: dict) -> dict:
        with self._lock:
            document = self._draft(collection)
            record_id = document["sequences"].get(collection, 0) + 1
            document["sequences"][collection] = record_id
            stored = {**row, "id": record_id}
            document[collection][str(record_id)] = stored
            self._commit(document)
            return dict(stored)

    def _put(self, collection: str, row: dict) -> None:
        with self._lock:
            document = self._draft(collection)
            document[collection][str(row["id"])] = dict(row)
            self._commit(document)

    def _remove(self, collection: str, record_id: int) -> dict | None:
        with self._lock:
            document = self._draft(collection)
            row = document[collection].pop(str(record_id), None)
            if row is not None:
                self._commit(document)
            return row

    def _draft(self, collection: str) -> dict[str, dict]:
        document = dict(self._document)
        document[collection] = dict(document[collection])
        document["sequences"] = dict(document["sequences"])
        return document

    def _commit(self, document: dict[str, dict]) -> None:
        # Memory only moves forward once the file on disk matches it.
        self._write(document)
        self._document = document

    def _load(self) -> dict[str, dict]:
        if not self.path.exists():
            return _empty_document()
        document = json.loads(self.path.read_text(encoding="utf-8"))
        empty = _empty_document()
        for name in COLLECTIONS:
            document.setdefault(name, {})
        document["sequences"] = {
            **empty["sequences"],
            **document.get("sequences", {}),
        }
        _logger.info("Loaded record store from %s", self.path)
        return document

    def _write(self, document: dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        handle, temp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as stream:
                json.dump(document, stream, ensure_ascii=False)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
