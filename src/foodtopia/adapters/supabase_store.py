"""Supabase (Postgres) record store."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

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
from foodtopia.domain.progress import DailyProgress, day_bounds
from foodtopia.domain.workouts import NewWorkout, Workout
from foodtopia.services.store import RecordStore


@dataclass
class SupabaseRecordStore(RecordStore):
    """Relational store over Supabase tables with serial ids.

    `daily_progress` needs a unique key on `(user_id, date)` so that
    progress upserts from separate workers land on one row.
    """

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        row = self._select_one("users", "id", user_id)
        return user_from_row(row) if row else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the user with a username."""
        row = self._select_one("users", "username", username)
        return user_from_row(row) if row else None

    def create_user(self, payload: NewUser) -> UserRecord:
        """Create a users row."""
        return user_from_row(self._insert("users", user_to_row(payload)))

    def update_user_goals(self, user_id: int, goals: Goals) -> UserRecord | None:
        """Update the goal columns of a users row."""
        response = (
            self.client.table("users")
            .update(goals_to_row(goals))
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return user_from_row(response.data[0])

    def list_food_items(self) -> list[FoodItem]:
        """Return all food items."""
        rows = self._select_all("food_items")
        return [record_from_row(FoodItem, row) for row in rows]

    def get_food_item(self, food_item_id: int) -> FoodItem | None:
        """Return a food item by id."""
        row = self._select_one("food_items", "id", food_item_id)
        return record_from_row(FoodItem, row) if row else None

    def create_food_item(self, payload: NewFoodItem) -> FoodItem:
        """Create a food_items row."""
        row = self._insert("food_items", payload_to_row(payload))
        return record_from_row(FoodItem, row)

    def list_exercises(self) -> list[Exercise]:
        """Return all exercise templates."""
        return [record_from_row(Exercise, row) for row in self._select_all("exercises")]

    def get_exercise(self, exercise_id: int) -> Exercise | None:
        """Return an exercise template by id."""
        row = self._select_one("exercises", "id", exercise_id)
        return record_from_row(Exercise, row) if row else None

    def create_exercise(self, payload: NewExercise) -> Exercise:
        """Create an exercises row."""
        row = self._insert("exercises", payload_to_row(payload))
        return record_from_row(Exercise, row)

    def list_food_suggestions(self) -> list[FoodSuggestion]:
        """Return food suggestions."""
        return [
            record_from_row(FoodSuggestion, row)
            for row in self._select_all("food_suggestions")
        ]

    def create_food_suggestion(self, payload: NewFoodSuggestion) -> FoodSuggestion:
        """Create a food_suggestions row."""
        row = self._insert("food_suggestions", payload_to_row(payload))
        return record_from_row(FoodSuggestion, row)

    def list_workout_suggestions(self) -> list[WorkoutSuggestion]:
        """Return workout suggestions."""
        return [
            record_from_row(WorkoutSuggestion, row)
            for row in self._select_all("workout_suggestions")
        ]

    def create_workout_suggestion(
        self, payload: NewWorkoutSuggestion
    ) -> WorkoutSuggestion:
        """Create a workout_suggestions row."""
        row = self._insert("workout_suggestions", payload_to_row(payload))
        return record_from_row(WorkoutSuggestion, row)

    def list_meals(self, user_id: int) -> list[Meal]:
        """Return all meals for a user."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [meal_from_row(row) for row in response.data or []]

    def list_meals_by_day(self, user_id: int, day: date) -> list[Meal]:
        """Return a user's meals logged within the UTC day."""
        return [meal_from_row(row) for row in self._select_day("meals", user_id, day)]

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id."""
        row = self._select_one("meals", "id", meal_id)
        return meal_from_row(row) if row else None

    def insert_meal(self, payload: NewMeal) -> Meal:
        """Create a meals row."""
        return meal_from_row(self._insert("meals", meal_to_row(payload)))

    def remove_meal(self, meal_id: int) -> Meal | None:
        """Delete a meals row and return the deleted meal."""
        row = self._delete("meals", meal_id)
        return meal_from_row(row) if row else None

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Return all workouts for a user."""
        response = (
            self.client.table("workouts")
            .select("*")
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [workout_from_row(row) for row in response.data or []]

    def list_workouts_by_day(self, user_id: int, day: date) -> list[Workout]:
        """Return a user's workouts logged within the UTC day."""
        return [
            workout_from_row(row)
            for row in self._select_day("workouts", user_id, day)
        ]

    def get_workout(self, workout_id: int) -> Workout | None:
        """Return a workout by id."""
        row = self._select_one("workouts", "id", workout_id)
        return workout_from_row(row) if row else None

    def insert_workout(self, payload: NewWorkout) -> Workout:
        """Create a workouts row."""
        return workout_from_row(self._insert("workouts", workout_to_row(payload)))

    def remove_workout(self, workout_id: int) -> Workout | None:
        """Delete a workouts row and return the deleted workout."""
        row = self._delete("workouts", workout_id)
        return workout_from_row(row) if row else None

    def get_daily_progress(self, user_id: int, day: date) -> DailyProgress | None:
        """Return the daily_progress row for a day."""
        response = (
            self.client.table("daily_progress")
            .select("*")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return progress_from_row(response.data[0])

    def save_daily_progress(self, progress: DailyProgress) -> DailyProgress:
        """Insert or update the day's row in one upsert on ``(user_id, date)``."""
        response = (
            self.client.table("daily_progress")
            .upsert(progress_to_row(progress), on_conflict="user_id,date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert daily progress")
        return progress_from_row(response.data[0])

    def list_daily_progress(
        self, user_id: int, start: date, end: date
    ) -> list[DailyProgress]:
        """Return stored rows with ``start <= day < end``."""
        response = (
            self.client.table("daily_progress")
            .select("*")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [progress_from_row(row) for row in response.data or []]

    def _select_one(
        self, table: str, column: str, value: object
    ) -> dict[str, object] | None:
        response = (
            self.client.table(table).select("*").eq(column, value).limit(1).execute()
        )
        if not response.data:
            return None
        return response.data[0]

    def _select_all(self, table: str) -> list[dict[str, object]]:
        response = (
            self.client.table(table).select("*").order("id", desc=False).execute()
        )
        return response.data or []

    def _select_day(
        self, table: str, user_id: int, day: date
    ) -> list[dict[str, object]]:
        start, end = day_bounds(day)
        response = (
            self.client.table(table)
            .select("*")
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("id", desc=False)
            .execute()
        )
        return response.data or []

    def _insert(self, table: str, row: dict[str, object]) -> dict[str, object]:
        response = self.client.table(table).insert(row).execute()
        if not response.data:
            raise RuntimeError(f"Failed to insert into {table}")
        return response.data[0]

    def _delete(self, table: str, record_id: int) -> dict[str, object] | None:
        # Only the caller whose delete actually removed the row gets it back.
        response = self.client.table(table).delete().eq("id", record_id).execute()
        if not response.data:
            return None
        return response.data[0]
