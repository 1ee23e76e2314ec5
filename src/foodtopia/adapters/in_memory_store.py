"""In-memory record store."""

from collections.abc import Iterator
from dataclasses import dataclass, field, fields, replace
from datetime import date
from itertools import count
from typing import TypeVar

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

RecordT = TypeVar("RecordT")


def _with_id(record_type: type[RecordT], record_id: int, payload: object) -> RecordT:
    values = {
        item.name: getattr(payload, item.name)
        for item in fields(payload)
        if item.name != "id"
    }
    return record_type(id=record_id, **values)


@dataclass
class InMemoryRecordStore(RecordStore):
    """Map-backed store; state lives as long as the instance."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    food_items: dict[int, FoodItem] = field(default_factory=dict)
    exercises: dict[int, Exercise] = field(default_factory=dict)
    meals: dict[int, Meal] = field(default_factory=dict)
    workouts: dict[int, Workout] = field(default_factory=dict)
    daily_progress: dict[tuple[int, date], DailyProgress] = field(
        default_factory=dict
    )
    food_suggestions: dict[int, FoodSuggestion] = field(default_factory=dict)
    workout_suggestions: dict[int, WorkoutSuggestion] = field(default_factory=dict)
    _ids: dict[str, Iterator[int]] = field(default_factory=dict, repr=False)

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the user with a username."""
        for user in list(self.users.values()):
            if user.username == username:
                return user
        return None

    def create_user(self, payload: NewUser) -> UserRecord:
        """Create a user."""
        user = _with_id(UserRecord, self._next_id("users"), payload)
        self.users[user.id] = user
        return user

    def update_user_goals(self, user_id: int, goals: Goals) -> UserRecord | None:
        """Replace a user's goals."""
        current = self.users.get(user_id)
        if current is None:
            return None
        updated = replace(current, goals=goals)
        self.users[user_id] = updated
        return updated

    def list_food_items(self) -> list[FoodItem]:
        """Return all food items."""
        return list(self.food_items.values())

    def get_food_item(self, food_item_id: int) -> FoodItem | None:
        """Return a food item by id."""
        return self.food_items.get(food_item_id)

    def create_food_item(self, payload: NewFoodItem) -> FoodItem:
        """Create a food item."""
        item = _with_id(FoodItem, self._next_id("food_items"), payload)
        self.food_items[item.id] = item
        return item

    def list_exercises(self) -> list[Exercise]:
        """Return all exercise templates."""
        return list(self.exercises.values())

    def get_exercise(self, exercise_id: int) -> Exercise | None:
        """Return an exercise template by id."""
        return self.exercises.get(exercise_id)

    def create_exercise(self, payload: NewExercise) -> Exercise:
        """Create an exercise template."""
        exercise = _with_id(Exercise, self._next_id("exercises"), payload)
        self.exercises[exercise.id] = exercise
        return exercise

    def list_food_suggestions(self) -> list[FoodSuggestion]:
        """Return food suggestions."""
        return list(self.food_suggestions.values())

    def create_food_suggestion(self, payload: NewFoodSuggestion) -> FoodSuggestion:
        """Create a food suggestion."""
        suggestion = _with_id(
            FoodSuggestion, self._next_id("food_suggestions"), payload
        )
        self.food_suggestions[suggestion.id] = suggestion
        return suggestion

    def list_workout_suggestions(self) -> list[WorkoutSuggestion]:
        """Return workout suggestions."""
        return list(self.workout_suggestions.values())

    def create_workout_suggestion(
        self, payload: NewWorkoutSuggestion
    ) -> WorkoutSuggestion:
        """Create a workout suggestion."""
        suggestion = _with_id(
            WorkoutSuggestion, self._next_id("workout_suggestions"), payload
        )
        self.workout_suggestions[suggestion.id] = suggestion
        return suggestion

    def list_meals(self, user_id: int) -> list[Meal]:
        """Return all meals for a user."""
        return [
            meal for meal in list(self.meals.values()) if meal.user_id == user_id
        ]

    def list_meals_by_day(self, user_id: int, day: date) -> list[Meal]:
        """Return a user's meals logged on a day."""
        return [
            meal
            for meal in list(self.meals.values())
            if meal.user_id == user_id and day_bucket(meal.logged_at) == day
        ]

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id."""
        return self.meals.get(meal_id)

    def insert_meal(self, payload: NewMeal) -> Meal:
        """Store a meal under a new id."""
        meal = _with_id(Meal, self._next_id("meals"), payload)
        self.meals[meal.id] = meal
        return meal

    def remove_meal(self, meal_id: int) -> Meal | None:
        """Delete a meal and return it."""
        return self.meals.pop(meal_id, None)

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Return all workouts for a user."""
        return [
            workout
            for workout in list(self.workouts.values())
            if workout.user_id == user_id
        ]

    def list_workouts_by_day(self, user_id: int, day: date) -> list[Workout]:
        """Return a user's workouts logged on a day."""
        return [
            workout
            for workout in list(self.workouts.values())
            if workout.user_id == user_id and day_bucket(workout.logged_at) == day
        ]

    def get_workout(self, workout_id: int) -> Workout | None:
        """Return a workout by id."""
        return self.workouts.get(workout_id)

    def insert_workout(self, payload: NewWorkout) -> Workout:
        """Store a workout under a new id."""
        workout = _with_id(Workout, self._next_id("workouts"), payload)
        self.workouts[workout.id] = workout
        return workout

    def remove_workout(self, workout_id: int) -> Workout | None:
        """Delete a workout and return it."""
        return self.workouts.pop(workout_id, None)

    def get_daily_progress(self, user_id: int, day: date) -> DailyProgress | None:
        """Return the stored row for a day."""
        return self.daily_progress.get((user_id, day))

    def save_daily_progress(self, progress: DailyProgress) -> DailyProgress:
        """Insert or replace the row for a day."""
        key = (progress.user_id, progress.day)
        existing = self.daily_progress.get(key)
        progress_id = existing.id if existing else self._next_id("daily_progress")
        saved = replace(progress, id=progress_id)
        self.daily_progress[key] = saved
        return saved

    def list_daily_progress(
        self, user_id: int, start: date, end: date
    ) -> list[DailyProgress]:
        """Return stored rows with ``start <= day < end``."""
        rows = [
            row
            for (owner, day), row in list(self.daily_progress.items())
            if owner == user_id and start <= day < end
        ]
        return sorted(rows, key=lambda row: row.day)

    def _next_id(self, collection: str) -> int:
        return next(self._ids.setdefault(collection, count(1)))
