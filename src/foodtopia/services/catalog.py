"""Services for the read-mostly catalogs."""

from dataclasses import dataclass
from typing import Protocol

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


class CatalogRepository(Protocol):
    """Persistence interface for food items, exercises and suggestions."""

    def list_food_items(self) -> list[FoodItem]:
        """Return all food items."""

    def get_food_item(self, food_item_id: int) -> FoodItem | None:
        """Return a food item by id, if present."""

    def create_food_item(self, payload: NewFoodItem) -> FoodItem:
        """Create a food item and return it."""

    def list_exercises(self) -> list[Exercise]:
        """Return all exercise templates."""

    def get_exercise(self, exercise_id: int) -> Exercise | None:
        """Return an exercise template by id, if present."""

    def create_exercise(self, payload: NewExercise) -> Exercise:
        """Create an exercise template and return it."""

    def list_food_suggestions(self) -> list[FoodSuggestion]:
        """Return all food suggestions."""

    def create_food_suggestion(self, payload: NewFoodSuggestion) -> FoodSuggestion:
        """Create a food suggestion and return it."""

    def list_workout_suggestions(self) -> list[WorkoutSuggestion]:
        """Return all workout suggestions."""

    def create_workout_suggestion(
        self, payload: NewWorkoutSuggestion
    ) -> WorkoutSuggestion:
        """Create a workout suggestion and return it."""


@dataclass
class CatalogService:
    """Application service for catalog lookups."""

    repository: CatalogRepository

    def list_food_items(self) -> list[FoodItem]:
        """Return all food items."""
        return self.repository.list_food_items()

    def get_food_item(self, food_item_id: int) -> FoodItem | None:
        """Return a food item by id."""
        return self.repository.get_food_item(food_item_id)

    def add_food_item(self, payload: NewFoodItem) -> FoodItem:
        """Add a food item to the catalog."""
        return self.repository.create_food_item(payload)

    def list_exercises(self) -> list[Exercise]:
        """Return all exercise templates."""
        return self.repository.list_exercises()

    def get_exercise(self, exercise_id: int) -> Exercise | None:
        """Return an exercise template by id."""
        return self.repository.get_exercise(exercise_id)

    def add_exercise(self, payload: NewExercise) -> Exercise:
        """Add an exercise template."""
        return self.repository.create_exercise(payload)

    def list_food_suggestions(self) -> list[FoodSuggestion]:
        """Return food suggestions."""
        return self.repository.list_food_suggestions()

    def add_food_suggestion(self, payload: NewFoodSuggestion) -> FoodSuggestion:
        """Add a food suggestion."""
        return self.repository.create_food_suggestion(payload)

    def list_workout_suggestions(self) -> list[WorkoutSuggestion]:
        """Return workout suggestions."""
        return self.repository.list_workout_suggestions()

    def add_workout_suggestion(
        self, payload: NewWorkoutSuggestion
    ) -> WorkoutSuggestion:
        """Add a workout suggestion."""
        return self.repository.create_workout_suggestion(payload)

    @staticmethod
    def exercise_calories(exercise: Exercise, duration_minutes: float) -> float:
        """Estimate calories burned doing an exercise for a duration."""
        return exercise.calories_per_minute * duration_minutes
