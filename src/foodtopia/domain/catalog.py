"""Catalog entities: food items, exercise templates and suggestions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewFoodItem:
    """Payload for a food catalog entry."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float
    ingredient_quality: int
    quality_notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class FoodItem(NewFoodItem):
    """Food catalog entry with nutrition per serving."""

    id: int


@dataclass(frozen=True)
class NewExercise:
    """Payload for an exercise template."""

    name: str
    type: str
    calories_per_minute: float
    intensity: str
    duration_minutes: float
    instructions: str | None = None


@dataclass(frozen=True, kw_only=True)
class Exercise(NewExercise):
    """Exercise template used to prefill workouts."""

    id: int


@dataclass(frozen=True)
class NewFoodSuggestion:
    """Payload for a food suggestion."""

    name: str
    description: str
    calories: float
    protein: float
    meal_type: str
    ingredients: str
    carbs: float = 0
    fat: float = 0
    sugar: float = 0
    ingredient_quality: int = 4
    image: str | None = None


@dataclass(frozen=True, kw_only=True)
class FoodSuggestion(NewFoodSuggestion):
    """Static food suggestion."""

    id: int


@dataclass(frozen=True)
class NewWorkoutSuggestion:
    """Payload for a workout suggestion."""

    title: str
    description: str
    intensity: str
    exercises: str
    duration_minutes: float = 30
    type: str = "Workout"
    calories_burned: float = 200
    instructions: str | None = None


@dataclass(frozen=True, kw_only=True)
class WorkoutSuggestion(NewWorkoutSuggestion):
    """Static workout suggestion."""

    id: int
