"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MealItem:
    """Line item of a meal with its macros."""

    name: str
    calories: float
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    sugar: float | None = None
    amount: float | None = None


@dataclass(frozen=True)
class NewMeal:
    """Payload for logging a meal.

    Meal totals are derived from the items, so they cannot drift from the
    line items they summarize.
    """

    user_id: int
    title: str
    logged_at: datetime
    time: str
    items: tuple[MealItem, ...]
    ingredient_quality: int
    quality_notes: str | None = None

    @property
    def total_calories(self) -> float:
        """Sum of item calories."""
        return sum((item.calories for item in self.items), 0.0)

    @property
    def total_protein(self) -> float:
        """Sum of item protein, absent values counting as zero."""
        return sum((item.protein or 0.0 for item in self.items), 0.0)


@dataclass(frozen=True, kw_only=True)
class Meal(NewMeal):
    """Meal stored for a user."""

    id: int
