"""Pydantic request and response models for the HTTP API."""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from foodtopia.domain.meals import Meal, MealItem, NewMeal
from foodtopia.domain.models import Goals, NewUser, UserRecord
from foodtopia.domain.progress import DailyProgress, WeekSummary
from foodtopia.domain.workouts import (
    NewWorkout,
    Workout,
    parse_workout_details,
    parse_workout_type,
    workout_details_to_dict,
)
from foodtopia.services.rowing import RowingAuthority, RowingMetricsResolver


class ApiModel(BaseModel):
    """Base model with camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class GoalsBody(ApiModel):
    """Daily nutrition and training goals."""

    calories: float = 2000
    protein: float = 120
    carbs: float = 250
    fat: float = 65
    sugar: float = 50
    workout_minutes: float = 45

    def to_domain(self) -> Goals:
        """Return the goals as a domain value."""
        return Goals(**self.model_dump())


class UserCreate(ApiModel):
    """Registration payload."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    goals: GoalsBody = Field(default_factory=GoalsBody)

    def to_domain(self) -> NewUser:
        """Return the payload as a domain value."""
        return NewUser(self.username, self.password, self.goals.to_domain())


class UserOut(ApiModel):
    """User without credentials."""

    id: int
    username: str
    goals: GoalsBody

    @classmethod
    def from_domain(cls, user: UserRecord) -> "UserOut":
        """Build the response from a user record."""
        return cls(id=user.id, username=user.username, goals=asdict(user.goals))


class MealItemBody(ApiModel):
    """Meal line item."""

    name: str
    calories: float
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    sugar: float | None = None
    amount: float | None = None


class MealCreate(ApiModel):
    """Payload for logging a meal."""

    user_id: int
    title: str
    logged_at: datetime = Field(alias="date")
    time: str
    items: list[MealItemBody] = Field(default_factory=list)
    ingredient_quality: int = Field(default=4, ge=1, le=4)
    quality_notes: str | None = None

    def to_domain(self) -> NewMeal:
        """Return the payload as a domain value."""
        return NewMeal(
            user_id=self.user_id,
            title=self.title,
            logged_at=self.logged_at,
            time=self.time,
            items=tuple(MealItem(**item.model_dump()) for item in self.items),
            ingredient_quality=self.ingredient_quality,
            quality_notes=self.quality_notes,
        )


class MealOut(ApiModel):
    """Stored meal with derived totals."""

    id: int
    user_id: int
    title: str
    logged_at: datetime = Field(alias="date")
    time: str
    items: list[MealItemBody]
    total_calories: float
    total_protein: float
    ingredient_quality: int
    quality_notes: str | None = None

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        """Build the response from a meal."""
        return cls(
            id=meal.id,
            user_id=meal.user_id,
            title=meal.title,
            logged_at=meal.logged_at,
            time=meal.time,
            items=[asdict(item) for item in meal.items],
            total_calories=meal.total_calories,
            total_protein=meal.total_protein,
            ingredient_quality=meal.ingredient_quality,
            quality_notes=meal.quality_notes,
        )


class WorkoutCreate(ApiModel):
    """Payload for logging a workout."""

    user_id: int
    title: str
    logged_at: datetime = Field(alias="date")
    start_time: str = ""
    end_time: str = ""
    calories_burned: float
    duration_minutes: float
    type: str
    details: dict[str, Any] = Field(default_factory=dict)

    def to_domain(self) -> NewWorkout:
        """Return the payload as a domain value.

        Raises:
            InvalidWorkoutDetailsError: Unknown type or details key.
        """
        workout_type = parse_workout_type(self.type)
        return NewWorkout(
            user_id=self.user_id,
            title=self.title,
            logged_at=self.logged_at,
            start_time=self.start_time,
            end_time=self.end_time,
            calories_burned=self.calories_burned,
            duration_minutes=self.duration_minutes,
            details=parse_workout_details(workout_type, self.details),
        )


class WorkoutOut(ApiModel):
    """Stored workout."""

    id: int
    user_id: int
    title: str
    logged_at: datetime = Field(alias="date")
    start_time: str
    end_time: str
    calories_burned: float
    duration_minutes: float
    type: str
    details: dict[str, Any]

    @classmethod
    def from_domain(cls, workout: Workout) -> "WorkoutOut":
        """Build the response from a workout."""
        return cls(
            id=workout.id,
            user_id=workout.user_id,
            title=workout.title,
            logged_at=workout.logged_at,
            start_time=workout.start_time,
            end_time=workout.end_time,
            calories_burned=workout.calories_burned,
            duration_minutes=workout.duration_minutes,
            type=workout.type.value,
            details=workout_details_to_dict(workout.details),
        )


class DailyProgressOut(ApiModel):
    """Aggregated totals for one day."""

    id: int | None = None
    user_id: int
    day: date = Field(alias="date")
    calories_consumed: float
    protein_consumed: float
    carbs_consumed: float
    fat_consumed: float
    sugar_consumed: float
    workout_minutes: float
    calories_burned: float
    rowing_meters: float

    @classmethod
    def from_domain(cls, progress: DailyProgress) -> "DailyProgressOut":
        """Build the response from a progress row."""
        return cls.model_validate(progress)


class WeekSummaryOut(ApiModel):
    """Seven days of progress with totals."""

    start: date
    daily: list[DailyProgressOut]
    total_calories_consumed: float
    total_calories_burned: float
    total_workout_minutes: float
    total_rowing_meters: float
    avg_calories_consumed: float
    avg_protein_consumed: float

    @classmethod
    def from_domain(cls, summary: WeekSummary) -> "WeekSummaryOut":
        """Build the response from a week summary."""
        return cls.model_validate(summary)


class FoodItemOut(ApiModel):
    """Food catalog entry."""

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float
    ingredient_quality: int
    quality_notes: str | None = None


class ExerciseOut(ApiModel):
    """Exercise template."""

    id: int
    name: str
    type: str
    calories_per_minute: float
    intensity: str
    duration_minutes: float
    instructions: str | None = None


class FoodSuggestionOut(ApiModel):
    """Food suggestion."""

    id: int
    name: str
    description: str
    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float
    ingredient_quality: int
    meal_type: str
    ingredients: str
    image: str | None = None


class WorkoutSuggestionOut(ApiModel):
    """Workout suggestion."""

    id: int
    title: str
    description: str
    duration_minutes: float
    intensity: str
    type: str
    calories_burned: float
    instructions: str | None = None
    exercises: str


class RowingResolveRequest(ApiModel):
    """Rowing fields as currently entered in a form."""

    duration_minutes: float | None = None
    rowing_meters: float | None = None
    rowing_split: str | None = None
    authority: RowingAuthority | None = None

    def to_resolver(self) -> RowingMetricsResolver:
        """Return a resolver seeded with the request fields."""
        return RowingMetricsResolver(
            duration_minutes=self.duration_minutes,
            rowing_meters=self.rowing_meters,
            rowing_split=self.rowing_split,
            authority=self.authority,
        )


class RowingResolveOut(ApiModel):
    """Rowing fields after the derived one is recomputed."""

    duration_minutes: float | None = None
    rowing_meters: float | None = None
    rowing_split: str | None = None
    authority: RowingAuthority | None = None
