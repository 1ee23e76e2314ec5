"""HTTP endpoints for users, logs, progress and catalogs."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from foodtopia.api.models import (
    DailyProgressOut,
    ExerciseOut,
    FoodItemOut,
    FoodSuggestionOut,
    GoalsBody,
    MealCreate,
    MealOut,
    RowingResolveOut,
    RowingResolveRequest,
    UserCreate,
    UserOut,
    WeekSummaryOut,
    WorkoutCreate,
    WorkoutOut,
    WorkoutSuggestionOut,
)

if TYPE_CHECKING:
    from foodtopia.containers import AppContainer

router = APIRouter(prefix="/api")


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _today() -> date:
    return datetime.now(UTC).date()


def _not_found(kind: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} not found"
    )


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, request: Request) -> UserOut:
    """Register a user."""
    user = _container(request).user_service.register(body.to_domain())
    return UserOut.from_domain(user)


@router.get("/users/{user_id}")
async def get_user(user_id: int, request: Request) -> UserOut:
    """Return a user."""
    user = _container(request).user_service.get_user(user_id)
    if user is None:
        raise _not_found("User")
    return UserOut.from_domain(user)


@router.patch("/users/{user_id}/goals")
async def update_goals(user_id: int, body: GoalsBody, request: Request) -> UserOut:
    """Replace a user's daily goals."""
    user = _container(request).user_service.update_goals(user_id, body.to_domain())
    if user is None:
        raise _not_found("User")
    return UserOut.from_domain(user)


@router.get("/meals")
async def list_meals(
    request: Request,
    user_id: int = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> list[MealOut]:
    """Return a user's meals, optionally for one day."""
    service = _container(request).meal_service
    meals = (
        service.list_meals(user_id)
        if day is None
        else service.get_meals_by_date(user_id, day)
    )
    return [MealOut.from_domain(meal) for meal in meals]


@router.get("/meals/{meal_id}")
async def get_meal(meal_id: int, request: Request) -> MealOut:
    """Return a meal."""
    meal = _container(request).meal_service.get_meal(meal_id)
    if meal is None:
        raise _not_found("Meal")
    return MealOut.from_domain(meal)


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(body: MealCreate, request: Request) -> MealOut:
    """Log a meal and refresh the day's progress."""
    meal = _container(request).meal_service.create_meal(body.to_domain())
    return MealOut.from_domain(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(meal_id: int, request: Request) -> Response:
    """Delete a meal and refresh the day's progress."""
    if not _container(request).meal_service.delete_meal(meal_id):
        raise _not_found("Meal")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/workouts")
async def list_workouts(
    request: Request,
    user_id: int = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> list[WorkoutOut]:
    """Return a user's workouts, optionally for one day."""
    service = _container(request).workout_service
    workouts = (
        service.list_workouts(user_id)
        if day is None
        else service.get_workouts_by_date(user_id, day)
    )
    return [WorkoutOut.from_domain(workout) for workout in workouts]


@router.get("/workouts/{workout_id}")
async def get_workout(workout_id: int, request: Request) -> WorkoutOut:
    """Return a workout."""
    workout = _container(request).workout_service.get_workout(workout_id)
    if workout is None:
        raise _not_found("Workout")
    return WorkoutOut.from_domain(workout)


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def create_workout(body: WorkoutCreate, request: Request) -> WorkoutOut:
    """Log a workout and refresh the day's progress."""
    workout = _container(request).workout_service.create_workout(body.to_domain())
    return WorkoutOut.from_domain(workout)


@router.delete("/workouts/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(workout_id: int, request: Request) -> Response:
    """Delete a workout and refresh the day's progress."""
    if not _container(request).workout_service.delete_workout(workout_id):
        raise _not_found("Workout")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/daily-progress")
async def daily_progress(
    request: Request,
    user_id: int = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> DailyProgressOut:
    """Return the day's totals; days without events read as zero."""
    progress = _container(request).progress_service.get_daily_progress(
        user_id, day or _today()
    )
    return DailyProgressOut.from_domain(progress)


@router.get("/weekly-progress")
async def weekly_progress(
    request: Request,
    user_id: int = Query(alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> WeekSummaryOut:
    """Return the Monday-based week containing the date."""
    summary = _container(request).progress_service.get_week(user_id, day or _today())
    return WeekSummaryOut.from_domain(summary)


@router.get("/food-items")
async def list_food_items(request: Request) -> list[FoodItemOut]:
    """Return the food catalog."""
    items = _container(request).catalog_service.list_food_items()
    return [FoodItemOut.model_validate(item) for item in items]


@router.get("/exercises")
async def list_exercises(request: Request) -> list[ExerciseOut]:
    """Return exercise templates."""
    exercises = _container(request).catalog_service.list_exercises()
    return [ExerciseOut.model_validate(exercise) for exercise in exercises]


@router.get("/food-suggestions")
async def list_food_suggestions(request: Request) -> list[FoodSuggestionOut]:
    """Return food suggestions."""
    suggestions = _container(request).catalog_service.list_food_suggestions()
    return [FoodSuggestionOut.model_validate(item) for item in suggestions]


@router.get("/workout-suggestions")
async def list_workout_suggestions(request: Request) -> list[WorkoutSuggestionOut]:
    """Return workout suggestions."""
    suggestions = _container(request).catalog_service.list_workout_suggestions()
    return [WorkoutSuggestionOut.model_validate(item) for item in suggestions]


@router.post("/rowing/resolve")
async def resolve_rowing(body: RowingResolveRequest) -> RowingResolveOut:
    """Derive the non-authoritative rowing field from the others."""
    resolver = body.to_resolver()
    return RowingResolveOut(
        duration_minutes=resolver.duration_minutes,
        rowing_meters=resolver.rowing_meters,
        rowing_split=resolver.rowing_split,
        authority=resolver.authority,
    )
