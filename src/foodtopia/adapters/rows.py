"""Conversions between domain records and storage rows.

The relational and file-backed stores share these so a row written by one
has the same columns as a row written by the other.
"""

from dataclasses import asdict, fields
from datetime import date, datetime
from typing import TypeVar

from foodtopia.domain.meals import Meal, MealItem, NewMeal
from foodtopia.domain.models import Goals, NewUser, UserRecord
from foodtopia.domain.progress import DailyProgress, as_utc
from foodtopia.domain.workouts import (
    NewWorkout,
    Workout,
    parse_workout_details,
    workout_details_to_dict,
)

RecordT = TypeVar("RecordT")

_GOAL_COLUMNS = {
    "calories": "calorie_goal",
    "protein": "protein_goal",
    "carbs": "carbs_goal",
    "fat": "fat_goal",
    "sugar": "sugar_goal",
    "workout_minutes": "workout_goal",
}
_ITEM_FIELDS = {item.name for item in fields(MealItem)}
_PROGRESS_COUNTERS = (
    "calories_consumed",
    "protein_consumed",
    "carbs_consumed",
    "fat_consumed",
    "sugar_consumed",
    "workout_minutes",
    "calories_burned",
    "rowing_meters",
)


def goals_to_row(goals: Goals) -> dict[str, object]:
    """Return goal columns for a users row."""
    return {column: getattr(goals, name) for name, column in _GOAL_COLUMNS.items()}


def user_to_row(payload: NewUser) -> dict[str, object]:
    """Return a users row for a new user."""
    return {
        "username": payload.username,
        "password": payload.password,
        **goals_to_row(payload.goals),
    }


def user_from_row(row: dict[str, object]) -> UserRecord:
    """Build a user record from a users row."""
    goals = Goals(
        **{
            name: row[column]
            for name, column in _GOAL_COLUMNS.items()
            if row.get(column) is not None
        }
    )
    return UserRecord(
        id=int(row["id"]),
        username=str(row["username"]),
        password=str(row.get("password", "")),
        goals=goals,
    )


def payload_to_row(payload: object) -> dict[str, object]:
    """Return a row for a flat catalog payload; columns match field names."""
    row = asdict(payload)
    row.pop("id", None)
    return row


def record_from_row(record_type: type[RecordT], row: dict[str, object]) -> RecordT:
    """Build a flat catalog record from a row, ignoring unknown columns."""
    names = {item.name for item in fields(record_type)}
    return record_type(**{key: value for key, value in row.items() if key in names})


def meal_to_row(payload: NewMeal) -> dict[str, object]:
    """Return a meals row for a meal payload."""
    return {
        "user_id": payload.user_id,
        "title": payload.title,
        "logged_at": _format_moment(payload.logged_at),
        "time": payload.time,
        "items": [_item_to_dict(item) for item in payload.items],
        "total_calories": payload.total_calories,
        "total_protein": payload.total_protein,
        "ingredient_quality": payload.ingredient_quality,
        "quality_notes": payload.quality_notes,
    }


def meal_from_row(row: dict[str, object]) -> Meal:
    """Build a meal from a meals row."""
    raw_items = row.get("items") or []
    items = tuple(
        MealItem(**{key: value for key, value in item.items() if key in _ITEM_FIELDS})
        for item in raw_items
    )
    return Meal(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        title=str(row.get("title", "")),
        logged_at=_parse_moment(row["logged_at"]),
        time=str(row.get("time", "")),
        items=items,
        ingredient_quality=int(row.get("ingredient_quality", 0)),
        quality_notes=row.get("quality_notes"),
    )


def workout_to_row(payload: NewWorkout) -> dict[str, object]:
    """Return a workouts row for a workout payload."""
    return {
        "user_id": payload.user_id,
        "title": payload.title,
        "logged_at": _format_moment(payload.logged_at),
        "start_time": payload.start_time,
        "end_time": payload.end_time,
        "calories_burned": payload.calories_burned,
        "duration_minutes": payload.duration_minutes,
        "type": payload.type.value,
        "details": workout_details_to_dict(payload.details),
    }


def workout_from_row(row: dict[str, object]) -> Workout:
    """Build a workout from a workouts row."""
    return Workout(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        title=str(row.get("title", "")),
        logged_at=_parse_moment(row["logged_at"]),
        start_time=str(row.get("start_time", "")),
        end_time=str(row.get("end_time", "")),
        calories_burned=row["calories_burned"],
        duration_minutes=row["duration_minutes"],
        details=parse_workout_details(str(row["type"]), row.get("details") or {}),
    )


def progress_to_row(progress: DailyProgress) -> dict[str, object]:
    """Return a daily_progress row, without the id column."""
    row: dict[str, object] = {
        "user_id": progress.user_id,
        "date": progress.day.isoformat(),
    }
    for name in _PROGRESS_COUNTERS:
        row[name] = getattr(progress, name)
    return row


def progress_from_row(row: dict[str, object]) -> DailyProgress:
    """Build a progress record from a daily_progress row."""
    counters = {name: float(row.get(name) or 0.0) for name in _PROGRESS_COUNTERS}
    return DailyProgress(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        day=_parse_day(row["date"]),
        **counters,
    )


def _item_to_dict(item: MealItem) -> dict[str, object]:
    return {key: value for key, value in asdict(item).items() if value is not None}


def _format_moment(moment: datetime) -> str:
    return as_utc(moment).isoformat()


def _parse_moment(raw: object) -> datetime:
    if isinstance(raw, datetime):
        return as_utc(raw)
    return as_utc(datetime.fromisoformat(str(raw)))


def _parse_day(raw: object) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])
