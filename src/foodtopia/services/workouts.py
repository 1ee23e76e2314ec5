"""Workout logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol

from foodtopia.domain.progress import as_utc, day_bucket
from foodtopia.domain.workouts import NewWorkout, RowingDetails, Workout
from foodtopia.services.progress import ProgressService, workout_effort
from foodtopia.services.rowing import complete_rowing_details

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Return all workouts for a user."""

    def list_workouts_by_day(self, user_id: int, day: date) -> list[Workout]:
        """Return a user's workouts logged on a day."""

    def get_workout(self, workout_id: int) -> Workout | None:
        """Return a workout by id, if present."""

    def insert_workout(self, payload: NewWorkout) -> Workout:
        """Store a workout under a new id and return it."""

    def remove_workout(self, workout_id: int) -> Workout | None:
        """Delete a workout and return it, or return None if it does not exist."""


@dataclass
class WorkoutService:
    """Service that persists workouts and keeps daily progress in step."""

    repository: WorkoutRepository
    progress_service: ProgressService

    def create_workout(self, payload: NewWorkout) -> Workout:
        """Store a workout and refresh its day's progress.

        Rowing workouts that carry only a distance or only a split get the
        other field derived from the duration before they are stored.
        """
        workout_effort(payload)
        details = payload.details
        if isinstance(details, RowingDetails):
            details = complete_rowing_details(details, payload.duration_minutes)
        normalized = replace(
            payload, logged_at=as_utc(payload.logged_at), details=details
        )
        workout = self.repository.insert_workout(normalized)
        _logger.info(
            "Workout created: id=%s user_id=%s type=%s minutes=%s",
            workout.id,
            workout.user_id,
            workout.type.value,
            workout.duration_minutes,
        )
        self.progress_service.rebuild_day(workout.user_id, workout.logged_at)
        return workout

    def delete_workout(self, workout_id: int) -> bool:
        """Delete a workout; return False when it does not exist."""
        workout = self.repository.remove_workout(workout_id)
        if workout is None:
            return False
        _logger.info(
            "Workout deleted: id=%s user_id=%s", workout.id, workout.user_id
        )
        self.progress_service.rebuild_day(workout.user_id, workout.logged_at)
        return True

    def get_workout(self, workout_id: int) -> Workout | None:
        """Return a workout by id."""
        return self.repository.get_workout(workout_id)

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Return all workouts for a user."""
        return self.repository.list_workouts(user_id)

    def get_workouts_by_date(
        self, user_id: int, day: date | datetime
    ) -> list[Workout]:
        """Return a user's workouts for the day containing ``day``."""
        return self.repository.list_workouts_by_day(user_id, day_bucket(day))
