"""The full storage contract every backend implements."""

from typing import Protocol

from foodtopia.services.catalog import CatalogRepository
from foodtopia.services.meals import MealRepository
from foodtopia.services.progress import ProgressRepository
from foodtopia.services.users import UserRepository
from foodtopia.services.workouts import WorkoutRepository


class RecordStore(
    UserRepository,
    CatalogRepository,
    MealRepository,
    WorkoutRepository,
    ProgressRepository,
    Protocol,
):
    """Typed CRUD surface shared by the in-memory, relational and file stores.

    Lookups return ``None`` for a miss. Ids are allocated per entity kind,
    strictly increase, and are never reused. Day filters use the UTC day of
    a record's ``logged_at``.
    """
