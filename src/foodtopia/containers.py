"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from foodtopia.adapters.in_memory_store import InMemoryRecordStore
from foodtopia.adapters.json_file_store import JsonFileRecordStore
from foodtopia.adapters.supabase_store import SupabaseRecordStore
from foodtopia.config import Settings
from foodtopia.services.catalog import CatalogService
from foodtopia.services.meals import MealService
from foodtopia.services.progress import ProgressService
from foodtopia.services.store import RecordStore
from foodtopia.services.users import UserService
from foodtopia.services.workouts import WorkoutService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: RecordStore
    user_service: UserService
    catalog_service: CatalogService
    progress_service: ProgressService
    meal_service: MealService
    workout_service: WorkoutService


def build_store(settings: Settings) -> RecordStore:
    """Create the record store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordStore(client)
    if settings.storage_backend == "json":
        return JsonFileRecordStore(settings.data_file)
    return InMemoryRecordStore()


def build_container(
    settings: Settings | None = None, store: RecordStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store if store is not None else build_store(resolved_settings)
    _logger.info("Using %s record store", type(resolved_store).__name__)
    progress_service = ProgressService(resolved_store)
    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        user_service=UserService(resolved_store),
        catalog_service=CatalogService(resolved_store),
        progress_service=progress_service,
        meal_service=MealService(resolved_store, progress_service),
        workout_service=WorkoutService(resolved_store, progress_service),
    )
