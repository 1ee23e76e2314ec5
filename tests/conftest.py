"""Shared test fixtures."""

import copy
import threading
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import pytest

from foodtopia.adapters.in_memory_store import InMemoryRecordStore
from foodtopia.adapters.json_file_store import JsonFileRecordStore
from foodtopia.adapters.supabase_store import SupabaseRecordStore
from foodtopia.config import Settings
from foodtopia.containers import AppContainer, build_container
from foodtopia.domain.meals import MealItem, NewMeal
from foodtopia.domain.workouts import (
    CardioDetails,
    NewWorkout,
    RowingDetails,
    WorkoutDetails,
)
from foodtopia.services.store import RecordStore

NOON = datetime(2024, 5, 14, 12, 0, tzinfo=UTC)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


def _comparable(value: object) -> object:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


@dataclass
class FakeQuery:
    """Chainable query over one fake table, applied on ``execute``."""

    client: "FakeSupabaseClient"
    name: str
    action: str = "select"
    payload: dict[str, object] | None = None
    filters: list[tuple[str, str, object]] = field(default_factory=list)
    order_by: tuple[str, bool] | None = None
    row_limit: int | None = None
    conflict_columns: list[str] = field(default_factory=list)

    def select(self, *_columns: str) -> "FakeQuery":
        self.action = "select"
        return self

    def insert(self, payload: dict[str, object]) -> "FakeQuery":
        self.action = "insert"
        self.payload = payload
        return self

    def upsert(
        self, payload: dict[str, object], on_conflict: str = "id"
    ) -> "FakeQuery":
        self.action = "upsert"
        self.payload = payload
        self.conflict_columns = on_conflict.split(",")
        return self

    def update(self, payload: dict[str, object]) -> "FakeQuery":
        self.action = "update"
        self.payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self.action = "delete"
        return self

    def eq(self, column: str, value: object) -> "FakeQuery":
        self.filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value: object) -> "FakeQuery":
        self.filters.append(("gte", column, value))
        return self

    def lt(self, column: str, value: object) -> "FakeQuery":
        self.filters.append(("lt", column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.row_limit = count
        return self

    def execute(self) -> FakeResponse:
        with self.client.lock:
            return self._apply()

    def _apply(self) -> FakeResponse:
        rows = self.client.tables.setdefault(self.name, [])
        self.client.calls.append((self.name, self.action, list(self.filters)))
        if self.action == "upsert":
            for row in rows:
                if all(
                    row.get(column) == self.payload.get(column)
                    for column in self.conflict_columns
                ):
                    row.update(copy.deepcopy(self.payload))
                    return FakeResponse([copy.deepcopy(row)])
            return self._insert(rows)
        if self.action == "insert":
            return self._insert(rows)
        matched = [row for row in rows if self._matches(row)]
        if self.action == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
        elif self.action == "delete":
            remaining = [row for row in rows if row not in matched]
            self.client.tables[self.name] = remaining
        if self.order_by is not None:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row[column], reverse=desc)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        return FakeResponse([copy.deepcopy(row) for row in matched])

    def _insert(self, rows: list[dict[str, object]]) -> FakeResponse:
        record_id = self.client.sequences.get(self.name, 0) + 1
        self.client.sequences[self.name] = record_id
        stored = {**copy.deepcopy(self.payload), "id": record_id}
        rows.append(stored)
        return FakeResponse([copy.deepcopy(stored)])

    def _matches(self, row: dict[str, object]) -> bool:
        for operator, column, value in self.filters:
            current = _comparable(row.get(column))
            expected = _comparable(value)
            if operator == "eq" and current != expected:
                return False
            if operator == "gte" and not current >= expected:
                return False
            if operator == "lt" and not current < expected:
                return False
        return True


@dataclass
class FakeSupabaseClient:
    """Supabase client stand-in that keeps tables as lists of rows."""

    tables: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    sequences: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[str, str, list[tuple[str, str, object]]]] = field(
        default_factory=list
    )
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


def make_meal(
    user_id: int,
    calories: float,
    protein: float,
    logged_at: datetime = NOON,
    **macros: float,
) -> NewMeal:
    return NewMeal(
        user_id=user_id,
        title="Meal",
        logged_at=logged_at,
        time="12:00 PM",
        items=(MealItem(name="Plate", calories=calories, protein=protein, **macros),),
        ingredient_quality=4,
    )


def make_workout(
    user_id: int,
    duration: float,
    calories: float,
    logged_at: datetime = NOON,
    details: WorkoutDetails | None = None,
) -> NewWorkout:
    return NewWorkout(
        user_id=user_id,
        title="Session",
        logged_at=logged_at,
        start_time="6:30 AM",
        end_time="7:00 AM",
        calories_burned=calories,
        duration_minutes=duration,
        details=details or CardioDetails(distance=5.0),
    )


def make_rowing(
    user_id: int, duration: float, meters: float | None, split: str | None = None
) -> NewWorkout:
    return make_workout(
        user_id,
        duration,
        calories=300,
        details=RowingDetails(rowing_meters=meters, rowing_split=split),
    )


@pytest.fixture(params=["memory", "json", "supabase"])
def store(request: pytest.FixtureRequest, tmp_path) -> RecordStore:
    if request.param == "memory":
        return InMemoryRecordStore()
    if request.param == "json":
        return JsonFileRecordStore(tmp_path / "foodtopia_data.json")
    return SupabaseRecordStore(FakeSupabaseClient())


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", seed_sample_data=False)


@pytest.fixture
def container(settings: Settings, store: RecordStore) -> AppContainer:
    return build_container(settings, store=store)


@pytest.fixture
def today() -> date:
    return NOON.date()
