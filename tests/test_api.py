"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from foodtopia.api.app import create_app
from foodtopia.config import Settings
from foodtopia.containers import build_container


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container))


def _meal_payload(user_id: int, calories: float, protein: float) -> dict[str, object]:
    return {
        "userId": user_id,
        "title": "Lunch",
        "date": "2024-05-14T12:45:00Z",
        "time": "12:45 PM",
        "items": [{"name": "Salad", "calories": calories, "protein": protein}],
        "ingredientQuality": 3,
    }


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_user_registration_hides_password(client: TestClient) -> None:
    response = client.post("/api/users", json={"username": "ana", "password": "pw"})

    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["goals"]["workoutMinutes"] == 45

    duplicate = client.post("/api/users", json={"username": "ana", "password": "x"})
    assert duplicate.status_code == 409

    goals = client.patch(
        f"/api/users/{body['id']}/goals", json={"calories": 1800, "protein": 140}
    )
    assert goals.status_code == 200
    assert goals.json()["goals"]["calories"] == 1800
    assert client.get("/api/users/999").status_code == 404


def test_meal_lifecycle_updates_daily_progress(client: TestClient) -> None:
    first = client.post("/api/meals", json=_meal_payload(1, 300, 20))
    client.post("/api/meals", json=_meal_payload(1, 200, 10))

    assert first.status_code == 201
    meal = first.json()
    assert meal["totalCalories"] == 300
    assert meal["date"].startswith("2024-05-14T12:45:00")

    progress = client.get(
        "/api/daily-progress", params={"userId": 1, "date": "2024-05-14"}
    )
    assert progress.json()["caloriesConsumed"] == 500
    assert progress.json()["proteinConsumed"] == 30

    listed = client.get("/api/meals", params={"userId": 1, "date": "2024-05-14"})
    assert [item["id"] for item in listed.json()] == [meal["id"], meal["id"] + 1]

    assert client.delete(f"/api/meals/{meal['id']}").status_code == 204
    assert client.delete(f"/api/meals/{meal['id']}").status_code == 404
    assert client.get(f"/api/meals/{meal['id']}").status_code == 404

    progress = client.get(
        "/api/daily-progress", params={"userId": 1, "date": "2024-05-14"}
    )
    assert progress.json()["caloriesConsumed"] == 200


def test_daily_progress_without_events_is_zero(client: TestClient) -> None:
    response = client.get(
        "/api/daily-progress", params={"userId": 3, "date": "2023-01-01"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2023-01-01"
    assert body["caloriesConsumed"] == 0
    assert body["rowingMeters"] == 0


def test_rowing_workout_is_completed_and_counted(client: TestClient) -> None:
    response = client.post(
        "/api/workouts",
        json={
            "userId": 1,
            "title": "Erg",
            "date": "2024-05-14T07:00:00Z",
            "startTime": "7:00 AM",
            "endTime": "7:25 AM",
            "caloriesBurned": 320,
            "durationMinutes": 25.5,
            "type": "rowing",
            "details": {"rowingMeters": 5000},
        },
    )

    assert response.status_code == 201
    workout = response.json()
    assert workout["details"] == {"rowingMeters": 5000, "rowingSplit": "2:33.00"}

    week = client.get(
        "/api/weekly-progress", params={"userId": 1, "date": "2024-05-16"}
    )
    assert week.json()["start"] == "2024-05-13"
    assert week.json()["totalRowingMeters"] == 5000
    assert week.json()["daily"][1]["workoutMinutes"] == 25.5


def test_invalid_workout_is_rejected(client: TestClient) -> None:
    payload = {
        "userId": 1,
        "title": "Lift",
        "date": "2024-05-14T07:00:00Z",
        "caloriesBurned": 100,
        "durationMinutes": 30,
        "type": "strength",
        "details": {"rowingMeters": 100},
    }

    assert client.post("/api/workouts", json=payload).status_code == 422

    payload["details"] = {"sets": 3}
    payload["durationMinutes"] = -1
    response = client.post("/api/workouts", json=payload)
    assert response.status_code == 422
    assert response.json()["field"] == "duration_minutes"
    assert client.get("/api/workouts", params={"userId": 1}).json() == []


def test_rowing_resolve(client: TestClient) -> None:
    response = client.post(
        "/api/rowing/resolve",
        json={"durationMinutes": 25.5, "rowingSplit": "2:33.00", "authority": "split"},
    )

    assert response.status_code == 200
    assert response.json()["rowingMeters"] == 5000
    assert response.json()["authority"] == "split"


def test_lifespan_seeds_sample_data() -> None:
    container = build_container(Settings(storage_backend="memory"))

    with TestClient(create_app(container)) as client:
        foods = client.get("/api/food-items").json()
        exercises = client.get("/api/exercises").json()
        suggestions = client.get("/api/food-suggestions").json()
        workouts = client.get("/api/workout-suggestions").json()

    assert len(foods) == 9
    assert foods[0]["ingredientQuality"] == 4
    assert exercises[0]["caloriesPerMinute"] == 10
    assert suggestions[0]["mealType"] == "lunch"
    assert workouts[0]["caloriesBurned"] == 240
