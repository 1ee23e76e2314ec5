"""Sample data for a fresh store."""

import logging
from datetime import UTC, datetime

from foodtopia.containers import AppContainer
from foodtopia.domain.catalog import (
    FoodItem,
    NewExercise,
    NewFoodItem,
    NewFoodSuggestion,
    NewWorkoutSuggestion,
)
from foodtopia.domain.meals import MealItem, NewMeal
from foodtopia.domain.models import NewUser, UserRecord
from foodtopia.domain.workouts import CardioDetails, NewWorkout

_logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"

SAMPLE_FOOD_ITEMS = (
    NewFoodItem(
        "Greek Yogurt with Berries",
        250, 15, 30, 8, 15, 4,
        "High in protein and probiotics",
    ),
    NewFoodItem("Whole Grain Toast", 120, 4, 22, 2, 2, 4, "Good source of fiber"),
    NewFoodItem("Coffee with Almond Milk", 80, 1, 2, 5, 0, 4),
    NewFoodItem(
        "Chicken Caesar Salad",
        420, 30, 15, 25, 3, 3,
        "Caesar dressing contains preservatives",
    ),
    NewFoodItem("Whole Grain Roll", 150, 5, 30, 2, 3, 4),
    NewFoodItem("Sparkling Water", 0, 0, 0, 0, 0, 4),
    NewFoodItem("Grilled Salmon", 350, 35, 0, 20, 0, 4, "Rich in omega-3 fatty acids"),
    NewFoodItem("Quinoa", 120, 4, 22, 2, 0, 4, "Complete protein source"),
    NewFoodItem(
        "Roasted Vegetables", 110, 3, 22, 2, 6, 4, "High in vitamins and minerals"
    ),
)

SAMPLE_EXERCISES = (
    NewExercise("Running", "cardio", 10, "medium", 25, "Maintain steady pace"),
    NewExercise(
        "Upper Body Strength", "strength", 8, "medium", 30, "Focus on proper form"
    ),
    NewExercise(
        "HIIT Cardio", "cardio", 12, "high", 20, "20 seconds on, 10 seconds rest"
    ),
)

SAMPLE_FOOD_SUGGESTIONS = (
    NewFoodSuggestion(
        name="Mediterranean Bowl",
        description="High protein, balanced carbs",
        calories=450,
        protein=25,
        carbs=50,
        fat=15,
        meal_type="lunch",
        ingredients="Quinoa, chickpeas, cucumber, tomato, feta, olive oil",
        image="https://images.unsplash.com/photo-1540420773420-3366772f4999?w=100&h=100&fit=crop&crop=center&q=80",  # noqa: E501
    ),
    NewFoodSuggestion(
        name="Protein Smoothie",
        description="Post-workout recovery",
        calories=320,
        protein=30,
        carbs=35,
        fat=8,
        meal_type="snack",
        ingredients="Whey protein, banana, almond milk, peanut butter",
        image="https://images.unsplash.com/photo-1593001872095-7d5b3668adbb?w=100&h=100&fit=crop&crop=center&q=80",  # noqa: E501
    ),
)

SAMPLE_WORKOUT_SUGGESTIONS = (
    NewWorkoutSuggestion(
        title="Upper Body Strength",
        description="Focus on chest, shoulders, and arms",
        intensity="medium",
        exercises="Push-ups, shoulder press, bicep curls, tricep dips",
        duration_minutes=30,
        type="strength",
        calories_burned=240,
        instructions="3 sets of 12 reps for each exercise",
    ),
    NewWorkoutSuggestion(
        title="HIIT Cardio",
        description="Alternating high-intensity and rest periods",
        intensity="high",
        exercises="Burpees, mountain climbers, jump squats, high knees",
        duration_minutes=20,
        type="cardio",
        calories_burned=240,
        instructions="20 seconds work, 10 seconds rest, repeat for 8 rounds",
    ),
)

_SAMPLE_MEALS = (
    ("Breakfast", "8:30 AM", 4, None, (0, 1, 2)),
    (
        "Lunch",
        "12:45 PM",
        3,
        "Caesar dressing contains preservatives and processed ingredients.",
        (3, 4, 5),
    ),
    (
        "Dinner",
        "7:15 PM",
        4,
        "Rich in omega-3 fatty acids and antioxidants.",
        (6, 7, 8),
    ),
)


def seed_sample_data(
    container: AppContainer, now: datetime | None = None
) -> UserRecord | None:
    """Load the demo user, catalogs and today's sample log.

    Does nothing when a ``demo`` user already exists, so it is safe to run
    on every start. Meals and the workout go through the services, which
    keeps the demo user's daily progress consistent with them.
    """
    if container.user_service.get_by_username(DEMO_USERNAME) is not None:
        return None
    moment = now or datetime.now(UTC)
    user = container.user_service.register(NewUser(DEMO_USERNAME, "password"))
    catalog = container.catalog_service
    foods = [catalog.add_food_item(item) for item in SAMPLE_FOOD_ITEMS]
    for exercise in SAMPLE_EXERCISES:
        catalog.add_exercise(exercise)
    for suggestion in SAMPLE_FOOD_SUGGESTIONS:
        catalog.add_food_suggestion(suggestion)
    for suggestion in SAMPLE_WORKOUT_SUGGESTIONS:
        catalog.add_workout_suggestion(suggestion)

    for title, time, quality, notes, indexes in _SAMPLE_MEALS:
        container.meal_service.create_meal(
            NewMeal(
                user_id=user.id,
                title=title,
                logged_at=moment,
                time=time,
                items=tuple(_meal_item(foods[index]) for index in indexes),
                ingredient_quality=quality,
                quality_notes=notes,
            )
        )
    container.workout_service.create_workout(
        NewWorkout(
            user_id=user.id,
            title="Morning Run",
            logged_at=moment,
            start_time="6:30 AM",
            end_time="6:55 AM",
            calories_burned=180,
            duration_minutes=25,
            details=CardioDetails(distance=2.4, pace="10:25 min/mile", heart_rate=142),
        )
    )
    _logger.info("Sample data seeded for user_id=%s", user.id)
    return user


def _meal_item(food: FoodItem) -> MealItem:
    return MealItem(
        name=food.name,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        sugar=food.sugar,
    )
