"""Domain models for logged entries and user profiles."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
WorkoutCategory = Literal["strength", "cardio", "flexibility", "other"]
Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "veryActive"]

WORKOUT_CATEGORIES: tuple[WorkoutCategory, ...] = (
    "strength",
    "cardio",
    "flexibility",
    "other",
)


@dataclass(frozen=True)
class FoodEntry:
    """One logged food item. Nutrient values are per serving."""

    id: UUID
    date: date
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    count: float = 1
    meal_type: MealType | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True)
class WorkoutEntry:
    """One logged exercise instance."""

    id: UUID
    date: date
    exercise: str
    category: WorkoutCategory = "other"
    sets: float | None = None
    reps: float | None = None
    weight: float | None = None
    duration: float | None = None
    distance: float | None = None
    calories_burned: float | None = None
    notes: str | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True)
class WeightEntry:
    """One body-weight measurement in kg."""

    id: UUID
    date: date
    weight: float
    body_fat: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class UserProfile:
    """Parameters for BMR/TDEE calculations."""

    height: float = 170
    age: int = 25
    gender: Gender = "male"
    activity_level: ActivityLevel = "moderate"
    goal_weight: float | None = None
    weekly_goal: float | None = 0.5
