"""Pydantic models for API request payloads."""

import datetime as dt
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from fithood.domain.entries import (
    ActivityLevel,
    FoodEntry,
    Gender,
    MealType,
    UserProfile,
    WeightEntry,
    WorkoutCategory,
    WorkoutEntry,
)


class FoodEntryIn(BaseModel):
    """New food entry payload."""

    date: dt.date
    name: str = Field(min_length=1)
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float | None = None
    sugar: float | None = None
    count: float = 1
    meal_type: MealType | None = None

    def to_entry(self) -> FoodEntry:
        """Build a domain entry with a fresh id and timestamp."""
        return FoodEntry(
            id=uuid4(),
            timestamp=dt.datetime.now(tz=dt.UTC),
            **self.model_dump(exclude={"count"}),
            count=self.count if self.count > 0 else 1,
        )


class FoodEntryUpdate(BaseModel):
    """Partial food entry update."""

    date: dt.date | None = None
    name: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    count: float | None = None
    meal_type: MealType | None = None

    @field_validator("date", "name", "calories", "protein", "carbs", "fat", "count")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field may not be null")
        return value


class WorkoutEntryIn(BaseModel):
    """New workout entry payload."""

    date: dt.date
    exercise: str = Field(min_length=1)
    category: WorkoutCategory = "other"
    sets: float | None = None
    reps: float | None = None
    weight: float | None = None
    duration: float | None = None
    distance: float | None = None
    calories_burned: float | None = None
    notes: str | None = None

    def to_entry(self) -> WorkoutEntry:
        """Build a domain entry with a fresh id and timestamp."""
        return WorkoutEntry(
            id=uuid4(), timestamp=dt.datetime.now(tz=dt.UTC), **self.model_dump()
        )


class WorkoutEntryUpdate(BaseModel):
    """Partial workout entry update."""

    date: dt.date | None = None
    exercise: str | None = None
    category: WorkoutCategory | None = None
    sets: float | None = None
    reps: float | None = None
    weight: float | None = None
    duration: float | None = None
    distance: float | None = None
    calories_burned: float | None = None
    notes: str | None = None

    @field_validator("date", "exercise", "category")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field may not be null")
        return value


class WeightEntryIn(BaseModel):
    """New weight measurement payload."""

    date: dt.date
    weight: float = Field(gt=0)
    body_fat: float | None = None
    notes: str | None = None

    def to_entry(self) -> WeightEntry:
        """Build a domain entry with a fresh id."""
        return WeightEntry(id=uuid4(), **self.model_dump())


class ProfileIn(BaseModel):
    """Profile settings payload."""

    height: float = Field(default=170, gt=0)
    age: int = Field(default=25, gt=0)
    gender: Gender = "male"
    activity_level: ActivityLevel = "moderate"
    goal_weight: float | None = None
    weekly_goal: float | None = 0.5

    def to_profile(self) -> UserProfile:
        """Build the domain profile."""
        return UserProfile(**self.model_dump())


class DayCompletionIn(BaseModel):
    """Manual day completion marker."""

    is_complete: bool = True
