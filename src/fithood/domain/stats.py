"""Derived statistics records. These are computed on demand, never stored."""

import math
from dataclasses import dataclass, field
from datetime import date

from fithood.domain.entries import FoodEntry, WorkoutEntry

CALORIES_PER_KG = 7700


@dataclass(frozen=True)
class DailySummary:
    """Aggregated totals for one calendar day."""

    date: date
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float
    total_sugar: float
    calories_burned: float
    food_entries: list[FoodEntry] = field(default_factory=list)
    workout_entries: list[WorkoutEntry] = field(default_factory=list)
    weight: float | None = None
    is_complete: bool = False


@dataclass(frozen=True)
class FoodContribution:
    """Aggregate intake for one normalized food name."""

    name: str
    total_calories: float
    total_protein: float
    count: float
    avg_calories: int
    avg_protein: int
    percent_of_total: float


@dataclass(frozen=True)
class MacroPercentages:
    """Share of macro calories, in whole percent."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class PeriodDeficit:
    """Energy balance summed over days with logged food."""

    total_deficit: float
    days_logged: int
    avg_daily_deficit: float
    total_calories: float
    calories_burned: float


@dataclass(frozen=True)
class EnergyBalance:
    """BMR/TDEE figures and goal projections for a user."""

    bmr: float
    tdee: float
    bmi: float
    bmi_category: str
    target_calories: float
    daily_balance: float
    weekly_change_kg: float
    weeks_to_goal: float | None


@dataclass(frozen=True)
class ExerciseStats:
    """Aggregates for one normalized exercise name."""

    name: str
    category: str
    count: int
    total_sets: float
    avg_sets: float
    max_weight: float
    total_distance: float
    avg_distance: float


@dataclass(frozen=True)
class CategoryBreakdown:
    """Aggregates for one workout category."""

    category: str
    count: int
    total_calories: float
    avg_calories: int
    total_distance: float
    avg_distance: float


@dataclass(frozen=True)
class WeightStats:
    """Summary of a weight history in kg."""

    count: int
    current: float | None
    start: float | None
    change: float | None
    average: float | None
    minimum: float | None
    maximum: float | None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
