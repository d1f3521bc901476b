"""CSV serialization for logged entries and daily deficit rows."""

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date

from fithood.domain.entries import FoodEntry, UserProfile, WeightEntry, WorkoutEntry
from fithood.domain.stats import DailySummary, round_half_up
from fithood.services.energy import calculate_bmr, calculate_tdee, daily_deficit

FOOD_HEADERS = (
    "date",
    "name",
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "count",
    "mealType",
)
WORKOUT_HEADERS = (
    "date",
    "exercise",
    "category",
    "sets",
    "reps",
    "weight",
    "duration",
    "distance",
    "caloriesBurned",
    "notes",
)
WEIGHT_HEADERS = ("date", "weight", "bodyFat", "notes")
DEFICIT_HEADERS = (
    "date",
    "weight",
    "bmr",
    "tdee",
    "caloriesIn",
    "caloriesBurned",
    "deficit",
)


def export_filename(app_name: str, entity: str, today: date | None = None) -> str:
    """Return the download name, stamped with the export day."""
    stamp = (today or date.today()).isoformat()
    return f"{app_name}-{entity}-{stamp}.csv"


def format_number(value: float | None) -> str:
    """Render a number without a trailing ``.0``; None renders blank."""
    if value is None:
        return ""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def export_foods_csv(foods: Iterable[FoodEntry]) -> str:
    """Serialize food entries to CSV text."""
    return _write(
        FOOD_HEADERS,
        (
            [
                food.date.isoformat(),
                food.name,
                format_number(food.calories),
                format_number(food.protein),
                format_number(food.carbs),
                format_number(food.fat),
                format_number(food.fiber),
                format_number(food.sugar),
                format_number(food.count),
                food.meal_type or "",
            ]
            for food in foods
        ),
    )


def export_workouts_csv(workouts: Iterable[WorkoutEntry]) -> str:
    """Serialize workout entries to CSV text."""
    return _write(
        WORKOUT_HEADERS,
        (
            [
                workout.date.isoformat(),
                workout.exercise,
                workout.category,
                format_number(workout.sets),
                format_number(workout.reps),
                format_number(workout.weight),
                format_number(workout.duration),
                format_number(workout.distance),
                format_number(workout.calories_burned),
                workout.notes or "",
            ]
            for workout in workouts
        ),
    )


def export_weights_csv(weights: Iterable[WeightEntry]) -> str:
    """Serialize weight entries to CSV text."""
    return _write(
        WEIGHT_HEADERS,
        (
            [
                entry.date.isoformat(),
                format_number(entry.weight),
                format_number(entry.body_fat),
                entry.notes or "",
            ]
            for entry in weights
        ),
    )


def export_deficit_csv(
    summaries: Iterable[DailySummary],
    profile: UserProfile,
    weights: Sequence[WeightEntry],
) -> str:
    """Serialize per-day energy balance rows.

    Days without their own weigh-in reuse the most recent earlier one. Without
    any earlier weight the row has a blank weight and zero BMR/TDEE. Days with
    no calories logged get a blank deficit.
    """
    history = sorted(weights, key=lambda entry: entry.date)
    rows = []
    for summary in summaries:
        weight = weight_on(history, summary.date)
        bmr = calculate_bmr(weight, profile) if weight is not None else 0
        tdee = calculate_tdee(bmr, profile.activity_level) if bmr else 0
        deficit = (
            round_half_up(
                daily_deficit(summary.total_calories, tdee, summary.calories_burned)
            )
            if summary.total_calories
            else None
        )
        rows.append(
            [
                summary.date.isoformat(),
                format_number(weight),
                format_number(round_half_up(bmr)),
                format_number(round_half_up(tdee)),
                format_number(summary.total_calories),
                format_number(summary.calories_burned),
                format_number(deficit),
            ]
        )
    return _write(DEFICIT_HEADERS, rows)


def weight_on(history: Sequence[WeightEntry], day: date) -> float | None:
    """Return the weight recorded on or most recently before a day.

    ``history`` must be sorted by date.
    """
    weight = None
    for entry in history:
        if entry.date > day:
            break
        weight = entry.weight
    return weight


def _write(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()
