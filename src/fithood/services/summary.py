"""Daily summary aggregation."""

from collections.abc import Mapping, Sequence
from datetime import date

from fithood.domain.entries import FoodEntry, WeightEntry, WorkoutEntry
from fithood.domain.stats import DailySummary, MacroPercentages, round_half_up
from fithood.services.grouping import group_by_date, iter_days


def effective_count(entry: FoodEntry) -> float:
    """Return the serving multiplier, treating missing or non-positive as 1."""
    if entry.count is None or entry.count <= 0:
        return 1
    return entry.count


def nutrient_total(entries: Sequence[FoodEntry], nutrient: str) -> float:
    """Sum a per-serving nutrient across entries, scaled by servings."""
    return sum(
        (getattr(entry, nutrient) or 0) * effective_count(entry) for entry in entries
    )


def is_day_complete(
    day: date,
    foods: Sequence[FoodEntry],
    completion: bool | None = None,
    today: date | None = None,
) -> bool:
    """Resolve whether a day's log is finished.

    An explicit marker wins. Otherwise a day counts as complete only when it
    is already in the past and has at least one food entry, so today's
    still-growing log stays out of multi-day averages.
    """
    if completion is not None:
        return completion
    current = today or date.today()
    return day < current and len(foods) > 0


def calculate_daily_summary(  # noqa: PLR0913
    day: date,
    foods: Sequence[FoodEntry],
    workouts: Sequence[WorkoutEntry],
    weight: float | None = None,
    *,
    completion: bool | None = None,
    today: date | None = None,
) -> DailySummary:
    """Reduce one day's entries into a summary."""
    return DailySummary(
        date=day,
        total_calories=nutrient_total(foods, "calories"),
        total_protein=nutrient_total(foods, "protein"),
        total_carbs=nutrient_total(foods, "carbs"),
        total_fat=nutrient_total(foods, "fat"),
        total_fiber=nutrient_total(foods, "fiber"),
        total_sugar=nutrient_total(foods, "sugar"),
        calories_burned=sum(workout.calories_burned or 0 for workout in workouts),
        food_entries=list(foods),
        workout_entries=list(workouts),
        weight=weight,
        is_complete=is_day_complete(day, foods, completion, today),
    )


def build_daily_summaries(  # noqa: PLR0913
    start: date,
    end: date,
    foods: Sequence[FoodEntry],
    workouts: Sequence[WorkoutEntry],
    weights: Sequence[WeightEntry] = (),
    completions: Mapping[date, bool] | None = None,
    today: date | None = None,
) -> list[DailySummary]:
    """Build one summary per calendar day in the inclusive range."""
    foods_by_date = group_by_date(foods)
    workouts_by_date = group_by_date(workouts)
    weight_by_date = {entry.date: entry.weight for entry in weights}
    markers = completions or {}
    return [
        calculate_daily_summary(
            day,
            foods_by_date.get(day, []),
            workouts_by_date.get(day, []),
            weight_by_date.get(day),
            completion=markers.get(day),
            today=today,
        )
        for day in iter_days(start, end)
    ]


def macro_percentages(protein: float, carbs: float, fat: float) -> MacroPercentages:
    """Return each macro's share of macro calories (4/4/9 kcal per gram)."""
    protein_cals = protein * 4
    carbs_cals = carbs * 4
    fat_cals = fat * 9
    total = protein_cals + carbs_cals + fat_cals
    if total == 0:
        return MacroPercentages(protein=0, carbs=0, fat=0)
    return MacroPercentages(
        protein=round_half_up(protein_cals / total * 100),
        carbs=round_half_up(carbs_cals / total * 100),
        fat=round_half_up(fat_cals / total * 100),
    )
