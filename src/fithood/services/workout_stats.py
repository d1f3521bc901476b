"""Exercise statistics. Sums count every workout; averages skip zero values."""

import re
from collections.abc import Sequence

from fithood.domain.entries import WORKOUT_CATEGORIES, WorkoutEntry
from fithood.domain.stats import CategoryBreakdown, ExerciseStats, round_half_up

_PARENTHESIZED = re.compile(r"\s*\([^)]*\)\s*")


def normalize_exercise_name(name: str) -> str:
    """Drop parenthesized details, e.g. ``Walking (8km)`` becomes ``Walking``."""
    return _PARENTHESIZED.sub(" ", name).strip()


def calculate_exercise_stats(workouts: Sequence[WorkoutEntry]) -> list[ExerciseStats]:
    """Aggregate workouts per normalized exercise name, most frequent first."""
    groups: dict[str, list[WorkoutEntry]] = {}
    for workout in workouts:
        groups.setdefault(normalize_exercise_name(workout.exercise), []).append(
            workout
        )

    stats = []
    for name, entries in groups.items():
        sets = _positive([entry.sets for entry in entries])
        weights = _positive([entry.weight for entry in entries])
        distances = _positive([entry.distance for entry in entries])
        stats.append(
            ExerciseStats(
                name=name,
                category=entries[0].category,
                count=len(entries),
                total_sets=sum(sets),
                avg_sets=_mean(sets),
                max_weight=max(weights, default=0),
                total_distance=sum(distances),
                avg_distance=_mean(distances),
            )
        )
    return sorted(stats, key=lambda item: item.count, reverse=True)


def calculate_category_breakdown(
    workouts: Sequence[WorkoutEntry],
) -> list[CategoryBreakdown]:
    """Aggregate workouts for every category, including empty ones."""
    breakdown = []
    for category in WORKOUT_CATEGORIES:
        entries = [workout for workout in workouts if workout.category == category]
        calories = _positive([entry.calories_burned for entry in entries])
        distances = _positive([entry.distance for entry in entries])
        breakdown.append(
            CategoryBreakdown(
                category=category,
                count=len(entries),
                total_calories=sum(calories),
                avg_calories=round_half_up(_mean(calories)),
                total_distance=sum(distances),
                avg_distance=round(_mean(distances), 1),
            )
        )
    return breakdown


def _positive(values: list[float | None]) -> list[float]:
    return [value for value in values if value is not None and value > 0]


def _mean(values: list[float]) -> float:
    if not values:
        return 0
    return sum(values) / len(values)
