"""Dashboard analytics over a trailing window of days."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fithood.domain.entries import UserProfile
from fithood.domain.stats import (
    DailySummary,
    EnergyBalance,
    MacroPercentages,
    PeriodDeficit,
    round_half_up,
)
from fithood.services.csv_export import export_deficit_csv
from fithood.services.energy import (
    calculate_bmr,
    calculate_energy_balance,
    calculate_period_deficit,
    calculate_tdee,
    weekly_weight_change,
)
from fithood.services.foods import DayCompletionRepository, FoodRepository
from fithood.services.grouping import date_window
from fithood.services.profile import ProfileService
from fithood.services.summary import build_daily_summaries, macro_percentages
from fithood.services.weights import WeightRepository, latest_weight
from fithood.services.workouts import WorkoutRepository

_logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    """Aggregated view of a trailing window."""

    start: date
    end: date
    daily: list[DailySummary]
    days_averaged: int
    avg_calories: int
    avg_protein: int
    avg_burned: int
    macros: MacroPercentages
    latest_weight: float | None
    profile: UserProfile
    period: PeriodDeficit
    weekly_change_kg: float
    energy: EnergyBalance


@dataclass
class DashboardService:
    """Service combining the logs into dashboard analytics."""

    food_repository: FoodRepository
    workout_repository: WorkoutRepository
    weight_repository: WeightRepository
    completion_repository: DayCompletionRepository
    profile_service: ProfileService

    def get_summaries(
        self, user_id: UUID, start: date, end: date, today: date | None = None
    ) -> list[DailySummary]:
        """Return one summary per day in the inclusive range."""
        foods = self.food_repository.list_by_date_range(user_id, start, end)
        workouts = self.workout_repository.list_by_date_range(user_id, start, end)
        weights = self.weight_repository.list_by_date_range(user_id, start, end)
        completions = self.completion_repository.list_completions(user_id, start, end)
        return build_daily_summaries(
            start, end, foods, workouts, weights, completions, today=today
        )

    def get_dashboard(
        self, user_id: UUID, days: int = 7, today: date | None = None
    ) -> DashboardSummary:
        """Return totals, averages, and energy balance for the last days."""
        start, end = date_window(days, today)
        daily = self.get_summaries(user_id, start, end, today=end)
        current_weight = latest_weight(self.weight_repository.list_all(user_id))
        profile = self.profile_service.get_profile(user_id)

        # Today's log is still growing; average over finished days when there
        # are any.
        logged = [day for day in daily if day.total_calories > 0]
        finished = [day for day in logged if day.is_complete]
        averaged = finished or logged
        days_averaged = len(averaged)
        total_calories = sum(day.total_calories for day in averaged)
        total_burned = sum(day.calories_burned for day in averaged)
        protein_days = [day for day in averaged if day.total_protein > 0]

        bmr = calculate_bmr(current_weight or 0, profile)
        tdee = calculate_tdee(bmr, profile.activity_level)
        period = calculate_period_deficit(averaged, tdee)
        avg_calories = total_calories / days_averaged if days_averaged else 0
        avg_burned = total_burned / days_averaged if days_averaged else 0

        return DashboardSummary(
            start=start,
            end=end,
            daily=daily,
            days_averaged=days_averaged,
            avg_calories=round_half_up(avg_calories),
            avg_protein=round_half_up(
                sum(day.total_protein for day in protein_days) / len(protein_days)
            )
            if protein_days
            else 0,
            avg_burned=round_half_up(avg_burned),
            macros=macro_percentages(
                sum(day.total_protein for day in daily),
                sum(day.total_carbs for day in daily),
                sum(day.total_fat for day in daily),
            ),
            latest_weight=current_weight,
            profile=profile,
            period=period,
            weekly_change_kg=weekly_weight_change(
                period.total_deficit, period.days_logged
            ),
            energy=calculate_energy_balance(
                current_weight or 0, profile, avg_calories, avg_burned
            ),
        )

    def export_deficit_csv(
        self, user_id: UUID, start: date, end: date, today: date | None = None
    ) -> str:
        """Return per-day energy balance rows as CSV text."""
        daily = self.get_summaries(user_id, start, end, today=today)
        weights = self.weight_repository.list_all(user_id)
        profile = self.profile_service.get_profile(user_id)
        return export_deficit_csv(daily, profile, weights)

    def clear_user_data(self, user_id: UUID) -> None:
        """Delete every food, workout, weight entry and completion marker."""
        self.food_repository.clear_for_user(user_id)
        self.workout_repository.clear_for_user(user_id)
        self.weight_repository.clear_for_user(user_id)
        self.completion_repository.clear_for_user(user_id)
        _logger.info("Cleared all data for user %s", user_id)
