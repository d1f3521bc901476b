"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fithood.adapters.fatsecret_client import HttpxFatSecretClient
from fithood.adapters.supabase_completion_repository import (
    SupabaseDayCompletionRepository,
)
from fithood.adapters.supabase_food_repository import SupabaseFoodRepository
from fithood.adapters.supabase_profile_repository import SupabaseProfileRepository
from fithood.adapters.supabase_weight_repository import SupabaseWeightRepository
from fithood.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from fithood.config import Settings
from fithood.services.dashboard import DashboardService
from fithood.services.food_search import FoodSearchService
from fithood.services.foods import FoodLogService
from fithood.services.profile import ProfileService
from fithood.services.weights import WeightLogService
from fithood.services.workouts import WorkoutLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodLogService
    workout_service: WorkoutLogService
    weight_service: WeightLogService
    profile_service: ProfileService
    dashboard_service: DashboardService
    food_search_service: FoodSearchService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    workout_repository = SupabaseWorkoutRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)
    completion_repository = SupabaseDayCompletionRepository(supabase_client)
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    day_first = resolved_settings.csv_day_first

    fatsecret_client = None
    if resolved_settings.food_search_enabled:
        fatsecret_client = HttpxFatSecretClient.create(
            client_id=str(resolved_settings.fatsecret_client_id),
            client_secret=str(resolved_settings.fatsecret_client_secret),
            token_url=resolved_settings.fatsecret_token_url,
            api_url=resolved_settings.fatsecret_api_url,
        )

    async def close_resources() -> None:
        if fatsecret_client is not None:
            await fatsecret_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_service=FoodLogService(
            food_repository, completion_repository, day_first=day_first
        ),
        workout_service=WorkoutLogService(workout_repository, day_first=day_first),
        weight_service=WeightLogService(weight_repository),
        profile_service=profile_service,
        dashboard_service=DashboardService(
            food_repository=food_repository,
            workout_repository=workout_repository,
            weight_repository=weight_repository,
            completion_repository=completion_repository,
            profile_service=profile_service,
        ),
        food_search_service=FoodSearchService(fatsecret_client),
        close_resources=close_resources,
    )
