"""Profile, dashboard, export and food search endpoints."""

import datetime as dt
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from fithood.api.dependencies import get_container, require_user
from fithood.api.entries import csv_response
from fithood.api.models import ProfileIn
from fithood.containers import AppContainer
from fithood.domain.food_catalog import FOOD_CATEGORIES, FoodCategory
from fithood.services.csv_export import export_filename
from fithood.services.food_catalog import foods_by_category
from fithood.services.grouping import date_window

DEFAULT_EXPORT_DAYS = 30

router = APIRouter(tags=["analytics"])


@router.get("/profile")
async def get_profile(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the profile, falling back to defaults."""
    service = container.profile_service
    return {
        "profile": service.get_profile(user_id),
        "is_set": service.is_profile_set(user_id),
    }


@router.put("/profile")
async def save_profile(
    payload: ProfileIn,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create or replace the profile."""
    profile = payload.to_profile()
    container.profile_service.save_profile(user_id, profile)
    return {"profile": profile, "is_set": True}


@router.get("/dashboard")
async def dashboard(
    days: int = Query(default=7, ge=1, le=365),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the dashboard for the trailing window of days."""
    return {"dashboard": container.dashboard_service.get_dashboard(user_id, days)}


@router.get("/export/deficit")
async def export_deficit(
    start: dt.date | None = None,
    end: dt.date | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Download per-day energy balance as CSV."""
    default_start, default_end = date_window(DEFAULT_EXPORT_DAYS)
    content = container.dashboard_service.export_deficit_csv(
        user_id, start or default_start, end or default_end
    )
    return csv_response(
        content, export_filename(container.settings.app_name, "deficit")
    )


@router.delete("/data")
async def clear_data(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete every entry of the caller."""
    container.dashboard_service.clear_user_data(user_id)
    return {"status": "ok"}


@router.get("/food-search")
async def food_search(
    q: str = "",
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Search the online catalog and suggest past and built-in foods."""
    service = container.food_search_service
    history = container.food_service.list_all(user_id)
    return {
        "results": await service.search(q),
        "suggestions": service.suggest(q, history),
    }


@router.get("/food-search/categories", dependencies=[Depends(require_user)])
async def food_categories() -> dict[str, object]:
    """List the built-in catalog categories."""
    return {"categories": list(FOOD_CATEGORIES)}


@router.get(
    "/food-search/categories/{category}", dependencies=[Depends(require_user)]
)
async def foods_in_category(category: FoodCategory) -> dict[str, object]:
    """Browse the built-in catalog by category."""
    return {"foods": foods_by_category(category)}
