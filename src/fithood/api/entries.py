"""CRUD, import and export endpoints for foods, workouts and weights."""

import datetime as dt
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from fithood.api.dependencies import get_container, require_user
from fithood.api.models import (
    DayCompletionIn,
    FoodEntryIn,
    FoodEntryUpdate,
    WeightEntryIn,
    WorkoutEntryIn,
    WorkoutEntryUpdate,
)
from fithood.containers import AppContainer
from fithood.services.csv_export import export_filename

foods_router = APIRouter(prefix="/foods", tags=["foods"])
workouts_router = APIRouter(prefix="/workouts", tags=["workouts"])
weights_router = APIRouter(prefix="/weights", tags=["weights"])


@foods_router.get("")
async def list_foods(
    start: dt.date | None = None,
    end: dt.date | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return food entries, optionally limited to a date range."""
    service = container.food_service
    if start is not None and end is not None:
        return {"foods": service.list_range(user_id, start, end)}
    return {"foods": service.list_all(user_id)}


@foods_router.post("", status_code=status.HTTP_201_CREATED)
async def add_foods(
    payload: list[FoodEntryIn],
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store one or more food entries."""
    entries = [item.to_entry() for item in payload]
    container.food_service.add_entries(user_id, entries)
    return {"foods": entries}


@foods_router.post("/import")
async def import_foods(
    request: Request,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Import food entries from a CSV request body."""
    content = await _read_text(request)
    entries = container.food_service.import_csv(user_id, content)
    return {"imported": len(entries), "foods": entries}


@foods_router.get("/export")
async def export_foods(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Download all food entries as CSV."""
    return csv_response(
        container.food_service.export_csv(user_id),
        export_filename(container.settings.app_name, "foods"),
    )


@foods_router.get("/contributions")
async def food_contributions(
    start: dt.date | None = None,
    end: dt.date | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rank foods by share of total calories."""
    return {
        "contributions": container.food_service.contributions(user_id, start, end)
    }


@foods_router.put("/day/{day}/complete")
async def complete_day(
    day: dt.date,
    payload: DayCompletionIn,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Mark a day as finished or unfinished."""
    container.food_service.mark_day_complete(user_id, day, payload.is_complete)
    return {"date": day, "is_complete": payload.is_complete}


@foods_router.delete("/day/{day}")
async def delete_food_day(
    day: dt.date,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete every food entry of a day."""
    return {"deleted": container.food_service.delete_day(user_id, day)}


@foods_router.patch("/{entry_id}")
async def update_food(
    entry_id: UUID,
    payload: FoodEntryUpdate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Update fields of a food entry."""
    container.food_service.update_entry(
        user_id, entry_id, payload.model_dump(exclude_unset=True)
    )
    return {"status": "ok"}


@foods_router.delete("/{entry_id}")
async def delete_food(
    entry_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a food entry."""
    container.food_service.delete_entry(user_id, entry_id)
    return {"status": "ok"}


@workouts_router.get("")
async def list_workouts(
    start: dt.date | None = None,
    end: dt.date | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return workouts, optionally limited to a date range."""
    service = container.workout_service
    if start is not None and end is not None:
        return {"workouts": service.list_range(user_id, start, end)}
    return {"workouts": service.list_all(user_id)}


@workouts_router.post("", status_code=status.HTTP_201_CREATED)
async def add_workouts(
    payload: list[WorkoutEntryIn],
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store one or more workouts."""
    entries = [item.to_entry() for item in payload]
    container.workout_service.add_entries(user_id, entries)
    return {"workouts": entries}


@workouts_router.post("/import")
async def import_workouts(
    request: Request,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Import workouts from a CSV request body."""
    content = await _read_text(request)
    entries = container.workout_service.import_csv(user_id, content)
    return {"imported": len(entries), "workouts": entries}


@workouts_router.get("/export")
async def export_workouts(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Download all workouts as CSV."""
    return csv_response(
        container.workout_service.export_csv(user_id),
        export_filename(container.settings.app_name, "workouts"),
    )


@workouts_router.get("/stats")
async def workout_stats(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return per-exercise and per-category aggregates."""
    service = container.workout_service
    return {
        "exercises": service.exercise_stats(user_id),
        "categories": service.category_breakdown(user_id),
    }


@workouts_router.delete("/day/{day}")
async def delete_workout_day(
    day: dt.date,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete every workout of a day."""
    return {"deleted": container.workout_service.delete_day(user_id, day)}


@workouts_router.patch("/{entry_id}")
async def update_workout(
    entry_id: UUID,
    payload: WorkoutEntryUpdate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Update fields of a workout."""
    container.workout_service.update_entry(
        user_id, entry_id, payload.model_dump(exclude_unset=True)
    )
    return {"status": "ok"}


@workouts_router.delete("/{entry_id}")
async def delete_workout(
    entry_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a workout."""
    container.workout_service.delete_entry(user_id, entry_id)
    return {"status": "ok"}


@weights_router.get("")
async def list_weights(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return weight history in date order with summary statistics."""
    service = container.weight_service
    return {"weights": service.list_all(user_id), "stats": service.stats(user_id)}


@weights_router.post("", status_code=status.HTTP_201_CREATED)
async def add_weight(
    payload: WeightEntryIn,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store a weight measurement."""
    entry = payload.to_entry()
    container.weight_service.add_entry(user_id, entry)
    return {"weight": entry}


@weights_router.get("/export")
async def export_weights(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Download weight history as CSV."""
    return csv_response(
        container.weight_service.export_csv(user_id),
        export_filename(container.settings.app_name, "weights"),
    )


@weights_router.delete("/{entry_id}")
async def delete_weight(
    entry_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a weight measurement."""
    container.weight_service.delete_entry(user_id, entry_id)
    return {"status": "ok"}


async def _read_text(request: Request) -> str:
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


def csv_response(content: str, filename: str) -> Response:
    """Wrap CSV text in a download response."""
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
