"""Supabase repository for workout entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fithood.domain.entries import WORKOUT_CATEGORIES, WorkoutEntry
from fithood.domain.errors import StoreError
from fithood.services.workouts import WorkoutRepository

_COLUMNS = (
    "id, date, exercise, category, sets, reps, weight, duration, distance, "
    "calories_burned, notes, timestamp"
)


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout entries."""

    client: Client

    def add_entries(self, user_id: UUID, entries: list[WorkoutEntry]) -> None:
        """Insert workout entries for a user."""
        payload = [workout_to_row(user_id, entry) for entry in entries]
        response = self.client.table("workouts").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to insert workout entries")

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a workout entry owned by the user."""
        changes = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in fields.items()
        }
        (
            self.client.table("workouts")
            .update(changes)
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single workout entry owned by the user."""
        (
            self.client.table("workouts")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[WorkoutEntry]:
        """Return entries dated within the inclusive range."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [workout_from_row(row) for row in response.data or []]

    def list_all(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return every workout entry of a user."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [workout_from_row(row) for row in response.data or []]

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every workout entry of a user."""
        self.client.table("workouts").delete().eq("user_id", str(user_id)).execute()


def workout_to_row(user_id: UUID, entry: WorkoutEntry) -> dict[str, object]:
    """Convert a workout entry into an insert payload."""
    return {
        "id": str(entry.id),
        "user_id": str(user_id),
        "date": entry.date.isoformat(),
        "exercise": entry.exercise,
        "category": entry.category,
        "sets": entry.sets,
        "reps": entry.reps,
        "weight": entry.weight,
        "duration": entry.duration,
        "distance": entry.distance,
        "calories_burned": entry.calories_burned,
        "notes": entry.notes,
        "timestamp": entry.timestamp.isoformat() if entry.timestamp else None,
    }


def workout_from_row(row: dict[str, object]) -> WorkoutEntry:
    """Convert a stored row into a workout entry."""
    category = row.get("category")
    return WorkoutEntry(
        id=UUID(str(row["id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        exercise=str(row.get("exercise") or ""),
        category=category if category in WORKOUT_CATEGORIES else "other",
        sets=_optional_float(row.get("sets")),
        reps=_optional_float(row.get("reps")),
        weight=_optional_float(row.get("weight")),
        duration=_optional_float(row.get("duration")),
        distance=_optional_float(row.get("distance")),
        calories_burned=_optional_float(row.get("calories_burned")),
        notes=row.get("notes") or None,
        timestamp=(
            datetime.fromisoformat(str(row["timestamp"]))
            if row.get("timestamp")
            else None
        ),
    )


def _optional_float(value: object) -> float | None:
    return None if value is None else float(value)
