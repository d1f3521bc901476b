"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fithood.domain.entries import FoodEntry
from fithood.domain.errors import StoreError
from fithood.services.foods import FoodRepository

_COLUMNS = (
    "id, date, name, calories, protein, carbs, fat, fiber, sugar, count, "
    "meal_type, timestamp"
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food entries."""

    client: Client

    def add_entries(self, user_id: UUID, entries: list[FoodEntry]) -> None:
        """Insert food entries for a user."""
        payload = [food_to_row(user_id, entry) for entry in entries]
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to insert food entries")

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a food entry owned by the user."""
        (
            self.client.table("foods")
            .update(_serialize_fields(fields))
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single food entry owned by the user."""
        (
            self.client.table("foods")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodEntry]:
        """Return entries dated within the inclusive range."""
        response = (
            self.client.table("foods")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [food_from_row(row) for row in response.data or []]

    def list_all(self, user_id: UUID) -> list[FoodEntry]:
        """Return every food entry of a user."""
        response = (
            self.client.table("foods")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [food_from_row(row) for row in response.data or []]

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every food entry of a user."""
        self.client.table("foods").delete().eq("user_id", str(user_id)).execute()


def food_to_row(user_id: UUID, entry: FoodEntry) -> dict[str, object]:
    """Convert a food entry into an insert payload."""
    return {
        "id": str(entry.id),
        "user_id": str(user_id),
        "date": entry.date.isoformat(),
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "fiber": entry.fiber,
        "sugar": entry.sugar,
        "count": entry.count,
        "meal_type": entry.meal_type,
        "timestamp": entry.timestamp.isoformat() if entry.timestamp else None,
    }


def food_from_row(row: dict[str, object]) -> FoodEntry:
    """Convert a stored row into a food entry."""
    return FoodEntry(
        id=UUID(str(row["id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        name=str(row.get("name") or ""),
        calories=float(row.get("calories") or 0),
        protein=float(row.get("protein") or 0),
        carbs=float(row.get("carbs") or 0),
        fat=float(row.get("fat") or 0),
        fiber=_optional_float(row.get("fiber")),
        sugar=_optional_float(row.get("sugar")),
        count=float(row.get("count") or 1),
        meal_type=row.get("meal_type") or None,
        timestamp=(
            datetime.fromisoformat(str(row["timestamp"]))
            if row.get("timestamp")
            else None
        ),
    )


def _optional_float(value: object) -> float | None:
    return None if value is None else float(value)


def _serialize_fields(fields: dict[str, object]) -> dict[str, object]:
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in fields.items()
    }
