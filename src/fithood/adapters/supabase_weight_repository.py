"""Supabase repository for weight measurements."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fithood.domain.entries import WeightEntry
from fithood.domain.errors import StoreError
from fithood.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def add_entries(self, user_id: UUID, entries: list[WeightEntry]) -> None:
        """Insert weight entries for a user."""
        payload = [weight_to_row(user_id, entry) for entry in entries]
        response = self.client.table("weights").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to insert weight entries")

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a weight entry owned by the user."""
        changes = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in fields.items()
        }
        (
            self.client.table("weights")
            .update(changes)
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single weight entry owned by the user."""
        (
            self.client.table("weights")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[WeightEntry]:
        """Return entries dated within the inclusive range."""
        response = (
            self.client.table("weights")
            .select("id, date, weight, body_fat, notes")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [weight_from_row(row) for row in response.data or []]

    def list_all(self, user_id: UUID) -> list[WeightEntry]:
        """Return every weight entry of a user."""
        response = (
            self.client.table("weights")
            .select("id, date, weight, body_fat, notes")
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .execute()
        )
        return [weight_from_row(row) for row in response.data or []]

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every weight entry of a user."""
        self.client.table("weights").delete().eq("user_id", str(user_id)).execute()


def weight_to_row(user_id: UUID, entry: WeightEntry) -> dict[str, object]:
    """Convert a weight entry into an insert payload."""
    return {
        "id": str(entry.id),
        "user_id": str(user_id),
        "date": entry.date.isoformat(),
        "weight": entry.weight,
        "body_fat": entry.body_fat,
        "notes": entry.notes,
    }


def weight_from_row(row: dict[str, object]) -> WeightEntry:
    """Convert a stored row into a weight entry."""
    body_fat = row.get("body_fat")
    return WeightEntry(
        id=UUID(str(row["id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        weight=float(row.get("weight") or 0),
        body_fat=float(body_fat) if body_fat is not None else None,
        notes=row.get("notes") or None,
    )
