"""Supabase repository for day completion markers."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from fithood.services.foods import DayCompletionRepository


@dataclass
class SupabaseDayCompletionRepository(DayCompletionRepository):
    """Supabase implementation for day completion markers."""

    client: Client

    def list_completions(
        self, user_id: UUID, start: date, end: date
    ) -> dict[date, bool]:
        """Return explicit markers within the inclusive range."""
        response = (
            self.client.table("day_completions")
            .select("date, is_complete")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        return {
            date.fromisoformat(str(row["date"])[:10]): bool(row.get("is_complete"))
            for row in response.data or []
        }

    def set_completion(self, user_id: UUID, day: date, is_complete: bool) -> None:
        """Store a marker for a day, replacing any earlier one."""
        self.client.table("day_completions").upsert(
            {
                "user_id": str(user_id),
                "date": day.isoformat(),
                "is_complete": is_complete,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,date",
        ).execute()

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every marker of a user."""
        self.client.table("day_completions").delete().eq(
            "user_id", str(user_id)
        ).execute()
