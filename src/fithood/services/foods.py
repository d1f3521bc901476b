"""Food log service backed by the entry store."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fithood.domain.entries import FoodEntry
from fithood.domain.stats import FoodContribution
from fithood.services.contributions import calculate_food_contributions
from fithood.services.csv_export import export_foods_csv
from fithood.services.csv_import import parse_food_csv

_logger = logging.getLogger(__name__)

REQUIRED_FIELDS = frozenset(
    {"date", "name", "calories", "protein", "carbs", "fat", "count"}
)


class FoodRepository(Protocol):
    """Persistence interface for food entries."""

    def add_entries(self, user_id: UUID, entries: list[FoodEntry]) -> None:
        """Insert food entries for a user."""

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a food entry owned by the user."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single food entry owned by the user."""

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodEntry]:
        """Return entries dated within the inclusive range."""

    def list_all(self, user_id: UUID) -> list[FoodEntry]:
        """Return every food entry of a user."""

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every food entry of a user."""


class DayCompletionRepository(Protocol):
    """Persistence interface for manual day completion markers."""

    def list_completions(
        self, user_id: UUID, start: date, end: date
    ) -> dict[date, bool]:
        """Return explicit markers within the inclusive range."""

    def set_completion(self, user_id: UUID, day: date, is_complete: bool) -> None:
        """Store a marker for a day."""

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every marker of a user."""


@dataclass
class FoodLogService:
    """Application service for the food log."""

    repository: FoodRepository
    completion_repository: DayCompletionRepository
    day_first: bool = True

    def add_entries(self, user_id: UUID, entries: list[FoodEntry]) -> None:
        """Store new food entries."""
        if entries:
            self.repository.add_entries(user_id, entries)

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Update an entry in place; its id never changes.

        Nulls for required fields are dropped instead of stored.
        """
        changes = {
            key: value
            for key, value in fields.items()
            if key != "id" and not (value is None and key in REQUIRED_FIELDS)
        }
        if not changes:
            return
        if "count" in changes:
            count = changes["count"]
            if not isinstance(count, int | float) or count <= 0:
                changes["count"] = 1
        self.repository.update_entry(user_id, entry_id, changes)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single entry."""
        self.repository.delete_entry(user_id, entry_id)

    def delete_day(self, user_id: UUID, day: date) -> int:
        """Delete every entry of a day, one at a time.

        Not atomic: a failing delete stops the loop and leaves earlier
        deletions in place.
        """
        entries = self.repository.list_by_date_range(user_id, day, day)
        for entry in entries:
            self.repository.delete_entry(user_id, entry.id)
        _logger.info("Deleted %s food entries for %s", len(entries), day)
        return len(entries)

    def list_range(self, user_id: UUID, start: date, end: date) -> list[FoodEntry]:
        """Return entries within the inclusive range."""
        return self.repository.list_by_date_range(user_id, start, end)

    def list_all(self, user_id: UUID) -> list[FoodEntry]:
        """Return all entries, newest date first."""
        return sorted(
            self.repository.list_all(user_id), key=lambda e: e.date, reverse=True
        )

    def import_csv(self, user_id: UUID, content: str) -> list[FoodEntry]:
        """Parse CSV text and store the resulting entries."""
        entries = parse_food_csv(content, day_first=self.day_first)
        self.add_entries(user_id, entries)
        _logger.info("Imported %s food entries", len(entries))
        return entries

    def export_csv(self, user_id: UUID) -> str:
        """Return every entry as CSV text."""
        return export_foods_csv(self.list_all(user_id))

    def contributions(
        self, user_id: UUID, start: date | None = None, end: date | None = None
    ) -> list[FoodContribution]:
        """Rank foods by calorie contribution, optionally within a range."""
        if start is not None and end is not None:
            foods = self.repository.list_by_date_range(user_id, start, end)
        else:
            foods = self.repository.list_all(user_id)
        return calculate_food_contributions(foods)

    def mark_day_complete(self, user_id: UUID, day: date, is_complete: bool) -> None:
        """Store an explicit completion marker for a day."""
        self.completion_repository.set_completion(user_id, day, is_complete)

    def get_day_completions(
        self, user_id: UUID, start: date, end: date
    ) -> dict[date, bool]:
        """Return explicit completion markers within the range."""
        return self.completion_repository.list_completions(user_id, start, end)
