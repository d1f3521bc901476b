"""Workout log service backed by the entry store."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fithood.domain.entries import WorkoutEntry
from fithood.domain.stats import CategoryBreakdown, ExerciseStats
from fithood.services.csv_export import export_workouts_csv
from fithood.services.csv_import import parse_workout_csv
from fithood.services.workout_stats import (
    calculate_category_breakdown,
    calculate_exercise_stats,
)

_logger = logging.getLogger(__name__)

REQUIRED_FIELDS = frozenset({"date", "exercise", "category"})


class WorkoutRepository(Protocol):
    """Persistence interface for workout entries."""

    def add_entries(self, user_id: UUID, entries: list[WorkoutEntry]) -> None:
        """Insert workout entries for a user."""

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a workout entry owned by the user."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single workout entry owned by the user."""

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[WorkoutEntry]:
        """Return entries dated within the inclusive range."""

    def list_all(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return every workout entry of a user."""

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every workout entry of a user."""


@dataclass
class WorkoutLogService:
    """Application service for the workout log."""

    repository: WorkoutRepository
    day_first: bool = True

    def add_entries(self, user_id: UUID, entries: list[WorkoutEntry]) -> None:
        """Store new workout entries."""
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
        self.repository.update_entry(user_id, entry_id, changes)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single entry."""
        self.repository.delete_entry(user_id, entry_id)

    def delete_day(self, user_id: UUID, day: date) -> int:
        """Delete every workout of a day with sequential single deletes."""
        entries = self.repository.list_by_date_range(user_id, day, day)
        for entry in entries:
            self.repository.delete_entry(user_id, entry.id)
        _logger.info("Deleted %s workouts for %s", len(entries), day)
        return len(entries)

    def list_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[WorkoutEntry]:
        """Return entries within the inclusive range."""
        return self.repository.list_by_date_range(user_id, start, end)

    def list_all(self, user_id: UUID) -> list[WorkoutEntry]:
        """Return all entries, newest date first."""
        return sorted(
            self.repository.list_all(user_id), key=lambda e: e.date, reverse=True
        )

    def import_csv(self, user_id: UUID, content: str) -> list[WorkoutEntry]:
        """Parse CSV text and store the resulting entries."""
        entries = parse_workout_csv(content, day_first=self.day_first)
        self.add_entries(user_id, entries)
        _logger.info("Imported %s workouts", len(entries))
        return entries

    def export_csv(self, user_id: UUID) -> str:
        """Return every entry as CSV text."""
        return export_workouts_csv(self.list_all(user_id))

    def exercise_stats(self, user_id: UUID) -> list[ExerciseStats]:
        """Return per-exercise aggregates over all workouts."""
        return calculate_exercise_stats(self.repository.list_all(user_id))

    def category_breakdown(self, user_id: UUID) -> list[CategoryBreakdown]:
        """Return per-category aggregates over all workouts."""
        return calculate_category_breakdown(self.repository.list_all(user_id))
