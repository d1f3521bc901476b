"""Weight log service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fithood.domain.entries import WeightEntry
from fithood.domain.stats import WeightStats, round_half_up
from fithood.services.csv_export import export_weights_csv


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def add_entries(self, user_id: UUID, entries: list[WeightEntry]) -> None:
        """Insert weight entries for a user."""

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Replace the given fields of a weight entry owned by the user."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single weight entry owned by the user."""

    def list_by_date_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[WeightEntry]:
        """Return entries dated within the inclusive range."""

    def list_all(self, user_id: UUID) -> list[WeightEntry]:
        """Return every weight entry of a user."""

    def clear_for_user(self, user_id: UUID) -> None:
        """Delete every weight entry of a user."""


@dataclass
class WeightLogService:
    """Application service for weight tracking."""

    repository: WeightRepository

    def add_entry(self, user_id: UUID, entry: WeightEntry) -> None:
        """Store a weight measurement."""
        self.repository.add_entries(user_id, [entry])

    def update_entry(
        self, user_id: UUID, entry_id: UUID, fields: dict[str, object]
    ) -> None:
        """Update a measurement in place; a null weight is ignored."""
        changes = {
            key: value
            for key, value in fields.items()
            if key != "id" and not (key == "weight" and value is None)
        }
        if not changes:
            return
        self.repository.update_entry(user_id, entry_id, changes)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a measurement."""
        self.repository.delete_entry(user_id, entry_id)

    def list_all(self, user_id: UUID) -> list[WeightEntry]:
        """Return all measurements in date order."""
        return sorted(self.repository.list_all(user_id), key=lambda e: e.date)

    def latest_weight(self, user_id: UUID) -> float | None:
        """Return the most recent measurement by date, if any."""
        return latest_weight(self.repository.list_all(user_id))

    def stats(self, user_id: UUID) -> WeightStats:
        """Return current, start, change, average and range of the history."""
        return calculate_weight_stats(self.repository.list_all(user_id))

    def export_csv(self, user_id: UUID) -> str:
        """Return every measurement as CSV text."""
        return export_weights_csv(self.list_all(user_id))


def latest_weight(entries: list[WeightEntry]) -> float | None:
    """Return the weight of the latest-dated entry."""
    if not entries:
        return None
    return sorted(entries, key=lambda entry: entry.date)[-1].weight


def calculate_weight_stats(entries: list[WeightEntry]) -> WeightStats:
    """Summarize a weight history; every value is None when it is empty."""
    if not entries:
        return WeightStats(
            count=0,
            current=None,
            start=None,
            change=None,
            average=None,
            minimum=None,
            maximum=None,
        )
    history = sorted(entries, key=lambda entry: entry.date)
    values = [entry.weight for entry in history]
    current, start = values[-1], values[0]
    return WeightStats(
        count=len(values),
        current=current,
        start=start,
        change=round(current - start, 1),
        average=round_half_up(sum(values) / len(values) * 10) / 10,
        minimum=min(values),
        maximum=max(values),
    )
