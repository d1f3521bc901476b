"""Date bucketing helpers shared by food, workout, and weight views."""

from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from typing import Protocol, TypeVar


class Dated(Protocol):
    """Anything carrying a calendar date."""

    @property
    def date(self) -> date:
        """Return the calendar date of the item."""


T = TypeVar("T", bound=Dated)


def group_by_date(items: Iterable[T]) -> dict[date, list[T]]:
    """Bucket items by date, keeping input order inside each bucket."""
    grouped: dict[date, list[T]] = {}
    for item in items:
        grouped.setdefault(item.date, []).append(item)
    return grouped


def date_window(days: int, today: date | None = None) -> tuple[date, date]:
    """Return the inclusive range covering the last ``days`` days."""
    end = today or date.today()
    start = end - timedelta(days=max(days, 1) - 1)
    return start, end


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
