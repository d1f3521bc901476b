"""Food search domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodSearchResult:
    """A candidate food returned by an external lookup."""

    id: str
    name: str
    brand: str | None
    calories: float
    protein: float
    carbs: float
    fat: float
    serving: str
    source: str
