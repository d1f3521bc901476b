"""Local food catalog lookups and quick-add suggestions."""

import re

from fithood.domain.entries import FoodEntry
from fithood.domain.food_catalog import FOOD_CATALOG, CatalogFood, FoodCategory
from fithood.domain.food_search import FoodSearchResult

DEFAULT_BROWSE_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 10
MAX_HISTORY_SUGGESTIONS = 5
MAX_SUGGESTIONS = 15

_SLUG = re.compile(r"[^a-z0-9]+")


def search_catalog(
    query: str, limit: int = DEFAULT_SEARCH_LIMIT
) -> list[CatalogFood]:
    """Match catalog foods by name or category substring.

    An empty query returns the first ``DEFAULT_BROWSE_LIMIT`` foods.
    """
    needle = query.strip().lower()
    if not needle:
        return list(FOOD_CATALOG[:DEFAULT_BROWSE_LIMIT])
    matches = [
        food
        for food in FOOD_CATALOG
        if needle in food.name.lower() or needle in food.category
    ]
    return matches[:limit]


def foods_by_category(category: FoodCategory) -> list[CatalogFood]:
    """Return every catalog food in a category."""
    return [food for food in FOOD_CATALOG if food.category == category]


def suggest_foods(
    query: str, history: list[FoodEntry], min_length: int = 2
) -> list[FoodSearchResult]:
    """Merge the user's past foods with catalog matches for quick-add.

    Past foods come first, one per name and calories pair. Catalog foods
    whose name is already suggested are skipped.
    """
    needle = query.strip().lower()
    if len(needle) < min_length:
        return []

    seen: set[tuple[str, float]] = set()
    suggestions: list[FoodSearchResult] = []
    for entry in history:
        key = (entry.name, entry.calories)
        if needle not in entry.name.lower() or key in seen:
            continue
        seen.add(key)
        suggestions.append(_from_history(entry))
        if len(suggestions) == MAX_HISTORY_SUGGESTIONS:
            break

    names = {suggestion.name for suggestion in suggestions}
    for food in search_catalog(needle):
        if food.name not in names:
            suggestions.append(_from_catalog(food))
    return suggestions[:MAX_SUGGESTIONS]


def _from_history(entry: FoodEntry) -> FoodSearchResult:
    return FoodSearchResult(
        id=f"history_{entry.id}",
        name=entry.name,
        brand=None,
        calories=entry.calories,
        protein=entry.protein,
        carbs=entry.carbs,
        fat=entry.fat,
        serving="1 serving",
        source="history",
    )


def _from_catalog(food: CatalogFood) -> FoodSearchResult:
    return FoodSearchResult(
        id=f"catalog_{_SLUG.sub('-', food.name.lower()).strip('-')}",
        name=food.name,
        brand=None,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        serving=food.serving,
        source="catalog",
    )
