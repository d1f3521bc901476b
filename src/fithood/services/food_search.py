"""Best-effort food lookup for quick-add."""

import logging
import re
from dataclasses import dataclass

from fithood.adapters.fatsecret_client import FoodSearchClient
from fithood.domain.entries import FoodEntry
from fithood.domain.food_search import FoodSearchResult
from fithood.services.food_catalog import suggest_foods

MIN_QUERY_LENGTH = 2

_CALORIES = re.compile(r"Calories:\s*([\d.]+)")
_FAT = re.compile(r"Fat:\s*([\d.]+)")
_CARBS = re.compile(r"Carbs:\s*([\d.]+)")
_PROTEIN = re.compile(r"Protein:\s*([\d.]+)")
_SERVING = re.compile(r"Per\s+([^-]+)")

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Searches an external catalog; failures never block manual entry."""

    client: FoodSearchClient | None
    max_results: int = 10

    async def search(self, query: str) -> list[FoodSearchResult]:
        """Return candidate foods, or an empty list on short queries or errors."""
        cleaned = query.strip()
        if self.client is None or len(cleaned) < MIN_QUERY_LENGTH:
            return []
        try:
            payload = await self.client.search_foods(
                cleaned, max_results=self.max_results
            )
        except Exception:
            _logger.exception("Food search failed", extra={"query": cleaned})
            return []
        return parse_search_payload(payload)

    def suggest(
        self, query: str, history: list[FoodEntry]
    ) -> list[FoodSearchResult]:
        """Return offline suggestions from past foods and the local catalog."""
        return suggest_foods(query, history, min_length=MIN_QUERY_LENGTH)


def parse_search_payload(payload: dict[str, object]) -> list[FoodSearchResult]:
    """Convert a ``foods.search`` response into search results."""
    foods = payload.get("foods")
    if not isinstance(foods, dict):
        return []
    raw = foods.get("food")
    if raw is None:
        return []
    items = raw if isinstance(raw, list) else [raw]
    return [_parse_food(item) for item in items if isinstance(item, dict)]


def _parse_food(item: dict[str, object]) -> FoodSearchResult:
    # Description looks like:
    # "Per 100g - Calories: 89kcal | Fat: 0.33g | Carbs: 22.84g | Protein: 1.09g"
    description = str(item.get("food_description") or "")
    serving = _SERVING.search(description)
    return FoodSearchResult(
        id=f"fs_{item.get('food_id', '')}",
        name=str(item.get("food_name", "")),
        brand=str(item["brand_name"]) if item.get("brand_name") else None,
        calories=round(_amount(_CALORIES, description)),
        protein=round(_amount(_PROTEIN, description), 1),
        carbs=round(_amount(_CARBS, description), 1),
        fat=round(_amount(_FAT, description), 1),
        serving=serving.group(1).strip() if serving else "100g",
        source="fatsecret",
    )


def _amount(pattern: re.Pattern[str], description: str) -> float:
    match = pattern.search(description)
    if not match:
        return 0
    try:
        return float(match.group(1))
    except ValueError:
        return 0
