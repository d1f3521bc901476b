"""Food contribution analysis over a period of food entries."""

import re
from collections import Counter
from collections.abc import Sequence

from fithood.domain.entries import FoodEntry
from fithood.domain.stats import FoodContribution, round_half_up
from fithood.services.summary import effective_count

_BRACKETED = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_UNITS = (
    "ml",
    "l",
    "ltr",
    "g",
    "gm",
    "gms",
    "grams?",
    "kg",
    "mg",
    "oz",
    "lbs?",
    "cups?",
    "tbsp",
    "tsp",
    "scoops?",
    "slices?",
    "pieces?",
    "pcs",
    "bowls?",
    "glass(?:es)?",
    "servings?",
    "plates?",
    "eggs?",
)
_TRAILING_QUANTITY = re.compile(
    r"(?:^|\s)\d+(?:\.\d+)?\s*(?:" + "|".join(_UNITS) + r")?\.?\s*$"
)
_WHITESPACE = re.compile(r"\s+")


def normalize_food_name(name: str) -> str:
    """Return a grouping key that ignores portions, punctuation, and word order.

    ``"Milk, Buffalo (1 glass)"`` and ``"Buffalo Milk (350ml)"`` both become
    ``"buffalo milk"``. Sorting words can merge unrelated foods that share
    every word; that tradeoff is accepted in favour of coalescing variants.
    """
    lowered = _WHITESPACE.sub(" ", name.lower()).strip()
    key = _BRACKETED.sub(" ", lowered)
    key = key.replace(",", " ")
    key = _WHITESPACE.sub(" ", key).strip()
    while True:
        stripped = _TRAILING_QUANTITY.sub("", key).strip()
        if stripped == key:
            break
        key = stripped
    if not key:
        return lowered
    return " ".join(sorted(key.split(" ")))


def calculate_food_contributions(
    foods: Sequence[FoodEntry],
) -> list[FoodContribution]:
    """Rank normalized foods by the calories they contributed."""
    grand_total = sum(food.calories * effective_count(food) for food in foods)

    groups: dict[str, list[FoodEntry]] = {}
    for food in foods:
        groups.setdefault(normalize_food_name(food.name), []).append(food)

    contributions = []
    for entries in groups.values():
        total_calories = sum(f.calories * effective_count(f) for f in entries)
        total_protein = sum(f.protein * effective_count(f) for f in entries)
        servings = sum(effective_count(f) for f in entries)
        spellings = Counter(f.name.strip() for f in entries)
        contributions.append(
            FoodContribution(
                name=spellings.most_common(1)[0][0],
                total_calories=total_calories,
                total_protein=total_protein,
                count=servings,
                avg_calories=round_half_up(total_calories / servings)
                if servings
                else 0,
                avg_protein=round_half_up(total_protein / servings) if servings else 0,
                percent_of_total=(total_calories / grand_total * 100)
                if grand_total
                else 0,
            )
        )

    return sorted(contributions, key=lambda item: item.total_calories, reverse=True)
