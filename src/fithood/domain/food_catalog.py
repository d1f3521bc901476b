"""Built-in catalog of common foods. Nutrient values are per serving."""

from dataclasses import dataclass
from typing import Literal

FoodCategory = Literal[
    "dairy",
    "protein",
    "grains",
    "vegetables",
    "fruits",
    "snacks",
    "beverages",
    "sweets",
]

FOOD_CATEGORIES: tuple[FoodCategory, ...] = (
    "dairy",
    "protein",
    "grains",
    "vegetables",
    "fruits",
    "snacks",
    "beverages",
    "sweets",
)


@dataclass(frozen=True)
class CatalogFood:
    """One catalog food with its typical serving."""

    name: str
    category: FoodCategory
    serving: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None


FOOD_CATALOG: tuple[CatalogFood, ...] = (
    CatalogFood("Buffalo Milk (250ml)", "dairy", "250ml", 150, 8, 12, 8),
    CatalogFood("Buffalo Milk (350ml)", "dairy", "350ml", 210, 11, 17, 11),
    CatalogFood("Cow Milk (250ml)", "dairy", "250ml", 120, 8, 12, 5),
    CatalogFood("Curd/Dahi (100g)", "dairy", "100g", 60, 3, 5, 3),
    CatalogFood("Paneer (100g)", "dairy", "100g", 265, 18, 3, 21),
    CatalogFood("Lassi Sweet (200ml)", "dairy", "200ml", 160, 5, 24, 5),
    CatalogFood("Buttermilk/Chaas (200ml)", "dairy", "200ml", 40, 2, 4, 2),
    CatalogFood("Ghee (1 tbsp)", "dairy", "1 tbsp", 112, 0, 0, 12),
    CatalogFood("Chicken Breast (100g)", "protein", "100g", 165, 31, 0, 4),
    CatalogFood("Chicken Curry (1 serving)", "protein", "1 serving", 280, 25, 8, 17),
    CatalogFood("Egg Boiled (1)", "protein", "1 egg", 78, 6, 1, 5),
    CatalogFood("Egg Bhurji (2 eggs)", "protein", "2 eggs", 200, 14, 4, 15),
    CatalogFood("Fish Curry (1 serving)", "protein", "1 serving", 220, 22, 6, 12),
    CatalogFood("Mutton Curry (1 serving)", "protein", "1 serving", 350, 28, 8, 23),
    CatalogFood("Dal/Lentils (1 bowl)", "protein", "1 bowl", 180, 12, 30, 2, fiber=8),
    CatalogFood("Rajma (1 bowl)", "protein", "1 bowl", 210, 14, 35, 2, fiber=10),
    CatalogFood("Chole (1 bowl)", "protein", "1 bowl", 240, 13, 38, 5, fiber=9),
    CatalogFood("Soya Chunks (50g dry)", "protein", "50g dry", 170, 26, 16, 1),
    CatalogFood("Whey Protein (1 scoop)", "protein", "30g", 120, 24, 3, 2),
    CatalogFood("Whey Protein (2 scoops)", "protein", "60g", 228, 60, 6, 3),
    CatalogFood("Rice (1 bowl cooked)", "grains", "1 bowl", 200, 4, 45, 0),
    CatalogFood("Roti/Chapati (1)", "grains", "1 piece", 70, 2, 15, 1, fiber=2),
    CatalogFood("Paratha (1)", "grains", "1 piece", 150, 3, 20, 7),
    CatalogFood("Paratha Aloo (1)", "grains", "1 piece", 200, 4, 28, 9),
    CatalogFood("Naan (1)", "grains", "1 piece", 260, 8, 45, 5),
    CatalogFood("Dosa (1)", "grains", "1 piece", 120, 3, 18, 4),
    CatalogFood("Idli (1)", "grains", "1 piece", 40, 2, 8, 0),
    CatalogFood("Upma (1 bowl)", "grains", "1 bowl", 200, 5, 30, 7),
    CatalogFood("Poha (1 bowl)", "grains", "1 bowl", 180, 4, 32, 5),
    CatalogFood("Khichdi (1 bowl)", "grains", "1 bowl", 220, 8, 38, 4),
    CatalogFood("Oats (1 bowl cooked)", "grains", "1 bowl", 150, 6, 27, 3, fiber=4),
    CatalogFood("Bread White (1 slice)", "grains", "1 slice", 75, 2, 14, 1),
    CatalogFood("Bread Brown (1 slice)", "grains", "1 slice", 70, 3, 12, 1, fiber=2),
    CatalogFood("Makki Ki Roti (1)", "grains", "1 piece", 110, 2, 20, 3, fiber=2),
    CatalogFood("Sabzi Mixed (1 bowl)", "vegetables", "1 bowl", 120, 3, 12, 7, fiber=4),
    CatalogFood("Palak Paneer (1 bowl)", "vegetables", "1 bowl", 280, 12, 10, 22),
    CatalogFood("Aloo Gobi (1 bowl)", "vegetables", "1 bowl", 180, 4, 25, 8),
    CatalogFood("Bhindi Fry (1 bowl)", "vegetables", "1 bowl", 130, 3, 12, 8),
    CatalogFood("Baingan Bharta (1 bowl)", "vegetables", "1 bowl", 140, 3, 15, 8),
    CatalogFood(
        "Sarson Ka Saag (1 bowl)", "vegetables", "1 bowl", 150, 5, 12, 10, fiber=4
    ),
    CatalogFood("Salad (1 bowl)", "vegetables", "1 bowl", 50, 2, 10, 0, fiber=3),
    CatalogFood("Banana (1 medium)", "fruits", "1 medium", 105, 1, 27, 0, fiber=3),
    CatalogFood("Apple (1 medium)", "fruits", "1 medium", 95, 0, 25, 0, fiber=4),
    CatalogFood("Mango (1 cup)", "fruits", "1 cup", 100, 1, 25, 0, fiber=3),
    CatalogFood("Papaya (1 cup)", "fruits", "1 cup", 55, 1, 14, 0, fiber=2),
    CatalogFood("Orange (1 medium)", "fruits", "1 medium", 62, 1, 15, 0, fiber=3),
    CatalogFood("Watermelon (1 cup)", "fruits", "1 cup", 46, 1, 12, 0),
    CatalogFood("Grapes (1 cup)", "fruits", "1 cup", 104, 1, 27, 0),
    CatalogFood("Pomegranate (1 cup)", "fruits", "1 cup", 145, 3, 33, 2, fiber=7),
    CatalogFood("Samosa (1)", "snacks", "1 piece", 250, 4, 28, 14),
    CatalogFood("Pakora (5 pieces)", "snacks", "5 pieces", 200, 4, 18, 13),
    CatalogFood("Bhel Puri (1 plate)", "snacks", "1 plate", 200, 5, 35, 5),
    CatalogFood("Pani Puri (6 pieces)", "snacks", "6 pieces", 180, 3, 30, 6),
    CatalogFood("Vada Pav (1)", "snacks", "1 piece", 290, 6, 40, 12),
    CatalogFood("Pav Bhaji (1 serving)", "snacks", "1 serving", 400, 10, 55, 16),
    CatalogFood("Momos Veg (6 pieces)", "snacks", "6 pieces", 200, 6, 30, 6),
    CatalogFood("Momos Chicken (6 pieces)", "snacks", "6 pieces", 250, 12, 28, 10),
    CatalogFood("Namkeen Mix (50g)", "snacks", "50g", 250, 6, 30, 12),
    CatalogFood("Dry Fruits Laddoo (1)", "snacks", "1 piece", 100, 2, 12, 5),
    CatalogFood("Peanuts (30g)", "snacks", "30g", 170, 7, 5, 14),
    CatalogFood("Almonds (10 pieces)", "snacks", "10 pieces", 70, 3, 2, 6),
    CatalogFood("Cashews (10 pieces)", "snacks", "10 pieces", 90, 2, 5, 7),
    CatalogFood("Tea with Milk (1 cup)", "beverages", "1 cup", 50, 2, 6, 2),
    CatalogFood("Coffee with Milk (1 cup)", "beverages", "1 cup", 60, 2, 7, 2),
    CatalogFood("Black Coffee (1 cup)", "beverages", "1 cup", 5, 0, 1, 0),
    CatalogFood("Green Tea (1 cup)", "beverages", "1 cup", 2, 0, 0, 0),
    CatalogFood("Nimbu Pani (1 glass)", "beverages", "1 glass", 30, 0, 8, 0),
    CatalogFood("Coconut Water (250ml)", "beverages", "250ml", 45, 2, 9, 0),
    CatalogFood("Mango Shake (1 glass)", "beverages", "1 glass", 250, 6, 45, 6),
    CatalogFood("Banana Shake (1 glass)", "beverages", "1 glass", 220, 8, 35, 6),
    CatalogFood("Gulab Jamun (1)", "sweets", "1 piece", 150, 2, 20, 7),
    CatalogFood("Rasgulla (1)", "sweets", "1 piece", 120, 2, 22, 3),
    CatalogFood("Jalebi (1)", "sweets", "1 piece", 150, 1, 30, 4),
    CatalogFood("Ladoo Besan (1)", "sweets", "1 piece", 180, 3, 22, 9),
    CatalogFood("Kheer (1 bowl)", "sweets", "1 bowl", 250, 6, 40, 8),
    CatalogFood("Halwa (1 serving)", "sweets", "1 serving", 300, 4, 45, 12),
    CatalogFood("Barfi (1 piece)", "sweets", "1 piece", 150, 3, 20, 7),
)
