"""Tolerant CSV import for food and workout logs."""

import csv
import io
import logging
import re
from collections.abc import Mapping
from datetime import UTC, date, datetime
from uuid import uuid4

from dateutil import parser as date_parser

from fithood.domain.entries import FoodEntry, MealType, WorkoutCategory, WorkoutEntry

_logger = logging.getLogger(__name__)

FOOD_COLUMNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("date", ("date", "day", "datetime", "timestamp")),
    ("name", ("name", "food", "foodname", "item", "fooditem", "description")),
    ("calories", ("calories", "cals", "kcal", "energy", "cal")),
    ("protein", ("protein", "proteins", "prot")),
    ("carbs", ("carbs", "carbohydrates", "carb", "carbohydrate")),
    ("fat", ("fat", "fats", "lipids", "lipid")),
    ("fiber", ("fiber", "fibre", "dietary fiber")),
    ("sugar", ("sugar", "sugars")),
    ("count", ("count", "servings", "serving", "qty", "quantity")),
    ("meal", ("meal", "mealtype", "type", "category")),
)

WORKOUT_COLUMNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("date", ("date", "day", "datetime", "timestamp")),
    ("exercise", ("exercise", "name", "workout", "movement", "activity")),
    ("category", ("category", "type", "workouttype", "exercisetype")),
    ("sets", ("sets", "set")),
    ("reps", ("reps", "repetitions", "rep")),
    ("weight", ("weight", "load", "kg", "lbs")),
    ("duration", ("duration", "time", "minutes", "mins")),
    ("distance", ("distance", "km", "miles")),
    ("calories_burned", ("caloriesburned", "burned", "calsburned")),
    ("notes", ("notes", "note", "comments", "comment")),
)

MEAL_KEYWORDS: tuple[tuple[MealType, tuple[str, ...]], ...] = (
    ("breakfast", ("breakfast",)),
    ("lunch", ("lunch",)),
    ("dinner", ("dinner",)),
    ("snack", ("snack",)),
)

CATEGORY_KEYWORDS: tuple[tuple[WorkoutCategory, tuple[str, ...]], ...] = (
    ("strength", ("strength", "weight", "resistance")),
    ("cardio", ("cardio", "aerobic", "running")),
    ("flexibility", ("flex", "stretch", "yoga")),
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_NUMERIC = re.compile(r"[^\d.\-]")
_DATE_SEPARATORS = re.compile(r"[/\-.]")
_YEAR_DIGITS = 4


def normalize_column_name(name: str) -> str:
    """Lower-case a header and drop everything but letters and digits."""
    return _NON_ALNUM.sub("", name.lower().strip())


def parse_number(value: object) -> float:
    """Parse a loosely formatted number, returning 0 when it cannot."""
    if isinstance(value, int | float):
        return float(value)
    if value is None or value == "":
        return 0
    cleaned = _NON_NUMERIC.sub("", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return 0


def normalize_date(
    value: str, *, day_first: bool = True, today: date | None = None
) -> date:
    """Turn a free-form date into a calendar date, falling back to today.

    ISO dates are read as such. Other all-numeric slash, dash, or dot
    separated values are read as year-first when the first part has four
    digits, otherwise as day-first (or month-first when ``day_first`` is
    False). Anything else goes through the generic dateutil parser.
    """
    fallback = today or date.today()
    text = value.strip()
    if not text:
        return fallback
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    parts = [part.strip() for part in _DATE_SEPARATORS.split(text)]
    if len(parts) == 3 and all(part.isdigit() for part in parts):  # noqa: PLR2004
        parsed = _date_from_parts(*parts, day_first=day_first)
        if parsed is not None:
            return parsed

    try:
        return date_parser.parse(text, dayfirst=day_first).date()
    except (ValueError, OverflowError):
        pass

    _logger.warning("Unparseable date %r, using %s", value, fallback.isoformat())
    return fallback


def _date_from_parts(
    first: str, second: str, third: str, *, day_first: bool
) -> date | None:
    if len(first) == _YEAR_DIGITS:
        year, month, day = first, second, third
    elif len(third) != _YEAR_DIGITS:
        return None
    elif day_first:
        day, month, year = first, second, third
    else:
        month, day, year = first, second, third
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_meal_type(value: object) -> MealType | None:
    """Infer a meal type from free text."""
    text = str(value or "").lower()
    for meal_type, keywords in MEAL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return meal_type
    return None


def parse_category(value: object) -> WorkoutCategory:
    """Infer a workout category from free text, defaulting to other."""
    text = str(value or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return "other"


def parse_food_csv(
    content: str, *, day_first: bool = True, today: date | None = None
) -> list[FoodEntry]:
    """Parse CSV text into food entries."""
    return [
        _food_from_row(row, day_first=day_first, today=today)
        for row in _read_rows(content, FOOD_COLUMNS)
    ]


def parse_workout_csv(
    content: str, *, day_first: bool = True, today: date | None = None
) -> list[WorkoutEntry]:
    """Parse CSV text into workout entries."""
    return [
        _workout_from_row(row, day_first=day_first, today=today)
        for row in _read_rows(content, WORKOUT_COLUMNS)
    ]


def _read_rows(
    content: str, columns: tuple[tuple[str, tuple[str, ...]], ...]
) -> list[dict[str, str]]:
    """Read CSV rows keyed by canonical field name.

    Short or long rows are kept with a warning; a row the csv module cannot
    tokenize ends the read with whatever was parsed before it.
    """
    reader = csv.reader(io.StringIO(content.lstrip("\ufeff")))
    rows: list[dict[str, str]] = []
    try:
        header = next(reader, None)
        if header is None:
            return rows
        headers = [normalize_column_name(cell) for cell in header]
        positions = _map_columns(headers, columns)
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            if len(row) != len(header):
                _logger.warning(
                    "CSV row %s has %s fields, expected %s",
                    reader.line_num,
                    len(row),
                    len(header),
                )
            rows.append(
                {
                    field: row[index]
                    for field, index in positions.items()
                    if index < len(row)
                }
            )
    except csv.Error as exc:
        _logger.warning("CSV parsing stopped at line %s: %s", reader.line_num, exc)
    return rows


def _map_columns(
    headers: list[str], columns: tuple[tuple[str, tuple[str, ...]], ...]
) -> dict[str, int]:
    """Map each canonical field to the first header matching its synonyms."""
    positions: dict[str, int] = {}
    for field, synonyms in columns:
        for synonym in synonyms:
            normalized = normalize_column_name(synonym)
            if normalized in headers:
                positions[field] = headers.index(normalized)
                break
    return positions


def _optional_number(row: Mapping[str, str], field: str) -> float | None:
    raw = row.get(field, "")
    if not raw.strip():
        return None
    return parse_number(raw)


def _row_date(row: Mapping[str, str], *, day_first: bool, today: date | None) -> date:
    raw = row.get("date", "")
    if not raw.strip():
        return today or date.today()
    return normalize_date(raw, day_first=day_first, today=today)


def _food_from_row(
    row: Mapping[str, str], *, day_first: bool, today: date | None
) -> FoodEntry:
    count = parse_number(row.get("count")) if "count" in row else 1
    return FoodEntry(
        id=uuid4(),
        date=_row_date(row, day_first=day_first, today=today),
        name=row.get("name", "").strip() or "Unknown Food",
        calories=parse_number(row.get("calories")),
        protein=parse_number(row.get("protein")),
        carbs=parse_number(row.get("carbs")),
        fat=parse_number(row.get("fat")),
        fiber=_optional_number(row, "fiber"),
        sugar=_optional_number(row, "sugar"),
        count=count if count > 0 else 1,
        meal_type=parse_meal_type(row.get("meal")),
        timestamp=datetime.now(tz=UTC),
    )


def _workout_from_row(
    row: Mapping[str, str], *, day_first: bool, today: date | None
) -> WorkoutEntry:
    notes = row.get("notes")
    return WorkoutEntry(
        id=uuid4(),
        date=_row_date(row, day_first=day_first, today=today),
        exercise=row.get("exercise", "").strip() or "Unknown Exercise",
        category=parse_category(row.get("category")),
        sets=_optional_number(row, "sets"),
        reps=_optional_number(row, "reps"),
        weight=_optional_number(row, "weight"),
        duration=_optional_number(row, "duration"),
        distance=_optional_number(row, "distance"),
        calories_burned=_optional_number(row, "calories_burned"),
        notes=notes if notes else None,
        timestamp=datetime.now(tz=UTC),
    )
