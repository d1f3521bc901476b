"""Tests for the food, workout, weight and profile services."""

from datetime import date
from uuid import uuid4

import pytest

from fithood.domain.entries import UserProfile
from fithood.services.foods import FoodLogService
from fithood.services.profile import ProfileService
from fithood.services.weights import WeightLogService
from fithood.services.workouts import WorkoutLogService
from tests.conftest import (
    InMemoryDayCompletionRepository,
    InMemoryFoodRepository,
    InMemoryProfileRepository,
    InMemoryWeightRepository,
    InMemoryWorkoutRepository,
    make_food,
    make_weight,
    make_workout,
)

DAY = date(2024, 3, 5)


@pytest.fixture
def food_service() -> FoodLogService:
    return FoodLogService(InMemoryFoodRepository(), InMemoryDayCompletionRepository())


def test_update_keeps_id_and_coerces_count(food_service: FoodLogService) -> None:
    user_id = uuid4()
    entry = make_food(DAY, "Oats")
    food_service.add_entries(user_id, [entry])

    food_service.update_entry(
        user_id, entry.id, {"id": uuid4(), "name": "Porridge", "count": -2}
    )

    (updated,) = food_service.list_all(user_id)
    assert updated.id == entry.id
    assert updated.name == "Porridge"
    assert updated.count == 1


def test_update_ignores_nulls_for_required_fields(
    food_service: FoodLogService,
) -> None:
    user_id = uuid4()
    entry = make_food(DAY, "Oats", calories=300)
    food_service.add_entries(user_id, [entry])

    food_service.update_entry(
        user_id, entry.id, {"calories": None, "name": None, "fiber": None}
    )

    (updated,) = food_service.list_all(user_id)
    assert updated.calories == 300
    assert updated.name == "Oats"
    assert food_service.contributions(user_id)[0].total_calories == 300


def test_update_and_delete_ignore_other_users_entries(
    food_service: FoodLogService,
) -> None:
    owner = uuid4()
    entry = make_food(DAY, "Oats")
    food_service.add_entries(owner, [entry])
    other = uuid4()

    food_service.update_entry(other, entry.id, {"name": "Hacked"})
    food_service.delete_entry(other, entry.id)

    assert [food.name for food in food_service.list_all(owner)] == ["Oats"]


def test_delete_day_removes_only_that_day(food_service: FoodLogService) -> None:
    user_id = uuid4()
    food_service.add_entries(
        user_id,
        [make_food(DAY), make_food(DAY), make_food(date(2024, 3, 6), "Rice")],
    )

    deleted = food_service.delete_day(user_id, DAY)

    assert deleted == 2
    assert [food.name for food in food_service.list_all(user_id)] == ["Rice"]


def test_list_all_is_newest_first(food_service: FoodLogService) -> None:
    user_id = uuid4()
    food_service.add_entries(
        user_id, [make_food(date(2024, 3, 1), "Old"), make_food(DAY, "New")]
    )

    assert [food.name for food in food_service.list_all(user_id)] == ["New", "Old"]


def test_import_and_export_csv(food_service: FoodLogService) -> None:
    user_id = uuid4()
    imported = food_service.import_csv(
        user_id, "date,name,calories\n05/03/2024,Oats,300\n06/03/2024,Rice,200\n"
    )

    assert [food.date for food in imported] == [DAY, date(2024, 3, 6)]
    assert len(food_service.list_all(user_id)) == 2
    lines = food_service.export_csv(user_id).splitlines()
    assert lines[1].startswith("2024-03-06,Rice,200")


def test_import_respects_month_first_setting() -> None:
    service = FoodLogService(
        InMemoryFoodRepository(), InMemoryDayCompletionRepository(), day_first=False
    )

    (entry,) = service.import_csv(uuid4(), "date,name\n05/03/2024,Oats\n")

    assert entry.date == date(2024, 5, 3)


def test_contributions_within_range(food_service: FoodLogService) -> None:
    user_id = uuid4()
    food_service.add_entries(
        user_id,
        [make_food(DAY, "Oats", calories=300), make_food(date(2024, 4, 1), "Rice")],
    )

    ranged = food_service.contributions(user_id, DAY, DAY)
    everything = food_service.contributions(user_id)

    assert [item.name for item in ranged] == ["Oats"]
    assert len(everything) == 2


def test_day_completion_markers(food_service: FoodLogService) -> None:
    user_id = uuid4()
    food_service.mark_day_complete(user_id, DAY, True)
    food_service.mark_day_complete(user_id, date(2024, 3, 6), False)

    markers = food_service.get_day_completions(user_id, DAY, date(2024, 3, 6))

    assert markers == {DAY: True, date(2024, 3, 6): False}


def test_workout_service_stats_and_delete_day() -> None:
    service = WorkoutLogService(InMemoryWorkoutRepository())
    user_id = uuid4()
    service.add_entries(
        user_id,
        [
            make_workout(DAY, "Squat", category="strength", sets=5, weight=100),
            make_workout(date(2024, 3, 6), "Squat", category="strength", sets=3),
        ],
    )

    stats = service.exercise_stats(user_id)
    assert stats[0].count == 2
    assert stats[0].max_weight == 100
    breakdown = service.category_breakdown(user_id)
    assert breakdown[0].category == "strength"
    assert breakdown[0].count == 2

    assert service.delete_day(user_id, DAY) == 1
    assert len(service.list_all(user_id)) == 1


def test_workout_service_imports_csv() -> None:
    service = WorkoutLogService(InMemoryWorkoutRepository())
    user_id = uuid4()

    service.import_csv(user_id, "date,exercise,duration\n2024-03-05,Yoga,45\n")

    (workout,) = service.list_range(user_id, DAY, DAY)
    assert workout.duration == 45
    assert "Yoga" in service.export_csv(user_id)


def test_weight_service_latest_weight() -> None:
    service = WeightLogService(InMemoryWeightRepository())
    user_id = uuid4()
    assert service.latest_weight(user_id) is None

    latest = make_weight(DAY, 79.5)
    service.add_entry(user_id, latest)
    service.add_entry(user_id, make_weight(date(2024, 3, 1), 81.0))

    assert service.latest_weight(user_id) == 79.5
    assert [entry.weight for entry in service.list_all(user_id)] == [81.0, 79.5]

    service.update_entry(user_id, latest.id, {"weight": 79.0})
    assert service.latest_weight(user_id) == 79.0
    service.delete_entry(user_id, latest.id)
    assert service.latest_weight(user_id) == 81.0


def test_weight_service_stats() -> None:
    service = WeightLogService(InMemoryWeightRepository())
    user_id = uuid4()
    empty = service.stats(user_id)
    assert empty.count == 0
    assert empty.current is None
    assert empty.average is None

    for day, weight in [
        (date(2024, 3, 3), 80.0),
        (date(2024, 3, 1), 82.4),
        (DAY, 79.3),
    ]:
        service.add_entry(user_id, make_weight(day, weight))

    stats = service.stats(user_id)

    assert stats.count == 3
    assert stats.start == 82.4
    assert stats.current == 79.3
    assert stats.change == -3.1
    assert stats.average == 80.6
    assert stats.minimum == 79.3
    assert stats.maximum == 82.4


def test_workout_update_ignores_null_exercise() -> None:
    service = WorkoutLogService(InMemoryWorkoutRepository())
    user_id = uuid4()
    workout = make_workout(DAY, "Squat", category="strength")
    service.add_entries(user_id, [workout])

    service.update_entry(
        user_id, workout.id, {"exercise": None, "category": None, "notes": "deep"}
    )

    (updated,) = service.list_all(user_id)
    assert updated.exercise == "Squat"
    assert updated.category == "strength"
    assert updated.notes == "deep"


def test_profile_service_defaults() -> None:
    service = ProfileService(InMemoryProfileRepository())
    user_id = uuid4()

    assert service.get_profile(user_id) == UserProfile()
    assert service.is_profile_set(user_id) is False

    service.save_profile(user_id, UserProfile(height=180, gender="female"))

    assert service.get_profile(user_id).height == 180
    assert service.is_profile_set(user_id) is True
