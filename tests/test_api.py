"""Tests for the HTTP API."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from fithood.api.app import create_app
from fithood.containers import AppContainer
from fithood.domain.errors import StoreError
from tests.conftest import InMemoryFoodRepository, make_food, make_weight


@dataclass
class FailingFoodRepository(InMemoryFoodRepository):
    """Food repository whose writes are rejected."""

    def add_entries(self, user_id, entries) -> None:  # type: ignore[no-untyped-def]
        raise StoreError("insert returned no rows")


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token_and_user(container: AppContainer, user_id: UUID) -> None:
    client = _client(container)

    assert client.get("/foods").status_code == 401
    assert (
        client.get(
            "/foods", headers={"X-Api-Token": "wrong", "X-User-Id": str(user_id)}
        ).status_code
        == 401
    )
    assert client.get("/foods", headers={"X-Api-Token": "api-token"}).status_code == 401
    assert (
        client.get(
            "/foods", headers={"X-Api-Token": "api-token", "X-User-Id": "nope"}
        ).status_code
        == 401
    )


def test_food_crud(container: AppContainer, auth_headers: dict[str, str]) -> None:
    client = _client(container)

    created = client.post(
        "/foods",
        headers=auth_headers,
        json=[
            {
                "date": "2024-03-05",
                "name": "Oats",
                "calories": 300,
                "protein": 10,
                "carbs": 50,
                "fat": 5,
                "count": 0,
                "meal_type": "breakfast",
            }
        ],
    )
    assert created.status_code == 201
    food = created.json()["foods"][0]
    assert food["count"] == 1
    assert food["meal_type"] == "breakfast"

    updated = client.patch(
        f"/foods/{food['id']}", headers=auth_headers, json={"name": "Porridge"}
    )
    assert updated.status_code == 200

    listed = client.get(
        "/foods",
        headers=auth_headers,
        params={"start": "2024-03-01", "end": "2024-03-07"},
    )
    assert [item["name"] for item in listed.json()["foods"]] == ["Porridge"]
    assert listed.json()["foods"][0]["id"] == food["id"]

    deleted = client.delete(f"/foods/{food['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert client.get("/foods", headers=auth_headers).json() == {"foods": []}


def test_entries_are_isolated_between_users(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)
    other_headers = {"X-Api-Token": "api-token", "X-User-Id": str(uuid4())}
    food = client.post(
        "/foods",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "name": "Oats", "calories": 300}],
    ).json()["foods"][0]
    workout = client.post(
        "/workouts",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "exercise": "Squat"}],
    ).json()["workouts"][0]
    weight = client.post(
        "/weights", headers=auth_headers, json={"date": "2024-03-05", "weight": 80}
    ).json()["weight"]

    client.patch(
        f"/foods/{food['id']}", headers=other_headers, json={"name": "Hacked"}
    )
    client.patch(
        f"/workouts/{workout['id']}",
        headers=other_headers,
        json={"exercise": "Hacked"},
    )
    client.delete(f"/foods/{food['id']}", headers=other_headers)
    client.delete(f"/workouts/{workout['id']}", headers=other_headers)
    client.delete(f"/weights/{weight['id']}", headers=other_headers)

    foods = client.get("/foods", headers=auth_headers).json()["foods"]
    workouts = client.get("/workouts", headers=auth_headers).json()["workouts"]
    weights = client.get("/weights", headers=auth_headers).json()["weights"]
    assert [item["name"] for item in foods] == ["Oats"]
    assert [item["exercise"] for item in workouts] == ["Squat"]
    assert [item["id"] for item in weights] == [weight["id"]]


def test_patch_rejects_null_required_fields(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)
    food = client.post(
        "/foods",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "name": "Oats", "calories": 300}],
    ).json()["foods"][0]
    workout = client.post(
        "/workouts",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "exercise": "Squat"}],
    ).json()["workouts"][0]

    food_null = client.patch(
        f"/foods/{food['id']}", headers=auth_headers, json={"calories": None}
    )
    workout_null = client.patch(
        f"/workouts/{workout['id']}",
        headers=auth_headers,
        json={"exercise": None},
    )
    cleared_fiber = client.patch(
        f"/foods/{food['id']}", headers=auth_headers, json={"fiber": None}
    )

    assert food_null.status_code == 422
    assert workout_null.status_code == 422
    assert cleared_fiber.status_code == 200
    contributions = client.get("/foods/contributions", headers=auth_headers)
    assert contributions.status_code == 200
    assert contributions.json()["contributions"][0]["total_calories"] == 300


def test_food_validation_errors(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    response = _client(container).post(
        "/foods",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "name": "Oats", "meal_type": "brunch"}],
    )

    assert response.status_code == 422


def test_food_import_and_export(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    imported = client.post(
        "/foods/import",
        headers={**auth_headers, "Content-Type": "text/csv"},
        content="Date,Food,Kcal\n2024-03-05,Oats,300\n2024-03-06,Rice,200\n",
    )
    assert imported.status_code == 200
    assert imported.json()["imported"] == 2

    exported = client.get("/foods/export", headers=auth_headers)
    assert exported.status_code == 200
    assert exported.headers["content-type"].startswith("text/csv")
    assert "fithood-foods-" in exported.headers["content-disposition"]
    assert exported.text.splitlines()[1].startswith("2024-03-06,Rice,200")


def test_import_rejects_undecodable_body(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    response = _client(container).post(
        "/foods/import", headers=auth_headers, content=b"\xff\xfe\xfa"
    )

    assert response.status_code == 400
    assert "utf-8" in response.json()["detail"]


def test_day_operations(
    container: AppContainer, auth_headers: dict[str, str], user_id: UUID
) -> None:
    client = _client(container)
    container.food_service.add_entries(
        user_id, [make_food(date(2024, 3, 5)), make_food(date(2024, 3, 5))]
    )

    marked = client.put(
        "/foods/day/2024-03-05/complete",
        headers=auth_headers,
        json={"is_complete": False},
    )
    deleted = client.delete("/foods/day/2024-03-05", headers=auth_headers)

    assert marked.json() == {"date": "2024-03-05", "is_complete": False}
    assert container.food_service.get_day_completions(
        user_id, date(2024, 3, 5), date(2024, 3, 5)
    ) == {date(2024, 3, 5): False}
    assert deleted.json() == {"deleted": 2}


def test_food_contributions(
    container: AppContainer, auth_headers: dict[str, str], user_id: UUID
) -> None:
    container.food_service.add_entries(
        user_id,
        [
            make_food(date(2024, 3, 5), "Rice 200g", calories=260),
            make_food(date(2024, 3, 6), "rice", calories=130),
            make_food(date(2024, 3, 6), "Apple", calories=95),
        ],
    )

    response = _client(container).get("/foods/contributions", headers=auth_headers)

    contributions = response.json()["contributions"]
    assert contributions[0]["total_calories"] == 390
    assert contributions[0]["count"] == 2
    assert contributions[1]["name"] == "Apple"


def test_workouts_endpoints(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    created = client.post(
        "/workouts",
        headers=auth_headers,
        json=[
            {
                "date": "2024-03-05",
                "exercise": "Running (5km)",
                "category": "cardio",
                "distance": 5,
                "calories_burned": 320,
            },
            {"date": "2024-03-06", "exercise": "Running", "category": "cardio"},
        ],
    )
    assert created.status_code == 201

    stats = client.get("/workouts/stats", headers=auth_headers).json()
    assert stats["exercises"][0]["name"] == "Running"
    assert stats["exercises"][0]["count"] == 2
    assert [item["category"] for item in stats["categories"]] == [
        "strength",
        "cardio",
        "flexibility",
        "other",
    ]

    workout_id = created.json()["workouts"][0]["id"]
    patched = client.patch(
        f"/workouts/{workout_id}", headers=auth_headers, json={"notes": "easy pace"}
    )
    assert patched.status_code == 200

    exported = client.get("/workouts/export", headers=auth_headers)
    assert "easy pace" in exported.text

    imported = client.post(
        "/workouts/import",
        headers=auth_headers,
        content="date,exercise,sets\n2024-03-07,Squat,5\n",
    )
    assert imported.json()["imported"] == 1

    deleted_day = client.delete("/workouts/day/2024-03-06", headers=auth_headers)
    assert deleted_day.json() == {"deleted": 1}
    removed = client.delete(f"/workouts/{workout_id}", headers=auth_headers)
    assert removed.status_code == 200
    remaining = client.get("/workouts", headers=auth_headers).json()["workouts"]
    assert [item["exercise"] for item in remaining] == ["Squat"]


def test_weights_endpoints(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    created = client.post(
        "/weights",
        headers=auth_headers,
        json={"date": "2024-03-05", "weight": 80.5, "body_fat": 18},
    )
    assert created.status_code == 201
    assert client.post(
        "/weights", headers=auth_headers, json={"date": "2024-03-05", "weight": 0}
    ).status_code == 422

    listed = client.get("/weights", headers=auth_headers).json()
    assert listed["weights"][0]["weight"] == 80.5
    assert listed["stats"]["current"] == 80.5
    assert listed["stats"]["change"] == 0

    exported = client.get("/weights/export", headers=auth_headers)
    assert exported.text == "date,weight,bodyFat,notes\n2024-03-05,80.5,18,\n"

    weight_id = created.json()["weight"]["id"]
    removed = client.delete(f"/weights/{weight_id}", headers=auth_headers)
    assert removed.status_code == 200
    remaining = client.get("/weights", headers=auth_headers).json()
    assert remaining["weights"] == []
    assert remaining["stats"]["count"] == 0


def test_profile_endpoints(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    initial = client.get("/profile", headers=auth_headers).json()
    assert initial["is_set"] is False
    assert initial["profile"]["height"] == 170
    assert initial["profile"]["activity_level"] == "moderate"

    saved = client.put(
        "/profile",
        headers=auth_headers,
        json={
            "height": 165,
            "age": 31,
            "gender": "female",
            "activity_level": "light",
            "goal_weight": 60,
            "weekly_goal": 0.25,
        },
    )
    assert saved.status_code == 200

    current = client.get("/profile", headers=auth_headers).json()
    assert current["is_set"] is True
    assert current["profile"]["gender"] == "female"
    assert current["profile"]["goal_weight"] == 60


def test_dashboard_endpoint(
    container: AppContainer, auth_headers: dict[str, str], user_id: UUID
) -> None:
    yesterday = date.today() - timedelta(days=1)
    container.food_service.add_entries(user_id, [make_food(yesterday, calories=1800)])
    container.weight_service.add_entry(user_id, make_weight(yesterday, 80))
    client = _client(container)

    response = client.get("/dashboard", headers=auth_headers, params={"days": 7})

    dashboard = response.json()["dashboard"]
    assert len(dashboard["daily"]) == 7
    assert dashboard["avg_calories"] == 1800
    assert dashboard["latest_weight"] == 80
    assert dashboard["energy"]["bmr"] == 1742.5
    assert client.get(
        "/dashboard", headers=auth_headers, params={"days": 0}
    ).status_code == 422


def test_deficit_export_and_clear_data(
    container: AppContainer, auth_headers: dict[str, str], user_id: UUID
) -> None:
    container.food_service.add_entries(user_id, [make_food(date(2024, 3, 5))])
    client = _client(container)

    exported = client.get(
        "/export/deficit",
        headers=auth_headers,
        params={"start": "2024-03-04", "end": "2024-03-05"},
    )
    assert exported.text.splitlines() == [
        "date,weight,bmr,tdee,caloriesIn,caloriesBurned,deficit",
        "2024-03-04,,0,0,0,0,",
        "2024-03-05,,0,0,300,0,300",
    ]
    assert "fithood-deficit-" in exported.headers["content-disposition"]

    cleared = client.delete("/data", headers=auth_headers)
    assert cleared.json() == {"status": "ok"}
    assert container.food_service.list_all(user_id) == []


def test_food_search_endpoint(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    results = client.get(
        "/food-search", headers=auth_headers, params={"q": "banana"}
    ).json()["results"]
    short = client.get("/food-search", headers=auth_headers, params={"q": "b"})

    assert results[0]["id"] == "fs_33691"
    assert results[0]["calories"] == 89
    assert short.json() == {"results": [], "suggestions": []}


def test_food_search_suggests_past_and_catalog_foods(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)
    client.post(
        "/foods",
        headers=auth_headers,
        json=[
            {"date": "2024-03-04", "name": "Banana Bread", "calories": 250},
            {"date": "2024-03-05", "name": "Banana Bread", "calories": 250},
        ],
    )

    suggestions = client.get(
        "/food-search", headers=auth_headers, params={"q": "banana"}
    ).json()["suggestions"]

    assert [item["name"] for item in suggestions] == [
        "Banana Bread",
        "Banana (1 medium)",
        "Banana Shake (1 glass)",
    ]
    assert suggestions[0]["source"] == "history"
    assert suggestions[1]["source"] == "catalog"
    assert suggestions[1]["serving"] == "1 medium"


def test_food_catalog_categories(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    client = _client(container)

    categories = client.get("/food-search/categories", headers=auth_headers)
    dairy = client.get("/food-search/categories/dairy", headers=auth_headers)
    unknown = client.get("/food-search/categories/pizza", headers=auth_headers)

    assert categories.json()["categories"][0] == "dairy"
    assert len(categories.json()["categories"]) == 8
    assert all(food["category"] == "dairy" for food in dairy.json()["foods"])
    assert "Paneer (100g)" in [food["name"] for food in dairy.json()["foods"]]
    assert unknown.status_code == 422


def test_store_errors_map_to_bad_gateway(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    container.food_service.repository = FailingFoodRepository()

    response = _client(container).post(
        "/foods",
        headers=auth_headers,
        json=[{"date": "2024-03-05", "name": "Oats", "calories": 300}],
    )

    assert response.status_code == 502
    assert response.json() == {"detail": "Storage unavailable, please retry."}
