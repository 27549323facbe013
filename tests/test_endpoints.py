"""
HTTP-level tests for the MealTrack API.

MEAL LOGGING FLOW
=================

1. POST /api/foods            {"food": {"name": "burrito", "calories": 400}}
2. POST /api/meals            {"food_ids": "1,2", "category": "breakfast", "date": "2017/5/1"}
3. GET  /api/meals/breakfast/2017/5/1
   -> [{"food_id": 1, "food_name": "burrito", "calories": 400,
        "category_name": "breakfast", "date": "2017-05-01", ...}, ...]
4. GET  /api/meals/breakfast/2017/5/1/summary
   -> {"meal_count": 2, "total_calories": 650, ...}
"""

from fastapi.testclient import TestClient

from test_fixtures import client, database, db_session, make_food, make_category
from app.config import Settings
from main import create_app


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client: TestClient):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["service"] == "MealTrack"
    assert "X-Request-ID" in r.headers


def test_database_health_check(client: TestClient):
    r = client.get("/health-check/db")
    assert r.status_code == 200
    assert r.json()["database"] == "reachable"


# =============================================================================
# FOODS
# =============================================================================


def test_list_foods_returns_id_name_calories(client: TestClient, db_session):
    food = make_food(db_session, "burrito", 700)

    r = client.get("/api/foods")

    assert r.status_code == 200
    body = r.json()
    assert body[0]["id"] == food.id
    assert body[0]["name"] == "burrito"
    assert body[0]["calories"] == 700
    assert body[0]["created_at"]


def test_create_food_with_wrapped_payload(client: TestClient):
    r = client.post("/api/foods", json={"food": {"name": "chicken", "calories": 200}})

    assert r.status_code == 201
    assert r.json()["name"] == "chicken"
    assert r.json()["calories"] == 200

    listed = client.get("/api/foods").json()
    assert [(f["name"], f["calories"]) for f in listed] == [("chicken", 200)]


def test_create_food_with_flat_payload(client: TestClient):
    r = client.post("/api/foods", json={"name": "taco", "calories": 250})
    assert r.status_code == 201
    assert r.json()["id"] is not None


def test_create_food_validation(client: TestClient):
    assert client.post("/api/foods", json={"name": "", "calories": 10}).status_code == 422
    assert client.post("/api/foods", json={"name": "x", "calories": -1}).status_code == 422
    r = client.post("/api/foods", json={"name": "x"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_food_name(client: TestClient, db_session):
    food = make_food(db_session, "popcorn", 50)

    r = client.patch(
        f"/api/foods/{food.id}",
        json={"food": {"name": "chocolate cake", "calories": 300}},
    )

    assert r.status_code == 200
    assert r.json()["name"] == "chocolate cake"
    assert r.json()["calories"] == 300


def test_update_food_calories_but_not_name(client: TestClient, db_session):
    food = make_food(db_session, "popcorn", 50)

    r = client.patch(f"/api/foods/{food.id}", json={"food": {"name": "", "calories": 1000}})

    assert r.status_code == 200
    assert r.json()["name"] == "popcorn"
    assert r.json()["calories"] == 1000


def test_update_missing_food(client: TestClient):
    r = client.patch("/api/foods/9999", json={"calories": 10})
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_delete_food(client: TestClient, db_session):
    food = make_food(db_session, "burrito", 700)

    r = client.delete(f"/api/foods/{food.id}")
    assert r.status_code == 200
    assert r.json()["removed"] == food.id

    assert client.get("/api/foods").json() == []
    assert client.delete(f"/api/foods/{food.id}").status_code == 404


def test_delete_logged_food_conflicts(client: TestClient, db_session):
    food = make_food(db_session, "burrito")
    make_category(db_session, "breakfast")
    client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "breakfast", "date": "2017/5/1"},
    )

    r = client.delete(f"/api/foods/{food.id}")

    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


# =============================================================================
# CATEGORIES
# =============================================================================


def test_create_and_list_categories(client: TestClient):
    assert client.post("/api/categories", json={"name": "breakfast"}).status_code == 201
    assert client.post("/api/categories", json={"name": "breakfast"}).status_code == 409

    names = [c["name"] for c in client.get("/api/categories").json()]
    assert names == ["breakfast"]


def test_startup_seeds_default_categories(database):
    config = Settings(
        default_categories=["breakfast", "lunch", "dinner", "snacks"],
        seed_default_categories=True,
        db_init_attempts=1,
    )

    with TestClient(create_app(database=database, config=config)) as c:
        names = [cat["name"] for cat in c.get("/api/categories").json()]

    assert names == ["breakfast", "lunch", "dinner", "snacks"]


# =============================================================================
# MEALS
# =============================================================================


def test_get_breakfast_for_day(client: TestClient, db_session):
    food = make_food(db_session, "burrito", 400)
    category = make_category(db_session, "breakfast")
    client.post(
        "/api/meals",
        json={"food_ids": str(food.id), "category": "breakfast", "date": "2017/5/1"},
    )

    r = client.get("/api/meals/breakfast/2017/5/1")

    assert r.status_code == 200
    body = r.json()
    assert len(body) == 1
    assert body[0]["food_id"] == food.id
    assert body[0]["category_id"] == category.id
    assert body[0]["food_name"] == "burrito"
    assert body[0]["calories"] == 400
    assert body[0]["category_name"] == "breakfast"
    assert body[0]["date"] == "2017-05-01"


def test_empty_day_returns_empty_list(client: TestClient, db_session):
    food = make_food(db_session, "taco", 250)
    make_category(db_session, "lunch")
    client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "lunch", "date": "2015/11/15"},
    )

    for path in ["/api/meals/lunch/2001/02/20", "/api/meals/lunch/2001/2/20"]:
        r = client.get(path)
        assert r.status_code == 200
        assert r.json() == []

    assert len(client.get("/api/meals/lunch/2015/11/15").json()) == 1


def test_unknown_category_query_is_empty(client: TestClient):
    r = client.get("/api/meals/brunch/2017/5/1")
    assert r.status_code == 200
    assert r.json() == []


def test_post_meals_with_comma_delimited_ids(client: TestClient, db_session):
    burrito = make_food(db_session, "burrito", 400)
    taco = make_food(db_session, "taco", 250)
    make_category(db_session, "dinner")

    r = client.post(
        "/api/meals",
        json={
            "food_ids": f"{burrito.id}, {taco.id}",
            "category": "dinner",
            "date": "2017-02-02",
        },
    )

    assert r.status_code == 201
    created = r.json()
    assert [m["food_id"] for m in created] == [burrito.id, taco.id]
    assert {m["date"] for m in created} == {"2017-02-02"}

    views = client.get("/api/meals/dinner/2017/2/2").json()
    assert {v["food_name"] for v in views} == {"burrito", "taco"}

    summary = client.get("/api/meals/dinner/2017/02/02/summary").json()
    assert summary["meal_count"] == 2
    assert summary["total_calories"] == 650


def test_post_meals_accepts_date_triplet(client: TestClient, db_session):
    food = make_food(db_session, "popcorn", 50)
    make_category(db_session, "snacks")

    r = client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "snacks", "date": [2017, 5, 1]},
    )

    assert r.status_code == 201
    assert len(client.get("/api/meals/snacks/2017/05/01").json()) == 1


def test_post_meals_unknown_category(client: TestClient, db_session):
    food = make_food(db_session, "burrito")

    r = client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "brunch", "date": "2017/5/1"},
    )

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "CATEGORY_NOT_FOUND"


def test_post_meals_unknown_food_writes_nothing(client: TestClient, db_session):
    food = make_food(db_session, "burrito")
    make_category(db_session, "breakfast")

    r = client.post(
        "/api/meals",
        json={"food_ids": f"{food.id},9999", "category": "breakfast", "date": "2017/5/1"},
    )

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "FOOD_NOT_FOUND"
    assert r.json()["error"]["details"]["food_id"] == 9999
    assert client.get("/api/meals/breakfast/2017/5/1").json() == []


def test_post_meals_validation(client: TestClient):
    for body in [
        {"food_ids": "", "category": "breakfast", "date": "2017/5/1"},
        {"food_ids": "1,abc", "category": "breakfast", "date": "2017/5/1"},
        {"food_ids": [1], "category": "", "date": "2017/5/1"},
        {"food_ids": [1], "category": "breakfast"},
    ]:
        assert client.post("/api/meals", json=body).status_code == 422, body


def test_invalid_dates_are_rejected(client: TestClient, db_session):
    food = make_food(db_session, "burrito")
    make_category(db_session, "breakfast")

    r = client.get("/api/meals/breakfast/2017/15/1")
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_DATE"

    r = client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "breakfast", "date": "not-a-date"},
    )
    assert r.status_code == 400


def test_get_and_delete_meal(client: TestClient, db_session):
    food = make_food(db_session, "burrito")
    make_category(db_session, "breakfast")
    (meal,) = client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "breakfast", "date": "2017/5/1"},
    ).json()

    assert client.get(f"/api/meals/{meal['id']}").json()["food_id"] == food.id

    r = client.delete(f"/api/meals/{meal['id']}")
    assert r.status_code == 200

    assert client.get(f"/api/meals/{meal['id']}").status_code == 404
    assert client.delete(f"/api/meals/{meal['id']}").status_code == 404
    assert client.get("/api/meals/breakfast/2017/5/1").json() == []


def test_post_meals_with_huge_year_is_rejected(client: TestClient, db_session):
    food = make_food(db_session, "burrito")
    make_category(db_session, "breakfast")

    r = client.post(
        "/api/meals",
        json={"food_ids": [food.id], "category": "breakfast", "date": [10**20, 5, 1]},
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_DATE"
    assert client.get("/api/meals/breakfast/2017/5/1").json() == []


def test_post_meals_with_wrapped_meal_body(client: TestClient, db_session):
    burrito = make_food(db_session, "burrito", 400)
    taco = make_food(db_session, "taco", 250)
    make_category(db_session, "breakfast")

    r = client.post(
        "/api/meals",
        json={
            "meal": {
                "foodIds": f"{burrito.id},{taco.id}",
                "category": "breakfast",
                "date": "2017/5/15",
            }
        },
    )

    assert r.status_code == 201
    created = r.json()
    assert [m["food_id"] for m in created] == [burrito.id, taco.id]
    assert {m["category"] for m in created} == {"breakfast"}
    assert {m["date"] for m in created} == {"2017-05-15"}

    assert len(client.get("/api/meals/breakfast/2017/5/15").json()) == 2
    assert client.get(f"/api/meals/{created[0]['id']}").json()["category"] == "breakfast"
