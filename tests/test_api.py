"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from nutrition_goals.api.app import create_app
from nutrition_goals.containers import AppContainer
from nutrition_goals.domain.plateau import PlateauPolicy


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_plateau_endpoint_detects_plateau(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "weight_history": [
            {"date": "2026-03-04", "weight": 80.0},
            {"date": "2026-03-08", "weight": 80.1},
            {"date": "2026-03-12", "weight": 80.2, "source": "synced"},
            {"date": "2026-03-16", "weight": 80.0, "note": "after gym"},
            {"date": "2026-03-20", "weight": 80.1},
        ],
        "calorie_goal": 2000,
        "current_deficit": 500,
        "meal_logs": [
            {"date": "2026-03-19", "calories": 1200},
            {"date": "2026-03-19", "calories": 800},
            {"date": "2026-03-20", "calories": 2050},
        ],
        "today": "2026-03-20",
    }

    response = client.post("/plateau", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["is_plateaued"] is True
    assert data["suggestion"] == "adjust_macros"
    assert data["adherence_score"] == 100
    assert data["days_since_change"] == 16


def test_plateau_endpoint_uses_container_policy(container: AppContainer) -> None:
    container.plateau_policy = PlateauPolicy(min_weigh_ins=10)
    client = TestClient(create_app(container))
    payload = {
        "weight_history": [
            {"date": "2026-03-12", "weight": 80.2},
            {"date": "2026-03-16", "weight": 80.0},
            {"date": "2026-03-20", "weight": 80.1},
        ],
        "calorie_goal": 2000,
        "current_deficit": 500,
        "today": "2026-03-20",
    }

    response = client.post("/plateau", json=payload)

    assert response.status_code == 200
    assert "10 weigh-ins" in response.json()["details"]


def test_plateau_endpoint_rejects_non_positive_weight(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "weight_history": [{"date": "2026-03-20", "weight": 0}],
        "calorie_goal": 2000,
        "current_deficit": 500,
    }

    response = client.post("/plateau", json=payload)

    assert response.status_code == 422


def test_weight_goal_endpoint(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "start_weight": 90,
        "current_weight": 80,
        "target_weight": 70,
        "weekly_goal": 0.5,
        "today": "2026-01-01",
    }

    response = client.post("/goals/weight", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["target_date"] == "2026-05-21"
    assert data["progress_percent"] == 50
    assert [m["target_weight"] for m in data["milestones"]] == [89, 85, 80, 80, 70]
    assert data["milestones"][-1]["xp_reward_points"] == 500


def test_weight_goal_endpoint_rejects_zero_rate(container) -> None:
    client = TestClient(create_app(container))
    payload = {"current_weight": 80, "target_weight": 70, "weekly_goal": 0}

    response = client.post("/goals/weight", json=payload)

    assert response.status_code == 422
    assert "non-zero" in response.json()["detail"]


def test_weight_goal_endpoint_rejects_tiny_rate(container) -> None:
    client = TestClient(create_app(container))
    payload = {"current_weight": 100, "target_weight": 50, "weekly_goal": 0.00001}

    response = client.post("/goals/weight", json=payload)

    assert response.status_code == 422
    assert "out of range" in response.json()["detail"]


def test_nutrition_goals_endpoint_rejects_implausible_body(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "weight_kg": 0.01,
        "height_cm": 1,
        "age": 30,
        "gender": "male",
        "goal": "lose_weight",
        "activity_level": "moderate",
    }

    response = client.post("/goals/nutrition", json=payload)

    assert response.status_code == 422


def test_nutrition_goals_endpoint(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "weight_kg": 80,
        "height_cm": 180,
        "age": 30,
        "gender": "male",
        "goal": "lose_weight",
        "activity_level": "moderate",
    }

    response = client.post("/goals/nutrition", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == 2259
    assert data["protein_grams"] == 160
    assert data["safety_flags"]["carb_floor_applied"] is False


def test_nutrition_goals_endpoint_rejects_unknown_goal(container) -> None:
    client = TestClient(create_app(container))
    payload = {
        "weight_kg": 80,
        "height_cm": 180,
        "age": 30,
        "gender": "male",
        "goal": "bulk_forever",
        "activity_level": "moderate",
    }

    response = client.post("/goals/nutrition", json=payload)

    assert response.status_code == 422


def test_remaining_calories_endpoint(container) -> None:
    client = TestClient(create_app(container))

    losing = client.post(
        "/goals/remaining-calories",
        json={
            "calorie_goal": 2000,
            "consumed": 1500,
            "burned": 300,
            "goal": "lose_weight",
        },
    )
    gaining = client.post(
        "/goals/remaining-calories",
        json={
            "calorie_goal": 2000,
            "consumed": 1500,
            "burned": 300,
            "goal": "gain_muscle",
        },
    )

    assert losing.json() == {"exercise_calories_mode": "none", "remaining": 500}
    assert gaining.json() == {"exercise_calories_mode": "half", "remaining": 650}
