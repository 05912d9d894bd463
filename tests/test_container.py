"""Tests for container wiring and settings."""

from fastapi.testclient import TestClient

from nutrition_goals.config import Settings
from nutrition_goals.containers import build_container


def test_build_container_builds_plateau_policy() -> None:
    settings = Settings(plateau_days=21, lean_body_fat_threshold=18)

    container = build_container(settings)

    assert container.settings is settings
    assert container.plateau_policy.plateau_days == 21
    assert container.plateau_policy.lean_body_fat_threshold == 18
    assert container.plateau_policy.min_weigh_ins == 3


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PLATEAU_DAYS", "10")
    monkeypatch.setenv("AGGRESSIVE_DEFICIT_THRESHOLD", "600")

    policy = Settings().plateau_policy()

    assert policy.plateau_days == 10
    assert policy.aggressive_deficit_threshold == 600
    assert policy.default_adherence_score == 80


def test_asgi_app_serves_health() -> None:
    from nutrition_goals.api.asgi import app

    response = TestClient(app).get("/health")

    assert response.status_code == 200
