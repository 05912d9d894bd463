"""Shared test fixtures."""

from collections.abc import Callable
from datetime import date, timedelta

import pytest

from nutrition_goals.config import Settings
from nutrition_goals.containers import AppContainer, build_container
from nutrition_goals.domain.weight import MealEnergyRecord, WeightEntry

HistoryFactory = Callable[[list[tuple[int, float]]], list[WeightEntry]]
MealLogFactory = Callable[[list[int]], list[MealEnergyRecord]]


@pytest.fixture
def today() -> date:
    return date(2026, 3, 20)


@pytest.fixture
def make_history(today: date) -> HistoryFactory:
    """Build weigh-ins from (days ago, weight) pairs."""

    def _make(points: list[tuple[int, float]]) -> list[WeightEntry]:
        return [
            WeightEntry(date=today - timedelta(days=days_ago), weight=weight)
            for days_ago, weight in points
        ]

    return _make


@pytest.fixture
def make_meal_logs(today: date) -> MealLogFactory:
    """Build one meal per day, most recent day first."""

    def _make(daily_calories: list[int]) -> list[MealEnergyRecord]:
        return [
            MealEnergyRecord(date=today - timedelta(days=offset), calories=calories)
            for offset, calories in enumerate(daily_calories)
        ]

    return _make


@pytest.fixture
def flat_history(make_history: HistoryFactory) -> list[WeightEntry]:
    """Sixteen days of weigh-ins within 0.2kg of each other."""
    return make_history([(16, 80.0), (12, 80.1), (8, 80.2), (4, 80.0), (0, 80.1)])


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
