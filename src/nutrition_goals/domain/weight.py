"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class WeightSource(StrEnum):
    """Where a weigh-in came from."""

    MANUAL = "manual"
    SYNCED = "synced"


@dataclass(frozen=True)
class WeightEntry:
    """A single recorded weigh-in."""

    date: date
    weight: float
    note: str | None = None
    source: WeightSource = WeightSource.MANUAL


@dataclass(frozen=True)
class MealEnergyRecord:
    """Calories of one logged meal on a given day."""

    date: date
    calories: int


@dataclass(frozen=True)
class WeightMilestone:
    """Intermediate weight target with a gamification reward."""

    target_weight: float
    title: str
    xp_reward_points: int
