"""Nutrition goal domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class Gender(StrEnum):
    """Gender used to pick the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(StrEnum):
    """Body composition goal."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    GAIN_MUSCLE = "gain_muscle"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"
    VERY_INTENSE = "very_intense"


class Aggressiveness(StrEnum):
    """How hard the calorie adjustment pushes towards the goal."""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class ExerciseCaloriesMode(StrEnum):
    """Share of burned exercise calories credited back to the daily budget."""

    NONE = "none"
    HALF = "half"
    FULL = "full"


@dataclass(frozen=True)
class PhysicalData:
    """Anthropometric inputs."""

    weight_kg: float
    height_cm: float
    age: int
    gender: Gender


@dataclass(frozen=True)
class AdjustedWeight:
    """Weight used for macro targets, possibly adjusted for obesity."""

    weight_for_calc: float
    was_adjusted: bool


@dataclass(frozen=True)
class CarbTarget:
    """Residual carbs with the calorie total after the carb floor."""

    carb_grams: int
    adjusted_calories: int
    was_adjusted: bool


@dataclass(frozen=True)
class WaterGoal:
    """Daily water target."""

    water_ml: int
    clinical_alert: str | None = None


@dataclass(frozen=True)
class SafetyFlags:
    """Warnings raised while computing nutritional goals."""

    low_calorie_alert: bool
    carb_floor_applied: bool
    high_protein_alert: bool
    original_calories: int | None = None


@dataclass(frozen=True)
class NutritionalGoals:
    """Daily calorie, macro and water targets."""

    calories: int
    bmr: int
    tdee: int
    protein_grams: int
    carb_grams: int
    fat_grams: int
    fiber_grams: int
    water_ml: int
    weight_used_for_calc: float
    was_weight_adjusted: bool
    safety_flags: SafetyFlags
    water_alert: str | None = None
    safety_messages: list[str] = field(default_factory=list)
