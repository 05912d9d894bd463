"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field

from nutrition_goals.domain.nutrition import (
    ActivityLevel,
    Aggressiveness,
    ExerciseCaloriesMode,
    Gender,
    Goal,
    PhysicalData,
)
from nutrition_goals.domain.weight import MealEnergyRecord, WeightEntry, WeightSource


class WeightEntryPayload(BaseModel):
    """Weigh-in payload."""

    date: date
    weight: float = Field(gt=0)
    note: str | None = None
    source: WeightSource = WeightSource.MANUAL

    def to_domain(self) -> WeightEntry:
        """Convert to a domain weight entry."""
        return WeightEntry(
            date=self.date, weight=self.weight, note=self.note, source=self.source
        )


class MealEnergyPayload(BaseModel):
    """Meal calories payload."""

    date: date
    calories: int = Field(ge=0)

    def to_domain(self) -> MealEnergyRecord:
        """Convert to a domain meal energy record."""
        return MealEnergyRecord(date=self.date, calories=self.calories)


class PlateauRequest(BaseModel):
    """Plateau analysis request."""

    weight_history: list[WeightEntryPayload]
    calorie_goal: float = Field(ge=0)
    current_deficit: float
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    meal_logs: list[MealEnergyPayload] | None = None
    today: date | None = None


class WeightGoalRequest(BaseModel):
    """Weight goal projection request."""

    current_weight: float = Field(gt=0)
    target_weight: float = Field(gt=0)
    weekly_goal: float
    start_weight: float | None = Field(default=None, gt=0)
    today: date | None = None


class NutritionGoalsRequest(BaseModel):
    """Nutritional goals request."""

    weight_kg: float = Field(ge=20)
    height_cm: float = Field(ge=50)
    age: int = Field(gt=0)
    gender: Gender
    goal: Goal
    activity_level: ActivityLevel
    aggressiveness: Aggressiveness = Aggressiveness.MODERATE
    clinical: bool = False
    conservative_tdee: bool = False
    target_weight: float | None = Field(default=None, gt=0)

    def physical_data(self) -> PhysicalData:
        """Return the anthropometric part of the request."""
        return PhysicalData(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            gender=self.gender,
        )


class RemainingCaloriesRequest(BaseModel):
    """Remaining calories request."""

    calorie_goal: float = Field(ge=0)
    consumed: float = Field(default=0, ge=0)
    burned: float = Field(default=0, ge=0)
    goal: Goal | None = None
    clinical: bool = False
    preference: ExerciseCaloriesMode | None = None
