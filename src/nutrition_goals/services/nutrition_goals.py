"""Nutritional goal calculations (Mifflin-St Jeor, g/kg macro model)."""

import logging

from nutrition_goals.domain.nutrition import (
    ActivityLevel,
    AdjustedWeight,
    Aggressiveness,
    CarbTarget,
    ExerciseCaloriesMode,
    Gender,
    Goal,
    NutritionalGoals,
    PhysicalData,
    SafetyFlags,
    WaterGoal,
)
from nutrition_goals.services.weight_goals import round_half_up

_logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.INTENSE: 1.725,
    ActivityLevel.VERY_INTENSE: 1.9,
}

GOAL_ADJUSTMENTS = {
    Goal.LOSE_WEIGHT: {
        Aggressiveness.CONSERVATIVE: -250,
        Aggressiveness.MODERATE: -500,
        Aggressiveness.AGGRESSIVE: -750,
    },
    Goal.MAINTAIN_WEIGHT: {
        Aggressiveness.CONSERVATIVE: 0,
        Aggressiveness.MODERATE: 0,
        Aggressiveness.AGGRESSIVE: 0,
    },
    Goal.GAIN_MUSCLE: {
        Aggressiveness.CONSERVATIVE: 200,
        Aggressiveness.MODERATE: 400,
        Aggressiveness.AGGRESSIVE: 700,
    },
}

# (normal, clinical) grams of protein per kg
PROTEIN_TARGETS = {
    Goal.LOSE_WEIGHT: (2.0, 2.2),
    Goal.MAINTAIN_WEIGHT: (1.8, 2.0),
    Goal.GAIN_MUSCLE: (1.8, 2.0),
}

MIN_FAT_PER_KG = 0.7
ABSOLUTE_MIN_FAT_PER_KG = 0.6
MIN_CARBS_G = 80
STANDARD_FIBER_G = 25
CLINICAL_FIBER_G = 30
CONSERVATIVE_TDEE_MULTIPLIER = 0.8
WATER_ML_PER_KG = 35
GLP1_WATER_BONUS_ML = 500
OBESITY_BMI_THRESHOLD = 30
IDEAL_BMI = 25
HIGH_PROTEIN_G_PER_KG = 2.5

_TYPICAL_WEIGHT_KG = (30, 300)
_TYPICAL_AGE = (10, 120)

GLP1_WATER_ALERT = (
    "⚠️ GLP-1 medications increase fluid needs. "
    "Keep up your electrolytes (sodium, potassium)."
)


def calculate_bmr(physical: PhysicalData) -> float:
    """Return basal metabolic rate using the Mifflin-St Jeor equation."""
    low_weight, high_weight = _TYPICAL_WEIGHT_KG
    if not low_weight <= physical.weight_kg <= high_weight:
        _logger.warning(
            "Weight %skg is outside typical range (%s-%skg)",
            physical.weight_kg,
            low_weight,
            high_weight,
        )
    low_age, high_age = _TYPICAL_AGE
    if not low_age <= physical.age <= high_age:
        _logger.warning(
            "Age %s is outside typical range (%s-%s)", physical.age, low_age, high_age
        )

    base = 10 * physical.weight_kg + 6.25 * physical.height_cm - 5 * physical.age
    if physical.gender == Gender.MALE:
        return base + 5
    # Female formula is the conservative choice for everyone else.
    return base - 161


def calculate_tdee(
    bmr: float, activity_level: ActivityLevel, conservative: bool = False
) -> float:
    """Return total daily energy expenditure for an activity level."""
    tdee = bmr * ACTIVITY_MULTIPLIERS[activity_level]
    if conservative:
        return tdee * CONSERVATIVE_TDEE_MULTIPLIER
    return tdee


def calculate_calorie_goal(
    tdee: float,
    goal: Goal,
    aggressiveness: Aggressiveness = Aggressiveness.MODERATE,
) -> int:
    """Return the daily calorie target for a goal."""
    return round_half_up(tdee + GOAL_ADJUSTMENTS[goal][aggressiveness])


def calculate_protein(weight_kg: float, goal: Goal, clinical: bool = False) -> int:
    """Return protein grams from a g/kg target."""
    normal, clinical_target = PROTEIN_TARGETS[goal]
    per_kg = clinical_target if clinical else normal
    return round_half_up(weight_kg * per_kg)


def calculate_fat(weight_kg: float) -> int:
    """Return fat grams, never below the hormonal-health floor."""
    return round_half_up(
        max(weight_kg * MIN_FAT_PER_KG, weight_kg * ABSOLUTE_MIN_FAT_PER_KG)
    )


def calculate_carbs(calories: int, protein_g: int, fat_g: int) -> CarbTarget:
    """Return residual carbs, raising calories when carbs fall under the floor."""
    remaining = calories - protein_g * 4 - fat_g * 9
    carbs = round_half_up(remaining / 4)
    if carbs < MIN_CARBS_G:
        return CarbTarget(
            carb_grams=MIN_CARBS_G,
            adjusted_calories=calories + (MIN_CARBS_G - carbs) * 4,
            was_adjusted=True,
        )
    return CarbTarget(carb_grams=carbs, adjusted_calories=calories, was_adjusted=False)


def calculate_water_goal(weight_kg: float, clinical: bool = False) -> WaterGoal:
    """Return the daily water goal in millilitres."""
    base = round_half_up(weight_kg * WATER_ML_PER_KG)
    if clinical:
        return WaterGoal(
            water_ml=base + GLP1_WATER_BONUS_ML, clinical_alert=GLP1_WATER_ALERT
        )
    return WaterGoal(water_ml=base)


def calculate_adjusted_weight(
    current_weight: float, target_weight: float | None, height_cm: float
) -> AdjustedWeight:
    """Return the weight used for macros, adjusted when BMI is 30 or more."""
    height_m_squared = (height_cm / 100) ** 2
    bmi = current_weight / height_m_squared
    if bmi < OBESITY_BMI_THRESHOLD:
        return AdjustedWeight(weight_for_calc=current_weight, was_adjusted=False)

    effective_target = (
        target_weight if target_weight is not None else IDEAL_BMI * height_m_squared
    )
    adjusted = effective_target + 0.25 * (current_weight - effective_target)
    return AdjustedWeight(
        weight_for_calc=round_half_up(adjusted * 10) / 10, was_adjusted=True
    )


def calculate_nutritional_goals(  # noqa: PLR0913
    physical: PhysicalData,
    goal: Goal,
    activity_level: ActivityLevel,
    aggressiveness: Aggressiveness = Aggressiveness.MODERATE,
    clinical: bool = False,
    conservative_tdee: bool = False,
    target_weight: float | None = None,
) -> NutritionalGoals:
    """Compute calorie, macro and water targets from anthropometric data."""
    adjusted = calculate_adjusted_weight(
        physical.weight_kg, target_weight, physical.height_cm
    )
    macro_weight = adjusted.weight_for_calc

    bmr = calculate_bmr(physical)
    tdee = calculate_tdee(bmr, activity_level, conservative_tdee)
    calories = calculate_calorie_goal(tdee, goal, aggressiveness)

    protein = calculate_protein(macro_weight, goal, clinical)
    fat = calculate_fat(macro_weight)
    carbs = calculate_carbs(calories, protein, fat)
    original_calories = calories
    calories = carbs.adjusted_calories

    water = calculate_water_goal(physical.weight_kg, clinical)
    flags = SafetyFlags(
        low_calorie_alert=calories < bmr,
        carb_floor_applied=carbs.was_adjusted,
        high_protein_alert=protein / macro_weight > HIGH_PROTEIN_G_PER_KG,
        original_calories=original_calories if carbs.was_adjusted else None,
    )

    messages = []
    if flags.low_calorie_alert:
        messages.append(
            "⚠️ Your calorie target is below your basal metabolic rate. "
            "Talk to a nutritionist."
        )
    if flags.carb_floor_applied:
        messages.append(
            "ℹ️ We raised your calories to guarantee the minimum energy "
            "your brain needs."
        )
    if flags.high_protein_alert:
        messages.append("⚠️ High protein intake. Keep yourself well hydrated.")
    if adjusted.was_adjusted:
        messages.append(
            f"ℹ️ Macros were calculated with an adjusted weight "
            f"({macro_weight}kg) for more realistic targets."
        )
    if water.clinical_alert:
        messages.append(water.clinical_alert)

    return NutritionalGoals(
        calories=calories,
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        protein_grams=protein,
        carb_grams=carbs.carb_grams,
        fat_grams=fat,
        fiber_grams=CLINICAL_FIBER_G if clinical else STANDARD_FIBER_G,
        water_ml=water.water_ml,
        water_alert=water.clinical_alert,
        weight_used_for_calc=macro_weight,
        was_weight_adjusted=adjusted.was_adjusted,
        safety_flags=flags,
        safety_messages=messages,
    )


def exercise_calories_mode(
    goal: Goal | None,
    clinical: bool = False,
    preference: ExerciseCaloriesMode | None = None,
) -> ExerciseCaloriesMode:
    """Return how much of the burned exercise calories to credit back."""
    if clinical or goal == Goal.LOSE_WEIGHT:
        return ExerciseCaloriesMode.NONE
    if preference is not None:
        return preference
    if goal == Goal.GAIN_MUSCLE:
        return ExerciseCaloriesMode.HALF
    return ExerciseCaloriesMode.FULL


def calculate_remaining_calories(
    goal: float, consumed: float, burned: float, mode: ExerciseCaloriesMode
) -> float:
    """Return the calories left for the day, never negative."""
    credit = {
        ExerciseCaloriesMode.NONE: 0.0,
        ExerciseCaloriesMode.HALF: burned * 0.5,
        ExerciseCaloriesMode.FULL: burned,
    }[mode]
    return max(0, goal - consumed + credit)
