"""Weight plateau detection and intervention suggestions."""

import logging
from collections import defaultdict
from collections.abc import Sequence
from datetime import date, timedelta

from nutrition_goals.domain.plateau import (
    PlateauAnalysis,
    PlateauPolicy,
    PlateauSuggestion,
)
from nutrition_goals.domain.weight import MealEnergyRecord, WeightEntry
from nutrition_goals.services.weight_goals import round_half_up

_logger = logging.getLogger(__name__)

# Net loss over the window that counts as active progress.
CELEBRATE_LOSS_KG = 0.5

DEFAULT_POLICY = PlateauPolicy()

_MESSAGES = {
    PlateauSuggestion.REFEED: "📊 Plateau detected. We suggest a refeed day.",
    PlateauSuggestion.MAINTENANCE_WEEK: (
        "📊 Plateau detected. We recommend a maintenance week."
    ),
    PlateauSuggestion.ADJUST_MACROS: "📊 Plateau detected. Let's adjust your macros.",
    PlateauSuggestion.REDUCE_CARDIO: (
        "📊 Plateau detected. Consider reducing your cardio."
    ),
    PlateauSuggestion.CHECK_LOGS: "🤔 Plateau detected. Let's review your logs.",
    PlateauSuggestion.KEEP_GOING: "✅ Keep following your current plan.",
    PlateauSuggestion.CELEBRATE: "🎉 Great progress! Keep it up!",
}

_DETAILS = {
    PlateauSuggestion.REFEED: (
        "Your body may be in conservation mode. One day eating at maintenance "
        '(no deficit) can "reset" leptin and unlock your metabolism. '
        "Increase your calories by {deficit}kcal for one day."
    ),
    PlateauSuggestion.MAINTENANCE_WEEK: (
        "Your {deficit}kcal deficit is intense. A strategic 5-7 day break eating "
        "at maintenance will help your metabolism recover without gaining weight."
    ),
    PlateauSuggestion.ADJUST_MACROS: (
        "Raising protein to 2.2g/kg can speed up fat loss and preserve muscle "
        "mass. Consider adding more strength training too."
    ),
    PlateauSuggestion.REDUCE_CARDIO: (
        "Too much cardio can raise cortisol and make weight loss harder. "
        "Try cutting it by 20% and prioritise strength training."
    ),
    PlateauSuggestion.CHECK_LOGS: (
        "Your adherence is at {adherence}%. Check that you are logging every "
        'meal and portion accurately. Small "slips" can cancel out the deficit.'
    ),
    PlateauSuggestion.KEEP_GOING: (
        "Your progress is on track. Keep following your meal plan."
    ),
    PlateauSuggestion.CELEBRATE: (
        "You lost {lost_kg:.1f}kg over the last {days} days. "
        "Stay disciplined and patient."
    ),
}


def plateau_message(suggestion: PlateauSuggestion) -> str:
    """Return the headline shown for a suggestion."""
    return _MESSAGES[suggestion]


def plateau_details(
    suggestion: PlateauSuggestion,
    adherence_score: int,
    current_deficit: float,
    lost_kg: float = 0.0,
    days: int = DEFAULT_POLICY.plateau_days,
) -> str:
    """Return the explanation shown for a suggestion."""
    return _DETAILS[suggestion].format(
        deficit=f"{current_deficit:g}",
        adherence=adherence_score,
        lost_kg=lost_kg,
        days=days,
    )


def detect_plateau(  # noqa: PLR0913
    weight_history: Sequence[WeightEntry],
    calorie_goal: float,
    current_deficit: float,
    body_fat_percentage: float | None = None,
    meal_logs: Sequence[MealEnergyRecord] | None = None,
    *,
    today: date | None = None,
    policy: PlateauPolicy = DEFAULT_POLICY,
) -> PlateauAnalysis:
    """Classify a weight history and suggest an intervention."""
    reference_day = today or date.today()
    cutoff = reference_day - timedelta(days=policy.plateau_days)
    recent = sorted(
        (entry for entry in weight_history if entry.date > cutoff),
        key=lambda entry: entry.date,
    )

    if len(recent) < policy.min_weigh_ins:
        return PlateauAnalysis(
            is_plateaued=False,
            days_since_change=0,
            weight_variation=0.0,
            adherence_score=100,
            suggestion=PlateauSuggestion.KEEP_GOING,
            message="Keep logging your weight regularly.",
            details=(
                f"We need at least {policy.min_weigh_ins} weigh-ins in the last "
                f"{policy.plateau_days} days to analyse your progress."
            ),
        )

    weights = [entry.weight for entry in recent]
    weight_variation = max(weights) - min(weights)
    weight_change = weights[-1] - weights[0]
    days_since_change = calculate_days_since_change(
        weight_history, policy.weight_threshold_kg
    )
    adherence_score = calculate_adherence(meal_logs, calorie_goal, policy)

    if weight_change < -CELEBRATE_LOSS_KG:
        return PlateauAnalysis(
            is_plateaued=False,
            days_since_change=days_since_change,
            weight_variation=weight_variation,
            adherence_score=adherence_score,
            suggestion=PlateauSuggestion.CELEBRATE,
            message=plateau_message(PlateauSuggestion.CELEBRATE),
            details=plateau_details(
                PlateauSuggestion.CELEBRATE,
                adherence_score,
                current_deficit,
                lost_kg=abs(weight_change),
                days=policy.plateau_days,
            ),
        )

    is_plateaued = (
        weight_variation <= policy.weight_threshold_kg
        and days_since_change >= policy.plateau_days
    )
    if not is_plateaued:
        return PlateauAnalysis(
            is_plateaued=False,
            days_since_change=days_since_change,
            weight_variation=weight_variation,
            adherence_score=adherence_score,
            suggestion=PlateauSuggestion.KEEP_GOING,
            message=plateau_message(PlateauSuggestion.KEEP_GOING),
            details=plateau_details(
                PlateauSuggestion.KEEP_GOING, adherence_score, current_deficit
            ),
        )

    suggestion = choose_intervention(
        adherence_score, body_fat_percentage, current_deficit, policy
    )
    _logger.info(
        "Plateau detected: days_since_change=%s variation=%.2f suggestion=%s",
        days_since_change,
        weight_variation,
        suggestion.value,
    )
    return PlateauAnalysis(
        is_plateaued=True,
        days_since_change=days_since_change,
        weight_variation=weight_variation,
        adherence_score=adherence_score,
        suggestion=suggestion,
        message=plateau_message(suggestion),
        details=plateau_details(suggestion, adherence_score, current_deficit),
    )


def choose_intervention(
    adherence_score: int,
    body_fat_percentage: float | None,
    current_deficit: float,
    policy: PlateauPolicy = DEFAULT_POLICY,
) -> PlateauSuggestion:
    """Pick the intervention for a confirmed plateau, first match wins."""
    if adherence_score < policy.good_adherence_threshold:
        return PlateauSuggestion.CHECK_LOGS
    if (
        body_fat_percentage is not None
        and body_fat_percentage < policy.lean_body_fat_threshold
    ):
        return PlateauSuggestion.REFEED
    if current_deficit >= policy.aggressive_deficit_threshold:
        return PlateauSuggestion.MAINTENANCE_WEEK
    return PlateauSuggestion.ADJUST_MACROS


def calculate_days_since_change(
    weight_history: Sequence[WeightEntry],
    threshold_kg: float = DEFAULT_POLICY.weight_threshold_kg,
) -> int:
    """Return days between the latest weigh-in and the last significant change."""
    if len(weight_history) < 2:
        return 0

    ordered = sorted(weight_history, key=lambda entry: entry.date, reverse=True)
    latest = ordered[0]
    for entry in ordered[1:]:
        if abs(entry.weight - latest.weight) > threshold_kg:
            return (latest.date - entry.date).days
    return (latest.date - ordered[-1].date).days


def calculate_adherence(
    meal_logs: Sequence[MealEnergyRecord] | None,
    calorie_goal: float,
    policy: PlateauPolicy = DEFAULT_POLICY,
) -> int:
    """Return the percentage of logged days within tolerance of the calorie goal."""
    if not meal_logs:
        return policy.default_adherence_score

    daily_calories: dict[date, int] = defaultdict(int)
    for meal in meal_logs:
        daily_calories[meal.date] += meal.calories

    tolerance = calorie_goal * policy.adherence_tolerance
    days_on_track = sum(
        1
        for calories in daily_calories.values()
        if calorie_goal - tolerance <= calories <= calorie_goal + tolerance
    )
    return round_half_up(days_on_track / len(daily_calories) * 100)
