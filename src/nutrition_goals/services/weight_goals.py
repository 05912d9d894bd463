"""Weight goal arithmetic: target dates, progress and milestones."""

import math
from datetime import date, timedelta

from nutrition_goals.domain.weight import WeightMilestone

_FIVE_KG = 5
_TEN_KG = 10


class InvalidRateError(ValueError):
    """Raised when a weekly weight change rate cannot produce a target date."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending ties towards +infinity."""
    return math.floor(value + 0.5)


def estimate_target_date(
    current_weight: float,
    target_weight: float,
    weekly_goal: float,
    today: date | None = None,
) -> date:
    """Return the date the target is reached at a constant weekly rate."""
    rate = abs(weekly_goal)
    if rate == 0 or math.isnan(rate):
        raise InvalidRateError("Weekly goal must be a non-zero rate")
    start = today or date.today()
    try:
        weeks_needed = math.ceil(abs(current_weight - target_weight) / rate)
        return start + timedelta(days=weeks_needed * 7)
    except (OverflowError, ValueError) as exc:
        raise InvalidRateError("Target date is out of range for this rate") from exc


def calculate_weight_progress(
    start_weight: float, current_weight: float, target_weight: float
) -> int:
    """Return progress towards the target weight as a 0-100 percentage."""
    total_change = start_weight - target_weight
    if total_change == 0:
        return 100
    progress = (start_weight - current_weight) / total_change * 100
    return max(0, min(100, round_half_up(progress)))


def generate_milestones(
    start_weight: float, target_weight: float
) -> list[WeightMilestone]:
    """Return milestones ordered from the first reached to the goal."""
    total_change = abs(start_weight - target_weight)
    is_losing = start_weight > target_weight
    direction = -1 if is_losing else 1

    milestones = [
        WeightMilestone(
            target_weight=start_weight + direction,
            title="First kilo!",
            xp_reward_points=50,
        )
    ]
    if total_change >= _FIVE_KG:
        milestones.append(
            WeightMilestone(
                target_weight=start_weight + direction * _FIVE_KG,
                title="5 kg club!",
                xp_reward_points=150,
            )
        )
    if total_change >= _TEN_KG:
        milestones.append(
            WeightMilestone(
                target_weight=start_weight + direction * _TEN_KG,
                title="10 kg transformation!",
                xp_reward_points=300,
            )
        )

    halfway = start_weight + (target_weight - start_weight) / 2
    milestones.append(
        WeightMilestone(
            target_weight=round_half_up(halfway * 10) / 10,
            title="Halfway there! 🎯",
            xp_reward_points=200,
        )
    )
    milestones.append(
        WeightMilestone(
            target_weight=target_weight,
            title="🏆 GOAL REACHED!",
            xp_reward_points=500,
        )
    )

    return sorted(
        milestones,
        key=lambda milestone: milestone.target_weight,
        reverse=is_losing,
    )
