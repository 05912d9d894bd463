"""Domain models for plateau analysis."""

from dataclasses import dataclass
from enum import StrEnum


class PlateauSuggestion(StrEnum):
    """Intervention suggested after analysing a weight trend."""

    REFEED = "refeed"
    MAINTENANCE_WEEK = "maintenance_week"
    ADJUST_MACROS = "adjust_macros"
    # Has message text but no trigger in the decision tree.
    REDUCE_CARDIO = "reduce_cardio"
    CHECK_LOGS = "check_logs"
    KEEP_GOING = "keep_going"
    CELEBRATE = "celebrate"


@dataclass(frozen=True)
class PlateauPolicy:
    """Thresholds used by the plateau analyzer."""

    plateau_days: int = 14
    weight_threshold_kg: float = 0.5
    min_weigh_ins: int = 3
    good_adherence_threshold: int = 80
    lean_body_fat_threshold: float = 20
    aggressive_deficit_threshold: float = 750
    adherence_tolerance: float = 0.1
    default_adherence_score: int = 80


@dataclass(frozen=True)
class PlateauAnalysis:
    """Result of a plateau analysis."""

    is_plateaued: bool
    days_since_change: int
    weight_variation: float
    adherence_score: int
    suggestion: PlateauSuggestion
    message: str
    details: str
