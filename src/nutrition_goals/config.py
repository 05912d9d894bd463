"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_goals.domain.plateau import PlateauPolicy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    plateau_days: int = 14
    plateau_weight_threshold_kg: float = 0.5
    min_weigh_ins: int = 3
    good_adherence_threshold: int = 80
    lean_body_fat_threshold: float = 20
    aggressive_deficit_threshold: float = 750
    adherence_tolerance: float = 0.1
    default_adherence_score: int = 80
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def plateau_policy(self) -> PlateauPolicy:
        """Build the plateau thresholds from settings."""
        return PlateauPolicy(
            plateau_days=self.plateau_days,
            weight_threshold_kg=self.plateau_weight_threshold_kg,
            min_weigh_ins=self.min_weigh_ins,
            good_adherence_threshold=self.good_adherence_threshold,
            lean_body_fat_threshold=self.lean_body_fat_threshold,
            aggressive_deficit_threshold=self.aggressive_deficit_threshold,
            adherence_tolerance=self.adherence_tolerance,
            default_adherence_score=self.default_adherence_score,
        )
