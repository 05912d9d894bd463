"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_goals.config import Settings
from nutrition_goals.domain.plateau import PlateauPolicy


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    plateau_policy: PlateauPolicy


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        plateau_policy=resolved_settings.plateau_policy(),
    )
