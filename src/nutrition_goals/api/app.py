"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request

from nutrition_goals.api.models import (
    NutritionGoalsRequest,
    PlateauRequest,
    RemainingCaloriesRequest,
    WeightGoalRequest,
)
from nutrition_goals.app_logging import configure_logging
from nutrition_goals.containers import AppContainer
from nutrition_goals.services.nutrition_goals import (
    calculate_nutritional_goals,
    calculate_remaining_calories,
    exercise_calories_mode,
)
from nutrition_goals.services.plateau import detect_plateau
from nutrition_goals.services.weight_goals import (
    InvalidRateError,
    calculate_weight_progress,
    estimate_target_date,
    generate_milestones,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/goals/weight")
    async def weight_goal(payload: WeightGoalRequest) -> dict[str, object]:
        """Project the target date, progress and milestones for a weight goal."""
        start_weight = payload.start_weight or payload.current_weight
        try:
            target_date = estimate_target_date(
                payload.current_weight,
                payload.target_weight,
                payload.weekly_goal,
                today=payload.today,
            )
        except InvalidRateError as exc:
            logger.info("Rejected weight goal: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        milestones = generate_milestones(start_weight, payload.target_weight)
        return {
            "target_date": target_date.isoformat(),
            "progress_percent": calculate_weight_progress(
                start_weight, payload.current_weight, payload.target_weight
            ),
            "milestones": [asdict(milestone) for milestone in milestones],
        }

    @app.post("/goals/nutrition")
    async def nutrition_goals(payload: NutritionGoalsRequest) -> dict[str, object]:
        """Compute daily calorie, macro and water targets."""
        goals = calculate_nutritional_goals(
            payload.physical_data(),
            payload.goal,
            payload.activity_level,
            aggressiveness=payload.aggressiveness,
            clinical=payload.clinical,
            conservative_tdee=payload.conservative_tdee,
            target_weight=payload.target_weight,
        )
        return asdict(goals)

    @app.post("/goals/remaining-calories")
    async def remaining_calories(
        payload: RemainingCaloriesRequest,
    ) -> dict[str, object]:
        """Return the calories left for the day."""
        mode = exercise_calories_mode(
            payload.goal, clinical=payload.clinical, preference=payload.preference
        )
        return {
            "exercise_calories_mode": mode.value,
            "remaining": calculate_remaining_calories(
                payload.calorie_goal, payload.consumed, payload.burned, mode
            ),
        }

    @app.post("/plateau")
    async def plateau(payload: PlateauRequest, request: Request) -> dict[str, object]:
        """Analyse a weight history for a plateau."""
        state_container: AppContainer = request.app.state.container
        meal_logs = (
            [meal.to_domain() for meal in payload.meal_logs]
            if payload.meal_logs is not None
            else None
        )
        analysis = detect_plateau(
            [entry.to_domain() for entry in payload.weight_history],
            payload.calorie_goal,
            payload.current_deficit,
            body_fat_percentage=payload.body_fat_percentage,
            meal_logs=meal_logs,
            today=payload.today,
            policy=state_container.plateau_policy,
        )
        return asdict(analysis)

    return app
