"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from nutribattle.api.models import CompareRequest
from nutribattle.app_logging import configure_logging
from nutribattle.containers import AppContainer
from nutribattle.domain.comparison import ComparisonResult, NutrientComparison
from nutribattle.domain.errors import FoodNotFoundError, InvalidArgumentError
from nutribattle.domain.foods import FoodProfile
from nutribattle.domain.recommendations import (
    AgeGroup,
    CalorieMatch,
    CalorieMatchReport,
    MealType,
    NutritionGoal,
    RecommendationMode,
    SimilarityMatch,
)
from nutribattle.services.calorie_match import (
    daily_calorie_target,
    describe_calorie_plan,
    match_by_calorie,
)
from nutribattle.services.comparison import compare
from nutribattle.services.scoring import grade
from nutribattle.services.similarity import recommend


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        logger.info("Rejected request: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(FoodNotFoundError)
    async def food_not_found(_request: Request, exc: FoodNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/{food_id}/grade")
    async def food_grade(food_id: int, request: Request) -> dict[str, object]:
        """Return the quality grade of a food."""
        state_container: AppContainer = request.app.state.container
        food = state_container.catalog_service.get_food(food_id)
        return {"food_id": food.id, **_serialize_grade(food)}

    @app.get("/foods/{food_id}/recommendations")
    async def food_recommendations(
        food_id: int,
        request: Request,
        k: int | None = None,
        mode: str | None = None,
    ) -> dict[str, object]:
        """Return the foods nutritionally closest to the given one."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        limit = settings.default_recommendations if k is None else k
        if not 1 <= limit <= settings.max_recommendations:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"k must be between 1 and {settings.max_recommendations}",
            )
        resolved_mode = RecommendationMode.parse(mode)
        target = state_container.catalog_service.get_food(food_id)
        matches = recommend(
            state_container.catalog_service.snapshot(), target, limit, resolved_mode
        )
        return {
            "food": _serialize_food(target),
            "mode": resolved_mode.value,
            "recommendations": [_serialize_similarity(match) for match in matches],
        }

    @app.get("/calorie-matches")
    async def calorie_matches(
        request: Request,
        meal_type: str | None = None,
        daily_calories: float | None = None,
        goal: NutritionGoal | None = None,
        age_group: AgeGroup | None = None,
    ) -> dict[str, object]:
        """Return foods portioned to fit a meal's calorie target."""
        state_container: AppContainer = request.app.state.container
        resolved_meal = MealType.parse(meal_type)
        daily_target = (
            daily_calories
            if daily_calories is not None
            else daily_calorie_target(goal, age_group)
        )
        report = match_by_calorie(
            state_container.catalog_service.snapshot(), daily_target, resolved_meal
        )
        return {
            **_serialize_calorie_report(report),
            "reason": describe_calorie_plan(goal, age_group, resolved_meal),
        }

    @app.post("/compare")
    async def compare_foods(
        payload: CompareRequest, request: Request
    ) -> dict[str, object]:
        """Compare up to a few foods nutrient by nutrient."""
        state_container: AppContainer = request.app.state.container
        max_foods = state_container.settings.max_comparison_foods
        if not payload.food_ids or len(payload.food_ids) > max_foods:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Provide between 1 and {max_foods} food ids",
            )
        foods = state_container.catalog_service.get_foods(payload.food_ids)
        return _serialize_comparison(compare(foods))

    return app


def _serialize_food(food: FoodProfile) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "type": food.type.value,
        "calories": food.calories,
        "protein_g": food.protein_g,
        "fat_g": food.fat_g,
        "saturated_fat_g": food.saturated_fat_g,
        "carbs_g": food.carbs_g,
        "sugar_g": food.sugar_g,
        "fiber_g": food.fiber_g,
        "sodium_mg": food.sodium_mg,
        "image_url": food.image_url,
        **_serialize_grade(food),
    }


def _serialize_grade(food: FoodProfile) -> dict[str, object]:
    food_grade = grade(food)
    return {
        "grade": food_grade.value,
        "grade_color": food_grade.color,
        "grade_description": food_grade.description,
    }


def _serialize_similarity(match: SimilarityMatch) -> dict[str, object]:
    return {
        "food": _serialize_food(match.food),
        "similarity": match.similarity,
        "improvements": dict(match.improvements),
        "reason": match.explanation,
    }


def _serialize_calorie_match(match: CalorieMatch) -> dict[str, object]:
    return {
        "food": _serialize_food(match.food),
        "quantity_g": match.quantity_g,
        "calories": match.calories,
        "calorie_deviation": match.calorie_deviation,
        "match_score": match.match_score,
        "reason": match.explanation,
    }


def _serialize_calorie_report(report: CalorieMatchReport) -> dict[str, object]:
    return {
        "meal_type": report.meal_type.value if report.meal_type else None,
        "daily_calorie_target": report.daily_calorie_target,
        "target_calories": report.meal_calorie_target,
        "matches": [_serialize_calorie_match(match) for match in report.matches],
        "skipped_food_ids": list(report.skipped),
    }


def _serialize_nutrient(comparison: NutrientComparison) -> dict[str, object]:
    return {
        "nutrient": comparison.nutrient,
        "unit": comparison.unit,
        "direction": comparison.direction.value,
        "values": [
            {
                "food_id": value.food_id,
                "food_name": value.food_name,
                "value": value.value,
                "is_best": value.is_best,
                "is_worst": value.is_worst,
            }
            for value in comparison.values
        ],
    }


def _serialize_comparison(result: ComparisonResult) -> dict[str, object]:
    return {
        "foods": [_serialize_food(food) for food in result.foods],
        "nutrients": [_serialize_nutrient(nutrient) for nutrient in result.nutrients],
        "healthiest_food_id": result.healthiest.id,
        "recommendations": list(result.advisories),
    }
