"""Portion-sized food matches for a meal calorie target."""

import logging
import math
from collections.abc import Iterable

from nutribattle.domain.errors import InvalidArgumentError
from nutribattle.domain.foods import FoodProfile
from nutribattle.domain.recommendations import (
    AgeGroup,
    CalorieMatch,
    CalorieMatchReport,
    MealType,
    NutritionGoal,
)
from nutribattle.services.rounding import format_half_up, round_half_up

_logger = logging.getLogger(__name__)

_MEAL_SHARES = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.10,
}
DEFAULT_MEAL_SHARE = 0.25

# (weight gain, weight loss, maintain) daily kcal per age group.
_DAILY_CALORIES = {
    AgeGroup.CHILD: (2000.0, 1400.0, 1700.0),
    AgeGroup.MIDDLE_AGE: (2800.0, 1800.0, 2300.0),
    AgeGroup.OLD_AGE: (2400.0, 1600.0, 2000.0),
}
DEFAULT_DAILY_CALORIES = 2000.0

MAX_MATCHES = 5
MAX_PROTEIN_SCORE = 30.0
MAX_FIBER_SCORE = 20.0
MAX_SUGAR_PENALTY = 20.0


def match_by_calorie(
    candidates: Iterable[FoodProfile],
    daily_calorie_target: float,
    meal_type: MealType | None,
) -> CalorieMatchReport:
    """Rank foods by how well a portion fits the meal's share of daily calories."""
    if not math.isfinite(daily_calorie_target) or daily_calorie_target <= 0:
        raise InvalidArgumentError(
            f"Daily calorie target must be positive, got {daily_calorie_target}"
        )
    meal_target = meal_calorie_target(daily_calorie_target, meal_type)

    matches: list[CalorieMatch] = []
    skipped: list[int] = []
    for food in candidates:
        if food.calories <= 0:
            _logger.debug("Skipping %s: no energy content", food.name)
            skipped.append(food.id)
            continue
        matches.append(_match(food, meal_target))

    ranked = sorted(matches, key=lambda match: match.match_score, reverse=True)
    _logger.info(
        "Calorie matches for %s (target=%.0f kcal): %s scored, %s skipped",
        meal_type or "unspecified meal",
        meal_target,
        len(matches),
        len(skipped),
    )
    return CalorieMatchReport(
        meal_type=meal_type,
        daily_calorie_target=daily_calorie_target,
        meal_calorie_target=meal_target,
        matches=tuple(ranked[:MAX_MATCHES]),
        skipped=tuple(skipped),
    )


def meal_calorie_target(
    daily_calorie_target: float, meal_type: MealType | None
) -> float:
    """Share of the daily target allocated to a meal; unknown meals get 25%."""
    return daily_calorie_target * _MEAL_SHARES.get(meal_type, DEFAULT_MEAL_SHARE)


def daily_calorie_target(
    goal: NutritionGoal | None, age_group: AgeGroup | None
) -> float:
    """Recommended daily calories for a goal and age group."""
    if goal is None or age_group is None:
        return DEFAULT_DAILY_CALORIES
    gain, loss, maintain = _DAILY_CALORIES[age_group]
    if goal is NutritionGoal.WEIGHT_GAIN:
        return gain
    if goal is NutritionGoal.WEIGHT_LOSS:
        return loss
    return maintain


def describe_calorie_plan(
    goal: NutritionGoal | None,
    age_group: AgeGroup | None,
    meal_type: MealType | None,
) -> str:
    """Summarize why a set of calorie matches was chosen."""
    if goal is NutritionGoal.WEIGHT_GAIN:
        goal_text = "weight gain goal"
    elif goal is NutritionGoal.WEIGHT_LOSS:
        goal_text = "weight loss goal"
    else:
        goal_text = "maintenance goal"
    age_text = (age_group or AgeGroup.MIDDLE_AGE).value.lower().replace("_", " ")
    meal_text = meal_type.value.lower() if meal_type else "meal"
    return (
        f"Based on your {goal_text} and {age_text} age group, "
        f"these foods match your {meal_text} calorie target."
    )


def _match(food: FoodProfile, meal_target: float) -> CalorieMatch:
    quantity = round_half_up(meal_target / food.calories * 100, 1)
    calories = quantity / 100 * food.calories
    deviation = abs(calories - meal_target)

    calorie_score = max(0.0, 100 - deviation / meal_target * 100)
    score = (
        calorie_score * 0.5
        + min(MAX_PROTEIN_SCORE, food.protein_g * 2)
        + min(MAX_FIBER_SCORE, food.fiber_g * 4)
        - min(MAX_SUGAR_PENALTY, food.sugar_g)
    )
    return CalorieMatch(
        food=food,
        quantity_g=quantity,
        calories=calories,
        calorie_deviation=deviation,
        match_score=max(0.0, min(100.0, score)),
        explanation=_explain(food, quantity, calories),
    )


def _explain(food: FoodProfile, quantity: float, calories: float) -> str:
    reason = (
        f"{format_half_up(quantity)}g provides {format_half_up(calories)} calories"
    )
    if food.protein_g > 10:
        reason += ", high in protein"
    if food.fiber_g > 5:
        reason += ", good fiber content"
    if food.sugar_g < 5:
        reason += ", low sugar"
    return reason
