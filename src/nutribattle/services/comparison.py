"""Nutrient-by-nutrient comparison of a few foods."""

from collections.abc import Callable, Sequence
from types import MappingProxyType

from nutribattle.domain.comparison import (
    ComparisonResult,
    NutrientComparison,
    NutrientDirection,
    NutrientValue,
)
from nutribattle.domain.errors import InvalidArgumentError
from nutribattle.domain.foods import FoodProfile, FoodType
from nutribattle.domain.scoring import QualityGrade
from nutribattle.services.rounding import format_half_up
from nutribattle.services.scoring import grade

_NUTRIENTS: tuple[
    tuple[str, str, Callable[[FoodProfile], float], NutrientDirection], ...
] = (
    ("Calories", "kcal", lambda food: food.calories, NutrientDirection.LOWER_IS_BETTER),
    ("Protein", "g", lambda food: food.protein_g, NutrientDirection.HIGHER_IS_BETTER),
    ("Total Fat", "g", lambda food: food.fat_g, NutrientDirection.LOWER_IS_BETTER),
    (
        "Saturated Fat",
        "g",
        lambda food: food.saturated_fat_g,
        NutrientDirection.LOWER_IS_BETTER,
    ),
    ("Carbohydrates", "g", lambda food: food.carbs_g, NutrientDirection.NEUTRAL),
    ("Sugar", "g", lambda food: food.sugar_g, NutrientDirection.LOWER_IS_BETTER),
    ("Fiber", "g", lambda food: food.fiber_g, NutrientDirection.HIGHER_IS_BETTER),
    ("Sodium", "mg", lambda food: food.sodium_mg, NutrientDirection.LOWER_IS_BETTER),
)

HIGH_SUGAR_G = 15
HIGH_SODIUM_MG = 600
GOOD_FIBER_G = 3
GOOD_TRADITIONAL_GRADE = QualityGrade.C


def compare(foods: Sequence[FoodProfile]) -> ComparisonResult:
    """Compare foods nutrient by nutrient and pick the healthiest one."""
    if not foods:
        raise InvalidArgumentError("No foods to compare")

    grades = {food.id: grade(food) for food in foods}
    nutrients = tuple(
        _compare_nutrient(name, unit, getter, direction, foods)
        for name, unit, getter, direction in _NUTRIENTS
    )
    # min() keeps the first food on ties.
    healthiest = min(foods, key=lambda food: grades[food.id])
    return ComparisonResult(
        foods=tuple(foods),
        grades=MappingProxyType(grades),
        nutrients=nutrients,
        healthiest=healthiest,
        advisories=tuple(_advisories(foods, grades)),
    )


def _compare_nutrient(
    name: str,
    unit: str,
    getter: Callable[[FoodProfile], float],
    direction: NutrientDirection,
    foods: Sequence[FoodProfile],
) -> NutrientComparison:
    amounts = [getter(food) for food in foods]
    lowest, highest = min(amounts), max(amounts)
    if direction is NutrientDirection.LOWER_IS_BETTER:
        best, worst = lowest, highest
    else:
        best, worst = highest, lowest

    values = []
    for food, amount in zip(foods, amounts, strict=True):
        flagged = direction is not NutrientDirection.NEUTRAL
        values.append(
            NutrientValue(
                food_id=food.id,
                food_name=food.name,
                value=amount,
                is_best=flagged and amount == best,
                is_worst=flagged and amount == worst,
            )
        )
    return NutrientComparison(
        nutrient=name, unit=unit, direction=direction, values=tuple(values)
    )


def _advisories(
    foods: Sequence[FoodProfile], grades: dict[int, QualityGrade]
) -> list[str]:
    advisories = []

    sugary = max(foods, key=lambda food: food.sugar_g)
    if sugary.sugar_g > HIGH_SUGAR_G:
        sugar = format_half_up(sugary.sugar_g, 1)
        advisories.append(
            f"{sugary.name} has high sugar content ({sugar}g). "
            "Consider limiting portion size."
        )

    salty = max(foods, key=lambda food: food.sodium_mg)
    if salty.sodium_mg > HIGH_SODIUM_MG:
        sodium = format_half_up(salty.sodium_mg)
        advisories.append(
            f"{salty.name} has high sodium content ({sodium}mg). "
            "This may not be suitable for those watching salt intake."
        )

    fibrous = max(foods, key=lambda food: food.fiber_g)
    if fibrous.fiber_g > GOOD_FIBER_G:
        fiber = format_half_up(fibrous.fiber_g, 1)
        advisories.append(
            f"{fibrous.name} is a good source of fiber ({fiber}g), "
            "which aids digestion."
        )

    traditional = [food for food in foods if food.type is FoodType.TRADITIONAL]
    has_modern = any(food.type is FoodType.MODERN for food in foods)
    if traditional and has_modern:
        best_traditional = min(traditional, key=lambda food: grades[food.id])
        best_grade = grades[best_traditional.id]
        if best_grade <= GOOD_TRADITIONAL_GRADE:
            advisories.append(
                f"Traditional food option '{best_traditional.name}' has good "
                f"nutritional value with Nutri-Score {best_grade}."
            )

    return advisories
