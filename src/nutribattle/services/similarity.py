"""Nearest-neighbor food alternatives over normalized nutrient vectors."""

import logging
import math
from collections.abc import Callable, Iterable
from types import MappingProxyType

from nutribattle.domain.errors import InvalidArgumentError
from nutribattle.domain.foods import FoodProfile
from nutribattle.domain.recommendations import RecommendationMode, SimilarityMatch
from nutribattle.services.rounding import format_half_up
from nutribattle.services.scoring import grade

_logger = logging.getLogger(__name__)

# Rough per-100g ceilings used to bring every nutrient onto a 0-1 scale.
_NORMALIZATION_CEILINGS: tuple[tuple[Callable[[FoodProfile], float], float], ...] = (
    (lambda food: food.calories, 1000.0),
    (lambda food: food.protein_g, 50.0),
    (lambda food: food.fat_g, 100.0),
    (lambda food: food.saturated_fat_g, 50.0),
    (lambda food: food.carbs_g, 100.0),
    (lambda food: food.sugar_g, 100.0),
    (lambda food: food.fiber_g, 50.0),
    (lambda food: food.sodium_mg, 3000.0),
)

_LOWER_IS_BETTER: tuple[tuple[str, Callable[[FoodProfile], float]], ...] = (
    ("calories", lambda food: food.calories),
    ("sugar", lambda food: food.sugar_g),
    ("saturated_fat", lambda food: food.saturated_fat_g),
    ("sodium", lambda food: food.sodium_mg),
)
_HIGHER_IS_BETTER: tuple[tuple[str, Callable[[FoodProfile], float]], ...] = (
    ("protein", lambda food: food.protein_g),
    ("fiber", lambda food: food.fiber_g),
)

_IMPROVEMENT_PHRASES = {
    "calories": "fewer calories",
    "sugar": "less sugar",
    "saturated_fat": "less saturated fat",
    "sodium": "less sodium",
    "protein": "more protein",
    "fiber": "more fiber",
}
_DECLINE_PHRASES = {
    "calories": "more calories",
    "sugar": "more sugar",
    "saturated_fat": "more saturated fat",
    "sodium": "more sodium",
    "protein": "less protein",
    "fiber": "less fiber",
}

NOTABLE_IMPROVEMENT_PCT = 10.0
MAX_EXPLAINED_IMPROVEMENTS = 2


def recommend(
    candidates: Iterable[FoodProfile],
    target: FoodProfile,
    k: int,
    mode: RecommendationMode = RecommendationMode.MIXED,
) -> list[SimilarityMatch]:
    """Return up to k foods closest to the target, nearest first."""
    if k < 1:
        raise InvalidArgumentError(f"k must be at least 1, got {k}")

    pool = _filter_by_mode(
        [food for food in candidates if food.id != target.id], target, mode
    )
    _logger.info(
        "Recommending for %s (type=%s, category=%s, mode=%s): %s candidates",
        target.name,
        target.type,
        target.category,
        mode,
        len(pool),
    )

    target_vector = nutrient_vector(target)
    ranked = sorted(
        ((food, _euclidean(nutrient_vector(food), target_vector)) for food in pool),
        key=lambda pair: pair[1],
    )

    matches = []
    for food, food_distance in ranked[:k]:
        _logger.debug("Recommendation %s distance=%.4f", food.name, food_distance)
        improvements = improvement_map(food, target)
        matches.append(
            SimilarityMatch(
                food=food,
                distance=food_distance,
                similarity=1.0 / (1.0 + food_distance),
                improvements=MappingProxyType(improvements),
                explanation=_explain(food, target, improvements, mode),
            )
        )
    return matches


def nutrient_vector(food: FoodProfile) -> tuple[float, ...]:
    """Return the 8-dimensional normalized nutrient vector for a food."""
    return tuple(
        (getter(food) or 0.0) / ceiling for getter, ceiling in _NORMALIZATION_CEILINGS
    )


def distance(first: FoodProfile, second: FoodProfile) -> float:
    """Euclidean distance between two foods' normalized nutrient vectors."""
    return _euclidean(nutrient_vector(first), nutrient_vector(second))


def improvement_map(candidate: FoodProfile, target: FoodProfile) -> dict[str, float]:
    """Percentage improvements of the candidate over the target.

    Only strict improvements against a positive target value are emitted, so
    every entry is greater than zero.
    """
    improvements: dict[str, float] = {}
    for key, getter in _LOWER_IS_BETTER:
        target_value, candidate_value = getter(target), getter(candidate)
        if target_value > 0 and candidate_value < target_value:
            improvements[key] = (target_value - candidate_value) / target_value * 100
    for key, getter in _HIGHER_IS_BETTER:
        target_value, candidate_value = getter(target), getter(candidate)
        if target_value > 0 and candidate_value > target_value:
            improvements[key] = (candidate_value - target_value) / target_value * 100
    return improvements


def _filter_by_mode(
    foods: list[FoodProfile], target: FoodProfile, mode: RecommendationMode
) -> list[FoodProfile]:
    if mode is RecommendationMode.SAME_CATEGORY:
        return [food for food in foods if food.category == target.category]
    if mode is RecommendationMode.OPPOSITE_CATEGORY:
        return [food for food in foods if food.type != target.type]
    return foods


def _euclidean(first: tuple[float, ...], second: tuple[float, ...]) -> float:
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(first, second, strict=True)))


def _explain(
    candidate: FoodProfile,
    target: FoodProfile,
    improvements: dict[str, float],
    mode: RecommendationMode,
) -> str:
    """Build a short human-readable reason for a recommendation."""
    parts = []
    if mode is RecommendationMode.SAME_CATEGORY:
        parts.append(f"Similar food from same category ({candidate.category}).")
    elif mode is RecommendationMode.OPPOSITE_CATEGORY:
        parts.append(f"Alternative from {candidate.type} foods.")

    candidate_grade, target_grade = grade(candidate), grade(target)
    if candidate_grade < target_grade:
        verdict = "better"
    elif candidate_grade == target_grade:
        verdict = "same"
    else:
        verdict = "different"
    parts.append(f"Has {verdict} Nutri-Score ({candidate_grade} vs {target_grade}).")

    notable = sorted(
        (
            (key, value)
            for key, value in improvements.items()
            if abs(value) > NOTABLE_IMPROVEMENT_PCT
        ),
        key=lambda item: item[1],
        reverse=True,
    )[:MAX_EXPLAINED_IMPROVEMENTS]
    if notable:
        phrases = [
            f"{format_half_up(abs(value))}% "
            + (_IMPROVEMENT_PHRASES[key] if value > 0 else _DECLINE_PHRASES[key])
            for key, value in notable
        ]
        parts.append(f"Contains {' and '.join(phrases)}.")

    return " ".join(parts)
