"""Domain models for side-by-side food comparison."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from nutribattle.domain.foods import FoodProfile
from nutribattle.domain.scoring import QualityGrade


class NutrientDirection(StrEnum):
    """Whether smaller or larger amounts of a nutrient are preferable."""

    LOWER_IS_BETTER = "lower"
    HIGHER_IS_BETTER = "higher"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class NutrientValue:
    """One food's amount of a nutrient with its best/worst flags."""

    food_id: int
    food_name: str
    value: float
    is_best: bool = False
    is_worst: bool = False


@dataclass(frozen=True)
class NutrientComparison:
    """A nutrient compared across the foods in a comparison."""

    nutrient: str
    unit: str
    direction: NutrientDirection
    values: tuple[NutrientValue, ...]


@dataclass(frozen=True)
class ComparisonResult:
    """Full comparison of a small set of foods."""

    foods: tuple[FoodProfile, ...]
    grades: Mapping[int, QualityGrade]
    nutrients: tuple[NutrientComparison, ...]
    healthiest: FoodProfile
    advisories: tuple[str, ...]
