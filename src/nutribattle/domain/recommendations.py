"""Domain models for food recommendations and calorie matching."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from nutribattle.domain.foods import FoodProfile


class RecommendationMode(StrEnum):
    """Which candidates the similarity search considers."""

    SAME_CATEGORY = "SAME_CATEGORY"
    OPPOSITE_CATEGORY = "OPPOSITE_CATEGORY"
    MIXED = "MIXED"

    @classmethod
    def parse(cls, raw: str | None) -> "RecommendationMode":
        """Parse a mode name, defaulting to MIXED for unknown values."""
        if not raw:
            return cls.MIXED
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return cls.MIXED


class MealType(StrEnum):
    """Meals a daily calorie target is split across."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"

    @classmethod
    def parse(cls, raw: str | None) -> "MealType | None":
        """Parse a meal name; unknown values return None."""
        if not raw:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


class NutritionGoal(StrEnum):
    """User nutrition goal."""

    WEIGHT_GAIN = "WEIGHT_GAIN"
    WEIGHT_LOSS = "WEIGHT_LOSS"
    MAINTAIN = "MAINTAIN"


class AgeGroup(StrEnum):
    """User age bracket."""

    CHILD = "CHILD"
    MIDDLE_AGE = "MIDDLE_AGE"
    OLD_AGE = "OLD_AGE"


@dataclass(frozen=True)
class SimilarityMatch:
    """A nearest-neighbor alternative to a target food."""

    food: FoodProfile
    distance: float
    similarity: float
    improvements: Mapping[str, float]
    explanation: str


@dataclass(frozen=True)
class CalorieMatch:
    """A food portion sized to hit a meal calorie target."""

    food: FoodProfile
    quantity_g: float
    calories: float
    calorie_deviation: float
    match_score: float
    explanation: str


@dataclass(frozen=True)
class CalorieMatchReport:
    """Ranked calorie matches for one meal."""

    meal_type: MealType | None
    daily_calorie_target: float
    meal_calorie_target: float
    matches: tuple[CalorieMatch, ...]
    skipped: tuple[int, ...]
