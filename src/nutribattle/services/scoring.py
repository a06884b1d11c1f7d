"""Nutri-Score style grading of food profiles.

A food collects negative points (0-40) for energy, sugar, saturated fat and
sodium, and positive points (0-15) for fiber, protein and an estimate of its
fruit/vegetable/nut content. The difference maps onto a letter grade.
"""

from bisect import bisect_left

from nutribattle.domain.foods import FoodProfile, FoodType
from nutribattle.domain.scoring import QualityGrade

KJ_PER_KCAL = 4.184

# Upper bounds (inclusive) for 0, 1, 2, ... points; above the last bound the
# full score applies.
_ENERGY_KJ_THRESHOLDS = (335, 670, 1005, 1340, 1675, 2010, 2345, 2680, 3015, 3350)
_SUGAR_G_THRESHOLDS = (4.5, 9, 13.5, 18, 22.5, 27, 31, 36, 40, 45)
_SATURATED_FAT_G_THRESHOLDS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
_SODIUM_MG_THRESHOLDS = (90, 180, 270, 360, 450, 540, 630, 720, 810, 900)
_FIBER_G_THRESHOLDS = (0.9, 1.9, 2.8, 3.7, 4.7)
_PROTEIN_G_THRESHOLDS = (1.6, 3.2, 4.8, 6.4, 8.0)

PROTEIN_NEGATIVE_POINTS_CAP = 11
PROTEIN_FRUIT_VEG_POINTS_FLOOR = 5

_NUT_NAMES = ("almond", "cashew", "walnut", "pista")
_LEGUME_NAMES = ("dal", "bean")
_VEGETABLE_DISH_NAMES = ("vegetable", "saag", "tarkari")

_GRADE_UPPER_BOUNDS = (
    (-1, QualityGrade.A),
    (2, QualityGrade.B),
    (10, QualityGrade.C),
    (18, QualityGrade.D),
)


def grade(profile: FoodProfile) -> QualityGrade:
    """Return the quality grade for a food profile."""
    score = nutrient_score(profile)
    for upper_bound, letter in _GRADE_UPPER_BOUNDS:
        if score <= upper_bound:
            return letter
    return QualityGrade.E


def nutrient_score(profile: FoodProfile) -> int:
    """Return negative minus positive points for a profile."""
    negative = negative_points(profile)
    return negative - positive_points(profile, negative)


def negative_points(profile: FoodProfile) -> int:
    """Points (0-40) for energy, sugar, saturated fat and sodium."""
    return (
        _points(profile.calories * KJ_PER_KCAL, _ENERGY_KJ_THRESHOLDS)
        + _points(profile.sugar_g, _SUGAR_G_THRESHOLDS)
        + _points(profile.saturated_fat_g, _SATURATED_FAT_G_THRESHOLDS)
        + _points(profile.sodium_mg, _SODIUM_MG_THRESHOLDS)
    )


def positive_points(profile: FoodProfile, negative: int) -> int:
    """Points (0-15) for fiber, protein and fruit/vegetable/nut content.

    Protein only counts while the food is not too unhealthy overall, unless
    it is mostly fruit, vegetables or nuts.
    """
    fruit_veg = fruit_veg_points(profile)
    points = _points(profile.fiber_g, _FIBER_G_THRESHOLDS) + fruit_veg
    if (
        negative < PROTEIN_NEGATIVE_POINTS_CAP
        or fruit_veg >= PROTEIN_FRUIT_VEG_POINTS_FLOOR
    ):
        points += _points(profile.protein_g, _PROTEIN_G_THRESHOLDS)
    return points


def fruit_veg_points(profile: FoodProfile) -> int:
    """Estimate fruit/vegetable/nut content points (0-5) from name and category."""
    category = profile.category.lower()
    name = profile.name.lower()

    if "fruit" in category or "vegetable" in category:
        return 5
    if (
        "nut" in category
        or "seed" in category
        or any(nut in name for nut in _NUT_NAMES)
    ):
        return 5
    if (
        "legume" in category
        or "lentil" in category
        or any(legume in name for legume in _LEGUME_NAMES)
    ):
        return 3
    if ("soup" in category or "curry" in category) and any(
        dish in name for dish in _VEGETABLE_DISH_NAMES
    ):
        return 2
    if "pickle" in category and profile.type is FoodType.TRADITIONAL:
        return 2
    return 0


def _points(value: float, thresholds: tuple[float, ...]) -> int:
    """Index of the first threshold the value does not exceed."""
    return bisect_left(thresholds, value)
