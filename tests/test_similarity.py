"""Tests for nearest-neighbor food recommendations."""

import pytest

from nutribattle.domain.errors import InvalidArgumentError
from nutribattle.domain.foods import FoodType
from nutribattle.domain.recommendations import RecommendationMode
from nutribattle.services.similarity import (
    distance,
    improvement_map,
    nutrient_vector,
    recommend,
)
from tests.conftest import make_food, sample_catalog


def test_distance_is_symmetric_and_zero_on_self() -> None:
    chips, chana = sample_catalog()[:2]

    assert distance(chips, chana) == distance(chana, chips)
    assert distance(chips, chips) == 0


def test_nutrient_vector_is_normalized() -> None:
    food = make_food(1, calories=1000, protein_g=25, sodium_mg=1500)

    assert nutrient_vector(food) == (1.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.5)
    assert distance(food, make_food(2, protein_g=25, sodium_mg=1500)) == 1.0


def test_recommend_excludes_target_and_limits_results() -> None:
    catalog = sample_catalog()
    target = catalog[0]

    matches = recommend(catalog, target, 3, RecommendationMode.MIXED)

    assert len(matches) == 3
    assert all(match.food.id != target.id for match in matches)


def test_recommend_sorted_by_distance() -> None:
    catalog = sample_catalog()

    matches = recommend(catalog, catalog[4], 10, RecommendationMode.MIXED)

    distances = [match.distance for match in matches]
    assert distances == sorted(distances)
    similarities = [match.similarity for match in matches]
    assert similarities == sorted(similarities, reverse=True)
    for match in matches:
        assert match.similarity == pytest.approx(1 / (1 + match.distance))
        assert 0 < match.similarity <= 1


def test_same_category_mode_keeps_category() -> None:
    catalog = sample_catalog()
    target = catalog[0]

    matches = recommend(catalog, target, 10, RecommendationMode.SAME_CATEGORY)

    assert {match.food.id for match in matches} == {2, 6}
    assert all(match.food.category == target.category for match in matches)


def test_opposite_category_mode_flips_type() -> None:
    catalog = sample_catalog()
    target = catalog[0]

    matches = recommend(catalog, target, 10, RecommendationMode.OPPOSITE_CATEGORY)

    assert matches
    assert all(match.food.type is FoodType.TRADITIONAL for match in matches)


def test_recommend_rejects_non_positive_k() -> None:
    catalog = sample_catalog()

    with pytest.raises(InvalidArgumentError):
        recommend(catalog, catalog[0], 0, RecommendationMode.MIXED)


def test_ties_keep_catalog_order() -> None:
    target = make_food(1, calories=100)
    first = make_food(2, "First", calories=200)
    second = make_food(3, "Second", calories=200)

    matches = recommend([target, first, second], target, 2)

    assert [match.food.name for match in matches] == ["First", "Second"]


def test_improvements_are_strictly_positive() -> None:
    catalog = sample_catalog()

    for target in catalog:
        for match in recommend(catalog, target, 10):
            assert all(value > 0 for value in match.improvements.values())


def test_improvement_map_values() -> None:
    chips, chana = sample_catalog()[:2]

    improvements = improvement_map(chana, chips)

    assert set(improvements) == {
        "calories",
        "saturated_fat",
        "sodium",
        "protein",
        "fiber",
    }
    assert improvements["calories"] == pytest.approx((536 - 364) / 536 * 100)
    assert improvements["fiber"] == pytest.approx((17 - 4.4) / 4.4 * 100)


def test_improvement_skipped_for_zero_target_value() -> None:
    target = make_food(1, protein_g=0, sugar_g=0)
    candidate = make_food(2, protein_g=12, sugar_g=0)

    assert improvement_map(candidate, target) == {}


def test_explanation_mentions_grade_and_top_improvements() -> None:
    catalog = sample_catalog()

    matches = recommend(catalog, catalog[0], 10, RecommendationMode.SAME_CATEGORY)
    chana = next(match for match in matches if match.food.id == 2)

    assert chana.explanation == (
        "Similar food from same category (Snack). "
        "Has better Nutri-Score (A vs C). "
        "Contains 286% more fiber and 171% more protein."
    )


def test_explanation_for_opposite_mode() -> None:
    catalog = sample_catalog()

    matches = recommend(catalog, catalog[3], 1, RecommendationMode.OPPOSITE_CATEGORY)

    assert matches[0].explanation.startswith("Alternative from Modern foods.")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("SAME_CATEGORY", RecommendationMode.SAME_CATEGORY),
        ("opposite_category", RecommendationMode.OPPOSITE_CATEGORY),
        ("mixed", RecommendationMode.MIXED),
        ("nearest", RecommendationMode.MIXED),
        (None, RecommendationMode.MIXED),
    ],
)
def test_mode_parse_defaults_to_mixed(
    raw: str | None, expected: RecommendationMode
) -> None:
    assert RecommendationMode.parse(raw) is expected


@pytest.mark.parametrize(
    ("target", "candidate", "expected"),
    [
        (
            make_food(1, calories=100),
            make_food(2, calories=100),
            "Has same Nutri-Score (B vs B).",
        ),
        (
            make_food(1, protein_g=10, fiber_g=5),
            make_food(
                2, calories=900, sugar_g=50, saturated_fat_g=15, sodium_mg=1000
            ),
            "Has different Nutri-Score (E vs A).",
        ),
        (
            make_food(1, calories=100),
            make_food(2, calories=90),
            "Has same Nutri-Score (B vs B).",
        ),
        (
            make_food(1, calories=8),
            make_food(2, calories=7),
            "Has same Nutri-Score (B vs B). Contains 13% fewer calories.",
        ),
        (
            make_food(
                1, calories=100, sugar_g=10, saturated_fat_g=10, sodium_mg=100
            ),
            make_food(2, calories=95, sugar_g=4, saturated_fat_g=8, sodium_mg=30),
            "Has better Nutri-Score (C vs D). "
            "Contains 70% less sodium and 60% less sugar.",
        ),
    ],
    ids=[
        "same-grade",
        "worse-grade",
        "ten-percent-not-notable",
        "percent-rounds-half-up",
        "top-two-improvements",
    ],
)
def test_explanation_variants(target, candidate, expected: str) -> None:
    matches = recommend([target, candidate], target, 1)

    assert matches[0].explanation == expected


def test_improvements_are_read_only() -> None:
    catalog = sample_catalog()

    match = recommend(catalog, catalog[0], 1)[0]

    with pytest.raises(TypeError):
        match.improvements["calories"] = 0.0  # type: ignore[index]
