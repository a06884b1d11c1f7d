"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutribattle.config import Settings
from nutribattle.containers import AppContainer
from nutribattle.domain.foods import FoodProfile, FoodType
from nutribattle.services.catalog import CatalogService, FoodRepository


def make_food(  # noqa: PLR0913
    food_id: int,
    name: str = "Food",
    category: str = "Snack",
    food_type: FoodType = FoodType.MODERN,
    *,
    calories: float = 0.0,
    protein_g: float = 0.0,
    fat_g: float = 0.0,
    saturated_fat_g: float = 0.0,
    carbs_g: float = 0.0,
    sugar_g: float = 0.0,
    fiber_g: float = 0.0,
    sodium_mg: float = 0.0,
) -> FoodProfile:
    """Build a food profile with zeroed nutrients unless given."""
    return FoodProfile(
        id=food_id,
        name=name,
        category=category,
        type=food_type,
        calories=calories,
        protein_g=protein_g,
        fat_g=fat_g,
        saturated_fat_g=saturated_fat_g,
        carbs_g=carbs_g,
        sugar_g=sugar_g,
        fiber_g=fiber_g,
        sodium_mg=sodium_mg,
    )


def sample_catalog() -> list[FoodProfile]:
    """A small mixed catalog of traditional and modern foods."""
    return [
        make_food(
            1,
            "Potato Chips",
            "Snack",
            FoodType.MODERN,
            calories=536,
            protein_g=7,
            fat_g=35,
            saturated_fat_g=3.1,
            carbs_g=53,
            sugar_g=0.3,
            fiber_g=4.4,
            sodium_mg=525,
        ),
        make_food(
            2,
            "Roasted Chana",
            "Snack",
            FoodType.TRADITIONAL,
            calories=364,
            protein_g=19,
            fat_g=6,
            saturated_fat_g=0.6,
            carbs_g=61,
            sugar_g=10.7,
            fiber_g=17,
            sodium_mg=24,
        ),
        make_food(
            3,
            "Chocolate Bar",
            "Sweets",
            FoodType.MODERN,
            calories=546,
            protein_g=4.9,
            fat_g=31,
            saturated_fat_g=19,
            carbs_g=61,
            sugar_g=48,
            fiber_g=7,
            sodium_mg=24,
        ),
        make_food(
            4,
            "Dal Bhat",
            "Main Course",
            FoodType.TRADITIONAL,
            calories=150,
            protein_g=6,
            fat_g=3,
            saturated_fat_g=0.5,
            carbs_g=26,
            sugar_g=1,
            fiber_g=3,
            sodium_mg=180,
        ),
        make_food(
            5,
            "Cheeseburger",
            "Main Course",
            FoodType.MODERN,
            calories=303,
            protein_g=15,
            fat_g=14,
            saturated_fat_g=6,
            carbs_g=30,
            sugar_g=6,
            fiber_g=1.2,
            sodium_mg=640,
        ),
        make_food(
            6,
            "Sel Roti",
            "Snack",
            FoodType.TRADITIONAL,
            calories=330,
            protein_g=5,
            fat_g=12,
            saturated_fat_g=2,
            carbs_g=50,
            sugar_g=18,
            fiber_g=1,
            sodium_mg=20,
        ),
    ]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[FoodProfile] = field(default_factory=sample_catalog)

    def list_foods(self) -> list[FoodProfile]:
        return list(self.foods)

    def get_food(self, food_id: int) -> FoodProfile | None:
        for food in self.foods:
            if food.id == food_id:
                return food
        return None


@pytest.fixture
def catalog() -> list[FoodProfile]:
    return sample_catalog()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def container(
    settings: Settings, food_repository: InMemoryFoodRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog_service=CatalogService(food_repository),
    )
