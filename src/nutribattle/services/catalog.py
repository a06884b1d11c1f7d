"""Read-only access to the food catalog."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from nutribattle.domain.errors import FoodNotFoundError
from nutribattle.domain.foods import FoodProfile


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(self) -> list[FoodProfile]:
        """Return every food in catalog order."""

    def get_food(self, food_id: int) -> FoodProfile | None:
        """Return a food by id, if present."""


@dataclass
class CatalogService:
    """Application service that hands catalog snapshots to the engines."""

    repository: FoodRepository

    def snapshot(self) -> tuple[FoodProfile, ...]:
        """Return an immutable snapshot of the whole catalog."""
        return tuple(self.repository.list_foods())

    def get_food(self, food_id: int) -> FoodProfile:
        """Return a food by id or raise FoodNotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def get_foods(self, food_ids: Iterable[int]) -> list[FoodProfile]:
        """Resolve several ids, preserving request order."""
        return [self.get_food(food_id) for food_id in food_ids]
