"""Food catalog domain models."""

import math
from dataclasses import dataclass
from enum import StrEnum

from nutribattle.domain.errors import InvalidArgumentError

_REQUIRED_NUTRIENTS = (
    "calories",
    "protein_g",
    "fat_g",
    "saturated_fat_g",
    "carbs_g",
    "sugar_g",
    "fiber_g",
    "sodium_mg",
)


class FoodType(StrEnum):
    """Origin of a food item."""

    TRADITIONAL = "Traditional"
    MODERN = "Modern"


@dataclass(frozen=True)
class FoodProfile:
    """A food item with nutrients expressed per 100 grams."""

    id: int
    name: str
    category: str
    type: FoodType
    calories: float
    protein_g: float
    fat_g: float
    saturated_fat_g: float
    carbs_g: float
    sugar_g: float
    fiber_g: float
    sodium_mg: float
    vitamin_a: float | None = None
    vitamin_c: float | None = None
    calcium: float | None = None
    iron: float | None = None
    description: str | None = None
    image_url: str | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", FoodType(self.type))
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Food {self.id} has unknown type {self.type!r}"
            ) from exc
        if not self.name.strip():
            raise InvalidArgumentError("Food name must not be empty")
        if not self.category.strip():
            raise InvalidArgumentError(f"Food {self.id} has an empty category")
        for field_name in _REQUIRED_NUTRIENTS:
            value = getattr(self, field_name)
            if not math.isfinite(value) or value < 0:
                raise InvalidArgumentError(
                    f"Food {self.id} has invalid {field_name}: {value}"
                )
