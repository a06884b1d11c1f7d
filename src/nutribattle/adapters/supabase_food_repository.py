"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from nutribattle.domain.errors import InvalidArgumentError
from nutribattle.domain.foods import FoodProfile, FoodType
from nutribattle.services.catalog import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food profiles."""

    client: Client
    table: str = "foods"

    def list_foods(self) -> list[FoodProfile]:
        """Return every food ordered by id."""
        response = self.client.table(self.table).select("*").order("id").execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: int) -> FoodProfile | None:
        """Return a food by id, if present."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])


def _parse_food(row: dict[str, object]) -> FoodProfile:
    """Parse a catalog row into a domain model."""
    if "id" not in row:
        raise RuntimeError("Food row is missing an id")
    try:
        food_type = FoodType(str(row.get("type", "")))
    except ValueError as exc:
        raise RuntimeError(
            f"Food {row['id']} has unknown type {row.get('type')!r}"
        ) from exc
    try:
        return FoodProfile(
            id=int(row["id"]),
            name=str(row.get("name") or ""),
            category=str(row.get("category") or ""),
            type=food_type,
            calories=_nutrient(row, "calories"),
            protein_g=_nutrient(row, "protein"),
            fat_g=_nutrient(row, "fat"),
            saturated_fat_g=_nutrient(row, "saturated_fat"),
            carbs_g=_nutrient(row, "carbs"),
            sugar_g=_nutrient(row, "sugar"),
            fiber_g=_nutrient(row, "fiber"),
            sodium_mg=_nutrient(row, "sodium"),
            vitamin_a=_optional(row, "vitamin_a"),
            vitamin_c=_optional(row, "vitamin_c"),
            calcium=_optional(row, "calcium"),
            iron=_optional(row, "iron"),
            description=row.get("description"),
            image_url=row.get("image_url"),
        )
    except InvalidArgumentError as exc:
        raise RuntimeError(f"Malformed food row {row['id']}: {exc}") from exc


def _nutrient(row: dict[str, object], column: str) -> float:
    value = row.get(column)
    return float(value) if value is not None else 0.0


def _optional(row: dict[str, object], column: str) -> float | None:
    value = row.get(column)
    return float(value) if value is not None else None
