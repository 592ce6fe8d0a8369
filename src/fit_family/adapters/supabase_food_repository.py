"""Supabase repository for the food catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fit_family.domain.foods import Food, FoodPortion
from fit_family.services.catalog import FoodRepository, SeedFood

_FOOD_COLUMNS = (
    "id, name, calories_per_100g, protein_per_100g, carbs_per_100g, fat_per_100g, "
    "created_at"
)
_PORTION_COLUMNS = "id, food_id, label, grams"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for foods and food portions."""

    client: Client

    def count_foods(self) -> int:
        """Return the number of stored foods."""
        response = (
            self.client.table("foods").select("id", count="exact").limit(1).execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def search_foods(self, query: str) -> list[Food]:
        """Return foods whose name contains the query, with portions."""
        response = (
            self.client.table("foods")
            .select(f"{_FOOD_COLUMNS}, food_portions({_PORTION_COLUMNS})")
            .ilike("name", f"%{_escape_like(query)}%")
            .order("name", desc=False)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select(_FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def get_portion(self, portion_id: UUID) -> FoodPortion | None:
        """Return a portion by id, if present."""
        response = (
            self.client.table("food_portions")
            .select(_PORTION_COLUMNS)
            .eq("id", str(portion_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_portion(response.data[0])

    def create_food(self, seed: SeedFood) -> Food:
        """Insert a food row followed by its portion rows."""
        response = (
            self.client.table("foods")
            .insert(
                {
                    "name": seed.name,
                    "calories_per_100g": seed.calories,
                    "protein_per_100g": seed.protein,
                    "carbs_per_100g": seed.carbs,
                    "fat_per_100g": seed.fat,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to create food {seed.name}")
        food_id = str(response.data[0]["id"])
        portions: list[dict[str, object]] = []
        if seed.portions:
            portion_response = (
                self.client.table("food_portions")
                .insert(
                    [
                        {"food_id": food_id, "label": label, "grams": grams}
                        for label, grams in seed.portions
                    ]
                )
                .execute()
            )
            portions = portion_response.data or []
        return _parse_food({**response.data[0], "food_portions": portions})


def _escape_like(query: str) -> str:
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _parse_food(row: dict[str, object]) -> Food:
    portions = row.get("food_portions") or []
    created_at = row.get("created_at")
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_100g=float(row.get("calories_per_100g", 0.0)),
        protein_per_100g=float(row.get("protein_per_100g", 0.0)),
        carbs_per_100g=float(row.get("carbs_per_100g", 0.0)),
        fat_per_100g=float(row.get("fat_per_100g", 0.0)),
        portions=[
            _parse_portion(portion)
            for portion in portions
            if isinstance(portion, dict)
        ],
        created_at=datetime.fromisoformat(created_at)
        if isinstance(created_at, str) and created_at
        else None,
    )


def _parse_portion(row: dict[str, object]) -> FoodPortion:
    return FoodPortion(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        label=str(row.get("label", "")),
        grams=float(row.get("grams", 0.0)),
    )
