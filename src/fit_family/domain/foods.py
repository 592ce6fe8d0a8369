"""Domain models for the food catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodPortion:
    """Named gram weight of a food, e.g. ``1 cup (cooked)``."""

    id: UUID
    food_id: UUID
    label: str
    grams: float


@dataclass(frozen=True)
class Food:
    """Catalog food with macros per 100 grams."""

    id: UUID
    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fat_per_100g: float
    portions: list[FoodPortion] = field(default_factory=list)
    created_at: datetime | None = None
