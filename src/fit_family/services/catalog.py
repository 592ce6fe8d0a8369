"""Food catalog search and reference data seeding."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fit_family.domain.foods import Food, FoodPortion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedFood:
    """Reference food with macros per 100 g and (label, grams) portions."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    portions: tuple[tuple[str, float], ...]


REFERENCE_FOODS: tuple[SeedFood, ...] = (
    SeedFood(
        name="Rice",
        calories=130,
        protein=2.7,
        carbs=28.2,
        fat=0.3,
        portions=(
            ("100g", 100),
            ("1 cup (cooked)", 158),
            ("1 bowl", 200),
            ("1 serving", 150),
        ),
    ),
    SeedFood(
        name="Chapati",
        calories=297,
        protein=9.6,
        carbs=50.8,
        fat=6.1,
        portions=(
            ("1 small (40g)", 40),
            ("1 medium (50g)", 50),
            ("1 large (60g)", 60),
        ),
    ),
    SeedFood(
        name="Chicken Breast",
        calories=165,
        protein=31,
        carbs=0,
        fat=3.6,
        portions=(
            ("100g", 100),
            ("1 piece (150g)", 150),
            ("1 serving (200g)", 200),
        ),
    ),
)


class FoodRepository(Protocol):
    """Persistence interface for catalog foods and portions."""

    def count_foods(self) -> int:
        """Return the number of stored foods."""

    def search_foods(self, query: str) -> list[Food]:
        """Return foods whose name contains the query, with portions."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def get_portion(self, portion_id: UUID) -> FoodPortion | None:
        """Return a portion by id, if present."""

    def create_food(self, seed: SeedFood) -> Food:
        """Store a food and its portions."""


@dataclass
class CatalogService:
    """Read access to the food catalog."""

    repository: FoodRepository

    def search(self, query: str) -> list[Food]:
        """Search foods by case-insensitive name substring.

        An empty query matches every food in the catalog.
        """
        return self.repository.search_foods(query)

    def seed(self, foods: tuple[SeedFood, ...] = REFERENCE_FOODS) -> int:
        """Insert the reference foods into an empty catalog.

        Returns the number of foods inserted; zero when the catalog already
        had data.
        """
        if self.repository.count_foods() > 0:
            logger.info("Food catalog already seeded, skipping")
            return 0
        for seed in foods:
            self.repository.create_food(seed)
        logger.info("Seeded food catalog with %d foods", len(foods))
        return len(foods)
