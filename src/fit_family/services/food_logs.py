"""Food log recording and deletion."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fit_family.domain.food_logs import (
    FoodLogRecord,
    MacroTotals,
    MealType,
    NewFoodLog,
)
from fit_family.domain.foods import Food, FoodPortion
from fit_family.domain.models import UserRecord
from fit_family.errors import (
    FoodNotFoundError,
    InvalidPortionError,
    LogNotFoundError,
    PortionNotFoundError,
)
from fit_family.services.catalog import FoodRepository

logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_food_log(self, log: NewFoodLog) -> FoodLogRecord:
        """Store a food log and return it with food and portion names."""

    def list_for_user(self, user_id: UUID, day: date) -> list[FoodLogRecord]:
        """Return a user's logs for a day in creation order."""

    def list_for_family(self, family_id: UUID, day: date) -> list[FoodLogRecord]:
        """Return all logs attributed to a family for a day in creation order."""

    def delete_owned(self, log_id: UUID, user_id: UUID) -> bool:
        """Delete the log if it has this id and owner; return whether it did."""


@dataclass
class FoodLogService:
    """Service that computes portion macros and persists food logs."""

    food_repository: FoodRepository
    repository: FoodLogRepository
    today: Callable[[], date] = field(default=date.today)

    def add_log(
        self,
        requester: UserRecord,
        food_id: UUID,
        portion_id: UUID,
        meal_type: MealType,
    ) -> FoodLogRecord:
        """Log a portion of a food eaten today by the requester."""
        food = self.food_repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(f"Food not found with ID: {food_id}")
        portion = self.food_repository.get_portion(portion_id)
        if portion is None:
            raise PortionNotFoundError(f"Food portion not found with ID: {portion_id}")
        if portion.food_id != food.id:
            raise InvalidPortionError(
                "The selected portion does not belong to the selected food"
            )
        return self.repository.create_food_log(
            NewFoodLog(
                user_id=requester.id,
                family_id=requester.family_id,
                food_id=food.id,
                portion_id=portion.id,
                macros=compute_portion_macros(food, portion),
                meal_type=meal_type,
                log_date=self.today(),
            )
        )

    def delete_log(self, log_id: UUID, requester: UserRecord) -> None:
        """Delete one of the requester's logs."""
        if not self.repository.delete_owned(log_id, requester.id):
            raise LogNotFoundError(
                f"Food log not found with ID: {log_id} "
                "or you do not have permission to delete it"
            )
        logger.info("User %s deleted food log %s", requester.id, log_id)


def compute_portion_macros(food: Food, portion: FoodPortion) -> MacroTotals:
    """Scale per-100 g macros to the portion's weight, without rounding."""
    multiplier = portion.grams / 100.0
    return MacroTotals(
        calories=food.calories_per_100g * multiplier,
        protein=food.protein_per_100g * multiplier,
        carbs=food.carbs_per_100g * multiplier,
        fat=food.fat_per_100g * multiplier,
    )
