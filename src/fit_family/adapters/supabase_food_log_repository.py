"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fit_family.domain.food_logs import FoodLogRecord, MealType, NewFoodLog
from fit_family.services.food_logs import FoodLogRepository

_LOG_COLUMNS = (
    "id, user_id, family_id, food_id, portion_id, calories, protein, carbs, fat, "
    "meal_type, log_date, created_at, foods(name), food_portions(label)"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_food_log(self, log: NewFoodLog) -> FoodLogRecord:
        """Insert a food log row and return it with joined names."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "user_id": str(log.user_id),
                    "family_id": str(log.family_id) if log.family_id else None,
                    "food_id": str(log.food_id),
                    "portion_id": str(log.portion_id),
                    "calories": log.macros.calories,
                    "protein": log.macros.protein,
                    "carbs": log.macros.carbs,
                    "fat": log.macros.fat,
                    "meal_type": str(log.meal_type),
                    "log_date": log.log_date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        log_id = str(response.data[0]["id"])
        stored = (
            self.client.table("food_logs")
            .select(_LOG_COLUMNS)
            .eq("id", log_id)
            .limit(1)
            .execute()
        )
        if not stored.data:
            raise RuntimeError(f"Food log {log_id} missing after insert")
        return _parse_log(stored.data[0])

    def list_for_user(self, user_id: UUID, day: date) -> list[FoodLogRecord]:
        """Return a user's logs for a day."""
        response = (
            self.client.table("food_logs")
            .select(_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def list_for_family(self, family_id: UUID, day: date) -> list[FoodLogRecord]:
        """Return a family's logs for a day."""
        response = (
            self.client.table("food_logs")
            .select(_LOG_COLUMNS)
            .eq("family_id", str(family_id))
            .eq("log_date", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def delete_owned(self, log_id: UUID, user_id: UUID) -> bool:
        """Delete in one statement scoped by id and owner."""
        response = (
            self.client.table("food_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _joined(row: dict[str, object], relation: str, column: str) -> str:
    value = row.get(relation)
    if isinstance(value, dict):
        return str(value.get(column, ""))
    return ""


def _parse_log(row: dict[str, object]) -> FoodLogRecord:
    family_id = row.get("family_id")
    created_at = row.get("created_at")
    return FoodLogRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        family_id=UUID(str(family_id)) if family_id else None,
        food_id=UUID(str(row["food_id"])),
        portion_id=UUID(str(row["portion_id"])),
        food_name=_joined(row, "foods", "name"),
        portion_label=_joined(row, "food_portions", "label"),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        meal_type=MealType(str(row["meal_type"])),
        log_date=date.fromisoformat(str(row["log_date"])),
        created_at=datetime.fromisoformat(created_at)
        if isinstance(created_at, str) and created_at
        else None,
    )
