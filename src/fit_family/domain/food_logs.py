"""Domain models for food logging and dashboards."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class MealType(StrEnum):
    """Meal a food log belongs to."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macros in grams."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NewFoodLog:
    """Values for a food log that has not been stored yet."""

    user_id: UUID
    family_id: UUID | None
    food_id: UUID
    portion_id: UUID
    macros: MacroTotals
    meal_type: MealType
    log_date: date


@dataclass(frozen=True)
class FoodLogRecord:
    """Stored food log joined with its food name and portion label."""

    id: UUID
    user_id: UUID
    family_id: UUID | None
    food_id: UUID
    portion_id: UUID
    food_name: str
    portion_label: str
    calories: float
    protein: float
    carbs: float
    fat: float
    meal_type: MealType
    log_date: date
    created_at: datetime | None = None


@dataclass(frozen=True)
class DashboardLogEntry:
    """Food log line shown on a dashboard."""

    food_name: str
    portion_label: str
    calories: float
    meal_type: MealType


@dataclass(frozen=True)
class DailyDashboard:
    """One user's totals and logs for a day."""

    date: date
    summary: MacroTotals
    logs: list[DashboardLogEntry]


@dataclass(frozen=True)
class FamilyMemberDashboard:
    """Daily dashboard of one family member."""

    user_name: str
    dashboard: DailyDashboard
