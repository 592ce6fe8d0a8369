"""Daily nutrition dashboards for users and families."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fit_family.domain.food_logs import (
    DailyDashboard,
    DashboardLogEntry,
    FamilyMemberDashboard,
    FoodLogRecord,
    MacroTotals,
)
from fit_family.domain.models import UserRecord
from fit_family.services.auth import UserRepository
from fit_family.services.food_logs import FoodLogRepository

UNKNOWN_MEMBER = "Unknown"


@dataclass
class DashboardService:
    """Read-only aggregation of food logs."""

    repository: FoodLogRepository
    user_repository: UserRepository

    def user_daily_dashboard(self, user: UserRecord, day: date) -> DailyDashboard:
        """Return the user's totals and logs for a day."""
        return _build_dashboard(day, self.repository.list_for_user(user.id, day))

    def family_daily_dashboard(
        self, user: UserRecord, day: date
    ) -> list[FamilyMemberDashboard]:
        """Return one dashboard per family member who logged food that day."""
        if user.family_id is None:
            return []
        logs = self.repository.list_for_family(user.family_id, day)
        grouped: dict[UUID, list[FoodLogRecord]] = {}
        for log in logs:
            grouped.setdefault(log.user_id, []).append(log)
        dashboards = []
        for member_id, member_logs in grouped.items():
            member = self.user_repository.get_by_id(member_id)
            dashboards.append(
                FamilyMemberDashboard(
                    user_name=member.name if member else UNKNOWN_MEMBER,
                    dashboard=_build_dashboard(day, member_logs),
                )
            )
        return dashboards


def sum_macros(logs: list[FoodLogRecord]) -> MacroTotals:
    """Elementwise sum of log macros; zeros for no logs."""
    total = MacroTotals(0.0, 0.0, 0.0, 0.0)
    for log in logs:
        total = MacroTotals(
            calories=total.calories + log.calories,
            protein=total.protein + log.protein,
            carbs=total.carbs + log.carbs,
            fat=total.fat + log.fat,
        )
    return total


def _build_dashboard(day: date, logs: list[FoodLogRecord]) -> DailyDashboard:
    return DailyDashboard(
        date=day,
        summary=sum_macros(logs),
        logs=[
            DashboardLogEntry(
                food_name=log.food_name,
                portion_label=log.portion_label,
                calories=log.calories,
                meal_type=log.meal_type,
            )
            for log in logs
        ],
    )
