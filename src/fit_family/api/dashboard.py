"""Daily dashboard endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from fit_family.api.dependencies import get_container, get_current_user
from fit_family.api.schemas import (
    DailyDashboardResponse,
    FamilyMemberDashboardResponse,
)
from fit_family.containers import AppContainer
from fit_family.domain.models import UserRecord

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/daily", response_model=DailyDashboardResponse)
async def daily_dashboard(
    day: date | None = Query(default=None, alias="date"),
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> DailyDashboardResponse:
    """Return the caller's totals and logs for a day, today by default."""
    dashboard = container.dashboard_service.user_daily_dashboard(
        user, day or date.today()
    )
    return DailyDashboardResponse.from_dashboard(dashboard)


@router.get("/family", response_model=list[FamilyMemberDashboardResponse])
async def family_dashboard(
    day: date | None = Query(default=None, alias="date"),
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> list[FamilyMemberDashboardResponse]:
    """Return a dashboard per family member who logged food that day."""
    members = container.dashboard_service.family_daily_dashboard(
        user, day or date.today()
    )
    return [
        FamilyMemberDashboardResponse(
            user_name=member.user_name,
            dashboard=DailyDashboardResponse.from_dashboard(member.dashboard),
        )
        for member in members
    ]
