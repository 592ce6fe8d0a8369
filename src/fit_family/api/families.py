"""Family endpoints."""

from fastapi import APIRouter, Depends, status

from fit_family.api.dependencies import get_container, get_current_user
from fit_family.api.schemas import (
    CreateFamilyRequest,
    FamilyCreatedResponse,
    JoinFamilyRequest,
    JoinFamilyResponse,
    MyFamilyResponse,
)
from fit_family.containers import AppContainer
from fit_family.domain.models import UserRecord

router = APIRouter(prefix="/families", tags=["families"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FamilyCreatedResponse,
)
async def create_family(
    payload: CreateFamilyRequest,
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> FamilyCreatedResponse:
    """Create a family with the caller as its admin."""
    family = container.family_service.create_family(payload.name, user)
    return FamilyCreatedResponse.from_family(family)


@router.post("/join", response_model=JoinFamilyResponse)
async def join_family(
    payload: JoinFamilyRequest,
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> JoinFamilyResponse:
    """Join the family that owns the given code."""
    updated = container.family_service.join_family(payload.join_code, user)
    family, role = container.family_service.get_my_family(updated)
    return JoinFamilyResponse(family_id=family.id, family_name=family.name, role=role)


@router.get("/me", response_model=MyFamilyResponse)
async def my_family(
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> MyFamilyResponse:
    """Return the caller's family and their role in it."""
    family, role = container.family_service.get_my_family(user)
    return MyFamilyResponse(
        id=family.id, name=family.name, join_code=family.join_code, my_role=role
    )
