"""Registration and login endpoints."""

from fastapi import APIRouter, Depends, status

from fit_family.api.dependencies import get_container
from fit_family.api.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from fit_family.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
)
async def register(
    payload: RegisterRequest, container: AppContainer = Depends(get_container)
) -> RegisterResponse:
    """Create an account without a family."""
    user = container.auth_service.register(
        payload.name, payload.email, payload.password
    )
    return RegisterResponse(
        id=user.id, name=user.name, email=user.email, role=user.role
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest, container: AppContainer = Depends(get_container)
) -> LoginResponse:
    """Exchange credentials for a bearer token."""
    result = container.auth_service.login(payload.email, payload.password)
    return LoginResponse(token=result.token, email=result.email, role=result.role)
