"""Food log endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from fit_family.api.dependencies import get_container, get_current_user
from fit_family.api.schemas import AddFoodLogRequest, FoodLogCreatedResponse
from fit_family.containers import AppContainer
from fit_family.domain.models import UserRecord

router = APIRouter(prefix="/food-logs", tags=["food-logs"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FoodLogCreatedResponse,
)
async def add_food_log(
    payload: AddFoodLogRequest,
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> FoodLogCreatedResponse:
    """Log a food portion eaten today."""
    record = container.food_log_service.add_log(
        user, payload.food_id, payload.portion_id, payload.meal_type
    )
    return FoodLogCreatedResponse.from_record(record)


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food_log(
    log_id: UUID,
    user: UserRecord = Depends(get_current_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete one of the caller's food logs."""
    container.food_log_service.delete_log(log_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
