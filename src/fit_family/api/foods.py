"""Food catalog endpoints."""

from fastapi import APIRouter, Depends

from fit_family.api.dependencies import get_container, get_current_user
from fit_family.api.schemas import FoodResponse
from fit_family.containers import AppContainer

router = APIRouter(
    prefix="/foods", tags=["foods"], dependencies=[Depends(get_current_user)]
)


@router.get("/search", response_model=list[FoodResponse])
async def search_foods(
    query: str, container: AppContainer = Depends(get_container)
) -> list[FoodResponse]:
    """Search the catalog by name substring."""
    foods = container.catalog_service.search(query)
    return [FoodResponse.from_food(food) for food in foods]
