"""Shopping list routes"""

from fastapi import APIRouter, Depends, status
import logging
from typing import List

from domain.schemas.ingredient_schemas import (
    Ingredient,
    IngredientCreateRequest,
    IngredientUpdateRequest,
    IngredientReorderRequest,
)
from services.ingredient_service import IngredientService
from api.dependencies import get_ingredient_service

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger("sholist.api.ingredients")

# Routes unwrap Results with get_value(); a failure raises its StorageError,
# which the registered exception handler turns into a JSON error response.


@router.get("", response_model=List[Ingredient])
async def list_ingredients(service: IngredientService = Depends(get_ingredient_service)):
    """All entries, incomplete first, newest first"""
    return (await service.get_ingredients()).get_value()


@router.post("", response_model=Ingredient, status_code=status.HTTP_201_CREATED)
async def add_ingredient(
    payload: IngredientCreateRequest,
    service: IngredientService = Depends(get_ingredient_service),
):
    return (await service.add_ingredient(payload.name)).get_value()


@router.put("/order", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_ingredients(
    payload: IngredientReorderRequest,
    service: IngredientService = Depends(get_ingredient_service),
):
    """Manual ordering is not available yet; always answers 501"""
    (await service.reorder_ingredients(payload.ordered_ids)).get_value()


@router.get("/{ingredient_id}", response_model=Ingredient)
async def get_ingredient(
    ingredient_id: str, service: IngredientService = Depends(get_ingredient_service)
):
    return (await service.get_ingredient(ingredient_id)).get_value()


@router.patch("/{ingredient_id}", response_model=Ingredient)
async def update_ingredient(
    ingredient_id: str,
    update: IngredientUpdateRequest,
    service: IngredientService = Depends(get_ingredient_service),
):
    """
    Update name and/or completion of an entry.

    Examples:
    - Rename: {"name": "Oat milk"}
    - Check off: {"completed": true}
    """
    result = await service.update_ingredient(
        ingredient_id, name=update.name, completed=update.completed
    )
    return result.get_value()


@router.post("/{ingredient_id}/toggle", response_model=Ingredient)
async def toggle_ingredient(
    ingredient_id: str, service: IngredientService = Depends(get_ingredient_service)
):
    return (await service.toggle_completion(ingredient_id)).get_value()


@router.delete("/{ingredient_id}")
async def delete_ingredient(
    ingredient_id: str, service: IngredientService = Depends(get_ingredient_service)
):
    """Delete an entry; unknown ids are accepted"""
    (await service.remove_ingredient(ingredient_id)).get_value()
    return {"status": "ok", "removed": ingredient_id}
