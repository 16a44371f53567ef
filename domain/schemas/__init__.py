"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.ingredient_schemas import (
    Ingredient,
    LegacyIngredient,
    IngredientCreateRequest,
    IngredientUpdateRequest,
    IngredientReorderRequest,
)

__all__ = [
    "Ingredient",
    "LegacyIngredient",
    "IngredientCreateRequest",
    "IngredientUpdateRequest",
    "IngredientReorderRequest",
]
