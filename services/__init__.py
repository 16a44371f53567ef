"""Services package - Business logic layer"""

from services.ingredient_service import IngredientService

__all__ = [
    "IngredientService",
]
