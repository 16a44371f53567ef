"""
Repositories package - Data access layer.
"""

from repositories.base import QueryExecutor
from repositories.ingredient_repository import IngredientRepository

__all__ = [
    "QueryExecutor",
    "IngredientRepository",
]
