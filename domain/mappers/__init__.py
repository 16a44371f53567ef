"""
Domain mappers - ORM row <-> entity transformations.
"""

from domain.mappers.ingredient_mapper import IngredientMapper

__all__ = ["IngredientMapper"]
