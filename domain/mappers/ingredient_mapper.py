"""
Ingredient mappers.
Translates between ``ingredients`` rows and the Ingredient entity.
"""

from domain.models import IngredientRecord
from domain.schemas.ingredient_schemas import Ingredient


class IngredientMapper:
    """Mapper for ingredient rows. ``completed`` is 0/1 in storage and a bool outside."""

    @staticmethod
    def to_entity(record: IngredientRecord) -> Ingredient:
        return Ingredient(
            id=record.id,
            name=record.name,
            completed=record.completed == 1,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    @staticmethod
    def to_record(ingredient: Ingredient, now: int) -> IngredientRecord:
        """
        Build a new row for ``ingredient``.

        Args:
            ingredient: entity to persist
            now: fallback for an unset timestamp; a filled-in value never puts
                created_at after updated_at

        Returns:
            IngredientRecord ready to be added to a session
        """
        created_at, updated_at = ingredient.created_at, ingredient.updated_at
        if created_at is None:
            created_at = now if updated_at is None else min(now, updated_at)
        if updated_at is None:
            updated_at = max(now, created_at)
        return IngredientRecord(
            id=ingredient.id,
            name=ingredient.name,
            completed=1 if ingredient.completed else 0,
            created_at=created_at,
            updated_at=updated_at,
        )
