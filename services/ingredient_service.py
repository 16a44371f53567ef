"""Ingredient service - shopping list operations on top of the repository."""

from typing import List, Optional, Sequence
import logging
import uuid

from app.exceptions import NotFoundError, StorageError, ValidationError
from app.result import Result
from domain.models.database import now_ms
from domain.schemas.ingredient_schemas import Ingredient
from repositories.ingredient_repository import IngredientRepository

logger = logging.getLogger("sholist.services.ingredient")


class IngredientService:
    """Business logic for the shopping list: validation, ids and timestamps."""

    def __init__(self, repository: IngredientRepository):
        self.repository = repository

    async def get_ingredients(self) -> Result[List[Ingredient], StorageError]:
        return await self.repository.list()

    async def get_ingredient(self, ingredient_id: str) -> Result[Ingredient, StorageError]:
        """Like the repository lookup, but a missing entry is a NotFoundError."""
        result = await self.repository.get_by_id(ingredient_id)
        if not result.is_success:
            return result
        ingredient = result.get_value()
        if ingredient is None:
            return Result.fail(_not_found(ingredient_id))
        return Result.ok(ingredient)

    async def add_ingredient(self, name: str) -> Result[Ingredient, StorageError]:
        """
        Create a new, incomplete entry.

        Args:
            name: display text; surrounding whitespace is kept but a blank name is rejected

        Returns:
            Result with the stored Ingredient, or ValidationError/DbQueryError
        """
        validation = _validate_name(name)
        if validation is not None:
            return Result.fail(validation)

        now = now_ms()
        ingredient = Ingredient(
            id=str(uuid.uuid4()),
            name=name,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        result = await self.repository.add(ingredient)
        if not result.is_success:
            return result
        logger.info("Added ingredient id=%s", ingredient.id)
        return Result.ok(ingredient)

    async def toggle_completion(self, ingredient_id: str) -> Result[Ingredient, StorageError]:
        current = await self.get_ingredient(ingredient_id)
        if not current.is_success:
            return current
        ingredient = current.get_value()
        completed = not ingredient.completed

        result = await self.repository.update_completion(ingredient_id, completed)
        if not result.is_success:
            return result
        return await self.get_ingredient(ingredient_id)

    async def rename_ingredient(
        self, ingredient_id: str, name: str
    ) -> Result[Ingredient, StorageError]:
        validation = _validate_name(name)
        if validation is not None:
            return Result.fail(validation)

        current = await self.get_ingredient(ingredient_id)
        if not current.is_success:
            return current

        result = await self.repository.update_name(ingredient_id, name)
        if not result.is_success:
            return result
        return await self.get_ingredient(ingredient_id)

    async def update_ingredient(
        self,
        ingredient_id: str,
        name: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Result[Ingredient, StorageError]:
        """Apply whichever of ``name``/``completed`` is given as one full update."""
        if name is not None:
            validation = _validate_name(name)
            if validation is not None:
                return Result.fail(validation)

        current = await self.get_ingredient(ingredient_id)
        if not current.is_success:
            return current

        ingredient = current.get_value()
        changes = {}
        if name is not None:
            changes["name"] = name
        if completed is not None:
            changes["completed"] = completed
        if not changes:
            return Result.ok(ingredient)

        result = await self.repository.update(ingredient.model_copy(update=changes))
        if not result.is_success:
            return result
        return await self.get_ingredient(ingredient_id)

    async def update_ingredients(
        self, ingredients: Sequence[Ingredient]
    ) -> Result[None, StorageError]:
        """Write each entry in turn; the first failure stops the batch."""
        for ingredient in ingredients:
            result = await self.repository.update(ingredient)
            if not result.is_success:
                return result
        return Result.ok(None)

    async def remove_ingredient(self, ingredient_id: str) -> Result[None, StorageError]:
        return await self.repository.remove(ingredient_id)

    async def reorder_ingredients(self, ordered_ids: Sequence[str]) -> Result[None, StorageError]:
        return await self.repository.reorder_ingredients(ordered_ids)


def _validate_name(name: Optional[str]) -> Optional[ValidationError]:
    if name is None or not name.strip():
        return ValidationError("Ingredient name can't be empty", field="name")
    return None


def _not_found(ingredient_id: str) -> NotFoundError:
    return NotFoundError(
        f"Ingredient {ingredient_id} not found",
        entity_type="ingredient",
        entity_id=ingredient_id,
    )
