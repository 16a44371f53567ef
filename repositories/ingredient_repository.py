"""
Ingredient Repository - Data access layer for the SQLite ``ingredients`` table
"""

from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.exceptions import DbQueryError, FeatureNotImplementedError
from app.result import Result
from domain.mappers.ingredient_mapper import IngredientMapper
from domain.models.database import Database, now_ms
from domain.models.ingredient import IngredientRecord
from domain.schemas.ingredient_schemas import Ingredient
from repositories.base import QueryExecutor


class IngredientRepository:
    """Repository for shopping list entries. Every operation returns a Result."""

    entity_name = "ingredient"

    def __init__(self, database: Database):
        self.executor = QueryExecutor(
            database, self.entity_name, "sholist.repositories.ingredient"
        )

    async def list(self) -> Result[List[Ingredient], DbQueryError]:
        """All entries, incomplete first, newest first within each group"""

        def query(session: Session) -> List[Ingredient]:
            rows = (
                session.query(IngredientRecord)
                .order_by(
                    IngredientRecord.completed.asc(),
                    IngredientRecord.created_at.desc(),
                )
                .all()
            )
            return [IngredientMapper.to_entity(row) for row in rows]

        return await self.executor.execute_query(query, "list")

    async def get_by_id(self, ingredient_id: str) -> Result[Optional[Ingredient], DbQueryError]:
        """Get entry by ID; a missing row is Result.ok(None), not an error"""

        def query(session: Session) -> Optional[Ingredient]:
            row = (
                session.query(IngredientRecord)
                .filter(IngredientRecord.id == ingredient_id)
                .first()
            )
            return IngredientMapper.to_entity(row) if row is not None else None

        return await self.executor.execute_query(query, "get")

    async def count(self) -> Result[int, DbQueryError]:
        def query(session: Session) -> int:
            return session.query(func.count(IngredientRecord.id)).scalar() or 0

        return await self.executor.execute_query(query, "count")

    async def add(self, ingredient: Ingredient) -> Result[None, DbQueryError]:
        """
        Insert a new entry.

        Unset timestamps are both filled with the same "now". A duplicate id
        surfaces as a DbQueryError and nothing is written.
        """
        now = now_ms()

        def write(session: Session) -> None:
            session.add(IngredientMapper.to_record(ingredient, now))

        return await self.executor.execute_transaction(write, "add")

    async def update(self, ingredient: Ingredient) -> Result[None, DbQueryError]:
        """Replace name and completed; created_at is never touched"""
        values = {
            IngredientRecord.name: ingredient.name,
            IngredientRecord.completed: 1 if ingredient.completed else 0,
            IngredientRecord.updated_at: now_ms(),
        }
        return await self._update_where_id(ingredient.id, values, "update")

    async def update_completion(
        self, ingredient_id: str, completed: bool
    ) -> Result[None, DbQueryError]:
        values = {
            IngredientRecord.completed: 1 if completed else 0,
            IngredientRecord.updated_at: now_ms(),
        }
        return await self._update_where_id(ingredient_id, values, "update_completion")

    async def update_name(self, ingredient_id: str, name: str) -> Result[None, DbQueryError]:
        # No emptiness check here; the service validates names.
        values = {
            IngredientRecord.name: name,
            IngredientRecord.updated_at: now_ms(),
        }
        return await self._update_where_id(ingredient_id, values, "update_name")

    async def remove(self, ingredient_id: str) -> Result[None, DbQueryError]:
        """Hard delete; removing an unknown id succeeds"""

        def write(session: Session) -> None:
            session.query(IngredientRecord).filter(
                IngredientRecord.id == ingredient_id
            ).delete(synchronize_session=False)

        return await self.executor.execute_transaction(write, "remove")

    async def reorder_ingredients(
        self, ordered_ids: Sequence[str]
    ) -> Result[None, FeatureNotImplementedError]:
        """Placeholder contract for manual ordering; never touches storage"""
        self.executor.logger.info(
            "Reordering not yet implemented (%d ids requested)", len(ordered_ids)
        )
        return Result.fail(
            FeatureNotImplementedError(
                "Reordering ingredients is not implemented yet",
                feature="reorder_ingredients",
            )
        )

    async def _update_where_id(
        self, ingredient_id: str, values: dict, operation_name: str
    ) -> Result[None, DbQueryError]:
        def write(session: Session) -> None:
            session.query(IngredientRecord).filter(
                IngredientRecord.id == ingredient_id
            ).update(values, synchronize_session=False)

        return await self.executor.execute_transaction(write, operation_name)
