"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request

from domain.models.database import Database
from repositories.ingredient_repository import IngredientRepository
from services.ingredient_service import IngredientService


def get_db(request: Request) -> Database:
    """
    Database handle opened by the application lifespan.

    Usage:
        @router.get("/example")
        async def example(db: Database = Depends(get_db)):
            ...
    """
    return request.app.state.database


def get_ingredient_service(db: Database = Depends(get_db)) -> IngredientService:
    return IngredientService(IngredientRepository(db))
