"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_db
from domain.models.database import Database, DB_VERSION
from migrations.version_store import get_version
from repositories.ingredient_repository import IngredientRepository

router = APIRouter(tags=["Health"])
logger = logging.getLogger("sholist.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": "Sholist"}


@router.get("/database/status")
async def database_status(db: Database = Depends(get_db)):
    """Schema version and entry count of the embedded store."""
    version = (await get_version(db)).get_value()
    count = (await IngredientRepository(db).count()).get_value()
    return {
        "status": "ok",
        "schema_version": version,
        "target_version": DB_VERSION,
        "up_to_date": version >= DB_VERSION,
        "ingredient_count": count,
    }
