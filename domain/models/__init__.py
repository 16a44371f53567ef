"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    Database,
    DB_NAME,
    DB_VERSION,
    get_database,
    now_ms,
)
from domain.models.ingredient import IngredientRecord
from domain.models.database_version import DatabaseVersion

__all__ = [
    # Database
    "Base",
    "Database",
    "DB_NAME",
    "DB_VERSION",
    "get_database",
    "now_ms",
    # Tables
    "IngredientRecord",
    "DatabaseVersion",
]
