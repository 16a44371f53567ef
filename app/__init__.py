"""
App package - Application configuration and core utilities.
Contains settings, the Result container, and the storage error taxonomy.
"""

from app.config import settings
from app.result import Result
from app.exceptions import (
    StorageError,
    DbConnectionError,
    DbQueryError,
    DbMigrationError,
    NotFoundError,
    ValidationError,
    FeatureNotImplementedError,
)

__all__ = [
    "settings",
    "Result",
    "StorageError",
    "DbConnectionError",
    "DbQueryError",
    "DbMigrationError",
    "NotFoundError",
    "ValidationError",
    "FeatureNotImplementedError",
]
