"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import anyio
import pytest

from adapters.legacy_storage import InMemoryLegacyStorage
from domain.models.database import Database
from migrations.engine import create_tables
from repositories.ingredient_repository import IngredientRepository


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def database(tmp_path):
    """
    Fresh file-backed SQLite database with no tables.

    Yields:
        Database: handle disposed after the test
    """
    db = Database(str(tmp_path / "sholist-test.db"))
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def migrated_database(database):
    """Database with both tables created but no version stamped."""
    anyio.run(create_tables, database)
    return database


@pytest.fixture
def repository(migrated_database):
    return IngredientRepository(migrated_database)


@pytest.fixture
def legacy_storage():
    return InMemoryLegacyStorage(
        {
            "ingredients": [
                {"id": "legacy-1", "name": "Milk", "completed": False},
                {"id": "legacy-2", "name": "Eggs", "completed": True, "created_at": 1000, "updated_at": 2000},
                {"id": "legacy-3", "name": "Bread", "completed": False, "created_at": 3000},
            ]
        }
    )
