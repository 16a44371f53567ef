"""
Migrations package - schema versioning, table creation and legacy data import.
"""

from migrations.version_store import (
    InitializationState,
    check_initialized,
    get_version,
    set_version,
)
from migrations.engine import execute_migrations, create_tables, migrate_legacy_data
from migrations.initialization import initialize_and_migrate_database

__all__ = [
    "InitializationState",
    "check_initialized",
    "get_version",
    "set_version",
    "execute_migrations",
    "create_tables",
    "migrate_legacy_data",
    "initialize_and_migrate_database",
]
