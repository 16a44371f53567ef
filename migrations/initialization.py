"""
Startup entry point for the storage layer.

Call ``initialize_and_migrate_database`` once before any repository use. It
decides between "migrate" and "already current" and returns a single Result.
"""

import logging
from typing import Optional, Union

import anyio

from adapters.legacy_storage import LegacyStorage
from app.exceptions import DbConnectionError, DbMigrationError
from app.result import Result
from domain.models.database import Database, DB_VERSION
from migrations.engine import execute_migrations
from migrations.version_store import check_initialized, get_version

logger = logging.getLogger("sholist.migrations.initialization")


async def initialize_and_migrate_database(
    db: Database,
    legacy_storage: Optional[LegacyStorage] = None,
) -> Result[None, Union[DbConnectionError, DbMigrationError]]:
    """
    Ensure the schema is current, migrating legacy data on a genuine first run.

    Overlapping calls against the same handle are serialized, so the second
    caller finds the schema current and returns without migrating.
    """
    if db.init_lock is None:
        db.init_lock = anyio.Lock()

    async with db.init_lock:
        try:
            return await _initialize(db, legacy_storage)
        except Exception as exc:
            error = DbConnectionError("Failed to initialize database", cause=exc)
            logger.error("Database initialization failed: %s", exc)
            return Result.fail(error)


async def _initialize(
    db: Database, legacy_storage: Optional[LegacyStorage]
) -> Result[None, Union[DbConnectionError, DbMigrationError]]:
    init_result = await check_initialized(db)
    if not init_result.is_success:
        return Result.fail(init_result.get_error())
    is_first_run = init_result.get_value().is_first_run

    version_result = await get_version(db)
    if not version_result.is_success:
        return Result.fail(
            DbConnectionError(
                "Failed to get database version", cause=version_result.get_error()
            )
        )
    current_version = version_result.get_value() or 0

    if is_first_run or current_version < DB_VERSION:
        # legacy data is only considered on a real first run, never on upgrades
        migrate_result = await execute_migrations(db, is_first_run, legacy_storage)
        if not migrate_result.is_success:
            return migrate_result
        logger.info(
            "Database initialized/migrated successfully. First run: %s, DB Version: %d",
            is_first_run,
            DB_VERSION,
        )
    else:
        logger.info("Database already initialized with current version %d", current_version)

    return Result.ok(None)
