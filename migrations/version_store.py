"""
Schema version bookkeeping for the embedded store.

The ``database_version`` table doubles as the first-run marker: when it does
not exist the app has never completed a migration on this file.
"""

import logging
from dataclasses import dataclass

import anyio
from sqlalchemy import func, inspect
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.exceptions import DbConnectionError, DbMigrationError, DbQueryError
from app.result import Result
from domain.models.database import Database, now_ms
from domain.models.database_version import DatabaseVersion

logger = logging.getLogger("sholist.migrations.version")

VERSION_TABLE = DatabaseVersion.__tablename__


@dataclass(frozen=True)
class InitializationState:
    is_first_run: bool


async def check_initialized(db: Database) -> Result[InitializationState, DbConnectionError]:
    """
    Report whether this is the first run, i.e. the version table is missing.

    A catalog lookup that raises counts as a first run rather than an error.
    """

    def probe() -> bool:
        try:
            with db.begin() as conn:
                return not inspect(conn).has_table(VERSION_TABLE)
        except Exception as exc:
            logger.warning(
                "Could not check for %s table, assuming first run: %s", VERSION_TABLE, exc
            )
            return True

    try:
        is_first_run = await anyio.to_thread.run_sync(probe)
    except Exception as exc:
        error = DbConnectionError("Failed to check database initialization", cause=exc)
        logger.error("Database initialization check failed: %s", exc)
        return Result.fail(error)
    return Result.ok(InitializationState(is_first_run=is_first_run))


async def get_version(db: Database) -> Result[int, DbQueryError]:
    """Highest recorded schema version; 0 when the table is missing or empty."""

    def read() -> int:
        with db.session() as session:
            if not inspect(session.connection()).has_table(VERSION_TABLE):
                return 0
            return session.query(func.max(DatabaseVersion.version)).scalar() or 0

    try:
        version = await anyio.to_thread.run_sync(read)
    except Exception as exc:
        error = DbQueryError(
            "Failed to get database version",
            operation="get_version",
            entity=VERSION_TABLE,
            cause=exc,
        )
        logger.error("Error getting database version: %s", exc)
        return Result.fail(error)
    return Result.ok(version)


async def set_version(version: int, db: Database) -> Result[None, DbMigrationError]:
    """
    Append ``version`` to the history, creating the table if needed.

    Earlier rows are never removed or rewritten. Recording a version that is
    already present leaves the existing row in place.
    """
    migration_date = now_ms()

    def write() -> None:
        with db.transaction() as session:
            DatabaseVersion.__table__.create(bind=session.connection(), checkfirst=True)
            session.execute(
                sqlite_insert(DatabaseVersion)
                .values(version=version, migration_date=migration_date)
                .on_conflict_do_nothing(index_elements=["version"])
            )

    try:
        await anyio.to_thread.run_sync(write)
    except Exception as exc:
        error = DbMigrationError(
            f"Failed to record database version {version}", version=version, cause=exc
        )
        logger.error("Error updating database version: %s", exc)
        return Result.fail(error)
    logger.info("Database version set to %d", version)
    return Result.ok(None)
