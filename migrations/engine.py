"""
Migration engine: create tables, move legacy data over, stamp the version.

The three steps run in order and the first failure stops the rest. Each
transactional step rolls itself back on error; steps that already committed
stay committed (table creation is idempotent, so re-running is harmless).
"""

import logging
from typing import Any, List, Optional

import anyio

from adapters.legacy_storage import INGREDIENTS_KEY, InMemoryLegacyStorage, LegacyStorage
from app.exceptions import DbMigrationError
from app.result import Result
from domain.mappers.ingredient_mapper import IngredientMapper
from domain.models.database import Base, Database, DB_VERSION, now_ms
from domain.models.database_version import DatabaseVersion
from domain.models.ingredient import IngredientRecord
from domain.schemas.ingredient_schemas import LegacyIngredient
from migrations.version_store import set_version

logger = logging.getLogger("sholist.migrations.engine")

SCHEMA_TABLES = [IngredientRecord.__table__, DatabaseVersion.__table__]


async def execute_migrations(
    db: Database,
    is_first_run: bool,
    legacy_storage: Optional[LegacyStorage] = None,
) -> Result[None, DbMigrationError]:
    """
    Bring the schema to ``DB_VERSION``.

    Args:
        db: database handle
        is_first_run: legacy data is only read and copied when this is True
        legacy_storage: source of pre-SQLite data; empty storage when omitted

    Returns:
        Result.ok(None) or Result.fail(DbMigrationError)
    """
    try:
        await create_tables(db)

        if is_first_run:
            await migrate_legacy_data(db, legacy_storage or InMemoryLegacyStorage())

        version_result = await set_version(DB_VERSION, db)
        if not version_result.is_success:
            return version_result
    except Exception as exc:
        error = DbMigrationError(
            f"Database migration to version {DB_VERSION} failed",
            version=DB_VERSION,
            cause=exc,
        )
        logger.error("Database migration failed: %s", exc)
        return Result.fail(error)

    return Result.ok(None)


async def create_tables(db: Database) -> None:
    """Create both tables in one transaction so a schema is never half built."""

    def run() -> None:
        with db.begin() as conn:
            Base.metadata.create_all(bind=conn, tables=SCHEMA_TABLES, checkfirst=True)

    await anyio.to_thread.run_sync(run)
    logger.info("Database tables ensured")


async def migrate_legacy_data(db: Database, legacy_storage: LegacyStorage) -> int:
    """
    Copy legacy ingredients into the ``ingredients`` table.

    All records go in one transaction. Missing timestamps are filled with a
    single "now" taken before the batch, so migrated rows share it.

    Returns:
        Number of records migrated (0 when the legacy store holds nothing)
    """
    raw = await legacy_storage.get_item(INGREDIENTS_KEY)
    if not raw:
        logger.info("No ingredients found in legacy storage to migrate")
        return 0

    records = _parse_legacy_records(raw)
    now = now_ms()

    def run() -> None:
        with db.transaction() as session:
            for record in records:
                session.add(IngredientMapper.to_record(record, now))

    await anyio.to_thread.run_sync(run)
    logger.info("Successfully migrated %d ingredients from legacy storage", len(records))
    return len(records)


def _parse_legacy_records(raw: Any) -> List[LegacyIngredient]:
    if not isinstance(raw, list):
        raise ValueError(
            f"Legacy '{INGREDIENTS_KEY}' entry must be a list, got {type(raw).__name__}"
        )
    return [LegacyIngredient.model_validate(item) for item in raw]
