#!/usr/bin/env python3
"""
Initialize the Sholist SQLite database.
Creates the schema, migrates legacy key-value data on a first run, and stamps
the schema version. Safe to run repeatedly.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

import anyio

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters.legacy_storage import build_legacy_storage
from app.config import settings
from app.logging_config import configure_logging
from domain.models.database import Database, DB_VERSION
from migrations.initialization import initialize_and_migrate_database
from migrations.version_store import get_version
from repositories.ingredient_repository import IngredientRepository

logger = logging.getLogger("sholist.scripts.init_db")


async def initialize(database_path: str, legacy_path: Optional[str]) -> int:
    db = Database(database_path)
    try:
        result = await initialize_and_migrate_database(db, build_legacy_storage(legacy_path))
        if not result.is_success:
            error = result.get_error()
            logger.error(f"✗ Database initialization failed: {error}")
            if error.cause is not None:
                logger.error(f"  caused by: {error.cause!r}")
            return 1

        version = (await get_version(db)).get_value()
        count = (await IngredientRepository(db).count()).get_value()
        logger.info(f"✓ Database ready at {database_path}")
        logger.info(f"✓ Schema version {version} (target {DB_VERSION}), {count} ingredients")
        return 0
    finally:
        db.dispose()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create or upgrade the Sholist SQLite database"
    )
    parser.add_argument(
        "--database",
        default=settings.database_path,
        help=f"SQLite file to initialize (default: {settings.database_path})",
    )
    parser.add_argument(
        "--legacy-file",
        default=settings.legacy_storage_path,
        help="JSON key-value file to import ingredients from on first run",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.info("=" * 60)
    logger.info("SHOLIST DATABASE INITIALIZATION")
    logger.info("=" * 60)

    return anyio.run(initialize, args.database, args.legacy_file)


if __name__ == "__main__":
    sys.exit(main())
