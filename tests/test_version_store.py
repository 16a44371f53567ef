"""
Tests for schema version bookkeeping.

Verifies:
- first run is detected from the missing database_version table
- a catalog lookup that raises is treated as a first run
- get_version() reads 0 for a missing or empty table and the max otherwise
- set_version() creates the table, appends history and never rewrites rows
"""

import pytest
from sqlalchemy import text

from app.exceptions import DbMigrationError, DbQueryError
from migrations.version_store import check_initialized, get_version, set_version

pytestmark = pytest.mark.anyio


def version_rows(database):
    with database.session() as session:
        rows = session.execute(
            text("SELECT version, migration_date FROM database_version ORDER BY version")
        ).all()
    return [tuple(row) for row in rows]


# =============================================================================
# check_initialized
# =============================================================================


async def test_fresh_database_is_first_run(database):
    result = await check_initialized(database)

    assert result.is_success
    assert result.get_value().is_first_run is True


async def test_not_first_run_once_version_table_exists(database):
    await set_version(1, database)

    result = await check_initialized(database)

    assert result.get_value().is_first_run is False


async def test_catalog_error_is_treated_as_first_run(database, monkeypatch):
    def broken_inspect(_):
        raise RuntimeError("catalog unreadable")

    monkeypatch.setattr("migrations.version_store.inspect", broken_inspect)

    result = await check_initialized(database)

    assert result.is_success
    assert result.get_value().is_first_run is True


# =============================================================================
# get_version
# =============================================================================


async def test_version_is_zero_without_table(database):
    result = await get_version(database)

    assert result.is_success
    assert result.get_value() == 0


async def test_version_is_zero_for_empty_table(migrated_database):
    result = await get_version(migrated_database)

    assert result.get_value() == 0


async def test_version_is_maximum_recorded(database):
    await set_version(1, database)
    await set_version(3, database)
    await set_version(2, database)

    assert (await get_version(database)).get_value() == 3


async def test_version_read_failure_is_query_error(database, monkeypatch):
    def broken_inspect(_):
        raise RuntimeError("boom")

    monkeypatch.setattr("migrations.version_store.inspect", broken_inspect)

    result = await get_version(database)

    assert not result.is_success
    error = result.get_error()
    assert isinstance(error, DbQueryError)
    assert error.operation == "get_version"
    assert error.entity == "database_version"


# =============================================================================
# set_version
# =============================================================================


async def test_set_version_creates_table_and_records_date(database, monkeypatch):
    monkeypatch.setattr("migrations.version_store.now_ms", lambda: 123_456)

    result = await set_version(1, database)

    assert result.is_success
    assert version_rows(database) == [(1, 123_456)]


async def test_set_version_appends_history(database):
    await set_version(1, database)
    await set_version(2, database)

    assert [version for version, _ in version_rows(database)] == [1, 2]


async def test_set_same_version_twice_keeps_original_row(database, monkeypatch):
    monkeypatch.setattr("migrations.version_store.now_ms", lambda: 1000)
    await set_version(1, database)
    monkeypatch.setattr("migrations.version_store.now_ms", lambda: 2000)

    result = await set_version(1, database)

    assert result.is_success
    assert version_rows(database) == [(1, 1000)]


async def test_set_version_failure_is_migration_error(database, monkeypatch):
    def broken_transaction():
        raise RuntimeError("database is locked")

    monkeypatch.setattr(database, "transaction", broken_transaction)

    result = await set_version(4, database)

    assert not result.is_success
    error = result.get_error()
    assert isinstance(error, DbMigrationError)
    assert error.version == 4
    assert str(error.cause) == "database is locked"
