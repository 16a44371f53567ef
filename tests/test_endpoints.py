"""
HTTP tests: the app is built around a temporary SQLite file and an in-memory
legacy store, so startup runs the real initialization.
"""

import pytest
from fastapi.testclient import TestClient

from adapters.legacy_storage import InMemoryLegacyStorage
from app.exceptions import DbMigrationError, DbQueryError
from app.result import Result
from domain.models.database import DB_VERSION
from main import create_app


@pytest.fixture
def client(database):
    with TestClient(create_app(database=database, legacy_storage=InMemoryLegacyStorage())) as c:
        yield c


def add(client, name):
    r = client.post("/ingredients", json={"name": name})
    assert r.status_code == 201
    return r.json()


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "Sholist"}
    assert r.headers["X-Request-ID"]


def test_database_status_after_startup(client):
    add(client, "Milk")

    r = client.get("/database/status")

    assert r.status_code == 200
    body = r.json()
    assert body["schema_version"] == DB_VERSION
    assert body["target_version"] == DB_VERSION
    assert body["up_to_date"] is True
    assert body["ingredient_count"] == 1


def test_database_status_read_failure_uses_error_status(client, monkeypatch):
    async def failing_get_version(db):
        return Result.fail(
            DbQueryError(
                "Failed to get database version",
                operation="get_version",
                entity="database_version",
            )
        )

    monkeypatch.setattr("api.routes.health.get_version", failing_get_version)

    r = client.get("/database/status")

    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "DB_QUERY_ERROR"
    assert body["error"]["details"]["operation"] == "get_version"


# =============================================================================
# INGREDIENTS
# =============================================================================


def test_list_starts_empty(client):
    r = client.get("/ingredients")
    assert r.status_code == 200
    assert r.json() == []


def test_add_and_get_ingredient(client):
    created = add(client, "Milk")

    assert created["name"] == "Milk"
    assert created["completed"] is False
    assert created["created_at"] == created["updated_at"]

    r = client.get(f"/ingredients/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_add_blank_name_is_bad_request(client):
    r = client.post("/ingredients", json={"name": "   "})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"] == {"field": "name"}


def test_add_without_name_is_request_validation_error(client):
    r = client.post("/ingredients", json={})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "REQUEST_VALIDATION_ERROR"


def test_unknown_ingredient_is_not_found(client):
    r = client.get("/ingredients/does-not-exist")

    assert r.status_code == 404
    error = r.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["details"] == {"entity_type": "ingredient", "entity_id": "does-not-exist"}


def test_patch_updates_fields(client):
    created = add(client, "Milk")

    r = client.patch(f"/ingredients/{created['id']}", json={"name": "Oat milk", "completed": True})

    assert r.status_code == 200
    assert r.json()["name"] == "Oat milk"
    assert r.json()["completed"] is True


def test_toggle_moves_entry_to_the_end(client):
    first = add(client, "Milk")
    add(client, "Eggs")

    r = client.post(f"/ingredients/{first['id']}/toggle")
    assert r.status_code == 200
    assert r.json()["completed"] is True

    listed = client.get("/ingredients").json()
    assert listed[-1]["id"] == first["id"]


def test_delete_ingredient(client):
    created = add(client, "Milk")

    r = client.delete(f"/ingredients/{created['id']}")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "removed": created["id"]}
    assert client.get("/ingredients").json() == []


def test_delete_unknown_ingredient_is_accepted(client):
    r = client.delete("/ingredients/ghost")

    assert r.status_code == 200


def test_reorder_is_not_implemented(client):
    created = add(client, "Milk")

    r = client.put("/ingredients/order", json={"ordered_ids": [created["id"]]})

    assert r.status_code == 501
    error = r.json()["error"]
    assert error["code"] == "NOT_IMPLEMENTED"
    assert error["details"] == {"feature": "reorder_ingredients"}


# =============================================================================
# STARTUP
# =============================================================================


def test_startup_imports_legacy_list(database, legacy_storage):
    with TestClient(create_app(database=database, legacy_storage=legacy_storage)) as client:
        ids = [i["id"] for i in client.get("/ingredients").json()]

    assert sorted(ids) == ["legacy-1", "legacy-2", "legacy-3"]
    # completed entries sort last
    assert ids[-1] == "legacy-2"


def test_startup_failure_aborts(database, monkeypatch):
    error = DbMigrationError("Mock migration error", version=DB_VERSION)

    async def failing_migrations(db, is_first_run, legacy_storage=None):
        return Result.fail(error)

    monkeypatch.setattr("migrations.initialization.execute_migrations", failing_migrations)

    with pytest.raises(DbMigrationError):
        with TestClient(create_app(database=database, legacy_storage=InMemoryLegacyStorage())):
            pass
