"""
Tests for the storage error taxonomy: defaults, diagnostic fields and cause chaining.
"""

import pytest

from app.exceptions import (
    StorageError,
    DbConnectionError,
    DbQueryError,
    DbMigrationError,
    NotFoundError,
    ValidationError,
    FeatureNotImplementedError,
)


@pytest.mark.parametrize(
    "error_cls, message, status",
    [
        (DbConnectionError, "Failed to connect to database", 503),
        (DbQueryError, "Database query failed", 500),
        (DbMigrationError, "Database migration failed", 500),
        (NotFoundError, "Item not found", 404),
        (ValidationError, "Validation failed", 400),
        (FeatureNotImplementedError, "This feature is not implemented yet", 501),
    ],
)
def test_defaults(error_cls, message, status):
    error = error_cls()

    assert isinstance(error, StorageError)
    assert str(error) == message
    assert error.http_status == status


def test_query_error_keeps_cause_and_context():
    cause = RuntimeError("disk I/O error")
    error = DbQueryError("Failed to add ingredient(s)", operation="add", entity="ingredient", cause=cause)

    assert error.cause is cause
    assert error.__cause__ is cause
    assert error.to_dict() == {
        "message": "Failed to add ingredient(s)",
        "code": "DB_QUERY_ERROR",
        "details": {"operation": "add", "entity": "ingredient", "cause": "disk I/O error"},
    }


def test_to_dict_omits_empty_details():
    assert ValidationError("Name can't be empty").to_dict() == {
        "message": "Name can't be empty",
        "code": "VALIDATION_ERROR",
    }


def test_variant_fields():
    assert DbMigrationError(version=3).version == 3
    not_found = NotFoundError(entity_type="ingredient", entity_id="abc")
    assert (not_found.entity_type, not_found.entity_id) == ("ingredient", "abc")
    assert ValidationError(field="name").field == "name"
    assert FeatureNotImplementedError(feature="reorder").feature == "reorder"


def test_variants_do_not_shadow_builtins():
    assert not issubclass(DbConnectionError, ConnectionError)
    assert not issubclass(FeatureNotImplementedError, NotImplementedError)
