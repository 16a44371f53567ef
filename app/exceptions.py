from typing import Any, Optional


class StorageError(Exception):
    """Base class for every error the storage layer hands back inside a Result.

    Attributes:
        message: human-readable message
        cause: optional underlying exception kept for diagnostics
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    code = "STORAGE_ERROR"
    http_status = 500
    default_message = "Storage operation failed"

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def details(self) -> dict[str, Any]:
        """Variant-specific diagnostic fields."""
        return {}

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        details = {k: v for k, v in self.details().items() if v is not None}
        if self.cause is not None:
            details["cause"] = str(self.cause)
        if details:
            payload["details"] = details
        return payload

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class DbConnectionError(StorageError):
    """Raised when the storage handle cannot be opened or used."""

    code = "DB_CONNECTION_ERROR"
    http_status = 503
    default_message = "Failed to connect to database"


class DbQueryError(StorageError):
    """A single read or write against the store failed."""

    code = "DB_QUERY_ERROR"
    default_message = "Database query failed"

    def __init__(
        self,
        message: Optional[str] = None,
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.operation = operation
        self.entity = entity

    def details(self) -> dict[str, Any]:
        return {"operation": self.operation, "entity": self.entity}


class DbMigrationError(StorageError):
    """Schema creation, legacy data migration or version stamping failed."""

    code = "DB_MIGRATION_ERROR"
    default_message = "Database migration failed"

    def __init__(
        self,
        message: Optional[str] = None,
        version: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)
        self.version = version

    def details(self) -> dict[str, Any]:
        return {"version": self.version}


class NotFoundError(StorageError):
    """A lookup by identifier found no record."""

    code = "NOT_FOUND"
    http_status = 404
    default_message = "Item not found"

    def __init__(
        self,
        message: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id

    def details(self) -> dict[str, Any]:
        return {"entity_type": self.entity_type, "entity_id": self.entity_id}


class ValidationError(StorageError):
    """Caller-supplied input failed a precondition."""

    code = "VALIDATION_ERROR"
    http_status = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def details(self) -> dict[str, Any]:
        return {"field": self.field}


class FeatureNotImplementedError(StorageError):
    """A recognized operation that has no implementation yet."""

    code = "NOT_IMPLEMENTED"
    http_status = 501
    default_message = "This feature is not implemented yet"

    def __init__(self, message: Optional[str] = None, feature: Optional[str] = None):
        super().__init__(message)
        self.feature = feature

    def details(self) -> dict[str, Any]:
        return {"feature": self.feature}
