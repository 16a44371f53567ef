"""
Shared query execution for the data access layer.

Repositories hold a ``QueryExecutor`` rather than inheriting from a base class.
The executor runs blocking SQLAlchemy work on a worker thread and turns any
exception into a ``DbQueryError`` inside a failed ``Result``.
"""

import logging
from typing import Callable, TypeVar

import anyio
from sqlalchemy.orm import Session

from app.exceptions import DbQueryError
from app.result import Result
from domain.models.database import Database

T = TypeVar("T")


class QueryExecutor:
    """
    Runs repository operations with uniform error translation.

    Every failure is logged here, once; callers only see the Result.
    """

    def __init__(self, database: Database, entity_name: str, logger_name: str):
        self.database = database
        self.entity_name = entity_name
        self.logger = logging.getLogger(logger_name)

    async def execute_query(
        self, query_fn: Callable[[Session], T], operation_name: str
    ) -> Result[T, DbQueryError]:
        """
        Run ``query_fn`` with a plain session and wrap its return value.

        Args:
            query_fn: receives a Session and returns the data for the caller
            operation_name: name used in the error and the log (e.g. "list")

        Returns:
            Result.ok(data) or Result.fail(DbQueryError)
        """

        def run() -> T:
            with self.database.session() as session:
                return query_fn(session)

        try:
            data = await anyio.to_thread.run_sync(run)
        except Exception as exc:
            return Result.fail(self._translate(exc, operation_name, transactional=False))
        return Result.ok(data)

    async def execute_transaction(
        self, query_fn: Callable[[Session], object], operation_name: str
    ) -> Result[None, DbQueryError]:
        """
        Run ``query_fn`` inside one transaction: every write commits or none do.

        Args:
            query_fn: receives a Session bound to an open transaction
            operation_name: name used in the error and the log (e.g. "add")

        Returns:
            Result.ok(None) or Result.fail(DbQueryError)
        """

        def run() -> None:
            with self.database.transaction() as session:
                query_fn(session)

        try:
            await anyio.to_thread.run_sync(run)
        except Exception as exc:
            return Result.fail(self._translate(exc, operation_name, transactional=True))
        return Result.ok(None)

    def _translate(self, exc: Exception, operation_name: str, transactional: bool) -> DbQueryError:
        db_error = DbQueryError(
            f"Failed to {operation_name} {self.entity_name}(s)",
            operation=operation_name,
            entity=self.entity_name,
            cause=exc,
        )
        kind = "transactional " if transactional else ""
        self.logger.error(
            "Error during %s%s %s(s): %s", kind, operation_name, self.entity_name, exc
        )
        return db_error
