"""
Database configuration and session management.

One ``Database`` handle is opened per process (see ``get_database``) and passed
to repositories and the migration code explicitly.
"""

import logging
import threading
import time
from contextlib import contextmanager, nullcontext
from functools import lru_cache
from typing import Iterator, Optional

from sqlalchemy import Connection, create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("sholist.database")

# Database version number - increment this when the schema changes
DB_VERSION = 1

# Default database file name
DB_NAME = "sholist.db"

MEMORY_DATABASE = ":memory:"

# Create SQLAlchemy Base
Base = declarative_base()


def now_ms() -> int:
    """Current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class Database:
    """Handle on the embedded SQLite store: one engine and its session factory."""

    def __init__(
        self,
        path: Optional[str] = None,
        echo: Optional[bool] = None,
        busy_timeout_sec: Optional[float] = None,
    ):
        self.path = path or settings.database_path or DB_NAME
        timeout = (
            settings.db_busy_timeout_sec if busy_timeout_sec is None else busy_timeout_sec
        )
        engine_kwargs = {
            "echo": settings.db_echo if echo is None else echo,
            "future": True,
            "connect_args": {"check_same_thread": False, "timeout": timeout},
        }
        if self.path == MEMORY_DATABASE:
            # every pooled connection would otherwise see its own empty database
            url = "sqlite://"
            engine_kwargs["poolclass"] = StaticPool
            # worker threads share that one connection, so only one may use it at a time
            self._guard = threading.RLock()
        else:
            url = f"sqlite:///{self.path}"
            self._guard = nullcontext()

        self.engine = create_engine(url, **engine_kwargs)
        _enable_transactional_ddl(self.engine)
        self.SessionLocal = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )
        # Created lazily by the initialization orchestrator inside its event loop.
        self.init_lock = None
        logger.debug("Opened SQLite database at %s", self.path)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session for reads; nothing is committed."""
        with self._guard, self.SessionLocal() as session:
            yield session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Session whose work commits on exit or rolls back on error."""
        with self._guard, self.SessionLocal.begin() as session:
            yield session

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Engine-level connection in a transaction, for DDL and catalog lookups."""
        with self._guard, self.engine.begin() as conn:
            yield conn

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"<Database(path='{self.path}')>"


def _enable_transactional_ddl(engine) -> None:
    # pysqlite only opens transactions implicitly before DML, so CREATE TABLE
    # would autocommit. Let SQLAlchemy emit BEGIN itself.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


@lru_cache(maxsize=1)
def get_database() -> Database:
    """Process-wide database handle, opened on first use."""
    return Database(settings.database_path)
