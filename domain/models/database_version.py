"""
Schema version history.
"""

from sqlalchemy import Column, Integer

from domain.models.database import Base


class DatabaseVersion(Base):
    """Append-only record of applied schema versions; the maximum is current."""

    __tablename__ = "database_version"

    version = Column(Integer, primary_key=True, autoincrement=False)
    migration_date = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<DatabaseVersion(version={self.version}, migration_date={self.migration_date})>"
