"""
Domain layer - ORM tables, entity schemas and mappers.
"""

from domain import models, schemas, mappers

__all__ = ["models", "schemas", "mappers"]
