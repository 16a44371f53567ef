"""API routes package"""

from . import health, ingredients

__all__ = ["health", "ingredients"]
