"""
Adapters package - External storage connections.
Access to the legacy key-value storage migrated on first run.
"""

from adapters import legacy_storage

__all__ = [
    "legacy_storage",
]
