"""
Legacy key-value storage adapter.

Before the SQLite store existed the app kept its list as JSON values under
string keys. The migration engine reads that data once, on the first run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import anyio

logger = logging.getLogger("sholist.adapters.legacy_storage")

INGREDIENTS_KEY = "ingredients"


@runtime_checkable
class LegacyStorage(Protocol):
    """What the migration engine needs from the old storage mechanism."""

    async def get_item(self, key: str) -> Optional[Any]: ...


class InMemoryLegacyStorage:
    """Dict-backed storage, used when no legacy file is configured and in tests."""

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        self._items: Dict[str, Any] = dict(items or {})
        self.reads = 0

    async def get_item(self, key: str) -> Optional[Any]:
        self.reads += 1
        return self._items.get(key)

    async def set_item(self, key: str, value: Any) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileLegacyStorage:
    """
    Storage backed by a single JSON object file (key -> JSON value).

    A missing file reads as empty. A file that is not a JSON object raises
    ValueError, which the migration engine reports as a failed migration.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def get_item(self, key: str) -> Optional[Any]:
        return (await self._load()).get(key)

    async def set_item(self, key: str, value: Any) -> None:
        data = await self._load()
        data[key] = value
        await self._dump(data)

    async def remove_item(self, key: str) -> None:
        data = await self._load()
        if key in data:
            del data[key]
            await self._dump(data)

    async def _load(self) -> Dict[str, Any]:
        file = anyio.Path(self.path)
        if not await file.exists():
            logger.debug("Legacy storage file %s not found", self.path)
            return {}
        data = json.loads(await file.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Legacy storage file {self.path} does not hold a JSON object")
        return data

    async def _dump(self, data: Dict[str, Any]) -> None:
        await anyio.Path(self.path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def build_legacy_storage(path: Optional[str]) -> LegacyStorage:
    """File-backed storage when ``path`` is configured, else an empty in-memory one."""
    if path:
        return JsonFileLegacyStorage(path)
    return InMemoryLegacyStorage()
