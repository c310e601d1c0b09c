"""Persisted favorites store"""

import asyncio
import json
from typing import Awaitable, Callable, List

from ..config import settings
from .log_service import log_service
from .slot_storage import SlotStorage

FavoritesListener = Callable[[List[str]], Awaitable[None]]


class FavoritesStore:
    """
    Ordered set of favorite IMDb ids kept in one storage slot.

    The full list is written back after every mutation. Reads and writes
    never raise: unreadable content counts as an empty set and failed writes
    are only logged.
    """

    def __init__(self, storage: SlotStorage, slot: str = None):
        self.storage = storage
        self.slot = slot or settings.FAVORITES_SLOT
        self._ids: List[str] = []
        self._listeners: List[FavoritesListener] = []
        self._lock = asyncio.Lock()

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    @property
    def count(self) -> int:
        return len(self._ids)

    def contains(self, imdb_id: str) -> bool:
        return imdb_id in self._ids

    def subscribe(self, listener: FavoritesListener):
        """Register an async callback run with the new ids after each change"""
        self._listeners.append(listener)

    async def load(self) -> List[str]:
        """Read the persisted ids, [] on missing or corrupt content"""
        try:
            raw = await self.storage.read(self.slot)
        except Exception as e:
            log_service.error(f"Failed to read favorites slot {self.slot}: {e}")
            return []

        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            log_service.info(f"Discarding unreadable favorites slot {self.slot}")
            return []

        if not isinstance(parsed, list):
            log_service.info(f"Discarding non-list favorites slot {self.slot}")
            return []

        ids: List[str] = []
        for item in parsed:
            if isinstance(item, str) and item not in ids:
                ids.append(item)
        return ids

    async def save(self, ids: List[str]):
        """Persist the full list, best effort"""
        try:
            await self.storage.write(self.slot, json.dumps(list(ids)))
        except Exception as e:
            log_service.error(f"Failed to save favorites slot {self.slot}: {e}")

    async def initialize(self):
        """Load persisted favorites into memory and notify listeners"""
        async with self._lock:
            self._ids = await self.load()
            log_service.info(f"Loaded {len(self._ids)} favorites")
            await self._notify()

    async def add(self, imdb_id: str) -> bool:
        """Append imdb_id unless present. Returns True if the set changed."""
        async with self._lock:
            return await self._add(imdb_id)

    async def remove(self, imdb_id: str) -> bool:
        """Drop imdb_id if present. Returns True if the set changed."""
        async with self._lock:
            return await self._remove(imdb_id)

    async def toggle(self, imdb_id: str) -> bool:
        """Flip membership of imdb_id. Returns the new membership."""
        async with self._lock:
            if imdb_id in self._ids:
                await self._remove(imdb_id)
                return False
            await self._add(imdb_id)
            return True

    # Callers hold self._lock: mutation, save and notify run as one step
    async def _add(self, imdb_id: str) -> bool:
        if imdb_id in self._ids:
            return False

        self._ids = [*self._ids, imdb_id]
        await self.save(self._ids)
        await self._notify()
        return True

    async def _remove(self, imdb_id: str) -> bool:
        if imdb_id not in self._ids:
            return False

        self._ids = [item for item in self._ids if item != imdb_id]
        await self.save(self._ids)
        await self._notify()
        return True

    async def _notify(self):
        ids = self.ids
        for listener in self._listeners:
            await listener(ids)
