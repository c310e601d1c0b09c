"""Named slot storage backed by the database"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.sql import func

from ..database import AsyncSessionLocal
from ..models.storage_slot import StorageSlot


class SlotStorage:
    """Read and write raw text values under a key, one session per call"""

    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def read(self, key: str) -> Optional[str]:
        """Get the stored text for key, None if the slot was never written"""
        async with self.session_factory() as db:
            result = await db.execute(select(StorageSlot).where(StorageSlot.key == key))
            slot = result.scalar_one_or_none()
            return slot.value if slot else None

    async def write(self, key: str, value: str):
        """Upsert the slot in a single statement"""
        stmt = insert(StorageSlot).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[StorageSlot.key],
            set_={"value": stmt.excluded.value, "updated_at": func.now()},
        )
        async with self.session_factory() as db:
            await db.execute(stmt)
            await db.commit()
