"""Database models"""

from .storage_slot import StorageSlot

__all__ = ["StorageSlot"]
