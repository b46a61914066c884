"""Singleton balance counter backed by one Mongo document.

Both operations are single find_one_and_update upserts keyed by the fixed
id, so concurrent callers never create duplicates or lose increments.
"""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from balance_hook.core.exceptions import StorageUnavailable
from balance_hook.core.logging import get_logger
from balance_hook.models.balance import BALANCE_FIELD, BALANCE_ID, BalanceRecord

log = get_logger(__name__)


class BalanceStore:
    """Read and atomically increment the balance record."""

    def __init__(self, collection: AsyncIOMotorCollection, record_id: str = BALANCE_ID):
        self._collection = collection
        self._record_id = record_id

    @classmethod
    def from_model(cls) -> "BalanceStore":
        """Build from the collection beanie registered for BalanceRecord (after init_db)."""
        return cls(BalanceRecord.get_motor_collection())

    async def get_balance(self) -> int:
        """Return current value, creating the record at 0 if absent."""
        doc = await self._upsert({"$setOnInsert": {BALANCE_FIELD: 0}}, op="get_balance")
        return int(doc.get(BALANCE_FIELD, 0))

    async def increment_balance(self) -> int:
        """Add 1 (creating the record at 1 if absent); return the new value."""
        doc = await self._upsert({"$inc": {BALANCE_FIELD: 1}}, op="increment_balance")
        return int(doc[BALANCE_FIELD])

    async def _upsert(self, update: dict[str, Any], op: str) -> dict[str, Any]:
        try:
            doc = await self._collection.find_one_and_update(
                {"_id": self._record_id},
                update,
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            log.error("storage_error", op=op, error=str(exc))
            raise StorageUnavailable() from exc
        return doc
