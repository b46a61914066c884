"""Unit tests for the balance store (in-memory Mongo)."""

import asyncio

import pytest

from balance_hook.core.exceptions import StorageUnavailable
from balance_hook.models.balance import BALANCE_ID

pytestmark = pytest.mark.asyncio


async def test_get_balance_empty(store, collection):
    assert await store.get_balance() == 0
    # First read creates the record
    doc = await collection.find_one({"_id": BALANCE_ID})
    assert doc["balance"] == 0


async def test_get_balance_is_idempotent(store, collection):
    await store.get_balance()
    await store.get_balance()
    assert await collection.count_documents({}) == 1


async def test_increment_creates_record_at_one(store):
    assert await store.increment_balance() == 1
    assert await store.get_balance() == 1


async def test_increment_after_read_starts_from_zero(store):
    assert await store.get_balance() == 0
    assert await store.increment_balance() == 1
    assert await store.increment_balance() == 2
    assert await store.get_balance() == 2


async def test_concurrent_increments_lose_nothing(store, collection):
    before = await store.get_balance()
    results = await asyncio.gather(*(store.increment_balance() for _ in range(25)))
    assert await store.get_balance() == before + 25
    assert sorted(results) == list(range(before + 1, before + 26))
    assert await collection.count_documents({}) == 1


async def test_storage_error_surfaces_on_read(unreachable_store):
    with pytest.raises(StorageUnavailable):
        await unreachable_store.get_balance()


async def test_storage_error_surfaces_on_increment(unreachable_store):
    with pytest.raises(StorageUnavailable):
        await unreachable_store.increment_balance()


async def test_existing_record_layout_is_kept(store, collection):
    # Deployments already hold {_id: "balance", balance: <n>}
    await collection.insert_one({"_id": BALANCE_ID, "balance": 7})
    assert await store.get_balance() == 7
    assert await store.increment_balance() == 8
    doc = await collection.find_one({"_id": BALANCE_ID})
    assert doc == {"_id": BALANCE_ID, "balance": 8}
