import hashlib
import hmac
import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

# Test config; must be set before balance_hook.main is imported
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "balance_hook_test")
os.environ.setdefault("RAZORPAY_WEBHOOK_SECRET", "s3cr3t")
os.environ.setdefault("STATIC_DIR", str(Path(__file__).resolve().parent.parent / "public"))

WEBHOOK_SECRET = os.environ["RAZORPAY_WEBHOOK_SECRET"]


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


@pytest.fixture
def collection():
    """In-memory Mongo collection; fresh per test."""
    return AsyncMongoMockClient()["balance_hook_test"]["balances"]


@pytest.fixture
def store(collection):
    from balance_hook.services.balance import BalanceStore
    return BalanceStore(collection)


@pytest_asyncio.fixture
async def client(store) -> AsyncGenerator[AsyncClient, None]:
    from balance_hook.deps import get_balance_store
    from balance_hook.main import app
    app.dependency_overrides[get_balance_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


class UnreachableCollection:
    """Collection stand-in whose every call fails like a down Mongo."""

    async def find_one_and_update(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


@pytest.fixture
def unreachable_store():
    from balance_hook.services.balance import BalanceStore
    return BalanceStore(UnreachableCollection())


@pytest.fixture(name="sign")
def sign_fixture():
    return sign
