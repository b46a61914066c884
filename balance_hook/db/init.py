import certifi
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from balance_hook.core.config import Settings, get_settings
from balance_hook.core.logging import get_logger
from balance_hook.models.balance import BalanceRecord

DOCUMENT_MODELS = [
    BalanceRecord,
]

log = get_logger(__name__)


def _use_tls(uri: str) -> bool:
    """True if URI uses TLS (Atlas or explicit tls=true). Avoids TLS for plain mongodb:// in CI."""
    return "mongodb+srv://" in uri or "tls=true" in uri.lower()


async def init_db(settings: Settings | None = None) -> AsyncIOMotorDatabase:
    """Connect, ping, and register document models. Raises if Mongo is unreachable."""
    settings = settings or get_settings()
    # Atlas in Docker: tlsCAFile + tlsDisableOCSPEndpointCheck avoid TLSV1_ALERT_INTERNAL_ERROR
    kwargs = {"serverSelectionTimeoutMS": settings.mongodb_timeout_ms}
    if _use_tls(settings.mongodb_uri):
        kwargs["tlsCAFile"] = certifi.where()
        kwargs["tlsDisableOCSPEndpointCheck"] = True
    client = AsyncIOMotorClient(settings.mongodb_uri, **kwargs)
    database = client[settings.mongodb_db_name]
    try:
        await client.admin.command("ping")
        await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    except PyMongoError as exc:
        log.error("db_connect_failed", db=settings.mongodb_db_name, error=str(exc))
        client.close()
        raise
    return database
