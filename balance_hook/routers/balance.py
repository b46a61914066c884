from fastapi import APIRouter, Depends

from balance_hook.core.exceptions import FetchFailed, StorageUnavailable
from balance_hook.core.logging import get_logger
from balance_hook.deps import get_balance_store
from balance_hook.services.balance import BalanceStore

router = APIRouter()
log = get_logger(__name__)


@router.get("/balance")
async def read_balance(store: BalanceStore | None = Depends(get_balance_store)):
    """Return current balance (record is created at 0 on first read)."""
    try:
        if store is None:
            raise StorageUnavailable("Balance store not initialised")
        balance = await store.get_balance()
    except StorageUnavailable as exc:
        log.error("balance_fetch_failed", error=exc.message)
        raise FetchFailed() from exc
    return {"balance": balance}
