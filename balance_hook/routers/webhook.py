from fastapi import APIRouter, Depends, Header, Request

from balance_hook.core.config import Settings
from balance_hook.deps import get_app_settings, get_balance_store
from balance_hook.services import webhook as webhook_service
from balance_hook.services.balance import BalanceStore

router = APIRouter()


@router.post("/webhook")
async def razorpay_webhook(
    request: Request,
    x_razorpay_signature: str | None = Header(default=None, alias="X-Razorpay-Signature"),
    store: BalanceStore | None = Depends(get_balance_store),
    settings: Settings = Depends(get_app_settings),
):
    """Razorpay webhook: payment.captured -> balance + 1. Signature is checked on the raw body."""
    body = await request.body()
    balance = await webhook_service.handle_webhook(
        body,
        x_razorpay_signature,
        settings.razorpay_webhook_secret,
        store,
    )
    return {"status": "success", "balance": balance}
