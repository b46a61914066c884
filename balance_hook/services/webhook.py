"""Razorpay webhook: verify HMAC over raw bytes, bump balance on payment.captured."""

from pydantic import BaseModel, ConfigDict, ValidationError

from balance_hook.core.exceptions import (
    EventNotHandled,
    InvalidSignature,
    MalformedPayload,
    StorageUnavailable,
    UpdateFailed,
    WebhookNotConfigured,
)
from balance_hook.core.logging import get_logger
from balance_hook.core.security import verify_razorpay_webhook
from balance_hook.services.balance import BalanceStore

PAYMENT_CAPTURED = "payment.captured"

log = get_logger(__name__)


class WebhookPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    event: str | None = None


def parse_payload(payload: bytes) -> WebhookPayload:
    try:
        return WebhookPayload.model_validate_json(payload)
    except ValidationError as exc:
        raise MalformedPayload() from exc


async def handle_webhook(
    payload: bytes,
    signature: str | None,
    secret: str,
    store: BalanceStore | None,
) -> int:
    """Return the new balance for a verified payment.captured delivery; raise otherwise."""
    if not secret:
        log.error("webhook_not_configured")
        raise WebhookNotConfigured()
    if not verify_razorpay_webhook(payload, signature, secret):
        log.warning("webhook_invalid_signature", has_signature=bool(signature))
        raise InvalidSignature()
    log.info("webhook_verified")

    event = parse_payload(payload).event
    if event != PAYMENT_CAPTURED:
        log.info("webhook_event_ignored", webhook_event=event)
        raise EventNotHandled()

    try:
        if store is None:
            raise StorageUnavailable("Balance store not initialised")
        balance = await store.increment_balance()
    except StorageUnavailable as exc:
        log.error("balance_update_failed", error=exc.message)
        raise UpdateFailed() from exc
    log.info("balance_updated", balance=balance)
    return balance
