import hashlib
import hmac


def compute_signature(payload: bytes, secret: str) -> str:
    """Hex HMAC-SHA256 of the raw payload bytes."""
    return hmac.new(
        secret.encode("utf-8"),
        payload,
        hashlib.sha256,
    ).hexdigest()


def verify_razorpay_webhook(payload: bytes, signature: str | None, secret: str) -> bool:
    if not signature:
        return False
    expected = compute_signature(payload, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
