"""HMAC-SHA256 payment signatures.

The gateway signs ``"{order_id}|{payment_id}"`` with the merchant's key
secret and hands the hex digest to the browser on payment completion.
Recomputing it server-side is the only proof that the payment really
happened.
"""

import hashlib
import hmac


def compute_payment_signature(order_id: str, payment_id: str, secret: str) -> str:
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def is_valid_payment_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    """Constant-time comparison of the supplied signature against the expected one."""
    expected = compute_payment_signature(order_id, payment_id, secret)
    return hmac.compare_digest(expected.encode(), signature.encode())
