"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeGateway for development and testing (default)
- RazorpayGateway for production (``PAYMENT_GATEWAY=razorpay``)
"""

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import PaymentGateway
from payments.gateway.razorpay_adapter import RazorpayGateway
from shared.config import get_settings

_current_gateway: PaymentGateway | None = None


def _gateway_from_settings() -> PaymentGateway:
    settings = get_settings()
    if settings.payment_gateway == "razorpay":
        return RazorpayGateway(
            key_id=settings.razorpay_key_id,
            key_secret=settings.razorpay_key_secret,
            timeout=settings.gateway_timeout_seconds,
        )
    if settings.payment_gateway == "fake":
        return FakeGateway()
    raise ValueError(f"Unknown payment gateway: {settings.payment_gateway}")


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, building it from settings on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _gateway_from_settings()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
