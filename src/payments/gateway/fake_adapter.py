"""Configurable fake payment gateway for development and testing.

This adapter simulates the payment provider without any external calls.
It can be configured at runtime to succeed, fail, hang, or hand out a fixed
order id, making it useful for:
- Local development without gateway credentials
- Automated tests with predictable outcomes

Signatures are real HMACs over a configurable test secret, so a client can
compute a valid signature exactly as the real gateway would.
"""

import asyncio
from uuid import uuid4

from payments.gateway.port import GatewayOrder, PaymentGateway
from payments.signature import is_valid_payment_signature
from shared.errors import GatewayError


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, secret: str = "test-secret") -> None:
        self.secret = secret
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.delay: float = 0.0
        self.next_order_id: str | None = None
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Gateway unavailable",
        delay: float = 0.0,
        next_order_id: str | None = None,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.delay = delay
        self.next_order_id = next_order_id

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: dict[str, str] | None = None,
    ) -> GatewayOrder:
        self.calls.append(
            {
                "method": "create_order",
                "amount": amount,
                "currency": currency,
                "receipt": receipt,
                "notes": dict(notes or {}),
            }
        )

        if self.delay:
            await asyncio.sleep(self.delay)

        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

        order_id = self.next_order_id or f"order_{uuid4().hex[:14]}"
        self.next_order_id = None
        return GatewayOrder(id=order_id, amount=amount, currency=currency, receipt=receipt, status="created")

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        return is_valid_payment_signature(order_id, payment_id, signature, self.secret)
