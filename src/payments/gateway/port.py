"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
This enables swapping between FakeGateway (dev/test) and RazorpayGateway
(production) without changing any checkout code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from shared.errors import GatewayError


@dataclass(frozen=True)
class GatewayOrder:
    """Descriptor of a remote payment order, returned to the client to finish payment."""

    id: str
    amount: int
    currency: str
    receipt: str
    status: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "GatewayOrder":
        """Build from a raw gateway response, rejecting anything without a usable order id."""
        if not isinstance(payload, dict):
            raise GatewayError(f"Unexpected gateway response: {payload!r}")

        order_id = payload.get("id")
        if not isinstance(order_id, str) or not order_id:
            raise GatewayError(f"Gateway response has no order id: {payload!r}")

        try:
            amount = int(payload["amount"])
        except (KeyError, TypeError, ValueError) as exc:
            raise GatewayError(f"Gateway response has no valid amount: {payload!r}") from exc

        return cls(
            id=order_id,
            amount=amount,
            currency=str(payload.get("currency", "")),
            receipt=str(payload.get("receipt", "")),
            status=payload.get("status"),
        )

    def to_json(self) -> dict:
        return {
            "orderId": self.id,
            "amount": self.amount,
            "currency": self.currency,
            "receipt": self.receipt,
        }


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: dict[str, str] | None = None,
    ) -> GatewayOrder:
        """Create a remote payment order for ``amount`` minor currency units.

        Raises:
            GatewayError: on any transport failure, rejection or malformed response.
        """
        ...

    @abstractmethod
    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Verify that a payment-completion signature was issued by the gateway."""
        ...
