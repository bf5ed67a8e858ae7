"""Razorpay payment gateway adapter.

Talks to the Razorpay Orders REST API with HTTP basic auth (key id / key
secret). Every transport error, non-2xx status and malformed body is
normalized to a single ``GatewayError``.
"""

import httpx

from payments.domain import logger
from payments.gateway.port import GatewayOrder, PaymentGateway
from payments.signature import is_valid_payment_signature
from shared.errors import GatewayError

RAZORPAY_API_URL = "https://api.razorpay.com/v1"


class RazorpayGateway(PaymentGateway):
    """Production gateway adapter backed by the Razorpay Orders API."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        timeout: float = 10.0,
        base_url: str = RAZORPAY_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not key_id or not key_secret:
            raise ValueError("Razorpay key id and key secret are required")
        self.key_id = key_id
        self.key_secret = key_secret
        self.timeout = timeout
        self.base_url = base_url
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            auth=(self.key_id, self.key_secret),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: dict[str, str] | None = None,
    ) -> GatewayOrder:
        payload = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "payment_capture": 1,
            "notes": notes or {},
        }
        logger.info("Creating Razorpay order", amount=amount, currency=currency, receipt=receipt)

        try:
            async with self._client() as client:
                response = await client.post("/orders", json=payload)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as exc:
            raise GatewayError(
                f"Razorpay rejected order creation with status {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise GatewayError(f"Razorpay request failed: {exc!r}") from exc
        except ValueError as exc:
            raise GatewayError("Razorpay returned a non-JSON response") from exc

        order = GatewayOrder.from_payload(body)
        logger.info("Razorpay order created", gateway_order_id=order.id, receipt=receipt)
        return order

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        return is_valid_payment_signature(order_id, payment_id, signature, self.key_secret)
