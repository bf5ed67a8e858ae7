"""Checkout Orchestrator — the checkout transaction, payment verification and confirmation.

Checkout flow (strictly sequential, each step waits on the previous one):
    1. Open a transaction context
    2. Validate the product id format            -> ProductValidationError
    3. Fetch a product snapshot inside the tx    -> ProductNotFoundError
    4. Create the remote payment order           -> GatewayError
    5. Persist the order inside the tx           -> PersistenceError
    6. Commit; on any failure in 2-5 abort instead
    7. Release the context on every exit path

A gateway order may outlive an aborted checkout. The missing local record is
the failure signal; the gateway order can be found by its receipt token for
manual reconciliation.

Product ``is_active`` and ``inventory`` are deliberately not enforced here.
"""

import asyncio
from dataclasses import dataclass
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalogue.product.catalog import ProductCatalog, is_valid_product_id
from catalogue.product.product import ProductSnapshot
from notifications.dispatch import NotificationDispatcher
from ordering.domain import logger
from ordering.order.order import OrderData
from ordering.order.store import OrderStore
from payments.gateway.port import GatewayOrder, PaymentGateway
from shared.errors import (
    CheckoutFailedError,
    GatewayError,
    OrderNotFoundError,
    ProductNotFoundError,
    ProductValidationError,
    ShopError,
    SignatureMismatchError,
)
from shared.transaction import TransactionContext


@dataclass(frozen=True)
class PaymentDetails:
    order_id: str
    payment_id: str
    signature: str


@dataclass(frozen=True)
class OrderSummary:
    product: str
    amount: int
    order_number: str

    def to_json(self) -> dict:
        return {"product": self.product, "amount": self.amount, "orderNumber": self.order_number}


class CheckoutOrchestrator:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        catalog: ProductCatalog,
        order_store: OrderStore,
        gateway: PaymentGateway,
        notifier: NotificationDispatcher,
        currency: str = "INR",
        gateway_timeout: float = 10.0,
    ) -> None:
        self._session_factory = session_factory
        self._catalog = catalog
        self._order_store = order_store
        self._gateway = gateway
        self._notifier = notifier
        self._currency = currency
        self._gateway_timeout = gateway_timeout

    async def initiate_checkout(self, product_id: str, customer_email: str, customer_name: str) -> GatewayOrder:
        """Reserve a product and create a payable order.

        Returns the remote payment order descriptor the client needs to
        complete the payment handshake.
        """
        receipt = str(uuid4())
        logger.info("Initiating checkout", product_id=product_id, receipt=receipt)

        tx = await TransactionContext.open(self._session_factory)
        try:
            product = await self._validate_and_fetch_product(product_id, tx)
            gateway_order = await self._create_gateway_order(product, customer_name, customer_email, receipt)
            order = await self._order_store.create_order(
                OrderData(
                    order_id=gateway_order.id,
                    product_id=product.id,
                    product_name=product.name,
                    product_category=product.category,
                    customer_email=customer_email,
                    customer_name=customer_name,
                    amount=product.price,
                ),
                tx,
            )
            await tx.commit()
        except Exception as exc:
            await tx.abort()
            logger.error("Checkout failed", product_id=product_id, receipt=receipt, exc_info=exc)
            if isinstance(exc, ShopError):
                raise
            raise CheckoutFailedError(f"Unexpected checkout failure: {exc!r}") from exc
        finally:
            logger.debug("Releasing checkout transaction", receipt=receipt)
            await tx.release()

        logger.info("Order created", order_id=order.order_id, amount=order.amount)
        return gateway_order

    def validate_payment(self, order_id: str, payment_id: str, signature: str) -> None:
        """Raise SignatureMismatchError unless the gateway really signed this payment."""
        logger.info("Verifying payment signature", order_id=order_id, payment_id=payment_id)
        if not self._gateway.verify_payment_signature(order_id, payment_id, signature):
            raise SignatureMismatchError(f"Signature mismatch for order {order_id}, payment {payment_id}")
        logger.info("Payment signature verified", order_id=order_id, payment_id=payment_id)

    async def confirm_order(
        self,
        product_id: str,
        customer_name: str,
        customer_email: str,
        payment: PaymentDetails,
    ) -> OrderSummary:
        """Re-read the product and order, then fire the confirmation email without awaiting it.

        Repeated confirmations return the same summary; each one dispatches
        another email.
        """
        logger.info("Confirming order", order_id=payment.order_id, product_id=product_id)

        product = await self._catalog.get_product(product_id)
        if product is None:
            raise OrderNotFoundError(f"Product {product_id} not found during order confirmation")

        order = await self._order_store.find_by_order_id(payment.order_id)
        if order is None:
            raise OrderNotFoundError(f"Order {payment.order_id} not found during order confirmation")

        self._notifier.send_confirmation_email_in_background(
            customer_email=customer_email,
            customer_name=customer_name,
            product_name=product.name,
            order_id=order.order_id,
        )
        return OrderSummary(product=product.name, amount=order.amount, order_number=order.order_id)

    async def _validate_and_fetch_product(self, product_id: str, tx: TransactionContext) -> ProductSnapshot:
        if not is_valid_product_id(product_id):
            raise ProductValidationError(f"Invalid product id format: {product_id!r}")

        product = await self._catalog.get_product(product_id, tx=tx)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")

        logger.debug("Product validated", product_id=product.id, name=product.name, price=product.price)
        return product

    async def _create_gateway_order(
        self,
        product: ProductSnapshot,
        customer_name: str,
        customer_email: str,
        receipt: str,
    ) -> GatewayOrder:
        logger.info("Creating payment order", product_id=product.id, amount=product.price, receipt=receipt)
        try:
            return await asyncio.wait_for(
                self._gateway.create_order(
                    amount=product.price,
                    currency=self._currency,
                    receipt=receipt,
                    notes={
                        "productId": product.id,
                        "customerName": customer_name,
                        "customerEmail": customer_email,
                    },
                ),
                timeout=self._gateway_timeout,
            )
        except GatewayError:
            raise
        except TimeoutError as exc:
            raise GatewayError(f"Payment gateway timed out after {self._gateway_timeout}s") from exc
        except Exception as exc:
            raise GatewayError(f"Payment order creation failed: {exc!r}") from exc
