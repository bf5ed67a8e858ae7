"""Order Store — persistence of order records.

``create_order`` only ever writes through the caller's transaction context,
so an aborted checkout leaves no order behind. Reads and later mutations
(share events) run in their own short sessions and only ever insert.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.domain import logger
from ordering.order.order import Order, OrderData, OrderStatus, PaymentStatus, SocialShare
from shared.errors import PersistenceError
from shared.transaction import TransactionContext


class OrderStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_order(self, order_data: OrderData, tx: TransactionContext) -> Order:
        """Insert a new order inside ``tx``. Nothing is visible until ``tx`` commits."""
        if not tx.is_active:
            raise PersistenceError("Cannot create an order outside an active transaction")

        order = Order(
            order_id=order_data.order_id,
            product_id=order_data.product_id,
            product_name=order_data.product_name,
            product_category=order_data.product_category,
            customer_email=order_data.customer_email,
            customer_name=order_data.customer_name,
            amount=order_data.amount,
            status=OrderStatus.CONFIRMED.value,
            payment_status=PaymentStatus.PENDING.value,
            shared_on_social=False,
            social_shares=[],
        )

        try:
            tx.session.add(order)
            await tx.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to save order {order_data.order_id}: {exc}") from exc

        logger.info("Order record created", order_id=order.order_id, product_id=order.product_id)
        return order

    async def find_by_order_id(self, order_id: str) -> Order | None:
        async with self._session_factory() as session:
            return await session.get(Order, order_id)

    async def record_share(self, order_id: str, platform: str) -> Order | None:
        """Append a share event to the stored order. Returns None when the order is unknown.

        The order is loaded inside the write session and the share is only
        ever added, so shares written by overlapping requests are kept.
        """
        try:
            async with self._session_factory() as session, session.begin():
                order = await session.get(Order, order_id)
                if order is None:
                    return None
                session.add(SocialShare(order_id=order_id, platform=platform))
                order.shared_on_social = True
                logger.info("Share recorded", order_id=order_id, platform=platform)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to record share for order {order_id}: {exc}") from exc

        return await self.find_by_order_id(order_id)
