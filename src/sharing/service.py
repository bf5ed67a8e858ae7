"""Share service — records a share event on the order and builds the link."""

from ordering.order.store import OrderStore
from sharing.domain import logger
from sharing.links import DEFAULT_BASE_URL, build_share_url
from shared.errors import OrderNotFoundError


class ShareService:
    def __init__(self, order_store: OrderStore, base_url: str = DEFAULT_BASE_URL) -> None:
        self._order_store = order_store
        self._base_url = base_url

    async def share_order(self, order_number: str, platform: str) -> str:
        """Append a share event to the order and return its share URL.

        Returns an empty string when the URL could not be generated; the
        share event is still recorded.
        """
        logger.info("Processing share", order_number=order_number, platform=platform)
        order = await self._order_store.record_share(order_number, platform)
        if order is None:
            raise OrderNotFoundError(f"Order {order_number} not found for share")

        return build_share_url(order_number, platform, order, base_url=self._base_url)
