"""Composition root for the checkout orchestrator.

Routes and scripts call ``build_checkout_orchestrator()`` instead of wiring
collaborators themselves. Each collaborator comes from its own registry, so
tests swap the gateway, email channel or database in one place.
"""

from catalogue.product.catalog import ProductCatalog
from notifications.dispatch import NotificationDispatcher
from ordering.checkout.orchestrator import CheckoutOrchestrator
from ordering.order.store import OrderStore
from payments.gateway import get_gateway
from shared.config import get_settings
from shared.db import get_session_factory


def build_checkout_orchestrator() -> CheckoutOrchestrator:
    settings = get_settings()
    session_factory = get_session_factory()
    return CheckoutOrchestrator(
        session_factory=session_factory,
        catalog=ProductCatalog(session_factory),
        order_store=OrderStore(session_factory),
        gateway=get_gateway(),
        notifier=NotificationDispatcher(support_email=settings.support_email),
        currency=settings.currency,
        gateway_timeout=settings.gateway_timeout_seconds,
    )
