import os
from pathlib import Path

import httpx
import pytest
from sqlalchemy import func, select

SUPPORT_EMAIL = "support@buynothing.test"


def pytest_sessionstart(session):
    """Pin the environment before any application module reads settings."""
    os.environ["APP_ENV"] = "test"
    os.environ["PAYMENT_GATEWAY"] = "fake"
    os.environ["EMAIL_BACKEND"] = "fake"
    os.environ["SUPPORT_EMAIL"] = SUPPORT_EMAIL
    os.environ.pop("LOG_DIR", None)

    from shared.config import get_settings

    get_settings.cache_clear()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture
async def session_factory(tmp_path):
    """A fresh file-backed SQLite database per test."""
    from shared.db import configure_database, dispose_database, setup_db

    factory = configure_database(f"sqlite+aiosqlite:///{tmp_path / 'buynothing.db'}")
    await setup_db()
    yield factory
    await dispose_database()


@pytest.fixture
def gateway():
    from payments.gateway import reset_gateway, set_gateway
    from payments.gateway.fake_adapter import FakeGateway

    fake = FakeGateway(secret="test-secret")
    set_gateway(fake)
    yield fake
    reset_gateway()


@pytest.fixture
def email_channel():
    from notifications.channel import reset_channels, set_email_channel
    from notifications.channel.fake_email import FakeEmailAdapter

    fake = FakeEmailAdapter()
    set_email_channel(fake)
    yield fake
    reset_channels()


@pytest.fixture
def catalog(session_factory):
    from catalogue.product.catalog import ProductCatalog

    return ProductCatalog(session_factory)


@pytest.fixture
def order_store(session_factory):
    from ordering.order.store import OrderStore

    return OrderStore(session_factory)


@pytest.fixture
async def product(catalog):
    return await catalog.add_product(
        product_id="P1",
        name="P1-name",
        description="Premium nothing",
        price=500,
        category="nothing",
        inventory=10,
        featured=True,
    )


@pytest.fixture
async def orchestrator(session_factory, catalog, order_store, gateway, email_channel):
    from notifications.dispatch import NotificationDispatcher, drain_background_tasks
    from ordering.checkout.orchestrator import CheckoutOrchestrator

    yield CheckoutOrchestrator(
        session_factory=session_factory,
        catalog=catalog,
        order_store=order_store,
        gateway=gateway,
        notifier=NotificationDispatcher(channel=email_channel, support_email=SUPPORT_EMAIL),
        currency="INR",
        gateway_timeout=1.0,
    )
    await drain_background_tasks()


@pytest.fixture
def order_count(session_factory):
    from ordering.order.order import Order

    async def _count() -> int:
        async with session_factory() as session:
            return await session.scalar(select(func.count()).select_from(Order))

    return _count


@pytest.fixture
async def client(session_factory, gateway, email_channel):
    from app import create_app
    from notifications.dispatch import drain_background_tasks

    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    await drain_background_tasks()
