"""The error envelope hides internal detail outside development mode."""

import httpx
import pytest
from fastapi import FastAPI
from shared.config import get_settings
from shared.errors import GatewayError, OrderNotFoundError
from shared.exception_handlers import register_exception_handlers


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/gateway")
    async def gateway_failure():
        raise GatewayError("upstream said 503 with body <html>")

    @app.get("/order")
    async def missing_order():
        raise OrderNotFoundError("Order order_1 not found")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


@pytest.fixture
def environment(monkeypatch):
    def _set(value: str):
        monkeypatch.setenv("APP_ENV", value)
        get_settings.cache_clear()

    yield _set
    monkeypatch.undo()
    get_settings.cache_clear()


async def _get(path: str) -> httpx.Response:
    transport = httpx.ASGITransport(app=_app(), raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


class TestErrorEnvelope:
    async def test_production_hides_detail(self, environment):
        environment("production")

        response = await _get("/gateway")

        assert response.status_code == 502
        assert response.json() == {"success": False, "message": "Payment service unavailable"}

    async def test_development_includes_detail(self, environment):
        environment("development")

        response = await _get("/gateway")

        assert response.json() == {
            "success": False,
            "message": "Payment service unavailable",
            "error": "upstream said 503 with body <html>",
        }

    async def test_not_found(self, environment):
        environment("production")

        response = await _get("/order")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Order not found"}

    async def test_unhandled_error(self, environment):
        environment("production")

        response = await _get("/boom")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}
