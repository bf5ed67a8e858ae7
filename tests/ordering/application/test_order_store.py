import pytest
from ordering.order.order import OrderData
from shared.errors import PersistenceError
from shared.transaction import TransactionContext


def _order_data(order_id: str = "order_store_1", **overrides) -> OrderData:
    values = {
        "order_id": order_id,
        "product_id": "P1",
        "product_name": "P1-name",
        "product_category": "nothing",
        "customer_email": "buyer@example.com",
        "customer_name": "Buyer",
        "amount": 500,
    }
    values.update(overrides)
    return OrderData(**values)


class TestCreateOrder:
    async def test_order_visible_only_after_commit(self, session_factory, order_store):
        tx = await TransactionContext.open(session_factory)
        try:
            await order_store.create_order(_order_data(), tx)
            assert await order_store.find_by_order_id("order_store_1") is None
            await tx.commit()
        finally:
            await tx.release()

        assert await order_store.find_by_order_id("order_store_1") is not None

    async def test_aborted_transaction_leaves_nothing(self, session_factory, order_store, order_count):
        tx = await TransactionContext.open(session_factory)
        try:
            await order_store.create_order(_order_data(), tx)
            await tx.abort()
        finally:
            await tx.release()

        assert await order_count() == 0

    async def test_requires_active_transaction(self, session_factory, order_store):
        tx = await TransactionContext.open(session_factory)
        await tx.abort()
        await tx.release()

        with pytest.raises(PersistenceError):
            await order_store.create_order(_order_data(), tx)

    async def test_duplicate_id_raises_persistence_error(self, session_factory, order_store):
        tx = await TransactionContext.open(session_factory)
        try:
            await order_store.create_order(_order_data(), tx)
            await tx.commit()
        finally:
            await tx.release()

        tx = await TransactionContext.open(session_factory)
        try:
            with pytest.raises(PersistenceError):
                await order_store.create_order(_order_data(customer_name="Someone Else"), tx)
            await tx.abort()
        finally:
            await tx.release()


async def _persist(session_factory, order_store, order_id: str = "order_store_1") -> None:
    tx = await TransactionContext.open(session_factory)
    try:
        await order_store.create_order(_order_data(order_id), tx)
        await tx.commit()
    finally:
        await tx.release()


class TestFindOrder:
    async def test_find_unknown_order_returns_none(self, order_store):
        assert await order_store.find_by_order_id("order_missing") is None


class TestRecordShare:
    async def test_marks_order_shared(self, session_factory, order_store):
        await _persist(session_factory, order_store)

        order = await order_store.record_share("order_store_1", "twitter")

        assert order.shared_on_social is True
        assert [share.platform for share in order.social_shares] == ["twitter"]
        assert order.social_shares[0].shared_at is not None

    async def test_unknown_order_returns_none(self, order_store, order_count):
        assert await order_store.record_share("order_missing", "twitter") is None
        assert await order_count() == 0

    async def test_overlapping_shares_are_all_kept(self, session_factory, order_store):
        await _persist(session_factory, order_store, "order_race")
        first_view = await order_store.find_by_order_id("order_race")
        second_view = await order_store.find_by_order_id("order_race")

        await order_store.record_share(first_view.order_id, "facebook")
        await order_store.record_share(second_view.order_id, "twitter")

        stored = await order_store.find_by_order_id("order_race")
        assert [share.platform for share in stored.social_shares] == ["facebook", "twitter"]
        assert first_view.social_shares == []

    async def test_shares_accumulate_in_order(self, session_factory, order_store):
        await _persist(session_factory, order_store)

        for platform in ("facebook", "linkedin", "whatsapp"):
            await order_store.record_share("order_store_1", platform)

        stored = await order_store.find_by_order_id("order_store_1")
        assert [share.platform for share in stored.social_shares] == ["facebook", "linkedin", "whatsapp"]
