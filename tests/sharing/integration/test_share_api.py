SHARE_URL = "/api/v1/share"


async def _checkout(client) -> str:
    response = await client.post(
        "/api/v1/checkout",
        json={"productId": "P1", "customerEmail": "buyer@example.com", "customerName": "Buyer"},
    )
    return response.json()["data"]["orderId"]


class TestShareEndpoint:
    async def test_share_records_event_and_returns_url(self, client, product, order_store):
        order_id = await _checkout(client)

        response = await client.post(SHARE_URL, json={"orderNumber": order_id, "platform": "twitter"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Successfully shared on twitter"
        assert body["data"]["shareUrl"].startswith("https://twitter.com/intent/tweet?")

        order = await order_store.find_by_order_id(order_id)
        assert order.shared_on_social is True
        assert [share.platform for share in order.social_shares] == ["twitter"]

    async def test_repeated_shares_accumulate(self, client, product, order_store):
        order_id = await _checkout(client)

        await client.post(SHARE_URL, json={"orderNumber": order_id, "platform": "facebook"})
        await client.post(SHARE_URL, json={"orderNumber": order_id, "platform": "linkedin"})

        order = await order_store.find_by_order_id(order_id)
        assert [share.platform for share in order.social_shares] == ["facebook", "linkedin"]

    async def test_unknown_platform_gets_facebook_link(self, client, product):
        order_id = await _checkout(client)

        response = await client.post(SHARE_URL, json={"orderNumber": order_id, "platform": "myspace"})

        assert response.json()["data"]["shareUrl"].startswith("https://www.facebook.com/sharer/sharer.php?u=")

    async def test_unknown_order(self, client):
        response = await client.post(SHARE_URL, json={"orderNumber": "order_missing", "platform": "twitter"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Order not found"}
