class TestProductEndpoints:
    async def test_list_products(self, client, product):
        response = await client.get("/api/v1/products")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Products fetched successfully"
        assert body["data"] == [
            {
                "id": "P1",
                "name": "P1-name",
                "description": "Premium nothing",
                "price": 500,
                "category": "nothing",
                "isActive": True,
                "inventory": 10,
                "featured": True,
            }
        ]

    async def test_list_featured_only(self, client, catalog, product):
        await catalog.add_product(name="Plain nothing", price=100, featured=False)

        response = await client.get("/api/v1/products", params={"featured": "false"})

        assert [item["name"] for item in response.json()["data"]] == ["Plain nothing"]

    async def test_empty_list_is_not_found(self, client):
        response = await client.get("/api/v1/products")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "No products found"}

    async def test_get_product(self, client, product):
        response = await client.get("/api/v1/products/P1")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "P1-name"

    async def test_get_unknown_product(self, client, product):
        response = await client.get("/api/v1/products/P404")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "environment": "test"}
