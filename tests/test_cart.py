class TestCart:
    def test_empty_cart(self, client, user_headers):
        resp = client.get("/api/cart", headers=user_headers)
        assert resp.status_code == 200
        assert resp.json() == {"items": [], "item_count": 0, "subtotal": 0}

    def test_requires_login(self, client):
        assert client.get("/api/cart").status_code == 401

    def test_adding_same_product_merges_quantity(self, client, user_headers, make_product):
        product = make_product(price=25.0, images=["https://img.example.com/a.jpg"])
        client.post("/api/cart/items", json={"product_id": product["id"], "quantity": 1}, headers=user_headers)
        resp = client.post(
            "/api/cart/items", json={"product_id": product["id"], "quantity": 2}, headers=user_headers
        )
        assert resp.status_code == 200
        cart = resp.json()
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 3
        assert cart["items"][0]["image"] == "https://img.example.com/a.jpg"
        assert cart["subtotal"] == 75.0
        assert cart["item_count"] == 3

    def test_inactive_product_cannot_be_added(self, client, user_headers, make_product):
        product = make_product(is_active=False)
        resp = client.post("/api/cart/items", json={"product_id": product["id"]}, headers=user_headers)
        assert resp.status_code == 404

    def test_update_and_remove(self, client, user_headers, make_product):
        lamp = make_product(name="Lamp", price=40.0)
        rug = make_product(name="Rug", price=10.0)
        client.post("/api/cart/items", json={"product_id": lamp["id"]}, headers=user_headers)
        client.post("/api/cart/items", json={"product_id": rug["id"]}, headers=user_headers)

        resp = client.patch(f"/api/cart/items/{rug['id']}", json={"quantity": 4}, headers=user_headers)
        assert resp.json()["subtotal"] == 80.0

        resp = client.delete(f"/api/cart/items/{lamp['id']}", headers=user_headers)
        assert [i["name"] for i in resp.json()["items"]] == ["Rug"]

    def test_update_missing_item(self, client, user_headers):
        resp = client.patch("/api/cart/items/5", json={"quantity": 2}, headers=user_headers)
        assert resp.status_code == 404

    def test_clear(self, client, user_headers, make_product):
        product = make_product()
        client.post("/api/cart/items", json={"product_id": product["id"]}, headers=user_headers)

        assert client.delete("/api/cart", headers=user_headers).status_code == 204
        assert client.get("/api/cart", headers=user_headers).json()["items"] == []

    def test_carts_are_per_user(self, client, user_headers, other_user_headers, make_product):
        product = make_product()
        client.post("/api/cart/items", json={"product_id": product["id"]}, headers=user_headers)
        assert client.get("/api/cart", headers=other_user_headers).json()["items"] == []
