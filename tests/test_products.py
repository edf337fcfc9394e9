from urllib.parse import parse_qs

import httpx
import pytest

from homedecor.main import app
from homedecor.shared.media import CloudinaryClient, get_media_client

HOSTED = "https://res.cloudinary.com/demo/image/upload/v1712345678/products/oak-side-table/front.jpg"


class TestCatalogue:
    def test_create_and_fetch(self, client, make_product):
        product = make_product(images=[HOSTED], tags=["oak", "living-room"])
        assert product["images"] == [HOSTED]

        resp = client.get(f"/api/products/{product['id']}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Oak Side Table"

    def test_unknown_product_is_404(self, client):
        assert client.get("/api/products/999").status_code == 404

    def test_customer_cannot_create(self, client, user_headers):
        resp = client.post(
            "/api/products",
            json={"name": "X", "description": "Y", "price": 1, "category": "misc"},
            headers=user_headers,
        )
        assert resp.status_code == 403

    def test_filters_and_pagination(self, client, make_product):
        make_product(name="Brass Lamp", category="lighting", is_featured=True)
        make_product(name="Linen Cushion", category="textiles", is_new_arrival=True, tags=["soft"])
        make_product(name="Hidden Vase", category="decor", is_active=False)

        listing = client.get("/api/products").json()
        assert {p["name"] for p in listing["products"]} == {"Brass Lamp", "Linen Cushion"}
        assert listing["pagination"] == {"page": 1, "limit": 20, "total": 2, "pages": 1}

        assert [p["name"] for p in client.get("/api/products?category=lighting").json()["products"]] == ["Brass Lamp"]
        assert [p["name"] for p in client.get("/api/products?featured=true").json()["products"]] == ["Brass Lamp"]
        assert [p["name"] for p in client.get("/api/products?new_arrivals=true").json()["products"]] == [
            "Linen Cushion"
        ]
        assert [p["name"] for p in client.get("/api/products?search=SOFT").json()["products"]] == ["Linen Cushion"]

        page = client.get("/api/products?limit=1&page=2").json()
        assert len(page["products"]) == 1
        assert page["pagination"]["pages"] == 2

    def test_partial_update(self, client, make_product, admin_headers):
        product = make_product()
        resp = client.put(f"/api/products/{product['id']}", json={"price": 120.5}, headers=admin_headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Product updated successfully"
        assert body["product"]["price"] == 120.5
        assert body["product"]["name"] == product["name"]

    @pytest.mark.parametrize("field", ["name", "price", "category", "images", "stock", "is_active"])
    def test_null_required_field_rejected(self, client, make_product, admin_headers, field):
        product = make_product()
        resp = client.put(f"/api/products/{product['id']}", json={field: None}, headers=admin_headers)
        assert resp.status_code == 422
        assert client.get(f"/api/products/{product['id']}").json()["name"] == product["name"]

    def test_optional_details_can_be_cleared(self, client, make_product, admin_headers):
        product = make_product(material="Oak")
        resp = client.put(f"/api/products/{product['id']}", json={"material": None}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["product"]["material"] is None


class TestDeleteProduct:
    def test_delete_removes_hosted_images(self, client, make_product, admin_headers, use_media, media_calls):
        product = make_product(images=[HOSTED, "https://elsewhere.example.com/no-version.png"])

        resp = client.delete(f"/api/products/{product['id']}", headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"/api/products/{product['id']}").status_code == 404

        # Only the URL with a recognisable public id is destroyed
        assert len(media_calls) == 1
        path, body = media_calls[0]
        assert path == "/v1_1/demo/image/destroy"
        form = parse_qs(body.decode())
        assert form["public_id"] == ["products/oak-side-table/front"]
        assert "signature" in form

    def test_cleanup_failure_does_not_block_delete(self, client, make_product, admin_headers):
        failing = CloudinaryClient(
            cloud_name="demo",
            api_key="key",
            api_secret="secret",
            transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"})),
        )
        app.dependency_overrides[get_media_client] = lambda: failing
        product = make_product(images=[HOSTED])

        resp = client.delete(f"/api/products/{product['id']}", headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"/api/products/{product['id']}").status_code == 404

    def test_delete_unknown_product(self, client, admin_headers, use_media):
        assert client.delete("/api/products/42", headers=admin_headers).status_code == 404
