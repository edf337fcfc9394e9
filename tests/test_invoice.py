import re
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from homedecor.services.order_service.invoice import CompanyInfo, render_invoice


def page_count(pdf: bytes) -> int:
    return len(re.findall(rb"/Type /Page[^s]", pdf))


def fake_order(item_count: int):
    items = [
        SimpleNamespace(product=None, product_name=f"Cushion {n}", quantity=1, price=12.5, total=12.5)
        for n in range(item_count)
    ]
    subtotal = 12.5 * item_count
    return SimpleNamespace(
        order_number="ORD-1700000000000-1",
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        status="pending",
        payment_status="pending",
        payment_method="cod",
        shipping_address={"name": "Sam", "address": "1 Main St", "city": "Springfield", "country": "US"},
        user=SimpleNamespace(name="Sam Shopper", email="sam@example.com", phone=None),
        items=items,
        subtotal=subtotal,
        tax=round(subtotal * 0.1, 2),
        shipping=0.0,
        total=round(subtotal * 1.1, 2),
    )


class TestRenderInvoice:
    def test_single_page(self):
        pdf = render_invoice(fake_order(2))
        assert pdf.startswith(b"%PDF")
        assert page_count(pdf) == 1

    def test_long_orders_paginate(self):
        pdf = render_invoice(fake_order(120), CompanyInfo(name="Casa & Co"))
        assert page_count(pdf) > 1


class TestInvoiceEndpoint:
    @pytest.fixture()
    def order(self, client, user_headers, make_product, address):
        product = make_product(price=100.0)
        resp = client.post(
            "/api/orders",
            json={
                "items": [{"product_id": product["id"], "quantity": 2, "price": 100.0}],
                "shipping_address": address,
            },
            headers=user_headers,
        )
        return resp.json()["order"]

    def test_owner_downloads_pdf(self, client, order, user_headers):
        resp = client.get(f"/api/orders/{order['id']}/invoice", headers=user_headers)
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.headers["content-disposition"] == (
            f'attachment; filename="invoice-{order["order_number"]}.pdf"'
        )
        assert resp.content.startswith(b"%PDF")

    def test_admin_downloads_any_invoice(self, client, order, admin_headers):
        assert client.get(f"/api/orders/{order['id']}/invoice", headers=admin_headers).status_code == 200

    def test_other_customer_is_refused(self, client, order, other_user_headers):
        resp = client.get(f"/api/orders/{order['id']}/invoice", headers=other_user_headers)
        assert resp.status_code == 401

    def test_anonymous_is_refused(self, client, order):
        assert client.get(f"/api/orders/{order['id']}/invoice").status_code == 401

    def test_missing_order(self, client, user_headers):
        assert client.get("/api/orders/999/invoice", headers=user_headers).status_code == 404

    def test_deleted_product_keeps_line_name(self, client, order, user_headers, admin_headers, use_media):
        product_id = order["items"][0]["product_id"]
        assert client.delete(f"/api/products/{product_id}", headers=admin_headers).status_code == 200

        detail = client.get(f"/api/orders/{order['id']}", headers=user_headers).json()
        assert detail["items"][0]["product_id"] is None
        assert detail["items"][0]["product_name"] == "Oak Side Table"
        assert client.get(f"/api/orders/{order['id']}/invoice", headers=user_headers).status_code == 200
