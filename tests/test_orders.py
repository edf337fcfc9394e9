import re

import pytest

from homedecor.services.order_service import service as order_service
from homedecor.services.order_service.service import calculate_totals, generate_order_number


class TestTotals:
    def test_flat_tax_and_untaxed_shipping(self):
        totals = calculate_totals([(100.0, 2)], shipping=0)
        assert (totals.subtotal, totals.tax, totals.shipping, totals.total) == (200.0, 20.0, 0, 220.0)

    def test_shipping_is_added_after_tax(self):
        totals = calculate_totals([(19.99, 3), (5.0, 1)], shipping=7.5)
        assert totals.subtotal == 64.97
        assert totals.tax == 6.5
        assert totals.total == 78.97

    def test_order_number_format(self):
        assert re.fullmatch(r"ORD-\d{13}-8", generate_order_number(7))


@pytest.fixture()
def place_order(client, user_headers, address):
    def _place(items, headers=None, **extra):
        payload = {"items": items, "shipping_address": address, **extra}
        return client.post("/api/orders", json=payload, headers=headers or user_headers)

    return _place


class TestPlaceOrder:
    def test_totals_follow_payload_prices(self, place_order, make_product):
        product = make_product(price=100.0)
        resp = place_order([{"product_id": product["id"], "quantity": 2, "price": 100.0}])
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Order created successfully"
        order = body["order"]
        assert (order["subtotal"], order["tax"], order["shipping"], order["total"]) == (200.0, 20.0, 0, 220.0)
        assert order["status"] == "pending"
        assert order["payment_status"] == "pending"
        assert order["payment_method"] == "cod"
        assert re.fullmatch(r"ORD-\d+-1", order["order_number"])
        assert order["items"][0]["total"] == 200.0
        assert order["items"][0]["product_name"] == "Oak Side Table"
        assert order["billing_address"] == order["shipping_address"]

    def test_order_clears_cart(self, client, place_order, make_product, user_headers):
        product = make_product()
        client.post("/api/cart/items", json={"product_id": product["id"], "quantity": 2}, headers=user_headers)

        place_order([{"product_id": product["id"], "quantity": 2, "price": 100.0}])
        assert client.get("/api/cart", headers=user_headers).json()["items"] == []

    def test_empty_items_rejected(self, place_order):
        assert place_order([]).status_code == 422

    def test_unknown_product_rejected(self, place_order):
        resp = place_order([{"product_id": 404, "quantity": 1, "price": 10.0}])
        assert resp.status_code == 400

    def test_requires_login(self, client, address):
        resp = client.post(
            "/api/orders",
            json={"items": [{"product_id": 1, "quantity": 1, "price": 1.0}], "shipping_address": address},
        )
        assert resp.status_code == 401

    def test_sequence_in_order_numbers(self, place_order, make_product):
        product = make_product()
        line = [{"product_id": product["id"], "quantity": 1, "price": 100.0}]
        first = place_order(line).json()["order"]["order_number"]
        second = place_order(line).json()["order"]["order_number"]
        assert first.endswith("-1")
        assert second.endswith("-2")

    def test_notification_failure_does_not_fail_order(self, monkeypatch, place_order, make_product):
        async def broken(*args, **kwargs):
            raise RuntimeError("mail relay down")

        monkeypatch.setattr(order_service, "send_order_confirmation_email", broken)
        product = make_product()
        resp = place_order([{"product_id": product["id"], "quantity": 1, "price": 100.0}])
        assert resp.status_code == 201


class TestReadOrders:
    def test_customers_only_see_their_own(self, client, place_order, make_product, other_user_headers, admin_headers):
        product = make_product()
        line = [{"product_id": product["id"], "quantity": 1, "price": 100.0}]
        mine = place_order(line).json()["order"]
        place_order(line, headers=other_user_headers)

        resp = client.get("/api/orders", headers=other_user_headers)
        assert resp.json()["pagination"]["total"] == 1

        assert client.get(f"/api/orders/{mine['id']}", headers=other_user_headers).status_code == 401
        assert client.get(f"/api/orders/{mine['id']}", headers=admin_headers).status_code == 200
        assert client.get("/api/orders", headers=admin_headers).json()["pagination"]["total"] == 2

    def test_status_filter(self, client, place_order, make_product, user_headers, admin_headers):
        product = make_product()
        line = [{"product_id": product["id"], "quantity": 1, "price": 100.0}]
        first = place_order(line).json()["order"]
        place_order(line)
        client.put(f"/api/orders/{first['id']}", json={"status": "confirmed"}, headers=admin_headers)

        orders = client.get("/api/orders?status=confirmed", headers=user_headers).json()["orders"]
        assert [o["id"] for o in orders] == [first["id"]]

    def test_missing_order(self, client, user_headers):
        assert client.get("/api/orders/77", headers=user_headers).status_code == 404


class TestStatusTransition:
    @pytest.fixture()
    def order(self, place_order, make_product):
        product = make_product()
        return place_order([{"product_id": product["id"], "quantity": 1, "price": 100.0}]).json()["order"]

    def test_delivered_stamps_time(self, client, order, admin_headers):
        resp = client.put(
            f"/api/orders/{order['id']}",
            json={"status": "delivered", "tracking_number": "TRK-1"},
            headers=admin_headers,
        )
        assert resp.status_code == 200
        updated = resp.json()["order"]
        assert updated["status"] == "delivered"
        assert updated["tracking_number"] == "TRK-1"
        assert updated["delivered_at"] is not None

    def test_cancel_records_who_and_when(self, client, order, admin_headers):
        resp = client.put(
            f"/api/orders/{order['id']}",
            json={"status": "cancelled", "cancelled_reason": "Customer request"},
            headers=admin_headers,
        )
        updated = resp.json()["order"]
        assert updated["cancelled_at"] is not None
        assert updated["cancelled_by"]["email"] == "admin@example.com"
        assert updated["cancelled_reason"] == "Customer request"

    def test_any_status_may_follow_delivered(self, client, order, admin_headers):
        client.put(f"/api/orders/{order['id']}", json={"status": "delivered"}, headers=admin_headers)
        resp = client.put(f"/api/orders/{order['id']}", json={"status": "pending"}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["order"]["status"] == "pending"

    def test_shipped_sends_notification(self, monkeypatch, client, order, admin_headers):
        sent = []

        async def record(email, name, order_number, status, tracking_number=None):
            sent.append((email, order_number, status, tracking_number))

        monkeypatch.setattr(order_service, "send_order_status_update_email", record)
        client.put(
            f"/api/orders/{order['id']}",
            json={"status": "shipped", "tracking_number": "TRK-9"},
            headers=admin_headers,
        )
        client.put(f"/api/orders/{order['id']}", json={"status": "processing"}, headers=admin_headers)
        assert sent == [("shopper@example.com", order["order_number"], "shipped", "TRK-9")]

    def test_unknown_status_rejected(self, client, order, admin_headers):
        resp = client.put(f"/api/orders/{order['id']}", json={"status": "lost"}, headers=admin_headers)
        assert resp.status_code == 422

    @pytest.mark.parametrize("field", ["status", "payment_status"])
    def test_null_status_rejected(self, client, order, admin_headers, field):
        resp = client.put(f"/api/orders/{order['id']}", json={field: None}, headers=admin_headers)
        assert resp.status_code == 422
        assert client.get(f"/api/orders/{order['id']}", headers=admin_headers).json()[field] == "pending"

    def test_tracking_number_can_be_cleared(self, client, order, admin_headers):
        client.put(f"/api/orders/{order['id']}", json={"tracking_number": "TRK-2"}, headers=admin_headers)
        resp = client.put(
            f"/api/orders/{order['id']}", json={"tracking_number": None, "notes": None}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["order"]["tracking_number"] is None

    def test_customer_cannot_update(self, client, order, user_headers):
        resp = client.put(f"/api/orders/{order['id']}", json={"status": "delivered"}, headers=user_headers)
        assert resp.status_code == 403

    def test_admin_delete(self, client, order, admin_headers):
        assert client.delete(f"/api/orders/{order['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/orders/{order['id']}", headers=admin_headers).status_code == 404
