import asyncio

import pytest

from homedecor.shared.notifications import email


@pytest.fixture()
def outbox(monkeypatch):
    sent = []
    monkeypatch.setattr(email, "_log_email", lambda kind, to, subject, content: sent.append((kind, to, subject, content)))
    return sent


def test_order_confirmation(outbox):
    asyncio.run(email.send_order_confirmation_email("sam@example.com", "Sam", "ORD-1-1", 220))
    kind, to, subject, content = outbox[0]
    assert (kind, to, subject) == ("order_confirmation", "sam@example.com", "Order Confirmation - ORD-1-1")
    assert "Total Amount: $220.00" in content


def test_status_update_mentions_tracking(outbox):
    asyncio.run(email.send_order_status_update_email("sam@example.com", "Sam", "ORD-1-1", "shipped", "TRK-7"))
    _, _, subject, content = outbox[0]
    assert subject == "Order Update - ORD-1-1"
    assert email.STATUS_MESSAGES["shipped"] in content
    assert "Tracking Number: TRK-7" in content


def test_status_update_without_tracking(outbox):
    asyncio.run(email.send_order_status_update_email("sam@example.com", "Sam", "ORD-1-1", "delivered"))
    assert "Tracking Number" not in outbox[0][3]


def test_welcome(outbox):
    asyncio.run(email.send_welcome_email("sam@example.com", "Sam"))
    assert outbox[0][:3] == ("welcome", "sam@example.com", "Welcome to Home Decor!")
