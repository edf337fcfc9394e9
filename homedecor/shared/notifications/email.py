"""
Email notifications.

There is no mail transport yet: every message is emitted as a structured
`email_sent` log event so it shows up in the log pipeline. Callers treat
these as best-effort and must not let a failure here fail their request.
"""
from datetime import date

import structlog

logger = structlog.get_logger(__name__)

STATUS_MESSAGES = {
    "confirmed": "Your order has been confirmed and is being processed.",
    "processing": "Your order is being prepared for delivery.",
    "shipped": "Your order has been shipped and is on its way.",
    "delivered": "Your order has been delivered successfully!",
    "cancelled": "Your order has been cancelled.",
}


def _log_email(kind: str, to: str, subject: str, content: str) -> None:
    logger.info("email_sent", kind=kind, to=to, subject=subject, content=content.strip())


async def send_order_confirmation_email(
    user_email: str, user_name: str, order_number: str, total: float
) -> None:
    subject = f"Order Confirmation - {order_number}"
    content = f"""
Dear {user_name},

Thank you for your order! Your order has been successfully placed.

Order Details:
- Order Number: {order_number}
- Total Amount: ${total:.2f}
- Order Date: {date.today().isoformat()}

We will notify you when your order is on its way.
"""
    _log_email("order_confirmation", user_email, subject, content)


async def send_order_status_update_email(
    user_email: str,
    user_name: str,
    order_number: str,
    status: str,
    tracking_number: str | None = None,
) -> None:
    subject = f"Order Update - {order_number}"
    message = STATUS_MESSAGES.get(status, "Your order status has been updated.")
    tracking = f"- Tracking Number: {tracking_number}\n" if tracking_number else ""
    content = f"""
Dear {user_name},

{message}

Order Details:
- Order Number: {order_number}
- New Status: {status.upper()}
{tracking}
Thank you for your patience!
"""
    _log_email("order_status", user_email, subject, content)


async def send_welcome_email(user_email: str, user_name: str) -> None:
    subject = "Welcome to Home Decor!"
    content = f"""
Dear {user_name},

Thank you for registering with us! You can now browse our products,
place orders and track their status.

Happy shopping!
"""
    _log_email("welcome", user_email, subject, content)
