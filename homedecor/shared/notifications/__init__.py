from .email import (
    send_order_confirmation_email,
    send_order_status_update_email,
    send_welcome_email,
)

__all__ = [
    "send_order_confirmation_email",
    "send_order_status_update_email",
    "send_welcome_email",
]
