from .setup import configure_logging, setup_observability
from .metrics import (
    ecomm_orders_created_total,
    ecomm_checkout_duration_seconds,
    ecomm_order_status_updates_total,
    ecomm_invoices_rendered_total,
    ecomm_notification_failures_total,
    ecomm_media_operations_total,
)
