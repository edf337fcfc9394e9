from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_orders_created_total = Counter(
    "ecomm_orders_created_total",
    "Total orders placed at checkout",
    ["payment_method"],  # Labels: 'cod', 'card', 'paypal'
)

ecomm_checkout_duration_seconds = Histogram(
    "ecomm_checkout_duration_seconds",
    "Order intake duration in seconds",
)

ecomm_order_status_updates_total = Counter(
    "ecomm_order_status_updates_total",
    "Admin order updates by resulting status",
    ["status"],
)

ecomm_invoices_rendered_total = Counter(
    "ecomm_invoices_rendered_total",
    "Invoice PDFs rendered",
)

ecomm_notification_failures_total = Counter(
    "ecomm_notification_failures_total",
    "Best-effort notifications that failed to send",
    ["kind"],  # Labels: 'order_confirmation', 'order_status', 'welcome'
)

ecomm_media_operations_total = Counter(
    "ecomm_media_operations_total",
    "Calls to the media host",
    ["operation", "outcome"],  # operation: 'upload' | 'destroy'; outcome: 'success' | 'failed'
)
