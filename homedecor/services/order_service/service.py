import time
from dataclasses import dataclass
from typing import Iterable

import structlog
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from homedecor.services.auth_service.repository import UserRepository
from homedecor.services.cart_service.repository import CartRepository
from homedecor.services.content_service.service import ContentService
from homedecor.services.product_service.repository import ProductRepository
from homedecor.shared.config.database import utcnow
from homedecor.shared.notifications import (
    send_order_confirmation_email,
    send_order_status_update_email,
)
from homedecor.shared.observability import (
    ecomm_checkout_duration_seconds,
    ecomm_invoices_rendered_total,
    ecomm_notification_failures_total,
    ecomm_order_status_updates_total,
    ecomm_orders_created_total,
)
from homedecor.shared.security import CurrentUser

from .invoice import CompanyInfo, render_invoice
from .models import Order, OrderItem
from .repository import OrderRepository
from .schemas import OrderCreate, OrderUpdate

logger = structlog.get_logger(__name__)

TAX_RATE = 0.10

# Statuses whose update sends the customer a notification
NOTIFY_STATUSES = {"shipped", "delivered"}


@dataclass(frozen=True)
class OrderTotals:
    subtotal: float
    tax: float
    shipping: float
    total: float


def line_total(price: float, quantity: int) -> float:
    return round(price * quantity, 2)


def calculate_totals(lines: Iterable[tuple[float, int]], shipping: float = 0) -> OrderTotals:
    """Totals for (unit price, quantity) lines: flat 10% tax on the subtotal, shipping untaxed."""
    subtotal = round(sum(line_total(price, qty) for price, qty in lines), 2)
    tax = round(subtotal * TAX_RATE, 2)
    return OrderTotals(
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=round(subtotal + tax + shipping, 2),
    )


def generate_order_number(existing_count: int) -> str:
    # Count-then-insert is not atomic; the unique index on order_number catches collisions
    return f"ORD-{int(time.time() * 1000)}-{existing_count + 1}"


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


class OrderService:

    @staticmethod
    async def create_order(db: AsyncSession, user: CurrentUser, data: OrderCreate) -> Order:
        with ecomm_checkout_duration_seconds.time():
            customer = await UserRepository.get_by_id(db, user.id)
            if not customer:
                raise _unauthorized()

            product_ids = sorted({item.product_id for item in data.items})
            products = await ProductRepository.get_products_by_ids(db, product_ids)
            missing = [pid for pid in product_ids if pid not in products]
            if missing:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Unknown product(s): {', '.join(map(str, missing))}",
                )

            totals = calculate_totals(((i.price, i.quantity) for i in data.items), data.shipping)
            shipping_address = data.shipping_address.model_dump()
            billing_address = data.billing_address.model_dump() if data.billing_address else shipping_address

            order = Order(
                order_number=generate_order_number(await OrderRepository.count_orders(db)),
                user=customer,
                items=[
                    OrderItem(
                        product=products[item.product_id],
                        product_name=products[item.product_id].name,
                        quantity=item.quantity,
                        price=item.price,
                        total=line_total(item.price, item.quantity),
                    )
                    for item in data.items
                ],
                subtotal=totals.subtotal,
                tax=totals.tax,
                shipping=totals.shipping,
                total=totals.total,
                payment_method=data.payment_method,
                shipping_address=shipping_address,
                billing_address=billing_address,
                notes=data.notes,
            )

            # The ordered items leave the cart in the same transaction
            await CartRepository.clear_cart(db, user.id, commit=False)
            db.add(order)
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                logger.warning("order_number_collision", order_number=order.order_number)
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Order could not be numbered, please retry",
                )

            order = await OrderRepository.get_order(db, order.id)

        ecomm_orders_created_total.labels(payment_method=order.payment_method).inc()
        logger.info(
            "order_created",
            order_id=order.id,
            order_number=order.order_number,
            user_id=user.id,
            total=order.total,
        )

        # The order is committed; a failed confirmation is only logged
        try:
            await send_order_confirmation_email(
                customer.email, customer.name, order.order_number, order.total
            )
        except Exception as e:
            ecomm_notification_failures_total.labels(kind="order_confirmation").inc()
            logger.error("order_confirmation_email_failed", order_id=order.id, error=str(e))

        return order

    @staticmethod
    async def list_orders(db: AsyncSession, user: CurrentUser, status_filter: str | None, skip: int, limit: int):
        # Customers only ever see their own orders
        owner_id = None if user.is_admin else user.id
        orders = await OrderRepository.list_orders(db, owner_id, status_filter, skip, limit)
        total = await OrderRepository.count_orders(db, owner_id, status_filter)
        return orders, total

    @staticmethod
    async def get_order_for(db: AsyncSession, user: CurrentUser, order_id: int) -> Order:
        """Loads an order the caller may read: its owner or an admin."""
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        if not user.is_admin and order.user_id != user.id:
            raise _unauthorized()
        return order

    @staticmethod
    async def update_order(db: AsyncSession, admin: CurrentUser, order_id: int, data: OrderUpdate) -> Order:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(order, field, value)

        # No transition rules: any status may follow any other
        new_status = changes.get("status")
        if new_status == "delivered":
            order.delivered_at = utcnow()
        elif new_status == "cancelled":
            order.cancelled_at = utcnow()
            order.cancelled_by_id = admin.id

        await db.commit()
        order = await OrderRepository.get_order(db, order_id)

        if new_status:
            ecomm_order_status_updates_total.labels(status=new_status).inc()
        logger.info("order_updated", order_id=order.id, fields=sorted(changes), status=order.status)

        if new_status in NOTIFY_STATUSES and order.user:
            try:
                await send_order_status_update_email(
                    order.user.email,
                    order.user.name,
                    order.order_number,
                    new_status,
                    order.tracking_number,
                )
            except Exception as e:
                ecomm_notification_failures_total.labels(kind="order_status").inc()
                logger.error("order_status_email_failed", order_id=order.id, error=str(e))

        return order

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: int) -> None:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        await OrderRepository.delete_order(db, order)
        logger.info("order_deleted", order_id=order_id, order_number=order.order_number)

    @staticmethod
    async def render_invoice(db: AsyncSession, user: CurrentUser, order_id: int) -> tuple[str, bytes]:
        """Returns (attachment filename, PDF bytes). Rendered fresh on every call."""
        order = await OrderService.get_order_for(db, user, order_id)
        site = await ContentService.get_settings(db)
        footer = await ContentService.get_footer(db)
        company = CompanyInfo(
            name=site.site_name,
            tagline=site.site_description,
            address=footer.address,
            phone=site.contact_phone,
            email=site.contact_email,
        )
        # reportlab is synchronous
        pdf = await run_in_threadpool(render_invoice, order, company)
        ecomm_invoices_rendered_total.inc()
        return f"invoice-{order.order_number}.pdf", pdf
