from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.services.product_service.repository import ProductRepository

from .models import Cart
from .repository import CartRepository
from .schemas import CartItemCreate, CartItemResponse, CartResponse


def to_response(cart: Cart | None) -> CartResponse:
    if cart is None:
        return CartResponse()
    items = [
        CartItemResponse(
            product_id=item.product_id,
            name=item.product.name,
            image=(item.product.images or [None])[0],
            price=item.product.price,
            quantity=item.quantity,
            total=round(item.product.price * item.quantity, 2),
        )
        for item in cart.items
    ]
    return CartResponse(
        items=items,
        item_count=sum(i.quantity for i in items),
        subtotal=round(sum(i.total for i in items), 2),
    )


class CartService:

    @staticmethod
    async def get_cart(db: AsyncSession, user_id: int) -> CartResponse:
        return to_response(await CartRepository.get_cart(db, user_id))

    @staticmethod
    async def add_item(db: AsyncSession, user_id: int, data: CartItemCreate) -> CartResponse:
        product = await ProductRepository.get_product_by_id(db, data.product_id)
        if not product or not product.is_active:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        cart = await CartRepository.get_or_create_cart(db, user_id)
        await CartRepository.add_item(db, cart, data.product_id, data.quantity)
        return to_response(await CartRepository.get_cart(db, user_id))

    @staticmethod
    async def update_item(db: AsyncSession, user_id: int, product_id: int, quantity: int) -> CartResponse:
        cart = await CartRepository.get_cart(db, user_id)
        if not cart or not await CartRepository.set_quantity(db, cart, product_id, quantity):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not in cart")
        return to_response(await CartRepository.get_cart(db, user_id))

    @staticmethod
    async def remove_item(db: AsyncSession, user_id: int, product_id: int) -> CartResponse:
        cart = await CartRepository.get_cart(db, user_id)
        if cart:
            await CartRepository.remove_item(db, cart, product_id)
        return to_response(await CartRepository.get_cart(db, user_id))

    @staticmethod
    async def clear_cart(db: AsyncSession, user_id: int) -> None:
        await CartRepository.clear_cart(db, user_id)
