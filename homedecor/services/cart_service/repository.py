from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Cart, CartItem


class CartRepository:

    @staticmethod
    async def get_cart(db: AsyncSession, user_id: int) -> Cart | None:
        result = await db.execute(
            select(Cart)
            .where(Cart.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    @staticmethod
    async def get_or_create_cart(db: AsyncSession, user_id: int) -> Cart:
        cart = await CartRepository.get_cart(db, user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            db.add(cart)
            await db.commit()
            cart = await CartRepository.get_cart(db, user_id)
        return cart

    @staticmethod
    async def add_item(db: AsyncSession, cart: Cart, product_id: int, quantity: int) -> None:
        result = await db.execute(
            select(CartItem)
            .where(CartItem.cart_id == cart.id)
            .where(CartItem.product_id == product_id)
        )
        existing_item = result.scalars().first()

        if existing_item:
            existing_item.quantity += quantity
        else:
            db.add(CartItem(cart_id=cart.id, product_id=product_id, quantity=quantity))

        await db.commit()

    @staticmethod
    async def set_quantity(db: AsyncSession, cart: Cart, product_id: int, quantity: int) -> bool:
        result = await db.execute(
            select(CartItem)
            .where(CartItem.cart_id == cart.id)
            .where(CartItem.product_id == product_id)
        )
        item = result.scalars().first()
        if not item:
            return False
        item.quantity = quantity
        await db.commit()
        return True

    @staticmethod
    async def remove_item(db: AsyncSession, cart: Cart, product_id: int) -> None:
        await db.execute(
            delete(CartItem).where(CartItem.cart_id == cart.id, CartItem.product_id == product_id)
        )
        await db.commit()

    @staticmethod
    async def clear_cart(db: AsyncSession, user_id: int, commit: bool = True) -> None:
        """Deletes every item in the user's cart. `commit=False` leaves it to the caller's transaction."""
        cart_ids = select(Cart.id).where(Cart.user_id == user_id).scalar_subquery()
        await db.execute(
            delete(CartItem)
            .where(CartItem.cart_id == cart_ids)
            .execution_options(synchronize_session=False)
        )
        if commit:
            await db.commit()
