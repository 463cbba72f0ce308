"""Pure cart transitions.

Every function takes the current cart and returns the next one. Nothing here
touches storage, so the store can compute a candidate state, try to persist
it, and only then adopt it.
"""
from typing import Optional

from .models import Cart, LineItem, Product


def find_item(cart: Cart, item_id: str) -> Optional[LineItem]:
    return next((item for item in cart if item.id == item_id), None)


def increment_item(cart: Cart, item_id: str) -> Cart:
    """Bump the quantity of ``item_id`` by one.

    An unknown id yields an equal cart; the caller still persists it.
    """
    return tuple(
        item.with_quantity(item.quantity + 1) if item.id == item_id else item
        for item in cart
    )


def add_product(cart: Cart, product: Product) -> Cart:
    if find_item(cart, product.id) is not None:
        return increment_item(cart, product.id)
    return cart + (LineItem.from_product(product),)


def decrement_item(cart: Cart, item_id: str) -> Optional[Cart]:
    """Drop the quantity of ``item_id`` by one, removing it at zero.

    Returns ``None`` when the id is not in the cart, meaning there is nothing
    to write.
    """
    current = find_item(cart, item_id)
    if current is None:
        return None
    quantity = current.quantity - 1
    if quantity > 0:
        return tuple(
            item.with_quantity(quantity) if item.id == item_id else item
            for item in cart
        )
    return tuple(item for item in cart if item.id != item_id)
