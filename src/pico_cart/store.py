"""The authoritative in-memory cart.

Every mutation follows the same path: compute the next cart from the current
one, persist it, then adopt it. If persisting fails the current cart is kept,
so memory never runs ahead of storage.

Mutations are serialized with a single ``asyncio.Lock``. Waiters acquire it in
FIFO order, so each read-compute-persist-adopt sequence sees the state left
by the previous one and no update is lost.
"""
import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from pico_ioc import component

from .cart import add_product, decrement_item, increment_item
from .exceptions import PicoCartError, StorageReadError, StorageWriteError
from .models import EMPTY_CART, Cart, Product
from .persistence import CartPersistence

@dataclass(frozen=True)
class CartResult:
    """Outcome of a cart operation.

    Attributes:
        ok: False when storage failed. The cart was left unchanged.
        op: Operation name (``"add_to_cart"``, ``"increment"``, ...).
        products: The cart visible after the operation.
        wrote: Whether a save was attempted.
        error: The storage failure, when ``ok`` is False.
    """

    ok: bool
    op: str
    products: Cart
    wrote: bool = False
    error: Optional[PicoCartError] = None


@component
class CartStore:
    def __init__(self, persistence: CartPersistence):
        self.persistence = persistence
        self._products: Cart = EMPTY_CART
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def products(self) -> Cart:
        return self._products

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get_all(self) -> Cart:
        return self._products

    async def load(self) -> CartResult:
        async with self._lock:
            return await self._hydrate()

    async def add_to_cart(self, product: Product) -> CartResult:
        return await self._mutate("add_to_cart", lambda cart: add_product(cart, product))

    async def increment(self, item_id: str) -> CartResult:
        return await self._mutate("increment", lambda cart: increment_item(cart, item_id))

    async def decrement(self, item_id: str) -> CartResult:
        return await self._mutate("decrement", lambda cart: decrement_item(cart, item_id))

    async def _hydrate(self) -> CartResult:
        try:
            cart = await self.persistence.load()
        except StorageReadError as exc:
            self._products = EMPTY_CART
            self._loaded = True
            return CartResult(ok=False, op="load", products=self._products, error=exc)
        self._products = cart
        self._loaded = True
        return CartResult(ok=True, op="load", products=self._products)

    async def _mutate(self, op: str, transition: Callable[[Cart], Optional[Cart]]) -> CartResult:
        async with self._lock:
            if not self._loaded:
                # a write before hydration would overwrite the stored cart
                await self._hydrate()

            next_cart = transition(self._products)
            if next_cart is None:
                return CartResult(ok=True, op=op, products=self._products)

            try:
                await self.persistence.save(next_cart)
            except StorageWriteError as exc:
                return CartResult(ok=False, op=op, products=self._products, wrote=True, error=exc)

            self._products = next_cart
            return CartResult(ok=True, op=op, products=self._products, wrote=True)
