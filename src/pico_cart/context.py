from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .exceptions import MissingCartContextError
from .store import CartStore

_current_cart: ContextVar[Optional[CartStore]] = ContextVar("pico_cart_current", default=None)


@contextmanager
def cart_context(store: CartStore) -> Iterator[CartStore]:
    token = _current_cart.set(store)
    try:
        yield store
    finally:
        _current_cart.reset(token)


def use_cart() -> CartStore:
    store = _current_cart.get()
    if store is None:
        raise MissingCartContextError()
    return store
