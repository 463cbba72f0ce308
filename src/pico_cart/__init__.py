from .config import CartSettings, CartApiSettings, DEFAULT_STORAGE_KEY
from .models import Cart, LineItem, Product
from .storage import KeyValueStore, MemoryKeyValueStore, FileKeyValueStore
from .persistence import CartPersistence, decode_cart, encode_cart
from .store import CartStore, CartResult
from .context import cart_context, use_cart
from .middleware import CartContextMiddleware
from .decorators import controller, get, post
from .controllers import CartController, ProductIn
from .factory import CartAppFactory, CartStorageFactory
from .exceptions import (
    PicoCartError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    MissingCartContextError,
    InvalidStorageBackendError,
    NoControllersFoundError,
)

__all__ = [
    "CartSettings",
    "CartApiSettings",
    "DEFAULT_STORAGE_KEY",
    "Cart",
    "LineItem",
    "Product",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "FileKeyValueStore",
    "CartPersistence",
    "decode_cart",
    "encode_cart",
    "CartStore",
    "CartResult",
    "cart_context",
    "use_cart",
    "CartContextMiddleware",
    "controller",
    "get",
    "post",
    "CartController",
    "ProductIn",
    "CartAppFactory",
    "CartStorageFactory",
    "PicoCartError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "MissingCartContextError",
    "InvalidStorageBackendError",
    "NoControllersFoundError",
]
