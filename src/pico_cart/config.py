from dataclasses import dataclass
from pico_ioc import configured

DEFAULT_STORAGE_KEY = "@gomarketplace-products"

@configured(target="self", prefix="cart", mapping="tree")
@dataclass
class CartSettings:
    storage_key: str = DEFAULT_STORAGE_KEY
    backend: str = "memory"
    storage_path: str = ".pico_cart"

@configured(target="self", prefix="fastapi", mapping="tree")
@dataclass
class CartApiSettings:
    title: str = "Pico-Cart API"
    version: str = "1.0.0"
    debug: bool = False
