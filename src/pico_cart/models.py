from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    title: str
    image_url: str
    price: float


@dataclass(frozen=True, slots=True)
class LineItem:
    id: str
    title: str
    image_url: str
    price: float
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product) -> "LineItem":
        return cls(
            id=product.id,
            title=product.title,
            image_url=product.image_url,
            price=product.price,
            quantity=1,
        )

    def with_quantity(self, quantity: int) -> "LineItem":
        return replace(self, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "image_url": self.image_url,
            "price": self.price,
            "quantity": self.quantity,
        }


Cart = Tuple[LineItem, ...]

EMPTY_CART: Cart = ()
