from http import HTTPStatus
from typing import Any, Dict

from pydantic import BaseModel, Field

from .context import use_cart
from .decorators import controller, get, post
from .models import Product
from .store import CartResult


class ProductIn(BaseModel):
    id: str
    title: str
    image_url: str
    price: float = Field(allow_inf_nan=False)

    def to_product(self) -> Product:
        return Product(id=self.id, title=self.title, image_url=self.image_url, price=self.price)


def _result_body(result: CartResult) -> Dict[str, Any]:
    return {
        "ok": result.ok,
        "products": [item.to_dict() for item in result.products],
        "error": str(result.error) if result.error is not None else None,
    }


def _result_response(result: CartResult):
    status = HTTPStatus.OK if result.ok else HTTPStatus.SERVICE_UNAVAILABLE
    return _result_body(result), status


@controller(prefix="/cart", tags=["Cart"])
class CartController:
    """The consumer surface of the cart: one read and three mutations."""

    @get("/products")
    async def list_products(self):
        return {"ok": True, "products": [item.to_dict() for item in use_cart().products], "error": None}

    @post("/products")
    async def add_to_cart(self, product: ProductIn):
        return _result_response(await use_cart().add_to_cart(product.to_product()))

    @post("/products/{item_id}/increment")
    async def increment(self, item_id: str):
        return _result_response(await use_cart().increment(item_id))

    @post("/products/{item_id}/decrement")
    async def decrement(self, item_id: str):
        return _result_response(await use_cart().decrement(item_id))
