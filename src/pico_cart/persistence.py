"""Durable read/write of the whole cart under one fixed key."""
import json
import logging
from typing import List

from pico_ioc import component
from pydantic import BaseModel, Field, TypeAdapter, model_validator

from .config import CartSettings
from .exceptions import StorageReadError, StorageWriteError
from .models import EMPTY_CART, Cart, LineItem
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class LineItemRecord(BaseModel):
    """Stored shape of one line item."""

    id: str
    title: str
    image_url: str
    price: float = Field(allow_inf_nan=False)
    quantity: int = Field(ge=1)


class _CartRecords(BaseModel):
    items: List[LineItemRecord]

    @model_validator(mode="after")
    def _unique_ids(self) -> "_CartRecords":
        seen = set()
        for record in self.items:
            if record.id in seen:
                raise ValueError(f"duplicate line item id {record.id!r}")
            seen.add(record.id)
        return self


_records_adapter = TypeAdapter(List[LineItemRecord])


def encode_cart(cart: Cart) -> str:
    return json.dumps([item.to_dict() for item in cart], allow_nan=False)


def decode_cart(raw: str) -> Cart:
    """Parse a stored value back into a cart.

    Raises ``ValueError`` (pydantic's ``ValidationError`` included) when the
    value is not a list of valid, id-unique line items.
    """
    records = _CartRecords(items=_records_adapter.validate_json(raw))
    return tuple(LineItem(**record.model_dump()) for record in records.items)


@component
class CartPersistence:
    def __init__(self, store: KeyValueStore, settings: CartSettings):
        self.store = store
        self.key = settings.storage_key

    async def load(self) -> Cart:
        try:
            raw = await self.store.get(self.key)
        except Exception as exc:
            logger.warning("Could not read cart from %r", self.key, exc_info=True)
            raise StorageReadError(self.key, str(exc)) from exc

        if raw is None:
            logger.debug("No stored cart under %r, starting empty", self.key)
            return EMPTY_CART

        try:
            cart = decode_cart(raw)
        except ValueError as exc:
            logger.warning("Stored cart under %r is corrupt", self.key, exc_info=True)
            raise StorageReadError(self.key, str(exc)) from exc

        logger.debug("Loaded %d line items from %r", len(cart), self.key)
        return cart

    async def save(self, cart: Cart) -> None:
        try:
            await self.store.set(self.key, encode_cart(cart))
        except Exception as exc:
            logger.warning("Could not write cart to %r", self.key, exc_info=True)
            raise StorageWriteError(self.key, str(exc)) from exc
        logger.debug("Saved %d line items to %r", len(cart), self.key)
