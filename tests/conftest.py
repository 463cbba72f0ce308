import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from fastapi import FastAPI
from pico_cart import (
    CartPersistence,
    CartSettings,
    CartController,
    CartStore,
    MemoryKeyValueStore,
    Product,
)
from pico_cart.app import create_app

SHIRT = Product(id="p1", title="Shirt", image_url="u", price=10)
MUG = Product(id="p2", title="Mug", image_url="https://img.example/mug.png", price=4.5)
HAT = Product(id="p3", title="Hat", image_url="https://img.example/hat.png", price=12.25)


class RecordingKeyValueStore(MemoryKeyValueStore):
    """In-memory store that records writes and can simulate an outage."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False

    async def get(self, key):
        if self.fail_reads:
            raise ConnectionError("storage unreachable")
        return await super().get(key)

    async def set(self, key, value):
        if self.fail_writes:
            raise ConnectionError("storage unreachable")
        self.writes.append((key, value))
        await super().set(key, value)


@pytest.fixture()
def kv_store():
    return RecordingKeyValueStore()

@pytest.fixture()
def settings():
    return CartSettings()

@pytest.fixture()
def persistence(kv_store, settings):
    return CartPersistence(kv_store, settings)

@pytest.fixture()
def store(persistence):
    return CartStore(persistence)


def write_config(path, storage_path):
    path.write_text(
        "fastapi:\n"
        "  title: 'Cart Test API'\n"
        "  version: '9.9.9'\n"
        "  debug: true\n"
        "cart:\n"
        "  storage_key: 'test-cart'\n"
        "  backend: 'file'\n"
        f"  storage_path: '{storage_path}'\n",
        encoding="utf-8",
    )
    return path

def controller_container():
    container = MagicMock()
    container.aget = AsyncMock(return_value=CartController())
    return container

def build_app(config_file) -> FastAPI:
    return create_app(str(config_file))

@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    cart_level = logging.getLogger("pico_cart").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("pico_cart").setLevel(cart_level)
    structlog.reset_defaults()

@pytest.fixture()
def config_file(tmp_path):
    return write_config(tmp_path / "config.yml", tmp_path / "data")

@pytest.fixture()
def app(config_file, restore_logging):
    return build_app(config_file)
