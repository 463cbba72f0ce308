from typing import Optional

from fastapi import FastAPI
from pico_ioc import configuration, init, YamlTreeSource

from .logging_setup import configure_logging

CART_MODULES = [
    "pico_cart.config",
    "pico_cart.persistence",
    "pico_cart.store",
    "pico_cart.controllers",
    "pico_cart.factory",
]


def create_app(config_path: Optional[str] = "application.yaml", *, verbose: bool = False, log_json: bool = False) -> FastAPI:
    configure_logging(verbose=verbose, log_json=log_json)

    if config_path is None:
        container = init(modules=CART_MODULES)
    else:
        container = init(modules=CART_MODULES, config=configuration(YamlTreeSource(config_path)))

    return container.get(FastAPI)
