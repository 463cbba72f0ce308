import dataclasses
import inspect
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, Iterable
from fastapi import FastAPI, APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse, Response
from pico_ioc import factory, provides, component, configure, PicoContainer
from .config import CartApiSettings, CartSettings
from .decorators import CONTROLLERS, PICO_ROUTE_KEY, PICO_CONTROLLER_META
from .exceptions import InvalidStorageBackendError, NoControllersFoundError
from .middleware import CartContextMiddleware
from .storage import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .store import CartStore

STORAGE_BACKENDS: Dict[str, Callable[[CartSettings], KeyValueStore]] = {
    "memory": lambda settings: MemoryKeyValueStore(),
    "file": lambda settings: FileKeyValueStore(settings.storage_path),
}

def create_key_value_store(settings: CartSettings) -> KeyValueStore:
    builder = STORAGE_BACKENDS.get(settings.backend)
    if builder is None:
        raise InvalidStorageBackendError(settings.backend, STORAGE_BACKENDS)
    return builder(settings)

def _normalize_http_result(result: Any) -> Response:
    if isinstance(result, Response):
        return result

    if isinstance(result, tuple) and len(result) in (2, 3):
        content, status = result[0], result[1]
        headers = result[2] if len(result) == 3 else None
        return JSONResponse(content=content, status_code=status, headers=headers)

    return JSONResponse(content=result)

async def _validation_error_response(request, exc: RequestValidationError) -> JSONResponse:
    # rejected inputs may be non-finite floats, which JSONResponse cannot render
    errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})

def install_validation_handler(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_response)

def _create_http_handler(container: PicoContainer, controller_cls: type, method_name: str, sig: inspect.Signature):
    async def http_route_handler(**kwargs):
        controller_instance = await container.aget(controller_cls)
        method_to_call = getattr(controller_instance, method_name)
        res = method_to_call(**kwargs)
        if inspect.isawaitable(res):
            res = await res
        return _normalize_http_result(res)
    params = list(sig.parameters.values())[1:]
    http_route_handler.__signature__ = sig.replace(parameters=params)
    return http_route_handler

def register_controllers(app: FastAPI, container: PicoContainer, controller_classes: Iterable[type]) -> None:
    controller_classes = list(controller_classes)
    if not controller_classes:
        raise NoControllersFoundError()

    for cls in controller_classes:
        meta = getattr(cls, PICO_CONTROLLER_META, {}) or {}
        router = APIRouter(
            prefix=meta.get("prefix", ""),
            tags=meta.get("tags", None),
        )
        for name, method in inspect.getmembers(cls, inspect.isfunction):
            route_info = getattr(method, PICO_ROUTE_KEY, None)
            if not route_info:
                continue
            router.add_api_route(
                path=route_info["path"],
                endpoint=_create_http_handler(container, cls, name, inspect.signature(method)),
                methods=[route_info["method"]],
                **route_info["kwargs"],
            )
        app.include_router(router)

@factory
class CartStorageFactory:
    @provides(KeyValueStore, scope="singleton")
    def create_key_value_store(self, settings: CartSettings) -> KeyValueStore:
        return create_key_value_store(settings)

@component
class CartApiConfigurer:
    @configure
    def setup_cart_api(self, container: PicoContainer, app: FastAPI, store: CartStore) -> None:
        app.add_middleware(CartContextMiddleware, store=store)
        install_validation_handler(app)
        register_controllers(app, container, CONTROLLERS)

        @asynccontextmanager
        async def lifespan_manager(app_instance):
            await store.load()
            yield

        app.router.lifespan_context = lifespan_manager

@factory
class CartAppFactory:
    @provides(FastAPI, scope="singleton")
    def create_fastapi_app(
        self,
        settings: CartApiSettings,
    ) -> FastAPI:
        return FastAPI(**dataclasses.asdict(settings))
