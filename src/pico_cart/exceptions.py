from typing import Iterable


class PicoCartError(Exception):
    pass


class StorageError(PicoCartError):
    def __init__(self, key: str, reason: str):
        super().__init__(f"Storage operation on {key!r} failed: {reason}")
        self.key = key
        self.reason = reason


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class MissingCartContextError(PicoCartError):
    def __init__(self):
        super().__init__("use_cart() must be called within a cart_context(). Ensure CartContextMiddleware is installed.")


class InvalidStorageBackendError(PicoCartError):
    def __init__(self, backend: str, available: Iterable[str]):
        super().__init__(f"Unknown storage backend {backend!r}. Available: {', '.join(sorted(available))}")
        self.backend = backend


class NoControllersFoundError(PicoCartError):
    def __init__(self):
        super().__init__("No controllers were registered. Ensure your controller modules are scanned.")
