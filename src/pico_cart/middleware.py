from .context import cart_context
from .store import CartStore

BOUND_SCOPE_TYPES = ("http", "websocket")

class CartContextMiddleware:
    def __init__(self, app, store: CartStore):
        self.app = app
        self.store = store

    async def __call__(self, scope, receive, send):
        if scope["type"] in BOUND_SCOPE_TYPES:
            with cart_context(self.store):
                await self.app(scope, receive, send)
        else:
            await self.app(scope, receive, send)
