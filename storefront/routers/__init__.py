"""HTTP routers."""
from .orders import router as orders_router
from .webhooks import router as webhooks_router

__all__ = ["orders_router", "webhooks_router"]
