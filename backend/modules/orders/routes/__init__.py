# backend/modules/orders/routes/__init__.py

from .order_routes import router as order_router
from .websocket_routes import router as order_websocket_router

__all__ = ["order_router", "order_websocket_router"]
