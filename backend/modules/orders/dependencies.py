# backend/modules/orders/dependencies.py

"""
FastAPI dependencies for the order module.

State lives on ``app.state`` of the app that owns it, so every app built
by the factory gets its own store and subscriber registry and tests can
swap any of them through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from .services.order_normalizer import OrderNormalizer
from .services.order_service import OrderService
from .services.order_store import OrderStore
from .websocket.order_broadcaster import OrderEventBroadcaster


def get_order_store(request: Request) -> OrderStore:
    return request.app.state.order_store


def get_order_normalizer(request: Request) -> OrderNormalizer:
    return request.app.state.order_normalizer


def get_order_broadcaster(request: Request) -> OrderEventBroadcaster:
    return request.app.state.order_broadcaster


def get_order_service(
    store: OrderStore = Depends(get_order_store),
    normalizer: OrderNormalizer = Depends(get_order_normalizer),
    broadcaster: OrderEventBroadcaster = Depends(get_order_broadcaster),
) -> OrderService:
    """Dependency to get order service instance"""
    return OrderService(store, normalizer, broadcaster)
