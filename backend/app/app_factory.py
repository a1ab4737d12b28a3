"""Application factory.

Each call builds an independent app: its own menu catalog, order store,
order number sequence and display registry live on ``app.state`` and are
handed to the routes through dependencies. The module-level app in
``app.main`` is one such instance; tests build their own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import Settings, get_settings
from core.exceptions import register_exception_handlers
from modules.menu.routes import menu_router
from modules.menu.services.menu_catalog import MenuCatalog, default_catalog
from modules.orders.routes import order_router, order_websocket_router
from modules.orders.services.order_normalizer import OrderNormalizer
from modules.orders.services.order_store import OrderStore
from modules.orders.websocket.order_broadcaster import OrderEventBroadcaster

LOGGER = logging.getLogger(__name__)


def _mount_public_assets(app: FastAPI, settings: Settings) -> None:
    public_dir = Path(settings.public_dir)
    if not public_dir.is_dir():
        LOGGER.info("No public directory at '%s'; serving API only", public_dir)
        return
    app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[MenuCatalog] = None,
) -> FastAPI:
    """Create the FastAPI application with fresh in-memory state."""

    settings = settings or get_settings()
    catalog = catalog or default_catalog

    app = FastAPI(
        title=f"{settings.app_name} order counter",
        description="Menu, order intake and live order updates for a café counter.",
        version="1.0.0",
    )
    register_exception_handlers(app)

    app.state.settings = settings
    app.state.menu_catalog = catalog
    app.state.order_store = OrderStore()
    app.state.order_normalizer = OrderNormalizer(catalog)
    app.state.order_broadcaster = OrderEventBroadcaster()

    app.include_router(menu_router)
    app.include_router(order_router)
    app.include_router(order_websocket_router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "environment": settings.environment}

    @app.on_event("startup")
    async def announce_startup():
        LOGGER.info("%s running on:", settings.app_name)
        LOGGER.info("- Local:   http://localhost:%s", settings.port)
        LOGGER.info("- Network: http://%s:%s", settings.host, settings.port)

    # Static assets last so they never shadow API or websocket routes
    _mount_public_assets(app, settings)
    return app
