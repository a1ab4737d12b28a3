# backend/modules/menu/routes/__init__.py

from .menu_routes import router as menu_router

__all__ = ["menu_router"]
