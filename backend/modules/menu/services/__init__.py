# backend/modules/menu/services/__init__.py

from .menu_catalog import MenuCatalog, default_catalog, MENU_ITEMS, TAX_RATE

__all__ = ["MenuCatalog", "default_catalog", "MENU_ITEMS", "TAX_RATE"]
