# backend/modules/menu/routes/menu_routes.py

from fastapi import APIRouter, Depends, Request

from ..schemas.menu_schemas import MenuResponse
from ..services.menu_catalog import MenuCatalog

router = APIRouter(prefix="/api/menu", tags=["Menu"])


def get_menu_catalog(request: Request) -> MenuCatalog:
    """Dependency to get the catalog owned by the running app"""
    return request.app.state.menu_catalog


@router.get("", response_model=MenuResponse)
async def get_menu(catalog: MenuCatalog = Depends(get_menu_catalog)):
    """
    List the counter menu.

    Returns every purchasable item in display order and the tax rate
    applied to order subtotals.
    """
    items, tax_rate = catalog.list_menu()
    return MenuResponse(menu=list(items), tax_rate=float(tax_rate))
