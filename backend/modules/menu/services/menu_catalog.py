# backend/modules/menu/services/menu_catalog.py

"""
Fixed counter menu.

The catalog is built once at startup and never changes while the process
runs. Orders copy name and price at creation time, so a different catalog
in a later run never alters orders already taken.
"""

from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from ..schemas.menu_schemas import MenuItem

TAX_RATE = Decimal("0.05")

MENU_ITEMS: Tuple[MenuItem, ...] = (
    MenuItem(id="espresso", name="Espresso", price=2.5),
    MenuItem(id="cappuccino", name="Cappuccino", price=3.5),
    MenuItem(id="latte", name="Latte", price=3.75),
    MenuItem(id="americano", name="Americano", price=3.0),
    MenuItem(id="croissant", name="Croissant", price=2.75),
    MenuItem(id="sandwich", name="Sandwich", price=5.5),
    MenuItem(id="cake", name="Cake Slice", price=4.0),
    MenuItem(id="water", name="Water", price=1.0),
)


class MenuCatalog:
    """Read-only menu with lookup by item id"""

    def __init__(
        self, items: Iterable[MenuItem] = MENU_ITEMS, tax_rate: Decimal = TAX_RATE
    ):
        self._items: Tuple[MenuItem, ...] = tuple(items)
        self._by_id: Dict[str, MenuItem] = {item.id: item for item in self._items}
        if len(self._by_id) != len(self._items):
            raise ValueError("Menu item ids must be unique")
        self.tax_rate = Decimal(str(tax_rate))

    def get(self, menu_id) -> Optional[MenuItem]:
        if not isinstance(menu_id, str):
            return None
        return self._by_id.get(menu_id)

    def list_menu(self) -> Tuple[Tuple[MenuItem, ...], Decimal]:
        """Return the menu items in display order together with the tax rate."""
        return self._items, self.tax_rate


default_catalog = MenuCatalog()
