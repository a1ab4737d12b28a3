# backend/modules/orders/services/order_store.py

import logging
from typing import Dict, List, Optional

from core.exceptions import NotFoundError
from ..schemas.order_schemas import Order

logger = logging.getLogger(__name__)


class OrderStore:
    """
    Process-lifetime order table keyed by order id.

    Orders are never deleted; an update replaces the whole record. Nothing
    survives a restart.
    """

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    def insert(self, order: Order) -> Order:
        self._orders[order.id] = order
        return order

    def get(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)

    def replace(self, order_id: str, order: Order) -> Order:
        """
        Replace the stored record for an existing order.

        Raises:
            NotFoundError: when no order with this id was ever inserted
        """
        if order_id not in self._orders:
            raise NotFoundError("Order not found")
        self._orders[order_id] = order
        return order

    def list(self) -> List[Order]:
        """
        Snapshot of all orders, most recent first.

        Orders created within the same millisecond are ordered by id,
        higher (later) ids first.
        """
        return sorted(
            self._orders.values(),
            key=lambda order: (order.created_at, int(order.id)),
            reverse=True,
        )

    def __len__(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: str) -> bool:
        return order_id in self._orders
