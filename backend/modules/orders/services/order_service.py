# backend/modules/orders/services/order_service.py

from typing import Any, List, Mapping, Union
import logging

from core.exceptions import InternalError, NotFoundError, ValidationError
from ..enums.order_enums import OrderEvent, OrderStatus
from ..schemas.order_schemas import Order, OrderCreateRequest
from ..websocket.order_broadcaster import OrderEventBroadcaster
from .order_normalizer import OrderNormalizer
from .order_store import OrderStore

logger = logging.getLogger(__name__)


def parse_status(value: Any) -> OrderStatus:
    """
    Accept any of the four lifecycle values, in any order.

    Raises:
        ValidationError: for anything else, including a missing value
    """
    if isinstance(value, OrderStatus):
        return value
    text = "" if value is None else str(value)
    try:
        return OrderStatus(text)
    except ValueError:
        raise ValidationError("Invalid status")


class OrderService:
    """Order operations shared by the HTTP handlers"""

    def __init__(
        self,
        store: OrderStore,
        normalizer: OrderNormalizer,
        broadcaster: OrderEventBroadcaster,
    ):
        self.store = store
        self.normalizer = normalizer
        self.broadcaster = broadcaster

    def list_orders(self) -> List[Order]:
        return self.store.list()

    async def create_order(
        self, request: Union[OrderCreateRequest, Mapping[str, Any]]
    ) -> Order:
        """
        Price, store and announce a new order.

        Nothing is stored when the request is rejected.
        """
        try:
            order = self.normalizer.normalize(request)
            self.store.insert(order)
        except ValidationError:
            raise
        except Exception as e:
            logger.exception(f"Failed to create order: {e}")
            raise InternalError("Failed to create order")

        logger.info(
            f"Order {order.id} created: {len(order.items)} lines, total {order.total:.2f}"
        )
        await self.broadcaster.publish(OrderEvent.ORDER_NEW, order.to_wire())
        return order

    async def update_status(self, order_id: str, status: Any) -> Order:
        """
        Set the status of an existing order and announce the change.

        Raises:
            NotFoundError: unknown order id (checked before the status)
            ValidationError: status outside the lifecycle values
        """
        current = self.store.get(order_id)
        if current is None:
            raise NotFoundError("Order not found")

        new_status = parse_status(status)
        updated = current.model_copy(update={"status": new_status})
        self.store.replace(order_id, updated)

        logger.info(
            f"Order {order_id} status {current.status.value} -> {new_status.value}"
        )
        await self.broadcaster.publish(OrderEvent.ORDER_UPDATE, updated.to_wire())
        return updated
