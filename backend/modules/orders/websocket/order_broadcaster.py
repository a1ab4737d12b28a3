# backend/modules/orders/websocket/order_broadcaster.py

"""
Fan-out of order events to connected displays.

The broadcaster only knows subscribers as objects with an async
``send_json`` method, so a FastAPI ``WebSocket`` and a test double are
interchangeable. Delivery is best effort: there is no acknowledgement,
no retry and no replay for displays that connect later.
"""

from typing import Any, Dict, List, Protocol
from datetime import datetime, timezone
import logging

from ..enums.order_enums import OrderEvent

logger = logging.getLogger(__name__)


class Subscriber(Protocol):
    async def send_json(self, data: Any) -> None: ...


def build_message(event: OrderEvent, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": OrderEvent(event).value,
        "data": payload,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


class OrderEventBroadcaster:
    """Registry of connected displays"""

    def __init__(self):
        self._subscribers: List[Subscriber] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def subscribe(self, subscriber: Subscriber) -> None:
        """Register a display and greet it."""
        self._subscribers.append(subscriber)
        logger.info(f"Display connected ({self.subscriber_count} connected)")

        message = build_message(OrderEvent.SERVER_HELLO, {"ok": True})
        if not await self._deliver(subscriber, message):
            self.unsubscribe(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber not in self._subscribers:
            return
        self._subscribers.remove(subscriber)
        logger.info(f"Display disconnected ({self.subscriber_count} connected)")

    async def publish(self, event: OrderEvent, payload: Dict[str, Any]) -> int:
        """
        Send an event to every display connected right now.

        Displays whose send fails are dropped; the others still get the
        event. Returns the number of displays the event reached.
        """
        message = build_message(event, payload)
        delivered = 0
        disconnected = []

        for subscriber in list(self._subscribers):
            if await self._deliver(subscriber, message):
                delivered += 1
            else:
                disconnected.append(subscriber)

        # Clean up disconnected displays
        for subscriber in disconnected:
            self.unsubscribe(subscriber)

        return delivered

    async def _deliver(self, subscriber: Subscriber, message: Dict[str, Any]) -> bool:
        try:
            await subscriber.send_json(message)
            return True
        except Exception as e:
            logger.error(f"Error sending {message['type']} to display: {e}")
            return False
