"""
WebSocket route for live order updates.

Message types pushed to displays:
- server:hello: sent once, right after the connection is accepted
- order:new: a new order was taken
- order:update: an order changed status

Displays do not send anything meaningful; inbound frames are read and
discarded so the connection stays open.
"""

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
import logging

from ..websocket.order_broadcaster import OrderEventBroadcaster

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders-websocket"])


def get_websocket_broadcaster(websocket: WebSocket) -> OrderEventBroadcaster:
    return websocket.app.state.order_broadcaster


@router.websocket("/ws")
async def order_updates_websocket(
    websocket: WebSocket,
    broadcaster: OrderEventBroadcaster = Depends(get_websocket_broadcaster),
):
    await websocket.accept()
    await broadcaster.subscribe(websocket)

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.debug("Order display websocket closed by client")
                break
    except WebSocketDisconnect:
        logger.debug("Order display websocket dropped")
    finally:
        broadcaster.unsubscribe(websocket)
