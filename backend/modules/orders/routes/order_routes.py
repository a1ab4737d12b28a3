from fastapi import APIRouter, Body, Depends, status
from typing import Any

from core.response_models import ErrorResponse
from ..dependencies import get_order_service
from ..schemas.order_schemas import (
    OrderCreateRequest,
    OrderListResponse,
    OrderResponse,
)
from ..services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=OrderListResponse)
async def get_orders(service: OrderService = Depends(get_order_service)):
    """
    Retrieve every order taken since the server started, newest first.
    """
    return OrderListResponse(orders=service.list_orders())


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_order(
    order_request: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
):
    """
    Take a new order.

    - **table**: optional table label, cut to 20 characters
    - **note**: optional note for the kitchen, cut to 200 characters
    - **items**: requested lines as `{menuId, qty}`; unknown items and
      non-positive quantities are skipped

    Responds 400 when no requested line is usable. Connected displays
    receive `order:new`.
    """
    order = await service.create_order(order_request)
    return OrderResponse(order=order)


@router.patch(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_order_status(
    order_id: str,
    body: Any = Body(default=None),
    service: OrderService = Depends(get_order_service),
):
    """
    Move an order to another status: new, accepted, ready or billed.

    Any of the four values is accepted at any time. Connected displays
    receive `order:update`. The body is `{"status": ...}`; any other
    shape counts as a missing status, and an unknown id is a 404 first.
    """
    requested = body.get("status") if isinstance(body, dict) else None
    order = await service.update_status(order_id, requested)
    return OrderResponse(order=order)
