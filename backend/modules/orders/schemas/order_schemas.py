from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional, Union

from core.response_models import CamelModel
from ..enums.order_enums import OrderStatus

TABLE_MAX_LENGTH = 20
NOTE_MAX_LENGTH = 200


class OrderLine(CamelModel):
    """One priced line; name and price are copied from the menu at order time"""

    model_config = ConfigDict(frozen=True)

    menu_id: str
    name: str
    qty: Union[int, float]
    price: float
    line_total: float


class Order(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: str
    table: str = Field("", max_length=TABLE_MAX_LENGTH)
    note: str = Field("", max_length=NOTE_MAX_LENGTH)
    items: List[OrderLine] = Field(..., min_length=1)
    subtotal: float
    tax: float
    total: float
    status: OrderStatus = OrderStatus.NEW


class OrderCreateRequest(BaseModel):
    """
    Raw order request.

    Every field is optional and loosely typed. Each entry of ``items`` is
    expected to look like ``{"menuId": ..., "qty": ...}``; lines that do not
    make sense are dropped by the normalizer instead of failing the whole
    request.
    """

    model_config = ConfigDict(extra="allow")

    table: Any = None
    note: Any = None
    items: Optional[List[Any]] = None


class OrderResponse(CamelModel):
    order: Order


class OrderListResponse(CamelModel):
    orders: List[Order]
