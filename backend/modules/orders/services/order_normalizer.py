# backend/modules/orders/services/order_normalizer.py

"""
Turns a raw order request into a priced, validated Order.

Lines with an unknown menu id or a quantity that is not a positive number
are dropped silently; only a request with no usable line at all is
rejected. Every monetary value is rounded half-up to cents on its own:
line totals first, then the subtotal of the rounded lines, then tax on the
rounded subtotal, then the total of the two rounded amounts.
"""

import itertools
import logging
import math
from datetime import datetime, timezone
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Callable, List, Mapping, Optional, Union

from core.exceptions import ValidationError
from modules.menu.services.menu_catalog import MenuCatalog
from ..enums.order_enums import OrderStatus
from ..schemas.order_schemas import (
    Order,
    OrderCreateRequest,
    OrderLine,
    TABLE_MAX_LENGTH,
    NOTE_MAX_LENGTH,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
FIRST_ORDER_NUMBER = 1001
EMPTY_ORDER_MESSAGE = "Order must contain at least one item"

# Wide enough to hold any float-range amount down to the cent.
MONEY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
MAX_EXACT_INTEGER = 2 ** 53


def round_money(amount: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT)


def _fits_float(amount: Decimal) -> bool:
    return math.isfinite(float(amount))


def coerce_quantity(value: Any) -> Optional[Decimal]:
    """
    Interpret a requested quantity as a number.

    Numbers are taken as-is, booleans count as 0 or 1, and strings are
    parsed after stripping whitespace (a blank string is 0). Anything else,
    and anything beyond the range of a float, is not a quantity.
    """
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, (int, float)):
        try:
            quantity = Decimal(str(value))
        except InvalidOperation:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal(0)
        try:
            quantity = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not quantity.is_finite() or not _fits_float(quantity):
        return None
    if float(quantity) == 0:
        return Decimal(0)
    return quantity


def _display_text(value: Any) -> str:
    """Render a JSON value the way a browser would show it as a label."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_display_text(element) for element in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def _as_text(value: Any, limit: int) -> str:
    return _display_text(value)[:limit]


def _wire_quantity(quantity: Decimal) -> Union[int, float]:
    if abs(quantity) <= MAX_EXACT_INTEGER and quantity == quantity.to_integral_value():
        return int(quantity)
    return float(quantity)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderNormalizer:
    """
    Prices order requests against a menu catalog.

    The normalizer owns the order number sequence; numbers are handed out
    only to requests that produce an order, so ids increase strictly and
    are never reused. It never touches the order store.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        first_order_number: int = FIRST_ORDER_NUMBER,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.catalog = catalog
        self._order_numbers = itertools.count(first_order_number)
        self._clock = clock

    def price_lines(self, raw_items: Optional[List[Any]]) -> List[OrderLine]:
        """
        Price every usable requested line, dropping the rest.

        A line whose amount would push the order total past what a float
        can carry is dropped like any other unusable line.
        """
        lines: List[OrderLine] = []
        running = Decimal("0")
        with localcontext(MONEY_CONTEXT):
            for raw in raw_items or []:
                if not isinstance(raw, Mapping):
                    continue

                menu_item = self.catalog.get(raw.get("menuId"))
                quantity = coerce_quantity(raw.get("qty"))
                if menu_item is None or quantity is None or quantity <= 0:
                    continue

                line_total = round_money(Decimal(str(menu_item.price)) * quantity)
                gross = round_money(running + line_total) * (1 + self.catalog.tax_rate)
                if not _fits_float(gross):
                    logger.warning(f"Dropped order line for {menu_item.id}: amount out of range")
                    continue

                running += line_total
                lines.append(
                    OrderLine(
                        menu_id=menu_item.id,
                        name=menu_item.name,
                        qty=_wire_quantity(quantity),
                        price=menu_item.price,
                        line_total=float(line_total),
                    )
                )
        return lines

    def normalize(
        self, request: Union[OrderCreateRequest, Mapping[str, Any]]
    ) -> Order:
        """
        Build a new Order from a request.

        Raises:
            ValidationError: when no requested line survives validation
        """
        if not isinstance(request, OrderCreateRequest):
            request = OrderCreateRequest.model_validate(request)

        lines = self.price_lines(request.items)
        if not lines:
            logger.warning(
                f"Rejected order request: none of {len(request.items or [])} "
                f"requested lines is valid"
            )
            raise ValidationError(EMPTY_ORDER_MESSAGE)

        with localcontext(MONEY_CONTEXT):
            subtotal = round_money(
                sum((Decimal(str(line.line_total)) for line in lines), Decimal("0"))
            )
            tax = round_money(subtotal * self.catalog.tax_rate)
            total = round_money(subtotal + tax)

        return Order(
            id=str(next(self._order_numbers)),
            created_at=format_timestamp(self._clock()),
            table=_as_text(request.table, TABLE_MAX_LENGTH),
            note=_as_text(request.note, NOTE_MAX_LENGTH),
            items=lines,
            subtotal=float(subtotal),
            tax=float(tax),
            total=float(total),
            status=OrderStatus.NEW,
        )
