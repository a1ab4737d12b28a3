from enum import Enum


class OrderStatus(str, Enum):
    NEW = "new"
    ACCEPTED = "accepted"
    READY = "ready"
    BILLED = "billed"


class OrderEvent(str, Enum):
    """Events pushed to connected displays"""

    SERVER_HELLO = "server:hello"
    ORDER_NEW = "order:new"
    ORDER_UPDATE = "order:update"
