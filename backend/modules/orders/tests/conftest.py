import pytest
from datetime import datetime, timedelta, timezone

from modules.menu.services.menu_catalog import MenuCatalog
from modules.orders.services.order_normalizer import OrderNormalizer
from modules.orders.services.order_store import OrderStore
from modules.orders.services.order_service import OrderService
from modules.orders.websocket.order_broadcaster import OrderEventBroadcaster


class FakeSubscriber:
    """Records every message pushed to it, like a connected display."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.messages = []

    async def send_json(self, data):
        if self.fail:
            raise ConnectionResetError("display went away")
        self.messages.append(data)

    def of_type(self, event_type):
        return [m for m in self.messages if m["type"] == event_type]


class SteppingClock:
    """Clock that advances one second per reading."""

    def __init__(self, start=None):
        self.current = start or datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        reading = self.current
        self.current = self.current + timedelta(seconds=1)
        return reading


@pytest.fixture
def catalog():
    return MenuCatalog()


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def normalizer(catalog, clock):
    return OrderNormalizer(catalog, clock=clock)


@pytest.fixture
def store():
    return OrderStore()


@pytest.fixture
def event_broadcaster():
    return OrderEventBroadcaster()


@pytest.fixture
def service(store, normalizer, event_broadcaster):
    return OrderService(store, normalizer, event_broadcaster)


@pytest.fixture
def display():
    return FakeSubscriber()


@pytest.fixture
def sample_request():
    return {
        "table": "5",
        "items": [
            {"menuId": "espresso", "qty": 2},
            {"menuId": "cake", "qty": 1},
        ],
    }
