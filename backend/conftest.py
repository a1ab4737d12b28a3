"""
Pytest configuration file for backend testing.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from app.app_factory import create_app  # noqa: E402
from core.config import Settings  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=3000,
        public_dir=str(tmp_path / "no-public-dir"),
    )


@pytest.fixture
def app(settings):
    """A fresh app with empty order state."""
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def order_store(app):
    return app.state.order_store


@pytest.fixture
def broadcaster(app):
    return app.state.order_broadcaster
