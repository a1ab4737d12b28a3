import uvicorn

from core.config import get_settings
from core.logging_config import configure_logging
from app.app_factory import create_app

settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)


def run():
    """Serve the app on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
