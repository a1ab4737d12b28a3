"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the server process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at {level}")
