import logging
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Optional[str] = None) -> int:
    name = (level or LOG_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level or LOG_LEVEL!r}")
    return value


def configure_logging(level: Optional[str] = None) -> None:
    """Send tenpin log records to stderr at ``level`` (``TENPIN_LOG_LEVEL`` by default)."""
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
