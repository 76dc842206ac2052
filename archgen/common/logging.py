import logging
import sys

from archgen.config import settings

_ROOT_LOGGER = "archgen"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the ``archgen`` logger hierarchy once per process."""
    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
