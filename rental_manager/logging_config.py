import logging

from rental_manager.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL

    Returns:
        The configured ``rental_manager`` logger
    """
    package_logger = logging.getLogger("rental_manager")
    package_logger.handlers.clear()
    package_logger.setLevel((level or settings.LOG_LEVEL).upper())

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger
