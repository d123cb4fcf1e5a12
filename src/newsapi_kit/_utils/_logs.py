import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Attaches a single stderr handler to the ``newsapi_kit`` logger. Calling it
    again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_newsapi_kit", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._newsapi_kit = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
