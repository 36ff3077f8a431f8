"""
Logging setup for the `webstudio` package.

DAOs and helpers create module loggers with ``logging.getLogger(__name__)``; this
module only wires a handler onto the package root logger.
"""

import logging
from typing import Optional

from webstudio.database.config.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``webstudio`` logger.

    Parameters
    ----------
    level : str | None
        Logging level name. Defaults to ``settings.LOG_LEVEL``.

    Returns
    -------
    logging.Logger
        The configured package logger. Calling this twice does not add a second handler.
    """
    logger = logging.getLogger("webstudio")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
