"""Logging for the ``accounting_game`` package.

The Streamlit entrypoint calls ``configure_logging(params.log_level)`` once;
every other module only asks ``get_logger("accounting_game.<module>")``.
"""

import logging
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "accounting_game"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: Union[int, str, None]) -> int:
    # "debug", "10" or logging.DEBUG; anything else is INFO
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None, stream: Optional[IO[str]] = None):
    """Attach one StreamHandler to the package logger; later calls are no-ops."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    # Streamlit installs its own root handlers
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
