"""
Centralized logging for tokscan using Loguru.

This module provides a function-based logging mechanism (`LOG`) that respects
the `beQuiet` flag from application settings.

Usage:
    from tokscan.lib.log import LOG
    LOG("Variable not found: db.user")

Environment:
- Set `TOKSCAN_BEQUIET=True` to suppress debug output.
"""

from loguru import logger
from typing import Any
import sys

app_logger = logger.bind(app="TOKSCAN")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific debug logging.

    Checks `beQuiet` in `appsettings` on every call so that environment
    overrides applied after import are honored.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from tokscan.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.debug(*args, **kwargs)
