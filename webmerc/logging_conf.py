#!/usr/bin/env python3
# webmerc/logging_conf.py
"""
Logging hooks for webmerc.

The library never configures the root logger. Records go to the "webmerc"
logger tree, which carries a NullHandler until the host attaches its own
handler or turns tracing on here.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("webmerc")
logger.addHandler(logging.NullHandler())


def trace_conversions(enabled: bool = True, handler: Optional[logging.Handler] = None) -> None:
    """
    Emit the DEBUG records from the conversion functions (pole hits).
    An optional handler is attached to the webmerc logger, formatted with
    LOG_FORMAT unless it already has a formatter.
    """
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)
    if handler is not None and handler not in logger.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
