"""Logging setup and scoped loggers."""

import logging
import sys
from typing import Union

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

AnyLogger = Union[logging.Logger, logging.LoggerAdapter]


class ScopedAdapter(logging.LoggerAdapter):
    """Prefix every message with a scope label such as ``[Day 3]``."""

    def __init__(self, logger: AnyLogger, scope: str):
        super().__init__(logger, {"scope": scope})
        self.scope = scope

    def process(self, msg, kwargs):
        return f"{self.scope} {msg}", kwargs


def scoped(logger: AnyLogger, scope: str) -> ScopedAdapter:
    """Open a logging scope. Scopes nest when given an adapter."""
    return ScopedAdapter(logger, scope)


def configure_logging(verbosity: int = 0) -> int:
    """
    Install the stderr handler.

    ``verbosity`` shifts the level from LOG_LEVEL: each +1 is one level more
    verbose, each -1 one level quieter. Returns the effective level.
    """
    base = logging.getLevelName(LOG_LEVEL)
    if not isinstance(base, int):
        base = logging.WARNING
    level = min(max(base - 10 * verbosity, logging.DEBUG), logging.CRITICAL)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    return level
