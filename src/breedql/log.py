"""Logging setup.

breedql logs through the standard ``logging`` module. Request-scoped code
receives a ``logging.LoggerAdapter`` that stamps every record with the
request id, so log lines of concurrent requests can be told apart.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

LOGGER_NAME = "breedql"

_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class RequestLoggerAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Adds the request id to every record, keeping caller ``extra``."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


class _RequestIdFilter(logging.Filter):
    # Records logged outside a request have no request_id.
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Send breedql logs to stdout at the given level.

    Safe to call more than once; the handler is installed only once.

    Args:
        level: Level name or number.

    Returns:
        The ``breedql`` root logger.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    if not any(getattr(h, "_breedql", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.addFilter(_RequestIdFilter())
        handler._breedql = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    return root


def request_logger(request_id: str) -> RequestLoggerAdapter:
    """Return a logger that tags records with ``request_id``."""
    return RequestLoggerAdapter(
        logging.getLogger(f"{LOGGER_NAME}.request"), {"request_id": request_id}
    )
