from __future__ import annotations

"""Small logging helpers to standardize funcytpl logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'funcytpl' logger.
    - get_logger: Namespaced logger factory ('funcytpl.*').
    - trace_render utilities gated by FUNCYTPL_TRACE_RENDER.

The library itself never calls setup_base_logger; applications opt in.
"""

import logging
import os
from typing import Optional, TextIO

from funcytpl.constants import LOGGER_ROOT
from funcytpl.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'funcytpl.render').
        - msg: Formatted message string.
        - version: funcytpl.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import: funcytpl/__init__ imports this module.
            from funcytpl import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("FUNCYTPL_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'funcytpl' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(LOGGER_ROOT)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under 'funcytpl'."""
    if not name or name == LOGGER_ROOT:
        return logging.getLogger(LOGGER_ROOT)
    if name.startswith(f"{LOGGER_ROOT}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")


def is_trace_render_enabled() -> bool:
    """Check if dispatch tracing is enabled via env flag."""
    return os.getenv("FUNCYTPL_TRACE_RENDER") == "1"


def trace_render(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity dispatch trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_render_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
