from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from funcytpl.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Factory that configures and returns project-scoped loggers.

    Base configuration is delegated to `setup_base_logger` and happens on the
    first `get_logger` call, never at construction time.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from FUNCYTPL_LOG_LEVEL and FUNCYTPL_LOG_JSON."""
        raw_level = os.getenv("FUNCYTPL_LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(raw_level)
        if not isinstance(level, int):
            raise ValueError(f"invalid FUNCYTPL_LOG_LEVEL: {raw_level!r}")
        json_logs = os.getenv("FUNCYTPL_LOG_JSON", "").strip().lower() in {"1", "true", "yes"}
        return cls(json_logs=json_logs, level=level, stream=stream)

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
