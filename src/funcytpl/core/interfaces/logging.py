from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface a TemplateRenderer writes to.

    A stdlib ``logging.Logger`` satisfies it; so does any adapter exposing
    these methods. Trace records pass ``extra=`` through ``**kwargs``.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of renderer loggers, see funcytpl.renderer_factory."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for component `name` (e.g. 'render')."""
        ...
