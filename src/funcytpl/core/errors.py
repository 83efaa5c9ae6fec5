from __future__ import annotations

"""Typed exceptions raised while scanning and rendering templates."""

from typing import Optional

from funcytpl.core.models import Placeholder, SourcePosition


class RenderError(Exception):
    """Base class for every failure that aborts a render."""

    def __init__(self, message: str, *, position: Optional[SourcePosition] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at {self.position.format()}"


class MalformedMarkerError(RenderError):
    """A start token without a well-formed marker behind it."""


class UnknownPlaceholderError(RenderError):
    """A marker names a placeholder function that is not registered."""

    def __init__(self, placeholder: Placeholder) -> None:
        super().__init__(
            f"Unknown placeholder function '{placeholder.name}'",
            position=placeholder.position,
        )
        self.placeholder = placeholder
        self.name = placeholder.name


class PlaceholderFunctionError(RenderError):
    """A registered placeholder function failed.

    The handler's own exception, when there is one, is available as
    ``__cause__``.
    """

    def __init__(self, name: str, message: str, *, position: Optional[SourcePosition] = None) -> None:
        super().__init__(message, position=position)
        self.name = name

    def __str__(self) -> str:
        where = f" at {self.position.format()}" if self.position is not None else ""
        return f"Error in placeholder function '{self.name}'{where}: {self.message}"
