from __future__ import annotations

"""Public surface for funcytpl.core.

Stable import location for protocols, the segment model and the error
hierarchy:

    from funcytpl.core import Placeholder, RenderError, ...
"""

from funcytpl.core.errors import (
    MalformedMarkerError,
    PlaceholderFunctionError,
    RenderError,
    UnknownPlaceholderError,
)
from funcytpl.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PlaceholderFunctionProtocol,
    TemplateRendererProtocol,
)
from funcytpl.core.models import Literal, Placeholder, Segment, SourcePosition

__all__ = [
    # Protocols
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "PlaceholderFunctionProtocol",
    "TemplateRendererProtocol",
    # Model
    "Literal",
    "Placeholder",
    "Segment",
    "SourcePosition",
    # Errors
    "RenderError",
    "MalformedMarkerError",
    "UnknownPlaceholderError",
    "PlaceholderFunctionError",
]
