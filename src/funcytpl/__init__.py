"""Simple function based template engine.

Renders template strings with functions embedded::

    from funcytpl import TemplateRenderer

    tr = TemplateRenderer.with_template("<!$ echo Hello>, World!")
    tr.set_placeholder_fn("echo", lambda name, arg: arg)
    tr.render()  # "Hello, World!"
"""
from __future__ import annotations

from typing import Mapping, Optional

from funcytpl.constants import CLOSE_TOKEN, START_TOKEN
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
from funcytpl.logging.factory import DefaultLoggerFactory
from funcytpl.logging.helpers import get_logger
from funcytpl.parsing.scanner import PlaceholderScanner, scan_segments
from funcytpl.registry import PlaceholderRegistry, validate_placeholder_name
from funcytpl.rendering.functions import FunctionPlaceholder, as_placeholder_function
from funcytpl.rendering.renderer import TemplateRenderer

__version__ = '0.1.0'


def renderer_factory(
    template: str = "",
    *,
    placeholders: Optional[Mapping[str, object]] = None,
    logger: Optional[LoggerLikeProtocol] = None,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> TemplateRenderer:
    """Factory helper that returns a ready TemplateRenderer.

    An explicit *logger* wins over *logger_factory*; with neither, the
    renderer logs to the unconfigured 'funcytpl.render' logger.
    """
    lg = logger
    if lg is None and logger_factory is not None:
        lg = logger_factory.get_logger('render')
    return TemplateRenderer(template, registry=PlaceholderRegistry(placeholders), logger=lg)


__all__ = [
    'START_TOKEN',
    'CLOSE_TOKEN',
    'TemplateRenderer',
    'TemplateRendererProtocol',
    'PlaceholderFunctionProtocol',
    'LoggerLikeProtocol',
    'PlaceholderScanner',
    'scan_segments',
    'PlaceholderRegistry',
    'validate_placeholder_name',
    'FunctionPlaceholder',
    'as_placeholder_function',
    'Literal',
    'Placeholder',
    'Segment',
    'SourcePosition',
    'RenderError',
    'MalformedMarkerError',
    'UnknownPlaceholderError',
    'PlaceholderFunctionError',
    'DefaultLoggerFactory',
    'get_logger',
    'renderer_factory',
]
