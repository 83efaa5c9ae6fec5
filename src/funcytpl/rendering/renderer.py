"""
Renderer component for funcytpl.

This module provides:
  • TemplateRendererProtocol – DI-friendly interface (from core.interfaces.render).
  • TemplateRenderer         – scan + dispatch + concatenation.

Notes
-----
• Scanning is delegated to a PlaceholderScanner. The segment list is cached
  per template text and dropped by set_template().
• The whole template is scanned before any function runs, so a malformed
  marker fails the render without side effects on registered functions.
• Functions run strictly in textual order, once per marker. A failure aborts
  the render and nothing partial is returned.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from funcytpl.core.errors import PlaceholderFunctionError, RenderError, UnknownPlaceholderError
from funcytpl.core.interfaces.logging import LoggerLikeProtocol
from funcytpl.core.interfaces.placeholders import PlaceholderFunctionProtocol
from funcytpl.core.interfaces.render import TemplateRendererProtocol
from funcytpl.core.models import Literal, Placeholder, Segment
from funcytpl.logging.helpers import get_logger, trace_render
from funcytpl.parsing.scanner import PlaceholderScanner
from funcytpl.registry import PlaceholderRegistry


class TemplateRenderer(TemplateRendererProtocol):
    """Render a template by calling one registered function per marker.

    Example::

        class Counter:
            def __init__(self):
                self.n = 0

            def placeholder_fn_handler(self, name, arg):
                self.n += 1
                return str(self.n)

        tr = TemplateRenderer.with_template("<!$ counter> <!$ counter>")
        tr.set_placeholder_fn("counter", Counter())
        tr.render()  # "1 2"
    """

    def __init__(
        self,
        template: str = "",
        *,
        registry: Optional[PlaceholderRegistry] = None,
        scanner: Optional[PlaceholderScanner] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._template = template
        self._registry = registry if registry is not None else PlaceholderRegistry()
        self._scanner = scanner or PlaceholderScanner()
        self._log = logger or get_logger("render")
        self._segments: Optional[List[Segment]] = None

    @classmethod
    def with_template(cls, template: str, **kwargs) -> 'TemplateRenderer':
        """Create a renderer over *template* with no functions registered."""
        return cls(template, **kwargs)

    @property
    def template(self) -> str:
        return self._template

    @property
    def registry(self) -> PlaceholderRegistry:
        return self._registry

    def set_template(self, template: str) -> None:
        self._template = template
        self._segments = None

    def set_placeholder_fn(self, name: str, handler: object) -> Optional[PlaceholderFunctionProtocol]:
        """Add or replace the function for *name*; return the replaced one."""
        return self._registry.register(name, handler)

    def remove_placeholder_fn(self, name: str) -> Optional[PlaceholderFunctionProtocol]:
        return self._registry.unregister(name)

    def append_placeholders(self, mapping: Mapping[str, object]) -> None:
        self._registry.update(mapping)

    def set_placeholders(self, mapping: Mapping[str, object]) -> None:
        self._registry.replace(mapping)

    def segments(self) -> List[Segment]:
        """Return the scanned segments of the current template."""
        if self._segments is None:
            self._segments = self._scanner.scan(self._template)
            self._log.debug(
                "scanned template: %d segment(s), %d placeholder(s)",
                len(self._segments),
                sum(1 for s in self._segments if isinstance(s, Placeholder)),
            )
        return list(self._segments)

    def render(self) -> str:
        """Render the template.

        Raises
        ------
        MalformedMarkerError
            The template contains a marker that cannot be parsed.
        UnknownPlaceholderError
            A marker names a function that is not registered.
        PlaceholderFunctionError
            A function raised or returned something other than ``str``, or a
            lazily registered function could not be built.
        """
        try:
            segments = self.segments()
        except RenderError as exc:
            self._log.debug("render aborted: %s", exc)
            raise

        out: List[str] = []
        for seg in segments:
            if isinstance(seg, Literal):
                out.append(seg.text)
                continue
            try:
                out.append(self._dispatch(seg))
            except RenderError as exc:
                self._log.debug("render aborted: %s", exc)
                raise

        return "".join(out)

    def _dispatch(self, placeholder: Placeholder) -> str:
        try:
            fn = self._registry.get(placeholder.name)
        except Exception as exc:
            # Lazy builders run here, on first lookup.
            raise PlaceholderFunctionError(
                placeholder.name,
                f"could not build placeholder function: {str(exc) or type(exc).__name__}",
                position=placeholder.position,
            ) from exc
        if fn is None:
            raise UnknownPlaceholderError(placeholder)

        trace_render(
            self._log,
            "dispatch placeholder",
            name=placeholder.name,
            argument=placeholder.argument,
            offset=placeholder.start,
        )
        try:
            result = fn.placeholder_fn_handler(placeholder.name, placeholder.argument)
        except Exception as exc:
            raise PlaceholderFunctionError(
                placeholder.name, str(exc) or type(exc).__name__, position=placeholder.position
            ) from exc

        if not isinstance(result, str):
            raise PlaceholderFunctionError(
                placeholder.name,
                f"returned {type(result).__name__}, expected str",
                position=placeholder.position,
            )
        return result

    def __repr__(self) -> str:
        return (
            f"TemplateRenderer(template={self._template!r}, "
            f"segments={'unscanned' if self._segments is None else len(self._segments)}, "
            f"placeholder_functions={self._registry.names()!r})"
        )
