from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from funcytpl.core.interfaces.placeholders import PlaceholderFunctionProtocol


@runtime_checkable
class TemplateRendererProtocol(Protocol):
    """Renders one template by dispatching markers to named functions."""

    def set_template(self, template: str) -> None:
        """Replace the template text."""
        ...

    def set_placeholder_fn(self, name: str, handler: object) -> Optional[PlaceholderFunctionProtocol]:
        """Register `handler` for `name`, returning the one it replaces."""
        ...

    def append_placeholders(self, mapping: Mapping[str, object]) -> None:
        ...

    def set_placeholders(self, mapping: Mapping[str, object]) -> None:
        ...

    def render(self) -> str:
        """Render the template or raise the first RenderError met."""
        ...
