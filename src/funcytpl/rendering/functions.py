from __future__ import annotations
"""Adapters turning plain callables into placeholder functions."""

from typing import Callable

from funcytpl.core.interfaces.placeholders import PlaceholderFunctionProtocol


class FunctionPlaceholder(PlaceholderFunctionProtocol):
    """Wrap ``fn(name, arg) -> str`` as a placeholder function."""

    def __init__(self, fn: Callable[[str, str], str]) -> None:
        self._fn = fn

    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        return self._fn(name, arg)

    def __repr__(self) -> str:
        return f"FunctionPlaceholder({self._fn!r})"


def as_placeholder_function(handler: object) -> PlaceholderFunctionProtocol:
    """Return *handler* as a placeholder function.

    Objects already exposing ``placeholder_fn_handler`` are returned unchanged
    so their state stays reachable by the caller; other callables are wrapped.
    """
    if isinstance(handler, PlaceholderFunctionProtocol):
        return handler
    if callable(handler):
        return FunctionPlaceholder(handler)
    raise TypeError(
        f"placeholder function must be callable or define placeholder_fn_handler, got {type(handler).__name__}"
    )
