from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class PlaceholderFunctionProtocol(Protocol):
    """Object invoked for every marker that references it.

    ``name`` is the placeholder name used in the marker, so one object can
    serve several registrations. ``arg`` may be empty. Raising any exception
    aborts the render with a PlaceholderFunctionError.
    """

    def placeholder_fn_handler(self, name: str, arg: str) -> str:
        ...
