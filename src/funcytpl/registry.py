from __future__ import annotations
"""
PlaceholderRegistry

Name → placeholder function mapping owned by a TemplateRenderer.

Lookup is by exact, case-sensitive name. Registering a name that is already
present replaces the previous function and returns it. A name can also be
registered lazily with a builder callback that runs on first lookup; the
built function is then cached like an eager registration.
"""
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from funcytpl.constants import CLOSE_TOKEN
from funcytpl.core.interfaces.placeholders import PlaceholderFunctionProtocol
from funcytpl.rendering.functions import as_placeholder_function


def validate_placeholder_name(name: str) -> str:
    """Return *name* if a marker could reference it, else raise ValueError."""
    if not isinstance(name, str) or not name:
        raise ValueError('placeholder name must be a non-empty string')
    if CLOSE_TOKEN in name or any(ch.isspace() for ch in name):
        raise ValueError(f'placeholder name {name!r} must not contain whitespace or {CLOSE_TOKEN!r}')
    return name


class PlaceholderRegistry:
    def __init__(self, functions: Optional[Mapping[str, object]] = None) -> None:
        self._by_name: Dict[str, PlaceholderFunctionProtocol] = {}
        self._lazy_builders: Dict[str, Callable[[], object]] = {}
        if functions:
            self.update(functions)

    def register(self, name: str, handler: object) -> Optional[PlaceholderFunctionProtocol]:
        key = validate_placeholder_name(name)
        fn = as_placeholder_function(handler)
        prev = self._by_name.get(key)
        self._by_name[key] = fn
        self._lazy_builders.pop(key, None)
        return prev

    def register_lazy(self, name: str, *, builder: Callable[[], object]) -> None:
        key = validate_placeholder_name(name)
        if not callable(builder):
            raise TypeError('builder must be callable')
        self._by_name.pop(key, None)
        self._lazy_builders[key] = builder

    def get(self, name: str) -> Optional[PlaceholderFunctionProtocol]:
        fn = self._by_name.get(name)
        if fn is not None:
            return fn
        builder = self._lazy_builders.get(name)
        if builder is None:
            return None
        fn = as_placeholder_function(builder())
        self.register(name, fn)
        return fn

    def unregister(self, name: str) -> Optional[PlaceholderFunctionProtocol]:
        self._lazy_builders.pop(name, None)
        return self._by_name.pop(name, None)

    def update(self, functions: Mapping[str, object]) -> None:
        """Register every entry of *functions* on top of the current ones."""
        for name, handler in functions.items():
            self.register(name, handler)

    def replace(self, functions: Mapping[str, object]) -> None:
        """Drop every registration, then register *functions*.

        The mapping is validated before anything is dropped.
        """
        staged = PlaceholderRegistry(functions)
        self._by_name = staged._by_name
        self._lazy_builders = staged._lazy_builders

    def names(self) -> List[str]:
        return sorted({*self._by_name, *self._lazy_builders})

    def __contains__(self, name: object) -> bool:
        return name in self._by_name or name in self._lazy_builders

    def __len__(self) -> int:
        return len(self.names())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
