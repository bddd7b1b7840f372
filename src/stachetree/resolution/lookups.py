"""
Pluggable lookup backends for name resolution.

Each backend knows how to find a single name segment inside one scope value.
The object handler tries its backends in order for every scope; the first
backend that finds the name wins.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

# Result of a lookup that did not find the name
MISS: tuple[bool, Any] = (False, None)


def is_private(name: str) -> bool:
    """Check whether a name must never be exposed to templates."""
    return name.startswith("_")


class Lookup(ABC):
    """Abstract base class for lookup backends."""

    @abstractmethod
    def get_name(self) -> str:
        """Get the backend name for display purposes."""
        pass

    @abstractmethod
    def find(self, scope: Any, name: str) -> tuple[bool, Any]:
        """
        Look up `name` inside `scope`.

        Params:
            scope: A single scope value
            name: A single (undotted) name segment

        Returns:
            ``(True, value)`` when found, `MISS` otherwise
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.get_name()}>"


class MappingLookup(Lookup):
    """Finds keys of mapping scopes such as dicts."""

    def get_name(self) -> str:
        return "mapping"

    def find(self, scope: Any, name: str) -> tuple[bool, Any]:
        if isinstance(scope, Mapping) and name in scope:
            return True, scope[name]
        return MISS


class AttributeLookup(Lookup):
    """Finds plain (non-callable) public attributes and properties of objects."""

    def get_name(self) -> str:
        return "attribute"

    def find(self, scope: Any, name: str) -> tuple[bool, Any]:
        if isinstance(scope, Mapping) or is_private(name):
            return MISS
        try:
            value = getattr(scope, name)
        except AttributeError:
            return MISS
        if callable(value) and not isinstance(value, type):
            return MISS
        return True, value


class MethodLookup(Lookup):
    """
    Calls zero-argument accessor methods.

    Tries ``name()``, then the getter forms ``get_name()`` and ``is_name()``.
    A method that needs arguments is not an accessor and counts as a miss.
    """

    ACCESSOR_PREFIXES = ("", "get_", "is_")

    def get_name(self) -> str:
        return "method"

    def find(self, scope: Any, name: str) -> tuple[bool, Any]:
        if isinstance(scope, Mapping) or is_private(name):
            return MISS
        for prefix in self.ACCESSOR_PREFIXES:
            method = getattr(scope, prefix + name, None)
            if method is None or not callable(method) or isinstance(method, type):
                continue
            if _requires_arguments(method):
                continue
            return True, method()
        return MISS


def _requires_arguments(method: Any) -> bool:
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        return False
    return any(
        param.default is param.empty
        and param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD, param.KEYWORD_ONLY)
        for param in signature.parameters.values()
    )


DEFAULT_LOOKUPS: tuple[Lookup, ...] = (MappingLookup(), AttributeLookup(), MethodLookup())
