"""
Per-node bindings resolving a name against a scope stack.

A binding searches the stack innermost first for the first scope exposing its
name. The last successful resolution path is cached together with the
structural fingerprint of the stack it was found in (the type of each scope);
the cached path is only reused after the fingerprint guard matches and a
priority-ordered lookup on the cached scope matches through the cached
backend again. Any guard failure falls back to a full search.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, NamedTuple

from stachetree.core.context import TemplateContext
from stachetree.core.types import NAME_SEPARATOR, ScopeStack

if TYPE_CHECKING:
    from stachetree.resolution.handler import ReflectionObjectHandler
    from stachetree.resolution.lookups import Lookup

logger = logging.getLogger(__name__)


class Binding(ABC):
    """Abstract base class for bindings."""

    @abstractmethod
    def get(self, scopes: Sequence[Any]) -> Any:
        """
        Resolve the bound name against a scope stack.

        Params:
            scopes: Scope stack, outermost first

        Returns:
            The resolved value, or None when no scope exposes the name
        """
        pass


class CachedPath(NamedTuple):
    """Snapshot of the last successful resolution of the first name segment."""

    fingerprint: tuple[type, ...]
    index: int
    lookup: "Lookup"


class GuardedBinding(Binding):
    """
    Binding with a guarded single-entry resolution cache.

    The cache is an immutable `CachedPath` snapshot replaced wholesale under a
    lock and read without one; a reader either sees a complete old snapshot or
    a complete new one, and validates it before use.

    Params:
        handler: Handler performing the per-scope lookups
        name: Possibly dotted name to resolve (``person.address.city``)
        context: Compile-time context of the owning node
    """

    def __init__(
        self, handler: "ReflectionObjectHandler", name: str, context: TemplateContext
    ):
        self.handler = handler
        self.name = name
        self.context = context
        self.segments = tuple(name.split(NAME_SEPARATOR))
        self._cached: CachedPath | None = None
        self._lock = threading.Lock()

    @property
    def cached_path(self) -> CachedPath | None:
        """Current cache snapshot, None before the first cacheable resolution."""
        return self._cached

    def invalidate(self) -> None:
        """Drop the cached resolution path."""
        with self._lock:
            self._cached = None

    def get(self, scopes: Sequence[Any]) -> Any:
        try:
            return self._resolve(scopes)
        except Exception as e:
            logger.debug(
                "Resolving '%s' (%s) failed, treating as absent: %r",
                self.name,
                self.context,
                e,
            )
            return None

    def _resolve(self, scopes: Sequence[Any]) -> Any:
        found, value = self._find_first(scopes, self.segments[0])
        if not found:
            return None
        for segment in self.segments[1:]:
            found, value, _ = self.handler.find(value, segment)
            if not found:
                return None
        return value

    def _find_first(self, scopes: Sequence[Any], name: str) -> tuple[bool, Any]:
        if isinstance(scopes, ScopeStack):
            fingerprint = scopes.fingerprint()
        else:
            fingerprint = tuple(type(scope) for scope in scopes)

        cached = self._cached
        if cached is not None:
            if cached.fingerprint == fingerprint:
                # Earlier backends must still miss for the cached one to win
                found, value, lookup = self.handler.find(scopes[cached.index], name)
                if found and lookup is cached.lookup:
                    return True, value
            logger.debug("Guard failed for '%s' (%s), searching scopes", self.name, self.context)

        # Full search, innermost scope first
        cacheable = True
        for index in range(len(scopes) - 1, -1, -1):
            scope = scopes[index]
            found, value, lookup = self.handler.find(scope, name)
            if found:
                if cacheable:
                    with self._lock:
                        self._cached = CachedPath(fingerprint, index, lookup)
                return True, value
            if cacheable and not self.handler.is_structural_miss(scope, name):
                cacheable = False
        return False, None

    def __repr__(self) -> str:
        return f"<GuardedBinding {self.name!r} at {self.context}>"
