"""
Object handlers: the factory side of name resolution.

An object handler creates a binding for every named node at construction time
and performs the per-scope lookups those bindings delegate to. The default
`ReflectionObjectHandler` resolves mapping keys, attributes and zero-argument
accessor methods through its lookup backends.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from stachetree.core.context import TemplateContext
from stachetree.core.types import SELF_REFERENCE
from stachetree.resolution.binding import Binding, GuardedBinding
from stachetree.resolution.lookups import DEFAULT_LOOKUPS, Lookup

if TYPE_CHECKING:
    from stachetree.nodes.base import Node


class ObjectHandler(ABC):
    """Abstract base class for object handlers."""

    @abstractmethod
    def create_binding(
        self, name: str | None, context: TemplateContext, node: "Node"
    ) -> Binding | None:
        """
        Create the binding a node uses to resolve its name.

        Params:
            name: Name inside the node's tag
            context: Compile-time context of the node
            node: The node requesting the binding

        Returns:
            A binding, or None when the node has nothing to resolve
        """
        pass


class ReflectionObjectHandler(ObjectHandler):
    """
    Default handler resolving names against plain Python values.

    Params:
        lookups: Backends tried in order for every scope; defaults to mapping
            key, then attribute, then accessor method
    """

    def __init__(self, lookups: Sequence[Lookup] | None = None):
        self.lookups: tuple[Lookup, ...] = tuple(lookups) if lookups else DEFAULT_LOOKUPS

    def create_binding(
        self, name: str | None, context: TemplateContext, node: "Node"
    ) -> Binding | None:
        if not name or name == SELF_REFERENCE:
            return None
        return GuardedBinding(self, name, context)

    def find(self, scope: Any, name: str) -> tuple[bool, Any, Lookup | None]:
        """
        Look up a single name segment in one scope value.

        Params:
            scope: A single scope value
            name: An undotted name segment

        Returns:
            ``(found, value, lookup)`` where `lookup` is the backend that matched
        """
        if scope is None:
            return False, None, None
        for lookup in self.lookups:
            found, value = lookup.find(scope, name)
            if found:
                return True, value, lookup
        return False, None, None

    def is_structural_miss(self, scope: Any, name: str) -> bool:
        """
        Check whether a miss on `scope` holds for every value of its type.

        Only such misses may be skipped by a cached resolution path: mapping
        keys and instance attributes differ between values of the same type.

        Params:
            scope: The scope value that did not expose the name
            name: The name segment that was looked up

        Returns:
            True if any other value of the same type would also miss
        """
        if scope is None:
            return True
        if isinstance(scope, Mapping) or hasattr(scope, "__dict__"):
            return False
        scope_type = type(scope)
        if hasattr(scope_type, "__getattr__"):
            return False
        return not any(
            hasattr(scope_type, prefix + name) for prefix in ("", "get_", "is_")
        )
