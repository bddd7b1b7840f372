"""
Core type definitions for stachetree.

This module contains the scope stack type threaded through node execution and
the reserved names and aliases shared by the node and resolution modules.
"""

from typing import Any

# Name denoting the innermost scope value itself
SELF_REFERENCE = "."

# Separator for dotted names such as ``person.address.city``
NAME_SEPARATOR = "."


class ScopeStack(tuple):
    """
    Immutable stack of scope values, outermost first and innermost last.

    Being a tuple, a stack can never be modified in place: extending it with
    `push` always yields a new stack and leaves the original untouched. A
    plain list or tuple handed to `Node.execute` is a single scope value, not
    a stack; only `ScopeStack` instances are treated as stacks.
    """

    __slots__ = ()

    @classmethod
    def of(cls, *scopes: Any) -> "ScopeStack":
        """
        Build a stack from scope values given outermost first.

        Params:
            *scopes: Scope values, outermost first

        Returns:
            New ScopeStack holding the given scopes
        """
        return cls(scopes)

    @property
    def innermost(self) -> Any:
        """Return the innermost (last) scope value."""
        return self[-1]

    def push(self, scope: Any) -> "ScopeStack":
        """
        Return a new stack with `scope` as the innermost value.

        Params:
            scope: Value to add as the new innermost scope

        Returns:
            New ScopeStack one element longer than this one
        """
        return ScopeStack((*self, scope))

    def fingerprint(self) -> tuple[type, ...]:
        """Return the structural shape of the stack: the type of each scope."""
        return tuple(type(scope) for scope in self)

    def __repr__(self) -> str:
        return f"ScopeStack({list(self)!r})"
