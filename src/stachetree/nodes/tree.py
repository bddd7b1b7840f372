"""
Child-tree provider for nodes.

A `NodeTree` is the compiled unit that owns an ordered sequence of child
nodes. Children may be replaced while the tree is being initialized (partial
inclusion swaps in the included template's nodes); once the owning node's
initialization completes the tree is sealed and becomes read-only, which is
what makes concurrent execution safe.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from stachetree.exceptions import TreeSealedError

if TYPE_CHECKING:
    from stachetree.nodes.base import Node


class NodeTree:
    """Ordered, sealable sequence of child nodes.

    Params:
        name: Name of the compiled unit, used in error messages
        children: Initial children in document order, or None for a leaf
    """

    def __init__(self, name: str | None = None, children: Iterable["Node"] | None = None):
        self.name = name
        self._children: tuple["Node", ...] | None = (
            tuple(children) if children is not None else None
        )
        self._sealed = False

    @property
    def children(self) -> tuple["Node", ...] | None:
        """Children in document order, None when the tree has none."""
        return self._children

    @property
    def sealed(self) -> bool:
        """Whether the tree has been sealed by initialization."""
        return self._sealed

    def set_children(self, children: Iterable["Node"] | None) -> None:
        """
        Replace the children of this tree.

        Params:
            children: New children in document order, or None

        Raises:
            TreeSealedError: If the tree was already sealed
        """
        if self._sealed:
            raise TreeSealedError(self.name)
        self._children = tuple(children) if children is not None else None

    def seal(self) -> None:
        """Make the children permanent. Sealing twice is harmless."""
        self._sealed = True

    def __len__(self) -> int:
        return len(self._children) if self._children else 0

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<NodeTree {self.name!r} children={len(self)} {state}>"
