"""
Default node behaviour shared by every node kind.

A `Node` is one compiled unit of template structure. By default executing a
node runs its children in document order against the same scope stack and
then writes its trailing text; reconstructing it writes back the tag it was
compiled from, its children's markup, and the trailing text. Specialized kinds
(variables, sections, partials) build on the protected hooks `run_children`,
`run_identity` and `write_appended`, and hand an extended stack to their
children through `add_scope`.
"""

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Any

from stachetree.core.context import DEFAULT_CONTEXT, TemplateContext
from stachetree.core.types import SELF_REFERENCE, ScopeStack
from stachetree.exceptions import DuplicationError, TreeSealedError
from stachetree.nodes.kinds import CLOSE_MARKER, NodeKind, marker_of
from stachetree.nodes.tree import NodeTree
from stachetree.resolution.binding import Binding
from stachetree.resolution.handler import ObjectHandler
from stachetree.sinks import Sink, write_to

logger = logging.getLogger(__name__)


class Node:
    """
    Simplest possible node with the default shared behaviour.

    Params:
        name: Name inside the node's tag; None or empty for anonymous/root nodes
        kind: Tag kind, or a raw open-tag marker string
        context: Delimiters and location in effect when the node was compiled
        handler: Object handler providing the binding; None means no binding
        tree: Child tree; mutually exclusive with `children`
        children: Children in document order, wrapped into a new `NodeTree`
    """

    # Node kinds that cannot be copied per use site set this to False
    duplicable = True

    def __init__(
        self,
        name: str | None = None,
        kind: NodeKind | str | None = None,
        *,
        context: TemplateContext = DEFAULT_CONTEXT,
        handler: ObjectHandler | None = None,
        tree: NodeTree | None = None,
        children: Iterable["Node"] | None = None,
    ):
        if tree is not None and children is not None:
            raise ValueError("Pass either 'tree' or 'children', not both")
        if children is not None:
            tree = NodeTree(name, children)

        self.name = name
        self.kind = kind
        self.context = context
        self.handler = handler
        self.tree = tree
        self.binding: Binding | None = (
            handler.create_binding(name, context, self) if handler is not None else None
        )
        self.returns_self = name == SELF_REFERENCE

        # Final once init() is complete
        self._appended: str | None = None
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def appended(self) -> str | None:
        """Trailing text written after this node's content, None if never appended."""
        return self._appended

    @property
    def marker(self) -> str:
        """Open-tag marker of this node's kind."""
        return marker_of(self.kind)

    @property
    def children(self) -> tuple["Node", ...] | None:
        """Children in document order, None for a leaf node."""
        return self.tree.children if self.tree is not None else None

    @property
    def initialized(self) -> bool:
        return self._initialized

    def set_children(self, children: Iterable["Node"] | None) -> None:
        """
        Replace this node's children before initialization.

        Params:
            children: New children in document order, or None

        Raises:
            TreeSealedError: If the tree was sealed by a completed `init()`
        """
        if self.tree is None:
            if self._initialized:
                raise TreeSealedError(self.name)
            self.tree = NodeTree(self.name, children)
            return
        self.tree.set_children(children)

    def init(self) -> None:
        """
        Initialize this node and its subtree, depth first, exactly once.

        Repeated or concurrent calls are safe: the first caller does the work
        while later callers wait on the node's lock and then return. The child
        tree is sealed once every child is initialized.
        """
        with self._init_lock:
            if self._initialized:
                return
            children = self.children
            if children:
                for child in children:
                    child.init()
            if self.tree is not None:
                self.tree.seal()
            self._initialized = True
        logger.debug("Initialized %r", self)

    def get(self, scopes: Sequence[Any]) -> Any:
        """
        Retrieve the value of this node's name from a scope stack.

        A self-reference node returns the innermost scope without consulting
        any binding. Otherwise the binding searches the scopes innermost first,
        reusing its cached resolution path while the stack's shape matches.

        Params:
            scopes: Non-empty scope stack, outermost first

        Returns:
            The resolved value, or None when no scope exposes the name or the
            binding fails
        """
        if self.returns_self:
            return scopes[-1]
        if self.binding is None:
            return None
        try:
            return self.binding.get(scopes)
        except Exception as e:
            logger.debug("Binding for %r failed, treating as absent: %r", self, e)
            return None

    def execute(self, sink: Sink, scopes: Any) -> Sink:
        """
        Run the children, then write the trailing text.

        Params:
            sink: Destination for the output
            scopes: A `ScopeStack`, or any other value which becomes the only
                scope of a new stack

        Returns:
            The same sink

        Raises:
            RenderError: If the sink rejects a write
        """
        if not isinstance(scopes, ScopeStack):
            scopes = ScopeStack.of(scopes)
        return self.write_appended(self.run_children(sink, scopes))

    def identity(self, sink: Sink) -> None:
        """
        Write back the template markup this node was compiled from.

        Params:
            sink: Destination for the markup

        Raises:
            RenderError: If the sink rejects a write
        """
        if self.name:
            self._tag(sink, self.marker)
            if self.children is not None:
                self.run_identity(sink)
                self._tag(sink, CLOSE_MARKER)
        else:
            self.run_identity(sink)
        self.write_appended(sink)

    def append(self, text: str) -> None:
        """Add literal text after this node; repeated calls concatenate."""
        if self._appended is None:
            self._appended = text
        else:
            self._appended = self._appended + text

    def add_scope(self, scopes: Sequence[Any], scope: Any) -> Sequence[Any]:
        """
        Expand the scope stack for this node's children.

        Params:
            scopes: Current scope stack, left untouched
            scope: New innermost scope; None leaves the stack as it is

        Returns:
            `scopes` itself when `scope` is None, otherwise a new, longer stack
        """
        if scope is None:
            return scopes
        if not isinstance(scopes, ScopeStack):
            scopes = ScopeStack(scopes)
        return scopes.push(scope)

    def duplicate(self) -> "Node":
        """
        Make a shallow copy sharing this node's child tree and binding.

        Returns:
            A new node of the same class

        Raises:
            DuplicationError: If this node kind is not duplicable
        """
        if not self.duplicable:
            raise DuplicationError(type(self).__name__)
        clone = type(self).__new__(type(self))
        clone.copy_from(self)
        return clone

    def copy_from(self, source: "Node") -> None:
        """
        Copy the fields of `source` into this freshly allocated node.

        Subclasses with extra state extend this and call ``super().copy_from``.
        """
        self.name = source.name
        self.kind = source.kind
        self.context = source.context
        self.handler = source.handler
        self.tree = source.tree
        self.binding = source.binding
        self.returns_self = source.returns_self
        self._appended = source._appended
        self._initialized = source._initialized
        self._init_lock = threading.Lock()

    def run_children(self, sink: Sink, scopes: Sequence[Any]) -> Sink:
        children = self.children
        if children:
            for child in children:
                sink = child.execute(sink, scopes)
        return sink

    def run_identity(self, sink: Sink) -> None:
        children = self.children
        if children:
            for child in children:
                child.identity(sink)

    def write_appended(self, sink: Sink) -> Sink:
        if self._appended is not None:
            write_to(sink, self._appended, self.name)
        return sink

    def _tag(self, sink: Sink, marker: str) -> None:
        write_to(sink, self.context.tag(marker, self.name), self.name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.marker}{self.name or ''} at {self.context}>"
