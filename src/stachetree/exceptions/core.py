"""
Exception classes for stachetree node execution.

This module defines specific exception types for the failure conditions that
can occur while executing, reconstructing, duplicating, or initializing a
compiled node tree. Resolution absence is deliberately not represented here:
a missing name is a `None` value, not an error.
"""


class StacheTreeError(Exception):
    """Base exception for all stachetree errors."""

    pass


class RenderError(StacheTreeError):
    """Raised when rendering fails, most commonly because the sink rejected a write."""

    def __init__(self, message: str, node_name: str | None = None):
        """
        Initialize the exception.

        Params:
            message: Description of the rendering failure
            node_name: Name of the node being rendered when the failure occurred
        """
        self.node_name = node_name
        if node_name:
            message = f"{message} (in node '{node_name}')"
        super().__init__(message)


class DuplicationError(StacheTreeError):
    """Raised when a node kind cannot be duplicated."""

    def __init__(self, node_type: str):
        """
        Initialize the exception.

        Params:
            node_type: Class name of the node that refused duplication
        """
        self.node_type = node_type
        super().__init__(f"Duplication not supported for node type '{node_type}'")


class TreeSealedError(StacheTreeError):
    """Raised when children are replaced after the tree was initialized."""

    def __init__(self, tree_name: str | None):
        """
        Initialize the exception.

        Params:
            tree_name: Name of the sealed tree
        """
        self.tree_name = tree_name
        super().__init__(
            f"Cannot replace children of tree '{tree_name or '<root>'}': tree is sealed after init"
        )


class TemplateContextError(StacheTreeError, ValueError):
    """Raised when a template context carries unusable delimiters."""

    def __init__(self, delimiter: str, reason: str):
        """
        Initialize the exception.

        Params:
            delimiter: The offending delimiter value
            reason: Why the delimiter is invalid
        """
        self.delimiter = delimiter
        self.reason = reason
        super().__init__(f"Invalid delimiter '{delimiter}': {reason}")
