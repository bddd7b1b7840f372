"""
Compiled template nodes.

This package provides the default node behaviour, the child-tree provider,
and the tag kinds used when reconstructing markup.
"""

from stachetree.nodes.base import Node
from stachetree.nodes.kinds import CLOSE_MARKER, NodeKind, marker_of
from stachetree.nodes.tree import NodeTree

__all__ = [
    "Node",
    "NodeTree",
    "NodeKind",
    "CLOSE_MARKER",
    "marker_of",
]
