"""
Node kinds and their tag markers.

The marker is the character sequence that follows the open delimiter in a
node's tag, e.g. ``#`` in ``{{#items}}``. Reconstruction writes it back
verbatim.
"""

from enum import Enum


class NodeKind(Enum):
    """Tag kinds a compiler may produce."""

    VARIABLE = ""
    UNESCAPED = "&"
    SECTION = "#"
    INVERTED = "^"
    PARTIAL = ">"
    COMMENT = "!"
    ROOT = None

    @property
    def marker(self) -> str:
        """Open-tag marker; empty for variables and the root."""
        return self.value or ""


# Marker that opens the closing form of a tag with children
CLOSE_MARKER = "/"


def marker_of(kind: "NodeKind | str | None") -> str:
    """
    Return the open-tag marker for a kind.

    Params:
        kind: A NodeKind, a raw marker string, or None

    Returns:
        The marker string to write after the open delimiter
    """
    if kind is None:
        return ""
    if isinstance(kind, NodeKind):
        return kind.marker
    return kind
