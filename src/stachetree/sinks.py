"""
Output sinks.

A sink is any object with a ``write(str)`` method: ``io.StringIO``, an open
text file, or a custom writer. Nodes borrow the sink for one call and never
keep it. Write failures are surfaced as a single `RenderError`.
"""

import logging
from typing import Protocol, runtime_checkable

from stachetree.exceptions import RenderError


@runtime_checkable
class Sink(Protocol):
    """Writable text destination."""

    def write(self, text: str) -> object: ...


def write_to(sink: Sink, text: str, node_name: str | None = None) -> Sink:
    """
    Write text to a sink, converting write failures into `RenderError`.

    Params:
        sink: Destination to write to
        text: Text to write
        node_name: Name of the writing node, for the error message

    Returns:
        The same sink

    Raises:
        RenderError: If the sink rejects the write, including a binary sink
            refusing text
    """
    try:
        sink.write(text)
    except (OSError, TypeError, ValueError) as e:
        raise RenderError(f"Failed to write to sink: {e}", node_name) from e
    return sink


class TracingSink:
    """
    Sink wrapper that logs every fragment before passing it on.

    Params:
        target: Sink receiving the output
        logger: Logger the fragments are traced on
    """

    def __init__(self, target: Sink, logger: logging.Logger):
        self.target = target
        self.logger = logger
        self.writes = 0

    def write(self, text: str) -> object:
        self.writes += 1
        self.logger.debug("write #%d: %r", self.writes, text)
        return self.target.write(text)
