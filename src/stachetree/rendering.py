"""
Rendering entry points.

`render` and `reconstruct` take an explicit `RenderConfig` per call; debug
tracing is enabled by wrapping the sink rather than by flipping any shared
flag, so renders with different settings can run side by side.
"""

import io
import logging
import time
from typing import Any

from stachetree.core.config import RenderConfig
from stachetree.nodes.base import Node
from stachetree.sinks import Sink, TracingSink

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = RenderConfig()


def _prepare_sink(sink: Sink, config: RenderConfig) -> Sink:
    if config.debug:
        return TracingSink(sink, logging.getLogger(config.logger_name))
    return sink


def render(
    root: Node,
    scope: Any,
    *,
    config: RenderConfig | None = None,
    sink: Sink | None = None,
) -> str:
    """
    Execute a compiled tree against a scope and return the produced text.

    Params:
        root: Root node of the compiled tree
        scope: A `ScopeStack`, or a single value used as the only scope
        config: Render settings; defaults to `RenderConfig()`
        sink: Extra destination receiving the output as it is produced

    Returns:
        The complete rendered text

    Raises:
        RenderError: If a sink rejects a write
    """
    config = config or _DEFAULT_CONFIG
    if config.initialize:
        root.init()

    buffer = io.StringIO()
    target: Sink = buffer if sink is None else _TeeSink(buffer, sink)
    started = time.perf_counter()
    root.execute(_prepare_sink(target, config), scope)
    if config.debug:
        logging.getLogger(config.logger_name).debug(
            "Rendered %r in %.3f ms", root, (time.perf_counter() - started) * 1000
        )
    return buffer.getvalue()


def reconstruct(root: Node, *, config: RenderConfig | None = None) -> str:
    """
    Regenerate the template source a tree was compiled from.

    Params:
        root: Root node of the compiled tree
        config: Render settings; only `debug` and `logger_name` apply

    Returns:
        The reconstructed template text

    Raises:
        RenderError: If writing the markup fails
    """
    config = config or _DEFAULT_CONFIG
    buffer = io.StringIO()
    root.identity(_prepare_sink(buffer, config))
    return buffer.getvalue()


class _TeeSink:
    """Writes every fragment to the internal buffer and a caller's sink."""

    def __init__(self, buffer: io.StringIO, sink: Sink):
        self.buffer = buffer
        self.sink = sink

    def write(self, text: str) -> object:
        self.buffer.write(text)
        return self.sink.write(text)
