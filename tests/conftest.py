"""
Shared test fixtures and node specializations for the stachetree test suite.
"""

import io
from types import SimpleNamespace

import pytest

from stachetree.core.context import TemplateContext
from stachetree.nodes.base import Node
from stachetree.nodes.kinds import NodeKind
from stachetree.resolution.handler import ReflectionObjectHandler
from stachetree.sinks import write_to


class VariableNode(Node):
    """Writes the string form of its value, nothing when absent."""

    def __init__(self, name, **kwargs):
        super().__init__(name, NodeKind.VARIABLE, **kwargs)

    def execute(self, sink, scopes):
        value = self.get(scopes)
        if value is not None:
            write_to(sink, str(value), self.name)
        return self.write_appended(sink)


class SectionNode(Node):
    """Runs its children once per list item, once for any other value except None and False."""

    def __init__(self, name, **kwargs):
        super().__init__(name, NodeKind.SECTION, **kwargs)

    def execute(self, sink, scopes):
        value = self.get(scopes)
        items = value if isinstance(value, list) else [value]
        for item in items:
            if item is None or item is False:
                continue
            sink = self.run_children(sink, self.add_scope(scopes, item))
        return self.write_appended(sink)


def make_text(text):
    """Anonymous node carrying only literal text."""
    node = Node()
    node.append(text)
    return node


@pytest.fixture
def nodes():
    """Node specializations and the literal-text factory used across tests."""
    return SimpleNamespace(Variable=VariableNode, Section=SectionNode, text=make_text)


@pytest.fixture
def handler():
    """Default reflection object handler."""
    return ReflectionObjectHandler()


@pytest.fixture
def context():
    """Template context with the default ``{{ }}`` delimiters."""
    return TemplateContext(file="test.mustache", line=1)


@pytest.fixture
def sink():
    """Fresh string buffer sink."""
    return io.StringIO()


class FailingSink:
    """Sink rejecting every write."""

    def __init__(self, error=None):
        self.error = error or OSError("disk full")

    def write(self, text):
        raise self.error


@pytest.fixture
def failing_sink():
    return FailingSink()
