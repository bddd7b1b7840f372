"""
stachetree - execution core for mustache-style compiled templates

stachetree provides the node tree a template compiler produces: nodes that
execute against a stack of data scopes, reconstruct the markup they were
compiled from, and compose recursively with their children.
"""

from importlib.metadata import version

from stachetree.core import RenderConfig, ScopeStack, TemplateContext
from stachetree.exceptions import RenderError, StacheTreeError
from stachetree.nodes import Node, NodeKind, NodeTree
from stachetree.rendering import reconstruct, render
from stachetree.resolution import ReflectionObjectHandler

__version__ = version("stachetree")

__all__ = [
    "__version__",
    "Node",
    "NodeKind",
    "NodeTree",
    "ScopeStack",
    "TemplateContext",
    "RenderConfig",
    "ReflectionObjectHandler",
    "render",
    "reconstruct",
    "StacheTreeError",
    "RenderError",
]
