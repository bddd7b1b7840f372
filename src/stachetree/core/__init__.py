"""
Core stachetree components.

This package provides the fundamental value types shared by nodes and
resolution: the scope stack, the compile-time template context, and the
explicit render configuration.
"""

from stachetree.core.config import RenderConfig
from stachetree.core.context import DEFAULT_CONTEXT, TemplateContext
from stachetree.core.types import NAME_SEPARATOR, SELF_REFERENCE, ScopeStack

__all__ = [
    "ScopeStack",
    "SELF_REFERENCE",
    "NAME_SEPARATOR",
    "TemplateContext",
    "DEFAULT_CONTEXT",
    "RenderConfig",
]
