"""
stachetree exception classes.

This package provides all exception types used throughout stachetree for
consistent error handling and reporting.
"""

from stachetree.exceptions.core import (
    DuplicationError,
    RenderError,
    StacheTreeError,
    TemplateContextError,
    TreeSealedError,
)

__all__ = [
    "StacheTreeError",
    "RenderError",
    "DuplicationError",
    "TreeSealedError",
    "TemplateContextError",
]
