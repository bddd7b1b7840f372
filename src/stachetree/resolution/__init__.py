"""
Name resolution for stachetree nodes.

This package provides the binding contract nodes resolve their names through,
the object handler that creates bindings, and the lookup backends the default
handler uses.
"""

from stachetree.resolution.binding import Binding, CachedPath, GuardedBinding
from stachetree.resolution.handler import ObjectHandler, ReflectionObjectHandler
from stachetree.resolution.lookups import (
    DEFAULT_LOOKUPS,
    AttributeLookup,
    Lookup,
    MappingLookup,
    MethodLookup,
)

__all__ = [
    "Binding",
    "CachedPath",
    "GuardedBinding",
    "ObjectHandler",
    "ReflectionObjectHandler",
    "Lookup",
    "MappingLookup",
    "AttributeLookup",
    "MethodLookup",
    "DEFAULT_LOOKUPS",
]
