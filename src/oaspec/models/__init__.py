"""Typed object models of every supported OpenAPI version

Each version package (``v2_0``, ``v3_0``, ``v3_1``, ``v3_2``) is an independent
snapshot of its specification; only the building blocks in ``base`` and
``classification`` are shared.
"""

from types import ModuleType

from . import v2_0, v3_0, v3_1, v3_2
from .base import OpenAPIObject, PatternedObject
from .classification import SchemaKind

# Version packages keyed by their major.minor version
VERSION_MODULES: dict[str, ModuleType] = {
    module.VERSION: module for module in (v2_0, v3_0, v3_1, v3_2)
}

__all__ = [
    "OpenAPIObject",
    "PatternedObject",
    "SchemaKind",
    "VERSION_MODULES",
    "v2_0",
    "v3_0",
    "v3_1",
    "v3_2",
]
