"""
Catalog Module

Name registry and content resolution:
- registry: static workflow/reference entries and name lookup
- resolver: reads backing files from ordered candidate roots
- errors: request-scoped failures
"""

from .errors import CatalogError, UnknownCapability, ContentReadFailure
from .registry import Registry, build_default_registry, default_registry
from .resolver import ContentResolver, candidate_roots, PACKAGE_ROOT

__all__ = [
    "CatalogError",
    "UnknownCapability",
    "ContentReadFailure",
    "Registry",
    "build_default_registry",
    "default_registry",
    "ContentResolver",
    "candidate_roots",
    "PACKAGE_ROOT",
]
