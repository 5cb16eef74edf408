"""
MCP Types Module
Types and dataclasses for the catalog and its protocol surface.
"""

from .catalog import (
    # Enums
    Namespace,
    MCPErrorCode,
    
    # Catalog types
    CatalogEntry,
    CatalogListing,
    
    # Constants
    REFERENCE_PREFIX,
    EMPTY_INPUT_SCHEMA,
)

__all__ = [
    # Enums
    "Namespace",
    "MCPErrorCode",
    
    # Catalog types
    "CatalogEntry",
    "CatalogListing",
    
    # Constants
    "REFERENCE_PREFIX",
    "EMPTY_INPUT_SCHEMA",
]
