"""
Catalog types
Entries, namespaces and error codes shared by the registry, resolver and server.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple

# External names of reference entries carry this prefix
REFERENCE_PREFIX = "reference-"

# Catalog entries take no arguments
EMPTY_INPUT_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}}


class Namespace(Enum):
    """Catalog partitions."""
    WORKFLOW = "workflow"   # Sequential workflow steps, delivered as directives
    REFERENCE = "reference" # Reference documents, delivered verbatim


class MCPErrorCode(Enum):
    """Error codes reported for failed requests."""
    UNKNOWN_CAPABILITY = "UNKNOWN_CAPABILITY"
    CONTENT_READ_FAILURE = "CONTENT_READ_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class CatalogEntry:
    """One file-backed content unit."""
    name: str
    path: str
    description: str
    namespace: Namespace = Namespace.WORKFLOW
    
    @property
    def external_name(self) -> str:
        """Name the entry is addressed by over the protocol."""
        if self.namespace is Namespace.REFERENCE:
            return f"{REFERENCE_PREFIX}{self.name}"
        return self.name


class CatalogListing(NamedTuple):
    """Externally addressable name paired with its description."""
    external_name: str
    description: str
