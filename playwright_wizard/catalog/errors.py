"""
Catalog errors

Both failures are scoped to a single request; neither touches registry state.
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple

from playwright_wizard.mcp_types import MCPErrorCode


class CatalogError(Exception):
    """Base class for catalog request failures."""
    
    code: MCPErrorCode = MCPErrorCode.INTERNAL_ERROR


class UnknownCapability(CatalogError, LookupError):
    """The requested name matched neither namespace."""
    
    code = MCPErrorCode.UNKNOWN_CAPABILITY
    
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown capability: `{name}`")


class ContentReadFailure(CatalogError):
    """No candidate root produced a readable backing file."""
    
    code = MCPErrorCode.CONTENT_READ_FAILURE
    
    def __init__(self, path: str, attempts: Sequence[Tuple[Path, BaseException]] = ()):
        self.path = path
        self.attempts = list(attempts)
        # The last failure is the one chained onto the exception
        self.cause: Optional[BaseException] = self.attempts[-1][1] if self.attempts else None
        
        message = f"Failed to read content file '{path}'"
        if self.attempts:
            tried = "; ".join(f"{candidate}: {error}" for candidate, error in self.attempts)
            message = f"{message} (tried {tried})"
        else:
            message = f"{message} (no candidate roots)"
        super().__init__(message)
