"""
Tools Module

Protocol-facing dispatch over the content catalog:
- dispatcher: capability listing and invocation, prompt listing and retrieval
- envelope: directive wrapping for workflow steps
"""

from .dispatcher import CapabilityDispatcher
from .envelope import wrap_payload, DIRECTIVE_HEADER

__all__ = [
    "CapabilityDispatcher",
    "wrap_payload",
    "DIRECTIVE_HEADER",
]
