"""
Capability Dispatcher

Turns catalog names into MCP responses. Stateless: every call does its own
lookup and its own file read.
"""

import copy
from typing import List, Optional

from mcp import types

from playwright_wizard.catalog import ContentResolver, Registry, default_registry
from playwright_wizard.mcp_types import EMPTY_INPUT_SCHEMA, CatalogEntry
from playwright_wizard.tools.envelope import wrap_payload
from playwright_wizard.utils import Logger


class CapabilityDispatcher:
    """Resolves catalog names to text payloads."""

    def __init__(
        self,
        logger: Logger,
        registry: Optional[Registry] = None,
        resolver: Optional[ContentResolver] = None,
    ):
        self.logger = logger
        self.registry = registry if registry is not None else default_registry()
        self.resolver = resolver if resolver is not None else ContentResolver(logger)

    def list_capabilities(self) -> List[types.Tool]:
        """One no-argument tool per catalog entry, in catalog order."""
        return [
            types.Tool(
                name=listing.external_name,
                description=listing.description,
                inputSchema=copy.deepcopy(EMPTY_INPUT_SCHEMA),
            )
            for listing in self.registry.list_all()
        ]

    async def read_entry(self, name: str) -> tuple[CatalogEntry, str]:
        """
        Look up `name` and read its backing file.

        Raises:
            UnknownCapability: if the name is not in the catalog
            ContentReadFailure: if the file could not be read from any root
        """
        entry = self.registry.lookup(name)
        content = await self.resolver.read_text(entry.path)
        return entry, content

    async def invoke(self, name: str) -> str:
        """Payload for a tool call; workflow steps come back inside the directive envelope."""
        entry, content = await self.read_entry(name)
        self.logger.debug(
            f"Resolved {name} ({entry.namespace.value}, {len(content)} chars)"
        )
        return wrap_payload(entry.namespace, content)

    def list_prompts(self) -> List[types.Prompt]:
        return [
            types.Prompt(
                name=listing.external_name,
                description=listing.description,
                arguments=[],
            )
            for listing in self.registry.list_all()
        ]

    async def get_prompt(self, name: str) -> types.GetPromptResult:
        """Prompt form of an entry: the raw file as a single user message."""
        entry, content = await self.read_entry(name)
        return types.GetPromptResult(
            description=entry.description,
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=content),
                )
            ],
        )
