#!/usr/bin/env python3
"""
Playwright Wizard MCP Server
Wires the capability dispatcher into the MCP low-level server.
"""

import asyncio
from pathlib import Path
from typing import Optional, Sequence

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from playwright_wizard import __package_name__, __version__
from playwright_wizard.catalog import (
    CatalogError,
    ContentResolver,
    Registry,
    candidate_roots,
    default_registry,
)
from playwright_wizard.config import ConfigManager
from playwright_wizard.tools import CapabilityDispatcher
from playwright_wizard.utils import Logger


class PlaywrightWizardMCPServer:
    """Main MCP Server for Playwright Wizard."""

    def __init__(
        self,
        registry: Optional[Registry] = None,
        roots: Optional[Sequence[Path]] = None,
        logger: Optional[Logger] = None,
    ):
        # Initialize configuration
        self.config = ConfigManager()
        config = self.config.get()

        # Initialize MCP Server
        self.server = Server(__package_name__, version=__version__)

        # Initialize logger
        self.logger = logger or Logger(name=__package_name__, level=config.log_level)

        self.registry = registry if registry is not None else default_registry()
        self._roots = roots
        self.dispatcher = self._build_dispatcher(config.content_root)

        # Set up MCP protocol handlers
        self._setup_handlers()

    def _build_dispatcher(self, content_root: Optional[Path]) -> CapabilityDispatcher:
        roots = self._roots if self._roots is not None else candidate_roots(content_root)
        resolver = ContentResolver(self.logger, roots=roots)
        return CapabilityDispatcher(self.logger, registry=self.registry, resolver=resolver)

    async def configure(self) -> None:
        """Load configuration and apply it to the logger and content roots."""
        config = await self.config.load()
        self.logger.setLevel(config.log_level)
        self.dispatcher = self._build_dispatcher(config.content_root)
        self.logger.info(
            f"Catalog ready: {len(self.registry)} entries, roots: "
            f"{', '.join(str(r) for r in self.dispatcher.resolver.roots)}"
        )

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            tools = self.dispatcher.list_capabilities()
            self.logger.debug(f"Exposing {len(tools)} tools")
            return tools

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
            """Execute a tool - MCP tools/call handler."""
            try:
                text = await self.dispatcher.invoke(name)
            except CatalogError as e:
                self.logger.error(f"Tool call failed [{e.code.value}]: {e}")
                raise
            return [types.TextContent(type="text", text=text)]

        @self.server.list_prompts()
        async def handle_list_prompts() -> list[types.Prompt]:
            return self.dispatcher.list_prompts()

        @self.server.get_prompt()
        async def handle_get_prompt(
            name: str,
            arguments: dict[str, str] | None
        ) -> types.GetPromptResult:
            try:
                return await self.dispatcher.get_prompt(name)
            except CatalogError as e:
                self.logger.error(f"Prompt request failed [{e.code.value}]: {e}")
                raise

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=__package_name__,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            ),
        )

    async def start(self):
        """Start the MCP server on stdio."""
        try:
            await self.configure()

            async with stdio_server() as (read_stream, write_stream):
                self.logger.info("Playwright Wizard MCP Server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.initialization_options(),
                )

        except Exception as e:
            self.logger.error(f"Failed to start server: {e}")
            raise


async def run_stdio():
    """Run in stdio mode."""
    server = PlaywrightWizardMCPServer()
    await server.start()


if __name__ == "__main__":
    asyncio.run(run_stdio())
