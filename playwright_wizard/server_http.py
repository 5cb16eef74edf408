#!/usr/bin/env python3
"""
Playwright Wizard MCP Server - HTTP Transport
Runs as a web server using the MCP Streamable HTTP protocol.

For local editor integrations, use stdio mode instead.
"""

import asyncio
import contextlib
from typing import Optional

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route

from playwright_wizard import __version__
from playwright_wizard.catalog import ContentReadFailure, UnknownCapability
from playwright_wizard.server import PlaywrightWizardMCPServer


def create_app(server_instance: Optional[PlaywrightWizardMCPServer] = None) -> Starlette:
    """
    Build the Starlette app around a server instance.

    Endpoints:
    - /mcp - MCP protocol (all tool and prompt interaction)
    - /health - Deployment health check
    - /capabilities - JSON catalog listing
    - /capabilities/{name} - Raw payload for one entry (curl-friendly)
    """
    mcp_server = server_instance or PlaywrightWizardMCPServer()
    session_manager = StreamableHTTPSessionManager(app=mcp_server.server)

    async def mcp_endpoint(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    async def health_check(request: Request) -> PlainTextResponse:
        return PlainTextResponse(
            f"Playwright Wizard MCP Server (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Capabilities: {len(mcp_server.registry)}\n"
            f"MCP endpoint: /mcp\n"
        )

    async def list_capabilities(request: Request) -> JSONResponse:
        return JSONResponse({
            "capabilities": [
                {"name": tool.name, "description": tool.description}
                for tool in mcp_server.dispatcher.list_capabilities()
            ]
        })

    async def get_capability(request: Request) -> Response:
        name = request.path_params.get("name", "")
        try:
            content = await mcp_server.dispatcher.invoke(name)
        except UnknownCapability as e:
            return PlainTextResponse(str(e), status_code=404)
        except ContentReadFailure as e:
            mcp_server.logger.error(f"Content read failed for {name}: {e}")
            return PlainTextResponse(f"Error: {e}", status_code=503)

        return Response(content=content, media_type="text/markdown; charset=utf-8")

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        await mcp_server.configure()
        async with session_manager.run():
            mcp_server.logger.info("Streamable HTTP session manager started")
            yield

    return Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/capabilities", endpoint=list_capabilities),
            Route("/capabilities/{name}", endpoint=get_capability),
            Mount("/mcp", app=mcp_endpoint),
        ],
        lifespan=lifespan,
    )


async def main(host: Optional[str] = None, port: Optional[int] = None):
    """Run the HTTP server."""
    import uvicorn

    server_instance = PlaywrightWizardMCPServer()
    config = await server_instance.config.load()
    host = host or config.http_host
    port = port or config.http_port

    uvicorn_config = uvicorn.Config(
        create_app(server_instance),
        host=host,
        port=port,
        log_level="info",
    )
    server = uvicorn.Server(uvicorn_config)

    server_instance.logger.info(f"Playwright Wizard MCP Server (HTTP) starting on http://{host}:{port}")
    server_instance.logger.info(f"  MCP:          http://{host}:{port}/mcp")
    server_instance.logger.info(f"  Health:       http://{host}:{port}/health")
    server_instance.logger.info(f"  Capabilities: http://{host}:{port}/capabilities")

    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
