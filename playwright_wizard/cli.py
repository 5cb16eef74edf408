#!/usr/bin/env python3
"""
Playwright Wizard CLI Entry Point

Handles:
- Server modes (stdio, http)
- Fatal startup errors (diagnostic on stderr, exit status 1)
"""

import argparse
import asyncio
import sys

from playwright_wizard import __package_name__, __version__


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def run_stdio():
    """Run in stdio mode (for Cursor/Claude Desktop/VS Code)."""
    from playwright_wizard.server import PlaywrightWizardMCPServer
    server = PlaywrightWizardMCPServer()
    await server.start()


async def run_http(host: str | None, port: int | None):
    """Run in HTTP mode."""
    from playwright_wizard.server_http import main as http_main
    await http_main(host=host, port=port)


async def main_async(args):
    if args.http:
        await run_http(args.host, args.port)
    else:
        # Default to stdio
        await run_stdio()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Playwright Wizard - guided Playwright test generation over MCP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  playwright-wizard-mcp                    Run in stdio mode (default)
  playwright-wizard-mcp --http             Run HTTP server on port 8000
  playwright-wizard-mcp --http --port 3000 Run HTTP server on port 3000

MCP Configuration (.vscode/mcp.json or .cursor/mcp.json):

  {
    "mcpServers": {
      "playwright-wizard": {
        "command": "playwright-wizard-mcp"
      }
    }
  }
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode (default)"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Run in HTTP mode"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="HTTP host (default: MCP_HOST or 0.0.0.0)"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="HTTP port (default: MCP_PORT or 8000)"
    )
    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print_version()
        sys.exit(0)

    if args.http and args.stdio:
        print("Choose one of --stdio or --http", file=sys.stderr)
        sys.exit(2)

    try:
        asyncio.run(main_async(args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
