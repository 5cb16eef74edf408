"""
Playwright Wizard MCP Server

Serves the Playwright test-generation workflow steps and reference
documents over the Model Context Protocol.
"""

__version__ = "0.1.0"
__package_name__ = "playwright-wizard-mcp"
