"""
Logger
Stderr logging for the Playwright Wizard MCP Server.

stdout carries the stdio transport, so every record goes to stderr.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


class Logger:
    """Thin wrapper around a stdlib logger with a single stderr handler."""
    
    def __init__(
        self,
        name: str = "playwright-wizard-mcp",
        level: str = "INFO",
        stream: Optional[TextIO] = None,
    ):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_parse_level(level))
        
        # Loggers are process-wide; attach the handler once per name.
        # Handlers stay at NOTSET so the logger level alone filters records.
        if not self.logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)
    
    def setLevel(self, level: str) -> None:
        self.logger.setLevel(_parse_level(level))
    
    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)
    
    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)
    
    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)
    
    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
    
    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
