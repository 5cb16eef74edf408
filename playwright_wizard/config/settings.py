"""
Settings
Configuration management for the Playwright Wizard MCP Server.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def get_content_root() -> Optional[Path]:
    """
    Get the explicit content root, if one is configured.
    
    PLAYWRIGHT_WIZARD_ROOT points at a directory holding `.github/prompts/`.
    When set it is tried before the package and working-directory roots.
    """
    root = os.getenv("PLAYWRIGHT_WIZARD_ROOT")
    if not root:
        return None
    return Path(os.path.expanduser(root))


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_host: str = DEFAULT_HOST
    http_port: int = DEFAULT_PORT
    content_root: Optional[Path] = None
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"
    
    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    async def load(self) -> Config:
        """Load configuration from the environment (and a local .env file)."""
        load_dotenv()
        
        env = os.getenv("ENVIRONMENT", "development")
        port = os.getenv("MCP_PORT", os.getenv("HTTP_PORT", str(DEFAULT_PORT)))
        try:
            http_port = int(port)
        except ValueError as e:
            raise ValueError(f"Invalid MCP_PORT value: {port!r}") from e
        
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            http_host=os.getenv("MCP_HOST", DEFAULT_HOST),
            http_port=http_port,
            content_root=get_content_root(),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Defaults until load() runs
            self._config = Config()
        return self._config
