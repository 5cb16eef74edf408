"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_content_root

__all__ = [
    "ConfigManager",
    "Config",
    "get_content_root",
]
