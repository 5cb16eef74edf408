"""Tests for configuration loading."""

from pathlib import Path

import pytest

from playwright_wizard.config import Config, ConfigManager, get_content_root


@pytest.mark.asyncio
class TestConfigManager:
    """Test ConfigManager."""
    
    async def test_defaults(self, clean_env):
        config = await ConfigManager().load()
        
        assert config.environment == "development"
        assert config.log_level == "DEBUG"
        assert config.http_host == "0.0.0.0"
        assert config.http_port == 8000
        assert config.content_root is None
        assert config.is_development
    
    async def test_production_log_level(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "production")
        
        config = await ConfigManager().load()
        
        assert config.is_production
        assert config.log_level == "INFO"
    
    async def test_port_fallback(self, clean_env):
        clean_env.setenv("HTTP_PORT", "9100")
        
        config = await ConfigManager().load()
        
        assert config.http_port == 9100
    
    async def test_invalid_port(self, clean_env):
        clean_env.setenv("MCP_PORT", "eighty")
        
        with pytest.raises(ValueError, match="MCP_PORT"):
            await ConfigManager().load()
    
    async def test_content_root(self, clean_env, tmp_path):
        clean_env.setenv("PLAYWRIGHT_WIZARD_ROOT", str(tmp_path))
        
        config = await ConfigManager().load()
        
        assert config.content_root == tmp_path


class TestConfigDefaults:
    """Test Config before loading."""
    
    def test_get_before_load(self):
        assert isinstance(ConfigManager().get(), Config)
    
    def test_content_root_expands_user(self, clean_env):
        clean_env.setenv("PLAYWRIGHT_WIZARD_ROOT", "~/prompts")
        
        assert get_content_root() == Path.home() / "prompts"
    
    def test_content_root_unset(self, clean_env):
        assert get_content_root() is None
