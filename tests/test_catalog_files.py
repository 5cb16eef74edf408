"""Tests that the shipped catalog files are present, packaged and readable."""

from pathlib import PurePosixPath

import pytest

from playwright_wizard.catalog import PACKAGE_ROOT, ContentResolver, default_registry
from playwright_wizard.tools import CapabilityDispatcher
from playwright_wizard.tools.envelope import DIRECTIVE_HEADER

PYPROJECT = PACKAGE_ROOT.parent / "pyproject.toml"


@pytest.mark.asyncio
class TestShippedCatalog:
    """Every default entry resolves from the package directory."""
    
    async def test_every_entry_has_a_file(self):
        for entry in default_registry():
            assert (PACKAGE_ROOT / entry.path).is_file(), entry.path
    
    async def test_invoke_every_entry(self, logger):
        dispatcher = CapabilityDispatcher(
            logger, resolver=ContentResolver(logger, roots=[PACKAGE_ROOT])
        )
        
        for listing in default_registry().list_all():
            payload = await dispatcher.invoke(listing.external_name)
            if listing.external_name.startswith("reference-"):
                assert not payload.startswith(DIRECTIVE_HEADER)
            else:
                assert payload.startswith(DIRECTIVE_HEADER)
    
    async def test_reference_core_principles(self, logger, tmp_path, monkeypatch):
        """Resolves from the package even when the working directory has no catalog."""
        monkeypatch.chdir(tmp_path)
        dispatcher = CapabilityDispatcher(logger)
        
        payload = await dispatcher.invoke("reference-core-principles")
        
        raw = (PACKAGE_ROOT / ".github/prompts/reference/core-principles.md").read_bytes()
        assert payload == raw.decode("utf-8")


class TestPackageData:
    """The distribution declares every catalog file as package data."""
    
    @pytest.mark.skipif(not PYPROJECT.is_file(), reason="running from an installed distribution")
    def test_package_data_covers_catalog(self):
        tomllib = pytest.importorskip("tomllib")
        with open(PYPROJECT, "rb") as handle:
            pyproject = tomllib.load(handle)
        
        patterns = pyproject["tool"]["setuptools"]["package-data"]["playwright_wizard"]
        
        for entry in default_registry():
            path = PurePosixPath(entry.path)
            assert any(path.match(pattern) for pattern in patterns), entry.path
