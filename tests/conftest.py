"""
Shared pytest fixtures for Playwright Wizard MCP tests

Provides a fabricated catalog on disk so tests never depend on the shipped
prompt files or the working directory.
"""

import sys
from pathlib import Path
from typing import Dict
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Fabricated catalog
# ============================================================================

WORKFLOW_FILES: Dict[str, str] = {
    "steps/1-first-step.md": "# First step\n\nDo the first thing.\n",
    "steps/2-second-step.md": "# Second step\n\nDo the second thing.\n",
}

REFERENCE_FILES: Dict[str, str] = {
    "steps/reference/core-principles.md": "# Principles\n\nBe deterministic.\n",
    "steps/reference/glossary.md": "# Glossary\n\nFixture: shared setup.\n",
}


def write_files(root: Path, files: Dict[str, str]) -> None:
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


@pytest.fixture
def workflow_entries():
    from playwright_wizard.mcp_types import CatalogEntry
    
    return (
        CatalogEntry(name="first-step", path="steps/1-first-step.md", description="First step"),
        CatalogEntry(name="second-step", path="steps/2-second-step.md", description="Second step"),
    )


@pytest.fixture
def reference_entries():
    from playwright_wizard.mcp_types import CatalogEntry, Namespace
    
    return (
        CatalogEntry(
            name="core-principles",
            path="steps/reference/core-principles.md",
            description="Principles",
            namespace=Namespace.REFERENCE,
        ),
        CatalogEntry(
            name="glossary",
            path="steps/reference/glossary.md",
            description="Glossary",
            namespace=Namespace.REFERENCE,
        ),
    )


@pytest.fixture
def registry(workflow_entries, reference_entries):
    """Registry built from fabricated entries."""
    from playwright_wizard.catalog import Registry
    
    return Registry(workflow=workflow_entries, reference=reference_entries)


@pytest.fixture
def primary_root(tmp_path):
    """Primary candidate root, empty by default."""
    root = tmp_path / "installed"
    root.mkdir()
    return root


@pytest.fixture
def secondary_root(tmp_path):
    """Secondary candidate root holding every fabricated file."""
    root = tmp_path / "workdir"
    root.mkdir()
    write_files(root, WORKFLOW_FILES)
    write_files(root, REFERENCE_FILES)
    return root


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from playwright_wizard.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def resolver(logger, primary_root, secondary_root):
    from playwright_wizard.catalog import ContentResolver
    
    return ContentResolver(logger, roots=[primary_root, secondary_root])


@pytest.fixture
def dispatcher(logger, registry, resolver):
    from playwright_wizard.tools import CapabilityDispatcher
    
    return CapabilityDispatcher(logger, registry=registry, resolver=resolver)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply."""
    for name in ("ENVIRONMENT", "LOG_LEVEL", "MCP_HOST", "MCP_PORT", "HTTP_PORT", "PLAYWRIGHT_WIZARD_ROOT"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() must not pick up a developer's .env
    monkeypatch.setattr("playwright_wizard.config.settings.load_dotenv", lambda *a, **kw: False)
    return monkeypatch


@pytest.fixture
def workflow_files():
    return dict(WORKFLOW_FILES)


@pytest.fixture
def reference_files():
    return dict(REFERENCE_FILES)
