"""
Content Registry

Static catalog of workflow steps and reference documents.

Workflow entries are addressed by their bare name; reference entries by
`reference-<name>`. The registry is built once from the literal tables
below and never changes afterwards.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from playwright_wizard.catalog.errors import UnknownCapability
from playwright_wizard.mcp_types import (
    REFERENCE_PREFIX,
    CatalogEntry,
    CatalogListing,
    Namespace,
)

PROMPTS_DIR = ".github/prompts"


WORKFLOW_STEPS: Tuple[CatalogEntry, ...] = (
    CatalogEntry(
        name="analyze-app",
        path=f"{PROMPTS_DIR}/1-analyze-app.md",
        description="Analyze application structure and create test strategy",
    ),
    CatalogEntry(
        name="generate-test-plan",
        path=f"{PROMPTS_DIR}/2-generate-test-plan.md",
        description="Generate comprehensive test plan with scenarios",
    ),
    CatalogEntry(
        name="setup-infrastructure",
        path=f"{PROMPTS_DIR}/3-setup-infrastructure.md",
        description="Setup Playwright infrastructure with fixtures and config",
    ),
    CatalogEntry(
        name="generate-page-objects",
        path=f"{PROMPTS_DIR}/4-generate-page-objects.md",
        description="Generate page object models with optimal selectors",
    ),
    CatalogEntry(
        name="implement-test-suite",
        path=f"{PROMPTS_DIR}/5-implement-test-suite.md",
        description="Implement complete test suite with best practices",
    ),
    CatalogEntry(
        name="review-and-optimize",
        path=f"{PROMPTS_DIR}/6-review-and-optimize.md",
        description="Review and optimize test suite for quality and performance",
    ),
    CatalogEntry(
        name="add-accessibility",
        path=f"{PROMPTS_DIR}/optional-add-accessibility.md",
        description="Add accessibility testing to existing suite",
    ),
    CatalogEntry(
        name="add-api-testing",
        path=f"{PROMPTS_DIR}/optional-add-api-testing.md",
        description="Add API testing capabilities to test suite",
    ),
)

REFERENCE_DOCS: Tuple[CatalogEntry, ...] = (
    CatalogEntry(
        name="core-principles",
        path=f"{PROMPTS_DIR}/reference/core-principles.md",
        description="Core testing principles that guide all implementations",
        namespace=Namespace.REFERENCE,
    ),
    CatalogEntry(
        name="workflow-overview",
        path=f"{PROMPTS_DIR}/reference/workflow-overview.md",
        description="High-level workflow guide and prompt relationships",
        namespace=Namespace.REFERENCE,
    ),
    CatalogEntry(
        name="mcp-setup",
        path=f"{PROMPTS_DIR}/reference/mcp-setup.md",
        description="MCP setup and usage patterns",
        namespace=Namespace.REFERENCE,
    ),
    CatalogEntry(
        name="selector-strategies",
        path=f"{PROMPTS_DIR}/reference/selector-strategies.md",
        description="Selector strategies and HTML quality scoring",
        namespace=Namespace.REFERENCE,
    ),
    CatalogEntry(
        name="fixture-patterns",
        path=f"{PROMPTS_DIR}/reference/fixture-patterns.md",
        description="Playwright fixture patterns for parallel execution",
        namespace=Namespace.REFERENCE,
    ),
)


def _index(entries: Iterable[CatalogEntry], namespace: Namespace) -> Dict[str, CatalogEntry]:
    index: Dict[str, CatalogEntry] = {}
    for entry in entries:
        if entry.namespace is not namespace:
            raise ValueError(
                f"Entry '{entry.name}' belongs to the {entry.namespace.value} namespace, "
                f"not {namespace.value}"
            )
        if entry.name in index:
            raise ValueError(f"Duplicate {namespace.value} entry: {entry.name}")
        if namespace is Namespace.WORKFLOW and entry.name.startswith(REFERENCE_PREFIX):
            raise ValueError(
                f"Workflow entry '{entry.name}' would be addressed as a reference "
                f"(names may not start with '{REFERENCE_PREFIX}')"
            )
        index[entry.name] = entry
    return index


class Registry:
    """Immutable two-namespace catalog."""

    def __init__(
        self,
        workflow: Iterable[CatalogEntry] = (),
        reference: Iterable[CatalogEntry] = (),
    ):
        self._workflow: Mapping[str, CatalogEntry] = MappingProxyType(
            _index(workflow, Namespace.WORKFLOW)
        )
        self._reference: Mapping[str, CatalogEntry] = MappingProxyType(
            _index(reference, Namespace.REFERENCE)
        )
        self._entries: Tuple[CatalogEntry, ...] = (
            tuple(self._workflow.values()) + tuple(self._reference.values())
        )
        self._listing: Tuple[CatalogListing, ...] = tuple(
            CatalogListing(entry.external_name, entry.description)
            for entry in self._entries
        )

    def list_all(self) -> Tuple[CatalogListing, ...]:
        """All entries by external name, workflow first, insertion order kept."""
        return self._listing

    def lookup(self, external_name: str) -> CatalogEntry:
        """
        Resolve an external name to its entry.

        Raises:
            UnknownCapability: if no entry answers to the name
        """
        if external_name.startswith(REFERENCE_PREFIX):
            entry = self._reference.get(external_name[len(REFERENCE_PREFIX):])
        else:
            entry = self._workflow.get(external_name)

        if entry is None:
            raise UnknownCapability(external_name)
        return entry

    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, external_name: object) -> bool:
        if not isinstance(external_name, str):
            return False
        try:
            self.lookup(external_name)
        except UnknownCapability:
            return False
        return True


def build_default_registry() -> Registry:
    """Build the registry of the shipped Playwright workflow catalog."""
    return Registry(workflow=WORKFLOW_STEPS, reference=REFERENCE_DOCS)


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Process-wide catalog, constructed on first use."""
    return build_default_registry()
