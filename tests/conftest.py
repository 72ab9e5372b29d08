"""Pytest configuration and shared fixtures for drawer layout tests."""

from __future__ import annotations

import pytest

from drawers.application.codec import LayoutCodec
from drawers.application.config import load_catalog
from drawers.application.controller import LayoutController
from drawers.application.factory import reset_factory
from drawers.domain import PanelDefinition, PanelRegistry


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Catalog and registry fixtures
# =============================================================================


@pytest.fixture
def catalog() -> list[PanelDefinition]:
    """Definitions from the bundled catalog, in catalog order."""
    return load_catalog()


@pytest.fixture
def registry(catalog: list[PanelDefinition]) -> PanelRegistry:
    """Registry initialized from the bundled catalog."""
    return PanelRegistry.from_definitions(catalog)


@pytest.fixture
def bin_1x1(registry: PanelRegistry) -> PanelDefinition:
    return registry.get("gridfinity-bin-1x1")


@pytest.fixture
def bin_1x2(registry: PanelRegistry) -> PanelDefinition:
    return registry.get("gridfinity-bin-1x2")


@pytest.fixture
def bin_2x2(registry: PanelRegistry) -> PanelDefinition:
    return registry.get("gridfinity-bin-2x2")


@pytest.fixture
def bin_2x3(registry: PanelRegistry) -> PanelDefinition:
    return registry.get("gridfinity-bin-2x3")


@pytest.fixture
def bin_3x3(registry: PanelRegistry) -> PanelDefinition:
    return registry.get("gridfinity-bin-3x3")


# =============================================================================
# Application fixtures
# =============================================================================


@pytest.fixture
def controller(registry: PanelRegistry) -> LayoutController:
    """Controller on the default 300 x 420 x 60 drawer."""
    return LayoutController(registry)


@pytest.fixture
def codec() -> LayoutCodec:
    return LayoutCodec()


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give every test a fresh default service factory."""
    reset_factory()
    yield
    reset_factory()
