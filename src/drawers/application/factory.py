"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from drawers.application.codec import LayoutCodec
    from drawers.application.config.schema import CatalogConfig
    from drawers.application.controller import LayoutController
    from drawers.application.presets import PresetManager
    from drawers.domain.registry import PanelRegistry
    from drawers.infrastructure.formatters import LayoutSummaryFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    The catalog is loaded and the panel registry initialized on first use,
    exactly once per factory. Controllers are created fresh for every
    request because each one owns its own layout.

    Attributes:
        catalog_path: Catalog JSON file; the bundled catalog when None.
        codec_scheme: Binary-to-text scheme for share tokens.
    """

    catalog_path: Path | None = None
    codec_scheme: str = "base64url"

    _catalog: "CatalogConfig | None" = field(default=None, init=False, repr=False)
    _registry: "PanelRegistry | None" = field(default=None, init=False, repr=False)
    _codec: "LayoutCodec | None" = field(default=None, init=False, repr=False)
    _preset_manager: "PresetManager | None" = field(
        default=None, init=False, repr=False
    )

    def get_catalog(self) -> "CatalogConfig":
        """Get the validated catalog (cached)."""
        if self._catalog is None:
            from drawers.application.config import load_catalog_config

            self._catalog = load_catalog_config(self.catalog_path)
        return self._catalog

    def get_registry(self) -> "PanelRegistry":
        """Get the panel registry, initializing it from the catalog once."""
        if self._registry is None:
            from drawers.application.config import config_to_definitions
            from drawers.domain.registry import PanelRegistry

            self._registry = PanelRegistry.from_definitions(
                config_to_definitions(self.get_catalog())
            )
        return self._registry

    def get_codec(self) -> "LayoutCodec":
        """Get the share-token codec (cached)."""
        if self._codec is None:
            from drawers.application.codec import LayoutCodec

            self._codec = LayoutCodec(scheme=self.codec_scheme)
        return self._codec

    def get_preset_manager(self) -> "PresetManager":
        """Get the preset manager (cached)."""
        if self._preset_manager is None:
            from drawers.application.presets import PresetManager

            self._preset_manager = PresetManager()
        return self._preset_manager

    def get_summary_formatter(self) -> "LayoutSummaryFormatter":
        """Create a summary formatter using the catalog currency."""
        from drawers.infrastructure.formatters import LayoutSummaryFormatter

        return LayoutSummaryFormatter(currency=self.get_catalog().currency)

    def create_controller(self, token: str | None = None) -> "LayoutController":
        """Create a controller, restoring ``token`` when one is given.

        An unusable token leaves the controller on the empty default layout.
        """
        from drawers.application.controller import LayoutController

        controller = LayoutController(self.get_registry())
        if token:
            controller.restore(token, self.get_codec())
        return controller


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
