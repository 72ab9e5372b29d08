"""Panel registry: lookup from panel id to catalog definition."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .value_objects import PanelDefinition

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when the panel registry is used outside its contract."""


class PanelRegistry:
    """Read-only catalog lookup, initialized exactly once.

    The registry is constructed explicitly and passed to whatever needs
    definition lookups (controllers, fit checks, formatters). It is filled
    by a single ``register_panels`` call at startup and never changes
    afterwards. Reading before that call, registering twice, or registering
    two definitions with the same id raises :class:`RegistryError`.

    Example:
        registry = PanelRegistry()
        registry.register_panels(load_catalog())
        definition = registry.get("gridfinity-bin-2x2")
    """

    def __init__(self) -> None:
        self._panels: dict[str, PanelDefinition] | None = None

    @classmethod
    def from_definitions(cls, definitions: Iterable[PanelDefinition]) -> PanelRegistry:
        """Create and initialize a registry in one step."""
        registry = cls()
        registry.register_panels(definitions)
        return registry

    @property
    def is_initialized(self) -> bool:
        return self._panels is not None

    def register_panels(self, definitions: Iterable[PanelDefinition]) -> None:
        """Populate the registry from the full catalog.

        Args:
            definitions: Catalog definitions in display order.

        Raises:
            RegistryError: If already initialized or if ids repeat.
        """
        if self._panels is not None:
            raise RegistryError("Panel registry is already initialized")

        panels: dict[str, PanelDefinition] = {}
        for definition in definitions:
            if definition.id in panels:
                raise RegistryError(f"Duplicate panel id '{definition.id}'")
            panels[definition.id] = definition
        self._panels = panels
        logger.debug(f"Registered {len(panels)} panel definitions")

    def get(self, panel_id: str) -> PanelDefinition | None:
        """Definition for ``panel_id``, or None when it is not in the catalog."""
        return self._require().get(panel_id)

    def definitions(self) -> list[PanelDefinition]:
        """All definitions in catalog order."""
        return list(self._require().values())

    def _require(self) -> dict[str, PanelDefinition]:
        if self._panels is None:
            raise RegistryError("Panel registry read before initialization")
        return self._panels

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._require()

    def __iter__(self) -> Iterator[PanelDefinition]:
        return iter(self._require().values())

    def __len__(self) -> int:
        return len(self._require())
