"""Catalog and layout document schemas, loading and conversion.

Public API:
    - CatalogConfig / PanelDefinitionConfig: Catalog file models
    - LayoutConfig / PresetConfig: Layout document models (wire format)
    - load_catalog: Load catalog definitions (bundled catalog by default)
    - load_catalog_config: Load and validate a catalog file
    - ConfigError: Exception for catalog and document errors
    - config_to_layout / layout_to_config / layout_to_dict: Layout conversion

Example:
    >>> from drawers.application.config import load_catalog, ConfigError
    >>> from drawers.domain import PanelRegistry
    >>>
    >>> registry = PanelRegistry.from_definitions(load_catalog())
    >>> registry.get("gridfinity-bin-2x2").price
    35.0
"""

from drawers.application.config.adapter import (
    config_to_definition,
    config_to_definitions,
    config_to_layout,
    layout_to_config,
    layout_to_dict,
)
from drawers.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_json_path,
    load_catalog,
    load_catalog_config,
    load_catalog_from_dict,
)
from drawers.application.config.schema import (
    SUPPORTED_CATALOG_VERSIONS,
    CatalogConfig,
    DrawerConfig,
    GridConfig,
    LayoutConfig,
    PanelDefinitionConfig,
    PanelInstanceConfig,
    PresetConfig,
)

__all__ = [
    "CatalogConfig",
    "ConfigError",
    "DrawerConfig",
    "GridConfig",
    "LayoutConfig",
    "PanelDefinitionConfig",
    "PanelInstanceConfig",
    "PresetConfig",
    "SUPPORTED_CATALOG_VERSIONS",
    "config_to_definition",
    "config_to_definitions",
    "config_to_layout",
    "extract_validation_errors",
    "format_json_path",
    "layout_to_config",
    "layout_to_dict",
    "load_catalog",
    "load_catalog_config",
    "load_catalog_from_dict",
]
