"""Conversion between configuration schemas and domain value objects."""

from typing import Any

from drawers.application.config.schema import (
    CatalogConfig,
    DrawerConfig,
    GridConfig,
    LayoutConfig,
    PanelDefinitionConfig,
    PanelInstanceConfig,
)
from drawers.domain.value_objects import (
    DrawerSize,
    GridSize,
    LayoutState,
    PanelDefinition,
    PanelInstance,
)


def config_to_definition(config: PanelDefinitionConfig) -> PanelDefinition:
    """Convert a catalog entry to a PanelDefinition."""
    return PanelDefinition(
        id=config.id,
        name=config.name,
        grid_width=config.grid_width,
        grid_height=config.grid_height,
        price=config.price,
        category=config.category,
        sample_items=tuple(config.sample_items),
        description=config.description,
        image=config.image,
        preview_model=config.preview_model,
    )


def config_to_definitions(config: CatalogConfig) -> list[PanelDefinition]:
    """Convert a whole catalog, preserving catalog order."""
    return [config_to_definition(panel) for panel in config.panels]


def config_to_layout(config: LayoutConfig) -> LayoutState:
    """Convert a layout document to a LayoutState, field for field.

    The grid is taken verbatim rather than recomputed from the drawer.
    """
    return LayoutState(
        drawer=DrawerSize(
            width_mm=config.drawer.width_mm,
            depth_mm=config.drawer.depth_mm,
            height_mm=config.drawer.height_mm,
        ),
        grid=GridSize(columns=config.grid.columns, rows=config.grid.rows),
        panels=tuple(
            PanelInstance(
                instance_id=panel.instance_id,
                definition_id=panel.definition_id,
                x=panel.x,
                y=panel.y,
                orientation=panel.orientation,
                custom_label=panel.custom_label,
            )
            for panel in config.panels
        ),
    )


def layout_to_config(state: LayoutState) -> LayoutConfig:
    """Convert a LayoutState to its document schema."""
    return LayoutConfig(
        drawer=DrawerConfig(
            width_mm=state.drawer.width_mm,
            depth_mm=state.drawer.depth_mm,
            height_mm=state.drawer.height_mm,
        ),
        grid=GridConfig(columns=state.grid.columns, rows=state.grid.rows),
        panels=[
            PanelInstanceConfig(
                instance_id=panel.instance_id,
                definition_id=panel.definition_id,
                x=panel.x,
                y=panel.y,
                orientation=panel.orientation,
                custom_label=panel.custom_label,
            )
            for panel in state.panels
        ],
    )


def layout_to_dict(state: LayoutState) -> dict[str, Any]:
    """Wire-format dictionary; ``customLabel`` is omitted when unset."""
    return layout_to_config(state).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )
