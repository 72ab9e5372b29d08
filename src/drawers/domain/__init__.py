"""Domain layer - grid geometry, panel registry and layout state."""

from .geometry import (
    DefinitionLookup,
    availability_map,
    compute_grid,
    find_first_fit,
    find_placement,
    fits,
    footprint,
    mm_to_cells,
    mm_to_cm,
    others,
    panel_rect,
    rectangles_overlap,
    within_grid,
)
from .layout import (
    AddPanel,
    LayoutAction,
    RemovePanel,
    ReplaceLayout,
    SetDrawer,
    UpdatePanel,
    find_instance,
    initial_layout,
    make_instance,
    reduce_layout,
    remint_panels,
    rotate_instance,
    set_label,
    set_position,
)
from .pricing import format_price, total_price
from .registry import PanelRegistry, RegistryError
from .value_objects import (
    DEFAULT_DRAWER,
    GRID_UNIT_MM,
    DrawerSize,
    Footprint,
    GridSize,
    LayoutState,
    PanelCategory,
    PanelDefinition,
    PanelInstance,
    PanelOrientation,
    Position,
    Rect,
)

__all__ = [
    "AddPanel",
    "DEFAULT_DRAWER",
    "DefinitionLookup",
    "DrawerSize",
    "Footprint",
    "GRID_UNIT_MM",
    "GridSize",
    "LayoutAction",
    "LayoutState",
    "PanelCategory",
    "PanelDefinition",
    "PanelInstance",
    "PanelOrientation",
    "PanelRegistry",
    "Position",
    "Rect",
    "RegistryError",
    "RemovePanel",
    "ReplaceLayout",
    "SetDrawer",
    "UpdatePanel",
    "availability_map",
    "compute_grid",
    "find_first_fit",
    "find_instance",
    "find_placement",
    "fits",
    "footprint",
    "format_price",
    "initial_layout",
    "make_instance",
    "mm_to_cells",
    "mm_to_cm",
    "others",
    "panel_rect",
    "rectangles_overlap",
    "reduce_layout",
    "remint_panels",
    "rotate_instance",
    "set_label",
    "set_position",
    "total_price",
    "within_grid",
]
