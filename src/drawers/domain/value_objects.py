"""Core value objects for drawer grid layouts.

All value objects are frozen dataclasses so that a LayoutState can be
shared freely between the controller, the codec and the formatters
without defensive copies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

# Physical size of one grid cell in millimeters.
GRID_UNIT_MM = 42

MIN_DRAWER_SIDE_MM = 100
MAX_DRAWER_SIDE_MM = 1200
MIN_DRAWER_HEIGHT_MM = 30
MAX_DRAWER_HEIGHT_MM = 200


def _clamp(value: float, minimum: int, maximum: int) -> int:
    # NaN counts as the minimum; infinities clamp to the nearest bound.
    if math.isnan(value):
        return minimum
    bounded = max(minimum, min(maximum, value))
    # Half-up rounding, matching what users expect from a number field.
    return int(math.floor(bounded + 0.5))


class PanelOrientation(str, Enum):
    """Orientation of a placed panel.

    Rotation is always a quarter turn, so it only ever swaps the footprint
    width and height.
    """

    DEFAULT = "default"
    ROTATED = "rotated"

    @property
    def label(self) -> str:
        """Angle shown to users ("0°" or "90°")."""
        return "0°" if self is PanelOrientation.DEFAULT else "90°"

    def toggled(self) -> PanelOrientation:
        """Return the other orientation."""
        if self is PanelOrientation.DEFAULT:
            return PanelOrientation.ROTATED
        return PanelOrientation.DEFAULT


class PanelCategory(str, Enum):
    """Catalog category of a panel."""

    UNIVERSAL = "universal"
    CUTLERY = "cutlery"
    TOOLS = "tools"
    OFFICE = "office"
    HOBBY = "hobby"


@dataclass(frozen=True)
class DrawerSize:
    """Physical drawer dimensions in millimeters.

    Raw user input may be fractional or out of range; ``clamped()`` gives
    the whole-millimeter size stored in a LayoutState.
    """

    width_mm: float
    depth_mm: float
    height_mm: float

    def clamped(self) -> DrawerSize:
        """Round to whole millimeters and clamp to the supported ranges.

        Width and depth are limited to 100-1200mm, height to 30-200mm.
        """
        return DrawerSize(
            width_mm=_clamp(self.width_mm, MIN_DRAWER_SIDE_MM, MAX_DRAWER_SIDE_MM),
            depth_mm=_clamp(self.depth_mm, MIN_DRAWER_SIDE_MM, MAX_DRAWER_SIDE_MM),
            height_mm=_clamp(
                self.height_mm, MIN_DRAWER_HEIGHT_MM, MAX_DRAWER_HEIGHT_MM
            ),
        )


DEFAULT_DRAWER = DrawerSize(width_mm=300, depth_mm=420, height_mm=60)


@dataclass(frozen=True)
class GridSize:
    """Number of whole grid cells that fit in a drawer."""

    columns: int
    rows: int

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows


@dataclass(frozen=True)
class Position:
    """Top-left grid coordinate of a panel, zero-based.

    Unlike placed panels, a candidate Position may be negative; the fit
    engine is responsible for rejecting it.
    """

    x: int
    y: int


@dataclass(frozen=True)
class Footprint:
    """Cells covered by a panel in a given orientation."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned cell rectangle covering [x, x+width) x [y, y+height)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class PanelDefinition:
    """Catalog entry for a purchasable panel.

    Attributes:
        id: Stable identifier referenced by placed instances.
        name: Display name.
        grid_width: Footprint width in cells at the default orientation.
        grid_height: Footprint height in cells at the default orientation.
        price: Unit price in the catalog currency.
        category: Catalog category.
        sample_items: Things that typically go into this panel.
        description: Free-form description.
        image: Image URI used by catalog views.
        preview_model: Optional URI of a 3D preview model.
    """

    id: str
    name: str
    grid_width: int
    grid_height: int
    price: float
    category: PanelCategory = PanelCategory.UNIVERSAL
    sample_items: tuple[str, ...] = ()
    description: str = ""
    image: str = ""
    preview_model: str | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("Panel footprint must be at least one cell")
        if self.price < 0:
            raise ValueError("Panel price must be non-negative")

    @property
    def width_mm(self) -> int:
        """Physical width at the default orientation."""
        return self.grid_width * GRID_UNIT_MM

    @property
    def depth_mm(self) -> int:
        """Physical depth at the default orientation."""
        return self.grid_height * GRID_UNIT_MM


@dataclass(frozen=True)
class PanelInstance:
    """A panel placed on the grid.

    Attributes:
        instance_id: Unique id, stable for the lifetime of the instance.
        definition_id: Catalog id of the panel definition.
        x: Zero-based column of the top-left cell.
        y: Zero-based row of the top-left cell.
        orientation: Default or rotated by 90 degrees.
        custom_label: Optional user override of the display name.
    """

    instance_id: str
    definition_id: str
    x: int = 0
    y: int = 0
    orientation: PanelOrientation = PanelOrientation.DEFAULT
    custom_label: str | None = None

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def display_label(self, definition: PanelDefinition) -> str:
        """Custom label when set, otherwise the definition's name."""
        if self.custom_label is not None:
            return self.custom_label
        return definition.name


@dataclass(frozen=True)
class LayoutState:
    """Complete configurator state.

    The grid is stored rather than derived so that a layout restored from a
    share token is reproduced exactly as it was encoded.
    """

    drawer: DrawerSize
    grid: GridSize
    panels: tuple[PanelInstance, ...] = ()
