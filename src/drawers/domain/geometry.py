"""Grid geometry and fit checks.

Everything here is a pure function of its arguments. Definitions of
already placed panels are resolved through a ``lookup`` callable (usually
``PanelRegistry.get``); instances whose definition cannot be resolved are
inert and never block a placement.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from .value_objects import (
    GRID_UNIT_MM,
    DrawerSize,
    Footprint,
    GridSize,
    PanelDefinition,
    PanelInstance,
    PanelOrientation,
    Position,
    Rect,
)

DefinitionLookup = Callable[[str], PanelDefinition | None]


def compute_grid(drawer: DrawerSize) -> GridSize:
    """Number of whole cells along each drawer side, at least one each."""
    return GridSize(
        columns=max(1, int(drawer.width_mm // GRID_UNIT_MM)),
        rows=max(1, int(drawer.depth_mm // GRID_UNIT_MM)),
    )


def footprint(definition: PanelDefinition, orientation: PanelOrientation) -> Footprint:
    """Cells covered by a definition, swapped when rotated."""
    if orientation == PanelOrientation.DEFAULT:
        return Footprint(definition.grid_width, definition.grid_height)
    return Footprint(definition.grid_height, definition.grid_width)


def panel_rect(
    definition: PanelDefinition, orientation: PanelOrientation, position: Position
) -> Rect:
    size = footprint(definition, orientation)
    return Rect(position.x, position.y, size.width, size.height)


def rectangles_overlap(a: Rect, b: Rect) -> bool:
    """True when the rectangles share at least one cell.

    Rectangles that only touch along an edge do not overlap.
    """
    return not (
        a.right <= b.x or b.right <= a.x or a.bottom <= b.y or b.bottom <= a.y
    )


def within_grid(grid: GridSize, size: Footprint, position: Position) -> bool:
    """True when the footprint at ``position`` lies inside the grid."""
    if position.x < 0 or position.y < 0:
        return False
    return (
        position.x + size.width <= grid.columns
        and position.y + size.height <= grid.rows
    )


def fits(
    grid: GridSize,
    definition: PanelDefinition,
    orientation: PanelOrientation,
    position: Position,
    occupied: Iterable[PanelInstance],
    lookup: DefinitionLookup,
) -> bool:
    """Check whether a panel can be placed at ``position``.

    Callers moving or rotating an existing instance must leave that
    instance out of ``occupied`` (see :func:`others`), otherwise it
    collides with itself.

    Args:
        grid: Grid the panel must stay inside.
        definition: Definition of the panel being placed.
        orientation: Orientation of the panel being placed.
        position: Candidate top-left cell.
        occupied: Instances already on the grid.
        lookup: Resolves definitions of the occupied instances.

    Returns:
        False if the footprint leaves the grid or overlaps any resolvable
        occupied instance, True otherwise.
    """
    size = footprint(definition, orientation)
    if not within_grid(grid, size, position):
        return False

    candidate = Rect(position.x, position.y, size.width, size.height)
    for existing in occupied:
        existing_definition = lookup(existing.definition_id)
        if existing_definition is None:
            continue
        existing_rect = panel_rect(
            existing_definition, existing.orientation, existing.position
        )
        if rectangles_overlap(candidate, existing_rect):
            return False
    return True


def others(
    panels: Iterable[PanelInstance], instance_id: str
) -> list[PanelInstance]:
    """All panels except the one with ``instance_id``."""
    return [panel for panel in panels if panel.instance_id != instance_id]


def find_first_fit(
    grid: GridSize,
    definition: PanelDefinition,
    orientation: PanelOrientation,
    occupied: Sequence[PanelInstance],
    lookup: DefinitionLookup,
) -> Position | None:
    """Scan the grid row by row and return the first free position.

    Only positions where the footprint stays inside the grid are tried.
    """
    size = footprint(definition, orientation)
    for y in range(grid.rows - size.height + 1):
        for x in range(grid.columns - size.width + 1):
            position = Position(x, y)
            if fits(grid, definition, orientation, position, occupied, lookup):
                return position
    return None


def find_placement(
    grid: GridSize,
    definition: PanelDefinition,
    occupied: Sequence[PanelInstance],
    lookup: DefinitionLookup,
) -> tuple[Position, PanelOrientation] | None:
    """First free position, trying the default orientation before rotating.

    Returns:
        ``(position, orientation)`` or None when the panel is unavailable
        in the current layout.
    """
    for orientation in (PanelOrientation.DEFAULT, PanelOrientation.ROTATED):
        position = find_first_fit(grid, definition, orientation, occupied, lookup)
        if position is not None:
            return position, orientation
    return None


def availability_map(
    definitions: Iterable[PanelDefinition],
    grid: GridSize,
    occupied: Sequence[PanelInstance],
    lookup: DefinitionLookup,
) -> dict[str, bool]:
    """Map each definition id to whether it can still be placed somewhere."""
    return {
        definition.id: find_placement(grid, definition, occupied, lookup) is not None
        for definition in definitions
    }


def mm_to_cells(millimeters: float) -> float:
    return millimeters / GRID_UNIT_MM


def mm_to_cm(millimeters: float) -> str:
    """Centimeters with one decimal, as shown in panel details."""
    return f"{millimeters / 10:.1f}"
