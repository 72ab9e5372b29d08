"""Tests for grid geometry and the fit engine."""

from __future__ import annotations

import pytest

from drawers.domain import (
    DrawerSize,
    Footprint,
    GridSize,
    PanelDefinition,
    PanelInstance,
    PanelOrientation,
    PanelRegistry,
    Position,
    Rect,
    availability_map,
    compute_grid,
    find_first_fit,
    find_placement,
    fits,
    footprint,
    mm_to_cells,
    mm_to_cm,
    others,
    rectangles_overlap,
    within_grid,
)

DEFAULT = PanelOrientation.DEFAULT
ROTATED = PanelOrientation.ROTATED


def _place(definition_id: str, x: int, y: int, orientation=DEFAULT, instance_id=None):
    return PanelInstance(
        instance_id=instance_id or f"{definition_id}@{x},{y}",
        definition_id=definition_id,
        x=x,
        y=y,
        orientation=orientation,
    )


# =============================================================================
# Grid derivation
# =============================================================================


class TestComputeGrid:
    """Tests for compute_grid."""

    def test_default_drawer(self) -> None:
        """300 x 420 mm holds 7 x 10 cells of 42 mm."""
        assert compute_grid(DrawerSize(300, 420, 60)) == GridSize(7, 10)

    def test_exact_multiple(self) -> None:
        assert compute_grid(DrawerSize(336, 378, 50)) == GridSize(8, 9)

    def test_at_least_one_cell_each_way(self) -> None:
        assert compute_grid(DrawerSize(10, 41, 60)) == GridSize(1, 1)

    def test_depends_only_on_drawer(self) -> None:
        drawer = DrawerSize(500, 700, 80)
        assert compute_grid(drawer) == compute_grid(drawer)


class TestFootprint:
    """Tests for footprint under orientation."""

    def test_default_is_identity(self, bin_2x3: PanelDefinition) -> None:
        assert footprint(bin_2x3, DEFAULT) == Footprint(2, 3)

    def test_rotated_swaps(self, bin_2x3: PanelDefinition) -> None:
        assert footprint(bin_2x3, ROTATED) == Footprint(3, 2)


# =============================================================================
# Rectangles and bounds
# =============================================================================


class TestRectanglesOverlap:
    """Tests for rectangles_overlap."""

    def test_overlapping(self) -> None:
        assert rectangles_overlap(Rect(0, 0, 2, 2), Rect(1, 1, 2, 2))

    def test_contained(self) -> None:
        assert rectangles_overlap(Rect(0, 0, 4, 4), Rect(1, 1, 1, 1))

    @pytest.mark.parametrize(
        "other",
        [Rect(2, 0, 1, 2), Rect(0, 2, 2, 1), Rect(-1, 0, 1, 2), Rect(0, -1, 2, 1)],
    )
    def test_touching_edges_do_not_overlap(self, other: Rect) -> None:
        assert not rectangles_overlap(Rect(0, 0, 2, 2), other)

    def test_separated(self) -> None:
        assert not rectangles_overlap(Rect(0, 0, 1, 1), Rect(5, 5, 1, 1))

    def test_symmetric(self) -> None:
        a, b = Rect(0, 0, 3, 1), Rect(2, 0, 1, 3)
        assert rectangles_overlap(a, b) == rectangles_overlap(b, a)


class TestWithinGrid:
    """Tests for within_grid."""

    def test_inside(self) -> None:
        assert within_grid(GridSize(7, 10), Footprint(2, 3), Position(5, 7))

    def test_beyond_right_edge(self) -> None:
        assert not within_grid(GridSize(7, 10), Footprint(2, 3), Position(6, 0))

    def test_beyond_bottom_edge(self) -> None:
        assert not within_grid(GridSize(7, 10), Footprint(2, 3), Position(0, 8))

    def test_negative_coordinates(self) -> None:
        assert not within_grid(GridSize(7, 10), Footprint(1, 1), Position(-1, 0))
        assert not within_grid(GridSize(7, 10), Footprint(1, 1), Position(0, -1))


# =============================================================================
# Fit checks
# =============================================================================


class TestFits:
    """Tests for fits."""

    grid = GridSize(7, 10)

    def test_empty_grid(self, registry: PanelRegistry, bin_1x2: PanelDefinition) -> None:
        assert fits(self.grid, bin_1x2, DEFAULT, Position(0, 0), [], registry.get)

    @pytest.mark.parametrize("position", [Position(-1, 0), Position(0, -1), Position(7, 0), Position(0, 9)])
    def test_out_of_bounds_rejected_regardless_of_occupancy(
        self, registry: PanelRegistry, bin_1x2: PanelDefinition, position: Position
    ) -> None:
        assert not fits(self.grid, bin_1x2, DEFAULT, position, [], registry.get)

    def test_same_cell_rejected(self, registry: PanelRegistry, bin_1x2: PanelDefinition) -> None:
        occupied = [_place(bin_1x2.id, 0, 0)]
        assert not fits(self.grid, bin_1x2, DEFAULT, Position(0, 0), occupied, registry.get)

    def test_partial_overlap_rejected(self, registry: PanelRegistry, bin_1x2: PanelDefinition) -> None:
        """A 1x2 at (0,1) shares cell (0,1) with a 1x2 at (0,0)."""
        occupied = [_place(bin_1x2.id, 0, 0)]
        assert not fits(self.grid, bin_1x2, DEFAULT, Position(0, 1), occupied, registry.get)

    def test_edge_adjacent_accepted(self, registry: PanelRegistry, bin_1x2: PanelDefinition) -> None:
        occupied = [_place(bin_1x2.id, 0, 0)]
        assert fits(self.grid, bin_1x2, DEFAULT, Position(0, 2), occupied, registry.get)
        assert fits(self.grid, bin_1x2, DEFAULT, Position(1, 0), occupied, registry.get)

    def test_occupied_orientation_is_respected(
        self, registry: PanelRegistry, bin_1x1: PanelDefinition, bin_1x2: PanelDefinition
    ) -> None:
        """A rotated 1x2 at (0,0) covers (1,0), not (0,1)."""
        occupied = [_place(bin_1x2.id, 0, 0, ROTATED)]
        assert not fits(self.grid, bin_1x1, DEFAULT, Position(1, 0), occupied, registry.get)
        assert fits(self.grid, bin_1x1, DEFAULT, Position(0, 1), occupied, registry.get)

    def test_unresolvable_occupied_instances_are_ignored(
        self, registry: PanelRegistry, bin_1x1: PanelDefinition
    ) -> None:
        occupied = [_place("discontinued-bin", 0, 0)]
        assert fits(self.grid, bin_1x1, DEFAULT, Position(0, 0), occupied, registry.get)

    def test_rotated_2x3_fits_3x2_hole_only_when_rotated(
        self, registry: PanelRegistry, bin_2x3: PanelDefinition
    ) -> None:
        """On a 3x2 grid the 2x3 panel only fits as a 3x2 footprint."""
        grid = GridSize(3, 2)
        assert not fits(grid, bin_2x3, DEFAULT, Position(0, 0), [], registry.get)
        assert fits(grid, bin_2x3, ROTATED, Position(0, 0), [], registry.get)

    def test_self_exclusion_with_others(self, registry: PanelRegistry, bin_2x2: PanelDefinition) -> None:
        """Moving a panel by one cell only works once it is left out of occupied."""
        panel = _place(bin_2x2.id, 0, 0, instance_id="moving")
        panels = [panel]
        assert not fits(self.grid, bin_2x2, DEFAULT, Position(1, 0), panels, registry.get)
        assert fits(
            self.grid, bin_2x2, DEFAULT, Position(1, 0), others(panels, "moving"), registry.get
        )


class TestOthers:
    """Tests for others."""

    def test_excludes_only_matching_instance(self) -> None:
        a, b = _place("p", 0, 0, instance_id="a"), _place("p", 1, 0, instance_id="b")
        assert others([a, b], "a") == [b]
        assert others([a, b], "missing") == [a, b]


# =============================================================================
# Search
# =============================================================================


class TestFindFirstFit:
    """Tests for find_first_fit."""

    def test_empty_grid_returns_origin(self, registry: PanelRegistry, bin_2x2: PanelDefinition) -> None:
        assert find_first_fit(GridSize(7, 10), bin_2x2, DEFAULT, [], registry.get) == Position(0, 0)

    def test_row_major_scan(self, registry: PanelRegistry, bin_1x1: PanelDefinition) -> None:
        """The first free cell on the top row wins over cells further down."""
        occupied = [_place(bin_1x1.id, 0, 0), _place(bin_1x1.id, 1, 0)]
        assert find_first_fit(GridSize(3, 3), bin_1x1, DEFAULT, occupied, registry.get) == Position(2, 0)

    def test_full_grid_returns_none(self, registry: PanelRegistry, bin_1x1: PanelDefinition) -> None:
        occupied = [_place(bin_1x1.id, 0, 0)]
        assert find_first_fit(GridSize(1, 1), bin_1x1, DEFAULT, occupied, registry.get) is None

    def test_oversized_footprint_on_huge_grid(self, registry: PanelRegistry, bin_3x3: PanelDefinition) -> None:
        """A panel taller than the grid is rejected without scanning its columns."""
        grid = GridSize(10**9, 2)
        assert find_first_fit(grid, bin_3x3, DEFAULT, [], registry.get) is None
        assert find_placement(grid, bin_3x3, [], registry.get) is None

    def test_last_fitting_column(self, registry: PanelRegistry, bin_2x2: PanelDefinition) -> None:
        occupied = [_place(bin_2x2.id, 0, 0), _place(bin_2x2.id, 2, 0)]
        assert find_first_fit(GridSize(6, 2), bin_2x2, DEFAULT, occupied, registry.get) == Position(4, 0)


class TestFindPlacement:
    """Tests for find_placement."""

    def test_prefers_default_orientation(self, registry: PanelRegistry, bin_2x3: PanelDefinition) -> None:
        assert find_placement(GridSize(7, 10), bin_2x3, [], registry.get) == (Position(0, 0), DEFAULT)

    def test_falls_back_to_rotated(self, registry: PanelRegistry, bin_2x3: PanelDefinition) -> None:
        assert find_placement(GridSize(3, 2), bin_2x3, [], registry.get) == (Position(0, 0), ROTATED)

    def test_unavailable(self, registry: PanelRegistry, bin_3x3: PanelDefinition) -> None:
        assert find_placement(GridSize(2, 2), bin_3x3, [], registry.get) is None


class TestAvailabilityMap:
    """Tests for availability_map."""

    def test_small_grid(self, registry: PanelRegistry) -> None:
        availability = availability_map(registry, GridSize(2, 2), [], registry.get)
        assert availability == {
            "gridfinity-bin-1x1": True,
            "gridfinity-bin-1x2": True,
            "gridfinity-bin-2x2": True,
            "gridfinity-bin-2x3": False,
            "gridfinity-bin-3x3": False,
        }

    def test_reflects_occupancy(self, registry: PanelRegistry, bin_2x2: PanelDefinition) -> None:
        occupied = [_place(bin_2x2.id, 0, 0)]
        availability = availability_map(registry, GridSize(2, 2), occupied, registry.get)
        assert not any(availability.values())


class TestConversions:
    """Tests for unit conversions."""

    def test_mm_to_cells(self) -> None:
        assert mm_to_cells(84) == 2

    def test_mm_to_cm_one_decimal(self) -> None:
        assert mm_to_cm(42) == "4.2"
        assert mm_to_cm(126) == "12.6"
        assert mm_to_cm(300) == "30.0"
