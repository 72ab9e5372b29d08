"""Layout controller: the owner of the current layout.

The controller holds one :class:`LayoutState` and replaces it as a whole
on every transition, so readers never see a half-applied change. It also
implements the user workflows (place, move, rotate, rename, remove,
resize, presets, restore). Workflows run the fit checks the reducer leaves
to its callers; a rejected workflow returns a :class:`PlacementResult`
instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from drawers.domain.geometry import (
    availability_map,
    find_placement,
    fits,
    others,
)
from drawers.domain.layout import (
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
    rotate_instance,
    set_label,
    set_position,
)
from drawers.domain.pricing import total_price
from drawers.domain.registry import PanelRegistry
from drawers.domain.value_objects import (
    DrawerSize,
    LayoutState,
    PanelInstance,
    PanelOrientation,
    Position,
)

if TYPE_CHECKING:
    from drawers.application.codec import LayoutCodec
    from drawers.application.presets import Preset
    from drawers.infrastructure.formatters import LayoutSummaryFormatter

logger = logging.getLogger(__name__)

ROTATION_BLOCKED_NOTICE = "No room to rotate the panel at this position."
PLACEMENT_BLOCKED_NOTICE = "The panel does not fit at this position."
MOVE_BLOCKED_NOTICE = "The panel cannot be moved to this position."
UNAVAILABLE_NOTICE = "The panel is unavailable in the current layout."


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a placement workflow.

    Attributes:
        accepted: Whether the layout changed.
        panel: The placed or updated instance when accepted.
        notice: Message for the user when the workflow was declined.
    """

    accepted: bool
    panel: PanelInstance | None = None
    notice: str | None = None

    @classmethod
    def rejected(cls, notice: str) -> PlacementResult:
        return cls(accepted=False, panel=None, notice=notice)


class LayoutController:
    """Applies layout actions sequentially and runs the placement workflows.

    Args:
        registry: Initialized panel registry used for every lookup.
        state: Starting layout; the default empty layout when None.
    """

    def __init__(self, registry: PanelRegistry, state: LayoutState | None = None) -> None:
        self.registry = registry
        self._state = state if state is not None else initial_layout()

    @property
    def state(self) -> LayoutState:
        return self._state

    def dispatch(self, action: LayoutAction) -> LayoutState:
        """Install the layout produced by ``action`` and return it."""
        self._state = reduce_layout(self._state, action, self.registry.get)
        return self._state

    def set_drawer(self, width_mm: float, depth_mm: float, height_mm: float) -> LayoutState:
        """Commit new drawer dimensions; out-of-range values are clamped.

        Panels that no longer fit inside the new grid are dropped.
        """
        before = len(self._state.panels)
        state = self.dispatch(
            SetDrawer(DrawerSize(width_mm=width_mm, depth_mm=depth_mm, height_mm=height_mm))
        )
        dropped = before - len(state.panels)
        if dropped:
            logger.info(f"Drawer resize removed {dropped} panel(s) outside the new grid")
        return state

    def place_panel(
        self,
        definition_id: str,
        position: Position,
        orientation: PanelOrientation = PanelOrientation.DEFAULT,
    ) -> PlacementResult:
        definition = self.registry.get(definition_id)
        if definition is None:
            return PlacementResult.rejected(f"Unknown panel '{definition_id}'.")

        state = self._state
        if not fits(state.grid, definition, orientation, position, state.panels, self.registry.get):
            return PlacementResult.rejected(PLACEMENT_BLOCKED_NOTICE)

        instance = make_instance(
            definition_id, x=position.x, y=position.y, orientation=orientation
        )
        self.dispatch(AddPanel(instance))
        return PlacementResult(accepted=True, panel=instance)

    def auto_place(self, definition_id: str) -> PlacementResult:
        """Place a panel at the first free position (row-major, default first)."""
        definition = self.registry.get(definition_id)
        if definition is None:
            return PlacementResult.rejected(f"Unknown panel '{definition_id}'.")

        placement = find_placement(
            self._state.grid, definition, self._state.panels, self.registry.get
        )
        if placement is None:
            return PlacementResult.rejected(UNAVAILABLE_NOTICE)
        position, orientation = placement
        return self.place_panel(definition_id, position, orientation)

    def move_panel(self, instance_id: str, position: Position) -> PlacementResult:
        panel = find_instance(self._state, instance_id)
        if panel is None:
            return PlacementResult.rejected(f"Unknown panel instance '{instance_id}'.")
        moved = set_position(panel, position)
        return self._commit_if_fits(moved, MOVE_BLOCKED_NOTICE)

    def rotate_panel(self, instance_id: str) -> PlacementResult:
        """Toggle orientation in place; rejected when the new footprint collides."""
        panel = find_instance(self._state, instance_id)
        if panel is None:
            return PlacementResult.rejected(f"Unknown panel instance '{instance_id}'.")
        return self._commit_if_fits(rotate_instance(panel), ROTATION_BLOCKED_NOTICE)

    def rename_panel(self, instance_id: str, label: str | None) -> PlacementResult:
        """Set a custom label; a blank label restores the catalog name."""
        panel = find_instance(self._state, instance_id)
        if panel is None:
            return PlacementResult.rejected(f"Unknown panel instance '{instance_id}'.")
        text = label.strip() if label else ""
        renamed = set_label(panel, text or None)
        self.dispatch(UpdatePanel(renamed))
        return PlacementResult(accepted=True, panel=renamed)

    def remove_panel(self, instance_id: str) -> LayoutState:
        return self.dispatch(RemovePanel(instance_id))

    def replace_layout(self, layout: LayoutState) -> LayoutState:
        """Install ``layout`` without any validation."""
        return self.dispatch(ReplaceLayout(layout))

    def load_preset(self, preset: Preset) -> LayoutState:
        """Install a preset with freshly minted instance ids."""
        return self.replace_layout(preset.instantiate())

    def restore(self, token: str | None, codec: LayoutCodec) -> bool:
        """Load the layout in ``token``; fall back to the empty layout.

        Returns:
            True when the token was decoded.
        """
        result = codec.decode(token)
        if result.layout is None:
            self.replace_layout(initial_layout())
            return False
        self.replace_layout(result.layout)
        return True

    def share_token(self, codec: LayoutCodec) -> str:
        return codec.encode(self._state)

    def total_price(self) -> float:
        return total_price(self._state.panels, self.registry.get)

    def availability(self) -> dict[str, bool]:
        """Whether each catalog panel still fits somewhere on the grid."""
        return availability_map(
            self.registry, self._state.grid, self._state.panels, self.registry.get
        )

    def summary(self, formatter: LayoutSummaryFormatter | None = None) -> str:
        if formatter is None:
            from drawers.infrastructure.formatters import LayoutSummaryFormatter

            formatter = LayoutSummaryFormatter()
        return formatter.format(self._state, self.registry.get)

    def _commit_if_fits(self, candidate: PanelInstance, notice: str) -> PlacementResult:
        definition = self.registry.get(candidate.definition_id)
        if definition is None:
            return PlacementResult.rejected(
                f"Unknown panel '{candidate.definition_id}'."
            )

        state = self._state
        occupied = others(state.panels, candidate.instance_id)
        if not fits(
            state.grid,
            definition,
            candidate.orientation,
            candidate.position,
            occupied,
            self.registry.get,
        ):
            return PlacementResult.rejected(notice)

        self.dispatch(UpdatePanel(candidate))
        return PlacementResult(accepted=True, panel=candidate)
