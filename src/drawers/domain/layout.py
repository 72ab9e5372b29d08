"""Layout state transitions.

The layout is never mutated in place. Every action is applied by
:func:`reduce_layout`, which returns a complete new :class:`LayoutState`.
Fit checks are deliberately not part of the reducer: callers validate
placements with :func:`drawers.domain.geometry.fits` before dispatching
``AddPanel`` or ``UpdatePanel``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Union

from .geometry import DefinitionLookup, compute_grid, footprint, within_grid
from .value_objects import (
    DEFAULT_DRAWER,
    DrawerSize,
    LayoutState,
    PanelInstance,
    PanelOrientation,
    Position,
)


@dataclass(frozen=True)
class SetDrawer:
    """Replace the drawer dimensions with raw user input."""

    drawer: DrawerSize


@dataclass(frozen=True)
class AddPanel:
    """Append an already fit-checked panel."""

    panel: PanelInstance


@dataclass(frozen=True)
class UpdatePanel:
    """Replace the panel with the same instance id."""

    panel: PanelInstance


@dataclass(frozen=True)
class RemovePanel:
    """Remove the panel with the given instance id."""

    instance_id: str


@dataclass(frozen=True)
class ReplaceLayout:
    """Install a complete layout as-is (presets, share links)."""

    layout: LayoutState


LayoutAction = Union[SetDrawer, AddPanel, UpdatePanel, RemovePanel, ReplaceLayout]


def initial_layout(drawer: DrawerSize = DEFAULT_DRAWER) -> LayoutState:
    """Empty layout for ``drawer``."""
    return LayoutState(drawer=drawer, grid=compute_grid(drawer), panels=())


def reduce_layout(
    state: LayoutState, action: LayoutAction, lookup: DefinitionLookup
) -> LayoutState:
    """Apply ``action`` to ``state`` and return the resulting layout.

    Args:
        state: Current layout.
        action: One of the layout actions.
        lookup: Resolves panel definitions; used when the drawer changes to
            drop panels that no longer fit.

    Returns:
        A new LayoutState. Unknown instance ids make update and remove
        no-ops that still return a fresh state.

    Raises:
        TypeError: If ``action`` is not a layout action.
    """
    if isinstance(action, SetDrawer):
        return _set_drawer(state, action.drawer, lookup)

    if isinstance(action, AddPanel):
        return replace(state, panels=(*state.panels, action.panel))

    if isinstance(action, UpdatePanel):
        updated = action.panel
        return replace(
            state,
            panels=tuple(
                updated if panel.instance_id == updated.instance_id else panel
                for panel in state.panels
            ),
        )

    if isinstance(action, RemovePanel):
        return replace(
            state,
            panels=tuple(
                panel for panel in state.panels
                if panel.instance_id != action.instance_id
            ),
        )

    if isinstance(action, ReplaceLayout):
        return action.layout

    raise TypeError(f"Unsupported layout action: {type(action).__name__}")


def _set_drawer(
    state: LayoutState, raw_drawer: DrawerSize, lookup: DefinitionLookup
) -> LayoutState:
    drawer = raw_drawer.clamped()
    grid = compute_grid(drawer)

    # Bounds only: panels keep their positions, so shrinking the grid
    # cannot create new overlaps among the survivors.
    survivors = []
    for panel in state.panels:
        definition = lookup(panel.definition_id)
        if definition is None:
            continue
        size = footprint(definition, panel.orientation)
        if within_grid(grid, size, panel.position):
            survivors.append(panel)

    return LayoutState(drawer=drawer, grid=grid, panels=tuple(survivors))


def new_instance_id() -> str:
    return str(uuid.uuid4())


def make_instance(
    definition_id: str,
    *,
    instance_id: str | None = None,
    x: int = 0,
    y: int = 0,
    orientation: PanelOrientation = PanelOrientation.DEFAULT,
    custom_label: str | None = None,
) -> PanelInstance:
    """Create a panel instance with a fresh id unless one is given."""
    return PanelInstance(
        instance_id=instance_id or new_instance_id(),
        definition_id=definition_id,
        x=x,
        y=y,
        orientation=orientation,
        custom_label=custom_label,
    )


def set_position(instance: PanelInstance, position: Position) -> PanelInstance:
    return replace(instance, x=position.x, y=position.y)


def set_label(instance: PanelInstance, text: str | None) -> PanelInstance:
    return replace(instance, custom_label=text)


def rotate_instance(instance: PanelInstance) -> PanelInstance:
    """Copy of ``instance`` with the orientation toggled."""
    return replace(instance, orientation=instance.orientation.toggled())


def remint_panels(layout: LayoutState) -> LayoutState:
    """Copy of ``layout`` where every panel gets a fresh instance id."""
    return replace(
        layout,
        panels=tuple(
            replace(panel, instance_id=new_instance_id()) for panel in layout.panels
        ),
    )


def find_instance(state: LayoutState, instance_id: str) -> PanelInstance | None:
    for panel in state.panels:
        if panel.instance_id == instance_id:
            return panel
    return None
