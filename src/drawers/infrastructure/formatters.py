"""Plain-text formatters for drawer layouts."""

from __future__ import annotations

from drawers.domain.geometry import DefinitionLookup, footprint
from drawers.domain.pricing import format_price, total_price
from drawers.domain.value_objects import LayoutState

SUMMARY_TITLE = "Gridfinity Configurator"


class LayoutSummaryFormatter:
    """Formats the itemized layout summary handed to document exporters.

    Panels whose definition cannot be resolved are left out of the list
    and of the total. Items keep their 1-based position in the layout, so
    numbering has gaps when something is skipped.
    """

    def __init__(self, currency: str = "PLN") -> None:
        self._currency = currency

    def format(self, state: LayoutState, lookup: DefinitionLookup) -> str:
        drawer = state.drawer
        grid = state.grid
        lines = [
            SUMMARY_TITLE,
            "-" * len(SUMMARY_TITLE),
            f"Drawer: {drawer.width_mm}mm × {drawer.depth_mm}mm × {drawer.height_mm}mm "
            f"({grid.columns}×{grid.rows} cells)",
            "",
            "Panels:",
        ]

        listed = 0
        for index, panel in enumerate(state.panels, start=1):
            definition = lookup(panel.definition_id)
            if definition is None:
                continue
            size = footprint(definition, panel.orientation)
            lines.append(
                f"{index}. {panel.display_label(definition)} – "
                f"{size.width}×{size.height} cells, "
                f"orientation: {panel.orientation.label} "
                f"(x: {panel.x + 1}, y: {panel.y + 1})"
            )
            listed += 1

        if not listed:
            lines.append("(no panels)")

        total = total_price(state.panels, lookup)
        lines.append("")
        lines.append(f"Total cost: {format_price(total)} {self._currency}")
        return "\n".join(lines)


def render_summary(
    state: LayoutState, lookup: DefinitionLookup, currency: str = "PLN"
) -> str:
    """Summary text with the default formatter settings."""
    return LayoutSummaryFormatter(currency=currency).format(state, lookup)
