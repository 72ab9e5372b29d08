"""JSON exporter: the layout in wire format plus derived totals.

The ``layout`` member is exactly what a share token carries, so an
exported file can be turned back into a link.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar

from drawers.application.config.adapter import layout_to_dict
from drawers.domain.geometry import footprint
from drawers.domain.pricing import total_price
from drawers.infrastructure.exporters.base import ExportDocument, ExporterRegistry

# Current schema version for exported JSON
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class LayoutJsonExporter:
    """Exports the layout, per-panel details and the total price.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2, include_summary: bool = True) -> None:
        self.indent = indent
        self.include_summary = include_summary

    def export(self, document: ExportDocument, path: Path) -> None:
        path.write_text(self.export_string(document), encoding="utf-8")

    def export_string(self, document: ExportDocument) -> str:
        return json.dumps(
            self._build(document), indent=self.indent, ensure_ascii=False
        )

    def _build(self, document: ExportDocument) -> dict[str, Any]:
        state = document.state
        items: list[dict[str, Any]] = []
        for panel in state.panels:
            definition = document.lookup(panel.definition_id)
            if definition is None:
                continue
            size = footprint(definition, panel.orientation)
            items.append(
                {
                    "instanceId": panel.instance_id,
                    "label": panel.display_label(definition),
                    "width": size.width,
                    "height": size.height,
                    "price": definition.price,
                }
            )

        data: dict[str, Any] = {
            "schemaVersion": SCHEMA_VERSION,
            "layout": layout_to_dict(state),
            "items": items,
            "totalPrice": total_price(state.panels, document.lookup),
            "currency": document.currency,
        }
        if self.include_summary:
            data["summary"] = document.summary()
        return data
