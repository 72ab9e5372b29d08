"""Plain-text summary exporter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from drawers.infrastructure.exporters.base import ExportDocument, ExporterRegistry

logger = logging.getLogger(__name__)


@ExporterRegistry.register("txt")
class TextSummaryExporter:
    """Writes the itemized layout summary as UTF-8 text."""

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"

    def export(self, document: ExportDocument, path: Path) -> None:
        path.write_text(self.export_string(document) + "\n", encoding="utf-8")
        logger.debug(f"Wrote summary to {path}")

    def export_string(self, document: ExportDocument) -> str:
        return document.summary()
