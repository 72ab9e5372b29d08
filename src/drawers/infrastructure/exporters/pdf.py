"""PDF exporter: the layout summary on A4 pages.

Draws one summary line per text line with reportlab's built-in Helvetica
font, starting a new page when the current one is full.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import ClassVar

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from drawers.infrastructure.exporters.base import ExportDocument, ExporterRegistry

logger = logging.getLogger(__name__)

MARGIN_LEFT = 72
TOP_BASELINE = 800
BOTTOM_MARGIN = 40
LINE_HEIGHT = 18
FONT_NAME = "Helvetica"
FONT_SIZE = 12
LINES_PER_PAGE = (TOP_BASELINE - BOTTOM_MARGIN) // LINE_HEIGHT


def paginate(text: str, lines_per_page: int = LINES_PER_PAGE) -> list[list[str]]:
    """Split ``text`` into pages of at most ``lines_per_page`` lines.

    Always returns at least one (possibly empty) page.
    """
    lines = text.split("\n")
    return [
        lines[start:start + lines_per_page]
        for start in range(0, len(lines), lines_per_page)
    ] or [[]]


def render_pdf(text: str) -> bytes:
    """Render ``text`` as an uncompressed PDF document."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4, pageCompression=0)
    pdf.setTitle("Gridfinity Configurator")

    for page in paginate(text):
        pdf.setFont(FONT_NAME, FONT_SIZE)
        y = TOP_BASELINE
        for line in page:
            pdf.drawString(MARGIN_LEFT, y, line)
            y -= LINE_HEIGHT
        pdf.showPage()

    pdf.save()
    return buffer.getvalue()


@ExporterRegistry.register("pdf")
class PdfSummaryExporter:
    """Exports the layout summary as a downloadable PDF.

    Binary format: string export is not supported.
    """

    format_name: ClassVar[str] = "pdf"
    file_extension: ClassVar[str] = "pdf"

    def export(self, document: ExportDocument, path: Path) -> None:
        path.write_bytes(self.export_bytes(document))
        logger.debug(f"Wrote PDF summary to {path}")

    def export_bytes(self, document: ExportDocument) -> bytes:
        return render_pdf(document.summary())

    def export_string(self, document: ExportDocument) -> str:
        raise NotImplementedError("Format 'pdf' does not support string export")
