"""Exporter framework for drawer layout outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- json: Layout in wire format with per-panel details and total price
- pdf: One-page (or longer) PDF of the itemized summary
- txt: Plain-text itemized summary

Usage:
    from drawers.infrastructure.exporters import ExportDocument, ExporterRegistry

    document = ExportDocument(state=layout, lookup=registry.get)
    exporter = ExporterRegistry.get("txt")()
    print(exporter.export_string(document))
"""

from .base import (
    ExportDocument,
    Exporter,
    ExporterRegistry,
    ExportManager,
    file_stem,
    render_export,
)
from .json_exporter import LayoutJsonExporter
from .pdf import PdfSummaryExporter, paginate, render_pdf
from .text import TextSummaryExporter

__all__ = [
    "ExportDocument",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "LayoutJsonExporter",
    "PdfSummaryExporter",
    "TextSummaryExporter",
    "file_stem",
    "paginate",
    "render_export",
    "render_pdf",
]
