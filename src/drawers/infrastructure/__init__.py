"""Infrastructure layer - summary formatting and file exporters."""

from .formatters import SUMMARY_TITLE, LayoutSummaryFormatter, render_summary

__all__ = [
    "LayoutSummaryFormatter",
    "SUMMARY_TITLE",
    "render_summary",
]
