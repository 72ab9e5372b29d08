"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable, Protocol, runtime_checkable

from drawers.domain.geometry import DefinitionLookup
from drawers.domain.value_objects import LayoutState
from drawers.infrastructure.formatters import LayoutSummaryFormatter

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class ExportDocument:
    """Everything an exporter needs to describe a layout.

    Attributes:
        state: The layout to export.
        lookup: Resolves panel definitions (usually ``PanelRegistry.get``).
        currency: Currency shown next to prices.
    """

    state: LayoutState
    lookup: DefinitionLookup
    currency: str = "PLN"

    def summary(self) -> str:
        """Itemized plain-text summary of the layout."""
        return LayoutSummaryFormatter(currency=self.currency).format(
            self.state, self.lookup
        )


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert an ExportDocument to a specific format. Each exporter
    must define its format name and file extension, and implement at least
    the export method.

    Attributes:
        format_name: Registered name of the format (e.g., "pdf", "txt").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, document: ExportDocument, path: Path) -> None:
        """Export the document to a file.

        Args:
            document: The layout document to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, document: ExportDocument) -> str:
        """Export the document as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Exporter classes by format name.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Replacing the '{format_name}' exporter")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def unknown_formats(cls, formats: Iterable[str]) -> list[str]:
        """The names in ``formats`` that have no exporter, in request order."""
        return [name for name in formats if name not in cls._exporters]

    @classmethod
    def clear(cls) -> None:
        """Forget every exporter (tests only)."""
        cls._exporters.clear()


def render_export(format_name: str, document: ExportDocument) -> bytes:
    """Render ``document`` in memory, as the bytes a download would carry.

    Binary exporters provide ``export_bytes``; text formats are encoded
    as UTF-8.
    """
    exporter = ExporterRegistry.get(format_name)()
    export_bytes = getattr(exporter, "export_bytes", None)
    if export_bytes is not None:
        return export_bytes(document)
    return exporter.export_string(document).encode("utf-8")


def file_stem(project_name: str) -> str:
    """File-system safe base name; falls back to "drawer"."""
    stem = _UNSAFE_FILENAME_CHARS.sub("-", project_name.strip()).strip("-.")
    return stem or "drawer"


class ExportManager:
    """Writes a layout document to files in ``output_dir``.

    Files are named ``{stem}_{format}.{extension}`` where the stem is the
    project name with unsafe characters replaced.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: Iterable[str],
        document: ExportDocument,
        project_name: str = "drawer",
    ) -> dict[str, Path]:
        """Export ``document`` once per format.

        Every format is checked before anything is written, so an unknown
        name leaves the output directory untouched.

        Returns:
            Format name to written file path, in request order.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        requested = list(dict.fromkeys(formats))
        unknown = ExporterRegistry.unknown_formats(requested)
        if unknown:
            raise KeyError(f"No exporter registered for: {', '.join(unknown)}")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        stem = file_stem(project_name)

        results: dict[str, Path] = {}
        for format_name in requested:
            exporter = ExporterRegistry.get(format_name)()
            path = self.output_dir / f"{stem}_{format_name}.{exporter.file_extension}"
            exporter.export(document, path)
            logger.info(f"Exported {format_name} to {path}")
            results[format_name] = path
        return results

    def export_single(
        self,
        format_name: str,
        document: ExportDocument,
        project_name: str = "drawer",
    ) -> Path:
        return self.export_all([format_name], document, project_name)[format_name]
