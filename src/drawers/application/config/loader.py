"""Catalog and layout document loading with structured error reporting.

Catalog files are JSON documents validated against
:class:`~drawers.application.config.schema.CatalogConfig`. Errors are
raised as :class:`ConfigError` carrying a category and per-field details
that the CLI and the REST API both render.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from drawers.application.config.adapter import config_to_definitions
from drawers.application.config.schema import CatalogConfig
from drawers.domain.value_objects import PanelDefinition

DEFAULT_CATALOG_PACKAGE = "drawers.application.config.data"
DEFAULT_CATALOG_FILE = "panels.json"


class ConfigError(Exception):
    """Exception raised for catalog or layout document errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation)
        path: Path to the offending file (if applicable)
        details: Additional error details (line/column for JSON, validation
            errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("panels", 0, "gridWidth"))
        'panels[0].gridWidth'
        >>> format_json_path(("currency",))
        'currency'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into detail dictionaries."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Catalog validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_catalog_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> CatalogConfig:
    """Validate catalog data that has already been parsed.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return CatalogConfig.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def _read_catalog_text(path: Path | None) -> str:
    if path is None:
        data_files = resources.files(DEFAULT_CATALOG_PACKAGE)
        return data_files.joinpath(DEFAULT_CATALOG_FILE).read_text(encoding="utf-8")

    if not path.exists():
        raise ConfigError(
            message=f"Catalog file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading catalog file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def load_catalog_config(path: Path | None = None) -> CatalogConfig:
    """Load and validate a catalog file.

    Args:
        path: Catalog JSON file. The bundled catalog is used when None.

    Returns:
        The validated CatalogConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON or
            does not match the catalog schema.
    """
    content = _read_catalog_text(path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in catalog file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message="Catalog root must be a JSON object",
            error_type="validation",
            path=path,
            details=[{"path": "", "message": "Expected an object"}],
        )

    return load_catalog_from_dict(data, path)


def load_catalog(path: Path | None = None) -> list[PanelDefinition]:
    """Load catalog definitions ready for ``PanelRegistry.register_panels``."""
    return config_to_definitions(load_catalog_config(path))
