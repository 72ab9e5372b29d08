"""Preset manager for bundled example layouts.

Presets are templates: loading one installs a copy of its layout in
which every panel has a freshly minted instance id, so two loads of the
same preset never share instances.
"""

import json
from dataclasses import dataclass
from importlib import resources

from pydantic import ValidationError as PydanticValidationError

from drawers.application.config.adapter import config_to_layout
from drawers.application.config.loader import ConfigError, extract_validation_errors
from drawers.application.config.schema import PresetConfig
from drawers.domain.layout import remint_panels
from drawers.domain.value_objects import LayoutState


class PresetNotFoundError(Exception):
    """Raised when a requested preset does not exist."""

    def __init__(self, preset_id: str) -> None:
        self.preset_id = preset_id
        super().__init__(f"Preset not found: {preset_id}")


# Bundled presets in display order; names and descriptions live in the files.
PRESET_IDS: tuple[str, ...] = ("starter-kitchen", "desk-pro")


@dataclass(frozen=True)
class Preset:
    """A named example layout.

    ``layout`` keeps the instance ids stored in the preset file; use
    :meth:`instantiate` to get a layout with fresh ids.
    """

    id: str
    name: str
    description: str
    layout: LayoutState

    def instantiate(self) -> LayoutState:
        return remint_panels(self.layout)


class PresetManager:
    """Manager for bundled layout presets.

    Example:
        manager = PresetManager()
        for preset_id, name, description in manager.list_presets():
            print(f"{preset_id}: {name}")

        layout = manager.get_preset("desk-pro").instantiate()
    """

    def __init__(self) -> None:
        self._data_package = "drawers.application.presets.data"

    def list_presets(self) -> list[tuple[str, str, str]]:
        """List presets as (id, name, description) tuples."""
        presets = [self.get_preset(preset_id) for preset_id in PRESET_IDS]
        return [(preset.id, preset.name, preset.description) for preset in presets]

    def get_preset(self, preset_id: str) -> Preset:
        """Load a bundled preset.

        Raises:
            PresetNotFoundError: If the preset does not exist.
            ConfigError: If the bundled file is not a valid preset document.
        """
        if preset_id not in PRESET_IDS:
            raise PresetNotFoundError(preset_id)

        filename = f"{preset_id}.json"
        try:
            data_files = resources.files(self._data_package)
            content = data_files.joinpath(filename).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PresetNotFoundError(preset_id) from e

        try:
            config = PresetConfig.model_validate(json.loads(content))
        except json.JSONDecodeError as e:
            raise ConfigError(
                message=f"Invalid JSON in preset '{preset_id}': {e.msg}",
                error_type="json_parse",
                details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
            )
        except PydanticValidationError as e:
            raise ConfigError(
                message=f"Invalid preset '{preset_id}'",
                error_type="validation",
                details=extract_validation_errors(e),
            )

        return Preset(
            id=config.id,
            name=config.name,
            description=config.description,
            layout=config_to_layout(config.layout),
        )

    def preset_exists(self, preset_id: str) -> bool:
        return preset_id in PRESET_IDS
