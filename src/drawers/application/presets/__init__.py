"""Bundled example layouts and the PresetManager for accessing them."""

from drawers.application.presets.manager import (
    PRESET_IDS,
    Preset,
    PresetManager,
    PresetNotFoundError,
)

__all__ = [
    "PRESET_IDS",
    "Preset",
    "PresetManager",
    "PresetNotFoundError",
]
