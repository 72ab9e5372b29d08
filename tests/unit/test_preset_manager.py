"""Tests for PresetManager."""

from __future__ import annotations

import pytest

from drawers.application.presets import (
    PRESET_IDS,
    Preset,
    PresetManager,
    PresetNotFoundError,
)
from drawers.domain import (
    GridSize,
    PanelOrientation,
    PanelRegistry,
    compute_grid,
    fits,
    others,
)


@pytest.fixture
def manager() -> PresetManager:
    return PresetManager()


class TestListPresets:
    """Tests for list_presets."""

    def test_lists_bundled_presets(self, manager: PresetManager) -> None:
        presets = manager.list_presets()
        assert [preset_id for preset_id, _, _ in presets] == ["starter-kitchen", "desk-pro"]
        assert tuple(preset_id for preset_id, _, _ in presets) == PRESET_IDS
        assert [name for _, name, _ in presets] == ["Kitchen starter", "Desk PRO"]

    def test_preset_exists(self, manager: PresetManager) -> None:
        assert manager.preset_exists("desk-pro")
        assert not manager.preset_exists("garage")


class TestGetPreset:
    """Tests for get_preset."""

    def test_starter_kitchen(self, manager: PresetManager) -> None:
        preset = manager.get_preset("starter-kitchen")
        assert isinstance(preset, Preset)
        assert preset.name == "Kitchen starter"
        assert preset.layout.grid == GridSize(7, 10)
        assert [p.custom_label for p in preset.layout.panels] == [
            "Knives",
            "Forks",
            "Spices",
            "Accessories",
        ]

    def test_desk_pro_has_rotated_panel(self, manager: PresetManager) -> None:
        preset = manager.get_preset("desk-pro")
        assert preset.layout.grid == GridSize(8, 9)
        pens = preset.layout.panels[-1]
        assert pens.custom_label == "Pens"
        assert pens.orientation is PanelOrientation.ROTATED

    def test_unknown_preset_raises(self, manager: PresetManager) -> None:
        with pytest.raises(PresetNotFoundError) as exc_info:
            manager.get_preset("garage")
        assert exc_info.value.preset_id == "garage"

    @pytest.mark.parametrize("preset_id", list(PRESET_IDS))
    def test_presets_are_valid_layouts(
        self, manager: PresetManager, registry: PanelRegistry, preset_id: str
    ) -> None:
        """Every bundled layout resolves, stays in bounds and has no overlaps."""
        layout = manager.get_preset(preset_id).layout
        assert layout.grid == compute_grid(layout.drawer)
        for panel in layout.panels:
            definition = registry.get(panel.definition_id)
            assert definition is not None
            assert fits(
                layout.grid,
                definition,
                panel.orientation,
                panel.position,
                others(layout.panels, panel.instance_id),
                registry.get,
            )


class TestInstantiate:
    """Tests for Preset.instantiate."""

    def test_fresh_ids_every_time(self, manager: PresetManager) -> None:
        preset = manager.get_preset("starter-kitchen")
        first = preset.instantiate()
        second = preset.instantiate()

        stored_ids = {p.instance_id for p in preset.layout.panels}
        first_ids = {p.instance_id for p in first.panels}
        second_ids = {p.instance_id for p in second.panels}
        assert not stored_ids & first_ids
        assert not first_ids & second_ids
        assert len(first_ids) == len(first.panels)

    def test_everything_else_preserved(self, manager: PresetManager) -> None:
        preset = manager.get_preset("desk-pro")
        layout = preset.instantiate()
        assert layout.drawer == preset.layout.drawer
        assert [(p.definition_id, p.x, p.y, p.orientation, p.custom_label) for p in layout.panels] == [
            (p.definition_id, p.x, p.y, p.orientation, p.custom_label) for p in preset.layout.panels
        ]
