"""Preset endpoints."""

from fastapi import APIRouter

from drawers.web.dependencies import PresetManagerDep, ServiceFactoryDep
from drawers.web.routers.layout import layout_response
from drawers.web.schemas.responses import (
    PresetListItemSchema,
    PresetListSchema,
    PresetSchema,
)

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("", response_model=PresetListSchema)
async def list_presets(
    manager: PresetManagerDep,
) -> PresetListSchema:
    """List all bundled presets."""
    presets = [
        PresetListItemSchema(id=preset_id, name=name, description=description)
        for preset_id, name, description in manager.list_presets()
    ]
    return PresetListSchema(presets=presets)


@router.get("/{preset_id}", response_model=PresetSchema)
async def get_preset(
    preset_id: str,
    manager: PresetManagerDep,
    factory: ServiceFactoryDep,
) -> PresetSchema:
    """Load a preset with fresh panel instance ids.

    Raises:
        PresetNotFoundError: If the preset does not exist (handled by exception handler).
    """
    preset = manager.get_preset(preset_id)
    controller = factory.create_controller()
    controller.load_preset(preset)

    base = layout_response(controller, factory)
    return PresetSchema(
        **base.model_dump(),
        id=preset.id,
        name=preset.name,
        description=preset.description,
    )
