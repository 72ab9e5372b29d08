"""Layout editing endpoints.

Every endpoint reads the current layout from the ``layout`` query
parameter and answers with the resulting layout and its new token.
"""

from fastapi import APIRouter

from drawers.application.controller import LayoutController, PlacementResult
from drawers.application.factory import ServiceFactory
from drawers.domain import PanelInstance, PanelOrientation, Position, find_instance
from drawers.domain.registry import PanelRegistry
from drawers.domain.value_objects import LayoutState
from drawers.web.dependencies import ControllerDep, ServiceFactoryDep
from drawers.web.exceptions import LayoutRejectedError
from drawers.web.schemas.common import (
    DrawerSchema,
    GridSchema,
    OrientationEnum,
    PanelInstanceSchema,
)
from drawers.web.schemas.requests import (
    AutoPlaceRequest,
    DrawerRequest,
    MovePanelRequest,
    PlacePanelRequest,
    RenamePanelRequest,
)
from drawers.web.schemas.responses import (
    LayoutResponseSchema,
    LayoutSchema,
    PlacementResponseSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def panel_to_schema(panel: PanelInstance, registry: PanelRegistry) -> PanelInstanceSchema:
    definition = registry.get(panel.definition_id)
    return PanelInstanceSchema(
        instance_id=panel.instance_id,
        definition_id=panel.definition_id,
        x=panel.x,
        y=panel.y,
        orientation=OrientationEnum(panel.orientation.value),
        custom_label=panel.custom_label,
        label=panel.display_label(definition) if definition is not None else None,
    )


def layout_to_schema(state: LayoutState, registry: PanelRegistry) -> LayoutSchema:
    return LayoutSchema(
        drawer=DrawerSchema(
            width_mm=state.drawer.width_mm,
            depth_mm=state.drawer.depth_mm,
            height_mm=state.drawer.height_mm,
        ),
        grid=GridSchema(columns=state.grid.columns, rows=state.grid.rows),
        panels=[panel_to_schema(panel, registry) for panel in state.panels],
    )


def layout_response(
    controller: LayoutController, factory: ServiceFactory
) -> LayoutResponseSchema:
    """Serialize the controller's layout with its token and total."""
    return LayoutResponseSchema(
        layout=layout_to_schema(controller.state, controller.registry),
        token=controller.share_token(factory.get_codec()),
        total_price=controller.total_price(),
        currency=factory.get_catalog().currency,
    )


def _placement_response(
    result: PlacementResult, controller: LayoutController, factory: ServiceFactory
) -> PlacementResponseSchema:
    if not result.accepted:
        raise LayoutRejectedError(result.notice or "The change was rejected.")
    base = layout_response(controller, factory)
    return PlacementResponseSchema(
        **base.model_dump(),
        panel=panel_to_schema(result.panel, controller.registry),
    )


@router.get("", response_model=LayoutResponseSchema)
async def get_layout(
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> LayoutResponseSchema:
    """Decode a layout token.

    Missing or unreadable tokens yield the empty default layout.
    """
    return layout_response(controller, factory)


@router.post("/drawer", response_model=LayoutResponseSchema)
async def set_drawer(
    request: DrawerRequest,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> LayoutResponseSchema:
    """Change the drawer size; panels outside the new grid are removed."""
    controller.set_drawer(request.width_mm, request.depth_mm, request.height_mm)
    return layout_response(controller, factory)


@router.post("/panels", response_model=PlacementResponseSchema)
async def place_panel(
    request: PlacePanelRequest,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> PlacementResponseSchema:
    """Place a panel at a given cell (409 when it does not fit)."""
    result = controller.place_panel(
        request.definition_id,
        Position(request.x, request.y),
        PanelOrientation(request.orientation.value),
    )
    return _placement_response(result, controller, factory)


@router.post("/panels/auto", response_model=PlacementResponseSchema)
async def auto_place_panel(
    request: AutoPlaceRequest,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> PlacementResponseSchema:
    """Place a panel at the first free position, rotating it if needed."""
    result = controller.auto_place(request.definition_id)
    return _placement_response(result, controller, factory)


@router.post("/panels/{instance_id}/move", response_model=PlacementResponseSchema)
async def move_panel(
    instance_id: str,
    request: MovePanelRequest,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> PlacementResponseSchema:
    result = controller.move_panel(instance_id, Position(request.x, request.y))
    return _placement_response(result, controller, factory)


@router.post("/panels/{instance_id}/rotate", response_model=PlacementResponseSchema)
async def rotate_panel(
    instance_id: str,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> PlacementResponseSchema:
    result = controller.rotate_panel(instance_id)
    return _placement_response(result, controller, factory)


@router.post("/panels/{instance_id}/rename", response_model=PlacementResponseSchema)
async def rename_panel(
    instance_id: str,
    request: RenamePanelRequest,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> PlacementResponseSchema:
    result = controller.rename_panel(instance_id, request.label)
    return _placement_response(result, controller, factory)


@router.delete("/panels/{instance_id}", response_model=LayoutResponseSchema)
async def remove_panel(
    instance_id: str,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> LayoutResponseSchema:
    if find_instance(controller.state, instance_id) is None:
        raise LayoutRejectedError(f"Unknown panel instance '{instance_id}'.")
    controller.remove_panel(instance_id)
    return layout_response(controller, factory)
