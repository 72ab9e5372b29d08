"""Panel catalog endpoint."""

from fastapi import APIRouter

from drawers.domain.geometry import mm_to_cm
from drawers.web.dependencies import ControllerDep, ServiceFactoryDep
from drawers.web.schemas.responses import CatalogPanelSchema, CatalogSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogSchema)
async def get_catalog(
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> CatalogSchema:
    """List catalog panels with their availability in the given layout.

    Args:
        controller: Controller holding the layout from the query string.
        factory: Injected ServiceFactory.

    Returns:
        Catalog panels in catalog order.
    """
    availability = controller.availability()
    panels = [
        CatalogPanelSchema(
            id=definition.id,
            name=definition.name,
            grid_width=definition.grid_width,
            grid_height=definition.grid_height,
            width_cm=mm_to_cm(definition.width_mm),
            depth_cm=mm_to_cm(definition.depth_mm),
            price=definition.price,
            category=definition.category.value,
            sample_items=list(definition.sample_items),
            description=definition.description,
            image=definition.image,
            preview_model=definition.preview_model,
            available=availability[definition.id],
        )
        for definition in controller.registry.definitions()
    ]
    return CatalogSchema(currency=factory.get_catalog().currency, panels=panels)
