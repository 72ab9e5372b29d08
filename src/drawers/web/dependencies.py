"""FastAPI dependency injection for drawer services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query

from drawers.application.controller import LayoutController
from drawers.application.factory import ServiceFactory, get_factory
from drawers.application.presets import PresetManager
from drawers.application.share import LAYOUT_QUERY_KEY


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_controller(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
    layout: Annotated[
        str | None,
        Query(alias=LAYOUT_QUERY_KEY, description="Share token of the current layout"),
    ] = None,
) -> LayoutController:
    """Controller holding the layout from the ``layout`` query parameter.

    Unreadable tokens yield the empty default layout.
    """
    return factory.create_controller(layout)


def get_preset_manager(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PresetManager:
    """Dependency for PresetManager."""
    return factory.get_preset_manager()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
ControllerDep = Annotated[LayoutController, Depends(get_controller)]
PresetManagerDep = Annotated[PresetManager, Depends(get_preset_manager)]
