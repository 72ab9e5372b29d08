"""API routers for the REST API."""

from drawers.web.routers.catalog import router as catalog_router
from drawers.web.routers.export import router as export_router
from drawers.web.routers.layout import router as layout_router
from drawers.web.routers.presets import router as presets_router

__all__ = [
    "catalog_router",
    "export_router",
    "layout_router",
    "presets_router",
]
