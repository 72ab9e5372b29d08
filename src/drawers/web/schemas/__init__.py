"""Pydantic schemas for the REST API."""

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
    CatalogPanelSchema,
    CatalogSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutResponseSchema,
    LayoutSchema,
    PlacementResponseSchema,
    PresetListItemSchema,
    PresetListSchema,
    PresetSchema,
    SummarySchema,
)

__all__ = [
    # Common
    "DrawerSchema",
    "GridSchema",
    "OrientationEnum",
    "PanelInstanceSchema",
    # Requests
    "AutoPlaceRequest",
    "DrawerRequest",
    "MovePanelRequest",
    "PlacePanelRequest",
    "RenamePanelRequest",
    # Responses
    "CatalogPanelSchema",
    "CatalogSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutResponseSchema",
    "LayoutSchema",
    "PlacementResponseSchema",
    "PresetListItemSchema",
    "PresetListSchema",
    "PresetSchema",
    "SummarySchema",
]
