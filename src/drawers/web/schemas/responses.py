"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from drawers.web.schemas.common import DrawerSchema, GridSchema, PanelInstanceSchema


class LayoutSchema(BaseModel):
    """Complete layout state."""

    drawer: DrawerSchema = Field(..., description="Drawer dimensions")
    grid: GridSchema = Field(..., description="Grid size")
    panels: list[PanelInstanceSchema] = Field(
        default_factory=list, description="Placed panels in placement order"
    )


class LayoutResponseSchema(BaseModel):
    """Layout with derived totals and its share token."""

    layout: LayoutSchema = Field(..., description="The layout")
    token: str = Field(..., description="Share token for the layout query parameter")
    total_price: float = Field(..., description="Sum of placed panel prices")
    currency: str = Field(..., description="Currency of prices")


class PlacementResponseSchema(LayoutResponseSchema):
    """Response for workflows that place or update a single panel."""

    panel: PanelInstanceSchema | None = Field(
        default=None, description="The placed or updated panel"
    )


class CatalogPanelSchema(BaseModel):
    """Catalog panel with its availability in the current layout."""

    id: str = Field(..., description="Panel id")
    name: str = Field(..., description="Display name")
    grid_width: int = Field(..., description="Width in cells")
    grid_height: int = Field(..., description="Depth in cells")
    width_cm: str = Field(..., description="Physical width in cm")
    depth_cm: str = Field(..., description="Physical depth in cm")
    price: float = Field(..., description="Unit price")
    category: str = Field(..., description="Panel category")
    sample_items: list[str] = Field(default_factory=list, description="Example contents")
    description: str = Field(default="", description="Long description")
    image: str = Field(default="", description="Image path")
    preview_model: str | None = Field(default=None, description="3D preview path")
    available: bool = Field(..., description="Whether the panel still fits somewhere")


class CatalogSchema(BaseModel):
    """Response for the panel catalog."""

    currency: str = Field(..., description="Currency of prices")
    panels: list[CatalogPanelSchema] = Field(..., description="Catalog panels")


class PresetListItemSchema(BaseModel):
    """Schema for a single preset in the list."""

    id: str = Field(..., description="Preset id")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Preset description")


class PresetListSchema(BaseModel):
    """Response for listing presets."""

    presets: list[PresetListItemSchema] = Field(..., description="Available presets")


class PresetSchema(LayoutResponseSchema):
    """A preset layout ready to use, with fresh panel instance ids."""

    id: str = Field(..., description="Preset id")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Preset description")


class SummarySchema(BaseModel):
    """Itemized layout summary."""

    summary: str = Field(..., description="Plain-text summary")
    total_price: float = Field(..., description="Sum of placed panel prices")
    currency: str = Field(..., description="Currency of prices")


class ExportFormatsSchema(BaseModel):
    """Response for listing available export formats."""

    formats: list[str] = Field(..., description="Available export format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
