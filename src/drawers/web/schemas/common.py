"""Common Pydantic schemas shared across request and response models."""

from enum import Enum

from pydantic import BaseModel, Field


class OrientationEnum(str, Enum):
    """Panel orientation on the grid."""

    DEFAULT = "default"
    ROTATED = "rotated"


class DrawerSchema(BaseModel):
    """Drawer interior dimensions in millimeters."""

    width_mm: int = Field(..., description="Interior width in mm")
    depth_mm: int = Field(..., description="Interior depth in mm")
    height_mm: int = Field(..., description="Interior height in mm")


class GridSchema(BaseModel):
    """Grid derived from the drawer size."""

    columns: int = Field(..., description="Number of 42 mm cells across")
    rows: int = Field(..., description="Number of 42 mm cells deep")


class PanelInstanceSchema(BaseModel):
    """A panel placed in the layout."""

    instance_id: str = Field(..., description="Unique id of this placement")
    definition_id: str = Field(..., description="Catalog panel id")
    x: int = Field(..., description="Column of the top-left cell (from 0)")
    y: int = Field(..., description="Row of the top-left cell (from 0)")
    orientation: OrientationEnum = Field(..., description="Panel orientation")
    custom_label: str | None = Field(default=None, description="User-given label")
    label: str | None = Field(
        default=None,
        description="Label shown to the user (None when the panel is not in the catalog)",
    )
