"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from drawers.web.schemas.common import OrientationEnum


class DrawerRequest(BaseModel):
    """Request for changing the drawer size.

    Values outside the supported range are clamped, not rejected.
    """

    width_mm: float = Field(..., description="Interior width in mm")
    depth_mm: float = Field(..., description="Interior depth in mm")
    height_mm: float = Field(..., description="Interior height in mm")


class PlacePanelRequest(BaseModel):
    """Request for placing a panel at a given cell."""

    definition_id: str = Field(..., description="Catalog panel id")
    x: int = Field(..., description="Column of the top-left cell (from 0)")
    y: int = Field(..., description="Row of the top-left cell (from 0)")
    orientation: OrientationEnum = Field(
        default=OrientationEnum.DEFAULT, description="Panel orientation"
    )


class AutoPlaceRequest(BaseModel):
    """Request for placing a panel at the first free position."""

    definition_id: str = Field(..., description="Catalog panel id")


class MovePanelRequest(BaseModel):
    """Request for moving a placed panel."""

    x: int = Field(..., description="New column (from 0)")
    y: int = Field(..., description="New row (from 0)")


class RenamePanelRequest(BaseModel):
    """Request for relabeling a placed panel."""

    label: str | None = Field(
        default=None, description="New label; empty restores the catalog name"
    )
