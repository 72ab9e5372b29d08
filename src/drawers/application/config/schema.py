"""Pydantic schemas for catalog and layout documents.

Both documents use the camelCase field names of the configurator's JSON
wire format, so share tokens and preset files stay interchangeable with
the browser front-end. Python code reads and writes the snake_case
attribute names.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from drawers.domain.value_objects import PanelCategory, PanelOrientation

# Catalog schema versions
# Version 1.0: Initial catalog with panel footprints and prices
SUPPORTED_CATALOG_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PanelDefinitionConfig(BaseModel):
    """One catalog entry.

    Attributes:
        id: Stable identifier referenced by placed panels
        name: Display name
        grid_width: Footprint width in cells at the default orientation (1 to 20)
        grid_height: Footprint height in cells at the default orientation (1 to 20)
        price: Unit price, non-negative
        category: Catalog category
        sample_items: Example contents shown in the catalog
        description: Free-form description
        image: Image URI
        preview_model: Optional 3D preview model URI
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    grid_width: int = Field(..., ge=1, le=20, alias="gridWidth")
    grid_height: int = Field(..., ge=1, le=20, alias="gridHeight")
    price: float = Field(..., ge=0)
    category: PanelCategory = PanelCategory.UNIVERSAL
    sample_items: list[str] = Field(default_factory=list, alias="sampleItems")
    description: str = ""
    image: str = ""
    preview_model: str | None = Field(default=None, alias="previewModel")


class CatalogConfig(BaseModel):
    """Root of a catalog file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: str = Field(default="1.0", alias="schemaVersion")
    currency: str = Field(default="PLN", min_length=1)
    panels: list[PanelDefinitionConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_CATALOG_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_CATALOG_VERSIONS))
            raise ValueError(f"Unsupported catalog version {v!r} (supported: {supported})")
        return v

    @field_validator("panels")
    @classmethod
    def validate_unique_ids(
        cls, v: list[PanelDefinitionConfig]
    ) -> list[PanelDefinitionConfig]:
        seen: set[str] = set()
        for panel in v:
            if panel.id in seen:
                raise ValueError(f"Duplicate panel id {panel.id!r}")
            seen.add(panel.id)
        return v


class DrawerConfig(BaseModel):
    """Drawer dimensions in millimeters, stored as given."""

    model_config = ConfigDict(populate_by_name=True)

    width_mm: int = Field(..., alias="widthMm")
    depth_mm: int = Field(..., alias="depthMm")
    height_mm: int = Field(..., alias="heightMm")


class GridConfig(BaseModel):
    """Grid size as stored in a layout document."""

    columns: int
    rows: int


class PanelInstanceConfig(BaseModel):
    """A placed panel in a layout document."""

    model_config = ConfigDict(populate_by_name=True)

    instance_id: str = Field(..., alias="instanceId")
    definition_id: str = Field(..., alias="definitionId")
    x: int
    y: int
    orientation: PanelOrientation = PanelOrientation.DEFAULT
    custom_label: str | None = Field(default=None, alias="customLabel")


class LayoutConfig(BaseModel):
    """Complete layout document (share tokens and presets).

    Unknown keys are ignored so that tokens produced by newer front-ends
    still load. No geometric validation happens here; layouts are
    installed exactly as written.
    """

    model_config = ConfigDict(populate_by_name=True)

    drawer: DrawerConfig
    grid: GridConfig
    panels: list[PanelInstanceConfig]


class PresetConfig(BaseModel):
    """A bundled example layout."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    layout: LayoutConfig
