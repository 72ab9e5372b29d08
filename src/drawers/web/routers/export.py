"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from drawers.infrastructure.exporters import (
    ExportDocument,
    ExporterRegistry,
    render_export,
)
from drawers.web.dependencies import ControllerDep, ServiceFactoryDep
from drawers.web.exceptions import UnsupportedFormatError
from drawers.web.schemas.responses import ExportFormatsSchema, SummarySchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "txt": "text/plain; charset=utf-8",
    "json": "application/json",
    "pdf": "application/pdf",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.get("/summary", response_model=SummarySchema)
async def get_summary(
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> SummarySchema:
    """Itemized summary and total for the given layout."""
    return SummarySchema(
        summary=controller.summary(factory.get_summary_formatter()),
        total_price=controller.total_price(),
        currency=factory.get_catalog().currency,
    )


@router.get("/{format_name}")
async def export_layout(
    format_name: str,
    controller: ControllerDep,
    factory: ServiceFactoryDep,
) -> Response:
    """Export the layout to any registered format.

    Raises:
        UnsupportedFormatError: If format is not registered.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    document = ExportDocument(
        state=controller.state,
        lookup=controller.registry.get,
        currency=factory.get_catalog().currency,
    )
    extension = ExporterRegistry.get(format_name).file_extension
    return Response(
        content=render_export(format_name, document),
        media_type=MEDIA_TYPES.get(format_name, "application/octet-stream"),
        headers={"Content-Disposition": f"attachment; filename=drawer.{extension}"},
    )
