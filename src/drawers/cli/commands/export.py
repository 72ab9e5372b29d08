"""Export command: write the layout summary in one or more formats."""

from pathlib import Path
from typing import Annotated

import typer

from drawers.application.factory import get_factory
from drawers.cli.commands.session import LayoutOption, open_controller
from drawers.infrastructure.exporters import (
    ExportDocument,
    ExporterRegistry,
    ExportManager,
)


def export_command(
    layout: LayoutOption = None,
    formats: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Comma-separated formats (txt, json, pdf) or 'all'",
        ),
    ] = "txt",
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for exported files (prints to stdout if omitted)",
        ),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--name", "-n", help="Base name for exported files"),
    ] = "drawer",
) -> None:
    """Export the layout summary.

    Without --output-dir a single text format is printed to stdout.

    Examples:
        drawers export --layout TOKEN
        drawers export --layout TOKEN --format all --output-dir out/
    """
    if formats.lower() == "all":
        requested = ExporterRegistry.available_formats()
    else:
        requested = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = ExporterRegistry.unknown_formats(requested)
    if invalid or not requested:
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Unknown formats: {', '.join(invalid) or formats}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    controller = open_controller(layout)
    document = ExportDocument(
        state=controller.state,
        lookup=controller.registry.get,
        currency=get_factory().get_catalog().currency,
    )

    if output_dir is None:
        if len(requested) != 1:
            typer.echo("Error: Use --output-dir to export several formats.", err=True)
            raise typer.Exit(code=1)
        exporter = ExporterRegistry.get(requested[0])()
        try:
            typer.echo(exporter.export_string(document))
        except NotImplementedError:
            typer.echo(
                f"Error: Format '{requested[0]}' needs --output-dir.", err=True
            )
            raise typer.Exit(code=1)
        return

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(requested, document, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
