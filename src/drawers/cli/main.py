"""Typer CLI for drawer grid layouts.

Every command works on a layout carried as a share token: commands that
change the layout read it from --layout and print the new token, so
edits can be chained in a shell.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from drawers.application.factory import ServiceFactory, get_factory, set_factory
from drawers.application.share import share_url
from drawers.cli.commands import export_command, presets_app
from drawers.cli.commands.session import (
    LayoutOption,
    emit_token,
    open_controller,
    require_accepted,
)
from drawers.domain import DEFAULT_DRAWER, PanelOrientation, Position, find_instance
from drawers.domain.geometry import mm_to_cm
from drawers.domain.pricing import format_price

DEFAULT_BASE_URL = "http://localhost:5173/"

app = typer.Typer(
    name="drawers",
    help="Plan modular grid inserts for drawers and share them as links.",
)

# Register export command
app.command(name="export")(export_command)

# Register presets subcommand group
app.add_typer(presets_app, name="presets")


@app.callback()
def main(
    catalog: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            help="Panel catalog JSON file (bundled catalog if omitted)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan modular grid inserts for drawers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if catalog is not None:
        set_factory(ServiceFactory(catalog_path=catalog))


@app.command()
def new(
    width: Annotated[float, typer.Option("--width", "-w", help="Drawer width in mm")] = DEFAULT_DRAWER.width_mm,
    depth: Annotated[float, typer.Option("--depth", "-d", help="Drawer depth in mm")] = DEFAULT_DRAWER.depth_mm,
    height: Annotated[float, typer.Option("--height", "-h", help="Drawer height in mm")] = DEFAULT_DRAWER.height_mm,
) -> None:
    """Start an empty layout and print its token."""
    controller = open_controller(None)
    controller.set_drawer(width, depth, height)
    emit_token(controller)


@app.command()
def resize(
    width: Annotated[float, typer.Option("--width", "-w", help="Drawer width in mm")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Drawer depth in mm")],
    height: Annotated[float, typer.Option("--height", "-h", help="Drawer height in mm")],
    layout: LayoutOption = None,
) -> None:
    """Change the drawer size; panels outside the new grid are removed."""
    controller = open_controller(layout)
    before = len(controller.state.panels)
    state = controller.set_drawer(width, depth, height)
    dropped = before - len(state.panels)
    if dropped:
        typer.echo(f"Removed {dropped} panel(s) that no longer fit.", err=True)
    emit_token(controller)


@app.command()
def place(
    panel_id: Annotated[str, typer.Argument(help="Catalog panel id")],
    x: Annotated[int, typer.Option("--x", "-x", help="Column of the top-left cell (from 0)")],
    y: Annotated[int, typer.Option("--y", "-y", help="Row of the top-left cell (from 0)")],
    rotated: Annotated[bool, typer.Option("--rotated", "-r", help="Place rotated by 90°")] = False,
    layout: LayoutOption = None,
) -> None:
    """Place a panel at a given cell."""
    controller = open_controller(layout)
    orientation = PanelOrientation.ROTATED if rotated else PanelOrientation.DEFAULT
    result = controller.place_panel(panel_id, Position(x, y), orientation)
    require_accepted(result)
    typer.echo(f"Placed {result.panel.instance_id}", err=True)
    emit_token(controller)


@app.command(name="auto-place")
def auto_place(
    panel_id: Annotated[str, typer.Argument(help="Catalog panel id")],
    layout: LayoutOption = None,
) -> None:
    """Place a panel at the first free position."""
    controller = open_controller(layout)
    result = controller.auto_place(panel_id)
    require_accepted(result)
    panel = result.panel
    typer.echo(
        f"Placed {panel.instance_id} at x={panel.x}, y={panel.y} "
        f"({panel.orientation.label})",
        err=True,
    )
    emit_token(controller)


@app.command()
def move(
    instance_id: Annotated[str, typer.Argument(help="Panel instance id")],
    x: Annotated[int, typer.Option("--x", "-x", help="New column (from 0)")],
    y: Annotated[int, typer.Option("--y", "-y", help="New row (from 0)")],
    layout: LayoutOption = None,
) -> None:
    """Move a placed panel."""
    controller = open_controller(layout)
    require_accepted(controller.move_panel(instance_id, Position(x, y)))
    emit_token(controller)


@app.command()
def rotate(
    instance_id: Annotated[str, typer.Argument(help="Panel instance id")],
    layout: LayoutOption = None,
) -> None:
    """Rotate a placed panel by 90° in place."""
    controller = open_controller(layout)
    require_accepted(controller.rotate_panel(instance_id))
    emit_token(controller)


@app.command()
def rename(
    instance_id: Annotated[str, typer.Argument(help="Panel instance id")],
    label: Annotated[str, typer.Argument(help="New label (empty restores the catalog name)")] = "",
    layout: LayoutOption = None,
) -> None:
    """Give a placed panel a custom label."""
    controller = open_controller(layout)
    require_accepted(controller.rename_panel(instance_id, label))
    emit_token(controller)


@app.command()
def remove(
    instance_id: Annotated[str, typer.Argument(help="Panel instance id")],
    layout: LayoutOption = None,
) -> None:
    """Remove a placed panel."""
    controller = open_controller(layout)
    if find_instance(controller.state, instance_id) is None:
        typer.echo(f"Error: Unknown panel instance '{instance_id}'.", err=True)
        raise typer.Exit(code=1)
    controller.remove_panel(instance_id)
    emit_token(controller)


@app.command()
def show(
    layout: LayoutOption = None,
    ids: Annotated[bool, typer.Option("--ids", help="Also list panel instance ids")] = False,
) -> None:
    """Print the itemized summary of a layout."""
    controller = open_controller(layout)
    typer.echo(controller.summary(get_factory().get_summary_formatter()))

    if ids:
        typer.echo()
        typer.echo("Instances:")
        for panel in controller.state.panels:
            definition = controller.registry.get(panel.definition_id)
            name = panel.display_label(definition) if definition else "(unknown panel)"
            typer.echo(f"  {panel.instance_id}  {name}")


@app.command()
def share(
    layout: LayoutOption = None,
    base_url: Annotated[
        str, typer.Option("--base-url", help="Configurator address to link to")
    ] = DEFAULT_BASE_URL,
) -> None:
    """Print a share link for a layout."""
    controller = open_controller(layout)
    typer.echo(share_url(base_url, controller.state, get_factory().get_codec()))


@app.command()
def panels(layout: LayoutOption = None) -> None:
    """List catalog panels and whether each still fits in the layout."""
    controller = open_controller(layout)
    currency = get_factory().get_catalog().currency
    availability = controller.availability()

    definitions = controller.registry.definitions()
    max_id_width = max(len(d.id) for d in definitions) if definitions else 0

    for definition in definitions:
        status = "available" if availability[definition.id] else "unavailable"
        typer.echo(
            f"  {definition.id:<{max_id_width}}  {definition.name}  "
            f"{definition.grid_width}×{definition.grid_height} cells "
            f"({mm_to_cm(definition.width_mm)} × {mm_to_cm(definition.depth_mm)} cm)  "
            f"{format_price(definition.price)} {currency}  {status}"
        )


if __name__ == "__main__":
    app()
