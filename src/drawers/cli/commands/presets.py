"""Presets commands for listing and loading bundled layouts.

This module provides the `presets` command group. Loading a preset prints
a share token for a copy of its layout with fresh panel instance ids.
"""

from typing import Annotated

import typer

from drawers.application.config import ConfigError
from drawers.application.factory import get_factory
from drawers.application.presets import PresetNotFoundError

# Create a Typer app for the presets subcommand group
presets_app = typer.Typer(
    name="presets",
    help="List and load bundled drawer layouts.",
)


@presets_app.command(name="list")
def list_presets() -> None:
    """List all bundled layouts.

    Example:
        drawers presets list
    """
    manager = get_factory().get_preset_manager()
    try:
        presets = manager.list_presets()
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Available presets:")
    typer.echo()

    max_id_width = max(len(preset_id) for preset_id, _, _ in presets) if presets else 0

    for preset_id, name, description in presets:
        typer.echo(f"  {preset_id:<{max_id_width}}  - {name}: {description}")

    typer.echo()
    typer.echo("Use 'drawers presets load <id>' to get a share token for a preset.")


@presets_app.command(name="load")
def load_preset(
    preset_id: Annotated[
        str,
        typer.Argument(help="Id of the preset to load"),
    ],
) -> None:
    """Print a share token for a bundled layout.

    Examples:
        drawers presets load starter-kitchen
        drawers show --layout "$(drawers presets load desk-pro)"
    """
    factory = get_factory()
    manager = factory.get_preset_manager()

    if not manager.preset_exists(preset_id):
        available = ", ".join(p for p, _, _ in manager.list_presets())
        typer.echo(f"Error: Preset not found: {preset_id}", err=True)
        typer.echo(f"Available presets: {available}", err=True)
        raise typer.Exit(code=1)

    try:
        preset = manager.get_preset(preset_id)
        controller = factory.create_controller()
    except PresetNotFoundError:
        typer.echo(f"Error: Preset not found: {preset_id}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    controller.load_preset(preset)
    typer.echo(f"Loaded preset '{preset.name}'", err=True)
    typer.echo(controller.share_token(factory.get_codec()))
