"""Helpers shared by commands that edit a layout passed as a share token."""

from typing import Annotated

import typer

from drawers.application.config import ConfigError
from drawers.application.controller import LayoutController, PlacementResult
from drawers.application.factory import get_factory

LayoutOption = Annotated[
    str | None,
    typer.Option(
        "--layout",
        "-l",
        help="Share token of the layout to work on (empty drawer if omitted)",
    ),
]


def open_controller(token: str | None) -> LayoutController:
    """Create a controller holding the layout in ``token``.

    An unreadable token prints a warning and yields the empty layout.
    Catalog problems end the command with exit code 1.
    """
    factory = get_factory()
    try:
        controller = factory.create_controller()
    except ConfigError as e:
        report_config_error(e)
        raise typer.Exit(code=1)

    if token and not controller.restore(token, factory.get_codec()):
        typer.echo(
            "Warning: could not read the layout token, starting from an empty drawer.",
            err=True,
        )
    return controller


def emit_token(controller: LayoutController) -> None:
    """Print the share token of the controller's current layout."""
    typer.echo(controller.share_token(get_factory().get_codec()))


def require_accepted(result: PlacementResult) -> None:
    """Exit with code 1 when a workflow was declined."""
    if not result.accepted:
        typer.echo(f"Error: {result.notice}", err=True)
        raise typer.Exit(code=1)


def report_config_error(error: ConfigError) -> None:
    """Print a catalog error; validation messages already list every field."""
    typer.echo(f"Error: {error.message}", err=True)
    if error.error_type == "json_parse":
        for detail in error.details:
            typer.echo(f"  line {detail['line']}, column {detail['column']}", err=True)
