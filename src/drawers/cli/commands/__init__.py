"""CLI command implementations for the drawers application.

This package contains subcommands for the drawers CLI, including:
- presets: List bundled layouts and load them as share tokens
- export: Write layout summaries to txt, json or pdf files
"""

from drawers.cli.commands.export import export_command
from drawers.cli.commands.presets import presets_app

__all__ = ["export_command", "presets_app"]
