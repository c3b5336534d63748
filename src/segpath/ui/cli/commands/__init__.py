"""Command execution package for CLI."""

from segpath.ui.cli.commands.executor import CommandExecutor
from segpath.ui.cli.commands.path_commands import (
    InspectCommand,
    ListCommand,
    RenderCommand,
    WhereCommand,
)

__all__ = [
    "CommandExecutor",
    "InspectCommand",
    "ListCommand",
    "RenderCommand",
    "WhereCommand",
]
