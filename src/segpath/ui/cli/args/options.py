"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from segpath.features.path import Dialect


@final
@dataclass(slots=True)
class RenderArgs:
    """Command line arguments for the ``render`` subcommand."""

    command: Literal["render"]
    path: str
    dialect: Dialect
    target_dialect: Dialect
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    path: str
    dialect: Dialect
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``ls`` subcommand."""

    command: Literal["ls"]
    path: str
    dialect: Dialect
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class WhereArgs:
    """Command line arguments for the ``where`` subcommand."""

    command: Literal["where"]
    verbose: bool
    quiet: bool


CLIArgs = RenderArgs | InspectArgs | ListArgs | WhereArgs
