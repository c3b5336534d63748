"""Command line interface for segpath."""

import sys
from typing import final

from segpath.features.path import PathError
from segpath.platform.logging import logger
from segpath.ui.cli.args import ArgumentParser
from segpath.ui.cli.args.options import CLIArgs, InspectArgs, ListArgs, RenderArgs
from segpath.ui.cli.commands import (
    CommandExecutor,
    InspectCommand,
    ListCommand,
    RenderCommand,
    WhereCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code != 0:
                sys.exit(exit_code)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PathError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the executor matching ``args``."""

        if isinstance(args, RenderArgs):
            return RenderCommand(args)
        if isinstance(args, InspectArgs):
            return InspectCommand(args)
        if isinstance(args, ListArgs):
            return ListCommand(args)
        return WhereCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
