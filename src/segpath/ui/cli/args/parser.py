"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from segpath.config import Config
from segpath.features.path import Dialect
from segpath.platform.logging import logger, setup_logger
from segpath.ui.cli.args.options import CLIArgs, InspectArgs, ListArgs, RenderArgs, WhereArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="segpath - Parse, render and probe POSIX and Windows paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        render_parser = subparsers.add_parser(
            "render",
            help="Parse a path and print it in the requested dialect",
        )
        ArgumentParser._configure_path_parser(render_parser)
        _ = render_parser.add_argument(
            "--to",
            type=str,
            dest="target_dialect",
            metavar="DIALECT",
            help="Dialect to render with (defaults to the parse dialect)",
        )

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show the segments of a path and what it names on disk",
        )
        ArgumentParser._configure_path_parser(inspect_parser)

        list_parser = subparsers.add_parser(
            "ls",
            help="List the children of a directory",
        )
        ArgumentParser._configure_path_parser(list_parser)

        where_parser = subparsers.add_parser(
            "where",
            help="Show the current directory and the running executable",
        )
        ArgumentParser._configure_verbosity(where_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If a dialect name is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "where":
            return WhereArgs(
                command="where",
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        dialect = ArgumentParser._resolve_dialect(parsed_args.dialect, configuration)

        if command == "render":
            target_dialect = (
                ArgumentParser._resolve_dialect(parsed_args.target_dialect, configuration)
                if parsed_args.target_dialect
                else dialect
            )
            return RenderArgs(
                command="render",
                path=parsed_args.path,
                dialect=dialect,
                target_dialect=target_dialect,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "inspect":
            return InspectArgs(
                command="inspect",
                path=parsed_args.path,
                dialect=dialect,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "ls":
            return ListArgs(
                command="ls",
                path=parsed_args.path,
                dialect=dialect,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_verbosity(parser: argparse.ArgumentParser) -> None:
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all logging except errors",
        )

    @staticmethod
    def _configure_path_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for subcommands taking one path."""

        _ = parser.add_argument(
            "path",
            type=str,
            help="Path text to parse",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--dialect",
            type=str,
            metavar="DIALECT",
            help="Dialect to parse with: posix or windows (defaults to config, then host)",
        )
        ArgumentParser._configure_verbosity(parser)

    @staticmethod
    def _resolve_dialect(value: str | None, configuration: Config) -> Dialect:
        try:
            if value:
                return Dialect.from_name(value)
            return configuration.dialect()
        except ValueError as e:
            logger.error("%s", e)
            sys.exit(1)
