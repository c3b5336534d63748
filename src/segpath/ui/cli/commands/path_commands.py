"""src/segpath/ui/cli/commands/path_commands.py
What: Implement the render, inspect, ls and where subcommands.
Why: Translate parsed CLI arguments into path operations and displays.
"""

from typing import final

from typing_extensions import override

from segpath.features.path import PathQueries, parse, to_text
from segpath.platform.logging import logger
from segpath.ui.cli.args.options import InspectArgs, ListArgs, RenderArgs, WhereArgs
from segpath.ui.cli.display import PathDisplay
from segpath.ui.cli.models import PathReport

from .executor import CommandExecutor


@final
class RenderCommand(CommandExecutor):
    """Print a path in another dialect."""

    args: RenderArgs

    def __init__(
        self,
        args: RenderArgs,
        queries: PathQueries | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        super().__init__(queries, display)
        self.args = args

    @override
    def execute(self) -> int:
        path = parse(self.args.path, self.args.dialect)
        self.display.show_rendered(to_text(path, self.args.target_dialect))
        return 0


@final
class InspectCommand(CommandExecutor):
    """Report the structure of a path and what it names on disk."""

    args: InspectArgs

    def __init__(
        self,
        args: InspectArgs,
        queries: PathQueries | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        super().__init__(queries, display)
        self.args = args

    def build_report(self) -> PathReport:
        path = parse(self.args.path, self.args.dialect)
        queries = self.queries
        return PathReport(
            text=self.args.path,
            rendered=to_text(path, path.dialect),
            dialect=path.dialect,
            segments=path.segments,
            is_absolute=path.is_absolute,
            filename=path.filename,
            extension=queries.extension(path),
            exists=queries.exists(path),
            is_file=queries.is_file(path),
            is_directory=queries.is_directory(path),
            size=queries.file_size(path),
        )

    @override
    def execute(self) -> int:
        self.display.show_report(self.build_report())
        return 0


@final
class ListCommand(CommandExecutor):
    """Print the children of a directory."""

    args: ListArgs

    def __init__(
        self,
        args: ListArgs,
        queries: PathQueries | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        super().__init__(queries, display)
        self.args = args

    @override
    def execute(self) -> int:
        path = parse(self.args.path, self.args.dialect)
        if not self.queries.is_directory(path):
            logger.error("Not a directory: %s", self.args.path)
            return 1

        children = self.queries.list_children(path)
        self.display.show_children([to_text(child, child.dialect) for child in children])
        return 0


@final
class WhereCommand(CommandExecutor):
    """Print the current directory and the running executable."""

    args: WhereArgs

    def __init__(
        self,
        args: WhereArgs,
        queries: PathQueries | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        super().__init__(queries, display)
        self.args = args

    @override
    def execute(self) -> int:
        current = self.queries.current_directory()
        executable = self.queries.executable_path()
        self.display.show_locations(
            to_text(current, current.dialect),
            to_text(executable, executable.dialect),
        )
        return 0
