"""src/segpath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse query construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from segpath.features.path import PathQueries, default_queries
from segpath.ui.cli.display import PathDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    queries: PathQueries
    display: PathDisplay

    def __init__(
        self,
        queries: PathQueries | None = None,
        display: PathDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            queries: Filesystem queries; bound to the local OS when omitted.
            display: Output renderer; prints to stdout when omitted.
        """
        self.queries = queries if queries is not None else default_queries()
        self.display = display if display is not None else PathDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
