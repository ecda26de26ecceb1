"""src/maniaconv/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from maniaconv.features.conversion import ContainerResult
from maniaconv.ui.cli.args.options import CLIArgs
from maniaconv.ui.cli.display.progress import ProgressDisplay
from maniaconv.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> list[ContainerResult]:
        """Execute the command.

        Returns:
            List of container results.
        """
        pass
