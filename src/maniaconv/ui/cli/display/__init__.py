"""Display management for CLI interface."""

from maniaconv.ui.cli.display.progress import ProgressDisplay
from maniaconv.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
