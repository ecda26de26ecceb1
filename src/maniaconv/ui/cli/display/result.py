"""src/maniaconv/ui/cli/display/result.py
What: Render user-facing summaries for convert/inspect CLI flows.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from maniaconv.features.conversion import ContainerResult

from .summary import render_container_summaries


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, results: list[ContainerResult], quiet: bool = False) -> None:
        """Display conversion results.

        Args:
            results: Container results of the run.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        render_container_summaries(
            console=self.console,
            results=results,
            header_label="Conversion Summary",
            path_label="Output",
            total_label="Total processed files",
        )

    def show_inspection(self, results: list[ContainerResult], quiet: bool = False) -> None:
        """Display inspection results."""

        if quiet:
            return

        render_container_summaries(
            console=self.console,
            results=results,
            header_label="Inspection Summary",
            path_label="OSZ File",
            total_label="Total inspected files",
        )
