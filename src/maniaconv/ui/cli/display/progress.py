"""Progress display functionality for CLI."""

from typing import Any, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID
from rich.prompt import Prompt

from maniaconv.application.services.conversion_service import ConversionRequest
from maniaconv.features.conversion import ContainerResult, ProgressCallback
from maniaconv.platform.logging import ConversionRichHandler, logger


@runtime_checkable
class ConversionServiceLike(Protocol):
    """Protocol for application services that can convert with progress reporting."""

    def convert(
        self,
        request: ConversionRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ContainerResult]:
        ...


def _logger_console() -> Console | None:
    for handler in logger.handlers:
        if isinstance(handler, ConversionRichHandler):
            return handler.console
    return None


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: ConversionServiceLike,
        request: ConversionRequest,
        interactive: bool = False,
    ) -> list[ContainerResult]:
        """Run a conversion via the application service with a progress bar.

        Args:
            app: Application service used to orchestrate the conversion.
            request: Conversion parameters.
            interactive: Offer to inspect failed containers afterwards.

        Returns:
            List of container results.
        """
        progress_console = _logger_console()
        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None
            last_count = 0

            def _cb(completed: int, total: int, current: Any) -> None:
                nonlocal task_id, last_count
                _ = current  # reported through logging
                if task_id is None:
                    task_id = progress.add_task("[cyan]Converting containers...", total=total)
                advance = max(completed - last_count, 0)
                _ = progress.update(
                    task_id,
                    advance=advance,
                    description=f"[cyan]Converting containers... {completed}/{total}",
                )
                last_count = completed

            results = app.convert(request, _cb)

        if interactive:
            self.review_failures(results, progress_console or Console())

        return results

    @staticmethod
    def review_failures(results: list[ContainerResult], console: Console) -> None:
        """Let the user page through failed containers and their rejected charts."""

        failed_results = [result for result in results if not result.success or result.failed]
        if not failed_results:
            return

        def _render_failure(detail: ContainerResult) -> None:
            console.print(f"[red]- {detail.source_path}[/red]")
            if detail.error_message:
                console.print(f"[red]  Error: {detail.error_message}[/red]")
            for chart in detail.charts:
                if chart.success or chart.skipped:
                    continue
                console.print(f"[red]  {chart.source_path.name}: {chart.error_message}[/red]")

        option_map: dict[str, ContainerResult] = {
            str(index + 1): result for index, result in enumerate(failed_results)
        }
        console.print(
            f"\n[bold red]Conversion completed with {len(failed_results)} failure(s).[/bold red]"
        )
        console.print("[bold]Failed items:[/bold]")
        for key, result in option_map.items():
            console.print(f"  [{key}] {result.source_path}")
        console.print(
            "Enter the number of a failed item to inspect, 'a' to show all, or 'q' to continue."
        )

        choices = list(option_map.keys()) + ["a", "q"]
        while True:
            try:
                selection = Prompt.ask(
                    "Selection",
                    choices=choices,
                    default="q",
                    show_choices=False,
                )
            except (EOFError, KeyboardInterrupt):
                console.print("[yellow]Interactive session cancelled by user.")
                break

            if selection == "q":
                break
            if selection == "a":
                for failed_result in failed_results:
                    _render_failure(failed_result)
                continue
            _render_failure(option_map[selection])
