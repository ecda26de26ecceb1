"""src/maniaconv/ui/cli/commands/convert.py
What: Execute conversion runs via the CLI.
Why: Bridge parsed arguments with the conversion service and the result display.
"""

from typing import override

from rich.prompt import Confirm

from maniaconv.application.services.conversion_service import ConversionRequest, ConversionService
from maniaconv.features.conversion import ContainerResult
from maniaconv.ui.cli.args.options import ConvertArgs
from maniaconv.ui.cli.commands.executor import CommandExecutor


class ConvertCommand(CommandExecutor):
    """Command for converting a directory, a container or a single chart."""

    args: ConvertArgs
    app: ConversionService
    request: ConversionRequest

    def __init__(self, args: ConvertArgs, app: ConversionService | None = None) -> None:
        super().__init__(args)
        self.args = args
        self.app = app or ConversionService()
        self.request = ConversionRequest(
            path=args.source_path,
            output_dir=args.output_dir,
            max_workers=args.max_workers,
        )

    @override
    def execute(self) -> list[ContainerResult]:
        """Execute the conversion command.

        Returns:
            List of container results.
        """
        results = self.progress_display.run_with_service(
            self.app,
            self.request,
            interactive=self.args.interactive,
        )
        if self._should_print_summary():
            self.result_display.show_results(results, quiet=self.args.quiet)
        return results

    def _should_print_summary(self) -> bool:
        if self.args.quiet:
            return False
        if not self.args.interactive:
            return self.args.print_summary
        try:
            return Confirm.ask("Show conversion summary?", default=self.args.print_summary)
        except (EOFError, KeyboardInterrupt):
            return False
