"""Execute inspection of converted containers via the CLI."""

from typing import override

from maniaconv.application.services.conversion_service import InspectionService
from maniaconv.features.conversion import ContainerResult
from maniaconv.ui.cli.args.options import InspectArgs
from maniaconv.ui.cli.commands.executor import CommandExecutor


class InspectCommand(CommandExecutor):
    """Command for summarising .osz containers."""

    args: InspectArgs
    app: InspectionService

    def __init__(self, args: InspectArgs, app: InspectionService | None = None) -> None:
        super().__init__(args)
        self.args = args
        self.app = app or InspectionService()

    @override
    def execute(self) -> list[ContainerResult]:
        results = self.app.inspect(self.args.source_path, max_workers=self.args.max_workers)
        self.result_display.show_inspection(results, quiet=self.args.quiet)
        return results
