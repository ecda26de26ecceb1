"""Command execution package for CLI."""

from maniaconv.ui.cli.commands.convert import ConvertCommand
from maniaconv.ui.cli.commands.executor import CommandExecutor
from maniaconv.ui.cli.commands.inspect import InspectCommand

__all__ = ["CommandExecutor", "ConvertCommand", "InspectCommand"]
