"""Command line argument handling package."""

from maniaconv.ui.cli.args.options import CLIArgs, ConvertArgs, InspectArgs
from maniaconv.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ConvertArgs", "InspectArgs"]
