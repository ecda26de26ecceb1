"""Command line interface package."""

from maniaconv.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
