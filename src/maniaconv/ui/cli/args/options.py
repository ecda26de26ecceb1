"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ConvertArgs:
    """Command line arguments for the ``convert`` subcommand."""

    command: Literal["convert"]
    source_path: Path
    output_dir: Path | None
    max_workers: int | None
    print_summary: bool
    interactive: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    source_path: Path
    max_workers: int | None
    verbose: bool
    quiet: bool


CLIArgs = ConvertArgs | InspectArgs

__all__ = ["CLIArgs", "ConvertArgs", "InspectArgs"]
