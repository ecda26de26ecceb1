"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from maniaconv.config.config import Config
from maniaconv.config.settings import MAX_WORKERS, PRINT_SUMMARY
from maniaconv.platform.filesystem import ensure_directory
from maniaconv.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from maniaconv.ui.cli.args.options import CLIArgs, ConvertArgs, InspectArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="maniaconv - Convert Malody key-mode charts to osu!mania.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        convert_parser = subparsers.add_parser(
            "convert",
            help="Convert a directory of .mcz containers, one .mcz, or one .mc chart",
        )
        _ = convert_parser.add_argument(
            "source_path",
            type=str,
            help="Directory, .mcz container or .mc chart to convert",
            metavar="PATH",
        )
        _ = convert_parser.add_argument(
            "--output-dir",
            type=str,
            help="Directory for generated .osz files (defaults to beside each .mcz)",
            metavar="OUTPUT_DIR",
        )
        _ = convert_parser.add_argument(
            "--no-summary",
            action="store_true",
            help="Do not print the per-chart conversion summary",
        )
        _ = convert_parser.add_argument(
            "--interactive",
            action="store_true",
            help="Ask before printing the summary and allow inspecting failures",
        )
        ArgumentParser._add_common_arguments(convert_parser)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Summarise the charts inside .osz containers",
        )
        _ = inspect_parser.add_argument(
            "source_path",
            type=str,
            help="Directory or .osz container to inspect",
            metavar="PATH",
        )
        ArgumentParser._add_common_arguments(inspect_parser)

        return parser

    @staticmethod
    def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--workers",
            type=int,
            help="Thread-pool size for parallel conversion (defaults to config)",
            metavar="N",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the path doesn't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        source_path = Path(parsed_args.source_path)
        if not source_path.exists():
            logger.error("Path does not exist: %s", source_path)
            sys.exit(1)

        max_workers = ArgumentParser._resolve_workers(parsed_args.workers)

        if parsed_args.command == "convert":
            output_dir: Path | None = None
            if parsed_args.output_dir:
                output_dir = ensure_directory(Path(parsed_args.output_dir))
            return ConvertArgs(
                command="convert",
                source_path=source_path,
                output_dir=output_dir,
                max_workers=max_workers,
                print_summary=PRINT_SUMMARY and not parsed_args.no_summary,
                interactive=parsed_args.interactive,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        return InspectArgs(
            command="inspect",
            source_path=source_path,
            max_workers=max_workers,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _resolve_workers(workers: int | None) -> int | None:
        if workers is None:
            return MAX_WORKERS
        if workers <= 0:
            logger.error("--workers must be a positive integer; received %s", workers)
            sys.exit(1)
        return workers
