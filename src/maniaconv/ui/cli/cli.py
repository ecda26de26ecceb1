"""Command line interface for maniaconv."""

import sys
from typing import final

from maniaconv.features.conversion import ContainerResult
from maniaconv.platform.logging import logger
from maniaconv.ui.cli.args import ArgumentParser
from maniaconv.ui.cli.args.options import CLIArgs, ConvertArgs
from maniaconv.ui.cli.commands import ConvertCommand, InspectCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ConvertArgs):
                results = ConvertCommand(args).execute()
            else:
                results = InspectCommand(args).execute()

            if CommandProcessor._has_failures(results):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _has_failures(results: list[ContainerResult]) -> bool:
        """A run fails when any container failed or any chart in it was rejected.

        Charts skipped for an unsupported mode do not count as failures.
        """
        return any(not result.success or result.failed for result in results)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
