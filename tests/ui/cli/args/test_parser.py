"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from maniaconv.config.settings import MAX_WORKERS
from maniaconv.platform.logging import DEFAULT_LOG_FILE
from maniaconv.ui.cli.args import ArgumentParser, ConvertArgs, InspectArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture, config_runtime_env: None) -> MagicMock:
    _ = config_runtime_env
    return mocker.patch("maniaconv.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Parser should expose both subcommands and their options."""

    parser = ArgumentParser.create_parser()

    convert_args: Namespace = parser.parse_args(["convert", "songs"])
    assert convert_args.command == "convert"
    assert convert_args.source_path == "songs"
    assert not convert_args.no_summary and not convert_args.interactive

    inspect_args: Namespace = parser.parse_args(["inspect", "out", "--workers", "2"])
    assert inspect_args.command == "inspect"
    assert inspect_args.workers == 2

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["inspect", "out", "--interactive"])


def test_process_convert_args(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    output_dir = tmp_path / "out" / "nested"

    args = ArgumentParser.process_args(
        ["convert", str(tmp_path), "--output-dir", str(output_dir), "--no-summary", "--workers", "4"]
    )

    assert isinstance(args, ConvertArgs)
    assert args.source_path == tmp_path
    assert args.output_dir == output_dir
    assert output_dir.is_dir()
    assert args.max_workers == 4
    assert not args.print_summary
    mock_setup_logger.assert_called_once_with(log_file=DEFAULT_LOG_FILE, console_level=logging.INFO)


def test_process_inspect_args(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["inspect", str(tmp_path), "--quiet"])

    assert isinstance(args, InspectArgs)
    assert args.quiet
    assert args.max_workers == MAX_WORKERS
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_verbose_enables_debug(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = ArgumentParser.process_args(["convert", str(tmp_path), "--verbose"])

    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_missing_path_exits(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["convert", str(tmp_path / "missing")])

    assert excinfo.value.code == 1


def test_non_positive_workers_exit(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["convert", str(tmp_path), "--workers", "0"])

    assert excinfo.value.code == 1
