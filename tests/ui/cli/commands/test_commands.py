"""Tests for CLI command executors."""

from pathlib import Path

from pytest_mock import MockerFixture

from maniaconv.application.services.conversion_service import ConversionRequest
from maniaconv.features.conversion import ContainerResult
from maniaconv.ui.cli.args.options import ConvertArgs, InspectArgs
from maniaconv.ui.cli.commands import ConvertCommand, InspectCommand


def _convert_args(**overrides: object) -> ConvertArgs:
    args = ConvertArgs(
        command="convert",
        source_path=Path("songs"),
        output_dir=Path("out"),
        max_workers=2,
        print_summary=True,
        interactive=False,
        verbose=False,
        quiet=False,
    )
    for key, value in overrides.items():
        setattr(args, key, value)
    return args


def test_convert_command_builds_request_and_shows_results(mocker: MockerFixture) -> None:
    app = mocker.Mock()
    command = ConvertCommand(_convert_args(), app=app)
    results = [ContainerResult(source_path=Path("songs/a.mcz"), success=True)]
    run = mocker.patch.object(command.progress_display, "run_with_service", return_value=results)
    show = mocker.patch.object(command.result_display, "show_results")

    assert command.execute() == results

    run.assert_called_once_with(
        app,
        ConversionRequest(path=Path("songs"), output_dir=Path("out"), max_workers=2),
        interactive=False,
    )
    show.assert_called_once_with(results, quiet=False)


def test_convert_command_respects_no_summary(mocker: MockerFixture) -> None:
    command = ConvertCommand(_convert_args(print_summary=False), app=mocker.Mock())
    _ = mocker.patch.object(command.progress_display, "run_with_service", return_value=[])
    show = mocker.patch.object(command.result_display, "show_results")

    _ = command.execute()

    show.assert_not_called()


def test_interactive_convert_asks_before_summary(mocker: MockerFixture) -> None:
    confirm = mocker.patch("maniaconv.ui.cli.commands.convert.Confirm.ask", return_value=False)
    command = ConvertCommand(_convert_args(interactive=True), app=mocker.Mock())
    _ = mocker.patch.object(command.progress_display, "run_with_service", return_value=[])
    show = mocker.patch.object(command.result_display, "show_results")

    _ = command.execute()

    confirm.assert_called_once_with("Show conversion summary?", default=True)
    show.assert_not_called()


def test_quiet_convert_never_prompts(mocker: MockerFixture) -> None:
    confirm = mocker.patch("maniaconv.ui.cli.commands.convert.Confirm.ask")
    command = ConvertCommand(_convert_args(interactive=True, quiet=True), app=mocker.Mock())
    _ = mocker.patch.object(command.progress_display, "run_with_service", return_value=[])
    show = mocker.patch.object(command.result_display, "show_results")

    _ = command.execute()

    confirm.assert_not_called()
    show.assert_not_called()


def test_inspect_command(mocker: MockerFixture) -> None:
    app = mocker.Mock()
    results = [ContainerResult(source_path=Path("out/a.osz"), success=True)]
    app.inspect.return_value = results
    args = InspectArgs(command="inspect", source_path=Path("out"), max_workers=3, verbose=False, quiet=False)
    command = InspectCommand(args, app=app)
    show = mocker.patch.object(command.result_display, "show_inspection")

    assert command.execute() == results

    app.inspect.assert_called_once_with(Path("out"), max_workers=3)
    show.assert_called_once_with(results, quiet=False)
