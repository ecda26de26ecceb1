"""Tests for converting whole containers."""

from __future__ import annotations

import json
import logging
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from maniaconv.features.chart import ChartSummary
from maniaconv.features.conversion import ConversionEvent, RejectionReason, convert_container
from maniaconv.features.conversion.usecases.container_runner import (
    extract_entries,
    target_container_path,
)
from maniaconv.platform.archive import ArchiveEntry

ChartFactory = Callable[..., dict[str, Any]]
BuildContainer = Callable[[Path, dict[str, bytes]], Path]


def _encode(document: dict[str, Any]) -> bytes:
    return json.dumps(document, ensure_ascii=False).encode("utf-8")


def _names(path: Path) -> list[str]:
    with zipfile.ZipFile(path) as archive:
        return archive.namelist()


def test_extract_entries_flattens_and_sanitizes(tmp_path: Path) -> None:
    entries = [
        ArchiveEntry("0/1600000000/背景.jpg", b"img"),
        ArchiveEntry("folder\\chart.mc", b"{}"),
    ]

    written = extract_entries(entries, tmp_path)

    assert [path.name for path in written] == ["__.jpg", "chart.mc"]
    assert (tmp_path / "__.jpg").read_bytes() == b"img"


def test_extract_entries_can_keep_names(tmp_path: Path) -> None:
    written = extract_entries([ArchiveEntry("a/曲.osu", b"x")], tmp_path, sanitize=False)

    assert written == [tmp_path / "曲.osu"]


def test_target_container_path(tmp_path: Path) -> None:
    source = tmp_path / "in" / "set.mcz"

    assert target_container_path(source) == tmp_path / "in" / "set.osz"
    assert target_container_path(source, tmp_path / "out") == tmp_path / "out" / "set.osz"


def test_convert_container_packs_charts_and_assets(
    tmp_path: Path, make_chart: ChartFactory, build_container: BuildContainer
) -> None:
    container = build_container(
        tmp_path / "set.mcz",
        {
            "0/1/easy.mc": _encode(make_chart(version="Easy")),
            "0/1/hard.mc": _encode(make_chart(version="Hard", notes=[([0, 0, 1], 0), ([1, 0, 1], 2)])),
            "0/1/bg.jpg": b"img",
            "0/1/song.ogg": b"audio",
            "0/1/unused.txt": b"ignored",
        },
    )

    result = convert_container(container, max_workers=2)

    assert result.success
    assert result.output_path == tmp_path / "set.osz"
    assert (result.converted, result.skipped, result.failed) == (2, 0, 0)
    assert _names(tmp_path / "set.osz") == ["bg.jpg", "easy.osu", "hard.osu", "song.ogg"]
    with zipfile.ZipFile(tmp_path / "set.osz") as archive:
        assert all(info.compress_type == zipfile.ZIP_STORED for info in archive.infolist())
        assert archive.read("song.ogg") == b"audio"
    assert sorted(summary.version for summary in result.summaries) == ["Easy", "Hard"]
    assert [chart.source_path.name for chart in result.charts] == ["easy.mc", "hard.mc"]


def test_unsupported_sibling_does_not_block_container(
    tmp_path: Path, make_chart: ChartFactory, build_container: BuildContainer
) -> None:
    container = build_container(
        tmp_path / "set.mcz",
        {
            "key.mc": _encode(make_chart()),
            "catch.mc": _encode(make_chart(mode=3)),
            "broken.mc": b"{not json",
        },
    )

    result = convert_container(container)

    assert result.success
    assert (result.converted, result.skipped, result.failed) == (1, 1, 1)
    assert _names(tmp_path / "set.osz") == ["key.osu"]


def test_container_with_only_non_key_charts_succeeds_without_output(
    tmp_path: Path, mocker: MockerFixture, make_chart: ChartFactory, build_container: BuildContainer
) -> None:
    log = mocker.patch("maniaconv.features.conversion.usecases.container_runner.log_conversion")
    container = build_container(tmp_path / "set.mcz", {"catch.mc": _encode(make_chart(mode=3))})

    result = convert_container(container)

    assert result.success
    assert result.error_message is None
    assert (result.converted, result.skipped, result.failed) == (0, 1, 0)
    assert result.output_path is None
    assert not (tmp_path / "set.osz").exists()
    events = [call.args[1] for call in log.call_args_list]
    assert events[-1] is ConversionEvent.CONTAINER_SKIPPED
    assert log.call_args_list[-1].args[0] == logging.INFO


def test_container_with_only_broken_charts_fails(
    tmp_path: Path, make_chart: ChartFactory, build_container: BuildContainer
) -> None:
    container = build_container(
        tmp_path / "set.mcz",
        {"broken.mc": b"{not json", "catch.mc": _encode(make_chart(mode=3))},
    )

    result = convert_container(container)

    assert not result.success
    assert result.error_message == "No convertible charts"
    assert result.output_path is None
    assert not (tmp_path / "set.osz").exists()


def test_container_without_charts_fails(tmp_path: Path, build_container: BuildContainer) -> None:
    container = build_container(tmp_path / "set.mcz", {"song.ogg": b"audio"})

    result = convert_container(container)

    assert not result.success
    assert result.error_message == "No convertible charts"
    assert result.charts == []


@pytest.mark.parametrize("bpm", [float("nan"), float("inf"), 1e-320])
def test_unusable_bpm_sibling_is_rejected(
    tmp_path: Path, make_chart: ChartFactory, build_container: BuildContainer, bpm: float
) -> None:
    container = build_container(
        tmp_path / "set.mcz",
        {"good.mc": _encode(make_chart()), "bad.mc": _encode(make_chart(bpm=bpm))},
    )

    result = convert_container(container)

    assert result.success
    assert (result.converted, result.skipped, result.failed) == (1, 0, 1)
    bad = next(chart for chart in result.charts if chart.source_path.name == "bad.mc")
    assert bad.reason is RejectionReason.PARSE_ERROR
    assert _names(tmp_path / "set.osz") == ["good.osu"]


def test_unreadable_container_fails(tmp_path: Path) -> None:
    container = tmp_path / "bad.mcz"
    _ = container.write_bytes(b"not a zip")

    result = convert_container(container)

    assert not result.success
    assert result.error_message
    assert result.charts == []


def test_output_dir_is_honoured(
    tmp_path: Path, make_chart: ChartFactory, build_container: BuildContainer
) -> None:
    container = build_container(tmp_path / "src" / "set.mcz", {"a.mc": _encode(make_chart())})
    output_dir = tmp_path / "out"
    output_dir.mkdir()

    result = convert_container(container, output_dir=output_dir)

    assert result.output_path == output_dir / "set.osz"
    assert not (tmp_path / "src" / "set.osz").exists()


def test_post_process_hook_sees_sorted_summaries_and_scratch_dir(
    tmp_path: Path,
    mocker: MockerFixture,
    make_chart: ChartFactory,
    build_container: BuildContainer,
) -> None:
    container = build_container(
        tmp_path / "set.mcz",
        {"a.mc": _encode(make_chart(version="A")), "b.mc": _encode(make_chart(version="B"))},
    )
    rater = mocker.Mock()
    rater.rate.side_effect = lambda chart, _speed: 5.0 if chart.metadata.version == "A" else 1.0
    seen: dict[str, Any] = {}

    def hook(summaries: list[ChartSummary], scratch: Path) -> None:
        seen["versions"] = [summary.version for summary in summaries]
        seen["scratch_exists"] = scratch.is_dir()
        seen["scratch"] = scratch

    result = convert_container(container, rater=rater, post_process=hook)

    assert result.success
    assert seen["versions"] == ["B", "A"]
    assert seen["scratch_exists"]
    assert not seen["scratch"].exists()
    assert [summary.rating for summary in result.summaries] == [1.0, 5.0]
