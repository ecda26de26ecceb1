"""Tests for the zip container codec."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from maniaconv.platform.archive import ContainerIOError, list_entries, write_container


def _write_raw_name_zip(path: Path, raw_name: bytes, data: bytes) -> None:
    """Write a zip whose single entry name is ``raw_name`` without the UTF-8 flag.

    ``zipfile`` flags any non-ASCII name as UTF-8, so an ASCII stand-in of the
    same length is written first and its bytes are swapped afterwards.
    """
    stand_in = b"X" * len(raw_name)
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr(stand_in.decode("ascii"), data)
    _ = path.write_bytes(path.read_bytes().replace(stand_in, raw_name))


def test_list_entries_reads_files_and_skips_directories(
    tmp_path: Path, build_container: Callable[[Path, dict[str, bytes]], Path]
) -> None:
    container = build_container(
        tmp_path / "pack.mcz",
        {"0/chart.mc": b"{}", "0/song.ogg": b"audio", "folder/": b""},
    )

    entries = list_entries(container)

    assert [(entry.name, entry.data) for entry in entries] == [
        ("0/chart.mc", b"{}"),
        ("0/song.ogg", b"audio"),
    ]


def test_list_entries_recovers_utf8_names_without_flag(tmp_path: Path) -> None:
    container = tmp_path / "legacy.mcz"
    _write_raw_name_zip(container, "曲.ogg".encode("utf-8"), b"audio")

    entries = list_entries(container)

    assert entries[0].name == "曲.ogg"


def test_list_entries_uses_placeholder_for_undecodable_names(tmp_path: Path) -> None:
    container = tmp_path / "legacy.mcz"
    _write_raw_name_zip(container, "曲.ogg".encode("shift_jis"), b"audio")

    entries = list_entries(container, placeholder="invalid_utf8_name")

    assert entries[0].name == "invalid_utf8_name"
    assert entries[0].data == b"audio"


def test_list_entries_wraps_bad_archives(tmp_path: Path) -> None:
    container = tmp_path / "broken.mcz"
    _ = container.write_bytes(b"not a zip")

    with pytest.raises(ContainerIOError) as excinfo:
        _ = list_entries(container)

    assert excinfo.value.container_path == container


def test_list_entries_wraps_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ContainerIOError):
        _ = list_entries(tmp_path / "missing.mcz")


def test_write_container_stores_sorted_uncompressed_entries(tmp_path: Path) -> None:
    output = tmp_path / "out" / "pack.osz"

    result = write_container(output, [("b.osu", b"B"), ("a.jpg", b"A")])

    assert result == output
    with zipfile.ZipFile(output) as archive:
        infos = archive.infolist()
        assert [info.filename for info in infos] == ["a.jpg", "b.osu"]
        assert all(info.compress_type == zipfile.ZIP_STORED for info in infos)
        assert archive.read("b.osu") == b"B"
