"""Tests for resolving chart resources."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from maniaconv.features.resources import ResourceSet, resolve_resources


def test_existing_files_are_registered_under_sanitized_names(tmp_path: Path) -> None:
    _ = (tmp_path / "_.jpg").write_bytes(b"img")
    _ = (tmp_path / "song.ogg").write_bytes(b"audio")
    resources = ResourceSet()

    resolved = resolve_resources(tmp_path, "背.jpg", "song.ogg", resources)

    assert resolved.background == "_.jpg"
    assert resolved.audio == "song.ogg"
    assert resolved.missing == ()
    assert resources.snapshot() == frozenset({(tmp_path / "_.jpg").resolve(), (tmp_path / "song.ogg").resolve()})


def test_missing_files_are_reported(tmp_path: Path) -> None:
    _ = (tmp_path / "song.ogg").write_bytes(b"audio")
    resources = ResourceSet()

    resolved = resolve_resources(tmp_path, "bg.jpg", "song.ogg", resources)

    assert resolved.missing == (tmp_path / "bg.jpg",)
    assert len(resources) == 1
    assert tmp_path / "song.ogg" in resources


def test_empty_references_are_ignored(tmp_path: Path) -> None:
    resources = ResourceSet()

    resolved = resolve_resources(tmp_path, "", "", resources)

    assert (resolved.background, resolved.audio) == ("", "")
    assert resolved.missing == ()
    assert len(resources) == 0


def test_resource_set_deduplicates_across_threads(tmp_path: Path) -> None:
    target = tmp_path / "shared.ogg"
    _ = target.write_bytes(b"audio")
    resources = ResourceSet()

    with ThreadPoolExecutor(max_workers=8) as executor:
        added = list(executor.map(lambda _: resources.add(target), range(32)))

    assert added.count(True) == 1
    assert len(resources) == 1
    assert "shared.ogg" not in resources
