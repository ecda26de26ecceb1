"""Shared pytest fixtures for maniaconv tests."""

from __future__ import annotations

import json
import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

ChartFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import maniaconv.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def config_runtime_env(portable_repo_root: Path) -> Iterator[None]:
    """Reset configuration singletons around a test run."""

    _ = portable_repo_root
    import maniaconv.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    original_config = config_module.config

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    config_module.config = config_module.Config.load()

    try:
        yield None
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
        config_module.config = original_config


@pytest.fixture
def make_chart() -> ChartFactory:
    """Return a builder for source chart documents.

    Notes are ``(beat, column)`` or ``(beat, column, endbeat)`` tuples with
    beats given as ``[whole, numerator, denominator]`` lists. The audio entry
    is appended as the last note.
    """

    def _make(
        *,
        mode: int = 0,
        columns: int = 4,
        bpm: float = 120,
        tempo: list[dict[str, Any]] | None = None,
        effects: list[dict[str, Any]] | None = None,
        notes: list[tuple[Any, ...]] | None = None,
        offset: int = 0,
        sound: str = "song.ogg",
        background: str = "bg.jpg",
        version: str = "4K Hard",
        title: str = "Song",
        artist: str = "Artist",
        titleorg: str | None = None,
        artistorg: str | None = None,
        preview: int | None = None,
    ) -> dict[str, Any]:
        song: dict[str, Any] = {"title": title, "artist": artist}
        if titleorg is not None:
            song["titleorg"] = titleorg
        if artistorg is not None:
            song["artistorg"] = artistorg
        meta: dict[str, Any] = {
            "creator": "Mapper",
            "background": background,
            "version": version,
            "mode": mode,
            "song": song,
            "mode_ext": {"column": columns},
        }
        if preview is not None:
            meta["preview"] = preview

        note_entries: list[dict[str, Any]] = []
        for note in notes if notes is not None else [([0, 0, 1], 0)]:
            entry: dict[str, Any] = {"beat": note[0], "column": note[1]}
            if len(note) > 2:
                entry["endbeat"] = note[2]
            note_entries.append(entry)
        note_entries.append({"beat": [0, 0, 1], "sound": sound, "vol": 100, "offset": offset, "type": 1})

        document: dict[str, Any] = {
            "meta": meta,
            "time": tempo if tempo is not None else [{"beat": [0, 0, 1], "bpm": bpm}],
            "note": note_entries,
        }
        if effects is not None:
            document["effect"] = effects
        return document

    return _make


@pytest.fixture
def write_chart(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Write a chart document as ``.mc`` under ``tmp_path``."""

    def _write(document: dict[str, Any], name: str = "chart.mc") -> Path:
        path = tmp_path / name
        _ = path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def build_container() -> Callable[[Path, dict[str, bytes]], Path]:
    """Write a zip container with the given ``{entry name: data}`` mapping."""

    def _write(path: Path, entries: dict[str, bytes]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w") as archive:
            for name, data in entries.items():
                archive.writestr(name, data)
        return path

    return _write
