"""Summary: Parse Malody ``.mc`` JSON text into a SourceChart.
Why: Validate the loosely-typed source format once, at the edge of the engine.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from maniaconv.features.timeline.beat import RationalBeat
from maniaconv.shared.errors import ChartParseError

from ..domain.source import (
    KEY_MODE,
    AudioCue,
    ScrollEvent,
    SourceChart,
    SourceMeta,
    SourceNote,
    TempoEvent,
)


def read_source_chart(path: Path) -> SourceChart:
    """Read and parse a source chart file.

    Raises:
        ChartParseError: If the file cannot be decoded or is not a valid chart.
    """
    try:
        content = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ChartParseError(f"Chart is not valid UTF-8: {exc}") from exc
    return parse_source_chart(content)


def parse_source_chart(content: str) -> SourceChart:
    """Parse chart JSON text.

    Anything before the first ``{`` is discarded; some editors write a BOM or
    other bytes ahead of the JSON object.

    Raises:
        ChartParseError: If the JSON is malformed or misses a required field.
    """
    start = content.find("{")
    if start > 0:
        content = content[start:]

    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ChartParseError(f"Malformed chart JSON: {exc}") from exc

    root = _require_mapping(document, "chart")
    meta = _parse_meta(_require_mapping(root.get("meta"), "meta"))

    tempo_events = tuple(
        TempoEvent(
            beat=_parse_beat(item.get("beat"), f"time[{index}].beat"),
            bpm=_require_positive(item.get("bpm"), f"time[{index}].bpm"),
        )
        for index, item in enumerate(_require_objects(root.get("time"), "time"))
    )

    scroll_events: tuple[ScrollEvent, ...] = ()
    raw_effects = root.get("effect")
    if raw_effects is not None:
        scroll_events = tuple(
            ScrollEvent(
                beat=_parse_beat(item.get("beat"), f"effect[{index}].beat"),
                multiplier=_require_number(item.get("scroll"), f"effect[{index}].scroll"),
            )
            for index, item in enumerate(_require_objects(raw_effects, "effect"))
        )

    raw_notes = _require_objects(root.get("note"), "note")
    if not raw_notes:
        raise ChartParseError("Field 'note' must contain at least the audio entry")

    *playable, sentinel = raw_notes
    notes = tuple(_parse_note(item, index) for index, item in enumerate(playable))
    audio = AudioCue(
        sample=_optional_str(sentinel.get("sound"), "note[-1].sound") or "",
        offset_ms=_optional_int(sentinel.get("offset"), "note[-1].offset") or 0,
    )

    return SourceChart(
        meta=meta,
        tempo_events=tempo_events,
        scroll_events=scroll_events,
        notes=notes,
        audio=audio,
    )


def _parse_meta(meta: Mapping[str, Any]) -> SourceMeta:
    song = _require_mapping(meta.get("song"), "meta.song")
    mode = _require_int(meta.get("mode"), "meta.mode")
    columns = _parse_column_count(meta.get("mode_ext"), mode)

    return SourceMeta(
        creator=_require_str(meta.get("creator"), "meta.creator"),
        background=_require_str(meta.get("background"), "meta.background"),
        version=_require_str(meta.get("version"), "meta.version"),
        mode=mode,
        column_count=columns,
        title=_require_str(song.get("title"), "meta.song.title"),
        artist=_require_str(song.get("artist"), "meta.song.artist"),
        title_original=_optional_str(song.get("titleorg"), "meta.song.titleorg"),
        artist_original=_optional_str(song.get("artistorg"), "meta.song.artistorg"),
        preview_ms=_optional_int(meta.get("preview"), "meta.preview"),
    )


def _parse_column_count(raw_mode_ext: Any, mode: int) -> int:
    """Column count of a key-mode chart; other modes are skipped later and get 0."""

    if mode != KEY_MODE:
        if isinstance(raw_mode_ext, dict):
            column = raw_mode_ext.get("column")
            if isinstance(column, int) and not isinstance(column, bool):
                return column
        return 0

    mode_ext = _require_mapping(raw_mode_ext, "meta.mode_ext")
    columns = _require_int(mode_ext.get("column"), "meta.mode_ext.column")
    if columns <= 0:
        raise ChartParseError(f"Field 'meta.mode_ext.column' must be positive, got {columns}")
    return columns


def _parse_note(item: Mapping[str, Any], index: int) -> SourceNote:
    raw_end = item.get("endbeat")
    column = _optional_int(item.get("column"), f"note[{index}].column")
    if column is not None and column < 0:
        raise ChartParseError(f"Field 'note[{index}].column' must not be negative")
    return SourceNote(
        beat=_parse_beat(item.get("beat"), f"note[{index}].beat"),
        end_beat=_parse_beat(raw_end, f"note[{index}].endbeat") if raw_end is not None else None,
        column=column,
    )


def _parse_beat(value: Any, name: str) -> RationalBeat:
    if not isinstance(value, list):
        raise ChartParseError(f"Field '{name}' must be a [whole, numerator, denominator] list")
    try:
        return RationalBeat.from_sequence(value)
    except ValueError as exc:
        raise ChartParseError(f"Field '{name}': {exc}") from exc


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ChartParseError(f"Missing or invalid object '{name}'")
    return value


def _require_objects(value: Any, name: str) -> list[Mapping[str, Any]]:
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ChartParseError(f"Missing or invalid list '{name}'")
    return value


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ChartParseError(f"Missing or invalid string '{name}'")
    return value


def _optional_str(value: Any, name: str) -> str | None:
    if value is None:
        return None
    return _require_str(value, name)


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ChartParseError(f"Missing or invalid integer '{name}'")
    return value


def _optional_int(value: Any, name: str) -> int | None:
    if value is None:
        return None
    return _require_int(value, name)


def _require_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ChartParseError(f"Missing or invalid number '{name}'")
    try:
        number = float(value)
    except OverflowError as exc:
        raise ChartParseError(f"Field '{name}' is out of range") from exc
    if not math.isfinite(number):
        raise ChartParseError(f"Field '{name}' must be finite, got {number}")
    return number


def _require_positive(value: Any, name: str) -> float:
    number = _require_number(value, name)
    if number <= 0:
        raise ChartParseError(f"Field '{name}' must be positive, got {number}")
    # The beat interval 60000 / bpm must stay finite as well.
    if not math.isfinite(60000.0 / number):
        raise ChartParseError(f"Field '{name}' is too small, got {number}")
    return number


__all__ = ["parse_source_chart", "read_source_chart"]
