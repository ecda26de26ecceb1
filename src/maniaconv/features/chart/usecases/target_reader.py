"""Summary: Read osu!mania chart text back into a TargetChart.
Why: Packed charts can be summarised without their source files.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from maniaconv.shared.errors import ChartParseError, UnsupportedModeError

from ..domain.target import MANIA_MODE, HitObject, TargetChart, TargetMetadata, TimingPoint


class _Section(StrEnum):
    GENERAL = "General"
    METADATA = "Metadata"
    DIFFICULTY = "Difficulty"
    EVENTS = "Events"
    TIMING_POINTS = "TimingPoints"
    HIT_OBJECTS = "HitObjects"
    UNKNOWN = ""

    @classmethod
    def from_header(cls, name: str) -> "_Section":
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


def read_target_chart(path: Path) -> TargetChart:
    """Read a target chart file.

    Raises:
        ChartParseError: If the file is not valid UTF-8.
        UnsupportedModeError: If the chart is not a mania chart.
    """
    try:
        content = path.read_bytes().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ChartParseError(f"Chart is not valid UTF-8: {exc}") from exc
    return parse_target_chart(content)


def parse_target_chart(content: str) -> TargetChart:
    """Parse chart text; unparseable rows are skipped.

    Raises:
        UnsupportedModeError: If ``Mode`` names anything but mania.
    """
    metadata = TargetMetadata()
    chart = TargetChart(metadata=metadata)
    section = _Section.UNKNOWN

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            section = _Section.from_header(line[1:-1])
            continue

        match section:
            case _Section.GENERAL | _Section.METADATA | _Section.DIFFICULTY:
                if ":" in line:
                    key, value = (part.strip() for part in line.split(":", 1))
                    _apply_key_value(metadata, key, value)
            case _Section.EVENTS:
                if line.startswith("//"):
                    continue
                parts = line.split(",")
                if len(parts) >= 3 and parts[0] == "0" and parts[1] == "0":
                    metadata.background = parts[2].strip('"')
            case _Section.TIMING_POINTS:
                point = _parse_timing_point(line)
                if point is not None:
                    chart.timing_points.append(point)
            case _Section.HIT_OBJECTS:
                hit_object = _parse_hit_object(line)
                if hit_object is not None:
                    chart.hit_objects.append(hit_object)
            case _Section.UNKNOWN:
                pass

    return chart


def _apply_key_value(metadata: TargetMetadata, key: str, value: str) -> None:
    match key:
        case "AudioFilename":
            metadata.audio_filename = value
        case "PreviewTime":
            metadata.preview_time = _to_int(value, 0)
        case "Mode":
            mode = _to_int(value, 0)
            if mode != MANIA_MODE:
                raise UnsupportedModeError(mode)
        case "Title":
            metadata.title = value
        case "TitleUnicode":
            metadata.title_unicode = value
        case "Artist":
            metadata.artist = value
        case "ArtistUnicode":
            metadata.artist_unicode = value
        case "Creator":
            metadata.creator = value
        case "Version":
            metadata.version = value
        case "CircleSize":
            metadata.circle_size = int(_to_float(value, 0.0))
        case "OverallDifficulty":
            metadata.overall_difficulty = _to_float(value, 0.0)
        case _:
            pass


def _parse_timing_point(line: str) -> TimingPoint | None:
    parts = line.split(",")
    if len(parts) < 2:
        return None
    try:
        time_ms = float(parts[0])
        value = float(parts[1])
    except ValueError:
        return None
    is_tempo_change = parts[6].strip() == "1" if len(parts) > 6 else True
    return TimingPoint(time_ms=time_ms, value=value, is_tempo_change=is_tempo_change)


def _parse_hit_object(line: str) -> HitObject | None:
    parts = line.split(",")
    if len(parts) < 4:
        return None
    try:
        x_pixel = int(parts[0])
        start_ms = int(float(parts[2]))
        type_flags = int(parts[3])
    except ValueError:
        return None

    end_ms: int | None = None
    if type_flags & 128 and len(parts) > 5:
        end_ms = _to_int(parts[5].split(":", 1)[0], start_ms)
    return HitObject(x_pixel=x_pixel, start_ms=start_ms, end_ms=end_ms)


def _to_int(value: str, default: int) -> int:
    try:
        return int(float(value))
    except ValueError:
        return default


def _to_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


__all__ = ["parse_target_chart", "read_target_chart"]
