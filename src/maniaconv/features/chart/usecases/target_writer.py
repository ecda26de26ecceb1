"""Where: src/maniaconv/features/chart/usecases/target_writer.py
What: Serialize a TargetChart into osu! file format v14 text.
Why: The section order and row grammar are fixed; players reject deviations.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from ..domain.target import HitObject, TargetChart, TimingPoint


def format_number(value: float) -> str:
    """Render a float the way the format's reference tooling does.

    Whole values drop the fractional part (``500``); others use the shortest
    round-trip digits in positional notation (``333.3333333333333``).
    """
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _format_overall_difficulty(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _timing_row(point: TimingPoint) -> str:
    uninherited = 1 if point.is_tempo_change else 0
    return f"{format_number(point.time_ms)},{format_number(point.value)},4,2,0,10,{uninherited},0"


def _hit_object_row(hit_object: HitObject) -> str:
    if hit_object.end_ms is not None:
        return f"{hit_object.x_pixel},192,{hit_object.start_ms},128,0,{hit_object.end_ms}:0:0:0:0:"
    return f"{hit_object.x_pixel},192,{hit_object.start_ms},1,0,0:0:0:0:"


def serialize_target_chart(chart: TargetChart) -> str:
    """Return the complete chart text."""

    meta = chart.metadata
    lines: list[str] = [
        "osu file format v14",
        "",
        "[General]",
        f"AudioFilename: {meta.audio_filename}",
        "AudioLeadIn: 0",
        f"PreviewTime: {meta.preview_time}",
        "Countdown: 0",
        "SampleSet: Soft",
        "StackLeniency: 0.7",
        "Mode: 3",
        "LetterboxInBreaks: 0",
        "SpecialStyle: 0",
        "WidescreenStoryboard: 1",
        "",
        "[Editor]",
        "DistanceSpacing: 1",
        "BeatDivisor: 8",
        "GridSize: 4",
        "TimelineZoom: 2",
        "",
        "[Metadata]",
        f"Title:{meta.title}",
        f"TitleUnicode:{meta.title_unicode}",
        f"Artist:{meta.artist}",
        f"ArtistUnicode:{meta.artist_unicode}",
        f"Creator:{meta.creator}",
        f"Version:{meta.version}",
        "Source:",
        "Tags:",
        "BeatmapID:0",
        "BeatmapSetID:-1",
        "",
        "[Difficulty]",
        "HPDrainRate:8",
        f"CircleSize:{meta.circle_size}",
        f"OverallDifficulty:{_format_overall_difficulty(meta.overall_difficulty)}",
        "ApproachRate:5",
        "SliderMultiplier:1.4",
        "SliderTickRate:1",
        "",
        "[Events]",
        "//Background and Video events",
    ]
    if meta.background:
        lines.append(f'0,0,"{meta.background}",0,0')
    lines.extend(
        [
            "//Break Periods",
            "//Storyboard Layer 0 (Background)",
            "//Storyboard Layer 1 (Fail)",
            "//Storyboard Layer 2 (Pass)",
            "//Storyboard Layer 3 (Foreground)",
            "//Storyboard Layer 4 (Overlay)",
            "//Storyboard Sound Samples",
            "",
            "[TimingPoints]",
        ]
    )

    head = "\n".join(lines) + "\n"
    timing = "\n".join(_timing_row(point) for point in chart.timing_points)
    objects = "\n".join(_hit_object_row(hit_object) for hit_object in chart.hit_objects)
    return f"{head}{timing}\n\n[HitObjects]\n{objects}"


def write_target_chart(chart: TargetChart, path: Path) -> Path:
    """Serialize ``chart`` to ``path`` as UTF-8 and return the path."""

    _ = path.write_text(serialize_target_chart(chart), encoding="utf-8", newline="\n")
    return path


__all__ = ["format_number", "serialize_target_chart", "write_target_chart"]
