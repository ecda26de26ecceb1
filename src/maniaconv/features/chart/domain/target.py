"""Where: src/maniaconv/features/chart/domain/target.py
What: Value objects for an osu!mania chart.
Why: Separate the absolute-time target model from its text serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field

PLAYFIELD_WIDTH = 512
MANIA_MODE = 3


@dataclass(frozen=True, slots=True)
class TimingPoint:
    """Tempo change (``value`` = ms per beat) or scroll change (negative percentage)."""

    time_ms: float
    value: float
    is_tempo_change: bool


@dataclass(frozen=True, slots=True)
class HitObject:
    """A tap note, or a hold note when ``end_ms`` is set."""

    x_pixel: int
    start_ms: int
    end_ms: int | None = None

    @property
    def is_hold(self) -> bool:
        return self.end_ms is not None


@dataclass(slots=True)
class TargetMetadata:
    """General, metadata and difficulty fields of a target chart."""

    audio_filename: str = ""
    preview_time: int = 0
    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    version: str = ""
    circle_size: int = 0
    overall_difficulty: float = 8.0
    background: str = ""


@dataclass(slots=True)
class TargetChart:
    """A complete target chart ready for serialization."""

    metadata: TargetMetadata
    timing_points: list[TimingPoint] = field(default_factory=list)
    hit_objects: list[HitObject] = field(default_factory=list)


__all__ = [
    "HitObject",
    "MANIA_MODE",
    "PLAYFIELD_WIDTH",
    "TargetChart",
    "TargetMetadata",
    "TimingPoint",
]
