"""Where: src/maniaconv/features/chart/domain/source.py
What: Value objects for one difficulty of a Malody chart set.
Why: Give the timeline and mapping code typed input instead of raw JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from maniaconv.features.timeline.beat import RationalBeat

KEY_MODE = 0


@dataclass(frozen=True, slots=True)
class SourceMeta:
    """Chart metadata block."""

    creator: str
    background: str
    version: str
    mode: int
    column_count: int
    title: str
    artist: str
    title_original: str | None = None
    artist_original: str | None = None
    preview_ms: int | None = None

    @property
    def is_key_mode(self) -> bool:
        return self.mode == KEY_MODE


@dataclass(frozen=True, slots=True)
class TempoEvent:
    """BPM effective from ``beat`` onward."""

    beat: RationalBeat
    bpm: float


@dataclass(frozen=True, slots=True)
class ScrollEvent:
    """Scroll speed multiplier effective from ``beat`` onward."""

    beat: RationalBeat
    multiplier: float


@dataclass(frozen=True, slots=True)
class SourceNote:
    """A playable note; ``end_beat`` is set for hold notes."""

    beat: RationalBeat
    end_beat: RationalBeat | None = None
    column: int | None = None

    @property
    def is_hold(self) -> bool:
        return self.end_beat is not None


@dataclass(frozen=True, slots=True)
class AudioCue:
    """Audio reference carried by the trailing entry of the source note list.

    The source format stores the song file and the global offset on the last
    element of ``note`` instead of on the chart itself; that element is never
    playable.
    """

    sample: str = ""
    offset_ms: int = 0


@dataclass(frozen=True, slots=True)
class SourceChart:
    """A parsed source chart with the audio sentinel split off from the notes."""

    meta: SourceMeta
    tempo_events: tuple[TempoEvent, ...]
    notes: tuple[SourceNote, ...]
    audio: AudioCue
    scroll_events: tuple[ScrollEvent, ...] = field(default_factory=tuple)


__all__ = [
    "AudioCue",
    "KEY_MODE",
    "ScrollEvent",
    "SourceChart",
    "SourceMeta",
    "SourceNote",
    "TempoEvent",
]
