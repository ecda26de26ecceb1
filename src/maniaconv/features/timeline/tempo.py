"""Where: src/maniaconv/features/timeline/tempo.py
What: Build the tempo breakpoint list and resolve beats to absolute milliseconds.
Why: Every timed element of a converted chart goes through this one mapping.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from maniaconv.shared.errors import MissingTempoDataError

from .beat import RationalBeat

# ms-per-beat is rounded to 12 decimals before multiplying so float drift
# cannot move a note into a neighbouring millisecond.
_SNAP_SCALE = 10e11


class TempoMark(Protocol):
    """A BPM value effective from a beat."""

    @property
    def beat(self) -> RationalBeat: ...

    @property
    def bpm(self) -> float: ...


@dataclass(frozen=True, slots=True)
class TempoBreakpoint:
    """Start of a tempo segment: beat, absolute time and ms per beat."""

    beat: float
    time_ms: int
    ms_per_beat: float


def _snap(ms_per_beat: float) -> float:
    return math.floor(ms_per_beat * _SNAP_SCALE + 0.5) / _SNAP_SCALE


class TempoTimeline:
    """Ordered tempo breakpoints plus the lead-in needed to extrapolate before them."""

    def __init__(
        self,
        breakpoints: Sequence[TempoBreakpoint],
        base_interval: float,
        offset_ms: float = 0,
    ) -> None:
        self.breakpoints: tuple[TempoBreakpoint, ...] = tuple(breakpoints)
        self.base_interval: float = base_interval
        self.offset_ms: float = offset_ms
        self._beats: list[float] = [breakpoint.beat for breakpoint in self.breakpoints]

    @classmethod
    def build(cls, tempo_events: Sequence[TempoMark], offset_ms: float = 0) -> "TempoTimeline":
        """Build the timeline from ordered tempo events and the global offset.

        The first breakpoint sits on the first whole beat at or after the
        offset; the first event's own beat is not used. Time elapsed up to each
        later event is measured under the tempo in force before it.

        Raises:
            MissingTempoDataError: If ``tempo_events`` is empty.
        """
        if not tempo_events:
            raise MissingTempoDataError()

        base_interval = 60000.0 / tempo_events[0].bpm
        start_beat = float(math.ceil(offset_ms / base_interval))
        start_time = max(0, math.floor(start_beat * base_interval - offset_ms))
        breakpoints = [TempoBreakpoint(start_beat, start_time, base_interval)]

        for event in tempo_events[1:]:
            previous = breakpoints[-1]
            beat = event.beat.to_float()
            elapsed = max(0, int((beat - previous.beat) * previous.ms_per_beat))
            breakpoints.append(
                TempoBreakpoint(beat, previous.time_ms + elapsed, 60000.0 / event.bpm)
            )

        return cls(breakpoints, base_interval, offset_ms)

    def beat_to_time(self, beat: float) -> int:
        """Map ``beat`` to an absolute time in whole milliseconds.

        Beats before the first breakpoint are extrapolated from the base tempo
        and the offset; results below zero clamp to zero.
        """
        if not self.breakpoints:
            return 0

        if beat < self.breakpoints[0].beat:
            return max(0, int(beat * self.base_interval - self.offset_ms))

        index = max(bisect_right(self._beats, beat) - 1, 0)
        segment = self.breakpoints[index]
        return segment.time_ms + max(0, math.floor((beat - segment.beat) * _snap(segment.ms_per_beat)))


__all__ = ["TempoBreakpoint", "TempoMark", "TempoTimeline"]
