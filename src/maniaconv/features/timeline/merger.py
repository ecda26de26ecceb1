"""Summary: Merge tempo and scroll breakpoints into one timing point stream.
Why: Players apply points in file order, so simultaneous points need a fixed order.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from maniaconv.features.chart.domain.target import TimingPoint

from .scroll import ScrollBreakpoint
from .tempo import TempoBreakpoint


def merge_timeline(
    tempo: Sequence[TempoBreakpoint],
    scroll: Sequence[ScrollBreakpoint],
) -> list[TimingPoint]:
    """Interleave both streams by time.

    Scroll points earlier than the first tempo point are dropped. On equal
    times the tempo point comes first.
    """
    tempo_points = [
        TimingPoint(time_ms=float(point.time_ms), value=point.ms_per_beat, is_tempo_change=True)
        for point in tempo
    ]
    if not tempo_points:
        return []

    start = tempo_points[0].time_ms
    scroll_points = sorted(
        (
            TimingPoint(time_ms=float(point.time_ms), value=point.value, is_tempo_change=False)
            for point in scroll
            if point.time_ms >= start
        ),
        key=lambda point: point.time_ms,
    )

    # heapq.merge is stable across its inputs: ties keep the tempo stream first.
    return list(heapq.merge(tempo_points, scroll_points, key=lambda point: point.time_ms))


__all__ = ["merge_timeline"]
