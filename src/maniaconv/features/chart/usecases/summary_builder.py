"""Derive a ChartSummary from a target chart."""

from __future__ import annotations

from ..domain.summary import ChartSummary
from ..domain.target import TargetChart


def bpm_range(chart: TargetChart) -> tuple[float, float | None]:
    """Return ``(min_bpm, max_bpm)`` over tempo-change points only.

    ``max_bpm`` is None when the chart has a single tempo point; an empty
    chart yields ``(0.0, None)``.
    """
    bpms = [
        60000.0 / point.value
        for point in chart.timing_points
        if point.is_tempo_change and point.value > 0
    ]
    if not bpms:
        return 0.0, None
    if len(bpms) == 1:
        return bpms[0], None
    return min(bpms), max(bpms)


def chart_length(chart: TargetChart) -> int:
    """Milliseconds from the first note start to the last note start or hold end."""

    if not chart.hit_objects:
        return 0
    first_start = min(hit_object.start_ms for hit_object in chart.hit_objects)
    last_start = max(hit_object.start_ms for hit_object in chart.hit_objects)
    last_end = max(
        (hit_object.end_ms for hit_object in chart.hit_objects if hit_object.end_ms is not None),
        default=0,
    )
    return max(max(last_start, last_end) - first_start, 0)


def build_summary(chart: TargetChart, rating: float | None = None) -> ChartSummary:
    """Build the immutable summary record for ``chart``."""

    min_bpm, max_bpm = bpm_range(chart)
    hold_count = sum(1 for hit_object in chart.hit_objects if hit_object.is_hold)
    meta = chart.metadata
    return ChartSummary(
        title=meta.title,
        title_unicode=meta.title_unicode or None,
        artist=meta.artist,
        artist_unicode=meta.artist_unicode or None,
        creator=meta.creator,
        version=meta.version,
        column_count=meta.circle_size,
        min_bpm=min_bpm,
        max_bpm=max_bpm,
        length_ms=chart_length(chart),
        note_count=len(chart.hit_objects) - hold_count,
        hold_count=hold_count,
        rating=rating,
        background=meta.background or None,
    )


__all__ = ["bpm_range", "build_summary", "chart_length"]
