"""Map source notes onto target hit objects."""

from __future__ import annotations

import math
from collections.abc import Iterable

from maniaconv.features.chart.domain.source import SourceNote
from maniaconv.features.chart.domain.target import PLAYFIELD_WIDTH, HitObject
from maniaconv.features.timeline.tempo import TempoTimeline


def column_to_x(column: int, column_count: int) -> int:
    """Centre of ``column`` on the playfield, in osu! pixels."""

    return math.floor((column + 0.5) * (PLAYFIELD_WIDTH / column_count))


def map_notes(
    notes: Iterable[SourceNote],
    timeline: TempoTimeline,
    column_count: int,
) -> list[HitObject]:
    """Resolve every playable note; notes without a column land in column 0."""

    hit_objects: list[HitObject] = []
    for note in notes:
        x_pixel = column_to_x(note.column or 0, column_count)
        start_ms = timeline.beat_to_time(note.beat.to_float())
        end_ms = (
            timeline.beat_to_time(note.end_beat.to_float())
            if note.end_beat is not None
            else None
        )
        hit_objects.append(HitObject(x_pixel=x_pixel, start_ms=start_ms, end_ms=end_ms))
    return hit_objects


__all__ = ["column_to_x", "map_notes"]
