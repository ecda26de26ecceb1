"""Tests for the tempo timeline and beat-to-time resolution."""

from dataclasses import dataclass

import pytest

from maniaconv.features.timeline import RationalBeat, TempoTimeline
from maniaconv.shared.errors import MissingTempoDataError


@dataclass(frozen=True)
class _Tempo:
    beat: RationalBeat
    bpm: float


def _tempo(whole: int, bpm: float, numerator: int = 0, denominator: int = 1) -> _Tempo:
    return _Tempo(RationalBeat(whole, numerator, denominator), bpm)


@pytest.mark.parametrize("bpm", [60.0, 120.0, 125.0, 150.0, 240.0])
def test_single_tempo_maps_whole_beats_linearly(bpm: float) -> None:
    timeline = TempoTimeline.build([_tempo(0, bpm)])
    interval = 60000.0 / bpm

    assert timeline.beat_to_time(0) == 0
    for beat in range(1, 33):
        assert timeline.beat_to_time(beat) == beat * interval


def test_first_breakpoint_at_zero_for_zero_offset() -> None:
    timeline = TempoTimeline.build([_tempo(0, 120)])

    first = timeline.breakpoints[0]
    assert (first.beat, first.time_ms, first.ms_per_beat) == (0.0, 0, 500.0)


def test_later_tempo_changes_accumulate_time() -> None:
    timeline = TempoTimeline.build([_tempo(0, 120), _tempo(4, 240)])

    assert [(point.beat, point.time_ms) for point in timeline.breakpoints] == [(0.0, 0), (4.0, 2000)]
    assert timeline.beat_to_time(2) == 1000
    assert timeline.beat_to_time(4) == 2000
    assert timeline.beat_to_time(6) == 2500


def test_fractional_beats_floor_to_milliseconds() -> None:
    timeline = TempoTimeline.build([_tempo(0, 180)])

    # 1/3 beat at 333.33 ms per beat
    assert timeline.beat_to_time(RationalBeat(0, 1, 3).to_float()) == 111


def test_positive_offset_shifts_first_breakpoint() -> None:
    timeline = TempoTimeline.build([_tempo(0, 120)], offset_ms=250)

    first = timeline.breakpoints[0]
    assert (first.beat, first.time_ms) == (1.0, 250)
    assert timeline.beat_to_time(2) == 750


def test_beats_before_first_breakpoint_extrapolate_and_clamp() -> None:
    timeline = TempoTimeline.build([_tempo(0, 120)], offset_ms=250)

    assert timeline.beat_to_time(0.75) == 125
    assert timeline.beat_to_time(0) == 0


def test_negative_offset_delays_chart() -> None:
    timeline = TempoTimeline.build([_tempo(0, 120)], offset_ms=-300)

    assert timeline.breakpoints[0].time_ms == 300
    assert timeline.beat_to_time(1) == 800


def test_breakpoints_are_monotonic() -> None:
    events = [_tempo(0, 140), _tempo(3, 200, 1, 2), _tempo(8, 90), _tempo(8, 175, 3, 4), _tempo(20, 60)]
    timeline = TempoTimeline.build(events)

    beats = [point.beat for point in timeline.breakpoints]
    times = [point.time_ms for point in timeline.breakpoints]
    assert beats == sorted(beats)
    assert times == sorted(times)


def test_build_without_tempo_events_raises() -> None:
    with pytest.raises(MissingTempoDataError, match="Missing BPM data"):
        _ = TempoTimeline.build([])


def test_empty_timeline_resolves_to_zero() -> None:
    assert TempoTimeline([], base_interval=500.0).beat_to_time(12) == 0
