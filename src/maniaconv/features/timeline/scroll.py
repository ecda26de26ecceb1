"""Resolve scroll-speed events to absolute time and the target speed encoding."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .beat import RationalBeat
from .tempo import TempoTimeline

# Inherited timing points read a negative value as -100 / multiplier, so a
# huge magnitude approximates a halted scroll.
STOPPED_SCROLL_VALUE = -100000000.0


class ScrollMark(Protocol):
    """A scroll multiplier effective from a beat."""

    @property
    def beat(self) -> RationalBeat: ...

    @property
    def multiplier(self) -> float: ...


@dataclass(frozen=True, slots=True)
class ScrollBreakpoint:
    beat: float
    time_ms: int
    value: float


def scroll_value(multiplier: float) -> float:
    """Encode a multiplier; zero and negative multipliers mean a stop."""

    if multiplier > 0:
        return -100.0 / multiplier
    return STOPPED_SCROLL_VALUE


def resolve_scroll_events(
    events: Iterable[ScrollMark],
    timeline: TempoTimeline,
) -> list[ScrollBreakpoint]:
    breakpoints: list[ScrollBreakpoint] = []
    for event in events:
        beat = event.beat.to_float()
        breakpoints.append(
            ScrollBreakpoint(
                beat=beat,
                time_ms=timeline.beat_to_time(beat),
                value=scroll_value(event.multiplier),
            )
        )
    return breakpoints


__all__ = ["STOPPED_SCROLL_VALUE", "ScrollBreakpoint", "ScrollMark", "resolve_scroll_events", "scroll_value"]
