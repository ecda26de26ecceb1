# Where: maniaconv.features.timeline
# What: Beat arithmetic, tempo timeline, scroll effects and their merge.
# Why: Turn beat-relative source timing into absolute target timing.

from .beat import RationalBeat
from .merger import merge_timeline
from .scroll import STOPPED_SCROLL_VALUE, ScrollBreakpoint, resolve_scroll_events, scroll_value
from .tempo import TempoBreakpoint, TempoTimeline

__all__ = [
    "RationalBeat",
    "STOPPED_SCROLL_VALUE",
    "ScrollBreakpoint",
    "TempoBreakpoint",
    "TempoTimeline",
    "merge_timeline",
    "resolve_scroll_events",
    "scroll_value",
]
