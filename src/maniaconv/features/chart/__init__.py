# Where: maniaconv.features.chart.__init__
# What: Expose source/target chart models, codecs and summaries.
# Why: Provide one import surface for the conversion and inspection layers.

from maniaconv.shared.errors import (
    ChartError,
    ChartParseError,
    MissingTempoDataError,
    UnsupportedModeError,
)
from .domain.source import AudioCue, ScrollEvent, SourceChart, SourceMeta, SourceNote, TempoEvent
from .domain.summary import ChartSummary
from .domain.target import HitObject, TargetChart, TargetMetadata, TimingPoint
from .usecases.source_parser import parse_source_chart, read_source_chart
from .usecases.summary_builder import build_summary
from .usecases.target_reader import parse_target_chart, read_target_chart
from .usecases.target_writer import format_number, serialize_target_chart, write_target_chart

__all__ = [
    "AudioCue",
    "ChartError",
    "ChartParseError",
    "ChartSummary",
    "HitObject",
    "MissingTempoDataError",
    "ScrollEvent",
    "SourceChart",
    "SourceMeta",
    "SourceNote",
    "TargetChart",
    "TargetMetadata",
    "TempoEvent",
    "TimingPoint",
    "UnsupportedModeError",
    "build_summary",
    "format_number",
    "parse_source_chart",
    "parse_target_chart",
    "read_source_chart",
    "read_target_chart",
    "serialize_target_chart",
    "write_target_chart",
]
