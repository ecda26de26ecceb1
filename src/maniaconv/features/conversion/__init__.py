"""Summary: Conversion feature exports.
Why: UI and application layers import orchestration entry points from one place.
"""

from .usecases.chart_transcoder import convert_chart_file, transcode_chart
from .usecases.container_runner import PostProcessHook, convert_container
from .usecases.directory_runner import ProgressCallback, convert_directory
from .usecases.inspection import inspect_chart_file, inspect_container, inspect_directory
from .usecases.note_mapper import column_to_x, map_notes
from .usecases.processing_types import (
    ChartOutcome,
    ChartResult,
    ContainerResult,
    ConversionEvent,
    RejectionReason,
)
from .usecases.rating import Rater, RatingUnavailableError, rate_safely

__all__ = [
    "ChartOutcome",
    "ChartResult",
    "ContainerResult",
    "ConversionEvent",
    "PostProcessHook",
    "ProgressCallback",
    "Rater",
    "RatingUnavailableError",
    "RejectionReason",
    "column_to_x",
    "convert_chart_file",
    "convert_container",
    "convert_directory",
    "inspect_chart_file",
    "inspect_container",
    "inspect_directory",
    "map_notes",
    "rate_safely",
    "transcode_chart",
]
