"""src/maniaconv/features/conversion/usecases/processing_types.py
Where: Conversion feature usecases layer.
What: Shared enums and dataclasses for the conversion flow.
Why: Keep the transcoder and runners lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from maniaconv.features.chart.domain.summary import ChartSummary


class ConversionEvent(StrEnum):
    """Structured event identifiers for conversion logs."""

    DIRECTORY_START = "conversion.directory.start"
    DIRECTORY_COMPLETE = "conversion.directory.complete"
    DIRECTORY_NO_FILES = "conversion.directory.no_files"
    CONTAINER_START = "conversion.container.start"
    CONTAINER_COMPLETE = "conversion.container.complete"
    CONTAINER_ERROR = "conversion.container.error"
    CONTAINER_SKIPPED = "conversion.container.skipped"
    CHART_SUCCESS = "conversion.chart.success"
    CHART_SKIP_MODE = "conversion.chart.skip.mode"
    CHART_ERROR = "conversion.chart.error"
    RESOURCE_MISSING = "conversion.resource.missing"


class ChartOutcome(StrEnum):
    """Terminal states of one chart conversion."""

    CONVERTED = "converted"
    REJECTED = "rejected"


class RejectionReason(StrEnum):
    PARSE_ERROR = "parse_error"
    UNSUPPORTED_MODE = "unsupported_mode"
    MISSING_TEMPO_DATA = "missing_tempo_data"
    IO_ERROR = "io_error"


@dataclass
class ChartResult:
    """Result of converting (or inspecting) one chart file."""

    source_path: Path
    outcome: ChartOutcome
    target_path: Path | None = None
    summary: ChartSummary | None = None
    reason: RejectionReason | None = None
    error_message: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.outcome is ChartOutcome.CONVERTED

    @property
    def skipped(self) -> bool:
        """Unsupported modes are skipped rather than failed."""

        return self.reason is RejectionReason.UNSUPPORTED_MODE


@dataclass
class ContainerResult:
    """Result of processing one container."""

    source_path: Path
    output_path: Path | None = None
    success: bool = False
    error_message: str | None = None
    charts: list[ChartResult] = field(default_factory=list)
    summaries: list[ChartSummary] = field(default_factory=list)

    @property
    def converted(self) -> int:
        return sum(1 for chart in self.charts if chart.success)

    @property
    def skipped(self) -> int:
        return sum(1 for chart in self.charts if chart.skipped)

    @property
    def failed(self) -> int:
        return sum(1 for chart in self.charts if not chart.success and not chart.skipped)


@dataclass(slots=True)
class RunLogContext:
    """Mutable bookkeeping for a directory run."""

    directory: Path
    total_containers: int
    start_time: float = field(default_factory=time.perf_counter)
    converted: int = 0
    failed: int = 0

    def record(self, result: ContainerResult) -> None:
        if result.success:
            self.converted += 1
        else:
            self.failed += 1

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "directory": str(self.directory),
            "total_containers": self.total_containers,
            "converted": self.converted,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "ChartOutcome",
    "ChartResult",
    "ContainerResult",
    "ConversionEvent",
    "RejectionReason",
    "RunLogContext",
]
