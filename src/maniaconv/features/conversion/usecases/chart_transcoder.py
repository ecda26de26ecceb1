"""src/maniaconv/features/conversion/usecases/chart_transcoder.py
Where: Conversion feature usecases layer.
What: Turn one source chart into a target chart, its text file and its summary.
Why: A chart is the smallest unit of failure; everything past this boundary sees results only.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path

from maniaconv.config.settings import OVERALL_DIFFICULTY
from maniaconv.features.chart.domain.source import SourceChart
from maniaconv.features.chart.domain.target import TargetChart, TargetMetadata
from maniaconv.features.chart.usecases.source_parser import read_source_chart
from maniaconv.features.chart.usecases.summary_builder import build_summary
from maniaconv.features.chart.usecases.target_writer import write_target_chart
from maniaconv.features.resources import ResourceSet, resolve_resources
from maniaconv.features.timeline import TempoTimeline, merge_timeline, resolve_scroll_events
from maniaconv.shared.errors import ChartParseError, MissingTempoDataError, UnsupportedModeError

from .conversion_logging import log_conversion
from .note_mapper import map_notes
from .processing_types import ChartOutcome, ChartResult, ConversionEvent, RejectionReason
from .rating import Rater, rate_safely

TARGET_SUFFIX = ".osu"


def preview_time(chart: SourceChart) -> int:
    """Preview start in target time; only a positive offset below it is removed."""

    preview = chart.meta.preview_ms or 0
    offset = chart.audio.offset_ms
    if offset > 0 and preview > offset:
        preview -= offset
    return preview


def build_target_metadata(chart: SourceChart, overall_difficulty: float) -> TargetMetadata:
    """Map source metadata onto the target fields.

    ASCII-facing ``Title``/``Artist`` prefer the original-language names when
    the chart carries them; the unicode fields keep the display names.
    """
    meta = chart.meta
    return TargetMetadata(
        audio_filename=chart.audio.sample,
        preview_time=preview_time(chart),
        title=meta.title_original or meta.title,
        title_unicode=meta.title,
        artist=meta.artist_original or meta.artist,
        artist_unicode=meta.artist,
        creator=meta.creator,
        version=meta.version,
        circle_size=meta.column_count,
        overall_difficulty=overall_difficulty,
        background=meta.background,
    )


def transcode_chart(chart: SourceChart, *, overall_difficulty: float = OVERALL_DIFFICULTY) -> TargetChart:
    """Build the target chart for a parsed key-mode chart.

    Raises:
        UnsupportedModeError: If the chart is not a key-mode chart.
        MissingTempoDataError: If the chart has no tempo events.
    """
    if not chart.meta.is_key_mode:
        raise UnsupportedModeError(chart.meta.mode)

    offset_ms = chart.audio.offset_ms
    timeline = TempoTimeline.build(chart.tempo_events, offset_ms)
    scroll_points = resolve_scroll_events(chart.scroll_events, timeline)

    return TargetChart(
        metadata=build_target_metadata(chart, overall_difficulty),
        timing_points=merge_timeline(timeline.breakpoints, scroll_points),
        hit_objects=map_notes(chart.notes, timeline, chart.meta.column_count),
    )


def convert_chart_file(
    chart_path: Path,
    *,
    resources: ResourceSet | None = None,
    rater: Rater | None = None,
    overall_difficulty: float = OVERALL_DIFFICULTY,
    base_path: Path | None = None,
) -> ChartResult:
    """Convert one chart file to ``<stem>.osu`` beside it.

    Failures are caught here, logged and returned as a rejected result; they
    never reach the caller as exceptions.

    Args:
        chart_path: Source chart on disk.
        resources: Shared set collecting asset paths for packing. When omitted
            the references are still sanitized and checked but nothing is shared.
        rater: Optional difficulty backend.
        overall_difficulty: Value written to ``OverallDifficulty``.
        base_path: Root used to shorten paths in log output.

    Returns:
        ChartResult: Converted result with target path and summary, or a
        rejected result carrying the reason.
    """
    started = time.perf_counter()
    resources = resources if resources is not None else ResourceSet()
    base_context = {"source_path": chart_path, "base_path": base_path or chart_path.parent}

    try:
        source = read_source_chart(chart_path)
        if not source.meta.is_key_mode:
            raise UnsupportedModeError(source.meta.mode)

        resolved = resolve_resources(
            chart_path.parent,
            source.meta.background,
            source.audio.sample,
            resources,
        )
        source = replace(
            source,
            meta=replace(source.meta, background=resolved.background),
            audio=replace(source.audio, sample=resolved.audio),
        )
        target = transcode_chart(source, overall_difficulty=overall_difficulty)
        target_path = write_target_chart(target, chart_path.with_suffix(TARGET_SUFFIX))
    except UnsupportedModeError as exc:
        log_conversion(
            logging.INFO,
            ConversionEvent.CHART_SKIP_MODE,
            "Skipping non-key chart %s (mode=%d)",
            chart_path.name,
            exc.mode,
            mode=exc.mode,
            **base_context,
        )
        return _rejected(chart_path, RejectionReason.UNSUPPORTED_MODE, str(exc))
    except (ChartParseError, MissingTempoDataError) as exc:
        reason = (
            RejectionReason.MISSING_TEMPO_DATA
            if isinstance(exc, MissingTempoDataError)
            else RejectionReason.PARSE_ERROR
        )
        log_conversion(
            logging.ERROR,
            ConversionEvent.CHART_ERROR,
            "Failed to convert %s: %s",
            chart_path.name,
            exc,
            error_message=str(exc),
            **base_context,
        )
        return _rejected(chart_path, reason, str(exc))
    except OSError as exc:
        error_message = str(exc) or type(exc).__name__
        log_conversion(
            logging.ERROR,
            ConversionEvent.CHART_ERROR,
            "I/O error converting %s: %s",
            chart_path.name,
            error_message,
            error_message=error_message,
            **base_context,
        )
        return _rejected(chart_path, RejectionReason.IO_ERROR, error_message)
    except (ValueError, ArithmeticError) as exc:
        # Timing values the parser let through but the timeline cannot place.
        error_message = f"Invalid timing data: {exc}"
        log_conversion(
            logging.ERROR,
            ConversionEvent.CHART_ERROR,
            "Failed to convert %s: %s",
            chart_path.name,
            error_message,
            error_message=error_message,
            **base_context,
        )
        return _rejected(chart_path, RejectionReason.PARSE_ERROR, error_message)

    warnings: list[str] = []
    for missing in resolved.missing:
        warnings.append(f"Missing resource: {missing.name}")
        log_conversion(
            logging.WARNING,
            ConversionEvent.RESOURCE_MISSING,
            "Resource %s referenced by %s not found",
            missing.name,
            chart_path.name,
            source_path=missing,
            base_path=base_context["base_path"],
        )

    _ = resources.add(target_path)
    rating = rate_safely(rater, target)
    summary = build_summary(target, rating)
    duration_ms = (time.perf_counter() - started) * 1000

    log_conversion(
        logging.INFO,
        ConversionEvent.CHART_SUCCESS,
        "Converted %s [%s] in %.2f ms",
        chart_path.name,
        target.metadata.version,
        duration_ms,
        target_path=target_path,
        version=target.metadata.version,
        duration_ms=duration_ms,
        **base_context,
    )
    return ChartResult(
        source_path=chart_path,
        outcome=ChartOutcome.CONVERTED,
        target_path=target_path,
        summary=summary,
        warnings=warnings,
    )


def _rejected(chart_path: Path, reason: RejectionReason, message: str) -> ChartResult:
    return ChartResult(
        source_path=chart_path,
        outcome=ChartOutcome.REJECTED,
        reason=reason,
        error_message=message,
    )


__all__ = [
    "TARGET_SUFFIX",
    "build_target_metadata",
    "convert_chart_file",
    "preview_time",
    "transcode_chart",
]
