"""Summarise already-converted target containers."""

from __future__ import annotations

import logging
import tempfile
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from maniaconv.config.settings import INVALID_NAME_PLACEHOLDER, MAX_WORKERS
from maniaconv.features.chart.domain.summary import sort_by_rating
from maniaconv.features.chart.usecases.summary_builder import build_summary
from maniaconv.features.chart.usecases.target_reader import read_target_chart
from maniaconv.platform.archive import ContainerIOError, list_entries
from maniaconv.platform.filesystem import find_files
from maniaconv.platform.logging import logger
from maniaconv.shared.errors import ChartError, UnsupportedModeError

from .container_runner import TARGET_CONTAINER_SUFFIX, extract_entries
from .conversion_logging import log_conversion
from .processing_types import ChartOutcome, ChartResult, ContainerResult, ConversionEvent, RejectionReason
from .rating import Rater, rate_safely

TARGET_CHART_SUFFIX = ".osu"


def inspect_chart_file(chart_path: Path, rater: Rater | None = None) -> ChartResult:
    """Read one target chart and summarise it; failures become rejected results."""

    try:
        chart = read_target_chart(chart_path)
    except UnsupportedModeError as exc:
        log_conversion(
            logging.INFO,
            ConversionEvent.CHART_SKIP_MODE,
            "Skipping non-mania chart %s (mode=%d)",
            chart_path.name,
            exc.mode,
            mode=exc.mode,
            source_path=chart_path,
            base_path=chart_path.parent,
        )
        return ChartResult(
            source_path=chart_path,
            outcome=ChartOutcome.REJECTED,
            reason=RejectionReason.UNSUPPORTED_MODE,
            error_message=str(exc),
        )
    except (ChartError, OSError) as exc:
        logger.warning("Cannot read chart %s: %s", chart_path.name, exc)
        return ChartResult(
            source_path=chart_path,
            outcome=ChartOutcome.REJECTED,
            reason=RejectionReason.PARSE_ERROR,
            error_message=str(exc),
        )

    return ChartResult(
        source_path=chart_path,
        outcome=ChartOutcome.CONVERTED,
        summary=build_summary(chart, rate_safely(rater, chart)),
    )


def inspect_container(
    container_path: Path,
    *,
    rater: Rater | None = None,
    max_workers: int | None = MAX_WORKERS,
    placeholder: str = INVALID_NAME_PLACEHOLDER,
) -> ContainerResult:
    """Summarise every chart packed in ``container_path``, sorted by rating."""

    result = ContainerResult(source_path=container_path)
    try:
        with tempfile.TemporaryDirectory(prefix="maniaconv-inspect-") as scratch:
            scratch_dir = Path(scratch)
            _ = extract_entries(
                list_entries(container_path, placeholder=placeholder),
                scratch_dir,
                sanitize=False,
            )
            chart_paths = find_files(scratch_dir, TARGET_CHART_SUFFIX)
            with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="maniaconv-inspect") as executor:
                futures = [executor.submit(inspect_chart_file, path, rater) for path in chart_paths]
                result.charts = [future.result() for future in as_completed(futures)]
    except (ContainerIOError, OSError) as exc:
        result.error_message = str(exc) or type(exc).__name__
        log_conversion(
            logging.ERROR,
            ConversionEvent.CONTAINER_ERROR,
            "Failed to inspect container %s: %s",
            container_path.name,
            result.error_message,
            source_path=container_path,
            base_path=container_path.parent,
            error_message=result.error_message,
        )
        return result

    result.charts.sort(key=lambda chart: chart.source_path.name)
    result.summaries = sort_by_rating(
        [chart.summary for chart in result.charts if chart.summary is not None]
    )
    result.success = True
    return result


def inspect_directory(
    directory: Path,
    *,
    rater: Rater | None = None,
    max_workers: int | None = MAX_WORKERS,
    placeholder: str = INVALID_NAME_PLACEHOLDER,
) -> list[ContainerResult]:
    """Inspect every target container found recursively under ``directory``."""

    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    containers = find_files(directory, TARGET_CONTAINER_SUFFIX)
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="maniaconv-inspect-dir") as executor:
        futures = [
            executor.submit(
                inspect_container,
                container,
                rater=rater,
                max_workers=max_workers,
                placeholder=placeholder,
            )
            for container in containers
        ]
        results = [future.result() for future in as_completed(futures)]

    results.sort(key=lambda item: item.source_path)
    return results


__all__ = ["inspect_chart_file", "inspect_container", "inspect_directory"]
