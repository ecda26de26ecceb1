"""src/maniaconv/features/conversion/usecases/container_runner.py
What: Convert every chart of one source container and pack the results.
Why: A container is the second unit of failure; its charts fan out on a thread pool.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path, PurePosixPath

from maniaconv.config.settings import INVALID_NAME_PLACEHOLDER, MAX_WORKERS, OVERALL_DIFFICULTY
from maniaconv.features.chart.domain.summary import ChartSummary, sort_by_rating
from maniaconv.features.resources import ResourceSet, Sanitizer
from maniaconv.platform.archive import ArchiveEntry, ContainerIOError, list_entries, write_container
from maniaconv.platform.filesystem import find_files

from .chart_transcoder import convert_chart_file
from .conversion_logging import log_conversion
from .processing_types import ChartResult, ContainerResult, ConversionEvent
from .rating import Rater

SOURCE_CONTAINER_SUFFIX = ".mcz"
SOURCE_CHART_SUFFIX = ".mc"
TARGET_CONTAINER_SUFFIX = ".osz"

PostProcessHook = Callable[[list[ChartSummary], Path], None]
"""Receives rating-sorted summaries and the scratch directory before cleanup."""


def extract_entries(
    entries: Iterable[ArchiveEntry],
    destination: Path,
    *,
    sanitize: bool = True,
) -> list[Path]:
    """Write entries flat into ``destination`` and return the written paths.

    Folder structure inside the container is discarded; only the final name
    component is kept. Later entries overwrite earlier ones with the same name.
    """
    written: list[Path] = []
    for entry in entries:
        name = PurePosixPath(entry.name.replace("\\", "/")).name
        if not name:
            continue
        if sanitize:
            name = Sanitizer.sanitize_filename(name)
        target = destination / name
        _ = target.write_bytes(entry.data)
        written.append(target)
    return written


def target_container_path(container_path: Path, output_dir: Path | None = None) -> Path:
    """``<stem>.osz`` beside the source container, or inside ``output_dir``."""

    name = container_path.with_suffix(TARGET_CONTAINER_SUFFIX).name
    if output_dir is not None:
        return output_dir / name
    return container_path.with_suffix(TARGET_CONTAINER_SUFFIX)


def convert_container(
    container_path: Path,
    *,
    output_dir: Path | None = None,
    rater: Rater | None = None,
    max_workers: int | None = MAX_WORKERS,
    overall_difficulty: float = OVERALL_DIFFICULTY,
    placeholder: str = INVALID_NAME_PLACEHOLDER,
    post_process: PostProcessHook | None = None,
    base_path: Path | None = None,
) -> ContainerResult:
    """Convert one container into a target container.

    Entries are extracted into a scratch directory that is removed on every
    exit path. Charts convert in parallel; each one that succeeds adds its
    ``.osu`` file and assets to a shared resource set, which is then packed.
    No container is written when no chart converts.

    Args:
        container_path: Source container.
        output_dir: Directory for the target container; defaults to the
            source container's directory.
        rater: Optional difficulty backend passed to every chart.
        max_workers: Thread-pool size for the chart fan-out.
        overall_difficulty: ``OverallDifficulty`` written to every chart.
        placeholder: Name for entries whose names are not valid UTF-8.
        post_process: Hook called with the sorted summaries and the scratch
            directory while it still exists.
        base_path: Root used to shorten paths in log output.

    Returns:
        ContainerResult: Per-chart results, sorted summaries and output path.
    """
    log_base = base_path or container_path.parent
    result = ContainerResult(source_path=container_path)
    log_conversion(
        logging.INFO,
        ConversionEvent.CONTAINER_START,
        "Opening container %s",
        container_path.name,
        source_path=container_path,
        base_path=log_base,
    )

    try:
        with tempfile.TemporaryDirectory(prefix="maniaconv-") as scratch:
            scratch_dir = Path(scratch)
            _ = extract_entries(list_entries(container_path, placeholder=placeholder), scratch_dir)

            resources = ResourceSet()
            result.charts = _convert_charts(
                find_files(scratch_dir, SOURCE_CHART_SUFFIX),
                resources=resources,
                rater=rater,
                max_workers=max_workers,
                overall_difficulty=overall_difficulty,
                base_path=scratch_dir,
            )
            result.summaries = sort_by_rating(
                [chart.summary for chart in result.charts if chart.summary is not None]
            )

            if not result.summaries:
                if result.charts and result.skipped == len(result.charts):
                    # Only non-key charts: nothing to pack, nothing went wrong.
                    result.success = True
                    log_conversion(
                        logging.INFO,
                        ConversionEvent.CONTAINER_SKIPPED,
                        "Nothing to pack in %s (%d non-key charts skipped)",
                        container_path.name,
                        result.skipped,
                        source_path=container_path,
                        base_path=log_base,
                        skipped=result.skipped,
                    )
                    return result
                result.error_message = "No convertible charts"
                _log_container_error(result, log_base)
                return result

            output_path = target_container_path(container_path, output_dir)
            packed = [(path.name, path.read_bytes()) for path in resources.snapshot()]
            result.output_path = write_container(output_path, packed)

            if post_process is not None:
                post_process(list(result.summaries), scratch_dir)
    except (ContainerIOError, OSError) as exc:
        result.error_message = str(exc) or type(exc).__name__
        _log_container_error(result, log_base)
        return result

    result.success = True
    log_conversion(
        logging.INFO,
        ConversionEvent.CONTAINER_COMPLETE,
        "Packed %s (%d converted, %d skipped, %d failed)",
        result.output_path,
        result.converted,
        result.skipped,
        result.failed,
        source_path=container_path,
        target_path=result.output_path,
        base_path=log_base,
        converted=result.converted,
        skipped=result.skipped,
        failed=result.failed,
    )
    return result


def _convert_charts(
    chart_paths: list[Path],
    *,
    resources: ResourceSet,
    rater: Rater | None,
    max_workers: int | None,
    overall_difficulty: float,
    base_path: Path,
) -> list[ChartResult]:
    if not chart_paths:
        return []

    results: list[ChartResult] = []
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="maniaconv-chart") as executor:
        futures = [
            executor.submit(
                convert_chart_file,
                chart_path,
                resources=resources,
                rater=rater,
                overall_difficulty=overall_difficulty,
                base_path=base_path,
            )
            for chart_path in chart_paths
        ]
        # Results are only read on this thread, so no lock is needed around the list.
        for future in as_completed(futures):
            results.append(future.result())

    results.sort(key=lambda chart: chart.source_path.name)
    return results


def _log_container_error(result: ContainerResult, base_path: Path) -> None:
    log_conversion(
        logging.ERROR,
        ConversionEvent.CONTAINER_ERROR,
        "Failed to convert container %s: %s",
        result.source_path.name,
        result.error_message,
        source_path=result.source_path,
        base_path=base_path,
        error_message=result.error_message,
    )


__all__ = [
    "PostProcessHook",
    "SOURCE_CHART_SUFFIX",
    "SOURCE_CONTAINER_SUFFIX",
    "TARGET_CONTAINER_SUFFIX",
    "convert_container",
    "extract_entries",
    "target_container_path",
]
