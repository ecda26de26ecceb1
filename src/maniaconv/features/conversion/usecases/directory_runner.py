"""src/maniaconv/features/conversion/usecases/directory_runner.py
What: Convert every source container below a directory.
Why: Containers are independent, so they fan out on a thread pool with isolated failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from maniaconv.config.settings import INVALID_NAME_PLACEHOLDER, MAX_WORKERS, OVERALL_DIFFICULTY
from maniaconv.platform.filesystem import find_files

from .container_runner import SOURCE_CONTAINER_SUFFIX, PostProcessHook, convert_container
from .conversion_logging import log_conversion
from .processing_types import ContainerResult, ConversionEvent, RunLogContext
from .rating import Rater

ProgressCallback = Callable[[int, int, Path], None]
"""Called with ``(completed, total, container_path)`` after each container."""


def convert_directory(
    directory: Path,
    *,
    output_dir: Path | None = None,
    rater: Rater | None = None,
    max_workers: int | None = MAX_WORKERS,
    overall_difficulty: float = OVERALL_DIFFICULTY,
    placeholder: str = INVALID_NAME_PLACEHOLDER,
    post_process: PostProcessHook | None = None,
    progress_callback: ProgressCallback | None = None,
) -> list[ContainerResult]:
    """Convert all containers found recursively under ``directory``.

    Returns:
        list[ContainerResult]: One result per container, in path order.

    Raises:
        ValueError: If ``directory`` is not a directory.
    """
    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    containers = find_files(directory, SOURCE_CONTAINER_SUFFIX)
    if not containers:
        log_conversion(
            logging.WARNING,
            ConversionEvent.DIRECTORY_NO_FILES,
            "No containers found in %s",
            directory,
            directory=directory,
            total_containers=0,
        )
        return []

    stats = RunLogContext(directory=directory, total_containers=len(containers))
    log_conversion(
        logging.INFO,
        ConversionEvent.DIRECTORY_START,
        "Directory conversion started [containers=%d, path=%s]",
        len(containers),
        directory,
        **stats.summary_extra(),
    )

    results: list[ContainerResult] = []
    completed = 0

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="maniaconv-container") as executor:
        futures = {
            executor.submit(
                convert_container,
                container,
                output_dir=output_dir,
                rater=rater,
                max_workers=max_workers,
                overall_difficulty=overall_difficulty,
                placeholder=placeholder,
                post_process=post_process,
                base_path=directory,
            ): container
            for container in containers
        }
        for future in as_completed(futures):
            container = futures[future]
            try:
                result = future.result()
            except Exception as exc:  # pragma: no cover - unexpected worker failure
                error_message = str(exc) or type(exc).__name__
                log_conversion(
                    logging.ERROR,
                    ConversionEvent.CONTAINER_ERROR,
                    "Unhandled error converting %s: %s",
                    container.name,
                    error_message,
                    source_path=container,
                    base_path=directory,
                    error_message=error_message,
                )
                result = ContainerResult(source_path=container, error_message=error_message)

            # as_completed hands results back to this thread only.
            results.append(result)
            stats.record(result)
            completed += 1
            if progress_callback:
                progress_callback(completed, len(containers), container)

    results.sort(key=lambda item: item.source_path)
    log_conversion(
        logging.INFO,
        ConversionEvent.DIRECTORY_COMPLETE,
        "Directory conversion complete [converted=%d, failed=%d, path=%s]",
        stats.converted,
        stats.failed,
        directory,
        **stats.summary_extra(),
    )
    return results


__all__ = ["ProgressCallback", "convert_directory"]
