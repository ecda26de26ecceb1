"""Application services for converting source charts and inspecting target containers.

This layer picks the right use case for a path and wires in the optional
rating backend, so the CLI and any other front end share one entry point.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from maniaconv.config.settings import INVALID_NAME_PLACEHOLDER, MAX_WORKERS, OVERALL_DIFFICULTY
from maniaconv.features.conversion import (
    ChartResult,
    ContainerResult,
    PostProcessHook,
    ProgressCallback,
    Rater,
    convert_chart_file,
    convert_container,
    convert_directory,
    inspect_container,
    inspect_directory,
)
from maniaconv.features.conversion.usecases.container_runner import (
    SOURCE_CHART_SUFFIX,
    SOURCE_CONTAINER_SUFFIX,
    TARGET_CONTAINER_SUFFIX,
)
from maniaconv.platform.logging import logger


@dataclass(frozen=True)
class ConversionRequest:
    """Input parameters for a conversion run.

    Attributes:
        path: Directory, source container or single source chart.
        output_dir: Where target containers go; defaults to beside each source.
        max_workers: Thread-pool size for both fan-out levels.
        overall_difficulty: ``OverallDifficulty`` written to every chart.
        placeholder: Name for container entries whose names are not valid UTF-8.
    """

    path: Path
    output_dir: Path | None = None
    max_workers: int | None = MAX_WORKERS
    overall_difficulty: float = OVERALL_DIFFICULTY
    placeholder: str = INVALID_NAME_PLACEHOLDER


@final
class ConversionService:
    """Application service that dispatches a path to the matching conversion use case."""

    def __init__(
        self,
        *,
        rater: Rater | None = None,
        post_process: PostProcessHook | None = None,
        chart_converter: Callable[..., ChartResult] | None = None,
        container_converter: Callable[..., ContainerResult] | None = None,
        directory_converter: Callable[..., list[ContainerResult]] | None = None,
    ) -> None:
        """Create a service with overridable use cases.

        Tests can inject doubles for the converters; production code relies on
        the feature-layer functions.
        """
        self._rater: Rater | None = rater
        self._post_process: PostProcessHook | None = post_process
        self._chart_converter: Callable[..., ChartResult] = chart_converter or convert_chart_file
        self._container_converter: Callable[..., ContainerResult] = (
            container_converter or convert_container
        )
        self._directory_converter: Callable[..., list[ContainerResult]] = (
            directory_converter or convert_directory
        )

    def convert_chart(self, request: ConversionRequest) -> ContainerResult:
        """Convert a loose source chart; the result is reported like a one-chart container."""

        chart = self._chart_converter(
            request.path,
            rater=self._rater,
            overall_difficulty=request.overall_difficulty,
        )
        return ContainerResult(
            source_path=request.path,
            output_path=chart.target_path,
            success=chart.success or chart.skipped,
            error_message=chart.error_message,
            charts=[chart],
            summaries=[chart.summary] if chart.summary is not None else [],
        )

    def convert_container(self, request: ConversionRequest) -> ContainerResult:
        return self._container_converter(
            request.path,
            output_dir=request.output_dir,
            rater=self._rater,
            max_workers=request.max_workers,
            overall_difficulty=request.overall_difficulty,
            placeholder=request.placeholder,
            post_process=self._post_process,
        )

    def convert_directory(
        self,
        request: ConversionRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ContainerResult]:
        return self._directory_converter(
            request.path,
            output_dir=request.output_dir,
            rater=self._rater,
            max_workers=request.max_workers,
            overall_difficulty=request.overall_difficulty,
            placeholder=request.placeholder,
            post_process=self._post_process,
            progress_callback=progress_callback,
        )

    def convert(
        self,
        request: ConversionRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ContainerResult]:
        """Convert whatever ``request.path`` points at.

        Raises:
            ValueError: If the path is neither a directory nor a supported file.
        """
        path = request.path
        if path.is_dir():
            return self.convert_directory(request, progress_callback)

        suffix = path.suffix.lower()
        if path.is_file() and suffix == SOURCE_CONTAINER_SUFFIX:
            return [self.convert_container(request)]
        if path.is_file() and suffix == SOURCE_CHART_SUFFIX:
            return [self.convert_chart(request)]

        logger.error("Unsupported input path: %s", path)
        raise ValueError(
            f"Expected a directory, a {SOURCE_CONTAINER_SUFFIX} container or a "
            + f"{SOURCE_CHART_SUFFIX} chart: {path}"
        )


@final
class InspectionService:
    """Application service that summarises target containers."""

    def __init__(
        self,
        *,
        rater: Rater | None = None,
        container_inspector: Callable[..., ContainerResult] | None = None,
        directory_inspector: Callable[..., list[ContainerResult]] | None = None,
    ) -> None:
        self._rater: Rater | None = rater
        self._container_inspector: Callable[..., ContainerResult] = (
            container_inspector or inspect_container
        )
        self._directory_inspector: Callable[..., list[ContainerResult]] = (
            directory_inspector or inspect_directory
        )

    def inspect(self, path: Path, *, max_workers: int | None = MAX_WORKERS) -> list[ContainerResult]:
        """Inspect a target container or every target container below a directory.

        Raises:
            ValueError: If the path is neither a directory nor a target container.
        """
        if path.is_dir():
            return self._directory_inspector(path, rater=self._rater, max_workers=max_workers)
        if path.is_file() and path.suffix.lower() == TARGET_CONTAINER_SUFFIX:
            return [self._container_inspector(path, rater=self._rater, max_workers=max_workers)]

        logger.error("Unsupported inspection path: %s", path)
        raise ValueError(f"Expected a directory or a {TARGET_CONTAINER_SUFFIX} container: {path}")


__all__ = ["ConversionRequest", "ConversionService", "InspectionService"]
