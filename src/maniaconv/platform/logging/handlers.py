"""Rich console handler rendering structured conversion events.

Where: platform/logging/handlers.py
What: Style conversion log records with icons, colours and compact paths.
Why: Keep record formatting apart from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ConversionRichHandler(RichHandler):
    """Rich handler that renders conversion events and keeps paths readable."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "conversion.directory.start": ("🚀", "cyan"),
        "conversion.directory.complete": ("✅", "green"),
        "conversion.directory.no_files": ("ℹ️", "yellow"),
        "conversion.container.start": ("📂", "blue"),
        "conversion.container.complete": ("📦", "green"),
        "conversion.container.error": ("❌", "red"),
        "conversion.container.skipped": ("↪️", "yellow"),
        "conversion.chart.success": ("🎉", "green"),
        "conversion.chart.skip.mode": ("↪️", "yellow"),
        "conversion.chart.error": ("⛔", "red"),
        "conversion.resource.missing": ("⚠️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with magenta separators.

        Paths deeper than ``_PATH_SEGMENT_LIMIT`` segments keep only their tail,
        prefixed with an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if anchor.rstrip("\\/") else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_conversion_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured conversion events with dedicated styling."""

        event = getattr(record, "conversion_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))
        base = getattr(record, "base_path", None)
        base_str = str(base) if base else None

        metrics: list[str] = []
        if event == "conversion.directory.start":
            _ = body.append("Directory start")
            total = getattr(record, "total_containers", None)
            if isinstance(total, int):
                metrics.append(f"containers={total}")
        elif event == "conversion.directory.complete":
            _ = body.append("Directory complete")
            for key in ("converted", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
        elif event == "conversion.directory.no_files":
            _ = body.append("No containers found")
        else:
            prefix = {
                "conversion.container.start": "Opening ",
                "conversion.container.complete": "Packed ",
                "conversion.container.error": "Failed ",
                "conversion.container.skipped": "Skipped ",
                "conversion.chart.success": "Converted ",
                "conversion.chart.skip.mode": "Skipped ",
                "conversion.chart.error": "Rejected ",
                "conversion.resource.missing": "Missing resource ",
            }.get(event, "")
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=base_str))

        target_path = getattr(record, "target_path", None)
        if target_path and event in {
            "conversion.container.complete",
            "conversion.chart.success",
        }:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path), base=base_str))

        if event == "conversion.container.complete":
            for key in ("converted", "skipped", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
        elif event == "conversion.chart.success":
            version = getattr(record, "version", None)
            if version:
                metrics.append(str(version))
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                metrics.append(f"{duration_ms:.2f} ms")
        elif event == "conversion.container.skipped":
            skipped = getattr(record, "skipped", None)
            if isinstance(skipped, int):
                metrics.append(f"skipped={skipped}")
        elif event == "conversion.chart.skip.mode":
            mode = getattr(record, "mode", None)
            if mode is not None:
                metrics.append(f"mode={mode}")
        elif event in {"conversion.container.error", "conversion.chart.error"}:
            error_message = getattr(record, "error_message", None)
            if error_message:
                metrics.append(str(error_message))

        if metrics:
            _ = body.append(" [" + ", ".join(metrics) + "]")

        directory = getattr(record, "directory", None)
        if directory and event.startswith("conversion.directory"):
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        conversion_text = self._render_conversion_message(record)
        if conversion_text is not None:
            return conversion_text
        return super().render_message(record, message)


__all__ = ["ConversionRichHandler"]
