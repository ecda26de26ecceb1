"""Summary: Resolve the audio and background files a chart needs packed with it.
Why: Charts of one container share assets, which must be packed exactly once.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..domain.sanitizer import Sanitizer


class ResourceSet:
    """Thread-safe set of absolute file paths to pack into one container."""

    def __init__(self) -> None:
        self._lock: Final[threading.Lock] = threading.Lock()
        self._paths: set[Path] = set()

    def add(self, path: Path) -> bool:
        """Add ``path``; return False if it was already present."""

        resolved = path.resolve()
        with self._lock:
            if resolved in self._paths:
                return False
            self._paths.add(resolved)
            return True

    def snapshot(self) -> frozenset[Path]:
        with self._lock:
            return frozenset(self._paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path):
            return False
        with self._lock:
            return path.resolve() in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)


@dataclass(frozen=True, slots=True)
class ResolvedResources:
    """Sanitized references to write into the chart, plus any missing files."""

    background: str
    audio: str
    missing: tuple[Path, ...] = field(default_factory=tuple)


def resolve_resources(
    chart_dir: Path,
    background: str,
    audio: str,
    resources: ResourceSet,
) -> ResolvedResources:
    """Sanitize both references and register the files that exist.

    Empty references are ignored. A reference whose file is absent is
    reported in ``missing``; the chart still converts without it.

    Args:
        chart_dir: Directory holding the chart and its extracted assets.
        background: Background image name as written in the chart.
        audio: Audio file name carried by the chart's audio entry.
        resources: Shared set receiving the paths of existing files.

    Returns:
        ResolvedResources: Sanitized names and missing paths.
    """
    missing: list[Path] = []
    sanitized: list[str] = []
    for reference in (background, audio):
        if not reference:
            sanitized.append("")
            continue
        name = Sanitizer.sanitize_filename(reference)
        sanitized.append(name)
        candidate = chart_dir / name
        if candidate.is_file():
            _ = resources.add(candidate)
        else:
            missing.append(candidate)

    return ResolvedResources(background=sanitized[0], audio=sanitized[1], missing=tuple(missing))


__all__ = ["ResolvedResources", "ResourceSet", "resolve_resources"]
