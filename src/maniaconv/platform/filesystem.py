"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def find_files(root: Path, suffix: str) -> list[Path]:
    """Return every file below ``root`` whose extension matches ``suffix``, sorted."""

    wanted = suffix.lower()
    return sorted(path for path in root.rglob("*") if path.is_file() and path.suffix.lower() == wanted)


__all__ = ["ensure_directory", "find_files"]
