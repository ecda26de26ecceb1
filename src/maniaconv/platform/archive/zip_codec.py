"""Where: src/maniaconv/platform/archive/zip_codec.py
What: Read entries out of zip containers and write new stored containers.
Why: Keep container I/O behind two functions so conversion code only sees bytes and names.
"""

from __future__ import annotations

import zipfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

# General purpose flag bit 11: entry name is stored as UTF-8.
_UTF8_NAME_FLAG = 0x800


class ContainerIOError(OSError):
    """Raised when a container cannot be read or written."""

    def __init__(self, container_path: Path, reason: str) -> None:
        super().__init__(f"Container I/O failed for {container_path}: {reason}")
        self.container_path: Path = container_path
        self.reason: str = reason


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """A single file stored in a container."""

    name: str
    data: bytes


def decode_entry_name(info: zipfile.ZipInfo, placeholder: str) -> str:
    """Return the entry name decoded as UTF-8, or ``placeholder`` when it is not.

    ``zipfile`` decodes names lacking the UTF-8 flag as cp437, so those are
    re-encoded to recover the raw bytes first.
    """
    if info.flag_bits & _UTF8_NAME_FLAG:
        return info.filename
    try:
        raw = info.filename.encode("cp437")
    except UnicodeEncodeError:
        return info.filename
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return placeholder


def list_entries(container_path: Path, *, placeholder: str = "invalid_utf8_name") -> list[ArchiveEntry]:
    """Read every file entry of ``container_path``.

    Args:
        container_path: Zip container to read.
        placeholder: Name used for entries whose names are not valid UTF-8.

    Returns:
        list[ArchiveEntry]: File entries in archive order; directories are omitted.

    Raises:
        ContainerIOError: If the container is missing, unreadable or not a zip file.
    """
    try:
        with zipfile.ZipFile(container_path, "r") as archive:
            return [
                ArchiveEntry(
                    name=decode_entry_name(info, placeholder),
                    data=archive.read(info),
                )
                for info in archive.infolist()
                if not info.is_dir()
            ]
    except (OSError, zipfile.BadZipFile) as exc:
        raise ContainerIOError(container_path, str(exc) or type(exc).__name__) from exc


def write_container(output_path: Path, files: Iterable[tuple[str, bytes]]) -> Path:
    """Write ``files`` into a new container at ``output_path`` without compression.

    Entries are written in name order so repeated runs produce identical archives.

    Raises:
        ContainerIOError: If the container cannot be written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_STORED) as archive:
            for name, data in sorted(files, key=lambda item: item[0]):
                archive.writestr(name, data)
    except OSError as exc:
        raise ContainerIOError(output_path, str(exc) or type(exc).__name__) from exc
    return output_path


__all__ = ["ArchiveEntry", "ContainerIOError", "decode_entry_name", "list_entries", "write_container"]
