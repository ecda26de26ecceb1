"""Archive container codec used for ``.mcz`` and ``.osz`` packages."""

from .zip_codec import ArchiveEntry, ContainerIOError, decode_entry_name, list_entries, write_container

__all__ = [
    "ArchiveEntry",
    "ContainerIOError",
    "decode_entry_name",
    "list_entries",
    "write_container",
]
