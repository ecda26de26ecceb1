"""maniaconv: convert Malody key-mode charts into osu!mania beatmaps."""

__version__ = "0.3.0"
