"""Summary record describing one converted or inspected chart."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChartSummary:
    """Immutable per-chart aggregate handed to rating, rendering and printing."""

    title: str
    artist: str
    creator: str
    version: str
    column_count: int
    min_bpm: float
    length_ms: int
    note_count: int
    hold_count: int
    title_unicode: str | None = None
    artist_unicode: str | None = None
    max_bpm: float | None = None
    rating: float | None = None
    background: str | None = None

    @property
    def total_notes(self) -> int:
        return self.note_count + self.hold_count

    @property
    def display_title(self) -> str:
        if self.title_unicode and self.title_unicode != self.title:
            return f"{self.title} ({self.title_unicode})"
        return self.title

    @property
    def display_artist(self) -> str:
        if self.artist_unicode and self.artist_unicode != self.artist:
            return f"{self.artist} ({self.artist_unicode})"
        return self.artist

    def bpm_label(self) -> str:
        """Render the bpm range as ``min`` or ``min-max`` with at most one decimal."""

        upper = self.max_bpm if self.max_bpm is not None else self.min_bpm
        low = _trim_bpm(self.min_bpm)
        if round(upper * 10) == round(self.min_bpm * 10):
            return low
        return f"{low}-{_trim_bpm(upper)}"

    def length_label(self) -> str:
        """Render the length as ``m:ss.mmm``."""

        minutes, remainder = divmod(self.length_ms, 60000)
        seconds, millis = divmod(remainder, 1000)
        return f"{minutes}:{seconds:02d}.{millis:03d}"

    def rating_label(self) -> str:
        return "N/A" if self.rating is None else f"{self.rating:.4f}"

    def __str__(self) -> str:
        return (
            f"Title: {self.display_title}\n"
            f"Artist: {self.display_artist}\n"
            f"Creator: {self.creator}\n"
            f"Version: {self.version}\n"
            f"Columns: {self.column_count}\n"
            f"BPM: {self.bpm_label()}\n"
            f"Length: {self.length_label()}\n"
            f"Notes: {self.note_count} (LN: {self.hold_count})\n"
            f"SR: {self.rating_label()}"
        )


def _trim_bpm(bpm: float) -> str:
    text = f"{bpm:.1f}"
    return text[:-2] if text.endswith(".0") else text


def sort_by_rating(summaries: list[ChartSummary]) -> list[ChartSummary]:
    """Order summaries by rating ascending, unrated charts first."""

    return sorted(
        summaries,
        key=lambda summary: (summary.rating is not None, summary.rating or 0.0),
    )


__all__ = ["ChartSummary", "sort_by_rating"]
