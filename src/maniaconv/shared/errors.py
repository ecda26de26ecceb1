"""Errors raised while reading or converting a single chart.

Each one is scoped to one chart: conversion stops for that chart only.
"""

from __future__ import annotations


class ChartError(Exception):
    """Base class for failures scoped to one chart."""


class ChartParseError(ChartError):
    """Chart text is malformed or misses a required field."""


class UnsupportedModeError(ChartError):
    """Chart is not a key-mode chart and cannot be converted."""

    def __init__(self, mode: int) -> None:
        super().__init__(f"Only key-mode charts are supported (mode={mode})")
        self.mode: int = mode


class MissingTempoDataError(ChartError):
    """Chart carries no tempo events to anchor its timeline."""

    def __init__(self) -> None:
        super().__init__("Missing BPM data")


__all__ = [
    "ChartError",
    "ChartParseError",
    "MissingTempoDataError",
    "UnsupportedModeError",
]
