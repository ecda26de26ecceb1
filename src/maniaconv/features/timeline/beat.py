"""Summary: Rational beat positions used by source charts.
Why: Every beat-relative event shares one conversion to floating point beats.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RationalBeat:
    """Beat position ``whole + numerator / denominator``."""

    whole: int
    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise ValueError(f"Beat denominator must be positive, got {self.denominator}")
        if self.whole < 0 or self.numerator < 0:
            raise ValueError(f"Beat components must be non-negative, got {self.as_list()}")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "RationalBeat":
        """Build a beat from the ``[whole, numerator, denominator]`` triple of the source format."""

        if len(values) != 3:
            raise ValueError(f"Beat must have exactly three components, got {list(values)}")
        whole, numerator, denominator = values
        for part in (whole, numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, int):
                raise ValueError(f"Beat components must be integers, got {list(values)}")
        return cls(whole, numerator, denominator)

    def to_float(self) -> float:
        return self.whole + self.numerator / self.denominator

    def as_list(self) -> list[int]:
        return [self.whole, self.numerator, self.denominator]


__all__ = ["RationalBeat"]
