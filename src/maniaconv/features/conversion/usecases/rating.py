"""Where: src/maniaconv/features/conversion/usecases/rating.py
What: Port for pluggable difficulty rating backends.
Why: Rating is optional; a failing backend must never abort a conversion.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from maniaconv.features.chart.domain.target import TargetChart
from maniaconv.platform.logging import logger


class RatingUnavailableError(RuntimeError):
    """Raised by a rater that cannot rate a chart."""


@runtime_checkable
class Rater(Protocol):
    """Difficulty estimator for converted charts."""

    def rate(self, chart: TargetChart, speed_modifier: float) -> float:
        ...


def rate_safely(rater: Rater | None, chart: TargetChart, speed_modifier: float = 1.0) -> float | None:
    """Return the clamped rating, or None when there is no rater or it fails."""

    if rater is None:
        return None
    try:
        rating = rater.rate(chart, speed_modifier)
    except Exception as exc:
        logger.log(
            logging.WARNING,
            "Rating unavailable for '%s' [%s]: %s",
            chart.metadata.title,
            chart.metadata.version,
            exc,
        )
        return None
    return max(float(rating), 0.0)


__all__ = ["Rater", "RatingUnavailableError", "rate_safely"]
