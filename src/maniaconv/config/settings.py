"""Where: src/maniaconv/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from maniaconv.config.config import (
    MAX_WORKERS_DEFAULT,
    OVERALL_DIFFICULTY_DEFAULT,
    PLACEHOLDER_ENTRY_NAME_DEFAULT,
    config as app_config,
)

# Fan-out -----------------------------------------------------------------------

_max_workers = getattr(app_config, "max_workers", MAX_WORKERS_DEFAULT)
# None lets ThreadPoolExecutor pick its own default.
MAX_WORKERS: int | None = (
    _max_workers if isinstance(_max_workers, int) and _max_workers > 0 else None
)


# Output ------------------------------------------------------------------------

PRINT_SUMMARY: bool = bool(getattr(app_config, "print_summary", True))

_overall_difficulty = getattr(app_config, "overall_difficulty", OVERALL_DIFFICULTY_DEFAULT)
OVERALL_DIFFICULTY: float = (
    float(_overall_difficulty)
    if isinstance(_overall_difficulty, (int, float)) and 0 <= _overall_difficulty <= 10
    else OVERALL_DIFFICULTY_DEFAULT
)


# Containers --------------------------------------------------------------------

INVALID_NAME_PLACEHOLDER: str = (
    app_config.placeholder_entry_name or PLACEHOLDER_ENTRY_NAME_DEFAULT
)


__all__ = [
    "MAX_WORKERS",
    "PRINT_SUMMARY",
    "OVERALL_DIFFICULTY",
    "INVALID_NAME_PLACEHOLDER",
]
