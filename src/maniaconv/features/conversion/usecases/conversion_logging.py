"""Helper for emitting structured conversion log records."""

from __future__ import annotations

from maniaconv.platform.logging import logger

from .processing_types import ConversionEvent


def log_conversion(
    level: int,
    event: ConversionEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Log ``message`` with ``event`` and ``context`` attached as record extras."""

    extra: dict[str, object] = {"conversion_event": event.value}
    extra.update(context)
    logger.log(level, message, *message_args, extra=extra)


__all__ = ["log_conversion"]
