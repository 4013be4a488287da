"""structlog setup for scripts and test harnesses that use raymath.

The library only emits debug events (division by zero, invalid scales,
precision exhaustion); it never configures logging on import.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Configure structlog output to stderr.

    Args:
        verbose: Show raymath's debug events. When False, only WARNING and above.
        log_json: Render one JSON object per line instead of console output.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if log_json else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
