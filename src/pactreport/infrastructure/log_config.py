"""structlog configuration for applications embedding pactreport.

The library only emits events; it never configures logging on import.
Left unconfigured, structlog prints every event, debug included, to
stdout. Hosts call configure_logging() once at startup to filter by level
and keep diagnostics on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO, *, json_output: bool = False) -> None:
    """Configure structlog for console output on stderr.

    Args:
        level: Minimum level to emit.
        json_output: Render events as JSON lines instead of key=value text.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
