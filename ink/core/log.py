"""
Rail Ink - Logging Setup

structlog configuration shared by the command-line tools. Events go to
stderr so they never mix with a tool's report on stdout.
"""

import logging
import sys

import structlog


def configure(verbose: bool = False, json_output: bool = False):
    """
    Configure structlog for a tool run.

    Args:
        verbose: Emit debug events (otherwise warnings and up only)
        json_output: Render events as JSON lines instead of console text
    """
    level = logging.DEBUG if verbose else logging.WARNING
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
