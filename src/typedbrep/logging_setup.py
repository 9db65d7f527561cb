"""Rendering of typedbrep's structlog events.

Builder commits and casts log at debug level (``Loft committed``,
``Downcast rejected``), STL export and summaries at info, and kernel
failures at warning. Nothing is rendered until an application calls
``configure_logging`` or picks one of the ``CONFIGS`` presets.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, TextIO

import structlog

CONFIGS = {
    # Every builder commit and cast, for debugging kernel failures
    "trace": {
        "level": "DEBUG",
        "enable_colors": True,
        "enable_json": False,
    },
    # Machine-readable events for batch modelling jobs
    "json": {
        "level": "INFO",
        "enable_colors": False,
        "enable_json": True,
    },
    "quiet": {
        "level": "WARNING",
        "enable_colors": False,
        "enable_json": False,
    },
}


def configure_logging(
    level: str = "INFO",
    enable_colors: bool = True,
    enable_json: bool = False,
    extra_processors: Optional[List[Any]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure how typedbrep events are rendered.

    Args:
        level: Lowest level rendered (DEBUG, INFO, WARNING, ERROR)
        enable_colors: Colour console output when writing to a terminal
        enable_json: Render one JSON object per event
        extra_processors: Processors run before rendering
        stream: Output stream, stdout by default
    """
    numeric_level = getattr(logging, level.upper())
    stream = stream or sys.stdout

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]
    if extra_processors:
        processors.extend(extra_processors)

    if enable_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=enable_colors and stream.isatty())
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def configure_preset(name: str) -> None:
    """Configure logging from one of the ``CONFIGS`` presets.

    Raises:
        KeyError: If ``name`` is not a known preset
    """
    if name not in CONFIGS:
        raise KeyError(f"Unknown logging preset: {name} (choose from {', '.join(CONFIGS)})")
    configure_logging(**CONFIGS[name])


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    return structlog.get_logger(name)
