"""Log output for the shipzones CLI and scripts.

Library modules only ever call ``logging.getLogger(__name__)``; this module
decides where those records end up. Table fallbacks and chart generation
notes are rendered by structlog, either as readable console lines or as one
JSON object per line, on stderr and optionally in a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

ROOT_LOGGER = "shipzones"

_SHARED_PROCESSORS: list = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _make_handlers(level: int, log_file: str | None) -> list[logging.Handler]:
    # stdout carries chart output, so diagnostics go to stderr
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(path), encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def _make_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    # Plain stdlib records from the engine modules go through the same chain
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_json: bool = False,
) -> None:
    """Route the ``shipzones`` logger tree to stderr (and a file).

    Safe to call more than once: handlers from an earlier call are closed
    and replaced. Unknown level names fall back to INFO.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``.
        log_file: Extra destination; parent directories are created.
        log_json: One JSON object per line instead of console formatting.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = _make_formatter(log_json)
    handlers = _make_handlers(numeric_level, log_file)

    root = logging.getLogger(ROOT_LOGGER)
    for old in list(root.handlers):
        old.close()
        root.removeHandler(old)
    root.setLevel(numeric_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.propagate = False
