"""Structlog-based logging configuration with a stdlib bridge.

Modules take their logger with ``structlog.get_logger(__name__)``;
``configure_logging()`` is called once by each entry point (CLI, app).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from titan.infrastructure.config.settings import LogFormat

_CONFIGURED = False


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time.

    Test runners and click's CliRunner swap ``sys.stderr`` per invocation.
    """

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def configure_logging(level: str = "INFO", fmt: LogFormat = LogFormat.CONSOLE) -> None:
    """Configure structlog and route it through stdlib logging.

    Safe to call multiple times; only the first invocation takes effect.
    Logs go to stderr so CLI output on stdout stays clean.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer: Any
    if fmt == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: structlog events and plain logging records share one renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = _StderrHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    log_level = getattr(logging, level.upper(), None)
    root.setLevel(log_level if isinstance(log_level, int) else logging.INFO)

    # Suppress noisy library loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
