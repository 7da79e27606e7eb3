"""structlog setup for the dashkit CLI.

Both structlog loggers and stdlib loggers (``logging.getLogger(__name__)``
in the service layer) end up in one stderr handler, rendered either for
a terminal or as JSON lines (``--log-json``).

Library users who never call :func:`configure_logging` keep whatever
stdlib logging setup their application already has.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "dashkit"


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to every event, structlog-native or stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderers(log_json: bool, stream: TextIO) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=stream.isatty())]


def build_handler(*, log_json: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """A stream handler whose formatter runs the structlog processor chain."""
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(log_json, stream),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging through a single structlog-formatted stderr handler.

    Calling it again replaces the handler, so repeated CLI invocations in
    one process never duplicate output.

    Args:
        verbose: Let ``dashkit.*`` loggers emit DEBUG; otherwise WARNING+.
        log_json: Render JSON lines instead of console output.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers = [build_handler(log_json=log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
