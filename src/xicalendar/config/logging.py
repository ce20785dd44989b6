"""structlog rendering for xicalendar's log records.

The library logs through ``logging.getLogger(__name__)`` and configures
nothing on import. :func:`configure_logging` attaches one structlog-rendered
handler to the ``xicalendar`` logger; the root logger and any handlers the
application owns are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

import structlog

_handler: Optional[logging.Handler] = None


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Render ``xicalendar`` records through structlog.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: Emit DEBUG records (parse resolution, recomposition).
            When False, only WARNING+.
        log_json: JSON lines instead of the console renderer.
        stream: Destination, stderr by default.
    """
    global _handler
    stream = stream if stream is not None else sys.stderr

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    logger = logging.getLogger("xicalendar")
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(formatter)
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return _handler
