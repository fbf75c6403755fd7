"""
logconfig.py — structlog + stdlib logging
==========================================
One entry point, setup_logging(), routes both structlog loggers and
plain `logging` loggers (Flask / werkzeug) through the same processor
chain: ISO timestamp, level, logger name.  Console output is coloured
when stderr is a TTY; json_output=True switches to one JSON object
per line.

    setup_logging("debug")
    log = structlog.get_logger(__name__)
    log.info("playback_started", algo="quick", actions=212)
"""

import logging
import sys
from typing import Any, List

import structlog


def setup_logging(level: str = "info", json_output: bool = False) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    # request lines are noise at the polling rate the page uses
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    structlog.get_logger(__name__).debug("logging_configured", level=level, json_output=json_output)
