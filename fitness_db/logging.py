from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog


LogFormat = Literal["json", "console"]


def configure_logging(log_level: str, log_format: LogFormat = "json") -> None:
    level = logging.getLevelName(log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # SQL echo only when explicitly debugging; migrations issue hundreds of statements.
    logging.getLogger("sqlalchemy.engine").setLevel(level if level <= logging.DEBUG else logging.WARNING)

    renderer: structlog.typing.Processor
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()
