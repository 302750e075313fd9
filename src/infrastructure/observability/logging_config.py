"""
Structured logging configuration using structlog.

Stdlib loggers used throughout the package (``logging.getLogger(__name__)``)
are routed through structlog's ``ProcessorFormatter`` so that every line is
rendered either as JSON for log aggregation or as a readable console line
during development.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# ======================================================================
# Constants
# ======================================================================

SERVICE_NAME: str = "pagination-core"


# ======================================================================
# Custom processors
# ======================================================================


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Inject the service name into every log event."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


# ======================================================================
# Setup
# ======================================================================


def setup_logging(log_level: str = "INFO", *, json_output: bool = True) -> None:
    """
    Configure structlog and the stdlib logging bridge.

    Parameters
    ----------
    log_level:
        Minimum severity level as a string (``DEBUG``, ``INFO``, ...).
        Unknown names fall back to ``INFO``.
    json_output:
        Render JSON lines when true, coloured console lines otherwise.
    """

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


# ======================================================================
# Logger factory
# ======================================================================


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a bound structlog logger for *name*.

    Per-request context can be attached via ``.bind()``::

        log = get_logger("pagination")
        log = log.bind(page=3, per_page=25)
        log.info("Links selected", count=9)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
