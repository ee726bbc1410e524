"""Structured logging configuration for the contract harness.

Logging is standardized with ``structlog``. Output is either JSON (for CI log
collection) or a pretty console format (for local runs), and every line
carries the suite name plus the case currently executing.

Typical usage
- Call ``configure_logging(service_name, log_level, log_format)`` once per run
- Acquire loggers via ``structlog.get_logger(name)``
- Wrap a case in ``case_context(name)`` so its log lines are attributable
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "json",
) -> None:
    """Configure structured logging for a test run.

    Parameters
    - service_name: Suite identifier bound to each log line
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for CI; ``console`` for local runs
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


@contextmanager
def case_context(case_name: str, **context: Any) -> Iterator[None]:
    """Bind the running case's name (and extra context) to every log line."""
    with structlog.contextvars.bound_contextvars(case=case_name, **context):
        yield
