"""Opt-in structlog configuration for applications embedding graphopt."""

import logging

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure structlog with a console renderer filtered at ``level``.

    The library itself only calls ``structlog.get_logger()``; applications
    that want readable output call this once at startup.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
