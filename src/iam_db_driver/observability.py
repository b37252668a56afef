"""structlog configuration."""

import logging

import structlog


def configure_logging(log_level: str = "INFO", *, dev_mode: bool = False) -> None:
    """Configure structlog for the driver wrapper.

    Args:
        log_level: Minimum level to emit, e.g. "DEBUG" or "WARNING".
        dev_mode: Render human-readable console output instead of JSON.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    renderer: structlog.typing.Processor
    if dev_mode:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
