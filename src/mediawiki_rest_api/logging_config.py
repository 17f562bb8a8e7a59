"""Logging setup for applications using the client.

The library only emits structlog events and never configures logging on
import. Applications may call :func:`configure_logging` once at startup,
or configure structlog themselves.
"""

import logging

import structlog

_SHARED_PROCESSORS = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.EventRenamer("msg"),
    structlog.processors.format_exc_info,
)


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.processors.LogfmtRenderer(key_order=("timestamp", "level", "msg"))


def configure_logging(
    log_level_name: str = "INFO",
    *,
    json_output: bool = False,
) -> None:
    """Configure structlog for logfmt (default) or JSON line output.

    Args:
        log_level_name: Minimum level name, e.g. "DEBUG". Unknown names
            fall back to INFO.
        json_output: Render events as JSON objects instead of logfmt.
    """
    log_level = logging.getLevelName(log_level_name.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(json_output)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
