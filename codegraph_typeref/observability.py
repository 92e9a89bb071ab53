"""
Structured logging

Module loggers are lazy structlog proxies: importing the package configures
nothing. Logging is configured by an explicit configure_logging() call, or
from TypeRefSettings the first time a translator reads the settings.
"""

import logging

import structlog

_CONFIGURED = False


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level (None = TYPEREF_LOG_LEVEL)
        json_format: JSON output (None = TYPEREF_JSON_LOGS)

    Raises:
        ConfigurationError: settings are needed and the environment is invalid
    """
    global _CONFIGURED

    if level is None or json_format is None:
        from .config import get_settings

        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.json_logs if json_format is None else json_format

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
    )
    _CONFIGURED = True


def configure_from_settings(settings) -> None:
    """Configure logging from already-loaded settings, once per process."""
    if is_configured():
        return
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def is_configured() -> bool:
    return _CONFIGURED


def get_logger(name: str):
    """
    Get a structured logger.

    Wraps the stdlib logger of the same name in a lazy structlog proxy.
    Processors are resolved on each use, so events follow whatever
    configuration is active; until logging is configured they go to an
    unconfigured stdlib logger and debug events are dropped.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def reset_logging() -> None:
    """Reset logging configuration (for tests)"""
    global _CONFIGURED
    _CONFIGURED = False
    structlog.reset_defaults()
