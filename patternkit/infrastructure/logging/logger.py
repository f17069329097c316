"""Structured logging for the library using structlog over stdlib logging."""
import logging
from typing import Any, List, Optional

import structlog

from patternkit.config.schemas import LoggingConfig, LogRenderer

_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for an application embedding the library.

    Installs a single stdout handler on the root logger that renders
    structlog events with the configured renderer.

    Args:
        config: Logging configuration. If None, the environment-aware
               ConfigurationManager supplies it.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from patternkit.config.manager import ConfigurationManager

        config = ConfigurationManager().get_logging_config()

    if config.renderer == LogRenderer.JSON:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
        fmt=config.format,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, config.level.value))

    _configure_structlog()

    logger = get_logger("patternkit")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_renderer=config.renderer.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger routed through stdlib logging.

    Leaves the root logger alone, so an application that never calls
    setup_logging sees only what its own logging configuration allows.
    """
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)
