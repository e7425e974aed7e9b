"""
Structured logging setup.

Routes structlog through the stdlib logging tree so that LOG_LEVEL,
LOG_FORMAT and LOG_FILE_PATH apply to every logger in the service.
"""

from __future__ import annotations

import logging

import structlog

from src.core.config.logging_config import LoggingConfig


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog from a LoggingConfig.

    Safe to call more than once; later calls replace the handlers installed
    by earlier ones.

    Args:
        logging_config: Level, format and optional log file path.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    logging.basicConfig(
        level=logging_config.level,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
