"""Logging configuration shared by all bounded contexts.

structlog renders on top of stdlib logging so that third-party loggers
(uvicorn, sqlalchemy, httpx) end up in the same handlers.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog


def get_environment() -> str:
    return (os.getenv("APP_ENV") or os.getenv("ENVIRONMENT") or os.getenv("ENV") or "production").lower()


def get_log_level() -> str:
    """Get log level based on environment."""
    level_map = {
        "production": "INFO",
        "staging": "INFO",
        "development": "DEBUG",
        "test": "WARNING",
    }

    return os.getenv("LOG_LEVEL", level_map.get(get_environment(), "INFO"))


def setup_stdlib_logging() -> None:
    """Configure standard library logging."""
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # Serverless deployments have no writable disk; file output is opt-in.
    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / "buynothing.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)

        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / "buynothing_error.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(error_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def setup_structlog() -> None:
    """Configure structlog for structured logging."""
    env = get_environment()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]

    if env in ["production", "staging"]:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    max_frames=5,
                ),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging()
    setup_structlog()


def add_context(**kwargs: Any) -> None:
    """Add context variables that will be included in all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
