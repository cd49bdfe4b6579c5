"""Logging configuration for embed-youtube."""

import logging
import logging.config
import uuid
from pathlib import Path
from typing import Any

import structlog

from .config import get_settings


def setup_logging(verbose: bool = False, log_dir: Path | None = None) -> Path | None:
    """Configure structured logging.

    Args:
        verbose: If True, set log level to DEBUG, otherwise INFO.
        log_dir: Directory for the JSON log file (default: from settings)

    Returns:
        Path of the log file, or None if only console logging is available
    """
    settings = get_settings()
    log_dir = log_dir or settings.log_dir
    log_file: Path | None = log_dir / settings.log_file_name

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Fall back to console-only logging
        log_file = None

    log_level = logging.DEBUG if verbose else logging.INFO

    # Shared processors
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]

    if log_file is not None:
        # JSON to file only, to keep CLI output clean
        renderer: Any = structlog.processors.JSONRenderer()
        handler: dict[str, Any] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "structured",
            "filename": str(log_file),
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "encoding": "utf-8",
        }
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
        handler = {
            "class": "logging.StreamHandler",
            "formatter": "structured",
            "stream": "ext://sys.stderr",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    # Keep `extra` fields of stdlib records
                    "foreign_pre_chain": [structlog.stdlib.ExtraAdder()],
                    "processors": processors + [renderer],
                },
            },
            "handlers": {"default": handler},
            "loggers": {
                "": {  # Root logger
                    "handlers": ["default"],
                    "level": log_level,
                },
                # Package records reach the root handler; clears handlers of earlier setups
                "embed_youtube": {
                    "handlers": [],
                    "level": log_level,
                    "propagate": True,
                },
            },
        }
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Bind a unique trace ID for this execution
    structlog.contextvars.bind_contextvars(trace_id=str(uuid.uuid4()))

    return log_file
