"""
Logging setup for nfa2dfa.

The library logs through structlog bound to stdlib loggers, so it stays quiet
until an application calls ``setup_logging`` or configures ``logging`` itself.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def setup_logging(
    log_level: str = "INFO",
    console_output: bool = True,
    log_dir: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Attach structlog formatters to the ``nfa2dfa`` logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        console_output: Whether to render to the console
        log_dir: Directory for a rotating JSON log file; no file when None
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep
    """
    level = getattr(logging, log_level.upper())
    lib_logger = logging.getLogger("nfa2dfa")
    lib_logger.setLevel(level)
    lib_logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
            )
        )
        console_handler.setLevel(level)
        lib_logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path / "nfa2dfa.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
            )
        )
        file_handler.setLevel(logging.DEBUG)
        lib_logger.addHandler(file_handler)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
