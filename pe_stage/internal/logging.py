"""
structlog on top of the stdlib logging module.

Acquisition events are key/value pairs (``logger.info("download complete",
destination=...)``). They land in a rotating log file under the app data
directory and, with ``--verbose``, on stderr. Nothing is configured at
import time; the CLI entry point calls setup_logging once.
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

import structlog

from pe_stage.internal.constants import ENV_LOG_LEVEL

_LOGGING_CONFIGURED = False

# Installer tarballs are large; keep a few rotations of a small file.
_LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
_LOG_FILE_BACKUPS = 3

# Stamps records from plain stdlib loggers (urllib3, requests) the same way.
_STDLIB_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _formatted(handler: logging.Handler, renderer) -> logging.Handler:
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_STDLIB_CHAIN,
    ))
    return handler


def _file_handler(log_file_path: Path) -> logging.Handler:
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=_LOG_FILE_MAX_BYTES,
        backupCount=_LOG_FILE_BACKUPS,
    )
    if log_file_path.name.endswith(".json"):
        return _formatted(handler, structlog.processors.JSONRenderer())
    return _formatted(handler, structlog.dev.ConsoleRenderer(colors=False))


def setup_logging(log_level_name: str = "INFO", log_file_path: Optional[Path] = None, console_output: bool = False):
    """
    Routes pe_stage logs to ``log_file_path`` (JSON lines when it ends in
    .json) and, if ``console_output`` is set, to stderr so stdout stays
    free for command results. PE_STAGE_LOG_LEVEL beats ``log_level_name``.
    Later calls are ignored.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = os.environ.get(ENV_LOG_LEVEL, log_level_name).upper()

    handlers = []
    if log_file_path:
        handlers.append(_file_handler(log_file_path))
    if console_output:
        handlers.append(_formatted(logging.StreamHandler(sys.stderr), structlog.dev.ConsoleRenderer()))
    if not handlers:
        handlers.append(logging.NullHandler())

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *_STDLIB_CHAIN,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name)
