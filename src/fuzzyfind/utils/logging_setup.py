"""
Logging configuration for fuzzyfind.

Provides logging that:
- Uses stderr exclusively so stdout only carries matched paths
- Outputs JSON when requested (FUZZYFIND_LOG_FORMAT=json)
- Provides human-readable output otherwise
- Supports an optional rotating log file
- Includes custom TRACE level for per-character matcher debugging
"""

import sys
import logging
import json
import os
from datetime import datetime, timezone
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Any

# Define TRACE level (lower number = more detailed)
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

DEFAULT_LEVEL = 'WARNING'


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


def add_trace_to_logger():
    """Ensure trace method is available on all logger instances"""
    if not hasattr(logging.Logger, 'trace'):
        logging.Logger.trace = trace


add_trace_to_logger()


class JsonFormatter(logging.Formatter):
    """JSON formatter for machine-readable diagnostics"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'component': record.name,
            'message': record.getMessage(),
            'pid': os.getpid(),
        }

        if hasattr(record, 'extra'):
            log_data.update(record.extra)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def resolve_level(log_level: Optional[str] = None, verbose: bool = False) -> int:
    """
    Work out the numeric log level.

    Precedence: verbose flag, explicit level, FUZZYFIND_LOG_LEVEL, LOG_LEVEL.
    """
    if verbose:
        return logging.DEBUG

    level_str = (
        log_level
        or os.environ.get('FUZZYFIND_LOG_LEVEL')
        or os.environ.get('LOG_LEVEL', DEFAULT_LEVEL)
    )
    if level_str.upper() == 'TRACE':
        return TRACE_LEVEL
    return getattr(logging, level_str.upper(), logging.WARNING)


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    verbose: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Override log level (defaults to FUZZYFIND_LOG_LEVEL, LOG_LEVEL or WARNING)
        log_file: Optional path to a rotating log file, in addition to stderr
        json_format: Emit JSON lines (defaults to FUZZYFIND_LOG_FORMAT=json)
        verbose: Force DEBUG level
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    """
    level = resolve_level(log_level, verbose)

    if json_format is None:
        json_format = os.environ.get('FUZZYFIND_LOG_FORMAT', '').lower() == 'json'

    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    logger = logging.getLogger('fuzzyfind')
    logger.debug(f"Logging configured - Level: {logging.getLevelName(level)}, JSON: {json_format}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    add_trace_to_logger()
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (e.g., logging.INFO)
        message: Log message
        **context: Additional fields included in JSON output
    """
    extra = {'extra': context} if context else {}
    logger.log(level, message, extra=extra)
