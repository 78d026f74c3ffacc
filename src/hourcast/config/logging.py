"""Logging configuration utilities."""

import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from hourcast.config.types import AppConfig


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_timestamp: bool = True):
        """Initialize formatter.

        Args:
            include_timestamp: Whether to include timestamp in output
        """
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted string
        """
        data = {
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if self.include_timestamp:
            data['timestamp'] = datetime.fromtimestamp(record.created).isoformat()

        if record.exc_info:
            data['exception'] = self.formatException(record.exc_info)

        return json.dumps(data)

class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color.

        Args:
            record: Log record to format

        Returns:
            Colored string
        """
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]
        msg = record.getMessage()

        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        return f"{color}{timestamp} - {record.name} - {record.levelname} - {msg}{self.RESET}"

def get_file_handler(log_file: str | Path, formatter: logging.Formatter) -> logging.FileHandler:
    """Create file handler, creating the log directory if needed.

    Args:
        log_file: Path to log file
        formatter: Formatter to use

    Returns:
        Configured file handler
    """
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    return file_handler

def setup_logging(
    config: AppConfig | None = None,
    verbose: bool = False,
    log_file: str | None = None,
    json_logs: bool = False
) -> None:
    """Set up logging configuration.

    Console output goes to stderr so the forecast table on stdout stays clean.

    Args:
        config: Application configuration supplying level, file and format
        verbose: Force DEBUG level
        log_file: Log file path, overriding the configured one
        json_logs: Use JSON output on every handler
    """
    logging_config = config.logging if config else {}
    level_name = 'DEBUG' if verbose else str(logging_config.get('level', 'WARNING')).upper()
    level = getattr(logging, level_name, logging.WARNING)
    json_logs = json_logs or logging_config.get('format') == 'json'

    log_file = log_file or logging_config.get('file')

    root_logger = logging.getLogger()
    # File output always records DEBUG for troubleshooting
    root_logger.setLevel(logging.DEBUG if log_file else level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(JsonFormatter() if json_logs else ColoredFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = get_file_handler(
            log_file,
            JsonFormatter() if json_logs else logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        )
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    # Keep third party libraries quiet unless debugging
    for library in ('urllib3', 'requests'):
        logging.getLogger(library).setLevel(logging.DEBUG if verbose else logging.WARNING)
