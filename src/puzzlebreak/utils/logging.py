"""
Logging Configuration

Console and rotating-file logging for the answer validation service, with
an optional JSON format that carries question and tier context.
"""

import json
import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from puzzlebreak.core.config import get_config

# Record attributes copied into JSON output when a caller sets them via `extra`
CONTEXT_FIELDS = ('question_id', 'tier')

# Libraries the service talks through; kept at WARNING unless debugging them directly
QUIET_LOGGERS = ('aiohttp', 'asyncio', 'sqlalchemy.engine', 'sqlalchemy.pool', 'nltk')

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'

SIZE_UNITS = (('GB', 1024 ** 3), ('MB', 1024 ** 2), ('KB', 1024), ('B', 1))
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }
        for field_name in CONTEXT_FIELDS:
            if hasattr(record, field_name):
                entry[field_name] = getattr(record, field_name)

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry)


class ValidationLoggerAdapter(logging.LoggerAdapter):
    """Attaches the question being validated to every record."""

    def process(self, msg, kwargs):
        kwargs['extra'] = {**kwargs.get('extra', {}), **self.extra}
        return msg, kwargs


def setup_logging(config=None, enable_json: bool = False) -> None:
    """
    Install console and rotating file handlers on the root logger.

    The console handler uses ``logging.console_level`` so the terminal stays
    quiet; the file handler records everything at ``logging.level``.

    Args:
        config: Application configuration (uses the global one if None)
        enable_json: Force JSON output regardless of ``logging.json``
    """
    if config is None:
        config = get_config()
    settings = config.logging
    use_json = enable_json or settings.json

    log_file = Path(settings.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_level(settings.console_level))
    console_handler.setFormatter(JSONFormatter() if use_json else logging.Formatter(settings.format))

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=_parse_size(settings.max_size),
        backupCount=settings.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(_level(settings.level))
    file_handler.setFormatter(JSONFormatter() if use_json else logging.Formatter(FILE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_level(settings.level))
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(
        f"Logging configured - Console: {settings.console_level}, File: {settings.level}, Path: {log_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)


def get_validation_logger(question_id: str) -> ValidationLoggerAdapter:
    """Logger on 'puzzlebreak.validation' carrying ``question_id``."""
    return ValidationLoggerAdapter(get_logger('puzzlebreak.validation'), {'question_id': question_id})


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def _parse_size(size_str: str) -> int:
    """Convert '10MB', '1GB', '512KB' or '100B' to bytes; unparseable values give 10MB."""
    size_str = size_str.upper().strip()

    # Longer suffixes first so 'MB' is not read as 'B'
    for unit, multiplier in SIZE_UNITS:
        if size_str.endswith(unit):
            try:
                return int(float(size_str[:-len(unit)].strip()) * multiplier)
            except ValueError:
                break

    return DEFAULT_MAX_BYTES


class PerformanceTimer:
    """Context manager that logs how long an operation took."""

    def __init__(self, operation: str, logger=None):
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.duration = 0.0
        self._started = None

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.debug(f"Started {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._started

        if exc_type is None:
            self.logger.debug(f"Completed {self.operation} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}")
