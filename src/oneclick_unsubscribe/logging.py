"""
Structured logging for one-click unsubscribe handling.

Records are emitted as one JSON object per line with the component name
and any context attached to the logger. Tokens are secrets: every
message and context value is passed through ``SensitiveDataFilter``
before it reaches a handler.
"""

import logging
import json
import re
from typing import Dict, Any, Optional
from contextlib import contextmanager
from datetime import datetime, timezone

ROOT_LOGGER_NAME = "oneclick"

_VISIBLE_TOKEN_CHARS = 4


def mask_token(token: Optional[str]) -> str:
    """Mask a token for logging, keeping a short prefix for correlation."""
    if not token:
        return ''
    if len(token) <= _VISIBLE_TOKEN_CHARS:
        return '***'
    return token[:_VISIBLE_TOKEN_CHARS] + '***'


class SensitiveDataFilter:
    """Filter sensitive data from log messages."""

    sensitive_keys = {'token', 'opaque_token', 'candidate', 'secret', 'password', 'api_key'}

    def __init__(self):
        self.sensitive_patterns = [
            (re.compile(r'token=([^&\s]+)', re.IGNORECASE), 'token=***'),
            (re.compile(r'secret["\']?\s*[:=]\s*["\']?([^"\'\s&]+)', re.IGNORECASE), 'secret=***'),
            (re.compile(r'password["\']?\s*[:=]\s*["\']?([^"\'\s&]+)', re.IGNORECASE), 'password=***'),
        ]

    def filter_message(self, message: str) -> str:
        """Filter sensitive data from a message string."""
        filtered = message
        for pattern, replacement in self.sensitive_patterns:
            filtered = pattern.sub(replacement, filtered)
        return filtered

    def filter_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Filter sensitive data from a dictionary."""
        filtered = {}
        for key, value in data.items():
            if key.lower() in self.sensitive_keys:
                filtered[key] = mask_token(value) if isinstance(value, str) else '***'
            elif isinstance(value, str):
                filtered[key] = self.filter_message(value)
            elif isinstance(value, dict):
                filtered[key] = self.filter_dict(value)
            else:
                filtered[key] = value
        return filtered


class OneClickLogger:
    """Structured logger with context tracking."""

    def __init__(self, component: str):
        self.component = component
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
        self.context: Dict[str, Any] = {}
        self.filter = SensitiveDataFilter()

    def add_context(self, key: str, value: Any) -> None:
        """Add context information to all subsequent log messages."""
        self.context[key] = value

    def _prepare_log_data(self, message: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'component': self.component,
            'message': self.filter.filter_message(message),
            'context': self.filter.filter_dict(self.context.copy())
        }

        if extra:
            log_data['extra'] = self.filter.filter_dict(extra)

        return log_data

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]] = None):
        if not self.logger.isEnabledFor(level):
            return
        log_data = self._prepare_log_data(message, extra)
        self.logger.log(level, json.dumps(log_data, default=str))

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured data."""
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured data."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured data."""
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with structured data."""
        self._log(logging.ERROR, message, extra)

    def log_exception(self, exception: Exception, extra: Optional[Dict[str, Any]] = None):
        """Log an exception with its type; the message is filtered like any other."""
        log_data = self._prepare_log_data(f"Exception occurred: {type(exception).__name__}", extra)
        log_data['exception'] = {
            'type': type(exception).__name__,
            'message': self.filter.filter_message(str(exception))
        }
        self.logger.error(json.dumps(log_data, default=str))

    @contextmanager
    def scoped_context(self, context: Dict[str, Any]):
        """Context manager for scoped context that is automatically removed."""
        original_context = self.context.copy()
        self.context.update(context)
        try:
            yield
        finally:
            self.context = original_context


def configure_logging(
    level: str = "WARNING",
    format: str = "standard",
    output: str = "console",
    filename: Optional[str] = None
):
    """Configure the ``oneclick`` logger tree."""

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    if format == "json":
        formatter = logging.Formatter('%(message)s')
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    if output in ["console", "both"]:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if output in ["file", "both"] and filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
