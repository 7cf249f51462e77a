"""
Structured Logging for HealthSaaS

Provides context-aware JSON logging for the client layer.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, Dict
import json

from healthsaas.config.settings import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra context if present
        if hasattr(record, "context"):
            log_data["context"] = record.context

        if hasattr(record, "user_id"):
            log_data["user_id"] = record.user_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with structured formatting.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    settings = get_settings()
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, settings.app.log_level.upper(), logging.INFO))
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    return logger


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: Optional[Dict[str, Any]] = None,
    user_id: Optional[str] = None,
):
    """
    Log a message with additional context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        context: Optional context dictionary
        user_id: Optional id of the signed-in user
    """
    extra = {}
    if context:
        extra["context"] = context
    if user_id:
        extra["user_id"] = user_id

    logger.log(level, message, extra=extra)
