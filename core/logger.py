#!/usr/bin/env python3
"""
Service logger setup

Configures stdlib logging for a service from LoggingConfig: a console
handler, an optional file handler, and an optional JSON formatter for
structured log shipping.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config.logging_config import LoggingConfig


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service_name,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_service_logger(service_name: str, config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the root logger once for a service and return the service logger.

    Args:
        service_name: Name used for the returned logger and in JSON records
        config: Logging settings, defaults to LoggingConfig.from_env()

    Returns:
        Logger named after the service
    """
    config = config or LoggingConfig.from_env()

    if config.enable_structured:
        formatter: logging.Formatter = JSONFormatter(service_name)
    else:
        formatter = logging.Formatter(config.log_format)

    root = logging.getLogger()
    root.setLevel(config.log_level.upper())

    # Replace handlers installed by an earlier call so reloads don't duplicate output
    for handler in list(root.handlers):
        if getattr(handler, "_service_handler", False):
            root.removeHandler(handler)

    handlers = []
    if config.enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._service_handler = True
        root.addHandler(handler)

    return logging.getLogger(service_name)
