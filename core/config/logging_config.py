#!/usr/bin/env python3
"""Gateway logging settings, read by core.logger.setup_service_logger"""
import os
from dataclasses import dataclass

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class LoggingConfig:
    """Handlers and format for the root logger"""
    log_level: str = "INFO"
    log_format: str = _DEFAULT_FORMAT
    # Empty: no file handler
    log_file: str = ""
    enable_console: bool = True
    # JSON lines instead of log_format
    enable_structured: bool = False

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Load logging config from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env == "development" else "INFO"),
            log_format=os.getenv("LOG_FORMAT", _DEFAULT_FORMAT),
            log_file=os.getenv("LOG_FILE", ""),
            enable_console=_bool(os.getenv("LOG_CONSOLE", "true")),
            enable_structured=_bool(os.getenv("ENABLE_STRUCTURED_LOGGING", "false")),
        )
