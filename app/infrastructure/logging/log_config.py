"""
Logging setup for the card audio processor.
One service logger is configured on first use; every module logger hangs
under it so structured fields reach the same handler.
"""
import logging
import sys
import json
from typing import Optional
from datetime import datetime, timezone
from app.config.settings import settings


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation in deployed stages."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "service": settings.service_name,
            "environment": settings.environment
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        log_entry.update(getattr(record, 'extra_fields', {}))

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Plain text line with structured fields appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, 'extra_fields', None)
        if fields:
            line += " | " + " | ".join(f"{k}={v}" for k, v in fields.items())
        return line


class LoggingManager:
    """Singleton owning the service logger configuration."""

    _instance: Optional['LoggingManager'] = None
    _configured: bool = False

    def __new__(cls) -> 'LoggingManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def namespace(self) -> str:
        return settings.service_name

    def _configure_logging(self) -> None:
        if self._configured:
            return

        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(JSONFormatter() if settings.is_production else DevelopmentFormatter())

        # The Lambda runtime installs its own root handler; keep records off it
        service_logger = logging.getLogger(self.namespace)
        service_logger.setLevel(log_level)
        service_logger.addHandler(handler)
        service_logger.propagate = False

        for noisy in ("uvicorn.access", "httpx", "httpcore"):
            noisy_logger = logging.getLogger(noisy)
            if noisy_logger.level < logging.WARNING:
                noisy_logger.setLevel(logging.WARNING)

        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger under the service namespace, configuring logging first."""
        self._configure_logging()

        if not name.startswith(self.namespace):
            name = f"{self.namespace}.{name}"

        return logging.getLogger(name)


logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Example:
        logger = get_logger("CardProcessor")
        # Results in logger named: "card-audio-processor.CardProcessor"
    """
    return logging_manager.get_logger(name)
