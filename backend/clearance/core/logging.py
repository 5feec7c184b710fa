"""Structured JSON Logging Configuration.

All logs are output in JSON format for easy parsing and analysis in production.
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

from .config import Settings, settings as default_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that includes standard fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName

        log_record['process_id'] = record.process


def setup_logging(config: Settings | None = None):
    """Setup structured JSON logging for the application."""
    config = config or default_settings

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, config.LOG_LEVEL))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, config.LOG_LEVEL))

    formatter = CustomJsonFormatter(
        '%(timestamp)s %(level)s %(name)s %(message)s',
        timestamp=True
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    logger.info(
        "Logging configured",
        extra={
            'log_level': config.LOG_LEVEL,
            'environment': config.ENVIRONMENT
        }
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
