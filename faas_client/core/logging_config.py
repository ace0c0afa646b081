"""
Logging Configuration
Custom JSON Logger implementation for applications embedding the client.

Provides:
- CustomJsonFormatter: one JSON object per log record
- setup_logging: YAML dictConfig loader with ${VAR} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Optional

import yaml

from .config import BaseAppConfig

LOG_CONFIG_ENV = "FAAS_CLIENT_LOG_CONFIG"

_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. faas_client.client)
      - message: Log message
      - any `extra` fields passed to the logging call
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Include extra fields
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: Optional[str] = None, log_level: Optional[str] = None):
    """
    Load the YAML config, substitute environment variables, and initialize logging.

    `${LOG_LEVEL}` resolves to `log_level`, or to BaseAppConfig.LOG_LEVEL
    (environment or .env, default INFO) when not given.
    """
    if log_level is None:
        log_level = BaseAppConfig().LOG_LEVEL
    if config_path is None:
        config_path = os.getenv(LOG_CONFIG_ENV, "config/client_log.yaml")

    if not os.path.exists(config_path):
        logging.basicConfig(level=log_level)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Supports ${LOG_LEVEL} format.
        template = string.Template(f.read())

        mapping = os.environ.copy()
        mapping["LOG_LEVEL"] = log_level

        content = template.safe_substitute(mapping)
        config = yaml.safe_load(content)
        logging.config.dictConfig(config)
