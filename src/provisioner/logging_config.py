"""Structured JSON logging configuration.

Emits one JSON object per line on stdout with ``severity``/``timestamp``/
``logger`` field names and a static ``service`` field.

What the service logs:
  - INFO: handshake answers, modals opened, interaction types received, the
    pipeline variables submitted (never the trigger token) and GitLab's reply
    status; the reply body at DEBUG
  - WARNING: rejected signatures, unparseable payloads, unsupported commands,
    failed or unparseable trigger responses
  - ERROR: Slack API and pipeline failures, with tracebacks

httpx and slack_sdk log every outbound request at INFO; they are held at
WARNING so each webhook produces only the service's own lines.

Usage:
    from provisioner.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "slack-provisioner",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "httpx": {"level": "WARNING"},
        "slack_sdk": {"level": "WARNING"},
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    ``level`` comes from ``Settings.log_level`` and sets the root logger, so
    LOG_LEVEL=DEBUG also surfaces the raw GitLab response bodies. The
    httpx and slack_sdk loggers stay at WARNING regardless. Call once at
    application startup (in the FastAPI lifespan).
    """
    config = {**LOGGING_CONFIG, "root": {**LOGGING_CONFIG["root"], "level": level.upper()}}
    logging.config.dictConfig(config)
