"""
Structured logging: timestamp, level, event_type, node context.

structlog with ISO timestamps and consistent keys. JSON output by default
(LOG_FORMAT=json); human-readable console output otherwise. Log lines go to
stderr, or to LOG_FILE when set. Stdout is reserved for the health-check
response, so nothing here may print to it.

Uses only Python stdlib logging and structlog; no clustercheck imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog

# Health checks run every few seconds; keep the channel quiet unless asked.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.WARNING)

LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()
LOG_FILE = os.getenv("LOG_FILE", "").strip()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type for consistency; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _drop_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Mask password-like keys so credentials never reach the log sink."""
    for key in list(event_dict):
        if "password" in key.lower():
            event_dict[key] = "***"
    return event_dict


def _log_stream(path: str | None = None) -> tuple[TextIO, str | None]:
    """Return (sink, error); an unopenable LOG_FILE falls back to stderr with the error text."""
    path = LOG_FILE if path is None else path
    if not path:
        return sys.stderr, None
    try:
        return open(path, "a", encoding="utf-8"), None
    except OSError as e:
        return sys.stderr, str(e)


def configure_structlog(
    level: int | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog: JSON or console renderer, timestamp, level, event_type."""
    fmt = (fmt or LOG_FORMAT).strip().lower()
    sink_error = None
    if stream is None:
        stream, sink_error = _log_stream()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
        _drop_secrets,
    ]
    if fmt == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=stream.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            LOG_LEVEL_VALUE if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
    if sink_error:
        structlog.get_logger(__name__).warning(
            "log_file_unavailable", log_file=LOG_FILE, error=sink_error
        )


# One-time configuration on first import
if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

    Log with event_type (first arg) and keyword context:
        logger = get_logger(__name__)
        logger.info("probe_state_observed", state="Synced", host="localhost")
    Output (JSON): {"event_type": "probe_state_observed", "state": "Synced", "host": "localhost", "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)
