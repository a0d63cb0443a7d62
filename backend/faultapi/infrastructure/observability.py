"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request context (resource, record_id, path, error_code) surfaced at top level
    - Injected-issue details grouped under "fault": issue plus whatever the
      skipped check measured (field_name, found, expected, root_type)
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging only
    - Fault details nested so log queries can select every injected issue by
      the presence of one key
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "faultapi"

CONTEXT_KEYS = ("resource", "record_id", "path", "error_code")
FAULT_KEYS = ("field_name", "found", "expected", "root_type")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_pick(record, CONTEXT_KEYS))
        issue = record.__dict__.get("issue")
        if issue is not None:
            log["fault"] = {"issue": issue, **_pick(record, FAULT_KEYS)}
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines; injected issues tagged so they stand out."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s — %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        issue = record.__dict__.get("issue")
        if issue is not None:
            line = f"{line} [fault={issue}]"
        return line


def _pick(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
