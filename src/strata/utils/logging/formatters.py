"""Structured JSON log formatters."""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict


# Attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}

# Sensitive key fragments to redact
_SENSITIVE_PATTERNS = (
    "api_key",
    "password",
    "passwd",
    "token",
    "secret",
    "authorization",
    "bearer",
)


def _serialize_value(value: Any) -> Any:
    """Safely serialize value to JSON-compatible type."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    elif isinstance(value, dict):
        return {str(k): _serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        return [_serialize_value(v) for v in value]
    elif hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _redact_sensitive(data: Any) -> Any:
    """Redact values stored under sensitive-looking keys.

    Args:
        data: Data to redact (dict, list, or primitive)

    Returns:
        Redacted copy with sensitive values replaced with [REDACTED]
    """
    if isinstance(data, dict):
        redacted = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(pattern in key_lower for pattern in _SENSITIVE_PATTERNS):
                redacted[key] = "[REDACTED]"
            else:
                redacted[key] = _redact_sensitive(value)
        return redacted
    elif isinstance(data, list):
        return [_redact_sensitive(item) for item in data]
    return data


def extract_extra(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the fields a caller attached with ``extra=``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class StructuredJSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON with consistent fields:
    - timestamp (ISO 8601 UTC)
    - level
    - service_name
    - logger_name
    - message
    - source_file / source_line / source_function
    - exception and stack_trace (if applicable)
    - every ``extra=`` field, with sensitive keys redacted
    """

    def __init__(self, service_name: str = "unknown"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service_name": self.service_name,
            "logger_name": record.name,
            "message": record.getMessage(),
            "source_file": record.pathname,
            "source_line": record.lineno,
            "source_function": record.funcName,
        }

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "module": exc_type.__module__ if exc_type else None,
            }
            if exc_tb:
                log_entry["stack_trace"] = traceback.format_exception(exc_type, exc_value, exc_tb)

        extra = _redact_sensitive(extract_extra(record))
        for key, value in extra.items():
            log_entry.setdefault(key, value)

        return json.dumps(_serialize_value(log_entry), default=str)
