"""Logger factory for hosts that want structured resolver logs."""
import logging
import logging.handlers
import sys
from typing import Optional

from src.strata.utils.logging.formatters import StructuredJSONFormatter

_logger = logging.getLogger(__name__)


def configure_logging(
    service_name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    enable_console: bool = True,
) -> None:
    """Configure root logging with the structured JSON formatter.

    The resolver never calls this itself; hosts call it before resolving
    if they want JSON logs.

    Args:
        service_name: Service name stamped on every record
        level: Root log level
        log_file: Path to a rotating log file (optional)
        enable_console: Log to stdout
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = StructuredJSONFormatter(service_name=service_name)
    handlers = []

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _logger.info(
        "Logging configured",
        extra={
            "service_name": service_name,
            "level": logging.getLevelName(level),
            "log_file": log_file,
            "handlers_count": len(handlers),
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)


def disable_logging() -> None:
    """Drop all root handlers. Useful for tests."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()
    root_logger.addHandler(logging.NullHandler())
