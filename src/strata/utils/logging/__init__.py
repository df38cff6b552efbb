"""Structured JSON logging utility."""

from src.strata.utils.logging.factory import (  # noqa: F401
    configure_logging,
    disable_logging,
    get_logger,
)
from src.strata.utils.logging.formatters import StructuredJSONFormatter  # noqa: F401

__all__ = [
    # Factory
    "configure_logging",
    "get_logger",
    "disable_logging",
    # Formatters
    "StructuredJSONFormatter",
]
