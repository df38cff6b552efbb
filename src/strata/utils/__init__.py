"""Shared utilities module."""

__all__ = [
    # Configuration resolution
    "config",
    # Structured logging
    "logging",
    # Query utilities
    "query",
]
