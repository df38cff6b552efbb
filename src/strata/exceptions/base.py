"""Base exception class for the resolver."""
from typing import Any, Dict, Optional


class StrataError(Exception):
    """Root of every error the resolution pipeline raises.

    Each subclass declares its machine-readable ``error_code`` at class
    level; ``details`` carries what an operator needs to find the
    problem (paths, variable names, references).

    Args:
        message: Human-readable error message
        details: Diagnostic context
        original: Exception this one wraps, if any
        error_code: Overrides the class-level code
    """

    error_code: str = "STRATA_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.details = dict(details or {})
        self.original = original
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self._render())

    def _render(self) -> str:
        rendered = f"[{self.error_code}] {self.message}"
        if self.original is not None:
            rendered += f" (caused by: {type(self.original).__name__}: {self.original})"
        return rendered

    def to_dict(self) -> Dict[str, Any]:
        """Structured form for ``extra=`` logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "exception_type": type(self).__name__,
            "caused_by": type(self.original).__name__ if self.original else None,
        }
