"""Symbolic reference resolution exceptions."""
from typing import Optional

from src.strata.exceptions.base import StrataError


class ReferenceResolutionError(StrataError):
    """Base exception for symbolic reference failures.

    Args:
        message: Human-readable error message
        reference: Qualified name being resolved
        details: Additional error context
        original: Underlying exception, if any
    """

    error_code = "REFERENCE_ERROR"

    def __init__(
        self,
        message: str,
        reference: Optional[str] = None,
        details: Optional[dict] = None,
        original: Optional[Exception] = None,
    ):
        details = dict(details or {})
        if reference is not None:
            details["reference"] = reference
        super().__init__(message, details=details, original=original)
        self.reference = reference


class InvalidReferenceError(ReferenceResolutionError):
    """Reference is not qualified with an owning module."""

    error_code = "INVALID_REFERENCE"

    def __init__(self, reference: str):
        super().__init__(
            f"Reference must be namespaced as 'module:name', got {reference!r}",
            reference=reference,
        )


class ModuleLoadError(ReferenceResolutionError):
    """Owning module of a reference could not be loaded."""

    error_code = "MODULE_LOAD_FAILED"

    def __init__(self, module: str, reference: Optional[str] = None, original: Optional[Exception] = None):
        super().__init__(
            f"Could not load module '{module}'",
            reference=reference,
            details={"module": module},
            original=original,
        )
        self.module = module


class UnboundReferenceError(ReferenceResolutionError):
    """Module loaded but the referenced name is not bound in it."""

    error_code = "UNBOUND_REFERENCE"

    def __init__(self, reference: str):
        super().__init__(
            f"Reference {reference!r} is not bound after loading its module",
            reference=reference,
        )
