"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `code_feedback.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind, NON_RETRYABLE_KINDS
from .classified_error import ClassifiedError
from .classification import classify_failure, parse_retry_after, provider_not_configured_error

__all__ = [
    "ErrorKind",
    "NON_RETRYABLE_KINDS",
    "ClassifiedError",
    "classify_failure",
    "parse_retry_after",
    "provider_not_configured_error",
]
