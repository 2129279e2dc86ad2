"""Unified failure taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``code_feedback.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind, NON_RETRYABLE_KINDS
from .errors_parts.classified_error import ClassifiedError
from .errors_parts.classification import (
    classify_failure,
    parse_retry_after,
    provider_not_configured_error,
)

__all__ = [
    "ErrorKind",
    "NON_RETRYABLE_KINDS",
    "ClassifiedError",
    "classify_failure",
    "parse_retry_after",
    "provider_not_configured_error",
]
