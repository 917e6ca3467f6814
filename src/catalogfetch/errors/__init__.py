"""Error handling for catalogfetch."""

from catalogfetch.errors.http import JSON_MEDIA_TYPE, classify_response, media_type
from catalogfetch.errors.network import classify_network_error
from catalogfetch.errors.types import (
    RETRYABLE_KINDS,
    FailureKind,
    FetchFailure,
    classify_status,
)

__all__ = [
    # Core types
    "FailureKind",
    "FetchFailure",
    "RETRYABLE_KINDS",
    # Classification functions
    "classify_status",
    "classify_response",
    "classify_network_error",
    # HTTP utilities
    "JSON_MEDIA_TYPE",
    "media_type",
]
