"""Fetch failure types and classifications."""

from __future__ import annotations

from enum import StrEnum

import msgspec


class FailureKind(StrEnum):
    """Why a fetch attempt did not produce usable JSON."""

    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    CLIENT_OR_REDIRECT_ERROR = "client_or_redirect_error"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    TRANSPORT_FAILURE = "transport_failure"
    RETRIES_EXHAUSTED = "retries_exhausted"


# Only these kinds may trigger another attempt
RETRYABLE_KINDS = frozenset({FailureKind.TIMEOUT, FailureKind.SERVER_ERROR})


class FetchFailure(msgspec.Struct, frozen=True):
    """Structured description of a failed fetch attempt."""

    kind: FailureKind
    message: str
    status_code: int | None = None

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS


def classify_status(status_code: int) -> FailureKind | None:
    """Classify an HTTP status code.

    Returns None for 2xx, otherwise the failure kind the status maps to.
    """
    if 200 <= status_code < 300:
        return None
    if 500 <= status_code < 600:
        return FailureKind.SERVER_ERROR
    return FailureKind.CLIENT_OR_REDIRECT_ERROR
