"""Network error classification utilities.

Maps exceptions raised by the HTTP transport onto fetch failures.
"""

from __future__ import annotations

import httpx

from catalogfetch.errors.types import FailureKind, FetchFailure


def classify_network_error(error: Exception) -> FetchFailure:
    """Classify an exception raised while sending a request.

    Timeouts are the only retryable transport errors; everything else
    is reported as a terminal transport failure.

    Args:
        error: Exception raised by the client

    Returns:
        FetchFailure describing the error
    """
    if isinstance(error, httpx.ConnectTimeout):
        return FetchFailure(
            kind=FailureKind.TIMEOUT,
            message="Connection timed out",
        )

    if isinstance(error, httpx.ReadTimeout):
        return FetchFailure(
            kind=FailureKind.TIMEOUT,
            message="Request timed out waiting for response",
        )

    if isinstance(error, httpx.TimeoutException):
        return FetchFailure(
            kind=FailureKind.TIMEOUT,
            message=f"Request timed out: {error}",
        )

    if isinstance(error, httpx.ConnectError):
        message = str(error)
        if "connection refused" in message.lower():
            return FetchFailure(
                kind=FailureKind.TRANSPORT_FAILURE,
                message="Connection refused by server",
            )
        elif "name or service" in message.lower() or "nodename" in message.lower():
            return FetchFailure(
                kind=FailureKind.TRANSPORT_FAILURE,
                message="Could not resolve server address",
            )
        return FetchFailure(
            kind=FailureKind.TRANSPORT_FAILURE,
            message=f"Failed to connect to server: {error}",
        )

    if isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return FetchFailure(
            kind=FailureKind.TRANSPORT_FAILURE,
            message=f"Invalid URL: {error}",
        )

    return FetchFailure(
        kind=FailureKind.TRANSPORT_FAILURE,
        message=f"Exception caught when sending request: {error}",
    )

