"""HTTP response validation.

Builds on the status classification in errors/types.py and adds the
content-type check applied to successful responses.
"""

from __future__ import annotations

import httpx

from catalogfetch.errors.types import FailureKind, FetchFailure, classify_status

JSON_MEDIA_TYPE = "application/json"


def media_type(response: httpx.Response) -> str | None:
    """Return the response's media type with any parameters removed.

    ``application/json; charset=utf-8`` becomes ``application/json``.
    """
    content_type = response.headers.get("Content-Type")
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip()


def classify_response(response: httpx.Response) -> FetchFailure | None:
    """Check a response's status code and declared content type.

    Returns:
        None if the response carries usable JSON, otherwise the failure
    """
    status = response.status_code
    kind = classify_status(status)

    if kind is FailureKind.SERVER_ERROR:
        return FetchFailure(
            kind=kind,
            message=f"Server error status code: {status}",
            status_code=status,
        )

    if kind is FailureKind.CLIENT_OR_REDIRECT_ERROR:
        reason = response.reason_phrase
        detail = f"{status} {reason}" if reason else str(status)
        return FetchFailure(
            kind=kind,
            message=f"Unsuccessful request, status code: {detail}",
            status_code=status,
        )

    if media_type(response) != JSON_MEDIA_TYPE:
        return FetchFailure(
            kind=FailureKind.INVALID_CONTENT_TYPE,
            message=(
                "Request was successful but the result is not a valid json "
                f"(content type: {response.headers.get('Content-Type')})"
            ),
            status_code=status,
        )

    return None
