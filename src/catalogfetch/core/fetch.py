"""Retrying catalog fetcher.

Sends a GET request, retries timeouts and 5xx responses a bounded
number of times, and accepts only successful responses declared as
``application/json``. Every failure collapses into an empty outcome.
"""
from __future__ import annotations

import logging
import time

import httpx
import msgspec

from catalogfetch.config.settings import DEFAULT_TIMEOUT, Config
from catalogfetch.core.http import get_http_client
from catalogfetch.core.retry import RetryPolicy
from catalogfetch.errors.http import classify_response
from catalogfetch.errors.network import classify_network_error
from catalogfetch.errors.types import FailureKind, FetchFailure


class FetchRequest(msgspec.Struct, frozen=True):
    """A single GET request, repeated unchanged on every attempt."""

    url: str
    timeout: float = DEFAULT_TIMEOUT


class FetchAttempt(msgspec.Struct, frozen=True):
    """Record of a single request and how it resolved."""

    number: int  # 0 is the initial request, 1.. are retries
    duration_ms: float = 0.0
    status_code: int | None = None
    failure: FailureKind | None = None


class FetchOutcome(msgspec.Struct, frozen=True):
    """Result of a fetch: the JSON body, or empty."""

    url: str
    success: bool
    body: str | None = None
    failure: FetchFailure | None = None  # Why the fetch came back empty
    attempts: list[FetchAttempt] = []

    @classmethod
    def ok(cls, url: str, body: str, attempts: list[FetchAttempt]) -> FetchOutcome:
        return cls(url=url, success=True, body=body, attempts=attempts)

    @classmethod
    def empty(
        cls, url: str, failure: FetchFailure, attempts: list[FetchAttempt]
    ) -> FetchOutcome:
        return cls(url=url, success=False, failure=failure, attempts=attempts)


class Fetcher:
    """Fetches JSON text from a URL with bounded retries.

    Args:
        client: HTTP client to send requests with. The shared client from
            ``get_http_client`` is used when omitted.
        timeout: Per-attempt timeout in seconds
        policy: Retry policy
        logger: Where decision events are logged. Defaults to this
            module's logger.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        policy: RetryPolicy | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self.timeout = timeout
        self.policy = policy or RetryPolicy()
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Config,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> Fetcher:
        """Build a fetcher from the ``[fetch]`` settings."""
        return cls(
            client,
            timeout=config.fetch.timeout,
            policy=RetryPolicy(max_retries=config.fetch.max_retries),
            logger=logger,
        )

    async def fetch(self, url: str) -> FetchOutcome:
        """Fetch ``url`` and return its body if it is JSON.

        Never raises; failures are reported through the outcome and the log.
        """
        if self._client is not None:
            return await self._fetch_with(self._client, url)

        async with get_http_client() as client:
            return await self._fetch_with(client, url)

    async def _fetch_with(self, client: httpx.AsyncClient, url: str) -> FetchOutcome:
        request = FetchRequest(url=url, timeout=self.timeout)
        attempts: list[FetchAttempt] = []
        failure: FetchFailure | None = None

        for attempt in range(self.policy.max_attempts):
            if attempt == 0:
                self.logger.info("Sending GET request to %s", url)
            else:
                self.logger.info("Retrying the request, attempt #%d", attempt)

            start_time = time.monotonic()
            response, failure = await self._send(client, request)
            duration_ms = (time.monotonic() - start_time) * 1000

            attempts.append(
                FetchAttempt(
                    number=attempt,
                    duration_ms=duration_ms,
                    status_code=response.status_code if response is not None else None,
                    failure=failure.kind if failure is not None else None,
                )
            )

            if failure is None:
                self.logger.info("Request was successful.")
                return FetchOutcome.ok(url, response.text, attempts)

            if not self.policy.should_retry(failure, attempt):
                break

            self.logger.warning("%s, retrying..", failure.message)

        if failure.retryable:
            self.logger.error(
                "Max retry attempts exceeded after %d attempts (last error: %s)",
                len(attempts),
                failure.message,
            )
            failure = FetchFailure(
                kind=FailureKind.RETRIES_EXHAUSTED,
                message=f"Gave up after {len(attempts)} attempts: {failure.message}",
                status_code=failure.status_code,
            )
        elif failure.kind is FailureKind.INVALID_CONTENT_TYPE:
            self.logger.warning("%s, returning empty result.", failure.message)
        else:
            self.logger.error("%s", failure.message)

        return FetchOutcome.empty(url, failure, attempts)

    async def _send(
        self, client: httpx.AsyncClient, request: FetchRequest
    ) -> tuple[httpx.Response | None, FetchFailure | None]:
        """Send one request and classify how it resolved."""
        try:
            response = await client.get(request.url, timeout=request.timeout)
        except Exception as e:
            return None, classify_network_error(e)

        return response, classify_response(response)
