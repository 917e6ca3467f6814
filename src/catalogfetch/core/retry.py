"""Retry policy for catalog fetches."""

from dataclasses import dataclass

from catalogfetch.errors.types import FetchFailure

MAX_RETRIES = 5


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded, immediate retry on transient failures.

    Attempts are numbered from 0. Attempt 0 is the initial request and
    attempts 1..max_retries are retries, so at most ``max_retries + 1``
    requests are sent. No delay is applied between attempts.
    """

    max_retries: int = MAX_RETRIES

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def should_retry(self, failure: FetchFailure, attempt: int) -> bool:
        """Decide whether another attempt follows ``attempt``.

        Args:
            failure: Failure produced by the attempt that just finished
            attempt: Which attempt just finished (0-indexed)
        """
        return failure.retryable and attempt < self.max_retries
