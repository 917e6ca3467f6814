"""Core fetching and pipeline for catalogfetch."""

from catalogfetch.core.catalog import PipelineResult, get_content, run_pipeline
from catalogfetch.core.fetch import FetchAttempt, Fetcher, FetchOutcome, FetchRequest
from catalogfetch.core.http import cleanup, get_http_client, get_timeout_config
from catalogfetch.core.retry import MAX_RETRIES, RetryPolicy

__all__ = [
    # http
    "get_http_client",
    "cleanup",
    "get_timeout_config",
    # retry
    "MAX_RETRIES",
    "RetryPolicy",
    # fetch
    "Fetcher",
    "FetchRequest",
    "FetchAttempt",
    "FetchOutcome",
    # catalog
    "PipelineResult",
    "get_content",
    "run_pipeline",
]
