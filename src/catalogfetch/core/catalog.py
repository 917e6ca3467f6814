"""Catalog pipeline: fetch, parse, group, serialize, write."""
from __future__ import annotations

import logging
from pathlib import Path

import msgspec

from catalogfetch.catalog.group import group_by_category, serialize_grouped
from catalogfetch.catalog.parse import parse_items
from catalogfetch.catalog.writer import write_output
from catalogfetch.config.settings import Config, get_config
from catalogfetch.core.fetch import Fetcher
from catalogfetch.models import Item

logger = logging.getLogger(__name__)


class PipelineResult(msgspec.Struct):
    """Summary of one pipeline run."""

    success: bool  # False when no items were retrieved
    item_count: int = 0
    category_count: int = 0
    output: str | None = None  # Serialized document
    output_path: str | None = None
    written: bool = False


async def get_content(fetcher: Fetcher, url: str) -> list[Item]:
    """Fetch url and parse the body into items.

    Returns an empty list if the fetch or the parse fails.
    """
    outcome = await fetcher.fetch(url)
    if not outcome.success or not outcome.body:
        return []

    return parse_items(outcome.body)


async def run_pipeline(
    config: Config | None = None,
    fetcher: Fetcher | None = None,
    *,
    write: bool = True,
) -> PipelineResult:
    """Fetch the catalog and write the grouped projection.

    Args:
        config: Settings to use (loaded if None)
        fetcher: Fetcher to use (built from config if None)
        write: Whether to write the document to the configured path

    Returns:
        PipelineResult describing what happened. A failed write is logged
        and reported through ``written`` but does not mark the run failed.
    """
    if config is None:
        config = get_config()
    if fetcher is None:
        fetcher = Fetcher.from_config(config)

    items = await get_content(fetcher, config.fetch.url)
    if not items:
        return PipelineResult(success=False)

    grouped = group_by_category(items)
    document = serialize_grouped(grouped, indent=config.output.indent)
    logger.debug("Grouped %d items into %d categories", len(items), len(grouped))

    result = PipelineResult(
        success=True,
        item_count=len(items),
        category_count=len(grouped),
        output=document,
    )

    if write:
        output_path = Path(config.output.path)
        result.output_path = str(output_path)
        result.written = write_output(document, output_path)

    return result
