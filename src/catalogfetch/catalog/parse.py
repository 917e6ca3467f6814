"""Parse the catalog payload into items."""

from __future__ import annotations

import logging

import msgspec

from catalogfetch.models import Item

logger = logging.getLogger(__name__)

_decoder = msgspec.json.Decoder(list[Item] | None)


def parse_items(content: str) -> list[Item]:
    """Parse a JSON array of items.

    Returns an empty list if the payload is not a valid item array.
    """
    try:
        items = _decoder.decode(content)
    except msgspec.DecodeError as e:
        # ValidationError is a DecodeError subclass
        logger.error("Failed to parse json with exception: %s", e)
        return []

    if items is None:
        return []

    return items
