"""Group catalog items by category and serialize the result."""

from __future__ import annotations

from collections.abc import Iterable

import msgspec

from catalogfetch.models import GroupedItems, Item, ListedItem

_encoder = msgspec.json.Encoder()


def group_by_category(items: Iterable[Item]) -> GroupedItems:
    """Group items by category, each group sorted by price ascending.

    Categories keep the order in which they first appear. Items with the
    same price keep their input order. Items without a category are
    grouped under the empty string.
    """
    grouped: dict[str, list[Item]] = {}
    for item in items:
        grouped.setdefault(item.category or "", []).append(item)

    return {
        category: [item.to_listed() for item in sorted(group, key=lambda i: i.price)]
        for category, group in grouped.items()
    }


def serialize_grouped(grouped: GroupedItems, indent: int = 2) -> str:
    """Serialize grouped items to JSON text.

    Args:
        grouped: Output of group_by_category
        indent: Spaces per indentation level; 0 gives compact output
    """
    data = _encoder.encode(grouped)
    if indent > 0:
        data = msgspec.json.format(data, indent=indent)
    return data.decode("utf-8")
