"""Data models for catalogfetch.

Mirrors the product payload served by the catalog endpoint and the
projection written to the output file.
"""

from __future__ import annotations

import msgspec


class Item(msgspec.Struct, frozen=True):
    """A single product as served by the catalog endpoint.

    Unknown keys in the payload, such as ratings, are ignored; missing keys fall back to
    their defaults.
    """

    id: int = 0
    title: str | None = None
    price: float = 0.0
    description: str | None = None
    category: str | None = None
    image: str | None = None

    def to_listed(self) -> ListedItem:
        """Project the item down to the fields written to the output."""
        return ListedItem(id=self.id, title=self.title, price=self.price)


class ListedItem(msgspec.Struct, frozen=True):
    """Projection of an item inside its category group."""

    id: int
    title: str | None
    price: float


GroupedItems = dict[str, list[ListedItem]]
