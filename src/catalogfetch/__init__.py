"""catalogfetch: Fetch a product catalog and group it by category."""

from __future__ import annotations

__version__ = "0.1.0"

from catalogfetch.models import GroupedItems
from catalogfetch.models import Item
from catalogfetch.models import ListedItem

__all__ = [
    "__version__",
    "Item",
    "ListedItem",
    "GroupedItems",
]


def main() -> None:
    """Entry point for the catalogfetch CLI."""
    from catalogfetch.cli.app import run_app

    run_app()
