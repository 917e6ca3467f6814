"""Catalog parsing, grouping and output for catalogfetch."""

from catalogfetch.catalog.group import group_by_category, serialize_grouped
from catalogfetch.catalog.parse import parse_items
from catalogfetch.catalog.writer import write_output

__all__ = [
    "parse_items",
    "group_by_category",
    "serialize_grouped",
    "write_output",
]
