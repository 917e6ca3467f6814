"""Tests for catalog/group.py."""

from __future__ import annotations

import json

from catalogfetch.catalog.group import group_by_category
from catalogfetch.catalog.group import serialize_grouped
from catalogfetch.catalog.parse import parse_items
from catalogfetch.models import Item
from catalogfetch.models import ListedItem


class TestGroupByCategory:
    """Tests for group_by_category."""

    def test_groups_and_sorts_by_price(self, sample_items):
        """Each category is sorted by ascending price."""
        grouped = group_by_category(sample_items)

        assert list(grouped) == ["men's clothing", "jewelery"]
        assert [i.id for i in grouped["men's clothing"]] == [2, 3, 1]
        assert [i.id for i in grouped["jewelery"]] == [6, 5]

    def test_projects_to_listed_items(self, sample_items):
        """Only id, title and price are kept."""
        grouped = group_by_category(sample_items)

        assert grouped["jewelery"][0] == ListedItem(id=6, title="Ring", price=9.99)

    def test_equal_prices_keep_input_order(self):
        """Sorting is stable for equal prices."""
        items = [
            Item(id=3, price=5.0, category="a"),
            Item(id=1, price=5.0, category="a"),
            Item(id=2, price=1.0, category="a"),
        ]

        grouped = group_by_category(items)

        assert [i.id for i in grouped["a"]] == [2, 3, 1]

    def test_missing_category_groups_under_empty_string(self):
        items = [Item(id=1, price=1.0), Item(id=2, price=2.0, category="x")]

        grouped = group_by_category(items)

        assert [i.id for i in grouped[""]] == [1]
        assert [i.id for i in grouped["x"]] == [2]

    def test_empty_input(self):
        assert group_by_category([]) == {}


class TestSerializeGrouped:
    """Tests for serialize_grouped."""

    def test_single_item_scenario(self):
        """Parsed single-item catalog serializes to the expected document."""
        items = parse_items('[{"id":1,"title":"A","price":9.5,"category":"x"}]')

        text = serialize_grouped(group_by_category(items), indent=0)

        assert text == '{"x":[{"id":1,"title":"A","price":9.5}]}'
        assert json.loads(text) == {"x": [{"id": 1, "title": "A", "price": 9.5}]}

    def test_indented_output(self, sample_items):
        """Indented output is valid JSON with the requested indent."""
        text = serialize_grouped(group_by_category(sample_items), indent=2)

        assert text.startswith('{\n  "men\'s clothing": [\n    {\n      "id": 2,')
        assert json.loads(text)["jewelery"] == [
            {"id": 6, "title": "Ring", "price": 9.99},
            {"id": 5, "title": "Bracelet", "price": 695.0},
        ]

    def test_null_title_is_kept(self):
        text = serialize_grouped({"x": [ListedItem(id=1, title=None, price=1.0)]}, 0)

        assert text == '{"x":[{"id":1,"title":null,"price":1.0}]}'
