"""Pytest configuration and shared fixtures for catalogfetch tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

import httpx
import pytest

from catalogfetch.models import Item

CATALOG_URL = "https://catalog.test/products"


class ScriptedTransport:
    """MockTransport handler that replays a script of responses.

    Each step is either a ``(status, content_type, body)`` tuple or an
    httpx exception class, raised with the outgoing request attached.
    The last step repeats once the script runs out.
    """

    def __init__(self, steps: list) -> None:
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps[min(len(self.requests), len(self.steps)) - 1]

        if isinstance(step, type) and issubclass(step, Exception):
            raise step("scripted failure", request=request)

        status, content_type, body = step
        headers = {"Content-Type": content_type} if content_type else {}
        return httpx.Response(status, headers=headers, content=body.encode())

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def scripted_client() -> Callable[..., tuple[httpx.AsyncClient, ScriptedTransport]]:
    """Factory for an AsyncClient wired to a ScriptedTransport."""

    def make(*steps) -> tuple[httpx.AsyncClient, ScriptedTransport]:
        transport = ScriptedTransport(list(steps))
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        return client, transport

    return make


@pytest.fixture
def sample_items() -> list[Item]:
    """Small catalog spanning two categories."""
    return [
        Item(
            id=1,
            title="Backpack",
            price=109.95,
            description="Fits 15 inch laptops",
            category="men's clothing",
            image="https://catalog.test/img/1.jpg",
        ),
        Item(id=2, title="Slim T-Shirt", price=22.3, category="men's clothing"),
        Item(id=5, title="Bracelet", price=695.0, category="jewelery"),
        Item(id=6, title="Ring", price=9.99, category="jewelery"),
        Item(id=3, title="Cotton Jacket", price=55.99, category="men's clothing"),
    ]


@pytest.fixture
def sample_body() -> str:
    """Catalog payload as served by the endpoint."""
    return json.dumps(
        [
            {
                "id": 1,
                "title": "Backpack",
                "price": 109.95,
                "description": "Fits 15 inch laptops",
                "category": "men's clothing",
                "image": "https://catalog.test/img/1.jpg",
                "rating": {"rate": 3.9, "count": 120},
            },
            {"id": 2, "title": "Slim T-Shirt", "price": 22.3, "category": "men's clothing"},
            {"id": 5, "title": "Bracelet", "price": 695, "category": "jewelery"},
        ]
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temp dir and drop env overrides."""
    config_path = tmp_path / "config"
    monkeypatch.setenv("CATALOGFETCH_CONFIG_DIR", str(config_path))
    monkeypatch.delenv("CATALOGFETCH_URL", raising=False)
    monkeypatch.delenv("CATALOGFETCH_OUTPUT", raising=False)

    import catalogfetch.config.settings

    monkeypatch.setattr(catalogfetch.config.settings, "_config", None)
    return config_path


@pytest.fixture(autouse=True)
def reset_http_client():
    """Drop the shared client between tests."""
    import catalogfetch.core.http

    catalogfetch.core.http._client = None
    yield
    catalogfetch.core.http._client = None


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by configure_logging."""
    logger = logging.getLogger("catalogfetch")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
