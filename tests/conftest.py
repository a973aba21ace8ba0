"""
Pytest fixtures for the budget tracker tests.

Provides small hand-built line item lists, the built-in catalog, and a
TestClient wired to an app serving a chosen list.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from line_item_catalog import default_line_items  # noqa: E402
from utils.line_items import LineItem  # noqa: E402


def make_item(item_id: str, **fields) -> LineItem:
    """LineItem with sensible defaults for fields a test doesn't care about."""
    fields.setdefault("description", f"Item {item_id}")
    fields.setdefault("event", "Phase A")
    fields.setdefault("type", "Service")
    fields.setdefault("cost", 0)
    fields.setdefault("cost_type", "Revenue")
    fields.setdefault("status", "Priced")
    return LineItem(id=item_id, **fields)


@pytest.fixture()
def scenario_items() -> list[LineItem]:
    """Two phase-A rows (one unpriced) plus an excluded budget summary row."""
    return [
        make_item("1", event="A", cost=500, status="Priced"),
        make_item("2", event="A", cost=300, status="Unpriced"),
        make_item("3", event="Budget Summary", cost=10000,
                  exclude_from_sum=True, status="Priced", cost_type="Budget"),
    ]


@pytest.fixture()
def catalog_items() -> tuple[LineItem, ...]:
    return default_line_items()


@pytest.fixture()
def make_client():
    """Factory returning a TestClient for an app serving the given items."""
    from fastapi.testclient import TestClient
    from api.app import create_app

    def _make(items=None) -> TestClient:
        return TestClient(create_app(items=items))

    return _make


@pytest.fixture()
def client(make_client, catalog_items):
    return make_client(catalog_items)
