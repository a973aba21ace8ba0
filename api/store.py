"""
In-memory line item store for the API.

Holds the current tuple of line items.  The only mutation is toggling an
item's ``done`` flag, which swaps in a new tuple under a lock; readers take
a snapshot and never see a half-applied update.

create_app() keeps one store per application on ``app.state``; get_store()
is the FastAPI dependency that hands it to routes, in the same way the
per-request database dependency does.
"""

import logging
import threading
from pathlib import Path

from fastapi import Request

from line_item_catalog import default_line_items
from utils.line_items import LineItem, load_line_items, toggle_done
from utils.validation import validate_line_items

logger = logging.getLogger(__name__)


class ItemStore:
    """Current line items plus a lock for copy-on-write updates."""

    def __init__(self, items: tuple[LineItem, ...] | list[LineItem],
                 currency_symbol: str = "₦") -> None:
        self._items: tuple[LineItem, ...] = tuple(items)
        self.currency_symbol = currency_symbol
        self._lock = threading.Lock()

    def snapshot(self) -> tuple[LineItem, ...]:
        return self._items

    def get(self, item_id: str) -> LineItem:
        """Return the item with ``item_id``.

        Raises:
            KeyError: If no such item exists.
        """
        for item in self._items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    def toggle_done(self, item_id: str) -> LineItem:
        """Flip one item's ``done`` flag and return the updated item."""
        with self._lock:
            self._items = toggle_done(self._items, item_id)
            updated = self.get(item_id)
        logger.info("toggle_done id=%s done=%s", item_id, updated.done)
        return updated

    def __len__(self) -> int:
        return len(self._items)


def build_store(items_path: Path | None = None, currency_symbol: str = "₦") -> ItemStore:
    """Create a store from a JSON catalog, or the built-in one.

    Validation problems are logged, not raised, so a catalog with a few
    malformed costs still renders.
    """
    if items_path is not None:
        items = load_line_items(items_path)
        logger.info("Loaded %d line items from %s", len(items), items_path)
    else:
        items = default_line_items()

    result = validate_line_items(items)
    for issue in result.issues:
        if issue.severity in ("error", "warning"):
            logger.warning("catalog %s: %s", issue.check_name, issue.detail)
    return ItemStore(items, currency_symbol=currency_symbol)


def get_store(request: Request) -> ItemStore:
    """FastAPI dependency returning the store of the app serving ``request``."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Item store not initialised on this app")
    return store
