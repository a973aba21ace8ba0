"""Line item records for the budget tracker.

A line item is one procurement/budget row.  Its ``cost`` is deliberately
loosely typed: a number when a quote is confirmed, the sentinel string
``"N/A"`` when it is not, and occasionally something malformed that the
metrics and formatters must tolerate without raising.

Provides:
- LineItem: frozen dataclass for one record
- is_numeric_cost(): the single numeric-cost predicate
- toggle_done(): copy-on-write update of one item's ``done`` flag
- load_line_items(): build records from dicts or a JSON file
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Sequence

COST_NOT_AVAILABLE = "N/A"

STATUS_PRICED = "Priced"
STATUS_UNPRICED = "Unpriced"

COST_TYPE_SUMMARY = "Summary"
COST_TYPE_BUDGET = "Budget"

# Browser-side records use camelCase; accept both spellings on load.
_KEY_ALIASES = {
    "costType": "cost_type",
    "excludeFromSum": "exclude_from_sum",
}


@dataclass(frozen=True)
class LineItem:
    """One budget line item."""

    id: str
    description: str = ""
    event: str | None = None
    type: str = ""
    cost: Any = None
    cost_type: str = ""
    status: str = ""
    exclude_from_sum: bool = False
    done: bool = False

    @property
    def has_numeric_cost(self) -> bool:
        return is_numeric_cost(self.cost)

    @property
    def counts_toward_total(self) -> bool:
        """True when the cost is numeric and the row is not a summary estimate."""
        return self.has_numeric_cost and not self.exclude_from_sum

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "event": self.event,
            "type": self.type,
            "cost": self.cost,
            "cost_type": self.cost_type,
            "status": self.status,
            "exclude_from_sum": self.exclude_from_sum,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineItem":
        """Build a LineItem from a mapping, ignoring unknown keys.

        A missing cost stays None, so it displays as "Error" rather than
        "N/A".  A missing status is empty: the item is neither priced nor
        unpriced.

        Raises:
            ValueError: If the mapping has no ``id``.
        """
        normalized = {_KEY_ALIASES.get(k, k): v for k, v in data.items()}
        if normalized.get("id") in (None, ""):
            raise ValueError(f"Line item is missing an id: {data!r}")
        return cls(
            id=str(normalized["id"]),
            description=normalized.get("description") or "",
            event=normalized.get("event"),
            type=normalized.get("type") or "",
            cost=normalized.get("cost"),
            cost_type=normalized.get("cost_type") or "",
            status=normalized.get("status") or "",
            exclude_from_sum=bool(normalized.get("exclude_from_sum", False)),
            done=bool(normalized.get("done", False)),
        )


def is_numeric_cost(value: Any) -> bool:
    """Return True for int/float costs.  Booleans are not costs."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def toggle_done(items: Sequence[LineItem], item_id: str) -> tuple[LineItem, ...]:
    """Return a new tuple with one item's ``done`` flag flipped.

    Every other element is passed through as the same object.

    Raises:
        KeyError: If no item has ``item_id``.
    """
    for index, item in enumerate(items):
        if item.id == item_id:
            updated = replace(item, done=not item.done)
            return (*items[:index], updated, *items[index + 1:])
    raise KeyError(item_id)


def load_line_items(source: Iterable[dict[str, Any]] | Path | str) -> tuple[LineItem, ...]:
    """Build line items from an iterable of dicts or a JSON file path.

    The JSON file must contain a list of objects.

    Raises:
        ValueError: If the file cannot be parsed or has the wrong shape.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ValueError(f"Cannot read line items from {path}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
            raise ValueError(f"{path} must contain a JSON list of objects")
        records: Iterable[dict[str, Any]] = data
    else:
        records = source
    return tuple(LineItem.from_dict(record) for record in records)
