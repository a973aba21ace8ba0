"""Table filters for the dashboard.

The table has two dropdowns: item type and cost status.  Roll-up rows
(cost type "Summary" or "Budget") only show while both are set to "All".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from utils.line_items import COST_TYPE_BUDGET, COST_TYPE_SUMMARY, LineItem

ALL = "All"
ROLLUP_COST_TYPES = frozenset({COST_TYPE_SUMMARY, COST_TYPE_BUDGET})


@dataclass(frozen=True)
class FilterState:
    type: str = ALL
    cost: str = ALL

    @property
    def is_unfiltered(self) -> bool:
        return self.type == ALL and self.cost == ALL


def is_visible(item: LineItem, filters: FilterState) -> bool:
    """Return True if ``item`` passes the type and cost-status filters."""
    if item.cost_type in ROLLUP_COST_TYPES:
        return filters.is_unfiltered
    type_ok = filters.type == ALL or item.type == filters.type
    cost_ok = filters.cost == ALL or item.status == filters.cost
    return type_ok and cost_ok


def filter_items(items: Iterable[LineItem], filters: FilterState) -> list[LineItem]:
    """Visible items, in input order."""
    return [item for item in items if is_visible(item, filters)]


def _distinct(values: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def filter_options(items: Sequence[LineItem]) -> dict[str, list[str]]:
    """Dropdown choices: distinct types and statuses, "All" first.

    Roll-up rows are skipped since no specific filter value can show them.
    """
    regular = [item for item in items if item.cost_type not in ROLLUP_COST_TYPES]
    return {
        "types": [ALL, *_distinct(item.type for item in regular)],
        "statuses": [ALL, *_distinct(item.status for item in regular)],
    }
