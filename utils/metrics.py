"""Dashboard metrics for a list of line items.

calculate_metrics() makes one pass over the items and derives the three
figures the dashboard cards show: the confirmed budget total, the items
still waiting on a quote, and the three most expensive event phases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from utils.line_items import STATUS_UNPRICED, LineItem

# Phase names containing either marker are roll-up rows, never "top" phases.
EXCLUDED_PHASE_MARKERS = ("Summary", "Budget")
TOP_GROUPINGS_LIMIT = 3


@dataclass(frozen=True)
class CostGrouping:
    """Total confirmed cost for one event phase."""

    phase: str | None
    total: float

    def to_dict(self) -> dict[str, Any]:
        return {"phase": self.phase, "total": self.total}


@dataclass
class _PhaseBucket:
    total: float = 0
    items: list[LineItem] = field(default_factory=list)


@dataclass(frozen=True)
class AggregationResult:
    total_confirmed_budget: float
    unpriced_items: tuple[LineItem, ...]
    top3_cost_groupings: tuple[CostGrouping, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_confirmed_budget": self.total_confirmed_budget,
            "unpriced_items": [item.to_dict() for item in self.unpriced_items],
            "top3_cost_groupings": [g.to_dict() for g in self.top3_cost_groupings],
        }


def _is_rollup_phase(phase: str | None) -> bool:
    if not isinstance(phase, str):
        return False
    return any(marker in phase for marker in EXCLUDED_PHASE_MARKERS)


def calculate_metrics(items: Sequence[LineItem]) -> AggregationResult:
    """Aggregate line items into dashboard metrics.

    Items whose cost is not numeric (``"N/A"`` or malformed) or that carry
    ``exclude_from_sum`` contribute nothing to any total.  Phases are kept
    in first-occurrence order so equal totals rank by where the phase first
    appears in ``items``.

    Args:
        items: Line items in display order.  Not modified.

    Returns:
        AggregationResult with the total, unpriced items in input order,
        and at most three phases sorted by descending total.
    """
    total_confirmed_budget: float = 0
    unpriced_items: list[LineItem] = []
    costs_by_phase: dict[str | None, _PhaseBucket] = {}

    for item in items:
        if item.counts_toward_total:
            total_confirmed_budget += item.cost

        if item.status == STATUS_UNPRICED:
            unpriced_items.append(item)

        bucket = costs_by_phase.setdefault(item.event, _PhaseBucket())
        if item.counts_toward_total:
            bucket.total += item.cost
        bucket.items.append(item)

    candidates = [
        (phase, bucket) for phase, bucket in costs_by_phase.items()
        if not _is_rollup_phase(phase) and bucket.total > 0
    ]
    # sorted() is stable with reverse=True, so ties keep first-occurrence order.
    ranked = sorted(candidates, key=lambda pair: pair[1].total, reverse=True)

    return AggregationResult(
        total_confirmed_budget=total_confirmed_budget,
        unpriced_items=tuple(unpriced_items),
        top3_cost_groupings=tuple(
            CostGrouping(phase=phase, total=bucket.total)
            for phase, bucket in ranked[:TOP_GROUPINGS_LIMIT]
        ),
    )
