"""
Pydantic response models for the API.

Optional fields default to None so that catalogs loaded from JSON with
missing values still serialize.  Field() descriptions and examples feed
the OpenAPI docs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from utils.formatting import format_currency
from utils.line_items import LineItem
from utils.metrics import AggregationResult


# ── Line item models ──────────────────────────────────────────────────────────

class LineItemOut(BaseModel):
    """A single line item. Costs are in Naira."""
    id: str = Field(..., description="Unique line item ID", examples=["P2-01"])
    description: str = Field("", description="Free-text description", examples=["Hall rental (2 days)"])
    event: str | None = Field(None, description="Event phase the item belongs to", examples=["Phase 2: Venue & Setup"])
    type: str = Field("", description="Item category used by the type filter", examples=["Venue"])
    cost: Any = Field(None, description="Cost in Naira, or 'N/A' while unpriced", examples=[6500000, "N/A"])
    cost_display: str = Field(..., description="Cost formatted for display", examples=["₦6,500,000"])
    cost_type: str = Field("", description="CAPEX, Revenue, Summary, Budget, ...", examples=["Revenue"])
    status: str = Field(..., description="Priced or Unpriced", examples=["Priced"])
    exclude_from_sum: bool = Field(False, description="True for estimate rows kept out of totals")
    done: bool = Field(False, description="Checked off in the dashboard")

    @classmethod
    def from_item(cls, item: LineItem, symbol: str = "₦") -> "LineItemOut":
        return cls(**item.to_dict(), cost_display=format_currency(item.cost, symbol))


class LineItemListResponse(BaseModel):
    """Response body for GET /api/v1/items."""
    type: str = Field(..., description="Active type filter", examples=["All"])
    cost: str = Field(..., description="Active cost-status filter", examples=["Unpriced"])
    total: int = Field(..., description="Number of items in the catalog", examples=[19])
    visible: int = Field(..., description="Number of items passing the filters", examples=[4])
    items: list[LineItemOut] = Field(..., description="Visible items, in catalog order")


# ── Dashboard models ──────────────────────────────────────────────────────────

class CostGroupingOut(BaseModel):
    """One of the top event phases by confirmed cost."""
    phase: str | None = Field(None, description="Event phase name", examples=["Phase 2: Venue & Setup"])
    total: float = Field(..., description="Confirmed cost for the phase", examples=[12670000])
    total_display: str = Field(..., description="Formatted total", examples=["₦12,670,000"])


class DashboardSummary(BaseModel):
    """Response body for GET /api/v1/dashboard/summary."""
    total_confirmed_budget: float = Field(..., description="Sum of confirmed, non-excluded costs", examples=[24550000])
    total_confirmed_budget_display: str = Field(..., examples=["₦24,550,000"])
    item_count: int = Field(..., description="Items in the catalog", examples=[19])
    done_count: int = Field(..., description="Items checked off", examples=[3])
    unpriced_count: int = Field(..., description="Items awaiting a quote", examples=[4])
    unpriced_items: list[LineItemOut] = Field(..., description="Items awaiting a quote, in catalog order")
    top3_cost_groupings: list[CostGroupingOut] = Field(..., description="Up to three phases, highest total first")

    @classmethod
    def from_result(cls, result: AggregationResult, items: list[LineItem] | tuple[LineItem, ...],
                    symbol: str = "₦") -> "DashboardSummary":
        return cls(
            total_confirmed_budget=result.total_confirmed_budget,
            total_confirmed_budget_display=format_currency(result.total_confirmed_budget, symbol),
            item_count=len(items),
            done_count=sum(1 for item in items if item.done),
            unpriced_count=len(result.unpriced_items),
            unpriced_items=[LineItemOut.from_item(i, symbol) for i in result.unpriced_items],
            top3_cost_groupings=[
                CostGroupingOut(phase=g.phase, total=g.total,
                                total_display=format_currency(g.total, symbol))
                for g in result.top3_cost_groupings
            ],
        )


class FilterOptionsOut(BaseModel):
    """Dropdown choices for the table filters."""
    types: list[str] = Field(..., examples=[["All", "Service", "Venue"]])
