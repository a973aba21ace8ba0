"""CSV export of the line item list.

The export always covers the full list regardless of the table filters.
Every field is quoted, so the output pastes cleanly into spreadsheets.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Iterable

from utils.line_items import (
    COST_NOT_AVAILABLE,
    COST_TYPE_SUMMARY,
    STATUS_UNPRICED,
    LineItem,
    is_numeric_cost,
)

CSV_COLUMNS = [
    "Completed", "ID", "Description", "Event Phase",
    "Type", "Cost Type", "Projected Cost", "Notes",
]

NOTE_QUOTE_NEEDED = "QUOTE NEEDED"
NOTE_SUMMARY_LINE = "SUMMARY LINE"


def cost_to_text(cost: Any) -> str:
    """Plain-text cost for export: "N/A", the number, or empty.

    Whole floats drop their ``.0`` so 1500.0 exports as "1500".
    """
    if isinstance(cost, str) and cost == COST_NOT_AVAILABLE:
        return COST_NOT_AVAILABLE
    if not is_numeric_cost(cost):
        return ""
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def export_note(item: LineItem) -> str:
    if item.status == STATUS_UNPRICED:
        return NOTE_QUOTE_NEEDED
    if item.cost_type == COST_TYPE_SUMMARY:
        return NOTE_SUMMARY_LINE
    return ""


def item_to_row(item: LineItem) -> list[str]:
    return [
        "Yes" if item.done else "No",
        item.id,
        item.description,
        item.event or "",
        item.type,
        item.cost_type,
        cost_to_text(item.cost),
        export_note(item),
    ]


def items_to_csv(items: Iterable[LineItem]) -> str:
    """Serialize line items as CSV text with a header row.

    Args:
        items: Line items in display order

    Returns:
        CSV text, all fields double-quoted, rows separated by newlines
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for item in items:
        writer.writerow(item_to_row(item))
    return buf.getvalue()
