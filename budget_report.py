"""
Budget Tracker Terminal Report

Prints the dashboard metrics and the (optionally filtered) line item table
for the built-in catalog or a JSON catalog file.

Usage:
    python budget_report.py
    python budget_report.py --type Equipment
    python budget_report.py --cost Unpriced
    python budget_report.py --csv > line_items.csv
    python budget_report.py --json
    python budget_report.py --items items.json --validate
"""

import argparse
import json
import sys
import textwrap
from pathlib import Path

from line_item_catalog import default_line_items
from utils.export import items_to_csv
from utils.filtering import ALL, FilterState, filter_items
from utils.formatting import (
    ReportFormatter,
    TableFormatter,
    format_count,
    format_currency,
    format_percent,
    truncate_text,
)
from utils.line_items import LineItem, load_line_items
from utils.metrics import AggregationResult, calculate_metrics
from utils.validation import validate_line_items


def build_report(items: tuple[LineItem, ...], filters: FilterState) -> str:
    """Render the dashboard as plain text."""
    metrics = calculate_metrics(items)
    report = ReportFormatter("Launch Budget Tracker")

    report.add_section("Summary", {
        "Total confirmed budget": format_currency(metrics.total_confirmed_budget),
        "Line items": format_count(len(items)),
        "Awaiting quote": format_count(len(metrics.unpriced_items)),
        "Done": format_count(sum(1 for item in items if item.done)),
    })
    report.add_section("Top cost phases", _top_phase_lines(metrics))
    report.add_section(
        "Unpriced items",
        [f"{item.id}  {item.description}" for item in metrics.unpriced_items],
    )

    visible = filter_items(items, filters)
    table = TableFormatter(["Done", "ID", "Description", "Event Phase",
                            "Type", "Cost", "Status"])
    for item in visible:
        table.add_row([
            "x" if item.done else "",
            item.id,
            truncate_text(item.description, 40),
            truncate_text(item.event or "", 28),
            item.type,
            format_currency(item.cost),
            item.status,
        ])
    heading = f"Line items (type={filters.type}, cost={filters.cost}): {len(visible)} shown"
    report.add_section(heading, table)
    return report.to_string()


def _top_phase_lines(metrics: AggregationResult) -> list[str]:
    total = metrics.total_confirmed_budget
    lines = []
    for group in metrics.top3_cost_groupings:
        share = group.total / total * 100 if total else None
        lines.append(f"{group.phase}: {format_currency(group.total)} ({format_percent(share)})")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the budget tracker dashboard in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
            Examples:
              python budget_report.py --type Equipment
              python budget_report.py --cost Unpriced
              python budget_report.py --csv
              python budget_report.py --items items.json --validate
        """),
    )
    parser.add_argument("--items", type=Path, default=None,
                        help="JSON catalog to use instead of the built-in one")
    parser.add_argument("--type", default=ALL,
                        help="Table filter by item type (default: All)")
    parser.add_argument("--cost", default=ALL,
                        help="Table filter by cost status, e.g. Priced or Unpriced (default: All)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--csv", action="store_true",
                        help="Print the full CSV export instead of the report")
    output.add_argument("--json", action="store_true",
                        help="Print the metrics as JSON")
    output.add_argument("--validate", action="store_true",
                        help="Validate the catalog; exit 1 if any errors")
    args = parser.parse_args(argv)

    try:
        items = load_line_items(args.items) if args.items else default_line_items()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.validate:
        result = validate_line_items(items)
        print(result.summary_text())
        return 0 if result.is_valid() else 1
    if args.csv:
        sys.stdout.write(items_to_csv(items))
    elif args.json:
        print(json.dumps(calculate_metrics(items).to_dict(), indent=2, ensure_ascii=False))
    else:
        print(build_report(items, FilterState(type=args.type, cost=args.cost)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
