"""Output formatting utilities for the budget tracker.

Provides reusable functions for:
- Formatting Naira currency amounts
- Formatting counts and percentages
- Tabular report output for the terminal report
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from utils.line_items import COST_NOT_AVAILABLE, is_numeric_cost

CURRENCY_SYMBOL = "₦"
FORMAT_ERROR = "Error"

# en-US toLocaleString() shows at most three fraction digits.
_MAX_FRACTION = Decimal("0.001")


def _group_en_us(value: float) -> str:
    """Render a number with en-US grouping: 1,234,567.891"""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"
        if not value.is_integer():
            rounded = Decimal(repr(value)).quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)
            text = f"{rounded:,f}"
            if "." in text:
                text = text.rstrip("0").rstrip(".")
            return text
        value = int(value)
    return f"{value:,d}"


def format_currency(value: Any, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a line item cost for display.

    Args:
        value: A number, the "N/A" sentinel, or anything else
        symbol: Currency glyph prefixed to numbers (default: ₦)

    Returns:
        "N/A" for the sentinel, "Error" for non-numeric input, otherwise the
        grouped amount, e.g. "₦1,234,567"

    Examples:
        format_currency(1000) -> "₦1,000"
        format_currency(1500.5) -> "₦1,500.5"
        format_currency("N/A") -> "N/A"
        format_currency("abc") -> "Error"
    """
    if isinstance(value, str) and value == COST_NOT_AVAILABLE:
        return COST_NOT_AVAILABLE
    if not is_numeric_cost(value):
        return FORMAT_ERROR
    return symbol + _group_en_us(value)


def format_percent(value: Optional[float], precision: int = 1) -> str:
    """Format a percentage for display.

    Examples:
        format_percent(42.5) -> "42.5%"
        format_percent(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:.{precision}f}%"


def format_count(value: Optional[int]) -> str:
    """Format a count with thousands separator, "-" for None."""
    if value is None:
        return "-"
    return f"{value:,d}"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to maximum length with ellipsis.

    Examples:
        truncate_text("Long text here", 10) -> "Long te..."
        truncate_text("Short", 10) -> "Short"
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


class TableFormatter:
    """Formats data as aligned tabular output."""

    def __init__(self, columns: List[str], column_widths: Optional[List[int]] = None):
        self.columns = columns
        self.column_widths = column_widths or [len(col) for col in columns]
        self.rows: List[List[str]] = []

    def add_row(self, values: List[Any]) -> None:
        """Add a row to the table.

        Raises:
            ValueError: If value count doesn't match column count
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        str_values = []
        for i, val in enumerate(values):
            str_val = str(val) if val is not None else "-"
            str_values.append(str_val)
            if len(str_val) > self.column_widths[i]:
                self.column_widths[i] = len(str_val)

        self.rows.append(str_values)

    def _format_row(self, values: List[str], is_header: bool = False) -> str:
        cells = []
        for i, val in enumerate(values):
            width = self.column_widths[i]
            # Currency cells right-align like plain numbers
            if not is_header and (val.startswith(CURRENCY_SYMBOL) or _is_number(val)):
                cells.append(val.rjust(width))
            else:
                cells.append(val.ljust(width))
        return "  ".join(cells).rstrip()

    def to_string(self, show_header: bool = True, show_separator: bool = True) -> str:
        lines = []

        if show_header:
            lines.append(self._format_row(self.columns, is_header=True))
            if show_separator:
                lines.append("  ".join("-" * w for w in self.column_widths))

        for row in self.rows:
            lines.append(self._format_row(row))

        return "\n".join(lines)


def _is_number(text: str) -> bool:
    try:
        float(text.replace(",", ""))
    except ValueError:
        return False
    return True


class ReportFormatter:
    """Formats data as a structured report with sections."""

    def __init__(self, title: str = ""):
        self.title = title
        self.sections: List[Dict[str, Any]] = []

    def add_section(self, heading: str, content: Any, level: int = 1) -> None:
        """Add a section to the report.

        Args:
            heading: Section heading
            content: Section content (string, list, dict, or TableFormatter)
            level: Heading level (1-2)
        """
        self.sections.append({
            "heading": heading,
            "content": content,
            "level": level,
        })

    def _format_content(self, content: Any) -> List[str]:
        if isinstance(content, str):
            return [content]
        if isinstance(content, TableFormatter):
            return content.to_string().splitlines()
        if isinstance(content, (list, tuple)):
            return [f"  • {item}" for item in content] or ["  (none)"]
        if isinstance(content, dict):
            return [f"  {key}: {value}" for key, value in content.items()]
        return [str(content)]

    def to_string(self) -> str:
        lines = []

        if self.title:
            lines.append(self.title)
            lines.append("=" * len(self.title))
            lines.append("")

        for section in self.sections:
            heading = section["heading"]
            if section["level"] == 1:
                lines.append(heading)
                lines.append("-" * len(heading))
            else:
                lines.append(f"  {heading}")

            lines.extend(self._format_content(section["content"]))
            lines.append("")

        return "\n".join(lines)
