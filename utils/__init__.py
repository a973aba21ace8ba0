"""Shared utilities for the budget tracker dashboard."""

# Line item records
from utils.line_items import (
    COST_NOT_AVAILABLE,
    LineItem,
    is_numeric_cost,
    load_line_items,
    toggle_done,
)

# Metrics
from utils.metrics import AggregationResult, CostGrouping, calculate_metrics

# Output formatting
from utils.formatting import (
    format_currency,
    format_percent,
    format_count,
    truncate_text,
    TableFormatter,
    ReportFormatter,
)

# Table filters
from utils.filtering import ALL, FilterState, filter_items, filter_options, is_visible

# CSV export
from utils.export import CSV_COLUMNS, items_to_csv

# Validation utilities
from utils.validation import (
    ValidationIssue,
    ValidationResult,
    ValidationRegistry,
    validate_line_items,
)

# Configuration
from utils.config import Config, AppConfig

__all__ = [
    # Line items
    "COST_NOT_AVAILABLE",
    "LineItem",
    "is_numeric_cost",
    "load_line_items",
    "toggle_done",
    # Metrics
    "AggregationResult",
    "CostGrouping",
    "calculate_metrics",
    # Formatting
    "format_currency",
    "format_percent",
    "format_count",
    "truncate_text",
    "TableFormatter",
    "ReportFormatter",
    # Filtering
    "ALL",
    "FilterState",
    "filter_items",
    "filter_options",
    "is_visible",
    # Export
    "CSV_COLUMNS",
    "items_to_csv",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "ValidationRegistry",
    "validate_line_items",
    # Config
    "Config",
    "AppConfig",
]
