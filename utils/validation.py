"""Data validation utilities for the line item catalog.

Provides reusable pieces for:
- Collecting validation issues by severity
- Running a registry of catalog checks
- The default checks applied to line items at startup and by
  ``budget_report.py --validate``

Checks never raise on bad data; they return ValidationIssue lists so the
metrics can still be computed from a catalog with a few malformed rows.
"""

from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Sequence

from utils.line_items import (
    COST_NOT_AVAILABLE,
    STATUS_PRICED,
    STATUS_UNPRICED,
    LineItem,
    is_numeric_cost,
)

KNOWN_STATUSES = frozenset({STATUS_PRICED, STATUS_UNPRICED})

CheckFn = Callable[[Sequence[LineItem]], List["ValidationIssue"]]


class ValidationIssue:
    """Represents a single validation issue found during checks."""

    def __init__(self, check_name: str, severity: str, detail: str,
                 sample: Optional[Any] = None, count: int = 1):
        """Initialize a validation issue.

        Args:
            check_name: Name of the check that found this issue
            severity: Issue severity ('error', 'warning', 'info')
            detail: Human-readable description of the issue
            sample: Example value that triggered the issue
            count: Number of affected line items
        """
        self.check_name = check_name
        self.severity = severity
        self.detail = detail
        self.sample = sample
        self.count = count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check": self.check_name,
            "severity": self.severity,
            "detail": self.detail,
            "sample": str(self.sample) if self.sample is not None else None,
            "count": self.count,
        }

    def __repr__(self) -> str:
        return (f"ValidationIssue(check={self.check_name}, severity={self.severity}, "
                f"count={self.count})")


class ValidationResult:
    """Collects and reports on validation check results."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []
        self.passed_checks: List[str] = []
        self.failed_checks: List[str] = []

    def add_issue(self, check_name: str, severity: str, detail: str,
                  sample: Optional[Any] = None, count: int = 1) -> None:
        self.issues.append(ValidationIssue(check_name, severity, detail, sample, count))

    def get_issues_by_severity(self, severity: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    def error_count(self) -> int:
        return len(self.get_issues_by_severity("error"))

    def warning_count(self) -> int:
        return len(self.get_issues_by_severity("warning"))

    def info_count(self) -> int:
        return len(self.get_issues_by_severity("info"))

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return self.error_count() == 0

    def summary_text(self) -> str:
        """Generate human-readable validation summary."""
        lines = ["Validation Summary:"]
        lines.append(f"  Passed Checks: {len(self.passed_checks)}")
        lines.append(f"  Failed Checks: {len(self.failed_checks)}")
        lines.append(f"  Issues: {len(self.issues)}")
        lines.append(f"    - Errors: {self.error_count()}")
        lines.append(f"    - Warnings: {self.warning_count()}")
        lines.append(f"    - Info: {self.info_count()}")
        for issue in self.issues:
            lines.append(f"  [{issue.severity}] {issue.check_name}: {issue.detail}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed_checks": self.passed_checks,
            "failed_checks": self.failed_checks,
            "issues": [i.to_dict() for i in self.issues],
            "summary": {
                "total_checks": len(self.passed_checks) + len(self.failed_checks),
                "passed": len(self.passed_checks),
                "failed": len(self.failed_checks),
                "issues": len(self.issues),
                "errors": self.error_count(),
                "warnings": self.warning_count(),
                "info": self.info_count(),
            },
        }


class ValidationRegistry:
    """Manages a collection of validation check functions."""

    def __init__(self):
        self.checks: Dict[str, CheckFn] = {}

    def register(self, name: str, check_fn: CheckFn) -> None:
        self.checks[name] = check_fn

    def run_all(self, items: Sequence[LineItem],
                skip_checks: Optional[List[str]] = None) -> ValidationResult:
        """Run all registered checks against ``items``.

        A check that raises is reported as an error issue for that check.
        """
        skip = skip_checks or []
        result = ValidationResult()

        for check_name, check_fn in self.checks.items():
            if check_name in skip:
                continue

            try:
                issues = check_fn(items)
            except Exception as e:
                result.add_issue(
                    check_name, "error",
                    f"Check raised exception: {str(e)[:100]}"
                )
                result.failed_checks.append(check_name)
                continue

            if issues:
                for issue in issues:
                    result.add_issue(issue.check_name, issue.severity,
                                     issue.detail, issue.sample, issue.count)
                result.failed_checks.append(check_name)
            else:
                result.passed_checks.append(check_name)

        return result


# ── Line item checks ──────────────────────────────────────────────────────────

def check_duplicate_ids(items: Sequence[LineItem]) -> List[ValidationIssue]:
    counts = Counter(item.id for item in items)
    return [
        ValidationIssue("duplicate_ids", "error",
                        f"Line item id {item_id!r} appears {n} times",
                        sample=item_id, count=n)
        for item_id, n in counts.items() if n > 1
    ]


def check_cost_values(items: Sequence[LineItem]) -> List[ValidationIssue]:
    """Costs must be a non-negative number or "N/A"."""
    issues = []
    for item in items:
        if isinstance(item.cost, str) and item.cost == COST_NOT_AVAILABLE:
            continue
        if not is_numeric_cost(item.cost):
            issues.append(ValidationIssue(
                "cost_values", "error",
                f"{item.id}: cost is neither a number nor {COST_NOT_AVAILABLE!r}",
                sample=item.cost,
            ))
        elif item.cost < 0:
            issues.append(ValidationIssue(
                "cost_values", "error", f"{item.id}: negative cost",
                sample=item.cost,
            ))
    return issues


def check_status_values(items: Sequence[LineItem]) -> List[ValidationIssue]:
    issues = []
    for item in items:
        if item.status not in KNOWN_STATUSES:
            issues.append(ValidationIssue(
                "status_values", "warning",
                f"{item.id}: unrecognised status", sample=item.status,
            ))
        elif item.status == STATUS_PRICED and not item.has_numeric_cost:
            issues.append(ValidationIssue(
                "status_values", "warning",
                f"{item.id}: marked Priced without a numeric cost",
                sample=item.cost,
            ))
        elif item.status == STATUS_UNPRICED and item.has_numeric_cost:
            issues.append(ValidationIssue(
                "status_values", "warning",
                f"{item.id}: marked Unpriced but has a cost", sample=item.cost,
            ))
    return issues


def check_event_present(items: Sequence[LineItem]) -> List[ValidationIssue]:
    missing = [item.id for item in items if not item.event]
    if not missing:
        return []
    return [ValidationIssue(
        "event_present", "info",
        "Line items without an event phase are grouped together",
        sample=missing[0], count=len(missing),
    )]


def default_registry() -> ValidationRegistry:
    registry = ValidationRegistry()
    registry.register("duplicate_ids", check_duplicate_ids)
    registry.register("cost_values", check_cost_values)
    registry.register("status_values", check_status_values)
    registry.register("event_present", check_event_present)
    return registry


def validate_line_items(items: Sequence[LineItem],
                        skip_checks: Optional[List[str]] = None) -> ValidationResult:
    """Run the default line item checks."""
    return default_registry().run_all(items, skip_checks=skip_checks)
