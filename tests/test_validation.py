"""
Tests for utils/validation.py — ValidationIssue, ValidationResult,
ValidationRegistry, and the line item checks.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from conftest import make_item
from utils.validation import (
    ValidationIssue,
    ValidationRegistry,
    ValidationResult,
    check_cost_values,
    check_duplicate_ids,
    check_event_present,
    check_status_values,
    validate_line_items,
)


class TestValidationIssue:
    def test_to_dict(self):
        issue = ValidationIssue("check1", "error", "detail", sample="abc", count=3)
        assert issue.to_dict() == {
            "check": "check1", "severity": "error", "detail": "detail",
            "sample": "abc", "count": 3,
        }

    def test_zero_sample_kept(self):
        assert ValidationIssue("c", "info", "d", sample=0).to_dict()["sample"] == "0"

    def test_repr(self):
        assert "check1" in repr(ValidationIssue("check1", "warning", "d"))


class TestValidationResult:
    def test_empty_is_valid(self):
        assert ValidationResult().is_valid()

    def test_counts_by_severity(self):
        r = ValidationResult()
        r.add_issue("a", "error", "x")
        r.add_issue("b", "warning", "y")
        r.add_issue("c", "warning", "z")
        assert (r.error_count(), r.warning_count(), r.info_count()) == (1, 2, 0)
        assert not r.is_valid()

    def test_summary_text_lists_issues(self):
        r = ValidationResult()
        r.add_issue("cost_values", "error", "P1: negative cost")
        assert "[error] cost_values: P1: negative cost" in r.summary_text()

    def test_to_dict_summary(self):
        r = ValidationResult()
        r.passed_checks.append("a")
        assert r.to_dict()["summary"]["passed"] == 1


class TestRegistry:
    def test_passed_and_failed(self):
        reg = ValidationRegistry()
        reg.register("ok", lambda items: [])
        reg.register("bad", lambda items: [ValidationIssue("bad", "warning", "w")])
        result = reg.run_all([])
        assert result.passed_checks == ["ok"]
        assert result.failed_checks == ["bad"]

    def test_exception_reported_as_error(self):
        def boom(items):
            raise RuntimeError("kaboom")

        reg = ValidationRegistry()
        reg.register("boom", boom)
        result = reg.run_all([])
        assert result.error_count() == 1
        assert "kaboom" in result.issues[0].detail

    def test_skip_checks(self):
        reg = ValidationRegistry()
        reg.register("skipped", lambda items: [ValidationIssue("s", "error", "e")])
        result = reg.run_all([], skip_checks=["skipped"])
        assert result.is_valid()
        assert result.passed_checks == []


class TestChecks:
    def test_duplicate_ids(self):
        issues = check_duplicate_ids([make_item("a"), make_item("a"), make_item("b")])
        assert len(issues) == 1
        assert issues[0].count == 2

    @pytest.mark.parametrize("cost", ["abc", None, True])
    def test_malformed_cost(self, cost):
        issues = check_cost_values([make_item("a", cost=cost)])
        assert [i.severity for i in issues] == ["error"]

    def test_negative_cost(self):
        issues = check_cost_values([make_item("a", cost=-1)])
        assert "negative" in issues[0].detail

    def test_valid_costs(self):
        assert check_cost_values([make_item("a", cost=0), make_item("b", cost="N/A")]) == []

    def test_status_mismatches(self):
        issues = check_status_values([
            make_item("a", status="Priced", cost="N/A"),
            make_item("b", status="Unpriced", cost=10),
            make_item("c", status="Quoted"),
        ])
        assert [i.severity for i in issues] == ["warning"] * 3

    def test_event_missing_reported_once(self):
        issues = check_event_present([make_item("a", event=None), make_item("b", event="")])
        assert len(issues) == 1
        assert issues[0].count == 2
        assert issues[0].severity == "info"


def test_built_in_catalog_is_clean(catalog_items):
    result = validate_line_items(catalog_items)
    assert result.issues == []
    assert len(result.passed_checks) == 4
