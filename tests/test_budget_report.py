"""
Tests for budget_report.py — the terminal report CLI.
"""
import csv
import io
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from budget_report import build_report, main
from utils.filtering import FilterState


class TestBuildReport:
    def test_sections(self, catalog_items):
        text = build_report(catalog_items, FilterState())
        assert text.startswith("Launch Budget Tracker")
        assert "₦24,550,000" in text
        assert "Phase 2: Venue & Setup: ₦12,670,000" in text
        assert "19 shown" in text

    def test_filtered_table(self, catalog_items):
        text = build_report(catalog_items, FilterState(cost="Unpriced"))
        assert "type=All, cost=Unpriced): 4 shown" in text
        assert "B-01" not in text

    def test_empty_catalog(self):
        text = build_report((), FilterState())
        assert "₦0" in text
        assert "(none)" in text


class TestMain:
    def test_default_report(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Launch Budget Tracker" in out
        assert "₦24,550,000" in out

    def test_type_filter(self, capsys):
        assert main(["--type", "Equipment"]) == 0
        assert "4 shown" in capsys.readouterr().out

    def test_csv(self, capsys):
        assert main(["--csv"]) == 0
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
        assert rows[0][0] == "Completed"
        assert len(rows) == 20

    def test_json(self, capsys):
        assert main(["--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["total_confirmed_budget"] == 24_550_000
        assert [i["id"] for i in data["unpriced_items"]] == ["P1-03", "P2-04", "P3-03", "P4-02"]
        assert data["top3_cost_groupings"][2] == {
            "phase": "Phase 1: Planning & Design", "total": 1_650_000,
        }

    def test_validate_clean(self, capsys):
        assert main(["--validate"]) == 0

    def test_validate_errors(self, tmp_path, capsys):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([
            {"id": "1", "cost": -5, "status": "Priced", "event": "A"},
            {"id": "1", "cost": 10, "status": "Priced", "event": "A"},
        ]))
        assert main(["--items", str(path), "--validate"]) == 1
        out = capsys.readouterr().out
        assert "[error]" in out

    def test_items_file(self, tmp_path, capsys):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([
            {"id": "X1", "event": "Setup", "cost": 1234.5, "status": "Priced"},
        ]))
        assert main(["--items", str(path), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["total_confirmed_budget"] == 1234.5

    def test_missing_items_file(self, tmp_path, capsys):
        assert main(["--items", str(tmp_path / "nope.json")]) == 2
        assert capsys.readouterr().err.startswith("ERROR:")
