"""
Tests for utils/export.py — CSV export of line items.
"""
import csv
import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from conftest import make_item
from utils.export import CSV_COLUMNS, cost_to_text, export_note, items_to_csv


class TestCostToText:
    def test_na(self):
        assert cost_to_text("N/A") == "N/A"

    def test_int(self):
        assert cost_to_text(1500) == "1500"

    def test_whole_float(self):
        assert cost_to_text(1500.0) == "1500"

    def test_fractional_float(self):
        assert cost_to_text(1500.25) == "1500.25"

    @pytest.mark.parametrize("value", ["abc", None, True, ""])
    def test_non_numeric_is_empty(self, value):
        assert cost_to_text(value) == ""


class TestExportNote:
    def test_unpriced(self):
        assert export_note(make_item("1", status="Unpriced")) == "QUOTE NEEDED"

    def test_summary(self):
        assert export_note(make_item("1", cost_type="Summary")) == "SUMMARY LINE"

    def test_unpriced_wins_over_summary(self):
        item = make_item("1", status="Unpriced", cost_type="Summary")
        assert export_note(item) == "QUOTE NEEDED"

    def test_regular(self):
        assert export_note(make_item("1")) == ""


class TestItemsToCsv:
    def test_header_row(self):
        text = items_to_csv([])
        assert text == (
            '"Completed","ID","Description","Event Phase",'
            '"Type","Cost Type","Projected Cost","Notes"\n'
        )

    def test_row_fields_all_quoted(self):
        item = make_item("P1", description="Stage", event="Phase 1", type="Venue",
                         cost=500, cost_type="CAPEX", status="Priced", done=True)
        lines = items_to_csv([item]).splitlines()
        assert lines[1] == '"Yes","P1","Stage","Phase 1","Venue","CAPEX","500",""'

    def test_embedded_quotes_doubled(self):
        item = make_item("1", description='2 "lapel" mics')
        line = items_to_csv([item]).splitlines()[1]
        assert '"2 ""lapel"" mics"' in line

    def test_commas_and_newlines_survive_round_trip(self):
        item = make_item("1", description="Tables, chairs\nand tents")
        rows = list(csv.reader(io.StringIO(items_to_csv([item]))))
        assert rows[1][2] == "Tables, chairs\nand tents"

    def test_one_row_per_item_in_order(self, catalog_items):
        rows = list(csv.reader(io.StringIO(items_to_csv(catalog_items))))
        assert rows[0] == CSV_COLUMNS
        assert [r[1] for r in rows[1:]] == [i.id for i in catalog_items]

    def test_missing_event_exported_empty(self):
        line = items_to_csv([make_item("1", event=None)]).splitlines()[1]
        assert line.split(",")[3] == '""'

    def test_notes_and_costs(self):
        items = [
            make_item("1", cost="N/A", status="Unpriced"),
            make_item("2", cost=2_000_000, cost_type="Summary", exclude_from_sum=True),
            make_item("3", cost="oops"),
        ]
        rows = list(csv.reader(io.StringIO(items_to_csv(items))))
        assert [(r[6], r[7]) for r in rows[1:]] == [
            ("N/A", "QUOTE NEEDED"),
            ("2000000", "SUMMARY LINE"),
            ("", ""),
        ]
