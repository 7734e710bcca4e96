"""Tests for DataFrame views and Excel export.

Minimal test set covering:
- Schedule tables (structure and key values)
- Composition table
- Excel structure (correct sheets, headers, values)
"""

import pandas as pd
import pytest
from openpyxl import load_workbook

from saxs_calculator.export import (
    schedule_to_frames,
    composition_to_frame,
    export_schedule_to_excel,
    export_iucr_table_to_excel,
)
from saxs_calculator.sequence import analyze_protein
from saxs_calculator.session import CalculatorSession


# --- Tests for DataFrame views ---

class TestScheduleFrames:
    """Tests for schedule_to_frames."""

    def test_frame_names(self, standard_schedule):
        """Test that all four tables are produced."""
        frames = schedule_to_frames(standard_schedule)

        assert list(frames) == ["Summary", "Flow Rate", "Fraction Collector", "Detector"]
        assert all(isinstance(df, pd.DataFrame) for df in frames.values())

    def test_flow_rate_frame(self, standard_schedule):
        """Test flow-rate breakpoints."""
        df = schedule_to_frames(standard_schedule)["Flow Rate"]

        assert list(df.columns) == ["Time (min)", "Flow (mL/min)", "Note"]
        assert df["Time (min)"].tolist() == [0.0, 9.98, 10.08, 13.92, 15.92, 16.42]
        assert (df["Note"] == "X-RAY IMAGE").sum() == 2

    def test_detector_frame(self, standard_schedule):
        """Test detector table."""
        df = schedule_to_frames(standard_schedule)["Detector"]

        assert len(df) == 6
        assert df["Hold"].tolist() == [94, 94, 189, 100, 1, 1]
        assert df.loc[3, "Frame"] == 205

    def test_summary_frame(self, standard_schedule):
        """Test summary contains the report stop time."""
        df = schedule_to_frames(standard_schedule)["Summary"]
        values = dict(zip(df["Parameter"], df["Value"]))

        assert values["Report stop time (min)"] == 24
        assert values["Peak start (min)"] == 10.282


class TestCompositionFrame:
    """Tests for composition_to_frame."""

    def test_lists_all_residues(self, short_sequence):
        """Test 20 rows with counts and percentages."""
        df = composition_to_frame(analyze_protein(short_sequence))

        assert len(df) == 20
        assert df.set_index("Code").loc["L", "Count"] == 4
        assert df["Count"].sum() == 18
        assert df["Percent"].sum() == pytest.approx(100.0)

    def test_accepts_plain_mapping(self):
        """Test mapping input and empty composition."""
        df = composition_to_frame({})

        assert (df["Count"] == 0).all()
        assert (df["Percent"] == 0.0).all()


# --- Tests for Excel export ---

class TestExcelExport:
    """Tests for workbook export."""

    def test_schedule_workbook(self, tmp_path, standard_schedule):
        """Test sheets and values of the schedule workbook."""
        path = export_schedule_to_excel(standard_schedule, tmp_path / "schedule.xlsx")

        assert path.exists()
        wb = load_workbook(path)
        assert wb.sheetnames == ["Summary", "Flow Rate", "Fraction Collector", "Detector"]

        ws = wb["Flow Rate"]
        assert ws.cell(row=1, column=1).value == "Time (min)"
        assert ws.cell(row=3, column=1).value == pytest.approx(9.98)
        assert ws.cell(row=4, column=3).value == "X-RAY IMAGE"

        ws = wb["Detector"]
        assert ws.cell(row=5, column=3).value == 205

    def test_creates_parent_directories(self, tmp_path, standard_schedule):
        """Test nested output path."""
        path = export_schedule_to_excel(standard_schedule, tmp_path / "a" / "b" / "schedule.xlsx")

        assert path.exists()

    def test_iucr_workbook(self, tmp_path, short_sequence):
        """Test IUCr table export."""
        session = CalculatorSession()
        session.analyze_protein(short_sequence, name="Test Protein")
        table = session.iucr_table()

        path = export_iucr_table_to_excel(table, tmp_path / "iucr.xlsx")

        ws = load_workbook(path)["IUCr"]
        assert ws.cell(row=1, column=1).value == "IUCr SAXS Data Table"
        assert ws.cell(row=3, column=2).value == "Parameter"
        assert ws.cell(row=4, column=3).value == "Test Protein"
        assert ws.max_row == 3 + len(table)
