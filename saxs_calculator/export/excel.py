"""Tabular views and Excel export of calculator results.

Handles:
- HPLC-SAXS schedule as DataFrames (summary, flow rate, fractions, detector)
- Amino acid composition table
- Excel workbooks for the schedule and the IUCr summary
"""

from pathlib import Path
from typing import Mapping
import logging

import pandas as pd

from ..configs import get_amino_acid_table
from ..hplc import HPLCScheduleResult
from ..sequence import ProteinAnalysisResult

logger = logging.getLogger(__name__)


SHEET_NAME_LIMIT = 31


def schedule_to_frames(result: HPLCScheduleResult) -> dict[str, pd.DataFrame]:
    """Split an HPLC-SAXS schedule into display tables.

    Parameters
    ----------
    result : HPLCScheduleResult
        Output of ``calculate_hplc_saxs_settings``

    Returns
    -------
    dict[str, pd.DataFrame]
        Keys "Summary", "Flow Rate", "Fraction Collector", "Detector"
    """
    inputs = result.inputs
    scaling = result.scaling
    xray = result.xray_collection

    summary = pd.DataFrame(
        [
            ("Peak center (min)", inputs.peak_center),
            ("Peak FWHM (min)", inputs.peak_fwhm),
            ("Injection volume (uL)", inputs.injection_volume),
            ("Target flow rate (mL/min)", inputs.target_flow_rate),
            ("Initial flow rate (mL/min)", inputs.initial_flow_rate),
            ("Peak width scaling", scaling.peak_width_scaling),
            ("Time offset (min)", scaling.time_offset),
            ("Adjusted FWHM (min)", scaling.adjusted_fwhm),
            ("Target FWHM (min)", scaling.target_fwhm),
            ("Peak start (min)", xray.peak_start_time),
            ("Peak stop (min)", xray.peak_stop_time),
            ("Total slowing time (min)", xray.total_slowing_time),
            ("Total slowing time (s)", xray.total_slowing_time_sec),
            ("X-ray duration (min)", scaling.xray_duration),
            ("Report stop time (min)", result.report_stop_time),
        ],
        columns=["Parameter", "Value"],
    )

    flow_rate = result.to_dataframe()

    fractions = result.fraction_collector
    fraction_collector = pd.DataFrame(
        [
            {
                "Start (min)": fractions.start_time,
                "Stop (min)": fractions.stop_time,
                "Time per fraction (min)": fractions.time_per_fraction,
            }
        ]
    )

    detector = pd.DataFrame(
        [
            {
                "Step": step.step,
                "Mode": step.mode,
                "Frame": step.frame,
                "Wait (s)": step.wait,
                "Exposure (s)": step.exposure,
                "Hold": step.hold,
            }
            for step in result.detector_settings
        ]
    )

    return {
        "Summary": summary,
        "Flow Rate": flow_rate,
        "Fraction Collector": fraction_collector,
        "Detector": detector,
    }


def composition_to_frame(composition: ProteinAnalysisResult | Mapping[str, int]) -> pd.DataFrame:
    """Amino acid composition in table order.

    Columns: Code, Name, Count, Percent. Residues absent from the sequence
    are listed with a count of zero.
    """
    if isinstance(composition, ProteinAnalysisResult):
        composition = composition.composition

    residues = get_amino_acid_table().residues
    total = sum(composition.get(code, 0) for code in residues)
    rows = []
    for code, residue in residues.items():
        count = composition.get(code, 0)
        rows.append({
            "Code": code,
            "Name": residue.name,
            "Count": count,
            "Percent": (count / total * 100) if total else 0.0,
        })
    return pd.DataFrame(rows, columns=["Code", "Name", "Count", "Percent"])


def _write_frame(ws, df: pd.DataFrame, start_row: int = 1):
    from openpyxl.utils.dataframe import dataframe_to_rows

    for r_idx, row in enumerate(dataframe_to_rows(df, index=False, header=True)):
        for c_idx, value in enumerate(row):
            ws.cell(row=start_row + r_idx, column=c_idx + 1, value=value)


def export_schedule_to_excel(
    result: HPLCScheduleResult,
    output_path: Path | str,
) -> Path:
    """Export HPLC-SAXS settings to an Excel file.

    Creates one sheet per table of ``schedule_to_frames``.

    Parameters
    ----------
    result : HPLCScheduleResult
        Schedule to export
    output_path : Path or str
        Output Excel file path

    Returns
    -------
    Path
        Path of the written workbook
    """
    from openpyxl import Workbook

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    frames = schedule_to_frames(result)
    for i, (name, df) in enumerate(frames.items()):
        if i == 0:
            ws = wb.active
            ws.title = name[:SHEET_NAME_LIMIT]
        else:
            ws = wb.create_sheet(title=name[:SHEET_NAME_LIMIT])
        _write_frame(ws, df)

    wb.save(output_path)
    logger.info(f"Exported HPLC-SAXS schedule to {output_path}")
    return output_path


def export_iucr_table_to_excel(
    table: pd.DataFrame,
    output_path: Path | str,
    title: str = "IUCr SAXS Data Table",
) -> Path:
    """Export the IUCr summary table to an Excel file.

    Parameters
    ----------
    table : pd.DataFrame
        Output of ``CalculatorSession.iucr_table``
    output_path : Path or str
        Output Excel file path
    title : str, default="IUCr SAXS Data Table"
        Heading written above the table
    """
    from openpyxl import Workbook

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = "IUCr"
    ws.cell(row=1, column=1, value=title)
    _write_frame(ws, table, start_row=3)

    wb.save(output_path)
    logger.info(f"Exported IUCr table ({len(table)} rows) to {output_path}")
    return output_path
