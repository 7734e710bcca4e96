"""DataFrame views and Excel export.

Example:
    >>> from saxs_calculator.hplc import calculate_hplc_saxs_settings
    >>> from saxs_calculator.export import export_schedule_to_excel
    >>> result = calculate_hplc_saxs_settings(10.937, 1, 100, 0.35, 0.35)
    >>> export_schedule_to_excel(result, "hplc_saxs_settings.xlsx")
"""

from .excel import (
    schedule_to_frames,
    composition_to_frame,
    export_schedule_to_excel,
    export_iucr_table_to_excel,
)

__all__ = [
    "schedule_to_frames",
    "composition_to_frame",
    "export_schedule_to_excel",
    "export_iucr_table_to_excel",
]
