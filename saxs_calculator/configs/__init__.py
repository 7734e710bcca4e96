"""Embedded calibration tables loaded from JSON files.

Example:
    >>> from saxs_calculator.configs import get_sec_column, list_pore_sizes
    >>> for pore in list_pore_sizes():
    ...     column = get_sec_column(pore)
    ...     print(f"{pore} A: Ve = {column.a} + {column.b} ln(MW)")
"""

from .loader import (
    AminoAcidProperties,
    AminoAcidTable,
    SecColumn,
    SecColumnTable,
    ReferenceProtein,
    DetectorReferences,
    get_amino_acid_table,
    get_sec_column_table,
    get_sec_column,
    get_detector_references,
    list_pore_sizes,
    list_reference_proteins,
    clear_cache,
)

__all__ = [
    "AminoAcidProperties",
    "AminoAcidTable",
    "SecColumn",
    "SecColumnTable",
    "ReferenceProtein",
    "DetectorReferences",
    "get_amino_acid_table",
    "get_sec_column_table",
    "get_sec_column",
    "get_detector_references",
    "list_pore_sizes",
    "list_reference_proteins",
    "clear_cache",
]
