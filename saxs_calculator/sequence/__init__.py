"""Protein sequence analysis.

Example:
    >>> from saxs_calculator.sequence import analyze_protein, parse_sequence
    >>> parse_sequence("mkw vt").composition["K"]
    1
    >>> result = analyze_protein("MKWVTFISLLLLFSSAYS")
    >>> result.extinction.epsilon
    6990
"""

from .analyzer import (
    AVOGADRO,
    DNDC_PROTEIN,
    ParsedSequence,
    ExtinctionCoefficient,
    ProteinAnalysisResult,
    parse_sequence,
    calculate_molecular_weight,
    calculate_dry_volume,
    calculate_electron_count,
    calculate_extinction_coefficient,
    calculate_partial_specific_volume,
    calculate_dndc,
    calculate_epsilon_cm2_g,
    analyze_protein,
)

__all__ = [
    "AVOGADRO",
    "DNDC_PROTEIN",
    "ParsedSequence",
    "ExtinctionCoefficient",
    "ProteinAnalysisResult",
    "parse_sequence",
    "calculate_molecular_weight",
    "calculate_dry_volume",
    "calculate_electron_count",
    "calculate_extinction_coefficient",
    "calculate_partial_specific_volume",
    "calculate_dndc",
    "calculate_epsilon_cm2_g",
    "analyze_protein",
]
