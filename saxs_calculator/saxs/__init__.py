"""SAXS parameter calculations.

- guinier: linear Guinier regression on a measured curve
- theoretical: I(0), Rg, Dmax predicted from molecular weight
- detector: sample-detector distance recommendation

Example:
    >>> from saxs_calculator.saxs import calculate_detector_distance
    >>> rec = calculate_detector_distance(66500, "mw")
    >>> rec.rg, rec.qmin, rec.suggested_sd
    (28.0, 0.008, 1900.0)
"""

from .guinier import (
    MIN_GUINIER_POINTS,
    GuinierFitResult,
    guinier_analysis,
    guinier_fit_line,
)
from .theoretical import (
    I0_PROTEIN_CONSTANT,
    ContrastEstimate,
    TheoreticalI0Result,
    TheoreticalRgResult,
    TheoreticalDmaxResult,
    TheoreticalParameterSet,
    estimate_contrast,
    calculate_theoretical_i0,
    calculate_theoretical_rg,
    calculate_theoretical_dmax,
    calculate_all_theoretical_params,
    calculate_mw_from_i0,
    calculate_porod_volume,
    estimate_mw_from_porod_volume,
    calculate_wavelength,
)
from .detector import (
    DetectorCalibration,
    DetectorDistanceRecommendation,
    get_detector_calibration,
    calculate_detector_distance,
)

__all__ = [
    "MIN_GUINIER_POINTS",
    "GuinierFitResult",
    "guinier_analysis",
    "guinier_fit_line",
    "I0_PROTEIN_CONSTANT",
    "ContrastEstimate",
    "TheoreticalI0Result",
    "TheoreticalRgResult",
    "TheoreticalDmaxResult",
    "TheoreticalParameterSet",
    "estimate_contrast",
    "calculate_theoretical_i0",
    "calculate_theoretical_rg",
    "calculate_theoretical_dmax",
    "calculate_all_theoretical_params",
    "calculate_mw_from_i0",
    "calculate_porod_volume",
    "estimate_mw_from_porod_volume",
    "calculate_wavelength",
    "DetectorCalibration",
    "DetectorDistanceRecommendation",
    "get_detector_calibration",
    "calculate_detector_distance",
]
