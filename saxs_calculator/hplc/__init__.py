"""HPLC / SEC calculations for SEC-SAXS runs.

- sec: column calibration, dilution, UV concentration, molar ratio
- schedule: flow-rate, fraction collector and detector settings

Example:
    >>> from saxs_calculator.hplc import calculate_hplc_saxs_settings
    >>> result = calculate_hplc_saxs_settings(10.937, 1, 100, 0.35, 0.35)
    >>> result.xray_collection.peak_start_time, result.xray_collection.peak_stop_time
    (10.282, 11.977)
"""

from .sec import (
    DEFAULT_FLOW_RATE,
    DEFAULT_PORE_SIZE,
    DilutionResult,
    ComponentResponse,
    MolarRatioResult,
    get_column_params,
    calculate_dilution_factor,
    calculate_concentration_from_uv,
    calculate_molar_concentration,
    calculate_retention_time_from_mw,
    calculate_mw_from_retention_time,
    calculate_mass_resolution,
    calculate_molar_ratio,
)
from .schedule import (
    ScheduleInputs,
    ScheduleTrace,
    ScalingFactors,
    XrayCollectionWindow,
    FlowRatePoint,
    FractionCollectorWindow,
    DetectorStep,
    HPLCScheduleResult,
    SuggestedPreRun,
    calculate_peak_width_scaling,
    calculate_time_offset,
    calculate_hplc_saxs_settings,
    calculate_suggested_params,
)

__all__ = [
    "DEFAULT_FLOW_RATE",
    "DEFAULT_PORE_SIZE",
    "DilutionResult",
    "ComponentResponse",
    "MolarRatioResult",
    "get_column_params",
    "calculate_dilution_factor",
    "calculate_concentration_from_uv",
    "calculate_molar_concentration",
    "calculate_retention_time_from_mw",
    "calculate_mw_from_retention_time",
    "calculate_mass_resolution",
    "calculate_molar_ratio",
    "ScheduleInputs",
    "ScheduleTrace",
    "ScalingFactors",
    "XrayCollectionWindow",
    "FlowRatePoint",
    "FractionCollectorWindow",
    "DetectorStep",
    "HPLCScheduleResult",
    "SuggestedPreRun",
    "calculate_peak_width_scaling",
    "calculate_time_offset",
    "calculate_hplc_saxs_settings",
    "calculate_suggested_params",
]
