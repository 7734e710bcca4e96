"""HPLC-SAXS step settings.

Turns one pre-run chromatography peak (center, FWHM) and the planned
injection into the complete run set-up for an HPLC-SAXS experiment:
- flow-rate breakpoint table for the HPLC pump
- fraction collector window
- report stop time
- detector exposure/hold table

The derivation is a fixed chain; every step uses only the inputs and the
values computed before it:

    scaling, offset  <- cubic fits in injection volume
    adjusted FWHM    <- peak FWHM * scaling
    peak start/stop  <- center + offset -/+ (adjusted FWHM / 2) * 0.7
    flow breakpoints <- peak start, slowing duration, target flow
    fraction window  <- peak start, X-ray duration * 2.45
    detector table   <- transition breakpoint, X-ray duration

All constants are calibration values from the beamline's reference
spreadsheet and are reproduced as-is. Displayed values use the same
rounding as the spreadsheet (see ``core.numeric``).

Example:
    >>> result = calculate_hplc_saxs_settings(
    ...     peak_center=10.937,
    ...     peak_fwhm=1,
    ...     injection_volume=100,
    ...     target_flow_rate=0.35,
    ...     initial_flow_rate=0.35,
    ... )
    >>> [point.time for point in result.flow_rate_table]
    [0.0, 9.98, 10.08, 13.92, 15.92, 16.42]
    >>> result.report_stop_time
    24
"""

from dataclasses import dataclass
from typing import Any
import logging
import math

import pandas as pd

from ..core.dataclasses import record_to_dict
from ..core.errors import DomainError
from ..core.numeric import require_numbers, round_fixed, round_half_up

logger = logging.getLogger(__name__)


# Peak geometry
REDUCTION_RATIO = 0.7           # target FWHM / adjusted FWHM
FLOW_RATE_RATIO = 1.0           # slow flow / target flow

# Flow-rate table offsets (min)
PRE_SLOWDOWN_OFFSET = 0.1
TRANSITION_MARGIN = 0.2
DEAD_VOLUME = 0.05              # mL, divided by the target flow rate
CONSTANT_OFFSET = 2.0
FAST_TRANSITION_DELAY = 2.0
RAMP_DURATION = 0.5

# Fraction collector
FRACTION_EXPANSION_FACTOR = 2.45
FRACTION_VOLUME = 1.2           # mL per fraction
REPORT_MARGIN = 1 + 3           # min after the last fraction

# Detector
SAS_EXPOSURE = 40               # s, steps 1-3
FAST_EXPOSURE = 2               # s, steps 4-5
TM_EXPOSURE = 4                 # s, step 6
DETECTOR_OVERHEAD = 41          # s
HOLD_DIVISOR = 4
HOLD_OFFSET = 15
FRAME_PADDING = 90
STEP4_HOLD = 100
STEP5_HOLD = 1
STEP6_HOLD = 1
DETECTOR_WAIT = 0.1             # s

XRAY_IMAGE_NOTE = "X-RAY IMAGE"

SUGGESTED_PRERUN_VOLUME = 10    # uL
PRERUN_REFERENCE_VOLUME = 3     # uL
PRERUN_CENTER_SHIFT_PER_UL = -0.2  # min per uL above the reference volume
PRERUN_WIDTH_FACTOR = 2


@dataclass(frozen=True)
class ScheduleInputs:
    """Inputs of the schedule derivation."""
    peak_center: float          # min, from the pre-run
    peak_fwhm: float            # min, from the pre-run
    injection_volume: float     # uL
    target_flow_rate: float     # mL/min
    initial_flow_rate: float    # mL/min


@dataclass(frozen=True)
class ScheduleTrace:
    """Unrounded intermediate values, in derivation order."""
    peak_width_scaling: float
    time_offset: float
    adjusted_fwhm: float
    target_fwhm: float
    peak_start_time: float
    peak_stop_time: float
    slowing_duration: float
    transition_time: float
    xray_start_time: float
    xray_stop_time: float
    fast_transition_time: float
    ramp_end_time: float
    xray_duration: float
    fraction_start_time: float
    fraction_stop_time: float
    time_per_fraction: float
    raw_hold_time: float


@dataclass(frozen=True)
class ScalingFactors:
    """Displayed peak scaling values."""
    peak_width_scaling: float   # 4 dp
    time_offset: float          # 4 dp
    adjusted_fwhm: float        # 3 dp
    target_fwhm: float          # 3 dp
    xray_duration: float        # 3 dp


@dataclass(frozen=True)
class XrayCollectionWindow:
    """Slow-flow collection window around the peak."""
    peak_start_time: float          # 3 dp
    peak_stop_time: float           # 3 dp
    total_slowing_time: float       # 3 dp
    total_slowing_time_sec: float   # 1 dp


@dataclass(frozen=True)
class FlowRatePoint:
    """One breakpoint of the pump program."""
    time: float         # min, 2 dp
    flow_rate: float    # mL/min
    note: str = ""


@dataclass(frozen=True)
class FractionCollectorWindow:
    """Fraction collector program (1 dp)."""
    start_time: float
    stop_time: float
    time_per_fraction: float


@dataclass(frozen=True)
class DetectorStep:
    """One row of the detector acquisition table."""
    step: int
    mode: str
    frame: int
    wait: float
    exposure: float
    hold: int


@dataclass(frozen=True)
class HPLCScheduleResult:
    """Complete HPLC-SAXS run settings."""
    inputs: ScheduleInputs
    scaling: ScalingFactors
    xray_collection: XrayCollectionWindow
    flow_rate_table: tuple[FlowRatePoint, ...]
    fraction_collector: FractionCollectorWindow
    report_stop_time: int
    detector_settings: tuple[DetectorStep, ...]
    trace: ScheduleTrace

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)

    def to_dataframe(self) -> pd.DataFrame:
        """Flow-rate breakpoint table.

        Returns
        -------
        pd.DataFrame
            Columns 'Time (min)', 'Flow (mL/min)' and 'Note'
        """
        return pd.DataFrame(
            [
                {"Time (min)": point.time, "Flow (mL/min)": point.flow_rate, "Note": point.note}
                for point in self.flow_rate_table
            ],
            columns=["Time (min)", "Flow (mL/min)", "Note"],
        )


@dataclass(frozen=True)
class SuggestedPreRun:
    """Suggested parameters for a 10 uL pre-run."""
    peak_center: float      # min, 3 dp
    peak_width: float       # min, 0 dp
    sample_volume: float    # uL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def calculate_peak_width_scaling(injection_volume: float) -> float:
    """Peak-width scaling factor, cubic in injection volume (uL)."""
    v = require_numbers(injection_volume=injection_volume)["injection_volume"]
    return 1.00959 - 0.00468 * v + 0.0005034 * v * v - 0.0000031539 * v * v * v


def calculate_time_offset(injection_volume: float) -> float:
    """Peak-position offset (min), cubic in injection volume (uL)."""
    v = require_numbers(injection_volume=injection_volume)["injection_volume"]
    return 0.000146507 - 0.000266 * v + 0.00007393 * v * v - 0.0000005204 * v * v * v


def _build_detector_settings(transition_time: float, xray_duration: float) -> tuple[tuple[DetectorStep, ...], float]:
    raw_hold = (
        transition_time * 60
        - SAS_EXPOSURE * 3
        - DETECTOR_OVERHEAD
    ) / HOLD_DIVISOR - HOLD_OFFSET
    hold = max(1, round_half_up(raw_hold))
    long_hold = hold * 2 + 1
    frames = round_half_up((xray_duration * 60 / FAST_EXPOSURE) + FRAME_PADDING)

    steps = (
        DetectorStep(1, "SAS", 1, DETECTOR_WAIT, SAS_EXPOSURE, hold),
        DetectorStep(2, "SAS", 1, DETECTOR_WAIT, SAS_EXPOSURE, hold),
        DetectorStep(3, "SAS", 1, DETECTOR_WAIT, SAS_EXPOSURE, long_hold),
        DetectorStep(4, "SAS", frames, DETECTOR_WAIT, FAST_EXPOSURE, STEP4_HOLD),
        DetectorStep(5, "SAS", 1, DETECTOR_WAIT, FAST_EXPOSURE, STEP5_HOLD),
        DetectorStep(6, "TM", 1, DETECTOR_WAIT, TM_EXPOSURE, STEP6_HOLD),
    )
    return steps, raw_hold


def calculate_hplc_saxs_settings(
    peak_center: float,
    peak_fwhm: float,
    injection_volume: float,
    target_flow_rate: float,
    initial_flow_rate: float,
) -> HPLCScheduleResult:
    """Derive the HPLC-SAXS run settings from a pre-run peak.

    Parameters
    ----------
    peak_center : float
        Peak center (min) from the small-volume pre-run
    peak_fwhm : float
        Peak FWHM (min) from the pre-run
    injection_volume : float
        Injection volume (uL) of the SAXS run
    target_flow_rate : float
        Flow rate (mL/min) during X-ray collection
    initial_flow_rate : float
        Flow rate (mL/min) at the start of the run

    Returns
    -------
    HPLCScheduleResult

    Raises
    ------
    MissingParameterError
        If any input is missing or non-numeric (no partial result)
    DomainError
        If a flow rate is zero
    """
    values = require_numbers(
        peak_center=peak_center,
        peak_fwhm=peak_fwhm,
        injection_volume=injection_volume,
        target_flow_rate=target_flow_rate,
        initial_flow_rate=initial_flow_rate,
    )
    inputs = ScheduleInputs(**values)
    if inputs.target_flow_rate == 0 or inputs.initial_flow_rate == 0:
        raise DomainError("Flow rates must be non-zero")

    logger.info(
        f"Deriving HPLC-SAXS settings: center={inputs.peak_center} min, "
        f"FWHM={inputs.peak_fwhm} min, injection={inputs.injection_volume} uL"
    )

    # Peak geometry
    scaling = calculate_peak_width_scaling(inputs.injection_volume)
    offset = calculate_time_offset(inputs.injection_volume)
    adjusted_fwhm = inputs.peak_fwhm * scaling
    target_fwhm = adjusted_fwhm * REDUCTION_RATIO
    half_width = (adjusted_fwhm / 2) * REDUCTION_RATIO
    peak_start = inputs.peak_center + offset - half_width
    peak_stop = inputs.peak_center + offset + half_width
    slowing_duration = peak_stop - peak_start

    # Flow-rate breakpoints
    transition_time = peak_start - PRE_SLOWDOWN_OFFSET - TRANSITION_MARGIN
    xray_start = peak_start - TRANSITION_MARGIN
    xray_stop = (
        xray_start
        + slowing_duration * FLOW_RATE_RATIO
        + DEAD_VOLUME / inputs.target_flow_rate
        + CONSTANT_OFFSET
    )
    fast_transition = xray_stop + FAST_TRANSITION_DELAY
    ramp_end = fast_transition + RAMP_DURATION

    flow_rate_table = (
        FlowRatePoint(round_fixed(0.0, 2), inputs.initial_flow_rate),
        FlowRatePoint(round_fixed(transition_time, 2), inputs.target_flow_rate),
        FlowRatePoint(round_fixed(xray_start, 2), inputs.target_flow_rate, XRAY_IMAGE_NOTE),
        FlowRatePoint(round_fixed(xray_stop, 2), inputs.target_flow_rate, XRAY_IMAGE_NOTE),
        FlowRatePoint(round_fixed(fast_transition, 2), inputs.target_flow_rate),
        FlowRatePoint(round_fixed(ramp_end, 2), inputs.target_flow_rate),
    )

    # Fraction collector and report
    xray_duration = xray_stop - xray_start
    fraction_start = peak_start
    fraction_stop = fraction_start + xray_duration * FRACTION_EXPANSION_FACTOR
    time_per_fraction = FRACTION_VOLUME / inputs.initial_flow_rate
    report_stop_time = math.ceil(fraction_stop + REPORT_MARGIN)

    detector_settings, raw_hold = _build_detector_settings(transition_time, xray_duration)

    trace = ScheduleTrace(
        peak_width_scaling=scaling,
        time_offset=offset,
        adjusted_fwhm=adjusted_fwhm,
        target_fwhm=target_fwhm,
        peak_start_time=peak_start,
        peak_stop_time=peak_stop,
        slowing_duration=slowing_duration,
        transition_time=transition_time,
        xray_start_time=xray_start,
        xray_stop_time=xray_stop,
        fast_transition_time=fast_transition,
        ramp_end_time=ramp_end,
        xray_duration=xray_duration,
        fraction_start_time=fraction_start,
        fraction_stop_time=fraction_stop,
        time_per_fraction=time_per_fraction,
        raw_hold_time=raw_hold,
    )

    result = HPLCScheduleResult(
        inputs=inputs,
        scaling=ScalingFactors(
            peak_width_scaling=round_fixed(scaling, 4),
            time_offset=round_fixed(offset, 4),
            adjusted_fwhm=round_fixed(adjusted_fwhm, 3),
            target_fwhm=round_fixed(target_fwhm, 3),
            xray_duration=round_fixed(xray_duration, 3),
        ),
        xray_collection=XrayCollectionWindow(
            peak_start_time=round_fixed(peak_start, 3),
            peak_stop_time=round_fixed(peak_stop, 3),
            total_slowing_time=round_fixed(slowing_duration, 3),
            total_slowing_time_sec=round_fixed(slowing_duration * 60, 1),
        ),
        flow_rate_table=flow_rate_table,
        fraction_collector=FractionCollectorWindow(
            start_time=round_fixed(fraction_start, 1),
            stop_time=round_fixed(fraction_stop, 1),
            time_per_fraction=round_fixed(time_per_fraction, 1),
        ),
        report_stop_time=report_stop_time,
        detector_settings=detector_settings,
        trace=trace,
    )

    logger.debug(
        f"HPLC-SAXS schedule: X-ray window {xray_start:.2f}-{xray_stop:.2f} min, "
        f"fractions {fraction_start:.1f}-{fraction_stop:.1f} min, stop {report_stop_time} min"
    )
    return result


def calculate_suggested_params(peak_center_3ul: float, peak_fwhm_3ul: float) -> SuggestedPreRun:
    """Suggested peak center and width for a 10 uL pre-run.

    A larger injection elutes earlier (about 0.2 min per extra uL) and
    roughly doubles the peak width.
    """
    values = require_numbers(peak_center_3ul=peak_center_3ul, peak_fwhm_3ul=peak_fwhm_3ul)
    shift = PRERUN_CENTER_SHIFT_PER_UL * (SUGGESTED_PRERUN_VOLUME - PRERUN_REFERENCE_VOLUME)
    return SuggestedPreRun(
        peak_center=round_fixed(values["peak_center_3ul"] + shift, 3),
        peak_width=round_fixed(values["peak_fwhm_3ul"] * PRERUN_WIDTH_FACTOR, 0),
        sample_volume=SUGGESTED_PRERUN_VOLUME,
    )
