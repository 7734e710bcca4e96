"""Sample-detector distance recommendation.

Single-point calibration on a reference protein (BSA monomer: MW 66500 Da,
Rg 28 A, q_min 0.008 A^-1, 1900 mm). Three coefficients follow from it:
- Rg = k * MW^(1/3),   k  = Rg_ref / MW_ref^(1/3)
- q_min = c1 / Rg,     c1 = q_min_ref * Rg_ref
- SD = c2 * Rg,        c2 = SD_ref / Rg_ref

This is a proportional model through one point, not a regression over the
reference table.
"""

from dataclasses import dataclass
from typing import Any

from ..configs import get_detector_references, ReferenceProtein
from ..core.dataclasses import record_to_dict
from ..core.errors import DomainError, MissingParameterError
from ..core.numeric import require_number, round_fixed


INPUT_TYPES = ("mw", "rg")


@dataclass(frozen=True)
class DetectorCalibration:
    """Coefficients derived from the anchor protein."""
    rg_coeff: float
    qmin_coeff: float
    sd_coeff: float
    reference: ReferenceProtein

    @classmethod
    def from_reference(cls, reference: ReferenceProtein) -> "DetectorCalibration":
        return cls(
            rg_coeff=reference.rg / reference.mw ** (1 / 3),
            qmin_coeff=reference.qmin * reference.rg,
            sd_coeff=reference.sd_mm / reference.rg,
            reference=reference,
        )


@dataclass(frozen=True)
class DetectorDistanceRecommendation:
    """Recommended sample-detector distance for a protein."""
    mw: float                   # Da, 0 dp
    rg: float                   # A, 2 dp
    qmin: float                 # A^-1, 6 dp
    suggested_sd: float         # mm, 0 dp
    suggested_sd_meters: float  # m, 2 dp
    reference_protein: str
    reference_rg: float
    reference_sd: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def get_detector_calibration() -> DetectorCalibration:
    """Calibration coefficients from the configured anchor protein."""
    return DetectorCalibration.from_reference(get_detector_references().anchor)


def calculate_detector_distance(value: float, input_type: str = "mw") -> DetectorDistanceRecommendation:
    """Recommend a sample-detector distance from MW or Rg.

    Parameters
    ----------
    value : float
        Molecular weight in Da (``input_type="mw"``) or Rg in A
        (``input_type="rg"``)
    input_type : {"mw", "rg"}
        Which quantity ``value`` is. With "rg", MW is back-solved as
        (Rg / k)^3.

    Returns
    -------
    DetectorDistanceRecommendation

    Raises
    ------
    MissingParameterError
        If ``value`` is not numeric or ``input_type`` is unknown
    DomainError
        If ``value`` is not positive
    """
    value = require_number(str(input_type or "value"), value)
    kind = str(input_type or "").strip().lower()
    if kind not in INPUT_TYPES:
        raise MissingParameterError(
            "input_type",
            f"Unknown input type '{input_type}'. Available: {list(INPUT_TYPES)}",
        )
    if value <= 0:
        raise DomainError(f"{kind} must be positive, got {value}")

    calibration = get_detector_calibration()

    if kind == "mw":
        mw = value
        rg = calibration.rg_coeff * mw ** (1 / 3)
    else:
        rg = value
        mw = (rg / calibration.rg_coeff) ** 3

    qmin = calibration.qmin_coeff / rg
    suggested_sd = calibration.sd_coeff * rg

    reference = calibration.reference
    return DetectorDistanceRecommendation(
        mw=round_fixed(mw, 0),
        rg=round_fixed(rg, 2),
        qmin=round_fixed(qmin, 6),
        suggested_sd=round_fixed(suggested_sd, 0),
        suggested_sd_meters=round_fixed(suggested_sd / 1000, 2),
        reference_protein=reference.name,
        reference_rg=reference.rg,
        reference_sd=reference.sd_mm,
    )
