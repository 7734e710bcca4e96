"""HPLC / SEC support calculations.

- Dilution of an injected sample across a Gaussian elution peak
- Concentration from UV absorbance (Beer-Lambert)
- SEC retention time <-> molecular weight via column calibration
  Ve (mL) = a + b ln(MW), retention time = Ve / flow rate
- Mass resolution of a peak of given width
- RI/UV two-component molar ratio
"""

from dataclasses import dataclass
from typing import Any, Mapping
import math

from ..configs import get_sec_column, SecColumn
from ..core.dataclasses import record_to_dict
from ..core.errors import DomainError, MissingParameterError
from ..core.numeric import require_numbers


DEFAULT_FLOW_RATE = 0.35   # mL/min
DEFAULT_PORE_SIZE = "100"
FWHM_TO_SIGMA = 2.355


@dataclass(frozen=True)
class DilutionResult:
    """Dilution of the injected sample at the peak."""
    dilution_factor: float
    peak_volume: float      # uL
    injected_volume: float  # uL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class ComponentResponse:
    """Detector response coefficients of one component."""
    dndc: float
    epsilon: float
    mw: float

    @classmethod
    def from_value(cls, value: "ComponentResponse | Mapping[str, Any]") -> "ComponentResponse":
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise MissingParameterError("component", "Component must provide dndc, epsilon and mw")
        values = require_numbers(
            dndc=value.get("dndc"),
            epsilon=value.get("epsilon"),
            mw=value.get("mw"),
        )
        return cls(**values)


@dataclass(frozen=True)
class MolarRatioResult:
    """A:B ratio from simultaneous RI and UV signals."""
    molar_ratio_ab: float
    mass_ratio_ab: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def get_column_params(pore_size: str | int = DEFAULT_PORE_SIZE) -> SecColumn:
    """Calibration (a, b) of the SEC column; unknown sizes use 100 A."""
    return get_sec_column(pore_size)


def calculate_dilution_factor(
    injected_volume: float,
    flow_rate: float,
    peak_width: float,
) -> DilutionResult:
    """Dilution factor of a Gaussian peak.

    peak volume (uL) = flow * FWHM * sqrt(2 pi) / 2.355 * 1000

    Parameters
    ----------
    injected_volume : float
        Injection volume in uL
    flow_rate : float
        mL/min
    peak_width : float
        Peak FWHM in min
    """
    values = require_numbers(
        injected_volume=injected_volume,
        flow_rate=flow_rate,
        peak_width=peak_width,
    )
    if values["injected_volume"] == 0:
        raise DomainError("Injected volume must be non-zero")
    peak_volume = values["flow_rate"] * values["peak_width"] * math.sqrt(2 * math.pi) / FWHM_TO_SIGMA * 1000
    return DilutionResult(
        dilution_factor=peak_volume / values["injected_volume"],
        peak_volume=peak_volume,
        injected_volume=values["injected_volume"],
    )


def calculate_concentration_from_uv(
    absorbance: float,
    epsilon: float,
    path_length: float,
    mw: float,
) -> float:
    """Concentration in mg/mL from A = epsilon * c * l.

    Parameters
    ----------
    absorbance : float
        AU
    epsilon : float
        Molar extinction coefficient, M^-1 cm^-1
    path_length : float
        cm
    mw : float
        Da
    """
    values = require_numbers(
        absorbance=absorbance,
        epsilon=epsilon,
        path_length=path_length,
        mw=mw,
    )
    denominator = values["epsilon"] * values["path_length"]
    if denominator == 0:
        raise DomainError("Extinction coefficient and path length must be non-zero")
    concentration_molar = values["absorbance"] / denominator
    return concentration_molar * values["mw"] / 1000


def calculate_molar_concentration(concentration_mg_ml: float, mw: float) -> float:
    """Convert mg/mL to uM."""
    values = require_numbers(concentration_mg_ml=concentration_mg_ml, mw=mw)
    if values["mw"] == 0:
        raise DomainError("Molecular weight must be non-zero")
    # mg/mL == g/L
    return values["concentration_mg_ml"] / values["mw"] * 1e6


def calculate_retention_time_from_mw(
    mw: float,
    pore_size: str | int = DEFAULT_PORE_SIZE,
    flow_rate: float = DEFAULT_FLOW_RATE,
    oligomer: int = 1,
) -> float:
    """Expected SEC retention time (min).

    Parameters
    ----------
    mw : float
        Monomer molecular weight in Da
    pore_size : str, default="100"
        Column pore size in A ("100", "150", "300")
    flow_rate : float, default=0.35
        mL/min
    oligomer : int, default=1
        Oligomeric state; the column sees ``mw * oligomer``
    """
    values = require_numbers(mw=mw, flow_rate=flow_rate, oligomer=oligomer)
    total_mw = values["mw"] * values["oligomer"]
    if total_mw <= 0:
        raise DomainError(f"Molecular weight must be positive, got {total_mw}")
    if values["flow_rate"] == 0:
        raise DomainError("Flow rate must be non-zero")

    column = get_column_params(pore_size)
    retention_volume = column.a + column.b * math.log(total_mw)
    return retention_volume / values["flow_rate"]


def calculate_mw_from_retention_time(
    retention_time: float,
    pore_size: str | int = DEFAULT_PORE_SIZE,
    flow_rate: float = DEFAULT_FLOW_RATE,
) -> float:
    """Molecular weight (Da) eluting at ``retention_time`` minutes."""
    values = require_numbers(retention_time=retention_time, flow_rate=flow_rate)
    column = get_column_params(pore_size)
    retention_volume = values["retention_time"] * values["flow_rate"]
    return math.exp((retention_volume - column.a) / column.b)


def calculate_mass_resolution(
    mw: float,
    peak_width: float,
    flow_rate: float = DEFAULT_FLOW_RATE,
    pore_size: str | int = DEFAULT_PORE_SIZE,
) -> float:
    """Mass spread (Da) covered by a peak of width ``peak_width`` minutes.

    From dVe/dMW = b / MW: delta M ~ |width * flow / b| * MW.
    """
    values = require_numbers(mw=mw, peak_width=peak_width, flow_rate=flow_rate)
    column = get_column_params(pore_size)
    peak_volume = values["peak_width"] * values["flow_rate"]
    return abs(peak_volume / column.b) * values["mw"]


def calculate_molar_ratio(
    ri_signal: float,
    uv_signal: float,
    component_a: ComponentResponse | Mapping[str, Any],
    component_b: ComponentResponse | Mapping[str, Any],
) -> MolarRatioResult:
    """Molar and mass ratio of two co-eluting components from RI and UV."""
    values = require_numbers(ri_signal=ri_signal, uv_signal=uv_signal)
    a = ComponentResponse.from_value(component_a)
    b = ComponentResponse.from_value(component_b)
    ri, uv = values["ri_signal"], values["uv_signal"]

    denominator = ri * a.epsilon - uv * a.dndc
    if denominator == 0:
        raise DomainError("RI and UV signals do not separate the two components")
    if b.mw == 0:
        raise DomainError("Component B molecular weight must be non-zero")
    ratio = (uv * b.dndc - ri * b.epsilon) / denominator
    return MolarRatioResult(
        molar_ratio_ab=ratio,
        mass_ratio_ab=ratio * a.mw / b.mw,
    )
