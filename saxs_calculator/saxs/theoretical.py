"""Theoretical SAXS parameters from molecular weight.

Empirical scaling laws used to predict what a monodisperse protein sample
should look like before (or while) measuring it:
- I(0) from concentration and MW (empirical protein constant)
- Rg from MW (class-dependent power law, plus a beamline-calibrated fit)
- Dmax from Rg (shape-dependent factor)
- MW back-calculated from I(0) or from the Porod volume

Example:
    >>> params = calculate_all_theoretical_params(66500, 5.0, "globular")
    >>> round(params.theoretical_i0, 4)
    2.5935
"""

from dataclasses import dataclass
from typing import Any
import math

from ..core.dataclasses import ProteinType, ParticleShape, record_to_dict
from ..core.errors import DomainError
from ..core.numeric import require_number, require_numbers


AVOGADRO = 6.022e23
ELECTRON_RADIUS_CM = 2.818e-13
ELECTRON_DENSITY_PROTEIN = 0.44   # e/A^3
ELECTRON_DENSITY_WATER = 0.334    # e/A^3

# I(0)/c/MW for proteins, cm^-1 / (mg/mL * Da)
I0_PROTEIN_CONSTANT = 7.8e-6
DEFAULT_PARTIAL_SPECIFIC_VOLUME = 0.73

# Beamline-calibrated Rg = 0.6543 * MW^(1/3) (MW=20000 -> Rg=17.76)
PREDICTED_RG_COEFF = 0.6543
DRY_VOLUME_PER_DA = 1.212         # A^3 / Da
POROD_VOLUME_PER_DA = 1.66         # A^3 / Da
WAVELENGTH_ENERGY_PRODUCT = 12.398  # keV * A

# (coefficient, exponent)
RG_POWER_LAWS: dict[ProteinType, tuple[float, float]] = {
    ProteinType.GLOBULAR: (0.77, 0.37),
    ProteinType.UNFOLDED: (2.54, 0.522),
    ProteinType.IDP: (2.49, 0.509),
}

# (factor, min factor, max factor)
DMAX_FACTORS: dict[ParticleShape, tuple[float, float, float]] = {
    ParticleShape.SPHERE: (2.58, 2.5, 2.7),
    ParticleShape.GLOBULAR: (2.8, 2.5, 3.0),
    ParticleShape.ELONGATED: (3.5, 3.0, 4.0),
}

DMAX_FORMULAS = {
    ParticleShape.SPHERE: "Dmax = 2.58 x Rg (sphere)",
    ParticleShape.GLOBULAR: "Dmax ~ 2.5-3.0 x Rg (globular)",
    ParticleShape.ELONGATED: "Dmax ~ 3.0-4.0 x Rg (elongated)",
}


@dataclass(frozen=True)
class ContrastEstimate:
    """Electron-contrast chain for a protein in water.

    Informational only: the returned I(0) uses the empirical constant.
    """
    delta_rho_e_a3: float       # e/A^3
    delta_rho_e_cm3: float      # e/cm^3
    delta_sld: float            # cm^-2
    molecular_volume: float     # cm^3 per molecule


@dataclass(frozen=True)
class TheoreticalI0Result:
    """Theoretical zero-angle intensity."""
    theoretical_i0: float           # cm^-1
    i0_per_concentration: float     # cm^-1 / (mg/mL)
    i0_per_c_per_mw: float          # cm^-1 / (mg/mL * Da)
    constant_k: float
    mw: float
    concentration: float
    partial_specific_volume: float
    contrast: ContrastEstimate

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class TheoreticalRgResult:
    """Theoretical radius of gyration from MW."""
    theoretical_rg: float   # A, class power law
    predicted_rg: float     # A, beamline calibration
    formula: str
    predicted_formula: str
    protein_type: ProteinType
    coefficient: float
    exponent: float
    q_max_guinier: float    # A^-1
    mw: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class TheoreticalDmaxResult:
    """Theoretical maximum dimension from Rg."""
    theoretical_dmax: float
    dmax_min: float
    dmax_max: float
    factor: float
    formula: str
    shape: ParticleShape
    rg: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class TheoreticalParameterSet:
    """I(0), Rg, Dmax and dry volume predicted from MW alone."""
    mw: float
    concentration: float
    protein_type: ProteinType
    i0: TheoreticalI0Result
    rg: TheoreticalRgResult
    dmax: TheoreticalDmaxResult
    theoretical_dry_volume: float   # A^3

    @property
    def theoretical_i0(self) -> float:
        return self.i0.theoretical_i0

    @property
    def theoretical_rg(self) -> float:
        return self.rg.theoretical_rg

    @property
    def predicted_rg(self) -> float:
        return self.rg.predicted_rg

    @property
    def theoretical_dmax(self) -> float:
        return self.dmax.theoretical_dmax

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def estimate_contrast(mw: float, partial_specific_volume: float) -> ContrastEstimate:
    """Electron density contrast and volume of one protein molecule."""
    delta_rho = ELECTRON_DENSITY_PROTEIN - ELECTRON_DENSITY_WATER
    # 1 A = 1e-8 cm
    delta_rho_cm3 = delta_rho * 1e24
    return ContrastEstimate(
        delta_rho_e_a3=delta_rho,
        delta_rho_e_cm3=delta_rho_cm3,
        delta_sld=delta_rho_cm3 * ELECTRON_RADIUS_CM,
        molecular_volume=mw * partial_specific_volume / AVOGADRO,
    )


def calculate_theoretical_i0(
    mw: float,
    concentration: float,
    partial_specific_volume: float = DEFAULT_PARTIAL_SPECIFIC_VOLUME,
) -> TheoreticalI0Result:
    """Theoretical I(0) in absolute units.

    I(0) = c * MW * k with k = 7.8e-6 cm^-1/(mg/mL * Da), the standard
    protein calibration constant. The contrast chain is attached for
    reference but does not enter the returned value.

    Parameters
    ----------
    mw : float
        Molecular weight in Da
    concentration : float
        Concentration in mg/mL
    partial_specific_volume : float, default=0.73
        cm^3/g
    """
    values = require_numbers(
        mw=mw,
        concentration=concentration,
        partial_specific_volume=partial_specific_volume,
    )
    mw = values["mw"]
    concentration = values["concentration"]
    vbar = values["partial_specific_volume"]

    i0 = concentration * mw * I0_PROTEIN_CONSTANT
    return TheoreticalI0Result(
        theoretical_i0=i0,
        i0_per_concentration=i0 / concentration if concentration else math.nan,
        i0_per_c_per_mw=I0_PROTEIN_CONSTANT,
        constant_k=I0_PROTEIN_CONSTANT,
        mw=mw,
        concentration=concentration,
        partial_specific_volume=vbar,
        contrast=estimate_contrast(mw, vbar),
    )


def calculate_theoretical_rg(
    mw: float,
    protein_type: str | ProteinType = ProteinType.GLOBULAR,
) -> TheoreticalRgResult:
    """Theoretical Rg from MW.

    Power laws (Rg in A, MW in Da):
    - globular: 0.77 * MW^0.37
    - unfolded: 2.54 * MW^0.522
    - idp:      2.49 * MW^0.509

    Unknown classes use the globular law. ``predicted_rg`` is the
    class-independent beamline fit 0.6543 * MW^(1/3).
    """
    mw = require_number("mw", mw)
    if mw <= 0:
        raise DomainError(f"Molecular weight must be positive, got {mw}")
    ptype = ProteinType.from_value(protein_type)
    coefficient, exponent = RG_POWER_LAWS[ptype]

    rg = coefficient * mw ** exponent
    predicted_rg = PREDICTED_RG_COEFF * mw ** (1 / 3)

    return TheoreticalRgResult(
        theoretical_rg=rg,
        predicted_rg=predicted_rg,
        formula=f"Rg = {coefficient} x MW^{exponent}",
        predicted_formula=f"Rg = {PREDICTED_RG_COEFF} x MW^(1/3)",
        protein_type=ptype,
        coefficient=coefficient,
        exponent=exponent,
        q_max_guinier=1.3 / rg if rg > 0 else math.inf,
        mw=mw,
    )


def calculate_theoretical_dmax(
    rg: float,
    shape: str | ParticleShape = ParticleShape.GLOBULAR,
) -> TheoreticalDmaxResult:
    """Theoretical Dmax = factor * Rg with a shape-dependent range."""
    rg = require_number("rg", rg)
    pshape = ParticleShape.from_value(shape)
    factor, min_factor, max_factor = DMAX_FACTORS[pshape]

    return TheoreticalDmaxResult(
        theoretical_dmax=factor * rg,
        dmax_min=min_factor * rg,
        dmax_max=max_factor * rg,
        factor=factor,
        formula=DMAX_FORMULAS[pshape],
        shape=pshape,
        rg=rg,
    )


def calculate_all_theoretical_params(
    mw: float,
    concentration: float,
    protein_type: str | ProteinType = ProteinType.GLOBULAR,
) -> TheoreticalParameterSet:
    """I(0), Rg, Dmax and dry volume from MW in one call.

    Dmax uses the elongated factor only when ``protein_type`` is
    "elongated"; every other class uses the globular factor. The Rg law
    itself falls back to globular for "elongated".
    """
    values = require_numbers(mw=mw, concentration=concentration)
    mw = values["mw"]
    concentration = values["concentration"]

    i0_result = calculate_theoretical_i0(mw, concentration)
    rg_result = calculate_theoretical_rg(mw, protein_type)

    is_elongated = (
        isinstance(protein_type, str) and protein_type.strip().lower() == "elongated"
    ) or protein_type is ParticleShape.ELONGATED
    shape = ParticleShape.ELONGATED if is_elongated else ParticleShape.GLOBULAR
    dmax_result = calculate_theoretical_dmax(rg_result.theoretical_rg, shape)

    return TheoreticalParameterSet(
        mw=mw,
        concentration=concentration,
        protein_type=rg_result.protein_type,
        i0=i0_result,
        rg=rg_result,
        dmax=dmax_result,
        theoretical_dry_volume=DRY_VOLUME_PER_DA * mw,
    )


def calculate_mw_from_i0(
    i0: float,
    concentration: float,
    contrast_factor: float = I0_PROTEIN_CONSTANT,
) -> float:
    """MW (Da) = I(0) / (c * k)."""
    values = require_numbers(i0=i0, concentration=concentration, contrast_factor=contrast_factor)
    denominator = values["concentration"] * values["contrast_factor"]
    if denominator == 0:
        raise DomainError("Concentration and contrast factor must be non-zero")
    return values["i0"] / denominator


def calculate_porod_volume(i0: float, porod_invariant: float) -> float:
    """Porod volume Vp = 2 pi^2 I(0) / Q (A^3)."""
    values = require_numbers(i0=i0, porod_invariant=porod_invariant)
    if values["porod_invariant"] == 0:
        raise DomainError("Porod invariant must be non-zero")
    return 2 * math.pi ** 2 * values["i0"] / values["porod_invariant"]


def estimate_mw_from_porod_volume(porod_volume: float) -> float:
    """MW (Da) ~ Vp / 1.66."""
    return require_number("porod_volume", porod_volume) / POROD_VOLUME_PER_DA


def calculate_wavelength(energy_kev: float) -> float:
    """X-ray wavelength (A) from photon energy (keV)."""
    energy = require_number("energy_kev", energy_kev)
    if energy <= 0:
        raise DomainError("X-ray energy must be positive")
    return WAVELENGTH_ENERGY_PRODUCT / energy
