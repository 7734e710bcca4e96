"""Centrifugation physics for sample preparation.

Relative centrifugal force, Svedberg sedimentation for a Stokes sphere,
terminal velocity and distance travelled during a spin.

Example:
    >>> calculate_rcf(10000, 10)
    11180.0
"""

from dataclasses import dataclass
from typing import Any
import logging
import math

from ..core.dataclasses import record_to_dict
from ..core.errors import DomainError
from ..core.numeric import require_numbers

logger = logging.getLogger(__name__)


AVOGADRO = 6.022e23
RCF_CONSTANT = 1.118e-5   # RCF = 1.118e-5 * r[cm] * rpm^2
STANDARD_GRAVITY = 9.8    # m/s^2
SVEDBERG = 1e-13          # s


@dataclass(frozen=True)
class SedimentationResult:
    """Sedimentation coefficient of a particle."""
    sedimentation_coeff: float             # s
    sedimentation_coeff_svedberg: float    # S
    buoyancy_factor: float                 # 1 - vbar * rho
    friction_coeff: float                  # kg/s

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class CentrifugationResult:
    """Complete centrifugation run estimate."""
    rpm: float
    radius_cm: float
    mw: float
    viscosity: float
    partial_specific_volume: float
    solvent_density: float
    time_minutes: float
    rcf: float
    particle_radius_nm: float
    sedimentation: SedimentationResult
    velocity_mm_s: float
    distance_mm: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def calculate_rcf(rpm: float, radius: float) -> float:
    """Relative centrifugal force (x g) from rpm and rotor radius (cm)."""
    values = require_numbers(rpm=rpm, radius=radius)
    return RCF_CONSTANT * values["radius"] * values["rpm"] ** 2


def calculate_rpm(rcf: float, radius: float) -> float:
    """Rotor speed (rpm) needed for a given RCF at ``radius`` cm."""
    values = require_numbers(rcf=rcf, radius=radius)
    if values["radius"] <= 0:
        raise DomainError("Rotor radius must be positive")
    return math.sqrt(values["rcf"] / (RCF_CONSTANT * values["radius"]))


def calculate_sedimentation(
    mw: float,
    viscosity: float,
    particle_radius: float,
    vbar: float,
    rho: float,
) -> SedimentationResult:
    """Sedimentation coefficient S = M (1 - vbar rho) / (NA f).

    Parameters
    ----------
    mw : float
        Molecular weight in g/mol
    viscosity : float
        Solvent viscosity in Pa s (kg / (m s))
    particle_radius : float
        Stokes radius in m
    vbar : float
        Partial specific volume in cm^3/g
    rho : float
        Solvent density in g/cm^3
    """
    values = require_numbers(
        mw=mw,
        viscosity=viscosity,
        particle_radius=particle_radius,
        vbar=vbar,
        rho=rho,
    )
    buoyancy = 1 - values["vbar"] * values["rho"]
    # Stokes drag f = 6 pi eta r
    friction = 6 * math.pi * values["viscosity"] * values["particle_radius"]
    if friction == 0:
        raise DomainError("Viscosity and particle radius must be non-zero")

    # g/mol -> kg/mol
    s = (values["mw"] * buoyancy * 1e-3) / (AVOGADRO * friction)
    return SedimentationResult(
        sedimentation_coeff=s,
        sedimentation_coeff_svedberg=s / SVEDBERG,
        buoyancy_factor=buoyancy,
        friction_coeff=friction,
    )


def calculate_terminal_velocity(rcf: float, sedimentation_coeff: float) -> float:
    """Terminal velocity in mm/s: S * RCF * g."""
    values = require_numbers(rcf=rcf, sedimentation_coeff=sedimentation_coeff)
    return values["sedimentation_coeff"] * values["rcf"] * STANDARD_GRAVITY * 1000


def calculate_centrifugation_distance(velocity: float, time_minutes: float) -> float:
    """Distance (mm) travelled at ``velocity`` mm/s for ``time_minutes``."""
    values = require_numbers(velocity=velocity, time_minutes=time_minutes)
    return values["velocity"] * values["time_minutes"] * 60


def estimate_particle_radius(mw: float, vbar: float) -> float:
    """Radius (m) of a sphere with the anhydrous volume vbar * MW / NA."""
    values = require_numbers(mw=mw, vbar=vbar)
    volume_cm3 = values["vbar"] * values["mw"] / AVOGADRO
    if volume_cm3 < 0:
        raise DomainError("Particle volume must be non-negative")
    radius_cm = (3 * volume_cm3 / (4 * math.pi)) ** (1 / 3)
    return radius_cm * 1e-2


def run_centrifugation(
    rpm: float,
    radius: float,
    mw: float,
    viscosity: float,
    vbar: float,
    rho: float,
    time_minutes: float,
) -> CentrifugationResult:
    """RCF, sedimentation, velocity and distance for one spin.

    The particle is modelled as a sphere of the protein's dry volume.
    """
    values = require_numbers(
        rpm=rpm,
        radius=radius,
        mw=mw,
        viscosity=viscosity,
        vbar=vbar,
        rho=rho,
        time_minutes=time_minutes,
    )
    rcf = calculate_rcf(values["rpm"], values["radius"])
    particle_radius = estimate_particle_radius(values["mw"], values["vbar"])
    sedimentation = calculate_sedimentation(
        values["mw"], values["viscosity"], particle_radius, values["vbar"], values["rho"]
    )
    velocity = calculate_terminal_velocity(rcf, sedimentation.sedimentation_coeff)
    distance = calculate_centrifugation_distance(velocity, values["time_minutes"])

    logger.debug(
        f"Centrifugation: RCF={rcf:.0f} x g, S={sedimentation.sedimentation_coeff_svedberg:.2f} S, "
        f"distance={distance:.4f} mm"
    )

    return CentrifugationResult(
        rpm=values["rpm"],
        radius_cm=values["radius"],
        mw=values["mw"],
        viscosity=values["viscosity"],
        partial_specific_volume=values["vbar"],
        solvent_density=values["rho"],
        time_minutes=values["time_minutes"],
        rcf=rcf,
        particle_radius_nm=particle_radius * 1e9,
        sedimentation=sedimentation,
        velocity_mm_s=velocity,
        distance_mm=distance,
    )
