"""Centrifugation calculations (RCF, sedimentation, terminal velocity)."""

from .calculator import (
    RCF_CONSTANT,
    SedimentationResult,
    CentrifugationResult,
    calculate_rcf,
    calculate_rpm,
    calculate_sedimentation,
    calculate_terminal_velocity,
    calculate_centrifugation_distance,
    estimate_particle_radius,
    run_centrifugation,
)

__all__ = [
    "RCF_CONSTANT",
    "SedimentationResult",
    "CentrifugationResult",
    "calculate_rcf",
    "calculate_rpm",
    "calculate_sedimentation",
    "calculate_terminal_velocity",
    "calculate_centrifugation_distance",
    "estimate_particle_radius",
    "run_centrifugation",
]
