"""Tests for centrifugation physics."""

import math

import pytest

from saxs_calculator.core import DomainError, MissingParameterError
from saxs_calculator.centrifugation import (
    calculate_rcf,
    calculate_rpm,
    calculate_sedimentation,
    calculate_terminal_velocity,
    calculate_centrifugation_distance,
    estimate_particle_radius,
    run_centrifugation,
)


class TestForces:
    """Tests for RCF and rpm."""

    def test_rcf(self):
        """Test RCF = 1.118e-5 * r * rpm^2."""
        assert calculate_rcf(10000, 10) == pytest.approx(11180.0)

    def test_rpm_inverts_rcf(self):
        """Test rpm from RCF."""
        assert calculate_rpm(11180.0, 10) == pytest.approx(10000)

    def test_rpm_requires_positive_radius(self):
        """Test radius <= 0."""
        with pytest.raises(DomainError):
            calculate_rpm(1000, 0)

    def test_missing_rpm(self):
        """Test missing input."""
        with pytest.raises(MissingParameterError):
            calculate_rcf(None, 10)


class TestSedimentation:
    """Tests for the Svedberg equation."""

    def test_bsa_sized_sphere(self):
        """Test S for a 66.5 kDa, 3 nm particle in water."""
        result = calculate_sedimentation(66500, 0.001, 3e-9, 0.73, 1.0)

        assert result.sedimentation_coeff == pytest.approx(5.272569104422637e-13, rel=1e-12)
        assert result.sedimentation_coeff_svedberg == pytest.approx(5.2726, abs=1e-4)
        assert result.buoyancy_factor == pytest.approx(0.27)
        assert result.friction_coeff == pytest.approx(5.654866776461628e-11, rel=1e-12)

    def test_zero_friction(self):
        """Test zero radius."""
        with pytest.raises(DomainError):
            calculate_sedimentation(66500, 0.001, 0, 0.73, 1.0)

    def test_terminal_velocity(self):
        """Test v = S * RCF * g in mm/s."""
        assert calculate_terminal_velocity(11180, 4e-13) == pytest.approx(4.38256e-5)

    def test_distance(self):
        """Test distance over minutes."""
        assert calculate_centrifugation_distance(1e-4, 10) == pytest.approx(0.06)


class TestRunCentrifugation:
    """Tests for the complete spin estimate."""

    def test_particle_radius_is_dry_sphere(self):
        """Test r = (3 vbar M / (4 pi NA))^(1/3)."""
        radius = estimate_particle_radius(66500, 0.73)
        expected_cm = (3 * 0.73 * 66500 / 6.022e23 / (4 * math.pi)) ** (1 / 3)

        assert radius == pytest.approx(expected_cm * 1e-2)
        assert 2e-9 < radius < 4e-9

    def test_run_is_consistent(self):
        """Test that the chained values agree with the single steps."""
        result = run_centrifugation(
            rpm=14000,
            radius=8.0,
            mw=66500,
            viscosity=0.001,
            vbar=0.73,
            rho=1.0,
            time_minutes=10,
        )

        assert result.rcf == pytest.approx(calculate_rcf(14000, 8.0))
        assert result.particle_radius_nm == pytest.approx(estimate_particle_radius(66500, 0.73) * 1e9)
        assert result.velocity_mm_s == pytest.approx(
            calculate_terminal_velocity(result.rcf, result.sedimentation.sedimentation_coeff)
        )
        assert result.distance_mm == pytest.approx(result.velocity_mm_s * 600)

    def test_to_dict(self):
        """Test serialization with nested sedimentation."""
        data = run_centrifugation(14000, 8.0, 66500, 0.001, 0.73, 1.0, 10).to_dict()

        assert "sedimentation_coeff_svedberg" in data["sedimentation"]
