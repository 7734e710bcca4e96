"""Tests for theoretical SAXS parameters.

Minimal test set covering:
- I(0), Rg, Dmax for a 66.5 kDa globular protein
- Rg power laws per protein class
- Shape selection for Dmax
- MW back-calculation (I(0), Porod volume) and wavelength
"""

import math

import pytest

from saxs_calculator.core import DomainError, MissingParameterError, ProteinType, ParticleShape
from saxs_calculator.saxs import (
    I0_PROTEIN_CONSTANT,
    calculate_theoretical_i0,
    calculate_theoretical_rg,
    calculate_theoretical_dmax,
    calculate_all_theoretical_params,
    calculate_mw_from_i0,
    calculate_porod_volume,
    estimate_mw_from_porod_volume,
    calculate_wavelength,
)


# --- Tests for the combined calculation ---

class TestAllTheoreticalParams:
    """Tests for calculate_all_theoretical_params."""

    def test_globular_66500(self):
        """Test all values for MW 66500 Da at 5 mg/mL.

        The globular power law gives Rg ~ 46.9 A for this mass. The 28 A
        usually quoted for BSA is the measured value used to calibrate the
        detector distance, not an output of this estimate.
        """
        params = calculate_all_theoretical_params(66500, 5, "globular")

        assert params.theoretical_i0 == pytest.approx(2.5935, rel=1e-12)
        assert params.theoretical_rg == pytest.approx(46.874293385010844, rel=1e-12)
        assert params.predicted_rg == pytest.approx(26.508437850802096, rel=1e-12)
        assert params.rg.q_max_guinier == pytest.approx(0.027733751404468224, rel=1e-12)
        assert params.theoretical_dmax == pytest.approx(131.24802147803035, rel=1e-12)
        assert params.dmax.dmax_min == pytest.approx(117.18573346252711, rel=1e-12)
        assert params.dmax.dmax_max == pytest.approx(140.62288015503253, rel=1e-12)
        assert params.theoretical_dry_volume == pytest.approx(80598.0)
        assert params.protein_type is ProteinType.GLOBULAR

    def test_elongated_uses_elongated_dmax(self):
        """Test that "elongated" switches the Dmax factor but not the Rg law."""
        globular = calculate_all_theoretical_params(66500, 5, "globular")
        elongated = calculate_all_theoretical_params(66500, 5, "elongated")

        assert elongated.theoretical_rg == pytest.approx(globular.theoretical_rg)
        assert elongated.dmax.shape is ParticleShape.ELONGATED
        assert elongated.theoretical_dmax == pytest.approx(3.5 * globular.theoretical_rg)

    def test_idp_uses_globular_dmax(self):
        """Test that non-elongated classes use the globular factor."""
        params = calculate_all_theoretical_params(20000, 1, "idp")

        assert params.dmax.shape is ParticleShape.GLOBULAR
        assert params.theoretical_dmax == pytest.approx(2.8 * params.theoretical_rg)

    def test_numeric_strings_accepted(self):
        """Test that numeric strings are coerced."""
        params = calculate_all_theoretical_params("66500", "5")

        assert params.theoretical_i0 == pytest.approx(2.5935)

    def test_missing_concentration(self):
        """Test missing input reported by name."""
        with pytest.raises(MissingParameterError) as exc_info:
            calculate_all_theoretical_params(66500, None)

        assert exc_info.value.parameters == ("concentration",)

    def test_to_dict(self):
        """Test nested serialization."""
        data = calculate_all_theoretical_params(66500, 5).to_dict()

        assert data["protein_type"] == "globular"
        assert data["dmax"]["shape"] == "globular"
        assert data["i0"]["constant_k"] == I0_PROTEIN_CONSTANT


# --- Tests for individual laws ---

class TestTheoreticalRg:
    """Tests for the Rg power laws."""

    def test_rg_per_protein_type(self):
        """Test class-specific power laws at MW 20000."""
        assert calculate_theoretical_rg(20000, "idp").theoretical_rg == pytest.approx(384.967, abs=1e-3)
        assert calculate_theoretical_rg(20000, "unfolded").theoretical_rg == pytest.approx(446.654, abs=1e-3)
        assert calculate_theoretical_rg(20000).predicted_rg == pytest.approx(17.7604, abs=1e-4)

    def test_unknown_type_falls_back_to_globular(self):
        """Test free-text selector fallback."""
        unknown = calculate_theoretical_rg(66500, "membrane")
        globular = calculate_theoretical_rg(66500, ProteinType.GLOBULAR)

        assert unknown.protein_type is ProteinType.GLOBULAR
        assert unknown.theoretical_rg == globular.theoretical_rg

    def test_formula_text(self):
        """Test the descriptive formula."""
        result = calculate_theoretical_rg(66500, "unfolded")

        assert result.formula == "Rg = 2.54 x MW^0.522"
        assert result.coefficient == 2.54
        assert result.exponent == 0.522

    @pytest.mark.parametrize("mw", [0, -100])
    def test_non_positive_mw(self, mw):
        """Test that Rg is undefined for MW <= 0."""
        with pytest.raises(DomainError):
            calculate_theoretical_rg(mw)


class TestTheoreticalI0:
    """Tests for I(0) from concentration and MW."""

    def test_empirical_constant(self):
        """Test I(0) = c * MW * 7.8e-6."""
        result = calculate_theoretical_i0(66500, 5)

        assert result.theoretical_i0 == pytest.approx(5 * 66500 * 7.8e-6)
        assert result.i0_per_concentration == pytest.approx(66500 * 7.8e-6)
        assert result.partial_specific_volume == 0.73

    def test_contrast_estimate(self):
        """Test the informational contrast chain."""
        contrast = calculate_theoretical_i0(66500, 5).contrast

        assert contrast.delta_rho_e_a3 == pytest.approx(0.106)
        assert contrast.delta_sld == pytest.approx(0.106e24 * 2.818e-13)
        assert contrast.molecular_volume == pytest.approx(66500 * 0.73 / 6.022e23)

    def test_zero_concentration(self):
        """Test that per-concentration I(0) is undefined at c = 0."""
        result = calculate_theoretical_i0(66500, 0)

        assert result.theoretical_i0 == 0
        assert math.isnan(result.i0_per_concentration)


class TestTheoreticalDmax:
    """Tests for Dmax from Rg."""

    @pytest.mark.parametrize(
        "shape, factor, low, high",
        [
            ("sphere", 2.58, 2.5, 2.7),
            ("globular", 2.8, 2.5, 3.0),
            ("elongated", 3.5, 3.0, 4.0),
        ],
    )
    def test_shape_factors(self, shape, factor, low, high):
        """Test Dmax and range per shape."""
        result = calculate_theoretical_dmax(20.0, shape)

        assert result.theoretical_dmax == pytest.approx(factor * 20.0)
        assert result.dmax_min == pytest.approx(low * 20.0)
        assert result.dmax_max == pytest.approx(high * 20.0)

    def test_unknown_shape_falls_back_to_globular(self):
        """Test free-text shape fallback."""
        assert calculate_theoretical_dmax(20.0, "disc").shape is ParticleShape.GLOBULAR


class TestBackCalculations:
    """Tests for MW from I(0) and Porod volume, and wavelength."""

    def test_mw_from_i0_inverts_theoretical_i0(self):
        """Test that MW from I(0) undoes the empirical constant."""
        assert calculate_mw_from_i0(2.5935, 5) == pytest.approx(66500)

    def test_mw_from_i0_zero_concentration(self):
        """Test division by zero concentration."""
        with pytest.raises(DomainError):
            calculate_mw_from_i0(2.5, 0)

    def test_porod_volume(self):
        """Test Vp = 2 pi^2 I0 / Q."""
        assert calculate_porod_volume(100.0, 0.5) == pytest.approx(2 * math.pi ** 2 * 200.0)

    def test_porod_volume_zero_invariant(self):
        """Test zero Porod invariant."""
        with pytest.raises(DomainError):
            calculate_porod_volume(100.0, 0)

    def test_mw_from_porod_volume(self):
        """Test MW ~ Vp / 1.66."""
        assert estimate_mw_from_porod_volume(166000) == pytest.approx(100000)

    def test_wavelength_from_energy(self):
        """Test lambda = 12.398 / E."""
        assert calculate_wavelength(12.398) == pytest.approx(1.0)
        assert calculate_wavelength(8.0) == pytest.approx(1.54975)

    def test_wavelength_requires_positive_energy(self):
        """Test E <= 0."""
        with pytest.raises(DomainError):
            calculate_wavelength(0)
