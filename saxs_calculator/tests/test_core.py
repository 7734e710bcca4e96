"""Tests for shared core helpers."""

import math

import pytest

from saxs_calculator.core import (
    CalculationError,
    DomainError,
    MissingParameterError,
    ProteinType,
    ParticleShape,
    CalculationOutcome,
    round_fixed,
    round_half_up,
    require_number,
    require_numbers,
)


class TestRounding:
    """Tests for spreadsheet-compatible rounding."""

    def test_round_fixed_uses_binary_value(self):
        """Test that ties are decided on the stored float."""
        # 1.005 is stored as 1.00499999999999989...
        assert round_fixed(1.005, 2) == 1.0
        # 2.675 is stored as 2.67499999999999982...
        assert round_fixed(2.675, 2) == 2.67
        assert round_fixed(0.125, 2) == 0.13

    def test_round_fixed_half_away_from_zero(self):
        """Test negative ties."""
        assert round_fixed(-0.125, 2) == -0.13
        assert round_fixed(2.5, 0) == 3.0

    def test_round_fixed_non_finite(self):
        """Test inf and nan pass through."""
        assert round_fixed(math.inf, 2) == math.inf
        assert math.isnan(round_fixed(math.nan, 2))

    def test_round_half_up(self):
        """Test ties toward positive infinity."""
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(-14.7) == -15
        assert isinstance(round_half_up(1.2), int)


class TestCoercion:
    """Tests for input coercion."""

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", True, float("nan")])
    def test_missing_values(self, value):
        """Test values treated as missing."""
        with pytest.raises(MissingParameterError) as exc_info:
            require_number("mw", value)

        assert exc_info.value.parameters == ("mw",)

    def test_numeric_strings(self):
        """Test string conversion."""
        assert require_number("mw", " 66500 ") == 66500.0

    def test_require_numbers_reports_all(self):
        """Test that every missing name is listed."""
        with pytest.raises(MissingParameterError, match="a, c"):
            require_numbers(a=None, b=1, c="x")


class TestErrorsAndTypes:
    """Tests for the error taxonomy and enumerations."""

    def test_errors_are_value_errors(self):
        """Test the common base classes."""
        assert issubclass(DomainError, CalculationError)
        assert issubclass(CalculationError, ValueError)

    def test_selector_defaults(self):
        """Test enum fallback for unknown selectors."""
        assert ProteinType.from_value("UNFOLDED") is ProteinType.UNFOLDED
        assert ProteinType.from_value(None) is ProteinType.GLOBULAR
        assert ParticleShape.from_value("rod") is ParticleShape.GLOBULAR

    def test_failed_outcome_to_dict(self):
        """Test failure serialization."""
        outcome = CalculationOutcome(
            name="guinier_fit",
            success=False,
            error_kind="insufficient_data",
            errors=["Not enough data points"],
        )

        assert outcome.to_dict() == {
            "name": "guinier_fit",
            "success": False,
            "result": None,
            "error_kind": "insufficient_data",
            "errors": ["Not enough data points"],
        }
