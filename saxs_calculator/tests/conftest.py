"""Shared pytest fixtures and configuration.

This module provides common fixtures used across test modules:
- Reference sequences and inputs with known results
- Synthetic Guinier curves
- A clean configuration cache per test
"""

import numpy as np
import pytest

from saxs_calculator.configs import clear_cache


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_config_cache(monkeypatch):
    """Load calibration tables from the packaged directory for every test."""
    monkeypatch.delenv("SAXS_CALCULATOR_CONFIG_DIR", raising=False)
    clear_cache()
    yield
    clear_cache()


# =============================================================================
# Sequence Fixtures
# =============================================================================

@pytest.fixture
def short_sequence():
    """18-residue signal peptide of serum albumin."""
    return "MKWVTFISLLLLFSSAYS"


@pytest.fixture
def cysteine_sequence():
    """Short peptide with one Trp, one Tyr and two Cys."""
    return "GAWYCC"


# =============================================================================
# SAXS Curve Fixtures
# =============================================================================

@pytest.fixture
def guinier_curve():
    """Ideal Guinier curve with I0 = 100 and Rg = 30 A."""
    q = np.linspace(0.005, 0.04, 50)
    intensity = 100.0 * np.exp(-((q * 30.0) ** 2) / 3.0)
    return q, intensity


# =============================================================================
# HPLC Fixtures
# =============================================================================

@pytest.fixture
def standard_schedule_inputs():
    """Pre-run peak at 10.937 min, 1 min FWHM, 100 uL at 0.35 mL/min."""
    return {
        "peak_center": 10.937,
        "peak_fwhm": 1,
        "injection_volume": 100,
        "target_flow_rate": 0.35,
        "initial_flow_rate": 0.35,
    }


@pytest.fixture
def standard_schedule(standard_schedule_inputs):
    """Schedule for the standard inputs."""
    from saxs_calculator.hplc import calculate_hplc_saxs_settings

    return calculate_hplc_saxs_settings(**standard_schedule_inputs)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
