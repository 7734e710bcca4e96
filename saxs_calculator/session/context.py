"""Caller-owned calculator session.

Holds the last protein analysis and the last SAXS measurement so later
calculations (theoretical parameters, detector distance, IUCr table) can
reuse them. Every calculator call is wrapped into a CalculationOutcome;
a failure is logged and reported, never raised, and leaves the stored
state untouched.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence
import logging

import numpy as np
import pandas as pd

from ..core.dataclasses import CalculationOutcome, ProteinType, record_to_dict
from ..core.errors import CalculationError, DomainError
from ..core.numeric import require_number, require_numbers, round_fixed
from ..sequence import ProteinAnalysisResult, analyze_protein
from ..saxs import (
    TheoreticalParameterSet,
    calculate_all_theoretical_params,
    calculate_detector_distance,
    calculate_wavelength,
    estimate_mw_from_porod_volume,
    guinier_analysis,
)
from ..hplc import calculate_hplc_saxs_settings

logger = logging.getLogger(__name__)


MISSING = "-"

IUCR_COLUMNS = ["Section", "Parameter", "Value"]


@dataclass(frozen=True)
class SaxsMeasurement:
    """Experimental SAXS values entered or fitted for one sample.

    Only concentration and X-ray energy are required; every other value is
    optional and shown as missing in the IUCr table when absent.
    """
    concentration: float        # mg/mL
    xray_energy: float          # keV
    wavelength: float           # A
    i0_guinier: float | None = None
    rg_guinier: float | None = None
    i0_pr: float | None = None
    rg_pr: float | None = None
    dmax: float | None = None
    porod_volume: float | None = None   # A^3
    mw_from_porod: float | None = None  # Da
    theoretical: TheoreticalParameterSet | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


def _optional_number(name: str, value: Any) -> float | None:
    if value is None:
        return None
    return require_number(name, value)


def _format_fixed(value: float | None, digits: int) -> str:
    if value is None:
        return MISSING
    return f"{round_fixed(value, digits):.{digits}f}"


def _format_plain(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:g}"


def _format_grouped(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:,.3f}".rstrip("0").rstrip(".")


class CalculatorSession:
    """Explicit state for one analysis session.

    Example:
        >>> session = CalculatorSession()
        >>> outcome = session.analyze_protein("MKWVTFISLLLLFSSAYS", name="Test")
        >>> outcome.success
        True
        >>> session.record_saxs_measurement(concentration=2.0, xray_energy=12.4).success
        True
        >>> table = session.iucr_table()
        >>> table.loc[table["Parameter"] == "Molecular weight from sequence (Da)", "Value"].item()
        '2106.57'
    """

    def __init__(self):
        self.protein: ProteinAnalysisResult | None = None
        self.protein_name: str = ""
        self.measurement: SaxsMeasurement | None = None

    def _run(self, name: str, func: Callable[..., Any], *args, **kwargs) -> CalculationOutcome:
        try:
            result = func(*args, **kwargs)
        except CalculationError as e:
            logger.error(f"{name} failed: {e}")
            return CalculationOutcome(
                name=name,
                success=False,
                error_kind=e.kind,
                errors=[str(e)],
            )
        return CalculationOutcome(name=name, success=True, result=result)

    @property
    def protein_mw(self) -> float | None:
        """Molecular weight of the stored protein, if any."""
        return self.protein.molecular_weight if self.protein is not None else None

    def reset(self):
        """Forget the stored protein and measurement."""
        self.protein = None
        self.protein_name = ""
        self.measurement = None

    def analyze_protein(
        self,
        sequence: str,
        name: str = "",
        reduced_cysteine: bool = False,
    ) -> CalculationOutcome:
        """Analyze a sequence and keep the result for later calculations."""
        outcome = self._run(
            "protein_analysis",
            analyze_protein,
            sequence,
            reduced_cysteine=reduced_cysteine,
        )
        if outcome.success:
            self.protein = outcome.result
            self.protein_name = name
            logger.info(
                f"Stored protein '{name}': {self.protein.length} residues, "
                f"{self.protein.molecular_weight:.2f} Da"
            )
        return outcome

    def _resolve_mw(self, mw: Any) -> float:
        if mw is None:
            if self.protein is None:
                raise DomainError("No molecular weight given and no protein analyzed")
            return self.protein.molecular_weight
        return require_number("mw", mw)

    def theoretical_params(
        self,
        concentration: float,
        mw: float | None = None,
        protein_type: str | ProteinType = ProteinType.GLOBULAR,
    ) -> CalculationOutcome:
        """Theoretical I(0), Rg and Dmax; ``mw`` defaults to the stored protein."""
        def compute():
            return calculate_all_theoretical_params(self._resolve_mw(mw), concentration, protein_type)

        return self._run("theoretical_params", compute)

    def detector_distance(self, value: float | None = None, input_type: str = "mw") -> CalculationOutcome:
        """Detector distance recommendation; by MW of the stored protein when no value is given."""
        def compute():
            if value is None and input_type == "mw":
                return calculate_detector_distance(self._resolve_mw(None), "mw")
            return calculate_detector_distance(value, input_type)

        return self._run("detector_distance", compute)

    def fit_guinier(
        self,
        q: Sequence[float] | np.ndarray,
        intensity: Sequence[float] | np.ndarray,
        q_min: float = 0.0,
        q_max: float = np.inf,
    ) -> CalculationOutcome:
        """Guinier fit of a measured curve (not stored)."""
        return self._run("guinier_fit", guinier_analysis, q, intensity, q_min=q_min, q_max=q_max)

    def hplc_schedule(
        self,
        peak_center: float,
        peak_fwhm: float,
        injection_volume: float,
        target_flow_rate: float,
        initial_flow_rate: float,
    ) -> CalculationOutcome:
        """HPLC-SAXS run settings."""
        return self._run(
            "hplc_schedule",
            calculate_hplc_saxs_settings,
            peak_center,
            peak_fwhm,
            injection_volume,
            target_flow_rate,
            initial_flow_rate,
        )

    def record_saxs_measurement(
        self,
        concentration: float,
        xray_energy: float,
        i0_guinier: float | None = None,
        rg_guinier: float | None = None,
        i0_pr: float | None = None,
        rg_pr: float | None = None,
        dmax: float | None = None,
        porod_volume: float | None = None,
    ) -> CalculationOutcome:
        """Store measured SAXS values for the IUCr table.

        The wavelength follows from the X-ray energy and the MW from a
        positive Porod volume. With a stored protein the theoretical
        parameters (globular) are attached as well.
        """
        def compute():
            required = require_numbers(concentration=concentration, xray_energy=xray_energy)
            porod = _optional_number("porod_volume", porod_volume)
            mw_from_porod = None
            if porod is not None and porod > 0:
                mw_from_porod = estimate_mw_from_porod_volume(porod)

            theoretical = None
            if self.protein is not None:
                theoretical = calculate_all_theoretical_params(
                    self.protein.molecular_weight,
                    required["concentration"],
                    ProteinType.GLOBULAR,
                )

            return SaxsMeasurement(
                concentration=required["concentration"],
                xray_energy=required["xray_energy"],
                wavelength=calculate_wavelength(required["xray_energy"]),
                i0_guinier=_optional_number("i0_guinier", i0_guinier),
                rg_guinier=_optional_number("rg_guinier", rg_guinier),
                i0_pr=_optional_number("i0_pr", i0_pr),
                rg_pr=_optional_number("rg_pr", rg_pr),
                dmax=_optional_number("dmax", dmax),
                porod_volume=porod,
                mw_from_porod=mw_from_porod,
                theoretical=theoretical,
            )

        outcome = self._run("saxs_measurement", compute)
        if outcome.success:
            self.measurement = outcome.result
            logger.info(
                f"Stored SAXS measurement: c={self.measurement.concentration} mg/mL, "
                f"lambda={self.measurement.wavelength:.5f} A"
            )
        return outcome

    def iucr_table(self) -> pd.DataFrame:
        """IUCr publication summary of the stored protein and measurement.

        Returns
        -------
        pd.DataFrame
            Columns Section, Parameter, Value; values are display strings
            with "-" for anything not available
        """
        protein = self.protein
        saxs = self.measurement

        rows = [
            ("Sample", "Protein", (self.protein_name or MISSING) if protein else MISSING),
            ("Sample", "Dry volume from sequence (A^3)",
             _format_fixed(protein.dry_volume if protein else None, 1)),
            ("Sample", "Partial specific volume (cm^3/g)",
             _format_fixed(protein.partial_specific_volume if protein else None, 6)),
            ("Sample", "Molecular weight from sequence (Da)",
             _format_fixed(protein.molecular_weight if protein else None, 2)),
            ("Data collection", "Wavelength (A)",
             _format_fixed(saxs.wavelength if saxs else None, 5)),
            ("Data collection", "Concentration (mg/mL)",
             _format_plain(saxs.concentration if saxs else None)),
            ("Structural parameters", "I(0) from P(r) (cm^-1)",
             _format_fixed(saxs.i0_pr if saxs else None, 5)),
            ("Structural parameters", "Rg from P(r) (A)",
             _format_fixed(saxs.rg_pr if saxs else None, 2)),
            ("Structural parameters", "I(0) from Guinier (cm^-1)",
             _format_fixed(saxs.i0_guinier if saxs else None, 5)),
            ("Structural parameters", "Rg from Guinier (A)",
             _format_fixed(saxs.rg_guinier if saxs else None, 2)),
            ("Structural parameters", "Dmax (A)",
             _format_plain(saxs.dmax if saxs else None)),
            ("Structural parameters", "Porod volume (A^3)",
             _format_grouped(saxs.porod_volume if saxs else None)),
            ("Molecular mass", "Molecular weight from Porod volume (Da)",
             _format_fixed(saxs.mw_from_porod if saxs else None, 0)),
        ]
        return pd.DataFrame(rows, columns=IUCR_COLUMNS)
