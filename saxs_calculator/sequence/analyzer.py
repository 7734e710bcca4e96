"""Protein sequence analysis.

Derives physical properties from a one-letter amino acid sequence:
- molecular weight (with peptide-bond water correction)
- dry volume and electron count
- 280 nm extinction coefficient (molar and mass based)
- partial specific volume and refractive index increment

Example:
    >>> from saxs_calculator.sequence import analyze_protein
    >>> result = analyze_protein("MKWVTFISLLLLFSSAYS")
    >>> round(result.molecular_weight, 3)
    2106.565
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping
import math

from ..configs import get_amino_acid_table
from ..core.errors import SequenceError, MissingParameterError
from ..core.dataclasses import record_to_dict
from ..core.numeric import round_fixed


AVOGADRO = 6.022e23
DNDC_PROTEIN = 0.185  # mL/g


@dataclass(frozen=True)
class ParsedSequence:
    """Result of cleaning and classifying a raw sequence string.

    Attributes
    ----------
    sequence : str
        Uppercased input with everything outside A-Z removed
    length : int
        Number of valid residues
    composition : Mapping[str, int]
        Residue code -> count, valid codes only
    invalid_chars : tuple[str, ...]
        Unrecognized letters, deduplicated, in first-seen order
    is_valid : bool
        True when there are no invalid letters and at least one residue
    """
    sequence: str
    length: int
    composition: Mapping[str, int]
    invalid_chars: tuple[str, ...]
    is_valid: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return record_to_dict(self)


@dataclass(frozen=True)
class ExtinctionCoefficient:
    """Molar extinction coefficient at 280 nm (M^-1 cm^-1) and its inputs."""
    epsilon: float
    n_trp: int
    n_tyr: int
    n_cys: int
    n_disulfide: int


@dataclass(frozen=True)
class ProteinAnalysisResult:
    """Physical properties derived from a protein sequence."""
    sequence: str
    length: int
    composition: Mapping[str, int]
    molecular_weight: float         # Da
    dry_volume: float               # A^3
    electron_count: int
    extinction: ExtinctionCoefficient
    epsilon_cm2_g: float            # cm^2/g
    partial_specific_volume: float  # cm^3/g
    dndc: float                     # mL/g

    @property
    def molecular_weight_kda(self) -> float:
        """Molecular weight in kDa."""
        return self.molecular_weight / 1000

    @property
    def iucr_params(self) -> dict[str, str]:
        """Formatted values for the IUCr publication table."""
        return {
            "mw": f"{round_fixed(self.molecular_weight, 2):.2f}",
            "vbar": f"{round_fixed(self.partial_specific_volume, 6):.6f}",
            "dndc": f"{round_fixed(self.dndc, 4):.4f}",
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = record_to_dict(self)
        data["molecular_weight_kda"] = self.molecular_weight_kda
        return data


def parse_sequence(raw: str) -> ParsedSequence:
    """Clean a raw sequence and count residues.

    Parameters
    ----------
    raw : str
        Sequence text; whitespace, digits and punctuation are ignored

    Returns
    -------
    ParsedSequence
        Cleaned sequence, composition and validity
    """
    if raw is None:
        raw = ""
    residues = get_amino_acid_table().residues

    cleaned = "".join(ch for ch in str(raw).upper() if "A" <= ch <= "Z")

    composition: dict[str, int] = {}
    invalid: list[str] = []
    n_valid = 0
    for ch in cleaned:
        if ch in residues:
            composition[ch] = composition.get(ch, 0) + 1
            n_valid += 1
        elif ch not in invalid:
            invalid.append(ch)

    return ParsedSequence(
        sequence=cleaned,
        length=n_valid,
        composition=MappingProxyType(composition),
        invalid_chars=tuple(invalid),
        is_valid=not invalid and n_valid > 0,
    )


def _total_residues(composition: Mapping[str, int]) -> int:
    residues = get_amino_acid_table().residues
    return sum(count for code, count in composition.items() if code in residues)


def calculate_molecular_weight(composition: Mapping[str, int]) -> float:
    """Molecular weight in Da.

    One water (18.015 Da) is removed per peptide bond, i.e. (n - 1) waters for
    n > 1 residues. A single residue keeps its table mass.
    """
    table = get_amino_acid_table()
    mw = 0.0
    for code, count in composition.items():
        if code in table.residues:
            mw += table.residues[code].molecular_weight * count

    n_residues = _total_residues(composition)
    if n_residues > 1:
        mw -= (n_residues - 1) * table.water_mw
    return mw


def calculate_dry_volume(composition: Mapping[str, int]) -> float:
    """Sum of residue volumes in A^3."""
    residues = get_amino_acid_table().residues
    volume = 0.0
    for code, count in composition.items():
        if code in residues:
            volume += residues[code].volume * count
    return volume


def calculate_electron_count(composition: Mapping[str, int]) -> int:
    """Total electrons, minus 10 per water lost to peptide bonds."""
    table = get_amino_acid_table()
    electrons = 0
    for code, count in composition.items():
        if code in table.residues:
            electrons += table.residues[code].electrons * count

    n_residues = _total_residues(composition)
    if n_residues > 1:
        electrons -= (n_residues - 1) * table.water_electrons
    return electrons


def calculate_extinction_coefficient(
    composition: Mapping[str, int],
    reduced_cysteine: bool = False,
) -> ExtinctionCoefficient:
    """Molar extinction coefficient at 280 nm.

    Parameters
    ----------
    composition : Mapping[str, int]
        Residue counts
    reduced_cysteine : bool, default=False
        If True, no disulfides are counted. Otherwise every pair of Cys is
        assumed to form a cystine.
    """
    coeffs = get_amino_acid_table().extinction_280nm
    n_trp = composition.get("W", 0)
    n_tyr = composition.get("Y", 0)
    n_cys = composition.get("C", 0)
    n_disulfide = 0 if reduced_cysteine else n_cys // 2

    epsilon = (
        n_trp * coeffs["W"]
        + n_tyr * coeffs["Y"]
        + n_disulfide * coeffs["C"]
    )
    return ExtinctionCoefficient(
        epsilon=epsilon,
        n_trp=n_trp,
        n_tyr=n_tyr,
        n_cys=n_cys,
        n_disulfide=n_disulfide,
    )


def calculate_partial_specific_volume(composition: Mapping[str, int]) -> float:
    """Partial specific volume in cm^3/g from dry volume and mass."""
    mw = calculate_molecular_weight(composition)
    if mw <= 0:
        raise MissingParameterError("composition", "Composition has no valid residues")
    dry_volume = calculate_dry_volume(composition)
    # A^3/molecule -> cm^3/mol
    return (dry_volume * 1e-24 * AVOGADRO) / mw


def calculate_dndc(mw: float | None = None) -> float:
    """Refractive index increment (mL/g).

    Fixed at the typical protein value; not composition dependent.
    """
    return DNDC_PROTEIN


def calculate_epsilon_cm2_g(extinction: ExtinctionCoefficient | float, mw: float) -> float:
    """Convert a molar extinction coefficient to cm^2/g."""
    epsilon = extinction.epsilon if isinstance(extinction, ExtinctionCoefficient) else extinction
    if not mw or math.isnan(mw):
        raise MissingParameterError("mw")
    return (epsilon / mw) * 1000


def analyze_protein(raw: str, reduced_cysteine: bool = False) -> ProteinAnalysisResult:
    """Full sequence analysis.

    Parameters
    ----------
    raw : str
        One-letter sequence (case and non-letters ignored)
    reduced_cysteine : bool, default=False
        Treat all cysteines as reduced (no disulfide contribution to epsilon)

    Returns
    -------
    ProteinAnalysisResult

    Raises
    ------
    SequenceError
        If no valid residues were found or unrecognized letters are present
    """
    parsed = parse_sequence(raw)

    if not parsed.is_valid:
        if parsed.length == 0:
            message = "Please enter a valid protein sequence (no valid residues found)"
        else:
            message = (
                "Sequence contains unrecognized characters: "
                f"{', '.join(parsed.invalid_chars)}"
            )
        raise SequenceError(message, parsed=parsed)

    composition = parsed.composition
    mw = calculate_molecular_weight(composition)
    extinction = calculate_extinction_coefficient(composition, reduced_cysteine)

    return ProteinAnalysisResult(
        sequence=parsed.sequence,
        length=parsed.length,
        composition=composition,
        molecular_weight=mw,
        dry_volume=calculate_dry_volume(composition),
        electron_count=calculate_electron_count(composition),
        extinction=extinction,
        epsilon_cm2_g=calculate_epsilon_cm2_g(extinction, mw),
        partial_specific_volume=calculate_partial_specific_volume(composition),
        dndc=calculate_dndc(mw),
    )
