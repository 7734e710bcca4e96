"""Loader for the embedded calibration tables.

Tables ship as JSON files next to this module and are read once per process:
- amino_acids.json: residue masses, volumes, electrons, 280 nm extinction
- sec_columns.json: SEC column calibration (Ve = a + b ln MW) per pore size
- detector_references.json: reference proteins for detector distance

The directory can be overridden with the SAXS_CALCULATOR_CONFIG_DIR
environment variable (same file names). Loaded tables are exposed through
read-only mappings.

Usage:
    >>> from saxs_calculator.configs import get_amino_acid_table, get_sec_column
    >>> table = get_amino_acid_table()
    >>> table.residues["W"].molecular_weight
    204.23
    >>> get_sec_column("300").b
    -0.337337
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping
import json
import os


CONFIG_DIR_ENV = "SAXS_CALCULATOR_CONFIG_DIR"


@dataclass(frozen=True)
class AminoAcidProperties:
    """Properties of a single amino acid.

    Attributes
    ----------
    code : str
        One-letter residue code
    name : str
        Three-letter name (e.g. "Trp")
    molecular_weight : float
        Free amino acid mass in Da
    volume : float
        Residue volume in A^3
    electrons : int
        Electron count
    """
    code: str
    name: str
    molecular_weight: float
    volume: float
    electrons: int

    @classmethod
    def from_dict(cls, data: dict) -> "AminoAcidProperties":
        """Create from dictionary (JSON)."""
        return cls(
            code=data["code"],
            name=data["name"],
            molecular_weight=float(data["mw"]),
            volume=float(data["volume"]),
            electrons=int(data["electrons"]),
        )


@dataclass(frozen=True)
class AminoAcidTable:
    """Residue table plus the constants used with it."""
    residues: Mapping[str, AminoAcidProperties]
    water_mw: float
    water_electrons: int
    extinction_280nm: Mapping[str, float]

    @classmethod
    def from_dict(cls, data: dict) -> "AminoAcidTable":
        """Create from dictionary (JSON)."""
        residues = {
            entry["code"]: AminoAcidProperties.from_dict(entry)
            for entry in data.get("residues", [])
        }
        return cls(
            residues=MappingProxyType(residues),
            water_mw=float(data.get("water_mw", 18.015)),
            water_electrons=int(data.get("water_electrons", 10)),
            extinction_280nm=MappingProxyType(dict(data.get("extinction_280nm", {}))),
        )

    @property
    def codes(self) -> list[str]:
        """Valid one-letter codes."""
        return list(self.residues.keys())


@dataclass(frozen=True)
class SecColumn:
    """SEC column calibration: Ve (mL) = a + b * ln(MW)."""
    pore_size: str
    a: float
    b: float

    @classmethod
    def from_dict(cls, data: dict) -> "SecColumn":
        """Create from dictionary (JSON)."""
        return cls(
            pore_size=str(data["pore_size"]),
            a=float(data["a"]),
            b=float(data["b"]),
        )


@dataclass(frozen=True)
class SecColumnTable:
    """All calibrated SEC columns."""
    columns: Mapping[str, SecColumn]
    default_pore_size: str
    default_flow_rate: float

    @classmethod
    def from_dict(cls, data: dict) -> "SecColumnTable":
        """Create from dictionary (JSON)."""
        columns = {
            str(entry["pore_size"]): SecColumn.from_dict(entry)
            for entry in data.get("columns", [])
        }
        return cls(
            columns=MappingProxyType(columns),
            default_pore_size=str(data.get("default_pore_size", "100")),
            default_flow_rate=float(data.get("default_flow_rate", 0.35)),
        )


@dataclass(frozen=True)
class ReferenceProtein:
    """Measured reference point for the detector distance calibration."""
    name: str
    mw: float
    rg: float
    qmin: float
    sd_mm: float

    @classmethod
    def from_dict(cls, data: dict) -> "ReferenceProtein":
        """Create from dictionary (JSON)."""
        return cls(
            name=data["name"],
            mw=float(data["mw"]),
            rg=float(data["rg"]),
            qmin=float(data["qmin"]),
            sd_mm=float(data["sd_mm"]),
        )


@dataclass(frozen=True)
class DetectorReferences:
    """Reference proteins; ``anchor`` is the one used for calibration."""
    proteins: Mapping[str, ReferenceProtein]
    anchor_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "DetectorReferences":
        """Create from dictionary (JSON)."""
        proteins = {
            entry["name"]: ReferenceProtein.from_dict(entry)
            for entry in data.get("proteins", [])
        }
        anchor = data.get("anchor") or next(iter(proteins))
        if anchor not in proteins:
            raise ValueError(f"Anchor protein '{anchor}' not in reference table")
        return cls(proteins=MappingProxyType(proteins), anchor_name=anchor)

    @property
    def anchor(self) -> ReferenceProtein:
        """Calibration anchor protein."""
        return self.proteins[self.anchor_name]


# Module-level cache for loaded tables
_table_cache: dict[str, Any] = {}


def _get_configs_dir() -> Path:
    """Get the configs directory path.

    Resolution order:
    1. SAXS_CALCULATOR_CONFIG_DIR environment variable (if it exists)
    2. Directory of this module
    """
    env_path = os.environ.get(CONFIG_DIR_ENV)
    if env_path and Path(env_path).is_dir():
        return Path(env_path)
    return Path(__file__).parent


def _load_json_config(path: Path) -> dict:
    """Load a JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_table(filename: str, factory):
    if filename in _table_cache:
        return _table_cache[filename]

    config_path = _get_configs_dir() / filename
    if not config_path.exists():
        raise ValueError(f"Calibration table not found: {config_path}")

    table = factory(_load_json_config(config_path))
    _table_cache[filename] = table
    return table


def get_amino_acid_table() -> AminoAcidTable:
    """Get the amino acid property table.

    Returns
    -------
    AminoAcidTable
        Residues keyed by one-letter code, water constants, 280 nm extinction
    """
    return _load_table("amino_acids.json", AminoAcidTable.from_dict)


def get_sec_column_table() -> SecColumnTable:
    """Get the SEC column calibration table."""
    return _load_table("sec_columns.json", SecColumnTable.from_dict)


def get_sec_column(pore_size: str | int | None) -> SecColumn:
    """Get calibration for one pore size.

    Parameters
    ----------
    pore_size : str or int
        Pore size in A ("100", "150", "300"). Unknown sizes fall back to the
        table default (100 A).

    Returns
    -------
    SecColumn
        Calibration coefficients
    """
    table = get_sec_column_table()
    key = str(pore_size).strip() if pore_size is not None else table.default_pore_size
    return table.columns.get(key, table.columns[table.default_pore_size])


def get_detector_references() -> DetectorReferences:
    """Get the detector-distance reference proteins."""
    return _load_table("detector_references.json", DetectorReferences.from_dict)


def list_pore_sizes() -> list[str]:
    """List calibrated SEC pore sizes."""
    return sorted(get_sec_column_table().columns.keys(), key=int)


def list_reference_proteins() -> list[str]:
    """List detector-distance reference protein names."""
    return list(get_detector_references().proteins.keys())


def clear_cache() -> None:
    """Clear the table cache (useful for testing)."""
    _table_cache.clear()
