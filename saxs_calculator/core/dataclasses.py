"""Core value types shared across calculators.

- ProteinType: closed set of Rg scaling-law classes
- ParticleShape: closed set of Dmax/Rg shape classes
- CalculationOutcome: tagged success/failure record returned to UI consumers

Both enumerations resolve unknown input to their default member instead of
raising, so a free-text selector never aborts a calculation.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any


class ProteinType(Enum):
    """Protein class selecting the Rg power law."""
    GLOBULAR = "globular"
    UNFOLDED = "unfolded"
    IDP = "idp"

    @classmethod
    def from_value(cls, value: "str | ProteinType | None") -> "ProteinType":
        """Resolve a selector value, defaulting to GLOBULAR."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.GLOBULAR


class ParticleShape(Enum):
    """Particle shape selecting the Dmax/Rg ratio."""
    SPHERE = "sphere"
    GLOBULAR = "globular"
    ELONGATED = "elongated"

    @classmethod
    def from_value(cls, value: "str | ParticleShape | None") -> "ParticleShape":
        """Resolve a selector value, defaulting to GLOBULAR."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.GLOBULAR


def record_to_dict(record: Any) -> Any:
    """Convert a (possibly nested) result record to plain Python types.

    Enums become their values; mappings and tuples are copied recursively.
    """
    if is_dataclass(record) and not isinstance(record, type):
        return {f.name: record_to_dict(getattr(record, f.name)) for f in fields(record)}
    if isinstance(record, Enum):
        return record.value
    if isinstance(record, dict):
        return {key: record_to_dict(value) for key, value in record.items()}
    if isinstance(record, (list, tuple)):
        return [record_to_dict(value) for value in record]
    if hasattr(record, "items"):
        return {key: record_to_dict(value) for key, value in record.items()}
    return record


@dataclass(frozen=True)
class CalculationOutcome:
    """Tagged result of one calculator invocation.

    Attributes
    ----------
    name : str
        Calculator name (e.g. "protein_analysis", "hplc_schedule")
    success : bool
        Whether the calculation produced a result
    result : Any
        Result record, or None on failure
    error_kind : str or None
        Error category ("sequence", "insufficient_data", "domain",
        "missing_parameter") on failure
    errors : list[str]
        Human-readable messages from the failing calculator
    """
    name: str
    success: bool
    result: Any = None
    error_kind: str | None = None
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = self.result
        if result is not None and hasattr(result, "to_dict"):
            result = result.to_dict()
        return {
            "name": self.name,
            "success": self.success,
            "result": result,
            "error_kind": self.error_kind,
            "errors": list(self.errors),
        }
