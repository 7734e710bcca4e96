"""Core types for the SAXS calculator.

Provides the pieces shared by every calculator:
- Error taxonomy (SequenceError, InsufficientDataError, DomainError,
  MissingParameterError)
- Closed selector enumerations (ProteinType, ParticleShape)
- CalculationOutcome: tagged success/failure record
- Rounding helpers that reproduce the reference spreadsheet

Example:
    >>> from saxs_calculator.core import ProteinType, round_fixed
    >>> ProteinType.from_value("IDP")
    <ProteinType.IDP: 'idp'>
    >>> round_fixed(2.42169, 4)
    2.4217
"""

from .errors import (
    CalculationError,
    SequenceError,
    InsufficientDataError,
    DomainError,
    MissingParameterError,
)
from .dataclasses import (
    ProteinType,
    ParticleShape,
    CalculationOutcome,
    record_to_dict,
)
from .numeric import (
    round_fixed,
    round_half_up,
    require_number,
    require_numbers,
)

__all__ = [
    "CalculationError",
    "SequenceError",
    "InsufficientDataError",
    "DomainError",
    "MissingParameterError",
    "ProteinType",
    "ParticleShape",
    "CalculationOutcome",
    "record_to_dict",
    "round_fixed",
    "round_half_up",
    "require_number",
    "require_numbers",
]
