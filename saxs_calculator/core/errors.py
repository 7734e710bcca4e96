"""Error taxonomy shared by all calculators.

Each calculator raises one of these when it cannot produce a result:
- SequenceError: invalid or empty protein sequence
- InsufficientDataError: too few points for a Guinier fit
- DomainError: result undefined for the given data (e.g. positive Guinier slope)
- MissingParameterError: a required scalar is absent or non-numeric

All derive from CalculationError (a ValueError), so callers that only care
about "bad input" can catch one type. The session layer turns these into
CalculationOutcome records instead of letting them propagate to a UI.
"""

from typing import Iterable


class CalculationError(ValueError):
    """Base class for calculator failures."""

    kind: str = "calculation"


class SequenceError(CalculationError):
    """Protein sequence contains no valid residues or unknown characters.

    Attributes
    ----------
    parsed : ParsedSequence or None
        Parse result that failed validation
    """

    kind = "sequence"

    def __init__(self, message: str, parsed=None):
        super().__init__(message)
        self.parsed = parsed


class InsufficientDataError(CalculationError):
    """Fewer points than required are available for a fit."""

    kind = "insufficient_data"

    def __init__(self, message: str, n_points: int = 0):
        super().__init__(message)
        self.n_points = n_points


class DomainError(CalculationError):
    """Result is mathematically undefined for the given data."""

    kind = "domain"


class MissingParameterError(CalculationError):
    """One or more required parameters are missing or non-numeric.

    Attributes
    ----------
    parameters : tuple[str, ...]
        Names of the offending parameters
    """

    kind = "missing_parameter"

    def __init__(self, parameters: str | Iterable[str], message: str | None = None):
        if isinstance(parameters, str):
            parameters = (parameters,)
        self.parameters = tuple(parameters)
        if message is None:
            message = f"Missing or non-numeric parameter(s): {', '.join(self.parameters)}"
        super().__init__(message)
