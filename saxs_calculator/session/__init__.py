"""Caller-owned session state and the IUCr summary table.

Example:
    >>> from saxs_calculator.session import CalculatorSession
    >>> session = CalculatorSession()
    >>> outcome = session.analyze_protein("MKX")
    >>> outcome.success, outcome.error_kind
    (False, 'sequence')
"""

from .context import (
    MISSING,
    SaxsMeasurement,
    CalculatorSession,
)

__all__ = [
    "MISSING",
    "SaxsMeasurement",
    "CalculatorSession",
]
