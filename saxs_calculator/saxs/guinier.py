"""Guinier analysis of a scattering curve.

In the small-q region ln I(q) = ln I(0) - (Rg^2 / 3) q^2, so an ordinary
least-squares line through (q^2, ln I) gives I(0) from the intercept and Rg
from the slope.

Example:
    >>> import numpy as np
    >>> q = np.linspace(0.005, 0.04, 50)
    >>> intensity = 100 * np.exp(-(q * 30) ** 2 / 3)
    >>> fit = guinier_analysis(q, intensity)
    >>> round(fit.rg, 3), round(fit.i0, 3)
    (30.0, 100.0)
"""

from dataclasses import dataclass
from typing import Any, Sequence
import math

import numpy as np
import pandas as pd

from ..core.errors import InsufficientDataError, DomainError, MissingParameterError
from ..core.dataclasses import record_to_dict
from ..core.numeric import require_numbers


MIN_GUINIER_POINTS = 3
GUINIER_QRG_LIMIT = 1.3


@dataclass(frozen=True)
class GuinierFitResult:
    """Linear Guinier fit.

    Attributes
    ----------
    i0 : float
        Extrapolated zero-angle intensity, exp(intercept)
    rg : float
        Radius of gyration in the inverse units of q
    slope : float
        Slope of ln I versus q^2 (-Rg^2 / 3)
    intercept : float
        Intercept of ln I versus q^2 (ln I0)
    r2 : float
        Coefficient of determination of the line
    n_points : int
        Number of points used
    q_min_fit : float
        Smallest q used in the fit
    q_max_fit : float
        Largest q used in the fit
    """
    i0: float
    rg: float
    slope: float
    intercept: float
    r2: float
    n_points: int
    q_min_fit: float
    q_max_fit: float

    @property
    def q_rg_max(self) -> float:
        """qRg at the upper end of the fitted range (should stay below 1.3)."""
        return self.q_max_fit * self.rg

    @property
    def within_guinier_limit(self) -> bool:
        """Whether the fitted range satisfies qRg < 1.3."""
        return self.q_rg_max < GUINIER_QRG_LIMIT

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = record_to_dict(self)
        data["q_rg_max"] = self.q_rg_max
        return data


def _select_guinier_points(
    q: np.ndarray,
    intensity: np.ndarray,
    q_min: float,
    q_max: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (q, I) restricted to the window with positive intensity."""
    mask = (q >= q_min) & (q <= q_max) & (intensity > 0)
    return q[mask], intensity[mask]


def guinier_analysis(
    q: Sequence[float] | np.ndarray,
    intensity: Sequence[float] | np.ndarray,
    q_min: float = 0.0,
    q_max: float = math.inf,
) -> GuinierFitResult:
    """Fit ln I against q^2 within [q_min, q_max].

    Parameters
    ----------
    q : array-like
        Scattering vector values
    intensity : array-like
        Intensities paired with ``q``
    q_min, q_max : float
        Inclusive fit window. Points with I <= 0 are always dropped.

    Returns
    -------
    GuinierFitResult

    Raises
    ------
    MissingParameterError
        If q and intensity have different lengths, or a window bound is
        missing or not numeric
    InsufficientDataError
        If fewer than 3 points qualify (including empty input)
    DomainError
        If the fitted slope is not negative, so Rg is undefined
    """
    window = require_numbers(q_min=q_min, q_max=q_max)
    q_min, q_max = window["q_min"], window["q_max"]

    q_arr = np.asarray(q, dtype=float).ravel()
    i_arr = np.asarray(intensity, dtype=float).ravel()
    if q_arr.shape != i_arr.shape:
        raise MissingParameterError(
            ("q", "intensity"),
            f"q has {q_arr.size} values but intensity has {i_arr.size}",
        )

    q_fit, i_fit = _select_guinier_points(q_arr, i_arr, q_min, q_max)
    n = int(q_fit.size)
    if n < MIN_GUINIER_POINTS:
        raise InsufficientDataError(
            f"Not enough data points in Guinier range: {n} (need {MIN_GUINIER_POINTS})",
            n_points=n,
        )

    x = q_fit ** 2
    y = np.log(i_fit)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise DomainError("All fitted points share the same q; slope is undefined")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    if slope >= 0:
        raise DomainError(
            f"Guinier slope is {slope:.4g} (>= 0); Rg is undefined for this range"
        )

    y_mean = sum_y / n
    y_pred = intercept + slope * x
    ss_tot = float(np.sum((y - y_mean) ** 2))
    ss_res = float(np.sum((y - y_pred) ** 2))
    r2 = 1 - ss_res / ss_tot if ss_tot > 0 else 1.0

    return GuinierFitResult(
        i0=math.exp(intercept),
        rg=math.sqrt(-3 * slope),
        slope=slope,
        intercept=intercept,
        r2=r2,
        n_points=n,
        q_min_fit=float(q_fit.min()),
        q_max_fit=float(q_fit.max()),
    )


def guinier_fit_line(result: GuinierFitResult, q: Sequence[float] | np.ndarray) -> pd.DataFrame:
    """Model line for plotting consumers.

    Returns
    -------
    pd.DataFrame
        Columns 'q', 'q2', 'ln_i_fit' and 'i_fit'
    """
    q_arr = np.asarray(q, dtype=float).ravel()
    q2 = q_arr ** 2
    ln_i = result.intercept + result.slope * q2
    return pd.DataFrame({
        "q": q_arr,
        "q2": q2,
        "ln_i_fit": ln_i,
        "i_fit": np.exp(ln_i),
    })
