from __future__ import annotations

"""
Linearity-of-the-logit check for a continuous predictor.

The predictor range is cut into k equal-width intervals and the empirical
log-odds of the outcome is computed per interval. If logistic regression is
appropriate, those points should lie roughly on a straight line against the
mean predictor value of each bin.
"""

import logging
import numbers
from dataclasses import dataclass, field

import numpy as np
import pandas as pd
from statsmodels.nonparametric.smoothers_lowess import lowess

from .constants import DEFAULT_BINS, LOWESS_FRAC
from .exceptions import InsufficientDataError, InvalidCategoryError, UndefinedLogitWarning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgeBin:
    """
    One interval of the predictor. Intervals are [lower, upper) except the
    last one, which is [lower, upper] (closed_right=True).
    """

    lower: float
    upper: float
    closed_right: bool
    count: int
    p_hat: float
    mean_age: float
    logit: float
    logit_defined: bool

    @property
    def label(self) -> str:
        return f"[{self.lower:g}, {self.upper:g}{']' if self.closed_right else ')'}"


@dataclass(frozen=True)
class LogitLinearity:
    bins: tuple[AgeBin, ...]
    k: int
    edges: np.ndarray = field(compare=False, repr=False)
    warnings: tuple[UndefinedLogitWarning, ...] = field(default=(), compare=False)

    @property
    def undefined_bins(self) -> list[AgeBin]:
        return [b for b in self.bins if not b.logit_defined]

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "bin": b.label,
                "lower": b.lower,
                "upper": b.upper,
                "count": b.count,
                "p_hat": b.p_hat,
                "mean_age": b.mean_age,
                "logit": b.logit,
                "logit_defined": b.logit_defined,
            }
            for b in self.bins
        ]
        return pd.DataFrame(
            rows,
            columns=["bin", "lower", "upper", "count", "p_hat", "mean_age", "logit", "logit_defined"],
        )


def _validate_bins(k) -> int:
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1:
        raise InsufficientDataError(f"Bin count must be a positive integer, got {k!r}")
    return int(k)


def equal_width_edges(values: np.ndarray, k: int) -> np.ndarray:
    """
    k + 1 equally spaced edges spanning the observed range. A constant
    predictor gets its range widened by 0.5 on both sides.
    """
    lo, hi = float(values.min()), float(values.max())
    if lo == hi:
        lo, hi = lo - 0.5, hi + 0.5
    return np.linspace(lo, hi, k + 1)


def assign_bins(values: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """
    Bin index per value. Values on an interior edge go to the upper bin;
    the maximum goes to the last bin.
    """
    k = len(edges) - 1
    idx = np.digitize(values, edges) - 1
    return np.clip(idx, 0, k - 1)


def logit(p: float) -> float:
    """ln(p / (1 - p)); -inf at 0 and +inf at 1."""
    with np.errstate(divide="ignore"):
        return float(np.log(p) - np.log1p(-p))


def logit_linearity(predictor, outcome, k: int = DEFAULT_BINS) -> LogitLinearity:
    """
    Bin `predictor` into k equal-width intervals and compute the empirical
    log-odds of the 0/1 `outcome` in each non-empty bin.

    Bins where every outcome is 0 or every outcome is 1 are kept with
    logit_defined=False and reported in the result's `warnings`.
    """
    k = _validate_bins(k)
    x = np.asarray(predictor, dtype=float)
    y = np.asarray(outcome)

    if x.size == 0:
        raise InsufficientDataError("Predictor column is empty")
    if x.shape != y.shape:
        raise ValueError(f"Predictor and outcome lengths differ: {x.shape} vs {y.shape}")
    if not np.all(np.isfinite(x)):
        raise ValueError("Predictor contains missing or non-finite values")
    if not np.all(np.isin(y, (0, 1))):
        raise InvalidCategoryError("Outcome must be coded 0/1")
    y = y.astype(float)

    edges = equal_width_edges(x, k)
    idx = assign_bins(x, edges)

    bins = []
    undefined = []
    for i in range(k):
        mask = idx == i
        count = int(mask.sum())
        if count == 0:
            continue
        p_hat = float(y[mask].mean())
        value = logit(p_hat)
        defined = bool(np.isfinite(value))
        age_bin = AgeBin(
            lower=float(edges[i]),
            upper=float(edges[i + 1]),
            closed_right=i == k - 1,
            count=count,
            p_hat=p_hat,
            mean_age=float(x[mask].mean()),
            logit=value,
            logit_defined=defined,
        )
        bins.append(age_bin)
        if not defined:
            warning = UndefinedLogitWarning(age_bin.lower, age_bin.upper, p_hat)
            logger.warning("%s (n=%d)", warning, count)
            undefined.append(warning)

    logger.debug("Built %d non-empty bins out of %d", len(bins), k)
    return LogitLinearity(bins=tuple(bins), edges=edges, k=k, warnings=tuple(undefined))


def smooth_logits(result: LogitLinearity, frac: float = LOWESS_FRAC):
    """
    Lowess curve through the defined bin logits, as (mean_age, fitted).
    Undefined bins are left out of the fit.
    """
    defined = [b for b in result.bins if b.logit_defined]
    if len(defined) < 2:
        raise InsufficientDataError(
            f"Need at least two bins with a defined logit to smooth, got {len(defined)}"
        )
    xs = np.array([b.mean_age for b in defined])
    ys = np.array([b.logit for b in defined])
    fitted = lowess(ys, xs, frac=frac, return_sorted=True)
    return fitted[:, 0], fitted[:, 1]
