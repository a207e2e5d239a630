from __future__ import annotations

"""
Logistic-regression fits and multicollinearity checks on the recoded table.
Fitting is delegated to statsmodels; this module only assembles formulas and
tidies the output.
"""

import logging
from typing import Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm
import statsmodels.formula.api as smf
from statsmodels.stats.outliers_influence import variance_inflation_factor

from .constants import DEFAULT_ALPHA, OUTCOME, VIF_THRESHOLD

logger = logging.getLogger(__name__)


def build_formula(
    outcome: str,
    predictors: Sequence[str],
    interaction: tuple[str, str] | None = None,
) -> str:
    """Formula for main effects plus an optional `a:b` interaction term."""
    if not predictors:
        raise ValueError("At least one predictor is required")
    terms = list(predictors)
    if interaction is not None:
        left, right = interaction
        for name in (left, right):
            if name not in terms:
                terms.append(name)
        terms.append(f"{left}:{right}")
    return f"{outcome} ~ " + " + ".join(terms)


def coefficient_table(result, alpha: float = DEFAULT_ALPHA) -> pd.DataFrame:
    """Coefficients, standard errors, p-values and odds ratios of a fit."""
    table = pd.DataFrame(
        {
            "coef": result.params,
            "std_err": result.bse,
            "z": result.tvalues,
            "p_value": result.pvalues,
        }
    )
    table["odds_ratio"] = np.exp(table["coef"])
    table["significant"] = table["p_value"] < alpha
    return table


def fit_logit(
    df: pd.DataFrame,
    predictors: Sequence[str],
    outcome: str = OUTCOME,
    interaction: tuple[str, str] | None = None,
    alpha: float = DEFAULT_ALPHA,
):
    """
    Fit a logistic regression on the recoded table.

    Returns the statsmodels result and a tidy coefficient table.
    """
    formula = build_formula(outcome, predictors, interaction)
    logger.debug("Fitting logit: %s", formula)
    result = smf.logit(formula=formula, data=df).fit(disp=False)
    if not result.mle_retvals.get("converged", True):
        logger.warning("Logit did not converge: %s", formula)
    return result, coefficient_table(result, alpha=alpha)


def compute_vif(
    df: pd.DataFrame, predictors: Sequence[str], threshold: float = VIF_THRESHOLD
) -> pd.DataFrame:
    """
    Variance inflation factor per predictor.

    A constant is added to the design matrix so VIFs are measured around the
    intercept; the constant itself is not reported.
    """
    if not predictors:
        raise ValueError("At least one predictor is required")
    X = sm.add_constant(df[list(predictors)].astype(float), has_constant="add")
    values = X.values
    vif = pd.DataFrame(
        {
            "feature": list(predictors),
            "VIF": [variance_inflation_factor(values, i) for i in range(1, X.shape[1])],
        }
    )
    vif["high"] = vif["VIF"] > threshold
    for name in vif.loc[vif["high"], "feature"]:
        logger.warning("High VIF for %s (> %g)", name, threshold)
    return vif.sort_values("VIF", ascending=False).reset_index(drop=True)
