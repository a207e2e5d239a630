from __future__ import annotations

"""
In-sample summaries for fitted logit models: goodness of fit, scores at a
probability cut-off, and the strongest coefficients.
"""

import numpy as np
import pandas as pd
from sklearn import metrics


def _threshold_scores(y_true, probs, threshold: float) -> dict:
    y_true = np.asarray(y_true, dtype=int)
    probs = np.asarray(probs, dtype=float)
    preds = (probs >= threshold).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, average="binary", zero_division=0
    )
    # ROC-AUC needs both outcome levels
    if len(np.unique(y_true)) < 2:
        roc_auc = float("nan")
    else:
        roc_auc = metrics.roc_auc_score(y_true, probs)
    return {
        "accuracy": metrics.accuracy_score(y_true, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "brier": metrics.brier_score_loss(y_true, probs),
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def fit_summary(result, threshold: float = 0.5) -> dict:
    """
    Score a fitted statsmodels logit on the rows it was trained on.

    Adds McFadden's pseudo R-squared, AIC and the likelihood-ratio p-value
    against the intercept-only model to the threshold scores.
    """
    y_true = result.model.endog
    summary = _threshold_scores(y_true, result.predict(), threshold)
    summary.update(
        {
            "n_obs": int(result.nobs),
            "pseudo_r2": float(result.prsquared),
            "aic": float(result.aic),
            "llr_pvalue": float(result.llr_pvalue),
        }
    )
    return summary


def majority_baseline(y_true: np.ndarray | pd.Series, threshold: float = 0.5) -> dict:
    """Scores of always predicting the observed positive rate."""
    probs = np.full(len(y_true), float(np.mean(y_true)))
    return _threshold_scores(y_true, probs, threshold)


def summarize_coefficients(table: pd.DataFrame, top_k: int = 5) -> dict[str, pd.DataFrame]:
    """Largest positive and negative terms of a coefficient table, intercept excluded."""
    terms = table.drop(index="Intercept", errors="ignore").sort_values("coef")
    return {
        "positive": terms.tail(top_k)[::-1],
        "negative": terms.head(top_k),
    }
