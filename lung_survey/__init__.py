"""
Exploratory analysis and logistic-regression assumption checks for the
lung-cancer survey dataset.

This package contains the recoder for the raw survey table, the
linearity-of-the-logit diagnostic, descriptive summaries, statsmodels fits
(logit, interaction model, VIF) and plotting helpers used by main.py.
"""

from .constants import AGE, GENDER, OUTCOME, SURVEY_INDICATORS
from .data_prep import load_survey, recode_survey, split_features
from .describe import cancer_rate_by, correlation_matrix, describe_survey, frequency_table
from .exceptions import (
    InsufficientDataError,
    InvalidCategoryError,
    InvalidOrdinalError,
    UndefinedLogitWarning,
)
from .linearity import AgeBin, LogitLinearity, logit_linearity, smooth_logits
from .metrics import fit_summary, summarize_coefficients
from .models import build_formula, compute_vif, fit_logit

__all__ = [
    "AGE",
    "GENDER",
    "OUTCOME",
    "SURVEY_INDICATORS",
    "load_survey",
    "recode_survey",
    "split_features",
    "cancer_rate_by",
    "correlation_matrix",
    "describe_survey",
    "frequency_table",
    "InsufficientDataError",
    "InvalidCategoryError",
    "InvalidOrdinalError",
    "UndefinedLogitWarning",
    "AgeBin",
    "LogitLinearity",
    "logit_linearity",
    "smooth_logits",
    "fit_summary",
    "summarize_coefficients",
    "build_formula",
    "compute_vif",
    "fit_logit",
]
