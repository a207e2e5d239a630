from __future__ import annotations

"""
Descriptive summaries of a recoded survey table.
"""

from typing import Iterable

import pandas as pd

from .constants import AGE, GENDER, OUTCOME


def describe_survey(df: pd.DataFrame, outcome: str = OUTCOME) -> dict:
    """Size, balance and age range of the recoded table."""
    return {
        "num_records": len(df),
        "positive_rate": float(df[outcome].mean()),
        "age_range": (df[AGE].min(), df[AGE].max()),
        "male_share": float(df[GENDER].mean()),
        "feature_count": df.shape[1] - 1,
    }


def frequency_table(df: pd.DataFrame, column: str, outcome: str = OUTCOME) -> pd.DataFrame:
    """Counts of each value of `column`, split by outcome."""
    return pd.crosstab(df[column], df[outcome]).reindex(columns=[0, 1], fill_value=0)


def cancer_rate_by(
    df: pd.DataFrame, columns: Iterable[str], outcome: str = OUTCOME
) -> pd.DataFrame:
    """Positive outcome rate when each 0/1 indicator is off vs on."""
    rows = {}
    for col in columns:
        rates = df.groupby(col)[outcome].mean()
        rows[col] = {
            "rate_when_0": float(rates.get(0, float("nan"))),
            "rate_when_1": float(rates.get(1, float("nan"))),
            "n_when_1": int((df[col] == 1).sum()),
        }
    table = pd.DataFrame.from_dict(rows, orient="index")
    table["difference"] = table["rate_when_1"] - table["rate_when_0"]
    return table.sort_values("difference", ascending=False)


def correlation_matrix(df: pd.DataFrame) -> pd.DataFrame:
    """Pearson correlation between every pair of recoded columns."""
    return df.corr(method="pearson")
