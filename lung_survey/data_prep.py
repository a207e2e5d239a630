from __future__ import annotations

"""
Loading and recoding of the raw survey table.

Raw answers come in three shapes: `gender` (F/M), the `lung_cancer` outcome
(NO/YES) and ordinal yes/no indicators coded 1/2. Everything is mapped onto
0/1 through explicit tables so the encoding never depends on the order in
which a library happens to discover levels.
"""

import logging
from pathlib import Path
from typing import Mapping

import numpy as np
import pandas as pd

from .constants import AGE, CATEGORICAL_CODES, ORDINAL_LEVELS, OUTCOME
from .exceptions import InvalidCategoryError, InvalidOrdinalError

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    """Normalize a raw header like 'CHRONIC DISEASE' or 'FATIGUE '."""
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def _describe_bad(values: pd.Series, limit: int = 5) -> str:
    shown = [repr(v) for v in pd.unique(values)[:limit]]
    return ", ".join(shown)


def load_survey(csv_path: Path) -> pd.DataFrame:
    """Read the survey CSV and normalize its column names."""
    df = pd.read_csv(csv_path)
    df.columns = [_clean_name(str(col)) for col in df.columns]
    logger.debug("Loaded %d rows, %d columns from %s", len(df), df.shape[1], csv_path)
    return df


def recode_categorical(
    series: pd.Series, codes: Mapping[str, int], name: str | None = None
) -> pd.Series:
    """Map a two-valued categorical column through its coding table."""
    name = name or series.name
    bad_mask = ~series.isin(list(codes))
    if bad_mask.any():
        raise InvalidCategoryError(
            f"Column {name!r} has {int(bad_mask.sum())} value(s) outside "
            f"{sorted(codes)}: {_describe_bad(series[bad_mask])}"
        )
    return series.map(codes).astype(int)


def recode_ordinal(series: pd.Series, name: str | None = None) -> pd.Series:
    """Shift a 1/2 coded survey answer to 0/1."""
    name = name or series.name
    # True == 1 for isin, so booleans are rejected up front
    bool_mask = series.map(lambda v: isinstance(v, (bool, np.bool_))).astype(bool)
    bad_mask = bool_mask | ~series.isin(ORDINAL_LEVELS)
    if bad_mask.any():
        raise InvalidOrdinalError(
            f"Column {name!r} has {int(bad_mask.sum())} value(s) outside "
            f"{list(ORDINAL_LEVELS)}: {_describe_bad(series[bad_mask])}"
        )
    return (series - 1).astype(int)


def ordinal_columns(df: pd.DataFrame) -> list[str]:
    """Every column that is neither age nor one of the categorical fields."""
    return [col for col in df.columns if col != AGE and col not in CATEGORICAL_CODES]


def recode_survey(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a recoded copy of the raw survey table.

    Ordinal columns are checked before the categorical ones, so feeding
    already recoded data back in fails with InvalidOrdinalError. `age` is
    passed through untouched. No partial output on failure.
    """
    missing = [col for col in CATEGORICAL_CODES if col not in df.columns]
    if missing:
        raise ValueError(f"Survey table is missing required columns: {missing}")

    recoded = {}
    for col in ordinal_columns(df):
        recoded[col] = recode_ordinal(df[col], name=col)
    for col, codes in CATEGORICAL_CODES.items():
        recoded[col] = recode_categorical(df[col], codes, name=col)

    out = df.copy()
    for col, values in recoded.items():
        out[col] = values
    logger.debug("Recoded %d columns over %d rows", len(recoded), len(out))
    return out


def split_features(df: pd.DataFrame, outcome: str = OUTCOME):
    """Split a recoded table into predictors and outcome."""
    return df.drop(columns=[outcome]), df[outcome]
