import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def raw_survey():
    """Small raw table in the on-disk encoding."""
    return pd.DataFrame(
        {
            "gender": ["F", "M", "M", "F"],
            "age": [30, 70, 55, 62],
            "smoking": [1, 2, 2, 1],
            "coughing": [2, 2, 1, 1],
            "lung_cancer": ["NO", "YES", "YES", "NO"],
        }
    )


@pytest.fixture
def synthetic_survey():
    """Recoded table large enough to fit a logit without separation."""
    rng = np.random.default_rng(0)
    n = 400
    age = rng.integers(30, 85, size=n)
    gender = rng.integers(0, 2, size=n)
    smoking = rng.integers(0, 2, size=n)
    coughing = rng.integers(0, 2, size=n)
    eta = -4.0 + 0.06 * age + 0.8 * smoking + 0.4 * coughing
    prob = 1.0 / (1.0 + np.exp(-eta))
    outcome = (rng.random(n) < prob).astype(int)
    return pd.DataFrame(
        {
            "gender": gender,
            "age": age,
            "smoking": smoking,
            "coughing": coughing,
            "lung_cancer": outcome,
        }
    )


@pytest.fixture
def survey_csv(tmp_path, synthetic_survey):
    """Write the synthetic table back in the raw CSV layout with raw headers."""
    raw = pd.DataFrame(
        {
            "GENDER": synthetic_survey["gender"].map({0: "F", 1: "M"}),
            "AGE": synthetic_survey["age"],
            "SMOKING": synthetic_survey["smoking"] + 1,
            "COUGHING ": synthetic_survey["coughing"] + 1,
            "LUNG_CANCER": synthetic_survey["lung_cancer"].map({0: "NO", 1: "YES"}),
        }
    )
    path = tmp_path / "survey.csv"
    raw.to_csv(path, index=False)
    return path
