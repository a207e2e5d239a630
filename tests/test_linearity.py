import math

import numpy as np
import pytest

from lung_survey import (
    InsufficientDataError,
    InvalidCategoryError,
    UndefinedLogitWarning,
    logit_linearity,
    smooth_logits,
)
from lung_survey.linearity import assign_bins, equal_width_edges, logit


def _mixed_outcomes(ages):
    """Alternate 0/1 within each age so every bin has a finite logit."""
    x = np.repeat(ages, 4)
    y = np.tile([0, 1, 1, 0], len(ages))
    return x, y


def test_ten_bins_with_data_everywhere():
    x, y = _mixed_outcomes(np.arange(30, 80, 1))
    result = logit_linearity(x, y, k=10)
    assert len(result.bins) <= 10
    assert all(b.count >= 1 for b in result.bins)
    means = [b.mean_age for b in result.bins]
    assert means == sorted(means)
    assert sum(b.count for b in result.bins) == len(x)
    assert result.warnings == ()


def test_bins_ordered_by_lower_bound_and_last_closed():
    x, y = _mixed_outcomes(np.arange(0, 101, 5))
    result = logit_linearity(x, y, k=4)
    lowers = [b.lower for b in result.bins]
    assert lowers == sorted(lowers)
    assert [b.closed_right for b in result.bins] == [False, False, False, True]
    assert result.bins[-1].label.endswith("]")
    assert result.bins[0].label.endswith(")")


def test_interior_edge_value_goes_to_upper_bin():
    edges = equal_width_edges(np.array([0.0, 100.0]), 10)
    assert edges.tolist() == [float(v) for v in range(0, 101, 10)]
    idx = assign_bins(np.array([0.0, 9.999, 10.0, 90.0, 100.0]), edges)
    assert idx.tolist() == [0, 0, 1, 9, 9]


def test_constant_predictor_is_widened():
    result = logit_linearity([50, 50, 50, 50], [0, 1, 0, 1], k=3)
    assert len(result.bins) == 1
    b = result.bins[0]
    assert b.lower < 50 < b.upper
    assert b.count == 4
    assert b.logit == pytest.approx(0.0)


def test_empty_bins_are_omitted():
    x = [0, 1, 2, 98, 99, 100]
    y = [0, 1, 0, 1, 0, 1]
    result = logit_linearity(x, y, k=10)
    assert len(result.bins) == 2
    assert [b.count for b in result.bins] == [3, 3]


def test_p_hat_mean_age_and_logit():
    x = [40, 41, 42, 43, 60, 61, 62, 63]
    y = [0, 0, 0, 1, 1, 1, 1, 0]
    result = logit_linearity(x, y, k=2)
    first, second = result.bins
    assert first.p_hat == pytest.approx(0.25)
    assert first.mean_age == pytest.approx(41.5)
    assert first.logit == pytest.approx(math.log(0.25 / 0.75))
    assert second.p_hat == pytest.approx(0.75)
    assert second.logit == pytest.approx(math.log(3.0))


def test_uniform_outcome_bins_are_marked_undefined():
    x = [30, 31, 32, 50, 51, 52, 70, 71, 72]
    y = [0, 0, 0, 0, 1, 1, 1, 1, 1]
    result = logit_linearity(x, y, k=3)
    assert len(result.bins) == 3
    low, mid, high = result.bins
    assert not low.logit_defined and low.logit == -math.inf
    assert mid.logit_defined
    assert not high.logit_defined and high.logit == math.inf
    assert result.undefined_bins == [low, high]
    assert len(result.warnings) == 2
    assert all(isinstance(w, UndefinedLogitWarning) for w in result.warnings)
    assert [w.p_hat for w in result.warnings] == [0.0, 1.0]


def test_undefined_bins_survive_in_frame():
    result = logit_linearity([1, 2, 3, 10, 11, 12], [0, 0, 0, 0, 1, 1], k=2)
    frame = result.to_frame()
    assert len(frame) == 2
    assert frame["logit_defined"].tolist() == [False, True]
    assert np.isneginf(frame["logit"].iloc[0])


def test_logit_helper_edges():
    assert logit(0.5) == pytest.approx(0.0)
    assert logit(0.0) == -math.inf
    assert logit(1.0) == math.inf


@pytest.mark.parametrize("k", [0, -3, 2.5, True, "10", None])
def test_bad_bin_count_raises(k):
    with pytest.raises(InsufficientDataError):
        logit_linearity([1, 2, 3], [0, 1, 0], k=k)


def test_numpy_integer_bin_count_accepted():
    result = logit_linearity([1, 2, 3, 4], [0, 1, 0, 1], k=np.int64(2))
    assert result.k == 2


def test_empty_predictor_raises():
    with pytest.raises(InsufficientDataError):
        logit_linearity([], [], k=10)


def test_non_binary_outcome_raises():
    with pytest.raises(InvalidCategoryError):
        logit_linearity([1, 2, 3], [0, 1, 2])


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        logit_linearity([1, 2, 3], [0, 1])


def test_nan_predictor_raises():
    with pytest.raises(ValueError):
        logit_linearity([1.0, float("nan"), 3.0], [0, 1, 0])


def test_accepts_pandas_columns(synthetic_survey):
    result = logit_linearity(synthetic_survey["age"], synthetic_survey["lung_cancer"])
    assert result.k == 10
    assert sum(b.count for b in result.bins) == len(synthetic_survey)


def test_smooth_logits_skips_undefined_bins():
    ages = np.arange(30, 80, 1)
    x = np.repeat(ages, 4)
    y = np.concatenate(
        [[1, 0, 0, 0] if a < 50 else [1, 1, 0, 0] if a < 65 else [1, 1, 1, 0] for a in ages]
    )
    x = np.concatenate([x, [100, 100]])
    y = np.concatenate([y, [1, 1]])
    result = logit_linearity(x, y, k=7)
    assert result.undefined_bins
    xs, ys = smooth_logits(result)
    assert len(xs) == len(result.bins) - len(result.undefined_bins)
    assert np.all(np.isfinite(ys))
    assert list(xs) == sorted(xs)


def test_smooth_logits_needs_two_defined_bins():
    result = logit_linearity([1, 2, 10, 11], [0, 0, 1, 1], k=2)
    with pytest.raises(InsufficientDataError):
        smooth_logits(result)


def test_results_compare_by_bins():
    x = [30, 31, 32, 50, 51, 52, 70, 71, 72]
    y = [0, 0, 0, 0, 1, 1, 1, 1, 1]
    first = logit_linearity(x, y, k=3)
    second = logit_linearity(x, y, k=3)
    assert first == second
    assert hash(first) == hash(second)
    assert first != logit_linearity(x, y, k=4)
