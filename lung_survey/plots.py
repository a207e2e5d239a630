from __future__ import annotations

"""
Matplotlib renderings of the recoded survey and the linearity diagnostic.
Each function writes a single PNG and closes its figure.
"""

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .constants import AGE, OUTCOME
from .linearity import LogitLinearity, smooth_logits


def plot_indicator_bars(df: pd.DataFrame, columns: Sequence[str], filename: Path, outcome: str = OUTCOME):
    """Share of respondents answering yes to each indicator, split by outcome."""
    shares = df.groupby(outcome)[list(columns)].mean().T
    x = np.arange(len(columns))
    width = 0.4

    plt.figure(figsize=(12, 6))
    plt.bar(x - width / 2, shares.get(0, pd.Series(0, index=shares.index)), width, label="No lung cancer")
    plt.bar(x + width / 2, shares.get(1, pd.Series(0, index=shares.index)), width, label="Lung cancer")
    plt.xticks(x, columns, rotation=45, ha="right")
    plt.ylabel("Share answering yes")
    plt.title("Survey indicators by outcome")
    plt.legend()
    plt.grid(axis="y", linestyle="--", alpha=0.7)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def plot_age_histogram(df: pd.DataFrame, filename: Path, bins: int = 20):
    """Histogram of respondent ages."""
    plt.figure(figsize=(8, 5))
    plt.hist(df[AGE], bins=bins, edgecolor="black", alpha=0.7)
    plt.xlabel("Age")
    plt.ylabel("Frequency")
    plt.title("Age distribution")
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def plot_correlation_matrix(corr: pd.DataFrame, filename: Path):
    """Heatmap of a correlation matrix on a fixed -1..1 scale."""
    plt.figure(figsize=(10, 8))
    plt.imshow(corr.values, cmap="coolwarm", vmin=-1, vmax=1)
    plt.colorbar(label="Pearson r")
    plt.xticks(range(len(corr.columns)), corr.columns, rotation=90)
    plt.yticks(range(len(corr.index)), corr.index)
    plt.title("Correlation matrix")
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def plot_age_boxplot(df: pd.DataFrame, filename: Path, outcome: str = OUTCOME):
    """Age distribution for each outcome level."""
    groups = [df.loc[df[outcome] == level, AGE] for level in (0, 1)]
    plt.figure(figsize=(6, 5))
    plt.boxplot(groups)
    plt.xticks([1, 2], ["No", "Yes"])
    plt.xlabel("Lung cancer")
    plt.ylabel("Age")
    plt.title("Age by outcome")
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def plot_logit_linearity(result: LogitLinearity, filename: Path, frac: float | None = None):
    """
    Empirical logit per age bin with a lowess curve. Bins with an undefined
    logit are pinned to the top or bottom of the axis and drawn as crosses.
    """
    frame = result.to_frame()
    defined = frame[frame["logit_defined"]]
    undefined = frame[~frame["logit_defined"]]

    plt.figure(figsize=(8, 6))
    plt.scatter(defined["mean_age"], defined["logit"], label="Empirical logit")

    if len(defined) >= 2:
        xs, ys = smooth_logits(result) if frac is None else smooth_logits(result, frac=frac)
        plt.plot(xs, ys, color="darkorange", lw=2, label="Lowess")

    if not undefined.empty:
        low, high = plt.ylim()
        pinned = np.where(undefined["logit"] > 0, high, low)
        plt.scatter(undefined["mean_age"], pinned, marker="x", color="red", label="Undefined logit")

    plt.xlabel("Mean age in bin")
    plt.ylabel("log(p / (1 - p))")
    plt.title(f"Linearity of the logit ({result.k} bins)")
    plt.legend(loc="best")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
