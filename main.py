from __future__ import annotations

"""
CLI entrypoint for the lung-cancer survey analysis. Pick the step via
--experiment: describe (summaries), linearity (logit vs age bins),
models (logit fits + VIF), or all.
"""

import argparse
import logging
import os
from pathlib import Path

import pandas as pd

from lung_survey import (
    AGE,
    OUTCOME,
    cancer_rate_by,
    compute_vif,
    describe_survey,
    fit_logit,
    fit_summary,
    frequency_table,
    load_survey,
    logit_linearity,
    recode_survey,
    summarize_coefficients,
)
from lung_survey.constants import DEFAULT_ALPHA, DEFAULT_BINS, DEFAULT_INTERACTION
from lung_survey.data_prep import ordinal_columns, split_features
from lung_survey.metrics import majority_baseline

DEFAULT_CSV = Path(os.getenv("LUNG_SURVEY_CSV", "data/survey_lung_cancer.csv"))


def describe_features(meta: dict):
    """Print a short summary of dataset size, balance, and ages."""
    print(f"Respondents: {meta['num_records']}, features: {meta['feature_count']}")
    print(f"Positive rate for {OUTCOME}: {meta['positive_rate']:.3f}")
    print(f"Age range: {meta['age_range'][0]} -> {meta['age_range'][1]}")
    print(f"Male share: {meta['male_share']:.3f}")


def print_metrics(label: str, metrics: dict):
    """Format the metric dict produced by fit_summary and majority_baseline."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def parse_interaction(value: str) -> tuple[str, str] | None:
    """'age:smoking' -> ('age', 'smoking'); empty string or 'none' disables it."""
    if not value or value.lower() == "none":
        return None
    parts = [p.strip() for p in value.split(":")]
    if len(parts) != 2 or not all(parts):
        raise argparse.ArgumentTypeError(f"Interaction must look like 'a:b', got {value!r}")
    return parts[0], parts[1]


def build_arg_parser():
    """CLI parser with knobs for the input file, binning and model terms."""
    parser = argparse.ArgumentParser(
        description="Exploratory analysis and logit assumption checks for the lung-cancer survey."
    )
    parser.add_argument("--csv-path", type=Path, default=DEFAULT_CSV)
    parser.add_argument(
        "--experiment",
        choices=["describe", "linearity", "models", "all"],
        default="all",
    )
    parser.add_argument("--bins", type=int, default=DEFAULT_BINS, help="Equal-width age bins.")
    parser.add_argument(
        "--interaction",
        type=parse_interaction,
        default=DEFAULT_INTERACTION,
        help="Interaction term as 'a:b' for the second model; 'none' to skip.",
    )
    parser.add_argument("--alpha", type=float, default=DEFAULT_ALPHA, help="Significance level.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def run_describe(df: pd.DataFrame, args: argparse.Namespace):
    describe_features(describe_survey(df))
    print("\nCancer rate by indicator (0 = no, 1 = yes):")
    print(cancer_rate_by(df, ordinal_columns(df)).round(3))

    counts = pd.concat(
        {col: frequency_table(df, col) for col in ordinal_columns(df)}, names=["indicator", "answer"]
    )
    print("\nAnswers by outcome (columns: lung_cancer 0 / 1):")
    print(counts.to_string())


def run_linearity(df: pd.DataFrame, args: argparse.Namespace):
    """Empirical logit per equal-width age bin."""
    result = logit_linearity(df[AGE], df[OUTCOME], k=args.bins)
    print(f"\nLinearity of the logit for {AGE} ({result.k} bins, {len(result.bins)} non-empty):")
    print(result.to_frame().drop(columns=["lower", "upper"]).round(3).to_string(index=False))
    for warning in result.warnings:
        print(f"    undefined: {warning}")
    return result


def run_models(df: pd.DataFrame, args: argparse.Namespace):
    """Main-effects logit, VIF, and one interaction model."""
    X, y = split_features(df)
    predictors = list(X.columns)

    result, table = fit_logit(df, predictors, alpha=args.alpha)
    print("\nMain-effects logit:")
    print(table.round(4))
    print_metrics("Majority baseline", majority_baseline(y))
    fit = fit_summary(result)
    print_metrics("Logit (in-sample)", fit)
    print(
        f"    n={fit['n_obs']} | pseudo R2 {fit['pseudo_r2']:.3f} | "
        f"AIC {fit['aic']:.1f} | LLR p {fit['llr_pvalue']:.3g}"
    )

    top = summarize_coefficients(table)
    print("\nStrongest positive terms:")
    print(top["positive"][["coef", "odds_ratio", "p_value"]].round(4))
    print("\nStrongest negative terms:")
    print(top["negative"][["coef", "odds_ratio", "p_value"]].round(4))

    print("\nVariance inflation factors:")
    print(compute_vif(df, predictors).round(3).to_string(index=False))

    if args.interaction is not None:
        left, right = args.interaction
        _, inter_table = fit_logit(df, predictors, interaction=args.interaction, alpha=args.alpha)
        term = f"{left}:{right}"
        row = inter_table.loc[term]
        print(
            f"\nInteraction {term}: coef {row['coef']:.4f}, "
            f"OR {row['odds_ratio']:.4f}, p {row['p_value']:.4f}"
        )


def main(args: argparse.Namespace | None = None):
    """Load, recode, and dispatch to the selected step."""
    args = args or build_arg_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    df = recode_survey(load_survey(args.csv_path))

    if args.experiment in ("describe", "all"):
        run_describe(df, args)
    if args.experiment in ("linearity", "all"):
        run_linearity(df, args)
    if args.experiment in ("models", "all"):
        run_models(df, args)


if __name__ == "__main__":
    main()
