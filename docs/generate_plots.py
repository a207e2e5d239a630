from pathlib import Path
import argparse

import matplotlib

matplotlib.use("Agg")

from lung_survey import (
    AGE,
    OUTCOME,
    correlation_matrix,
    load_survey,
    logit_linearity,
    recode_survey,
)
from lung_survey.data_prep import ordinal_columns
from lung_survey.plots import (
    plot_age_boxplot,
    plot_age_histogram,
    plot_correlation_matrix,
    plot_indicator_bars,
    plot_logit_linearity,
)

# Configuration
CSV_PATH = Path("../data/survey_lung_cancer.csv")
BINS = 10


def generate_all(csv_path: Path, out_dir: Path, bins: int = BINS) -> list[Path]:
    df = recode_survey(load_survey(csv_path))
    out_dir.mkdir(parents=True, exist_ok=True)

    targets = {
        "indicators_by_outcome.png": lambda f: plot_indicator_bars(df, ordinal_columns(df), f),
        "age_histogram.png": lambda f: plot_age_histogram(df, f),
        "correlation_matrix.png": lambda f: plot_correlation_matrix(correlation_matrix(df), f),
        "age_boxplot.png": lambda f: plot_age_boxplot(df, f),
        "logit_linearity.png": lambda f: plot_logit_linearity(
            logit_linearity(df[AGE], df[OUTCOME], k=bins), f
        ),
    }
    written = []
    for name, render in targets.items():
        print(f"Generating {name}...")
        path = out_dir / name
        render(path)
        written.append(path)
    return written


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render the survey EDA plots.")
    parser.add_argument("--csv-path", type=Path, default=CSV_PATH)
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    parser.add_argument("--bins", type=int, default=BINS)
    args = parser.parse_args()

    generate_all(args.csv_path, args.out_dir, bins=args.bins)
    print("All plots generated successfully.")
