"""Automatic Markdown reporting for batch score outputs."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
import pandas as pd

from ..classifier import FLAG_NAMES


def _format_float(value: float) -> str:
    return f"{value:.6f}"


def _markdown_table(frame: pd.DataFrame) -> str:
    if frame.empty:
        return "_No data available._"

    columns = [str(col) for col in frame.columns]
    header = "| " + " | ".join(columns) + " |"
    separator = "| " + " | ".join(["---"] * len(columns)) + " |"
    rows: list[str] = []
    for _, row in frame.iterrows():
        rows.append("| " + " | ".join(str(row[col]) for col in frame.columns) + " |")
    return "\n".join([header, separator, *rows])


def _descriptive_stats(df: pd.DataFrame) -> pd.DataFrame:
    stats_cols = ["count", "mean", "median", "std", "min", "max"]
    if "filename" in df.columns:
        stats = (
            df.groupby("filename", dropna=False)["score"]
            .agg(stats_cols)
            .reset_index()
            .sort_values("filename")
        )
    else:
        aggregated = df["score"].agg(stats_cols)
        stats = pd.DataFrame([aggregated.to_dict()])
        stats.insert(0, "filename", "all")

    # std is NaN for single-row groups
    stats["std"] = stats["std"].fillna(0.0)
    for col in ["mean", "median", "std", "min", "max"]:
        stats[col] = stats[col].astype(float).map(_format_float)
    stats["count"] = stats["count"].astype(int)
    return stats


def _flag_coverage(df: pd.DataFrame) -> dict[str, float]:
    """Share of passwords carrying each character-class flag."""
    coverage: dict[str, float] = {}
    for flag in FLAG_NAMES:
        if flag not in df.columns:
            continue
        values = df[flag].to_numpy(dtype=bool)
        coverage[flag] = float(np.mean(values)) if values.size else 0.0
    return coverage


def generate_report(df: pd.DataFrame) -> str:
    """Generate a Markdown report from a batch score DataFrame."""
    if "score" not in df.columns:
        raise ValueError("Input DataFrame must contain a 'score' column")

    stats = _descriptive_stats(df)
    coverage = _flag_coverage(df)

    lines: list[str] = [
        "# CHBS Password Score Report",
        "",
        "## Descriptive Statistics",
        _markdown_table(stats),
        "",
        "## Character Classes",
    ]
    if coverage:
        lines.extend(f"- **{flag}**: {share:.2%}" for flag, share in coverage.items())
    else:
        lines.append("_Unavailable: no character-class columns in input._")
    lines.append("")

    return "\n".join(lines)


def save_report(df: pd.DataFrame, output_path: Path) -> None:
    """Generate and save a Markdown report."""
    report = generate_report(df)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report, encoding="utf-8")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate CHBS Markdown report")
    parser.add_argument("--input", required=True, help="Input CSV file path")
    parser.add_argument("--output", required=True, help="Output Markdown report path")
    return parser.parse_args()


def main() -> None:
    """Standalone CLI for report generation from CSV."""
    args = _parse_args()
    input_path = Path(args.input)
    output_path = Path(args.output)
    frame = pd.read_csv(input_path)
    save_report(frame, output_path)
    print(f"Saved report to {output_path}")


if __name__ == "__main__":
    main()
