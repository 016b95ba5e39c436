"""CLI entry point for scoring password lists in batch."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from pathlib import Path

import pandas as pd

from .analyzer import analyze
from .config import DEFAULT_CONFIG, load_config
from .metrics import base_score, calculate_entropy
from .output_paths import infer_dataset_name, resolve_output_template, scores_output_filename
from .sequences import COMMON_SEQUENCES, CommonSequence, build_sequences
from .tools.report_stats import save_report


def _collect_input_files(input_path: Path) -> list[Path]:
    """Collect password list files from a path (file or directory)."""
    if input_path.is_file():
        return [input_path]
    if input_path.is_dir():
        return sorted([p for p in input_path.rglob("*.txt") if p.is_file()])
    raise SystemExit(f"Input path not found: {input_path}")


def _iter_passwords(file_path: Path) -> Iterator[tuple[int, str]]:
    """Yield (line number, password) pairs, skipping blank lines."""
    with open(file_path, encoding="utf-8", errors="replace") as f:
        for line_no, line in enumerate(f, start=1):
            password = line.rstrip("\r\n")
            if password:
                yield line_no, password


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Score every password in a list")
    parser.add_argument(
        "--input",
        required=True,
        help="Password list (.txt, one per line) or folder of lists",
    )
    parser.add_argument("--output", default=None, help="Output CSV path")
    parser.add_argument("--config", default=None, help="Path to TOML config file")
    return parser.parse_args()


def run_batch_analysis(
    *,
    input_path: str | Path,
    output_path: str | Path,
    sequences: Iterable[CommonSequence] = COMMON_SEQUENCES,
    include_passwords: bool = True,
) -> tuple[pd.DataFrame, Path]:
    """Score every password under ``input_path`` and save one CSV row each."""
    files = _collect_input_files(Path(input_path))
    sequences = tuple(sequences)

    rows: list[dict[str, object]] = []
    for file_path in files:
        for line_no, password in _iter_passwords(file_path):
            info = analyze(password, sequences)
            entropy = calculate_entropy(info)
            record = {"filename": file_path.name, "line": line_no, **info.as_record()}
            if not include_passwords:
                del record["original_password"]
                del record["reduced_password"]
            record["base_score"] = base_score(info)
            record["entropy"] = entropy
            record["score"] = int(entropy)
            rows.append(record)

    if not rows:
        raise SystemExit("No passwords found in input")

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(rows)
    frame.to_csv(output, index=False)
    return frame, output


def main() -> None:
    """Run CLI workflow for batch scoring."""
    args = _parse_args()

    cfg = DEFAULT_CONFIG if args.config is None else load_config(args.config)

    if args.output is None:
        dataset = infer_dataset_name([args.input])
        output_dir = resolve_output_template(cfg["output"]["data_dir"], dataset)
        output = str(Path(output_dir) / scores_output_filename())
    else:
        output = args.output

    frame, output_file = run_batch_analysis(
        input_path=args.input,
        output_path=output,
        sequences=build_sequences(cfg["sequences"]["extra"]),
        include_passwords=cfg["output"]["include_passwords"],
    )
    print(f"Saved {len(frame)} rows to {output_file}")

    if not cfg["report"]["enabled"]:
        return
    report_path = output_file.with_suffix(".md")
    try:
        save_report(frame, report_path)
        print(f"Saved report to {report_path}")
    except Exception as exc:  # pragma: no cover - best effort reporting
        print(f"Warning: failed to generate report at {report_path}: {exc}")


if __name__ == "__main__":
    main()
