"""Helpers to derive dataset-aware output paths."""

from __future__ import annotations

import re
from collections import Counter
from pathlib import Path

GENERIC_NAMES = {"", ".", "data", "results", "passwords", "input"}


def _sanitize_dataset_name(value: str) -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9_-]+", "-", value.strip().lower()).strip("-")
    return cleaned or "default"


def _candidate_from_path(path: Path) -> str | None:
    parts = path.parts
    if "results" in parts:
        idx = parts.index("results")
        if idx + 1 < len(parts):
            return parts[idx + 1]

    if path.suffix:
        return path.stem
    return path.name


def infer_dataset_name(paths: list[str | Path]) -> str:
    """Infer a stable dataset name from one or more input paths."""
    candidates: list[str] = []
    for raw in paths:
        candidate = _candidate_from_path(Path(raw))
        if candidate is None:
            continue
        normalized = _sanitize_dataset_name(candidate)
        if normalized in GENERIC_NAMES:
            continue
        candidates.append(normalized)

    if not candidates:
        return "default"

    counts = Counter(candidates)
    return counts.most_common(1)[0][0]


def resolve_output_template(template: str, dataset: str) -> str:
    """Render an output path template with the inferred dataset name."""
    if "{dataset}" in template:
        return template.format(dataset=dataset)
    return template


def scores_output_filename() -> str:
    """Build the default filename for batch score outputs."""
    return "scores.csv"
