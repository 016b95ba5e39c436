from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from chbs.tools import report_stats


def test_flag_coverage_reports_share_of_passwords() -> None:
    frame = pd.DataFrame(
        [
            {"score": 1, "has_digits": True, "has_special": False},
            {"score": 2, "has_digits": False, "has_special": False},
            {"score": 3, "has_digits": True, "has_special": True},
            {"score": 4, "has_digits": True, "has_special": False},
        ]
    )

    coverage = report_stats._flag_coverage(frame)

    assert coverage == {"has_digits": 0.75, "has_special": 0.25}


def test_descriptive_stats_group_by_filename() -> None:
    frame = pd.DataFrame(
        [
            {"filename": "b.txt", "score": 4},
            {"filename": "a.txt", "score": 1},
            {"filename": "a.txt", "score": 3},
        ]
    )

    stats = report_stats._descriptive_stats(frame)

    assert list(stats["filename"]) == ["a.txt", "b.txt"]
    assert list(stats["count"]) == [2, 1]
    assert list(stats["mean"]) == ["2.000000", "4.000000"]
    assert list(stats["std"])[1] == "0.000000"


def test_generate_report_requires_score_column() -> None:
    with pytest.raises(ValueError, match="score"):
        report_stats.generate_report(pd.DataFrame([{"entropy": 1.0}]))


def test_generate_report_without_flags(tmp_path: Path) -> None:
    frame = pd.DataFrame([{"score": 2}, {"score": 4}])
    output = tmp_path / "report.md"

    report_stats.save_report(frame, output)

    report = output.read_text(encoding="utf-8")
    assert report.startswith("# CHBS Password Score Report")
    assert "| all |" in report
    assert "_Unavailable: no character-class columns in input._" in report
