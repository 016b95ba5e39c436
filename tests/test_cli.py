from __future__ import annotations

import pytest
from chbs import __version__, cli


def test_main_prints_password_and_score(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["LongerPass!thathassomenumbers1$$"])

    out = capsys.readouterr().out.splitlines()

    assert out == [
        "The password passed is: LongerPass!thathassomenumbers1$$",
        "The score is: 6",
    ]


def test_main_requires_password(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code != 0
    assert "usage" in capsys.readouterr().err


def test_main_reports_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
