from __future__ import annotations

import pytest
from chbs.sequences import COMMON_SEQUENCES, CommonSequence, build_sequences, strip_sequences


def test_strip_sequences_removes_leaked_fragment() -> None:
    assert strip_sequences("digitmanpassword1ok") == "digitmanok"


def test_strip_sequences_removes_every_occurrence() -> None:
    assert strip_sequences("qwertyXqwertyYqwerty") == "XY"


def test_strip_sequences_is_case_sensitive() -> None:
    assert strip_sequences("Monkey-monkey-MONKEY") == "--MONKEY"


def test_strip_sequences_covers_keyboard_and_runs() -> None:
    assert strip_sequences("a0123456789b") == "ab"
    assert strip_sequences("xabcdefghijklmnopqrstuvwxyzx") == "xx"
    assert strip_sequences("1qaz2wsx!") == "!"
    assert strip_sequences("asdf;jkl;") == ";"


def test_strip_sequences_chains_in_list_order() -> None:
    # removing the inner run joins the halves of a later pattern
    assert strip_sequences("drag0123456789on") == ""


def test_strip_sequences_leaves_pass_alone() -> None:
    assert strip_sequences("boringpass") == "boringpass"


def test_common_sequences_order_is_stable() -> None:
    orders = [seq.order for seq in COMMON_SEQUENCES]
    assert orders == list(range(len(COMMON_SEQUENCES)))
    patterns = [seq.pattern for seq in COMMON_SEQUENCES]
    assert patterns.index("password1") < patterns.index("password")
    assert patterns.index("Password1") < patterns.index("Password")


def test_build_sequences_appends_extra_patterns() -> None:
    sequences = build_sequences(["hunter2"])
    assert sequences[: len(COMMON_SEQUENCES)] == COMMON_SEQUENCES
    assert sequences[-1] == CommonSequence(len(COMMON_SEQUENCES), "hunter2")
    assert strip_sequences("myhunter2", sequences) == "my"


def test_build_sequences_rejects_empty_pattern() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        build_sequences([""])
