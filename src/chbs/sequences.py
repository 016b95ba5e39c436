"""Ordered list of common sequences and the stripper that removes them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class CommonSequence(NamedTuple):
    order: int
    pattern: str


# Applied top to bottom, each replacement working on the previous result, so
# longer patterns must precede the fragments they contain. Matching is
# case-sensitive; capitalized variants are listed on their own.
_PATTERNS: tuple[str, ...] = (
    # digit and alphabet runs
    "0123456789",
    "1234567890",
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    # horizontal keyboard rows
    "qwertyuiop",
    "QWERTYUIOP",
    "asdfghjkl",
    "ASDFGHJKL",
    "zxcvbnm",
    "ZXCVBNM",
    "qwerty",
    "Qwerty",
    "QWERTY",
    # diagonal keyboard sequences
    "1qaz2wsx3edc",
    "1qaz2wsx",
    "zaq12wsx",
    "qazwsxedc",
    "qazwsx",
    "QAZWSX",
    "1qaz",
    "2wsx",
    # home row
    "asdfjkl;",
    "asdf",
    "ASDF",
    "jkl;",
    # leaked-password fragments
    "password1",
    "Password1",
    "password",
    "Password",
    "passw0rd",
    "p@ssw0rd",
    "P@ssw0rd",
    "123456789",
    "12345678",
    "123456",
    "abc123",
    "iloveyou",
    "Iloveyou",
    "letmein",
    "Letmein",
    "trustno1",
    "Trustno1",
    "welcome",
    "Welcome",
    "monkey",
    "Monkey",
    "dragon",
    "Dragon",
    "sunshine",
    "Sunshine",
    "princess",
    "Princess",
    "football",
    "Football",
    "baseball",
    "Baseball",
    "superman",
    "Superman",
    "shadow",
    "Shadow",
    "master",
    "Master",
)

COMMON_SEQUENCES: tuple[CommonSequence, ...] = tuple(
    CommonSequence(order, pattern) for order, pattern in enumerate(_PATTERNS)
)


def build_sequences(extra: Iterable[str] = ()) -> tuple[CommonSequence, ...]:
    """Return the built-in sequences followed by ``extra`` literal patterns."""
    sequences = list(COMMON_SEQUENCES)
    for pattern in extra:
        if not isinstance(pattern, str) or not pattern:
            raise ValueError("extra sequences must be non-empty strings")
        sequences.append(CommonSequence(len(sequences), pattern))
    return tuple(sequences)


def strip_sequences(
    password: str,
    sequences: Iterable[CommonSequence] = COMMON_SEQUENCES,
) -> str:
    """Remove every occurrence of each common sequence, in list order."""
    for sequence in sequences:
        password = password.replace(sequence.pattern, "")
    return password
