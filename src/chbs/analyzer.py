"""Password reduction pipeline and the PasswordInfo record."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .classifier import classify
from .graphemes import grapheme_length, reduce_repeats
from .palindrome import fold_palindrome
from .sequences import COMMON_SEQUENCES, CommonSequence, strip_sequences

DISPLAY_FIELDS = (
    "length",
    "original_password",
    "reduced_password",
    "has_spaces",
    "has_upper",
    "has_lower",
    "has_digits",
    "has_special",
)


@dataclass(frozen=True)
class PasswordInfo:
    length: int
    original_password: str
    reduced_password: str
    has_spaces: bool
    has_upper: bool
    has_lower: bool
    has_digits: bool
    has_special: bool

    def as_record(self) -> dict[str, object]:
        """Flat mapping of every field in display order."""
        return {name: getattr(self, name) for name in DISPLAY_FIELDS}

    def describe(self) -> str:
        """Render one ``name: value`` line per field."""
        return "\n".join(f"{name}: {value}" for name, value in self.as_record().items())


def reduce_password(
    password: str,
    sequences: Iterable[CommonSequence] = COMMON_SEQUENCES,
) -> str:
    """Collapse repeats, strip common sequences, then fold palindromes."""
    reduced = reduce_repeats(password)
    reduced = strip_sequences(reduced, sequences)
    return fold_palindrome(reduced)


def analyze(
    password: str,
    sequences: Iterable[CommonSequence] = COMMON_SEQUENCES,
) -> PasswordInfo:
    """Build the PasswordInfo record for a password.

    Character-class flags always come from the original input; only the
    length and reduced form reflect the reduction pipeline.
    """
    reduced = reduce_password(password, sequences)
    return PasswordInfo(
        length=grapheme_length(reduced),
        original_password=password,
        reduced_password=reduced,
        **classify(password),
    )
