"""Character-class predicates evaluated on the original password."""

from __future__ import annotations

import re
import string

from .graphemes import split_graphemes

ASCII_ALNUM_RE = re.compile(r"[a-zA-Z0-9]")
ASCII_DIGITS = frozenset(string.digits)
FLAG_NAMES = ("has_spaces", "has_upper", "has_lower", "has_digits", "has_special")


def has_spaces(password: str) -> bool:
    return " " in password


def has_upper(password: str) -> bool:
    # ASCII only; non-ASCII capitals are not detected.
    return any("A" <= ch <= "Z" for ch in password)


def has_lower(password: str) -> bool:
    return any("a" <= ch <= "z" for ch in password)


def has_digits(password: str) -> bool:
    """True when dropping ASCII-digit graphemes shortens the password."""
    graphemes = split_graphemes(password)
    remaining = [g for g in graphemes if g not in ASCII_DIGITS]
    return len(remaining) != len(graphemes)


def has_special(password: str) -> bool:
    """True when anything besides ASCII letters and digits is present."""
    return ASCII_ALNUM_RE.sub("", password) != ""


def classify(password: str) -> dict[str, bool]:
    """Evaluate every predicate, keyed by its flag name."""
    return {
        "has_spaces": has_spaces(password),
        "has_upper": has_upper(password),
        "has_lower": has_lower(password),
        "has_digits": has_digits(password),
        "has_special": has_special(password),
    }
