"""Palindrome detection and folding."""

from __future__ import annotations

from .graphemes import split_graphemes


def is_palindrome(password: str) -> bool:
    """Return True when the lowercased password reads the same reversed."""
    folded = password.lower()
    return "".join(reversed(split_graphemes(folded))) == folded


def fold_palindrome(password: str) -> str:
    """Replace a case-insensitive palindrome with its first half.

    The half keeps the original case and is taken by grapheme count with floor
    division, so the middle grapheme of an odd-length palindrome is dropped.
    Non-palindromes are returned unchanged.
    """
    if not is_palindrome(password):
        return password
    graphemes = split_graphemes(password)
    return "".join(graphemes[: len(graphemes) // 2])
