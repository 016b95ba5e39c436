"""Grapheme-cluster helpers and repeated-character collapsing."""

from __future__ import annotations

import regex

GRAPHEME_RE = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters (user-perceived characters)."""
    return GRAPHEME_RE.findall(text)


def grapheme_length(text: str) -> int:
    """Count grapheme clusters in text."""
    return len(split_graphemes(text))


def reduce_repeats(password: str) -> str:
    """Collapse every run of three or more identical graphemes down to two.

    Runs of two and distinct neighbours are left alone, so ``"tessssttttttaman"``
    becomes ``"tessttaman"``. Combining sequences such as ``"a" + U+030A`` count
    as a single grapheme.
    """
    prev: str | None = None
    prev_prev: str | None = None
    kept: list[str] = []
    for grapheme in split_graphemes(password):
        if grapheme == prev and grapheme == prev_prev:
            continue
        prev_prev = prev
        prev = grapheme
        kept.append(grapheme)
    return "".join(kept)
