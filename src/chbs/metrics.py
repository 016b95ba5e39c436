"""Entropy scoring for analyzed passwords."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .analyzer import PasswordInfo, analyze
from .sequences import COMMON_SEQUENCES, CommonSequence

LOG_2 = math.log(2.0)


def base_score(info: PasswordInfo) -> int:
    """Reduced length plus one point per character-class bonus.

    Mixed case earns a single combined point rather than one per case.
    """
    total = info.length
    if info.has_spaces:
        total += 1
    if info.has_digits:
        total += 1
    if info.has_special:
        total += 1
    if info.has_upper and info.has_lower:
        total += 1
    return total


def _log_term(base: int) -> float:
    """Base-``base`` logarithm of 2; zero where the logarithm is undefined."""
    if base <= 1:
        return 0.0
    return LOG_2 / math.log(base)


def calculate_entropy(info: PasswordInfo) -> float:
    """Sum the log term once per reduced grapheme beyond the first."""
    term = _log_term(base_score(info))
    entropy = 0.0
    for _ in range(1, info.length):
        entropy += term
    return entropy


def score_info(info: PasswordInfo) -> int:
    """Truncate the entropy of an analyzed password toward zero."""
    return int(calculate_entropy(info))


def score(
    password: str,
    sequences: Iterable[CommonSequence] = COMMON_SEQUENCES,
) -> int:
    """Heuristic integer entropy score of a password."""
    return score_info(analyze(password, sequences))
