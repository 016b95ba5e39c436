"""CHBS: heuristic password strength scoring."""

__version__ = "0.1.0"

from .analyzer import PasswordInfo, analyze, reduce_password
from .classifier import classify, has_digits, has_lower, has_spaces, has_special, has_upper
from .graphemes import grapheme_length, reduce_repeats, split_graphemes
from .metrics import base_score, calculate_entropy, score, score_info
from .palindrome import fold_palindrome, is_palindrome
from .sequences import COMMON_SEQUENCES, CommonSequence, build_sequences, strip_sequences

__all__ = [
    "PasswordInfo",
    "analyze",
    "reduce_password",
    "classify",
    "has_digits",
    "has_lower",
    "has_spaces",
    "has_special",
    "has_upper",
    "grapheme_length",
    "reduce_repeats",
    "split_graphemes",
    "base_score",
    "calculate_entropy",
    "score",
    "score_info",
    "fold_palindrome",
    "is_palindrome",
    "COMMON_SEQUENCES",
    "CommonSequence",
    "build_sequences",
    "strip_sequences",
]
