"""
Word classification: which words are never worth checking.
"""
import re
from typing import Collection

DIGITS_PATTERN = re.compile(r"\d+", re.ASCII)

# 2:41pm, 11:50, 9:05 a.m.
CLOCK_TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}(?:\s*[ap]\.?\s*m\.?)?", re.IGNORECASE | re.ASCII)

SMART_APOSTROPHE = "’"
STRAIGHT_APOSTROPHE = "'"


def is_digits(word: str) -> bool:
    return bool(DIGITS_PATTERN.fullmatch(word))


def is_clock_time(word: str) -> bool:
    return bool(CLOCK_TIME_PATTERN.fullmatch(word))


def is_irrelevant(word: str, ignore: Collection[str] = (), ignore_digits: bool = True) -> bool:
    """
    Check whether a word should never be flagged.

    Args:
        word: Word to classify
        ignore: Exact words to skip
        ignore_digits: Also skip digit-only words and clock times

    Returns:
        True if the word is ignored, digit-only or a clock time
    """
    if word in ignore:
        return True
    return ignore_digits and (is_digits(word) or is_clock_time(word))


def normalize_apostrophes(word: str) -> str:
    """Replace typographic apostrophes with straight ones."""
    return word.replace(SMART_APOSTROPHE, STRAIGHT_APOSTROPHE)
