# core/strength_utils.py
from __future__ import annotations
import enum
import re


class Strength(str, enum.Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


# ASCII classes only; a non-ASCII letter counts as "other"
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_OTHER = re.compile(r"[^A-Za-z0-9]")


def score_points(password: str) -> int:
    """Raw 0..6 tally used by `score`."""
    if not password:
        return 0
    checks = (
        len(password) > 8,
        len(password) > 12,
        _UPPER.search(password) is not None,
        _LOWER.search(password) is not None,
        _DIGIT.search(password) is not None,
        _OTHER.search(password) is not None,
    )
    return sum(checks)


def score(password: str) -> Strength:
    """
    Coarse UX label for a password. Not an entropy estimate.
    """
    points = score_points(password)
    if points >= 5:  return Strength.STRONG
    if points >= 3:  return Strength.MEDIUM
    return Strength.WEAK
