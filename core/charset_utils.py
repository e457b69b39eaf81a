# core/charset_utils.py
from __future__ import annotations
from typing import Protocol, Tuple

# Fixed categories, concatenated in this order
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
NUMBER = "0123456789"
SYMBOL = "!@#$%^&*()_+~`|}{[]:;?><,./-="

CATEGORY_ORDER: Tuple[Tuple[str, str], ...] = (
    ("uppercase", UPPER),
    ("lowercase", LOWER),
    ("numbers", NUMBER),
    ("symbols", SYMBOL),
)

# Characters often confused visually (0/O, I/l/1)
AMBIGUOUS = frozenset("0OIl1")


class PoolOptions(Protocol):
    uppercase: bool
    lowercase: bool
    numbers: bool
    symbols: bool
    avoid_ambiguous: bool


def build_pool(options: PoolOptions) -> str:
    """
    Return the character pool for the enabled categories.

    The pool is not deduplicated: a character contributed by two categories
    would be drawn twice as often. May return "" (nothing enabled, or the
    ambiguous filter removed everything).
    """
    pool = "".join(chars for flag, chars in CATEGORY_ORDER if getattr(options, flag))
    if options.avoid_ambiguous:
        pool = "".join(ch for ch in pool if ch not in AMBIGUOUS)
    return pool
