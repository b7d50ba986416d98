"""Overlap-aware substring counting over extracted lines."""

from __future__ import annotations

import logging
from typing import Iterable

from .grid import Array
from .lines import extract_lines

logger = logging.getLogger(__name__)

__all__ = ["count_occurrences", "count_pattern", "count_word"]


def _check_pattern(pattern: str) -> None:
    if not isinstance(pattern, str):
        raise TypeError("pattern must be a string")
    if not pattern:
        raise ValueError("pattern must not be empty")


def count_occurrences(line: str, pattern: str) -> int:
    """Count occurrences of ``pattern`` in ``line``, overlapping ones included.

    The scan restarts one character after the start of each match, so
    ``count_occurrences("AAAA", "AA") == 3``. Matching is exact and
    case-sensitive.
    """
    _check_pattern(pattern)
    count = 0
    start = line.find(pattern)
    while start != -1:
        count += 1
        start = line.find(pattern, start + 1)
    return count


def count_pattern(lines: Iterable[str], pattern: str, include_reverse: bool = True) -> int:
    """Sum occurrences of ``pattern`` (and of ``pattern`` reversed) over ``lines``.

    Forward and reverse counts are added independently, so a palindromic
    pattern is counted once per reading direction.
    """
    _check_pattern(pattern)
    reverse = pattern[::-1]
    total = 0
    for line in lines:
        total += count_occurrences(line, pattern)
        if include_reverse:
            total += count_occurrences(line, reverse)
    return total


def count_word(grid: Array, word: str) -> int:
    """Count ``word`` in every row, column and diagonal of ``grid``, both ways."""
    total = count_pattern(extract_lines(grid), word)
    logger.debug("found %d occurrences of %r", total, word)
    return total
