"""String problems: brackets, run-length sequences, edit distance and windows."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Iterable, Optional

_OPENING = "([{"
_MATCHING = {")": "(", "]": "["}


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket is closed in the right order.

    Any character other than ``(``, ``[``, ``{``, ``)`` and ``]`` is read
    as a closing ``}``.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
            continue
        expected = _MATCHING.get(char, "{")
        if not stack or stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def count_and_say(n: int) -> str:
    """The ``n``-th term of the look-and-say sequence starting from ``"1"``."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def min_distance(word1: str, word2: str) -> int:
    """Levenshtein distance: insertions, deletions and substitutions."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    Among equally short windows the first one wins; ``""`` when none exists.
    """
    need = Counter(t)
    if not need:
        return ""
    unmet = len(need)
    best: Optional[tuple[int, int]] = None
    left = 0
    for right, char in enumerate(s):
        if char in need:
            need[char] -= 1
            if need[char] == 0:
                unmet -= 1
        while unmet == 0:
            length = right - left + 1
            if best is None or length < best[0]:
                best = (length, left)
            leaving = s[left]
            if leaving in need:
                need[leaving] += 1
                if need[leaving] > 0:
                    unmet += 1
            left += 1
    if best is None:
        return ""
    length, start = best
    return s[start:start + length]


class UrlCodec:
    """Shortens URLs; the short form is the URL itself.

    Every encoded URL is remembered, so ``decode`` resolves short forms
    through that table and passes unknown ones through unchanged.
    """

    def __init__(self) -> None:
        self._table: dict[str, str] = {}

    def encode(self, long_url: str) -> str:
        if not isinstance(long_url, str):
            raise TypeError(f"URL must be a string, not {type(long_url).__name__}")
        self._table[long_url] = long_url
        return long_url

    def decode(self, short_url: str) -> str:
        if not isinstance(short_url, str):
            raise TypeError(f"URL must be a string, not {type(short_url).__name__}")
        return self._table.get(short_url, short_url)


def array_strings_are_equal(word1: Iterable[str], word2: Iterable[str]) -> bool:
    """True when both sequences of pieces join into the same string."""
    return "".join(word1) == "".join(word2)


def min_partitions(n: str) -> int:
    """Fewest deci-binary numbers summing to the decimal string ``n``; -1 when empty."""
    if not n.isdecimal():
        if n:
            raise ValueError(f"not a decimal number: {n!r}")
        return -1
    return max(int(digit) for digit in n)