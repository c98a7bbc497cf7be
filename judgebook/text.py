"""String puzzles and a grade average calculator."""

from __future__ import annotations

import re
from collections import Counter
from itertools import zip_longest
from typing import Iterable

__all__ = [
    "GRADE_POINTS",
    "read_vertically",
    "count_distinct_substrings",
    "most_frequent_letter",
    "is_group_word",
    "count_group_words",
    "count_croatian_letters",
    "grade_average",
]

GRADE_POINTS = {
    "A+": 4.5,
    "A0": 4.0,
    "B+": 3.5,
    "B0": 3.0,
    "C+": 2.5,
    "C0": 2.0,
    "D+": 1.5,
    "D0": 1.0,
    "F": 0.0,
}

_UNGRADED = "P"
_CROATIAN = re.compile(r"c=|c-|dz=|d-|lj|nj|s=|z=|.", re.DOTALL)


def read_vertically(lines: Iterable[str]) -> str:
    """Read the lines column by column, skipping positions past a line's end."""
    return "".join("".join(column) for column in zip_longest(*lines, fillvalue=""))


def count_distinct_substrings(s: str) -> int:
    """Count the distinct non-empty substrings of s."""
    return len({s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)})


def most_frequent_letter(word: str) -> str:
    """Return the most used letter in upper case, or '?' on a tie."""
    if not all("a" <= c.lower() <= "z" for c in word):
        raise ValueError("the word must consist of Latin letters only")
    counts = Counter(word.upper())
    if not counts:
        return "?"
    (letter, top), *rest = counts.most_common(2)
    if rest and rest[0][1] == top:
        return "?"
    return letter


def is_group_word(word: str) -> bool:
    """Tell whether every letter of the word appears in a single run."""
    seen: set[str] = set()
    previous = None
    for char in word:
        if char == previous:
            continue
        if char in seen:
            return False
        seen.add(char)
        previous = char
    return True


def count_group_words(words: Iterable[str]) -> int:
    """Count the group words among words."""
    return sum(1 for word in words if is_group_word(word))


def count_croatian_letters(s: str) -> int:
    """Count the letters of s, reading Croatian digraphs as one letter each."""
    return len(_CROATIAN.findall(s))


def grade_average(records: Iterable[tuple[str, float, str]]) -> float:
    """Return the credit-weighted grade average of (subject, credits, grade).

    Pass/fail courses graded 'P' are left out.
    """
    credits_total = 0.0
    points_total = 0.0
    for _subject, credits, grade in records:
        if grade == _UNGRADED:
            continue
        try:
            points = GRADE_POINTS[grade]
        except KeyError:
            raise ValueError(f"unknown grade {grade!r}") from None
        credits_total += credits
        points_total += credits * points
    if credits_total == 0:
        raise ValueError("no graded credits to average")
    return points_total / credits_total