"""Set and dictionary lookups over cards, words and names."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

__all__ = [
    "card_membership",
    "card_counts",
    "symmetric_difference_size",
    "count_in_set",
    "Pokedex",
    "never_seen_never_heard",
    "present_employees",
]

_ENTER = "enter"
_LEADING_NUMBER = re.compile(r"\d+")


def card_membership(cards: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """Tell for each query whether it is among the cards."""
    held = set(cards)
    return [query in held for query in queries]


def card_counts(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Return how many cards carry each queried number."""
    counts = Counter(cards)
    return [counts[query] for query in queries]


def symmetric_difference_size(a: Iterable[int], b: Iterable[int]) -> int:
    """Return the size of the symmetric difference, toggling each element of b into a."""
    result = set(a)
    for value in b:
        result ^= {value}
    return len(result)


def count_in_set(words: Iterable[str], queries: Iterable[str]) -> int:
    """Count the queries that are among the words."""
    known = set(words)
    return sum(1 for query in queries if query in known)


class Pokedex:
    """Two-way lookup between names and their 1-based numbers."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = list(names)
        self._numbers: dict[str, int] = {}
        for number, name in enumerate(self._names, start=1):
            self._numbers.setdefault(name, number)

    def lookup(self, query: str) -> str | int:
        """Return the name for a numeric query, or the number for a name."""
        match = _LEADING_NUMBER.match(query)
        if match:
            number = int(match.group())
            if not 1 <= number <= len(self._names):
                raise KeyError(query)
            return self._names[number - 1]
        return self._numbers[query]


def never_seen_never_heard(heard: Iterable[str], seen: Iterable[str]) -> list[str]:
    """Return, sorted, the seen names that are also among the heard ones."""
    heard_of = set(heard)
    return sorted(name for name in seen if name in heard_of)


def present_employees(log: Iterable[tuple[str, str]]) -> list[str]:
    """Return who is still in the office, in reverse lexicographic order.

    Each log entry is (name, action) where action is 'enter' or anything
    else for leaving.
    """
    present: set[str] = set()
    for name, action in log:
        if action == _ENTER:
            present.add(name)
        else:
            present.discard(name)
    return sorted(present, reverse=True)