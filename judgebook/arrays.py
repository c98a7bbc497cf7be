"""Dynamic programming over one-dimensional sequences."""

from __future__ import annotations

import math
from bisect import bisect_left
from itertools import accumulate, combinations
from typing import Iterable, Sequence

__all__ = [
    "max_increasing_sum",
    "longest_increasing_subsequence",
    "lis_length",
    "wine_tasting",
    "stickers",
    "lcs_length",
    "PalindromeTable",
    "plum_catch",
    "triangle_graph_cost",
    "PrefixSums",
    "blackjack",
]


def max_increasing_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence."""
    values = list(values)
    sums: list[int] = []
    for value in values:
        prior = max(
            (total for earlier, total in zip(values, sums) if earlier < value),
            default=0,
        )
        sums.append(value + max(prior, 0))
    return max([0, *sums])


def longest_increasing_subsequence(values: Iterable[int]) -> list[int]:
    """Return a longest strictly increasing subsequence.

    Among equally long candidates, the one ending earliest is chosen, and each
    element is preceded by the earliest element that gives it its length.
    """
    values = list(values)
    lengths: list[int] = []
    parents: list[int | None] = []
    best_length = 0
    best_end: int | None = None
    for index, value in enumerate(values):
        length, parent = 1, None
        for earlier_index, (earlier, earlier_length) in enumerate(zip(values, lengths)):
            if earlier < value and earlier_length + 1 > length:
                length, parent = earlier_length + 1, earlier_index
        lengths.append(length)
        parents.append(parent)
        if length > best_length:
            best_length, best_end = length, index

    result: list[int] = []
    current = best_end
    while current is not None:
        result.append(values[current])
        current = parents[current]
    result.reverse()
    return result


def lis_length(values: Iterable[int]) -> int:
    """Return the length of a longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def wine_tasting(glasses: Iterable[int]) -> int:
    """Return the most wine drunk without ever drinking three glasses in a row."""
    before_last = last = 0
    best_three_back = 0
    previous_glass = 0
    for glass in glasses:
        current = max(
            last,
            before_last + glass,
            best_three_back + previous_glass + glass,
        )
        best_three_back, before_last, last = before_last, last, current
        previous_glass = glass
    return last


def stickers(top: Sequence[int], bottom: Sequence[int]) -> int:
    """Return the best score from a two-row sticker sheet.

    Taking a sticker tears off its edge-adjacent neighbours.
    """
    if len(top) != len(bottom):
        raise ValueError("both rows must have the same length")
    two_back = (0, 0)
    one_back = (0, 0)
    for upper, lower in zip(top, bottom):
        current = (
            max(one_back[1], two_back[1]) + upper,
            max(one_back[0], two_back[0]) + lower,
        )
        two_back, one_back = one_back, current
    return max(one_back)


def lcs_length(x: str, y: str) -> int:
    """Return the length of the longest common subsequence of x and y."""
    previous = [0] * (len(y) + 1)
    for char_x in x:
        current = [0]
        for j, char_y in enumerate(y, start=1):
            if char_x == char_y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


class PalindromeTable:
    """Answers whether a 1-based inclusive slice of a sequence is a palindrome."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self._size = len(values)
        self._spans: set[tuple[int, int]] = set()
        for centre in range(self._size):
            self._expand(values, centre, centre)
            self._expand(values, centre, centre + 1)

    def _expand(self, values: list[int], left: int, right: int) -> None:
        while 0 <= left and right < self._size and values[left] == values[right]:
            self._spans.add((left + 1, right + 1))
            left -= 1
            right += 1

    def is_palindrome(self, start: int, end: int) -> bool:
        """Tell whether values[start..end], counted from 1, reads the same both ways."""
        if not (1 <= start <= self._size and 1 <= end <= self._size):
            raise IndexError(f"positions must lie within 1..{self._size}")
        return (start, end) in self._spans


def plum_catch(plums: Iterable[int], moves: int) -> int:
    """Return the most plums caught under two trees with at most ``moves`` moves.

    ``plums`` names the tree (1 or 2) each plum falls from, second by second;
    the catcher starts under tree 1.
    """
    if moves < 0:
        raise ValueError(f"moves must not be negative, got {moves}")
    plums = list(plums)
    if any(plum not in (1, 2) for plum in plums):
        raise ValueError("plums must fall from tree 1 or tree 2")
    if not plums:
        return 0
    first = plums[0]
    row = [0] * (moves + 1)
    row[0] = int(first == 1)
    if moves >= 1:
        row[1] = int(first == 2)
    for plum in plums[1:]:
        running = 0
        new_row = []
        for used, caught in enumerate(row):
            running = max(running, caught)
            new_row.append(running + int(plum - 1 == used % 2))
        row = new_row
    return max(row)


def triangle_graph_cost(rows: Iterable[Sequence[int]]) -> int:
    """Return the cheapest path cost from the top middle to the bottom middle vertex.

    Each row holds the costs of its left, middle and right vertex.
    """
    rows = [tuple(row) for row in rows]
    if not rows:
        raise ValueError("the graph needs at least one row")
    if any(len(row) != 3 for row in rows):
        raise ValueError("every row must hold exactly three costs")
    _, first_middle, first_right = rows[0]
    left: float = math.inf
    middle: float = first_middle
    right: float = first_middle + first_right
    for cost_left, cost_middle, cost_right in rows[1:]:
        new_left = min(left, middle) + cost_left
        new_middle = min(left, middle, right, new_left) + cost_middle
        new_right = min(new_middle, middle, right) + cost_right
        left, middle, right = new_left, new_middle, new_right
    return int(middle)


class PrefixSums:
    """Constant-time sums over 1-based inclusive ranges of a sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._totals = list(accumulate(values, initial=0))

    def range_sum(self, start: int, end: int) -> int:
        """Return the sum of values[start..end], counted from 1."""
        size = len(self._totals) - 1
        if not 1 <= start <= end <= size:
            raise IndexError(f"range must satisfy 1 <= start <= end <= {size}")
        return self._totals[end] - self._totals[start - 1]


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Return the largest sum of three cards not above limit, or 0 if none fits."""
    return max(
        (total for total in map(sum, combinations(cards, 3)) if total <= limit),
        default=0,
    )