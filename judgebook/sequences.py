"""Counting recurrences, take-away games and coin problems."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Sequence

__all__ = [
    "EXTENDED_FIBONACCI_MOD",
    "TILE_MOD",
    "SUM_123_MOD",
    "COLOR_CIRCLE_MOD",
    "Player",
    "fibonacci",
    "pinary_count",
    "extended_fibonacci",
    "tile_count",
    "count_123_sums",
    "reduce_to_one",
    "theater_arrangements",
    "color_circle",
    "stone_game",
    "stone_game_3",
    "count_coin_combinations",
    "min_coins",
    "max_consulting_pay",
]

EXTENDED_FIBONACCI_MOD = 1_000_000_000
TILE_MOD = 15746
SUM_123_MOD = 1_000_000_009
COLOR_CIRCLE_MOD = 1_000_000_003


class Player(str, Enum):
    """The two players of the stone games; the first one moves first."""

    SANGGEUN = "SK"
    CHANGYOUNG = "CY"


def _require_at_least(minimum: int, **values: int) -> None:
    for name, value in values.items():
        if value < minimum:
            raise ValueError(f"{name} must be at least {minimum}, got {value}")


def _fib(n: int, mod: int | None = None) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
        if mod is not None:
            a, b = a % mod, b % mod
    return a


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    _require_at_least(0, n=n)
    return _fib(n)


def pinary_count(n: int) -> int:
    """Count the n-digit binary numbers that start with 1 and have no two adjacent 1s."""
    _require_at_least(1, n=n)
    return _fib(n)


def extended_fibonacci(n: int) -> tuple[int, int]:
    """Return (sign, |F(n)| mod 10**9) for Fibonacci extended to negative n."""
    if n == 0:
        return 0, 0
    sign = -1 if n < 0 and n % 2 == 0 else 1
    return sign, _fib(abs(n), EXTENDED_FIBONACCI_MOD)


def tile_count(n: int) -> int:
    """Count the binary strings of length n built from '1' and '00' tiles, mod 15746."""
    _require_at_least(1, n=n)
    current, following = 1, 2
    for _ in range(n - 1):
        current, following = following, (current + following) % TILE_MOD
    return current


def count_123_sums(n: int) -> int:
    """Count the ordered ways to write n as a sum of 1, 2 and 3, mod 1000000009."""
    _require_at_least(0, n=n)
    a, b, c = 1, 1, 2
    for _ in range(n):
        a, b, c = b, c, (a + b + c) % SUM_123_MOD
    return a


def reduce_to_one(n: int) -> tuple[int, list[int]]:
    """Reduce n to 1 by dividing by 3, dividing by 2 or subtracting 1.

    Return the fewest operations and the numbers visited, from n down to 1.
    """
    _require_at_least(1, n=n)
    moves = [0] * (n + 1)
    for value in range(2, n + 1):
        best = moves[value - 1] + 1
        if value % 3 == 0:
            best = min(best, moves[value // 3] + 1)
        if value % 2 == 0:
            best = min(best, moves[value // 2] + 1)
        moves[value] = best

    path = [n]
    current = n
    while current > 1:
        if current % 3 == 0 and moves[current] == moves[current // 3] + 1:
            current //= 3
        elif current % 2 == 0 and moves[current] == moves[current // 2] + 1:
            current //= 2
        else:
            current -= 1
        path.append(current)
    return moves[n], path


def theater_arrangements(n: int, vip_seats: Iterable[int]) -> int:
    """Count seatings where each person sits in their seat or swaps with a neighbour.

    VIP seats, given in increasing order, never swap.
    """
    _require_at_least(0, n=n)
    result = 1
    last = 0
    for seat in vip_seats:
        if not last < seat <= n:
            raise ValueError(f"VIP seats must be increasing within 1..{n}, got {seat}")
        result *= _fib(seat - last)
        last = seat
    return result * _fib(n - last + 1)


def color_circle(n: int, k: int) -> int:
    """Count ways to pick k pairwise non-adjacent colours on a wheel of n, mod 1000000003."""
    _require_at_least(3, n=n)
    _require_at_least(1, k=k)
    if k > n // 2:
        return 0
    rows: list[list[int]] = []
    for size in range(n):
        row = [1, size] + [0] * (k - 1)
        if size >= 2:
            shorter, shortest = rows[size - 1], rows[size - 2]
            for chosen in range(2, k + 1):
                row[chosen] = (shorter[chosen] + shortest[chosen - 1]) % COLOR_CIRCLE_MOD
        rows.append(row)
    return (rows[n - 1][k] + rows[n - 3][k - 1]) % COLOR_CIRCLE_MOD


def stone_game(n: int) -> Player:
    """Return the winner when each turn takes 1 or 3 of n stones and the last taker wins."""
    _require_at_least(1, n=n)
    return Player.SANGGEUN if n % 2 else Player.CHANGYOUNG


def stone_game_3(n: int) -> Player:
    """Return the winner when each turn takes 1, 3 or 4 of n stones and the last taker wins."""
    _require_at_least(1, n=n)
    wins = [True, True, False, True, True]
    while len(wins) <= n:
        wins.append(not wins[-1] or not wins[-3] or not wins[-4])
    return Player.SANGGEUN if wins[n] else Player.CHANGYOUNG


def _require_coins(coins: Sequence[int]) -> None:
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def count_coin_combinations(coins: Sequence[int], target: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to target."""
    _require_coins(coins)
    _require_at_least(0, target=target)
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def min_coins(coins: Sequence[int], target: int) -> int:
    """Return the fewest coins summing to target, or -1 if it cannot be paid."""
    _require_coins(coins)
    _require_at_least(1, target=target)
    best: list[int | None] = [0] + [None] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            previous = best[amount - coin]
            if previous is None:
                continue
            current = best[amount]
            if current is None or previous + 1 < current:
                best[amount] = previous + 1
    answer = best[target]
    return -1 if answer is None else answer


def max_consulting_pay(schedule: Sequence[tuple[int, int]]) -> int:
    """Return the most pay from non-overlapping jobs finishing within the schedule.

    ``schedule[i]`` is (days, pay) of the job offered on day i + 1.
    """
    last_day = len(schedule)
    earned = [0] * (last_day + 2)
    best = 0
    for day, (length, pay) in enumerate(schedule, start=1):
        if length < 1:
            raise ValueError(f"job lengths must be positive, got {length}")
        best = max(best, earned[day])
        earned[day] = best
        end = day + length
        if end <= last_day + 1:
            earned[end] = max(earned[end], best + pay)
    return max(best, earned[last_day + 1])