"""Number theory and arithmetic puzzles."""

from __future__ import annotations

import math
from enum import Enum
from fractions import Fraction
from itertools import count, pairwise
from typing import Iterable, Sequence

__all__ = [
    "Relation",
    "lcm",
    "add_fractions",
    "extra_trees",
    "primes_between",
    "count_primes",
    "next_prime",
    "kth_factor",
    "relation",
    "describe_perfect",
    "nth_doom_number",
    "smallest_generator",
    "honeycomb_rooms",
    "snail_days",
    "central_movement_points",
    "solve_linear_system",
    "sugar_bags",
    "make_change",
    "satisfies_big_o",
]


class Relation(str, Enum):
    """How the first number of a pair relates to the second."""

    FACTOR = "factor"
    MULTIPLE = "multiple"
    NEITHER = "neither"


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    _require_positive(a=a, b=b)
    return a * b // math.gcd(a, b)


def add_fractions(num1: int, den1: int, num2: int, den2: int) -> tuple[int, int]:
    """Add num1/den1 and num2/den2 and return the sum in lowest terms."""
    total = Fraction(num1, den1) + Fraction(num2, den2)
    return total.numerator, total.denominator


def extra_trees(positions: Sequence[int]) -> int:
    """Count the trees to plant so that all trees stand evenly spaced.

    ``positions`` are the existing tree positions in increasing order.
    """
    if len(positions) < 2:
        raise ValueError("at least two tree positions are needed")
    gaps = [b - a for a, b in pairwise(positions)]
    step = 0
    for gap in gaps:
        step = math.gcd(step, gap)
    if step == 0:
        raise ValueError("tree positions must be distinct")
    return sum(gap // step - 1 for gap in gaps)


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes p with low <= p <= high, in increasing order."""
    if high < 2:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(high) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, high + 1, i)))
    return [p for p in range(max(low, 2), high + 1) if sieve[p]]


_SMALL_PRIMES = frozenset(primes_between(2, 1000))


def count_primes(numbers: Iterable[int]) -> int:
    """Count the numbers that are primes not greater than 1000."""
    return sum(1 for n in numbers if n in _SMALL_PRIMES)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def next_prime(n: int) -> int:
    """Return the smallest prime that is at least n."""
    candidate = max(n, 2)
    while not _is_prime(candidate):
        candidate += 1
    return candidate


def kth_factor(n: int, k: int) -> int:
    """Return the k-th smallest divisor of n, or 0 if n has fewer than k."""
    divisors = (d for d in range(1, n + 1) if n % d == 0)
    for index, divisor in enumerate(divisors, start=1):
        if index == k:
            return divisor
    return 0


def relation(a: int, b: int) -> Relation:
    """Tell whether a is a factor of b, a multiple of b, or neither."""
    _require_positive(a=a, b=b)
    if a > b:
        return Relation.MULTIPLE if a % b == 0 else Relation.NEITHER
    return Relation.FACTOR if b % a == 0 else Relation.NEITHER


def describe_perfect(n: int) -> str:
    """Describe n as a sum of its proper divisors, or say it is not perfect."""
    divisors = [d for d in range(1, n // 2 + 1) if n % d == 0]
    if sum(divisors) == n:
        return f"{n} = " + " + ".join(map(str, divisors))
    return f"{n} is NOT perfect."


def nth_doom_number(n: int) -> int:
    """Return the n-th positive integer whose decimal form contains 666."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    doom = (value for value in count(1) if "666" in str(value))
    for index, value in enumerate(doom, start=1):
        if index == n:
            return value
    raise AssertionError("unreachable")


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def smallest_generator(n: int) -> int:
    """Return the smallest m with m + digit_sum(m) == n, or 0 if there is none."""
    start = max(1, n - len(str(n)) * 9)
    return next((m for m in range(start, n) if m + _digit_sum(m) == n), 0)


def honeycomb_rooms(n: int) -> int:
    """Return how many rooms are passed from the centre cell to cell n."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if n == 1:
        return 1
    ring = 1
    while not 3 * ring * ring - 3 * ring + 1 < n <= 3 * ring * ring + 3 * ring + 1:
        ring += 1
    return ring + 1


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def snail_days(up: int, down: int, height: int) -> int:
    """Return the days a snail climbing up and slipping down needs to reach height."""
    if up <= down:
        raise ValueError("the snail must climb more than it slips")
    return _trunc_div(height - down - 1, up - down) + 1


def central_movement_points(n: int) -> int:
    """Return the number of points after n steps of the midpoint subdivision."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    side = 2**n + 1
    return side * side


_SEARCH = range(-999, 1000)


def _first_y(x: int, a: int, b: int, c: int, d: int, e: int, f: int) -> int | None:
    def solve(coef_x: int, coef_y: int, rhs: int) -> int | None:
        rest = rhs - coef_x * x
        if rest % coef_y:
            return None
        return rest // coef_y

    if b:
        y = solve(a, b, c)
    elif a * x != c:
        return None
    elif e:
        y = solve(d, e, f)
    elif d * x != f:
        return None
    else:
        return _SEARCH[0]
    if y is None or y not in _SEARCH or d * x + e * y != f:
        return None
    return y


def solve_linear_system(a: int, b: int, c: int, d: int, e: int, f: int) -> tuple[int, int]:
    """Find integers -999 <= x, y <= 999 with ax + by = c and dx + ey = f.

    The smallest x is taken, and for it the smallest y.
    """
    for x in _SEARCH:
        y = _first_y(x, a, b, c, d, e, f)
        if y is not None:
            return x, y
    raise ValueError("the system has no solution in the search range")


def sugar_bags(n: int) -> int:
    """Return the fewest 3 kg and 5 kg bags that weigh exactly n kg, or -1."""
    if n <= 0:
        return -1
    for fives in range(n // 5, -1, -1):
        rest = n - 5 * fives
        if rest % 3 == 0:
            return fives + rest // 3
    return -1


def make_change(cents: int) -> tuple[int, int, int, int]:
    """Split cents into quarters, dimes, nickels and pennies, largest first."""
    quarters, cents = divmod(cents, 25)
    dimes, cents = divmod(cents, 10)
    nickels, pennies = divmod(cents, 5)
    return quarters, dimes, nickels, pennies


def satisfies_big_o(a1: int, a0: int, c: int, n0: int) -> bool:
    """Tell whether a1*n + a0 <= c*n holds for every n >= n0."""
    return a1 * n0 + a0 <= c * n0 and a1 <= c