import math

import pytest

from judgebook.numbers import (
    Relation,
    add_fractions,
    central_movement_points,
    count_primes,
    describe_perfect,
    extra_trees,
    honeycomb_rooms,
    kth_factor,
    lcm,
    make_change,
    next_prime,
    nth_doom_number,
    primes_between,
    relation,
    satisfies_big_o,
    smallest_generator,
    snail_days,
    solve_linear_system,
    sugar_bags,
)


def _prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def _digits(n):
    return sum(int(c) for c in str(n))


@pytest.mark.parametrize("a,b", [(1, 1), (4, 6), (13, 17), (100, 75), (123456, 7890)])
def test_lcm_invariants(a, b):
    m = lcm(a, b)
    assert m % a == 0 and m % b == 0
    assert m * math.gcd(a, b) == a * b


def test_lcm_identity():
    assert lcm(42, 42) == 42
    assert lcm(42, 1) == 42


def test_lcm_rejects_zero():
    with pytest.raises(ValueError):
        lcm(0, 5)


@pytest.mark.parametrize("fr", [(2, 7, 3, 5), (1, 2, 1, 2), (4, 6, 2, 9)])
def test_add_fractions_is_reduced_sum(fr):
    n1, d1, n2, d2 = fr
    num, den = add_fractions(n1, d1, n2, d2)
    assert math.gcd(num, den) == 1
    assert num * d1 * d2 == (n1 * d2 + n2 * d1) * den


def test_extra_trees_fills_gaps():
    full = list(range(0, 40, 4))
    existing = [0, 4, 12, 24, 36]
    assert extra_trees(existing) == len(full) - len(existing)


def test_extra_trees_needs_two():
    with pytest.raises(ValueError):
        extra_trees([5])


def test_primes_between_values():
    assert primes_between(3, 16) == [3, 5, 7, 11, 13]


def test_primes_between_all_prime_and_complete():
    found = primes_between(1, 500)
    assert all(_prime(p) for p in found)
    assert [n for n in range(1, 501) if _prime(n)] == found


def test_count_primes_matches_sieve():
    assert count_primes(range(1, 1001)) == len(primes_between(1, 1000))


def test_count_primes_ignores_large():
    assert count_primes([1009]) == 0


def test_next_prime_small():
    assert next_prime(0) == 2
    assert next_prime(7) == 7


@pytest.mark.parametrize("n", [4, 6, 20, 90, 1000, 7919])
def test_next_prime_is_next(n):
    p = next_prime(n)
    assert p >= n and _prime(p)
    assert primes_between(n, p - 1) == []


def test_kth_factor():
    assert kth_factor(12, 1) == 1
    assert kth_factor(13, 2) == 13
    assert kth_factor(13, 3) == 0
    assert all(36 % kth_factor(36, k) == 0 for k in range(1, 10))


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (8, 16, Relation.FACTOR),
        (32, 4, Relation.MULTIPLE),
        (17, 5, Relation.NEITHER),
        (5, 17, Relation.NEITHER),
        (9, 9, Relation.FACTOR),
    ],
)
def test_relation(a, b, expected):
    assert relation(a, b) is expected


def test_relation_rejects_zero():
    with pytest.raises(ValueError):
        relation(0, 3)


def test_describe_perfect():
    assert describe_perfect(6) == "6 = 1 + 2 + 3"
    assert describe_perfect(12) == "12 is NOT perfect."
    text = describe_perfect(28)
    assert text.startswith("28 = ")
    assert sum(int(t) for t in text[5:].split(" + ")) == 28


def test_nth_doom_number():
    assert nth_doom_number(1) == 666
    values = [nth_doom_number(i) for i in range(1, 20)]
    assert all("666" in str(v) for v in values)
    assert values == sorted(set(values))
    with pytest.raises(ValueError):
        nth_doom_number(0)


def test_smallest_generator():
    for n in range(1, 400):
        g = smallest_generator(n)
        if g:
            assert g + _digits(g) == n
            assert all(i + _digits(i) != n for i in range(1, g))
        else:
            assert all(i + _digits(i) != n for i in range(1, n))


def test_honeycomb_rooms():
    assert honeycomb_rooms(1) == 1
    values = [honeycomb_rooms(n) for n in range(1, 200)]
    assert all(0 <= b - a <= 1 for a, b in zip(values, values[1:]))
    with pytest.raises(ValueError):
        honeycomb_rooms(0)


@pytest.mark.parametrize("up,down,height", [(2, 1, 5), (5, 1, 6), (100, 99, 1000000000), (3, 0, 3)])
def test_snail_days(up, down, height):
    days = snail_days(up, down, height)
    assert (days - 1) * (up - down) + up >= height
    assert days == 1 or (days - 2) * (up - down) + up < height


def test_snail_days_rejects_stuck_snail():
    with pytest.raises(ValueError):
        snail_days(2, 2, 10)


def test_central_movement_points():
    assert central_movement_points(1) == 9
    sides = [math.isqrt(central_movement_points(n)) for n in range(1, 10)]
    assert all(s * s == central_movement_points(i + 1) for i, s in enumerate(sides))
    assert all(b == 2 * a - 1 for a, b in zip(sides, sides[1:]))


@pytest.mark.parametrize("a,b,d,e,x,y", [(1, 3, 4, -1, 2, -1), (2, 5, 3, -4, -7, 300), (0, 2, 1, 0, 5, 9)])
def test_solve_linear_system(a, b, d, e, x, y):
    assert solve_linear_system(a, b, a * x + b * y, d, e, d * x + e * y) == (x, y)


def test_solve_linear_system_no_solution():
    with pytest.raises(ValueError):
        solve_linear_system(2, 0, 1, 0, 2, 1)


def test_sugar_bags():
    assert sugar_bags(4) == -1
    for n in range(3, 200):
        bags = sugar_bags(n)
        if bags == -1:
            assert all((n - 5 * j) % 3 for j in range(n // 5 + 1))
        else:
            assert any(3 * i + 5 * (bags - i) == n for i in range(bags + 1))


@pytest.mark.parametrize("cents", [0, 4, 24, 124, 499])
def test_make_change(cents):
    q, d, n, p = make_change(cents)
    assert 25 * q + 10 * d + 5 * n + p == cents
    assert p < 5 and n <= 1 and 10 * d + 5 * n + p < 25


def test_satisfies_big_o():
    assert satisfies_big_o(7, 7, 8, 1) is False
    assert satisfies_big_o(7, 7, 8, 10) is True