import pytest

from judgebook.text import (
    GRADE_POINTS,
    count_croatian_letters,
    count_distinct_substrings,
    count_group_words,
    grade_average,
    is_group_word,
    most_frequent_letter,
    read_vertically,
)


def test_read_vertically_value():
    assert read_vertically(["ABC", "DE"]) == "ADBEC"


def test_read_vertically_keeps_all_characters():
    lines = ["AABCDD", "afzz", "09121", "a8EWg6", "P5h3kx"]
    result = read_vertically(lines)
    assert sorted(result) == sorted("".join(lines))
    assert result[: len(lines)] == "".join(line[0] for line in lines)


def test_count_distinct_substrings():
    assert count_distinct_substrings("ababc") == 12
    assert count_distinct_substrings("aaaa") == len("aaaa")
    assert count_distinct_substrings("") == 0


def test_count_distinct_substrings_bound():
    s = "abcabcab"
    n = len(s)
    assert count_distinct_substrings(s) <= n * (n + 1) // 2


def test_most_frequent_letter():
    assert most_frequent_letter("Mississipi") == "?"
    assert most_frequent_letter("zZa") == "Z"
    assert most_frequent_letter("baaa") == "A"
    assert most_frequent_letter("") == "?"


def test_most_frequent_letter_rejects_digits():
    with pytest.raises(ValueError):
        most_frequent_letter("ab1")


def test_group_words():
    assert is_group_word("happy") is True
    assert is_group_word("aba") is False
    assert is_group_word("") is True
    words = ["happy", "new", "year", "aba", "abab", "abcabc"]
    assert count_group_words(words) == len(["happy", "new", "year"])


def test_count_croatian_letters_value():
    assert count_croatian_letters("ljes=njak") == 6


def test_each_digraph_is_one_letter():
    alphabet = ["c=", "c-", "dz=", "d-", "lj", "nj", "s=", "z="]
    assert [count_croatian_letters(a) for a in alphabet] == [1] * len(alphabet)
    assert count_croatian_letters("".join(alphabet)) == len(alphabet)


def test_plain_text_counts_characters():
    assert count_croatian_letters("abcdef") == len("abcdef")


def test_grade_average_single_grade():
    assert grade_average([("Math", 3.0, "A+")]) == GRADE_POINTS["A+"]


def test_grade_average_skips_pass():
    records = [("Art", 2.0, "B0"), ("Gym", 1.0, "P"), ("Lab", 2.0, "B0")]
    assert grade_average(records) == pytest.approx(GRADE_POINTS["B0"])


def test_grade_average_is_weighted():
    records = [("A", 1.0, "A+"), ("B", 3.0, "F")]
    result = grade_average(records)
    assert GRADE_POINTS["F"] < result < GRADE_POINTS["A+"]
    assert result * 4.0 == pytest.approx(GRADE_POINTS["A+"])


def test_grade_average_errors():
    with pytest.raises(ValueError):
        grade_average([("Gym", 1.0, "P")])
    with pytest.raises(ValueError):
        grade_average([("Odd", 1.0, "E")])