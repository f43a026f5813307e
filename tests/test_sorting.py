import random

import pytest

from basicds.sorting import (
    bubble_sort,
    counting_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
)

_rng = random.Random(1234)

GENERAL_CASES = [
    [],
    [1],
    [2, 1],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, 3, 3],
    [-4, 7, 0, -1, 7, 2],
    [_rng.randint(-50, 50) for _ in range(40)],
]

NON_NEGATIVE_CASES = [
    [],
    [0],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [9, 9, 0, 1, 1],
    [_rng.randint(0, 999) for _ in range(40)],
]


@pytest.mark.parametrize("values", GENERAL_CASES)
def test_comparison_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


@pytest.mark.parametrize("values", NON_NEGATIVE_CASES)
def test_all_sorts_on_non_negative(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert counting_sort(values) == expected
    assert radix_sort(values) == expected


def test_input_is_not_modified():
    values = [5, 1, 4, 2]
    original = list(values)
    assert bubble_sort(values) == [1, 2, 4, 5]
    assert insertion_sort(values) == [1, 2, 4, 5]
    assert merge_sort(values) == [1, 2, 4, 5]
    assert quick_sort(values) == [1, 2, 4, 5]
    assert selection_sort(values) == [1, 2, 4, 5]
    assert counting_sort(values) == [1, 2, 4, 5]
    assert radix_sort(values) == [1, 2, 4, 5]
    assert values == original


def test_comparison_sorts_accept_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected


def test_comparison_sorts_accept_generators():
    expected = [1, 4, 9]
    assert bubble_sort(x * x for x in (3, -2, 1)) == expected
    assert insertion_sort(x * x for x in (3, -2, 1)) == expected
    assert merge_sort(x * x for x in (3, -2, 1)) == expected
    assert quick_sort(x * x for x in (3, -2, 1)) == expected
    assert selection_sort(x * x for x in (3, -2, 1)) == expected


def test_quick_sort_large_sorted_input():
    values = list(range(2000))
    assert quick_sort(reversed(values)) == values


def test_counting_sort_with_explicit_max_key():
    values = [2, 5, 3, 0, 2, 3, 0, 3]
    assert counting_sort(values, 5) == sorted(values)


def test_counting_sort_rejects_value_above_max_key():
    with pytest.raises(ValueError):
        counting_sort([1, 6], 5)


def test_counting_sort_rejects_negative_value():
    with pytest.raises(ValueError):
        counting_sort([-1, 2])


def test_counting_sort_rejects_negative_max_key():
    with pytest.raises(ValueError):
        counting_sort([], -1)


def test_radix_sort_rejects_negative_value():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_radix_sort_keeps_length():
    values = [10, 100, 1, 1000, 10]
    result = radix_sort(values)
    assert len(result) == len(values)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_main_sorts_arguments(capsys):
    values = [3, -1, 2]
    assert main(["quick", *map(str, values)]) == 0
    out = capsys.readouterr().out
    assert "Sorted array: " + " ".join(map(str, sorted(values))) in out


def test_main_merge_prints_given_array(capsys):
    assert main(["merge", "2", "1"]) == 0
    out = capsys.readouterr().out
    assert "Given array: 2 1" in out
    assert "Sorted array: 1 2" in out


def test_main_reads_input(monkeypatch, capsys):
    answers = iter(["3", "9 4", "6"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["selection"]) == 0
    assert "Sorted array: 4 6 9" in capsys.readouterr().out


def test_main_reports_bad_counting_input(capsys):
    assert main(["counting", "4", "9", "--max-key", "5"]) == 1
    assert "outside" in capsys.readouterr().err