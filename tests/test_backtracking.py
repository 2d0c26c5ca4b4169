from itertools import combinations, permutations, product

import pytest

from algosuite.backtracking import (
    combination_sum,
    combination_sum2,
    generate_parenthesis,
    partition_palindromes,
    permute,
    subsets,
    subsets_with_dup,
    valid_strings,
)
from algosuite.stacks import is_valid_parentheses


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generate_parenthesis_matches_all_balanced_strings(n):
    every = ("".join(p) for p in product("()", repeat=2 * n))
    assert generate_parenthesis(n) == [s for s in every if is_valid_parentheses(s)]


def test_generate_parenthesis_strings_are_balanced_and_unique():
    result = generate_parenthesis(5)
    assert len(result) == len(set(result))
    assert all(len(s) == 10 and is_valid_parentheses(s) for s in result)


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    result = combination_sum(candidates, 8)
    assert result
    assert all(sum(combo) == 8 for combo in result)
    assert all(set(combo) <= set(candidates) for combo in result)
    assert len({tuple(combo) for combo in result}) == len(result)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum2_worked_example():
    candidates = [10, 1, 2, 7, 6, 1, 5]
    before = list(candidates)
    result = combination_sum2(candidates, 8)
    assert result == [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]
    assert candidates == before


def test_combination_sum2_uses_each_value_at_most_as_often_as_given():
    candidates = [2, 5, 2, 1, 2]
    result = combination_sum2(candidates, 5)
    assert all(sum(combo) == 5 for combo in result)
    assert all(combo == sorted(combo) for combo in result)
    assert all(combo.count(2) <= candidates.count(2) for combo in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_permute_distinct_matches_itertools():
    nums = [1, 2, 3, 4]
    assert permute(nums) == [list(p) for p in permutations(nums)]


def test_permute_with_repeated_values_gives_nothing():
    assert permute([1, 1, 2]) == []


def test_subsets_cover_all_combinations():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert result[0] == []
    expected = {c for k in range(len(nums) + 1) for c in combinations(nums, k)}
    assert {tuple(s) for s in result} == expected
    assert len(result) == len(expected)


def test_subsets_with_dup_are_distinct_and_complete():
    nums = [2, 1, 2, 2]
    result = subsets_with_dup(nums)
    expected = {c for k in range(len(nums) + 1) for c in combinations(sorted(nums), k)}
    assert {tuple(s) for s in result} == expected
    assert len(result) == len(expected)
    assert all(s == sorted(s) for s in result)


def test_partition_palindromes_pieces_rebuild_input():
    s = "aabbaa"
    result = partition_palindromes(s)
    assert all("".join(parts) == s for parts in result)
    assert all(p == p[::-1] for parts in result for p in parts)
    assert len({tuple(parts) for parts in result}) == len(result)
    assert [s] in result


def test_partition_palindromes_distinct_letters_only_singletons():
    assert partition_palindromes("abc") == [list("abc")]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5])
def test_valid_strings_matches_filtered_binary_strings(n):
    every = ("".join(p) for p in product("01", repeat=n))
    assert valid_strings(n) == [s for s in every if "00" not in s]


def test_valid_strings_negative_raises():
    with pytest.raises(ValueError):
        valid_strings(-1)