"""Dynamic programming on strings, sequences and coin or subset sums."""

from __future__ import annotations

from typing import Sequence


def edit_distance(word1: str, word2: str) -> int:
    """Return the fewest insertions, deletions and substitutions turning one word into the other."""
    prev = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        curr = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                curr.append(prev[j - 1])
            else:
                curr.append(1 + min(prev[j], curr[j - 1], prev[j - 1]))
        prev = curr
    return prev[-1]


def rob(houses: Sequence[int]) -> int:
    """Return the largest total from houses with no two adjacent ones taken."""
    skip, take = 0, 0
    for amount in houses:
        skip, take = max(skip, take), skip + amount
    if not houses:
        return 0
    return max(skip, take)


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if none do."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if total - coin >= 0:
                best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] > amount else best[amount]


def count_subsets_with_sum(nums: Sequence[int], target: int) -> int:
    """Count the subsets of non-negative ``nums`` whose sum is ``target``."""
    if target < 0:
        raise ValueError("target must be non-negative")
    if any(num < 0 for num in nums):
        raise ValueError("numbers must be non-negative")
    ways = [1] + [0] * target
    for num in nums:
        for total in range(target, num - 1, -1):
            ways[total] += ways[total - num]
    return ways[target]


def can_partition(nums: Sequence[int]) -> bool:
    """Report whether ``nums`` splits into two parts of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    return count_subsets_with_sum(nums, total // 2) > 0


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Count the sign assignments to ``nums`` that reach ``target``.

    Works through the subset-sum count for ``(target + sum) / 2`` rounded
    toward zero; raises ValueError when that value is negative.
    """
    total = target + sum(nums)
    half = abs(total) // 2 * (1 if total >= 0 else -1)
    if half < 0:
        raise ValueError("target is out of reach")
    return count_subsets_with_sum(nums, half)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence."""
    prev = [0] * (len(text2) + 1)
    for a in text1:
        curr = [0]
        for j, b in enumerate(text2, start=1):
            curr.append(prev[j - 1] + 1 if a == b else max(prev[j], curr[j - 1]))
        prev = curr
    return prev[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Return the length of the longest palindromic subsequence."""
    return longest_common_subsequence(s, s[::-1])


def count_coin_combinations(amount: int, coins: Sequence[int]) -> int:
    """Count the coin combinations, order ignored, that sum to ``amount``."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coins must be non-negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin == 0:
            continue
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def delete_distance(word1: str, word2: str) -> int:
    """Return the fewest character deletions that make the two words equal."""
    common = longest_common_subsequence(word1, word2)
    return len(word1) + len(word2) - 2 * common


def find_length(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the length of the longest run appearing in both sequences."""
    best = 0
    prev = [0] * (len(nums2) + 1)
    for a in nums1:
        curr = [0]
        for j, b in enumerate(nums2, start=1):
            curr.append(prev[j - 1] + 1 if a == b else 0)
        best = max(best, *curr)
        prev = curr
    return best