"""Monotonic-stack algorithms over brackets and number sequences."""

from __future__ import annotations

import math
import operator
from itertools import accumulate
from typing import Callable, Sequence

_MOD = 10**9 + 7
_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Report whether every bracket is closed by its match in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack.pop():
            return False
    return not stack


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed run of parentheses."""
    stack = [-1]
    best = 0
    for i, ch in enumerate(s):
        if ch == "(":
            stack.append(i)
        else:
            stack.pop()
            if stack:
                best = max(best, i - stack[-1])
            else:
                stack.append(i)
    return best


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Report whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    if len(nums) < 3:
        return False
    stack: list[int] = []
    third = -math.inf
    for num in reversed(nums):
        if num < third:
            return True
        while stack and num > stack[-1]:
            third = stack.pop()
        stack.append(num)
    return False


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none comes."""
    waits = [0] * len(temperatures)
    stack: list[int] = []
    for i in range(len(temperatures) - 1, -1, -1):
        while stack and temperatures[stack[-1]] <= temperatures[i]:
            stack.pop()
        if stack:
            waits[i] = stack[-1] - i
        stack.append(i)
    return waits


def replace_elements(arr: Sequence[int]) -> list[int]:
    """Replace each value by the greatest value to its right; the last becomes -1."""
    result = [-1] * len(arr)
    greatest = None
    for i in range(len(arr) - 1, -1, -1):
        if greatest is not None:
            result[i] = greatest
        if greatest is None or arr[i] > greatest:
            greatest = arr[i]
    return result


def final_prices(prices: Sequence[int]) -> list[int]:
    """Discount each price by the first later price not above it."""
    result = [0] * len(prices)
    stack: list[int] = []
    for i in range(len(prices) - 1, -1, -1):
        price = prices[i]
        while stack and stack[-1] > price:
            stack.pop()
        result[i] = price - stack[-1] if stack else price
        stack.append(price)
    return result


def max_sum_min_product(nums: Sequence[int]) -> int:
    """Return the largest (minimum times sum) over contiguous runs, modulo 10**9 + 7."""
    n = len(nums)
    prefix = list(accumulate(nums, initial=0))
    left = [-1] * n
    right = [n] * n
    stack: list[int] = []
    for i, num in enumerate(nums):
        while stack and nums[stack[-1]] >= num:
            stack.pop()
        if stack:
            left[i] = stack[-1]
        stack.append(i)
    stack.clear()
    for i in range(n - 1, -1, -1):
        while stack and nums[stack[-1]] >= nums[i]:
            stack.pop()
        if stack:
            right[i] = stack[-1]
        stack.append(i)
    best = max(
        ((prefix[right[i]] - prefix[left[i] + 1]) * nums[i] for i in range(n)),
        default=0,
    )
    return max(best, 0) % _MOD


def _extreme_total(nums: Sequence[int], beats: Callable[[int, int], bool]) -> int:
    """Sum each value times the number of runs in which it is the extreme."""
    n = len(nums)
    total = 0
    stack: list[int] = []
    for i in range(n + 1):
        while stack and (i == n or beats(nums[stack[-1]], nums[i])):
            mid = stack.pop()
            left = stack[-1] if stack else -1
            total += nums[mid] * (mid - left) * (i - mid)
        stack.append(i)
    return total


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Sum, over all contiguous runs, the largest value minus the smallest."""
    return _extreme_total(nums, operator.lt) - _extreme_total(nums, operator.gt)