"""Array algorithms: searching, intervals, prefix sums and greedy scans."""

from __future__ import annotations

from collections import Counter
from typing import MutableSequence, Sequence

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")
_MAX_EATING_SPEED = 10**9


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last."""
    jumps = farthest = current_end = 0
    for i, reach in enumerate(nums[:-1]):
        farthest = max(farthest, i + reach)
        if i == current_end:
            jumps += 1
            current_end = farthest
    return jumps


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = best = nums[0]
    for num in nums[1:]:
        running = max(running, 0) + num
        best = max(best, running)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Report whether the last index can be reached from the first."""
    reached = 0
    for i in range(len(nums) - 1, -1, -1):
        if nums[i] + i >= reached:
            reached = i
    return reached == 0


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted disjoint list."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Add ``new_interval`` to ``intervals`` and merge the result."""
    return merge_intervals([*intervals, new_interval])


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in one pass."""
    if any(value not in (0, 1, 2) for value in nums):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold room for m + n values")
    i, j, k = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    while j >= 0:
        nums1[k] = nums2[j]
        j -= 1
        k -= 1


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Give each score its rank: medals for the top three, the place number otherwise."""
    order = sorted(range(len(score)), key=lambda i: score[i], reverse=True)
    ranks = [""] * len(score)
    for place, index in enumerate(order):
        ranks[index] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return ranks


def find_max_length(nums: Sequence[int]) -> int:
    """Return the length of the longest run with as many 0s as 1s."""
    first_seen = {0: -1}
    balance = best = 0
    for i, num in enumerate(nums):
        balance += -1 if num == 0 else 1
        if balance in first_seen:
            best = max(best, i - first_seen[balance])
        else:
            first_seen[balance] = i
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous runs whose sum is ``k``."""
    seen = Counter({0: 1})
    running = count = 0
    for num in nums:
        running += num
        count += seen[running - k]
        seen[running] += 1
    return count


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in an ascending sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest speed, up to 10**9, that eats every pile within ``h`` hours."""

    def fits(speed: int) -> bool:
        return sum(-(-pile // speed) for pile in piles) <= h

    low, high = 1, _MAX_EATING_SPEED
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError("no speed finishes the piles in time")
    return answer


def valid_mountain_array(arr: Sequence[int]) -> bool:
    """Report whether values strictly rise and then strictly fall, both at least once."""
    n = len(arr)
    if n < 3:
        return False
    i = 0
    while i + 1 < n and arr[i] < arr[i + 1]:
        i += 1
    if i == 0 or i == n - 1:
        return False
    while i + 1 < n and arr[i] > arr[i + 1]:
        i += 1
    return i == n - 1


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries ``weights`` in order within ``days``."""

    def fits(capacity: int) -> bool:
        load, needed = 0, 1
        for weight in weights:
            if load + weight > capacity:
                needed += 1
                load = weight
            else:
                load += weight
        return needed <= days

    low, high = max(weights, default=0), sum(weights)
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError("days must be at least 1")
    return answer


def find_subarrays(nums: Sequence[int]) -> bool:
    """Report whether two different adjacent pairs have the same sum."""
    seen: set[int] = set()
    for a, b in zip(nums, nums[1:]):
        total = a + b
        if total in seen:
            return True
        seen.add(total)
    return False


def count_days(days: int, meetings: Sequence[Sequence[int]]) -> int:
    """Count the days from 1 to ``days`` not covered by any ``[start, end]`` meeting."""
    free = 0
    last_busy = 0
    for start, end in sorted(meetings, key=lambda meeting: meeting[0]):
        if start > last_busy + 1:
            free += start - last_busy - 1
        last_busy = max(last_busy, end)
    if last_busy < days:
        free += days - last_busy
    return free


def maximum_length(nums: Sequence[int]) -> int:
    """Return the longest subsequence whose adjacent pair sums all share one parity."""
    if not nums:
        raise ValueError("nums must not be empty")
    alternating = 1
    prev = nums[0]
    for num in nums[1:]:
        if (num + prev) % 2 == 1:
            alternating += 1
            prev = num
    evens = sum(1 for num in nums if num % 2 == 0)
    odds = len(nums) - evens
    return max(alternating, evens, odds)