"""Backtracking enumerations: bracket strings, combinations, subsets and partitions."""

from __future__ import annotations

from typing import Iterator, Sequence


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, in lexicographic order."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if closed == n:
            yield prefix
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if opened > closed:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the combinations of ``candidates``, each reusable, that sum to ``target``."""
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    chosen: list[int] = []

    def search(index: int, remaining: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0 or index >= len(candidates):
            return
        chosen.append(candidates[index])
        yield from search(index, remaining - candidates[index])
        chosen.pop()
        yield from search(index + 1, remaining)

    return list(search(0, target))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations, each candidate used once, that sum to ``target``."""
    pool = sorted(candidates)
    chosen: list[int] = []

    def search(start: int, remaining: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0:
            return
        for i in range(start, len(pool)):
            if i > start and pool[i] == pool[i - 1]:
                continue
            chosen.append(pool[i])
            yield from search(i + 1, remaining - pool[i])
            chosen.pop()

    return list(search(0, target))


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``; a value may appear only once in an ordering."""
    chosen: list[int] = []

    def extend() -> Iterator[list[int]]:
        if len(chosen) == len(nums):
            yield list(chosen)
            return
        for value in nums:
            if value in chosen:
                continue
            chosen.append(value)
            yield from extend()
            chosen.pop()

    return list(extend())


def _subsets_of(pool: Sequence[int], skip_repeats: bool) -> list[list[int]]:
    chosen: list[int] = []

    def grow(start: int) -> Iterator[list[int]]:
        yield list(chosen)
        for i in range(start, len(pool)):
            if skip_repeats and i > start and pool[i] == pool[i - 1]:
                continue
            chosen.append(pool[i])
            yield from grow(i + 1)
            chosen.pop()

    return list(grow(0))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, each keeping the input order."""
    return _subsets_of(nums, skip_repeats=False)


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each in ascending order."""
    return _subsets_of(sorted(nums), skip_repeats=True)


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes."""
    parts: list[str] = []

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield list(parts)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                parts.append(piece)
                yield from split(end)
                parts.pop()

    return list(split(0))


def valid_strings(n: int) -> list[str]:
    """Return every binary string of length ``n`` with no two adjacent zeros, ascending."""
    if n < 0:
        raise ValueError("n must be non-negative")

    def grow(prefix: str, last_was_one: bool) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        if last_was_one:
            yield from grow(prefix + "0", False)
        yield from grow(prefix + "1", True)

    return list(grow("", True))