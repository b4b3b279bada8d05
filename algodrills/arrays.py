"""Array, matrix and string exercises."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    total = sum(row[i] + row[n - 1 - i] for i, row in enumerate(matrix))
    if n % 2 == 1:
        total -= matrix[n // 2][n // 2]
    return total


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of target in sorted nums, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    result: list[int] = []
    if not matrix:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        result.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top < bottom:
            result.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left < right:
            result.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1
    return result


def is_anagram(s: str, t: str) -> bool:
    """Return True if t is a rearrangement of the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the given vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[right] > height[left]:
            left += 1
        else:
            right -= 1
    return best


def find_the_difference(s: str, t: str) -> str:
    """Return the one character added to s to make t."""
    return chr(reduce(xor, map(ord, s + t), 0))


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the lexicographically next permutation, wrapping to the smallest."""
    items = list(nums)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    swap = next(j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot])
    items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def find_duplicates_and_missing(nums: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return values in 1..n seen exactly twice, and values in 1..n never seen."""
    n = len(nums)
    bad = [num for num in nums if not 0 <= num <= n]
    if bad:
        raise ValueError(f"values out of range 0..{n}: {bad}")
    counts = Counter(nums)
    candidates = range(1, n + 1)
    duplicates = [value for value in candidates if counts[value] == 2]
    missing = [value for value in candidates if counts[value] == 0]
    return duplicates, missing