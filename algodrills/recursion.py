"""Recursive exercises: searching, sorting, counting and enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return an index of target in sorted arr, or -1."""

    def search(left: int, right: int) -> int:
        if left > right:
            return -1
        mid = left + (right - left) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] > target:
            return search(left, mid - 1)
        return search(mid + 1, right)

    return search(0, len(arr) - 1)


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def increasing(n: int) -> list[int]:
    """Return 1..n in increasing order."""
    _check_non_negative(n)
    return list(range(1, n + 1))


def decreasing(n: int) -> list[int]:
    """Return n..1 in decreasing order."""
    _check_non_negative(n)
    return list(range(n, 0, -1))


def occurrences(arr: Sequence[int], key: int) -> list[int]:
    """Return every index at which key occurs, in ascending order."""
    return [index for index, value in enumerate(arr) if value == key]


def first_occurrence(nums: Sequence[int], target: int) -> int:
    """Return the first index of target, or -1."""
    return next((i for i, value in enumerate(nums) if value == target), -1)


def last_occurrence(nums: Sequence[int], target: int) -> int:
    """Return the last index of target, or -1."""
    return next(
        (i for i in range(len(nums) - 1, -1, -1) if nums[i] == target),
        -1,
    )


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a stably sorted copy of arr."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2 + len(arr) % 2
    left, right = merge_sort(arr[:mid]), merge_sort(arr[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def friend_pairings(n: int) -> int:
    """Number of ways n friends can stay single or pair up."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n <= 2:
        return n
    before, current = 1, 2
    for k in range(3, n + 1):
        before, current = current, current + (k - 1) * before
    return current


def binary_strings_without_consecutive_ones(n: int) -> list[str]:
    """All binary strings of length n with no two adjacent ones, in order."""
    _check_non_negative(n)

    def build(prefix: str) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        yield from build(prefix + "0")
        if not prefix or prefix[-1] != "1":
            yield from build(prefix + "1")

    return list(build(""))


def subsets(text: str) -> list[str]:
    """All subsequences of text, those taking each character listed first."""
    if not text:
        return [""]
    rest = subsets(text[1:])
    return [text[0] + sub for sub in rest] + rest