"""Backtracking exercises: grid word search, permutations and grid walks."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if word can be traced through adjacent cells of board.

    Moves go up, down, left or right, and no cell is used twice. An empty
    word or an empty board never matches.
    """
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def search(i: int, j: int, idx: int) -> bool:
        if idx == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols):
            return False
        if (i, j) in visited or board[i][j] != word[idx]:
            return False
        visited.add((i, j))
        found = any(search(i + di, j + dj, idx + 1) for di, dj in _DIRECTIONS)
        visited.discard((i, j))
        return found

    return any(
        board[i][j] == word[0] and search(i, j, 0)
        for i in range(rows)
        for j in range(cols)
    )


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of nums, produced by swapping into place."""
    items = list(nums)
    result: list[list[int]] = []

    def backtrack(start: int) -> None:
        if start == len(items):
            result.append(items.copy())
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            backtrack(start + 1)
            items[start], items[i] = items[i], items[start]

    backtrack(0)
    return result


def unique_paths_iii(grid: Sequence[Sequence[int]]) -> int:
    """Count walks from the start (1) to the end (2) covering every free cell once.

    Cells hold 1 for the start, 2 for the end, 0 for free squares and -1 for
    obstacles. The grid passed in is left unchanged.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid must be rectangular")

    starts = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 1]
    ends = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 2]
    if len(starts) != 1 or len(ends) != 1:
        raise ValueError("grid must hold exactly one start (1) and one end (2)")

    # Steps needed: every free cell plus the start square itself.
    to_cover = sum(cell == 0 for row in grid for cell in row) + 1
    visited: set[tuple[int, int]] = set()

    def backtrack(i: int, j: int, steps: int) -> int:
        if not (0 <= i < rows and 0 <= j < cols):
            return 0
        if grid[i][j] == -1 or (i, j) in visited:
            return 0
        if grid[i][j] == 2:
            return 1 if steps == to_cover else 0
        visited.add((i, j))
        total = sum(backtrack(i + di, j + dj, steps + 1) for di, dj in _DIRECTIONS)
        visited.discard((i, j))
        return total

    start_i, start_j = starts[0]
    return backtrack(start_i, start_j, 0)


def change_array(n: int) -> tuple[list[int], list[int]]:
    """Fill an n-element zero array recursively, then undo by 2 on the way back.

    Returns the array as seen at the deepest call and as left after every
    call has returned.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    arr = [0] * n
    snapshots: list[list[int]] = []

    def change(i: int) -> None:
        if i == n:
            snapshots.append(arr.copy())
            return
        arr[i] = i + 1
        change(i + 1)
        arr[i] -= 2

    change(0)
    return snapshots[0], arr