# algodrills

Compact Python implementations of classic exercises on arrays, recursion and
backtracking. Everything is plain functions that take Python sequences and
return new values; inputs are never modified. The package has no
dependencies outside the standard library.

## Installation

```
pip install algodrills
```

The test suite uses pytest and hypothesis, available through the `test` extra:

```
pip install "algodrills[test]"
```

## Modules

### `algodrills.arrays`

- `contains_duplicate(nums)` returns `True` if any value occurs more than once.
- `diagonal_sum(matrix)` sums both diagonals of a square matrix, counting the
  centre once. Raises `ValueError` if the matrix is not square.
- `search_range(nums, target)` returns a tuple with the first and last index of
  `target` in a sorted sequence, or `(-1, -1)`.
- `spiral_order(matrix)` returns the elements of a rectangular matrix in
  clockwise spiral order.
- `is_anagram(s, t)` returns `True` if `t` is a rearrangement of `s`.
- `max_area(height)` returns the largest "container with most water" area.
- `find_the_difference(s, t)` returns the one character added to `s` to make `t`.
- `next_permutation(nums)` returns a new list holding the next lexicographic
  permutation, wrapping round to the smallest one after the largest.
- `find_duplicates_and_missing(nums)` returns a tuple of two lists: the values
  in `1..n` seen exactly twice, and those never seen (`n` is `len(nums)`).
  Raises `ValueError` if a value lies outside `0..n`.

### `algodrills.recursion`

- `binary_search(arr, target)` returns an index of `target` in a sorted
  sequence, or `-1`.
- `occurrences(arr, key)` lists every index at which `key` occurs.
- `first_occurrence(nums, target)` and `last_occurrence(nums, target)` return
  the first or last index of `target`, or `-1`.
- `increasing(n)` and `decreasing(n)` return `[1, ..., n]` and `[n, ..., 1]`;
  a negative `n` raises `ValueError`.
- `merge_sort(arr)` returns a stably sorted copy.
- `friend_pairings(n)` counts the ways `n` friends can stay single or pair up;
  `n` must be at least 1.
- `binary_strings_without_consecutive_ones(n)` lists the binary strings of
  length `n` with no two adjacent ones.
- `subsets(text)` lists every subsequence of a string, those that take each
  character before those that skip it.

### `algodrills.backtracking`

- `word_exists(board, word)` tells whether `word` can be traced through
  horizontally or vertically adjacent cells, using no cell twice.
- `permutations(nums)` lists every ordering, generated by swapping in place.
- `unique_paths_iii(grid)` counts walks from the start (`1`) to the end (`2`)
  that cover every free cell (`0`) exactly once, avoiding obstacles (`-1`).
  Raises `ValueError` for an empty or ragged grid, or one without exactly one
  start and one end.
- `change_array(n)` fills an `n`-element zero array recursively and subtracts
  2 from each cell on the way back; it returns the array as seen at the deepest
  call and as left afterwards.

## Example

```python
from algodrills.arrays import search_range, spiral_order
from algodrills.backtracking import word_exists

search_range([5, 7, 7, 8, 8, 10], 8)             # (3, 4)
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]

board = [list("ABCE"), list("SFCS"), list("ADEE")]
word_exists(board, "ABCCED")                     # True
word_exists(board, "ABCB")                       # False
```

## What it does not do

There is no command-line tool and nothing reads from standard input or prints
results: every exercise is a function to call from Python code.