import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.arrays import (
    contains_duplicate,
    diagonal_sum,
    find_duplicates_and_missing,
    find_the_difference,
    is_anagram,
    max_area,
    next_permutation,
    search_range,
    spiral_order,
)


@st.composite
def square_matrices(draw):
    n = draw(st.integers(min_value=1, max_value=6))
    row = st.lists(st.integers(-100, 100), min_size=n, max_size=n)
    return draw(st.lists(row, min_size=n, max_size=n))


@st.composite
def rect_matrices(draw):
    rows = draw(st.integers(min_value=1, max_value=6))
    cols = draw(st.integers(min_value=1, max_value=6))
    row = st.lists(st.integers(-100, 100), min_size=cols, max_size=cols)
    return draw(st.lists(row, min_size=rows, max_size=rows))


def test_contains_duplicate_source_examples():
    assert contains_duplicate([1, 2, 3, 1, 4, 5])
    assert not contains_duplicate([4, 2, 3, 5])


@given(st.lists(st.integers(), unique=True, min_size=1))
def test_contains_duplicate_properties(nums):
    assert not contains_duplicate(nums)
    assert contains_duplicate(nums + [nums[0]])


def test_diagonal_sum_single_element():
    assert diagonal_sum([[7]]) == 7


def test_diagonal_sum_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2], [3]])


@given(square_matrices())
def test_diagonal_sum_invariants(matrix):
    total = diagonal_sum(matrix)
    assert diagonal_sum(matrix[::-1]) == total
    assert diagonal_sum([list(col) for col in zip(*matrix)]) == total
    assert diagonal_sum([[3 * v for v in row] for row in matrix]) == 3 * total


def test_search_range_source_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == (3, 4)


def test_search_range_missing():
    assert search_range([5, 7, 7, 8, 8, 10], 6) == (-1, -1)
    assert search_range([], 1) == (-1, -1)


@given(st.lists(st.integers(-20, 20), min_size=1), st.data())
def test_search_range_bounds(nums, data):
    nums.sort()
    target = data.draw(st.sampled_from(nums))
    first, last = search_range(nums, target)
    assert nums[first] == target and nums[last] == target
    assert target not in nums[:first]
    assert target not in nums[last + 1:]


def test_spiral_order_square():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_order_empty():
    assert spiral_order([]) == []


@given(rect_matrices())
def test_spiral_order_visits_each_element_once(matrix):
    result = spiral_order(matrix)
    flat = [v for row in matrix for v in row]
    assert sorted(result) == sorted(flat)
    assert result[: len(matrix[0])] == matrix[0]


def test_is_anagram_source_examples():
    assert is_anagram("listen", "silent")
    assert not is_anagram("cat", "rat")


@given(st.text(max_size=20), st.data())
def test_is_anagram_permutation(s, data):
    t = "".join(data.draw(st.permutations(list(s))))
    assert is_anagram(s, t)
    assert not is_anagram(s, t + "x")


def test_max_area_source_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@given(st.lists(st.integers(0, 1000), min_size=2, max_size=40))
def test_max_area_at_least_outer_pair(height):
    result = max_area(height)
    assert result >= min(height[0], height[-1]) * (len(height) - 1)
    assert result <= max(height) * (len(height) - 1)


def test_find_the_difference_source_example():
    assert find_the_difference("abcd", "abcde") == "e"


@given(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=20),
    st.sampled_from("abcdefghijklmnopqrstuvwxyz"),
    st.data(),
)
def test_find_the_difference_inserted_char(s, extra, data):
    pos = data.draw(st.integers(0, len(s)))
    t = s[:pos] + extra + s[pos:]
    assert find_the_difference(s, t) == extra


def test_next_permutation_walks_lexicographic_order():
    start = [1, 2, 3, 4]
    expected = [list(p) for p in itertools.permutations(start)]
    current = start
    seen = [current]
    for _ in expected[1:]:
        current = next_permutation(current)
        seen.append(current)
    assert seen == expected
    assert next_permutation(expected[-1]) == start


@given(st.lists(st.integers(0, 9), max_size=8))
def test_next_permutation_keeps_elements_and_input(nums):
    original = list(nums)
    result = next_permutation(nums)
    assert nums == original
    assert sorted(result) == sorted(original)


def test_find_duplicates_and_missing_source_example():
    assert find_duplicates_and_missing([1, 2, 3, 4, 4, 5, 6, 6, 9]) == ([4, 6], [7, 8])


def test_find_duplicates_and_missing_out_of_range():
    with pytest.raises(ValueError):
        find_duplicates_and_missing([1, 5])


@given(st.integers(1, 30), st.data())
def test_find_duplicates_and_missing_permutation(n, data):
    nums = data.draw(st.permutations(list(range(1, n + 1))))
    duplicates, missing = find_duplicates_and_missing(nums)
    assert duplicates == []
    assert missing == []