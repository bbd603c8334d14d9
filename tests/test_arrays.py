from collections import Counter
from itertools import accumulate
from operator import xor

import pytest

from algokit.arrays import (
    build_array,
    contains_duplicate,
    count_points,
    find_array,
    garbage_collection,
    get_concatenation,
    group_the_people,
    max_sub_array,
    min_operations,
    minimize_array_value,
    remove_element,
    summary_ranges,
    top_k_frequent,
    two_sum,
    wiggle_sort,
)


def _is_wiggle(nums):
    return all(
        (a < b) if i % 2 == 0 else (a > b)
        for i, (a, b) in enumerate(zip(nums, nums[1:]))
    )


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i > j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_remove_element_sorts_and_drops():
    nums = [3, 2, 2, 3, 1]
    length = remove_element(nums, 3)
    assert length == len(nums)
    assert 3 not in nums
    assert nums == sorted(nums)
    assert Counter(nums) == Counter([2, 2, 1])


def test_max_sub_array_invariants():
    assert max_sub_array([4]) == 4
    positives = [1, 2, 3, 4]
    assert max_sub_array(positives) == sum(positives)
    negatives = [-5, -2, -9]
    assert max_sub_array(negatives) == max(negatives)


def test_max_sub_array_empty():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_contains_duplicate():
    nums = list(range(10))
    assert not contains_duplicate(nums)
    assert contains_duplicate(nums + nums[:1])


def test_summary_ranges_pinned():
    assert summary_ranges([0, 1, 2, 4]) == ["0->2", "4"]


def test_summary_ranges_round_trip():
    nums = [-3, -2, 0, 2, 3, 4, 6, 8, 9]
    expanded = []
    for item in summary_ranges(nums):
        first, _, last = item.partition("->")
        start = int(first)
        stop = int(last) if last else start
        expanded.extend(range(start, stop + 1))
    assert expanded == nums


@pytest.mark.parametrize("nums", [[1, 5, 1, 1, 6, 4], [1, 3, 2, 2, 3, 1]])
def test_wiggle_sort(nums):
    original = list(nums)
    assert wiggle_sort(nums) is None
    assert sorted(nums) == sorted(original)
    assert _is_wiggle(nums)


def test_top_k_frequent_order():
    words = ["i", "love", "leetcode", "i", "love", "coding"]
    result = top_k_frequent(words, 2)
    counts = Counter(words)
    assert len(result) == 2
    assert counts[result[0]] >= counts[result[1]]
    assert result == sorted(result)


def test_top_k_frequent_ties_alphabetical():
    words = ["b", "c", "a"]
    assert top_k_frequent(words, 3) == sorted(words)


def test_top_k_frequent_k_too_large():
    with pytest.raises(ValueError):
        top_k_frequent(["a"], 2)


def test_group_the_people_covers_everyone():
    sizes = [3, 3, 3, 3, 3, 1, 3]
    groups = group_the_people(sizes)
    members = sorted(p for group in groups for p in group)
    assert members == list(range(len(sizes)))
    for group in groups:
        assert all(sizes[p] == len(group) for p in group)


def test_min_operations_all_empty():
    assert min_operations("0000") == [0] * 4


def test_min_operations_symmetry():
    boxes = "001011"
    assert min_operations(boxes[::-1]) == min_operations(boxes)[::-1]


def test_min_operations_single_ball_grows_by_one():
    result = min_operations("00100")
    assert result[2] == 0
    assert all(b - a == 1 for a, b in zip(result[2:], result[3:]))
    assert all(a - b == 1 for a, b in zip(result[:3], result[1:3]))


def test_count_points_large_and_zero_radius():
    points = [[1, 3], [3, 3], [5, 3], [2, 2]]
    assert count_points(points, [[2, 3, 1000]]) == [len(points)]
    zero = [[x, y, 0] for x, y in points]
    assert count_points(points, zero) == [1] * len(points)


def test_build_array_involution_gives_identity():
    nums = [1, 0, 3, 2]
    assert build_array(nums) == list(range(len(nums)))


def test_build_array_is_permutation():
    nums = [5, 0, 1, 2, 3, 4]
    assert sorted(build_array(nums)) == sorted(nums)


def test_get_concatenation():
    nums = [1, 2, 1]
    result = get_concatenation(nums)
    assert len(result) == 2 * len(nums)
    assert result[: len(nums)] == nums == result[len(nums):]


def test_garbage_collection_pinned():
    travel = [2, 4, 3]
    assert garbage_collection(["G", "P", "GP", "GG"], travel) == 21
    assert travel == [2, 4, 3]


def test_garbage_collection_only_first_house():
    garbage = ["MMPG", "", ""]
    assert garbage_collection(garbage, [5, 7]) == len(garbage[0])


def test_garbage_collection_short_travel():
    with pytest.raises(ValueError):
        garbage_collection(["G", "G", "G"], [1])


def test_find_array_round_trip():
    pref = [5, 2, 0, 3, 1]
    assert list(accumulate(find_array(pref), xor)) == pref


def test_minimize_array_value_pinned():
    assert minimize_array_value([3, 7, 1, 6]) == 5


def test_minimize_array_value_bounds():
    nums = [10, 1]
    assert minimize_array_value(nums) == nums[0]
    equal = [4, 4, 4]
    assert minimize_array_value(equal) == equal[0]
    mixed = [1, 9, 2, 8]
    result = minimize_array_value(mixed)
    assert mixed[0] <= result <= max(mixed)


def test_minimize_array_value_empty():
    with pytest.raises(ValueError):
        minimize_array_value([])