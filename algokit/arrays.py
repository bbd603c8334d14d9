"""Array and sequence problems over plain Python lists."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import accumulate, groupby, pairwise
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``i > j`` of the first pair summing to ``target``.

    Pairs are tried in order of the larger index, then the smaller one.
    An empty list means no pair exists.
    """
    for i, later in enumerate(nums):
        for j, earlier in enumerate(nums[:i]):
            if later + earlier == target:
                return [i, j]
    return []


def remove_element(nums: list[int], val: int) -> int:
    """Sort ``nums`` in place, drop every ``val`` from it and return its new length."""
    nums.sort()
    nums[:] = [x for x in nums if x != val]
    return len(nums)


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(nums)) != len(nums)


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as ``"a->b"`` or ``"a"``."""
    ranges = []
    for _, run in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        values = [value for _, value in run]
        first, last = values[0], values[-1]
        ranges.append(f"{first}->{last}" if len(values) > 1 else f"{first}")
    return ranges


def wiggle_sort(nums: MutableSequence[int]) -> None:
    """Reorder ``nums`` in place so that ``nums[0] < nums[1] > nums[2] < ...``."""
    ordered = sorted(nums)
    middle = (len(ordered) - 1) // 2 + 1
    small = iter(ordered[:middle])
    large = iter(ordered[middle:])
    for i in reversed(range(len(nums))):
        nums[i] = next(large) if i % 2 else next(small)


def top_k_frequent(words: Sequence[str], k: int) -> list[str]:
    """The ``k`` most frequent words, ties broken alphabetically."""
    counts = Counter(words)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}")
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [word for word, _ in ranked[:k]]


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people into groups whose size is the one each person asks for."""
    pending: defaultdict[int, list[int]] = defaultdict(list)
    groups = []
    for person, size in enumerate(group_sizes):
        bucket = pending[size]
        bucket.append(person)
        if len(bucket) == size:
            groups.append(bucket)
            pending[size] = []
    return groups


def min_operations(boxes: str) -> list[int]:
    """Moves needed to gather every ball into each box in turn."""
    answer = [0] * len(boxes)
    for order in (range(len(boxes)), reversed(range(len(boxes)))):
        balls = moves = 0
        for i in order:
            answer[i] += moves
            balls += boxes[i] == "1"
            moves += balls
    return answer


def count_points(
    points: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each circle ``(x, y, r)``, how many points lie inside or on it."""
    return [
        sum((px - cx) ** 2 + (py - cy) ** 2 <= r * r for px, py in points)
        for cx, cy, r in queries
    ]


def build_array(nums: Sequence[int]) -> list[int]:
    """The permutation composed with itself: ``nums[nums[i]]`` for each ``i``."""
    return [nums[value] for value in nums]


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """``nums`` followed by itself."""
    return [*nums, *nums]


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Minutes the metal, paper and glass trucks need between them.

    Each unit of garbage takes a minute to pick up, and each truck drives
    only as far as the last house holding its kind.
    """
    if len(travel) < len(garbage) - 1:
        raise ValueError("travel must give a time between every pair of houses")
    reach = [0, *accumulate(travel)]
    total = sum(len(house) for house in garbage)
    for kind in "MPG":
        last = next(
            (i for i in range(len(garbage) - 1, 0, -1) if kind in garbage[i]), 0
        )
        total += reach[last]
    return total


def find_array(pref: Sequence[int]) -> list[int]:
    """Recover the array whose running XOR is ``pref``."""
    if not pref:
        return []
    return [pref[0], *(a ^ b for a, b in pairwise(pref))]


def minimize_array_value(nums: Sequence[int]) -> int:
    """Smallest possible maximum after moving units from each value to its left neighbour."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    total = 0
    for count, value in enumerate(nums, start=1):
        total += value
        best = max(best, -(-total // count))
    return best