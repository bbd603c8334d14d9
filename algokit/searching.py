"""Binary searches over sorted and partly sorted sequences."""

from __future__ import annotations

from typing import Sequence

_NEG_INF = float("-inf")
_POS_INF = float("inf")


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    if len(nums2) < len(nums1):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    if n1 + n2 == 0:
        raise ValueError("at least one sequence must be non-empty")
    half = (n1 + n2 + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        left1 = nums1[cut1 - 1] if cut1 > 0 else _NEG_INF
        left2 = nums2[cut2 - 1] if cut2 > 0 else _NEG_INF
        right1 = nums1[cut1] if cut1 < n1 else _POS_INF
        right2 = nums2[cut2] if cut2 < n2 else _POS_INF
        if left1 <= right2 and left2 <= right1:
            if (n1 + n2) % 2 == 0:
                return (max(left1, left2) + min(right1, right2)) / 2.0
            return float(max(left1, left2))
        if left1 > right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("sequences must be sorted")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[start]:
            if nums[start] <= target <= nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif nums[mid] <= target <= nums[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element larger than its neighbours (edges count as minus infinity)."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low