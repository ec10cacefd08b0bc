"""Array algorithms: pair sums, subarrays, binary searches, stacks and sorting."""

from __future__ import annotations

import math
from collections import Counter
from itertools import combinations, groupby
from typing import Dict, List, Sequence


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Indices ``[i, j]`` with i < j of the first pair summing to ``target``.

    Pairs are tried in order of ``i``, then ``j``. Returns an empty list
    when no pair qualifies.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which the whole circuit can be driven, or -1."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    total = 0
    fuel = 0
    start = 0
    for index, (g, c) in enumerate(zip(gas, cost)):
        diff = g - c
        total += diff
        fuel += diff
        if fuel < 0:
            start = index + 1
            fuel = 0
    return -1 if total < 0 else start


def single_number(nums: Sequence[int]) -> int:
    """The first value that occurs exactly once, or -1 if there is none."""
    counts = Counter(nums)
    return next((value for value in nums if counts[value] == 1), -1)


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, by partition search."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    if n1 + n2 == 0:
        raise ValueError("median of no values")

    lo, hi = 0, n1
    while lo <= hi:
        cut1 = (lo + hi) // 2
        cut2 = (n1 + n2 + 1) // 2 - cut1
        max_left1 = nums1[cut1 - 1] if cut1 > 0 else -math.inf
        max_left2 = nums2[cut2 - 1] if cut2 > 0 else -math.inf
        min_right1 = nums1[cut1] if cut1 < n1 else math.inf
        min_right2 = nums2[cut2] if cut2 < n2 else math.inf
        if max_left1 <= min_right2 and max_left2 <= min_right1:
            left_max = max(max_left1, max_left2)
            if (n1 + n2) % 2:
                return float(left_max)
            return (left_max + min(min_right1, min_right2)) * 0.5
        if max_left1 > min_right2:
            hi = cut1 - 1
        else:
            lo = cut1 + 1
    raise ValueError("inputs must be sorted")


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> List[int]:
    """For each value of ``nums1``, the first larger value after it in ``nums2``, else -1.

    Raises ValueError if a value of ``nums1`` does not occur in ``nums2``.
    """
    greater: Dict[int, int] = {}
    stack: List[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater.setdefault(value, stack[-1] if stack else -1)
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"value {exc.args[0]!r} not found in nums2") from None


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray of an empty sequence")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value of a sorted sequence of pairs that appears once, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        if start == end:
            return nums[start]
        mid = start + (end - start) // 2
        if mid % 2 == 0:
            if nums[mid] == nums[mid + 1]:
                start = mid + 2
            else:
                end = mid
        elif nums[mid] == nums[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def max_count(m: int, n: int, ops: Sequence[Sequence[int]]) -> int:
    """Number of cells holding the maximum after incrementing each op's top-left block."""
    rows = min((op[0] for op in ops), default=m)
    cols = min((op[1] for op in ops), default=n)
    return min(rows, m) * min(cols, n)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under the histogram; 0 when it is empty."""
    best = 0
    stack: List[int] = []
    for index, height in enumerate([*heights, -math.inf]):
        while stack and heights[stack[-1]] >= height:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, heights[top] * (index - left - 1))
        stack.append(index)
    return best


def _merge_sort(values: List[int]) -> List[int]:
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    left = _merge_sort(values[:mid])
    right = _merge_sort(values[mid:])
    merged: List[int] = []
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


def sort_array(nums: List[int]) -> List[int]:
    """Sort ``nums`` in place with a stable merge sort and return it."""
    nums[:] = _merge_sort(list(nums))
    return nums