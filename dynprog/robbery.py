"""House robber and delete-and-earn problems."""

from collections.abc import Sequence

__all__ = ["rob", "delete_and_earn"]


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    house1, house2 = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        house1, house2 = house2, max(house1 + value, house2)
    return house2


def delete_and_earn(nums: Sequence[int]) -> int:
    """Return the most points earnable when taking x deletes every x-1 and x+1."""
    if not nums:
        raise ValueError("nums must not be empty")
    if min(nums) < 0:
        raise ValueError("nums must not hold negative numbers")
    sums = [0] * (max(nums) + 1)
    for num in nums:
        sums[num] += num
    num1, num2 = 0, sums[0]
    for points in sums[1:]:
        num1, num2 = num2, max(num1 + points, num2)
    return num2