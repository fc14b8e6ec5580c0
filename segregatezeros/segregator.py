"""
把整数数组中所有的 0 移动到数组的前面，同时保持非零元素的相对顺序。

必须原地操作数组，不能创建第二个容纳所有元素的数据结构，数组可能非常大（n > 1,000,000）。

示例:

输入: nums = [0, 1, 2, 0, 3, 0, 0, 4]
输出: [0, 0, 0, 0, 1, 2, 3, 4]

两次遍历:
1. 统计 0 的个数 count，以及最后一个 0 的位置 last_zero
2. 从 last_zero - 1 往前走，把非零元素搬到 last_zero，原位置置 0，直到前 count 个位置都是 0
"""
from typing import List


def segregate(nums: List[int]) -> None:
    """
    Do not return anything, modify nums in-place instead.
    """
    zero_count = 0
    last_zero = -1
    for i in range(len(nums)):
        if nums[i] == 0:
            zero_count += 1
            last_zero = i

    # no zeros, or nothing but zeros
    if zero_count == 0 or zero_count == len(nums):
        return

    # the only zero is already the first element
    if last_zero == 0:
        return

    current = last_zero - 1
    write_pos = last_zero
    while current >= 0 and write_pos > zero_count - 1:
        if nums[current] != 0:
            nums[write_pos] = nums[current]
            nums[current] = 0
            write_pos -= 1
        current -= 1
