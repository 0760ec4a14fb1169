"""
shell.py — Shell Sort
======================
Insertion sort over a shrinking gap sequence n//2, n//4, …, 1.  The
last pass (gap 1) is a plain insertion sort over an almost-sorted array.

Suspension points:
  1. Every gapped shift (shifted-into bar COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def shell_sort(a):",                           # 0
    "    gap ← n // 2",                             # 1
    "    while gap > 0:",                           # 2
    "        for i in gap .. n-1:",                 # 3
    "            tmp ← a[i]; j ← i",                # 4
    "            while j >= gap and a[j-gap] > tmp:",   # 5
    "                a[j] ← a[j-gap]; j -= gap",    # 6
    "            a[j] ← tmp",                       # 7
    "        gap ← gap // 2",                       # 8
]


def gap_sequence(n: int) -> List[int]:
    gaps = []
    gap = n // 2
    while gap > 0:
        gaps.append(gap)
        gap //= 2
    return gaps


async def shell_sort(ctx: SortContext) -> None:
    a = ctx.values
    n = len(a)

    for gap in gap_sequence(n):
        ctx.count_pass()
        for i in range(gap, n):
            temp = a[i]
            ctx.set_color(i, VisualTag.PIVOT)

            j = i
            while j >= gap and ctx.greater(a[j - gap], temp):
                ctx.write(j, a[j - gap])
                ctx.set_color(j, VisualTag.COMPARING)
                await ctx.pause()
                ctx.set_color(j, VisualTag.IDLE)
                j -= gap

            ctx.write(j, temp)
            ctx.set_color(i, VisualTag.IDLE)

    ctx.mark_all_sorted()
