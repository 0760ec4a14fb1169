"""
insertion.py — Insertion Sort
==============================
Builds the sorted prefix one key at a time, shifting larger values one
slot to the right until the key's position opens up.

Suspension points:
  1. Once when the key is picked up (key bar PIVOT).
  2. After every shift (the shifted-from bar COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 .. n-1:",                       # 1
    "        key ← a[i]; j ← i-1",                  # 2
    "        while j >= 0 and a[j] > key:",         # 3
    "            a[j+1] ← a[j]",                    # 4
    "            j ← j-1",                          # 5
    "        a[j+1] ← key",                         # 6
]


async def insertion_sort(ctx: SortContext) -> None:
    a = ctx.values
    n = len(a)

    for i in range(1, n):
        ctx.count_pass()
        key = a[i]
        j = i - 1

        ctx.set_color(i, VisualTag.PIVOT)
        await ctx.pause()

        while j >= 0 and ctx.greater(a[j], key):
            ctx.write(j + 1, a[j])
            ctx.set_color(j, VisualTag.COMPARING)
            await ctx.pause()
            ctx.set_color(j, VisualTag.IDLE)
            j -= 1

        ctx.write(j + 1, key)
        ctx.set_color(i, VisualTag.IDLE)

    ctx.mark_all_sorted()
