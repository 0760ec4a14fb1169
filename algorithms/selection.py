"""
selection.py — Selection Sort
==============================
For each position i, scan the unsorted suffix for its minimum and swap
it into place once.  The running minimum carries the PIVOT tag so the
viewer can watch it move.

Suspension points:
  1. Every suffix element examined (that bar COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-1:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]:",                # 4
    "                min ← j",                      # 5
    "        if min != i: swap(a[i], a[min])",      # 6
    "        mark a[i] sorted",                     # 7
]


async def selection_sort(ctx: SortContext) -> None:
    a = ctx.values
    n = len(a)

    for i in range(n):
        ctx.count_pass()
        min_idx = i
        ctx.set_color(min_idx, VisualTag.PIVOT)

        for j in range(i + 1, n):
            ctx.set_color(j, VisualTag.COMPARING)
            await ctx.pause()

            if ctx.less(a[j], a[min_idx]):
                ctx.set_color(min_idx, VisualTag.IDLE)
                min_idx = j
                ctx.set_color(min_idx, VisualTag.PIVOT)
            else:
                ctx.set_color(j, VisualTag.IDLE)

        if min_idx != i:
            ctx.swap(i, min_idx)

        ctx.set_color(min_idx, VisualTag.IDLE)
        ctx.set_color(i, VisualTag.SORTED)
