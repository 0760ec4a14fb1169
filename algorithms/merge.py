"""
merge.py — Merge Sort
======================
Top-down recursive merge sort.  Each merge copies the two runs into
temporary lists and writes the merged output back cell by cell.

Ties are taken from the left run (`<=`), so equal keys keep their
original relative order.

Suspension points:
  1. Every output cell written during a merge (that bar COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",                     # 0
    "    if l >= r: return",                        # 1
    "    m ← (l + r) // 2",                         # 2
    "    merge_sort(a, l, m)",                      # 3
    "    merge_sort(a, m+1, r)",                    # 4
    "    merge(a, l, m, r)",                        # 5
    "",                                             # 6
    "def merge(a, l, m, r):",                       # 7
    "    L ← a[l..m]; R ← a[m+1..r]",               # 8
    "    while both non-empty:",                    # 9
    "        take L[i] if L[i] <= R[j] else R[j]",  # 10
    "    copy the rest of L, then of R",            # 11
]


async def merge_sort(ctx: SortContext) -> None:
    await _merge_sort(ctx, 0, len(ctx) - 1)
    ctx.mark_all_sorted()


async def _merge_sort(ctx: SortContext, left: int, right: int) -> None:
    if left >= right:
        return
    middle = (left + right) // 2
    await _merge_sort(ctx, left, middle)
    await _merge_sort(ctx, middle + 1, right)
    await _merge(ctx, left, middle, right)


async def _merge(ctx: SortContext, left: int, middle: int, right: int) -> None:
    a = ctx.values
    left_run  = a[left:middle + 1]
    right_run = a[middle + 1:right + 1]

    i = j = 0
    k = left

    while i < len(left_run) and j < len(right_run):
        ctx.set_color(k, VisualTag.COMPARING)
        await ctx.pause()

        if ctx.less_equal(left_run[i], right_run[j]):
            ctx.write(k, left_run[i])
            i += 1
        else:
            ctx.write(k, right_run[j])
            j += 1

        ctx.set_color(k, VisualTag.IDLE)
        k += 1

    # one of the runs is exhausted; drain the other
    for value in left_run[i:] + right_run[j:]:
        ctx.set_color(k, VisualTag.COMPARING)
        await ctx.pause()
        ctx.write(k, value)
        ctx.set_color(k, VisualTag.IDLE)
        k += 1
