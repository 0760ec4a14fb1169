"""
quick.py — Quick Sort (Lomuto partition)
=========================================
The last element of each range is the pivot.  The scan moves every value
strictly smaller than the pivot to the front of the range, then the
pivot is swapped into the slot right after them and marked SORTED.

Equal keys never trigger a swap during the scan, so an all-equal range
is partitioned without exchanging distinct values.

Suspension points:
  1. Every scan step (scanned bar COMPARING, pivot PIVOT).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",                   # 0
    "    if lo < hi:",                              # 1
    "        p ← partition(a, lo, hi)",             # 2
    "        quick_sort(a, lo, p-1)",               # 3
    "        quick_sort(a, p+1, hi)",               # 4
    "",                                             # 5
    "def partition(a, lo, hi):",                    # 6
    "    pivot ← a[hi]; i ← lo-1",                  # 7
    "    for j in lo .. hi-1:",                     # 8
    "        if a[j] < pivot:",                     # 9
    "            i ← i+1; swap(a[i], a[j])",        # 10
    "    swap(a[i+1], a[hi])",                      # 11
    "    return i+1",                               # 12
]


async def quick_sort(ctx: SortContext) -> None:
    await _quick_sort(ctx, 0, len(ctx) - 1)
    ctx.mark_all_sorted()


async def _quick_sort(ctx: SortContext, low: int, high: int) -> None:
    if low < high:
        pivot_idx = await _partition(ctx, low, high)
        await _quick_sort(ctx, low, pivot_idx - 1)
        await _quick_sort(ctx, pivot_idx + 1, high)
    elif low == high:
        ctx.set_color(low, VisualTag.SORTED)


async def _partition(ctx: SortContext, low: int, high: int) -> int:
    """Partition a[low..high] around a[high]; return the pivot's final index."""
    a = ctx.values
    pivot = a[high]
    ctx.set_color(high, VisualTag.PIVOT)
    ctx.count_pass()

    i = low - 1
    for j in range(low, high):
        ctx.set_color(j, VisualTag.COMPARING)
        await ctx.pause()

        if ctx.less(a[j], pivot):
            i += 1
            if i != j:
                ctx.swap(i, j)

        ctx.set_color(j, VisualTag.IDLE)

    final = i + 1
    if final != high:
        ctx.swap(final, high)

    ctx.set_color(high, VisualTag.IDLE)
    ctx.set_color(final, VisualTag.SORTED)
    return final
