"""
heap.py — Heap Sort
====================
Build a max-heap bottom-up, then repeatedly swap the root with the last
unsorted slot (which becomes SORTED) and sift the new root down.

Suspension points:
  1. Every swap performed by heapify (both bars COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                            # 0
    "    for i in n//2-1 down to 0:",               # 1
    "        heapify(a, n, i)",                     # 2
    "    for i in n-1 down to 1:",                  # 3
    "        swap(a[0], a[i]); mark a[i] sorted",   # 4
    "        heapify(a, i, 0)",                     # 5
    "",                                             # 6
    "def heapify(a, n, i):",                        # 7
    "    largest ← max of i, 2i+1, 2i+2 (< n)",     # 8
    "    if largest != i:",                         # 9
    "        swap(a[i], a[largest])",               # 10
    "        heapify(a, n, largest)",               # 11
]


async def heap_sort(ctx: SortContext) -> None:
    n = len(ctx)

    for i in range(n // 2 - 1, -1, -1):
        await _heapify(ctx, n, i)

    for i in range(n - 1, 0, -1):
        ctx.count_pass()
        ctx.swap(0, i)
        ctx.set_color(i, VisualTag.SORTED)
        await _heapify(ctx, i, 0)

    if n > 0:
        ctx.set_color(0, VisualTag.SORTED)


async def _heapify(ctx: SortContext, heap_size: int, root: int) -> None:
    a = ctx.values
    largest = root
    left  = 2 * root + 1
    right = 2 * root + 2

    if left < heap_size and ctx.greater(a[left], a[largest]):
        largest = left
    if right < heap_size and ctx.greater(a[right], a[largest]):
        largest = right

    if largest != root:
        ctx.swap(root, largest)
        ctx.set_colors((root, largest), VisualTag.COMPARING)
        await ctx.pause()
        ctx.set_colors((root, largest), VisualTag.IDLE)
        await _heapify(ctx, heap_size, largest)
