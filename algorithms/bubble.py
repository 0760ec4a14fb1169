"""
bubble.py — Bubble Sort
========================
Adjacent compare-and-swap.  After outer pass i the largest remaining
value has bubbled to index n-i-1, which is marked SORTED immediately.

Suspension points:
  1. Every adjacent comparison (both bars COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-i-2:",                 # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
    "        mark a[n-i-1] sorted",                 # 5
]


# ---------------------------------------------------------------------------
# Coroutine
# ---------------------------------------------------------------------------
async def bubble_sort(ctx: SortContext) -> None:
    a = ctx.values
    n = len(a)

    for i in range(n - 1):
        ctx.count_pass()
        for j in range(n - i - 1):
            ctx.set_colors((j, j + 1), VisualTag.COMPARING)
            await ctx.pause()

            if ctx.greater(a[j], a[j + 1]):
                ctx.swap(j, j + 1)

            ctx.set_colors((j, j + 1), VisualTag.IDLE)

        ctx.set_color(n - i - 1, VisualTag.SORTED)

    if n > 0:
        ctx.set_color(0, VisualTag.SORTED)
