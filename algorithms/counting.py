"""
counting.py — Counting Sort
============================
Tallies how often each key occurs, then rewrites the array in ascending
key order.  Keys must be non-negative integers; the SessionController
rejects anything else before this coroutine starts.

Suspension points:
  1. Every value emitted (bar COMPARING, then SORTED).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def counting_sort(a):",                        # 0
    "    count ← [0] * (max(a) + 1)",               # 1
    "    for v in a: count[v] += 1",                # 2
    "    idx ← 0",                                  # 3
    "    for v in 0 .. max(a):",                    # 4
    "        repeat count[v] times:",               # 5
    "            a[idx] ← v; idx += 1",             # 6
]


async def counting_sort(ctx: SortContext) -> None:
    a = ctx.values
    if not a:
        return

    count = [0] * (max(a) + 1)
    for v in a:
        count[v] += 1

    index = 0
    for v, occurrences in enumerate(count):
        for _ in range(occurrences):
            ctx.write(index, v)
            ctx.set_color(index, VisualTag.COMPARING)
            await ctx.pause()
            ctx.set_color(index, VisualTag.SORTED)
            index += 1
