"""
radix.py — Radix Sort (LSD, base 10)
=====================================
One stable counting pass per decimal digit, least significant first.
The number of passes is the digit count of the largest value.

Each pass is stable (cumulative counts + backward scan), which is what
makes the whole sort correct, and stable overall.

Suspension points:
  1. Every write-back of a pass (bar COMPARING).
"""

from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


BASE: int = 10

PSEUDOCODE: List[str] = [
    "def radix_sort(a):",                           # 0
    "    exp ← 1",                                  # 1
    "    while max(a) // exp > 0:",                 # 2
    "        counting_pass(a, exp)",                # 3
    "        exp ← exp * 10",                       # 4
    "",                                             # 5
    "def counting_pass(a, exp):",                   # 6
    "    count digits (a[i] // exp) % 10",          # 7
    "    prefix-sum the counts",                    # 8
    "    scan a backwards into output",             # 9
    "    copy output back into a",                  # 10
]


async def radix_sort(ctx: SortContext) -> None:
    a = ctx.values
    if not a:
        return

    largest = max(a)
    exp = 1
    while largest // exp > 0:
        await _counting_pass(ctx, exp)
        exp *= BASE

    ctx.mark_all_sorted()


async def _counting_pass(ctx: SortContext, exp: int) -> None:
    a = ctx.values
    n = len(a)
    ctx.count_pass()

    count = [0] * BASE
    for v in a:
        count[(v // exp) % BASE] += 1
    for d in range(1, BASE):
        count[d] += count[d - 1]

    output = [0] * n
    for i in range(n - 1, -1, -1):
        digit = (a[i] // exp) % BASE
        count[digit] -= 1
        output[count[digit]] = a[i]

    for i, v in enumerate(output):
        ctx.write(i, v)
        ctx.set_color(i, VisualTag.COMPARING)
        await ctx.pause()
        ctx.set_color(i, VisualTag.IDLE)
