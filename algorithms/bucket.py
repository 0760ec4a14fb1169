"""
bucket.py — Bucket Sort
========================
Scatters values into floor(sqrt(n)) buckets by their position in the
[min, max] range, orders each bucket, and writes the buckets back in
order.

Only the write-back is animated; ordering inside a bucket happens off
screen with a stable comparison sort.

Suspension points:
  1. Every value written back (bar COMPARING, then SORTED).
"""

import math
from typing import List

from dataset import VisualTag
from algorithms.context import SortContext


PSEUDOCODE: List[str] = [
    "def bucket_sort(a):",                          # 0
    "    k ← max(1, floor(sqrt(n)))",               # 1
    "    for v in a:",                              # 2
    "        b ← (v - min) * k // (max - min + 1)", # 3
    "        buckets[b].append(v)",                 # 4
    "    for bucket in buckets:",                   # 5
    "        sort(bucket)",                         # 6
    "        write bucket back into a",             # 7
]


def bucket_count(n: int) -> int:
    """floor(sqrt(n)), never less than one bucket."""
    return max(1, math.isqrt(n))


def bucket_index(value: int, low: int, high: int, buckets: int) -> int:
    """floor((value - low) / (high - low + 1) * buckets), in exact integer math."""
    return (value - low) * buckets // (high - low + 1)


async def bucket_sort(ctx: SortContext) -> None:
    a = ctx.values
    n = len(a)
    if n == 0:
        return

    low, high = min(a), max(a)
    k = bucket_count(n)
    buckets: List[List[int]] = [[] for _ in range(k)]

    for v in a:
        buckets[bucket_index(v, low, high, k)].append(v)

    index = 0
    for bucket in buckets:
        ctx.count_pass()
        bucket.sort()
        for v in bucket:
            ctx.write(index, v)
            ctx.set_color(index, VisualTag.COMPARING)
            await ctx.pause()
            ctx.set_color(index, VisualTag.SORTED)
            index += 1
