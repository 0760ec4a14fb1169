"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

Every `fn` is a coroutine function taking one SortContext.  Adding an
algorithm is: write the coroutine, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.context   import SortContext
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.counting  import counting_sort  as _counting,  PSEUDOCODE as _counting_pc
from algorithms.radix     import radix_sort     as _radix,     PSEUDOCODE as _radix_pc
from algorithms.bucket    import bucket_sort    as _bucket,    PSEUDOCODE as _bucket_pc
from algorithms.shell     import shell_sort     as _shell,     PSEUDOCODE as _shell_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the coroutine function
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["comparison", "in-place"]
    stable:            bool     = False       # equal keys keep their order?
    non_negative_only: bool     = False       # counting / radix style integer keys
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["comparison", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly steps through the list, compares adjacent elements "
                    "and swaps them if they are in the wrong order.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum element from the unsorted portion and "
                    "moves it to the sorted portion.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=["comparison", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the final sorted array one item at a time.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        tags=["comparison", "divide-and-conquer", "recursive"], stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Divides the array into halves, sorts them and merges them back together.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["comparison", "divide-and-conquer", "recursive", "in-place"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Picks a pivot and partitions the array around the pivot.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=["comparison", "in-place", "recursive"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Converts the array into a heap data structure and sorts it.",
    ),

    "counting": AlgoInfo(
        key="counting", label="Counting Sort", fn=_counting, pseudocode=_counting_pc,
        tags=["non-comparison", "integer"], non_negative_only=True,
        complexity_time="O(n + k)", complexity_space="O(k)",
        description="Counts the number of objects that have distinct key values.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort", fn=_radix, pseudocode=_radix_pc,
        tags=["non-comparison", "integer"], stable=True, non_negative_only=True,
        complexity_time="O(d · (n + 10))", complexity_space="O(n)",
        description="Sorts numbers digit by digit starting from least significant "
                    "digit to most significant digit.",
    ),

    "bucket": AlgoInfo(
        key="bucket", label="Bucket Sort", fn=_bucket, pseudocode=_bucket_pc,
        tags=["distribution"], stable=True,
        complexity_time="O(n + k) avg", complexity_space="O(n)",
        description="Divides elements into buckets and sorts each bucket individually.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=_shell, pseudocode=_shell_pc,
        tags=["comparison", "in-place"],
        complexity_time="O(n^1.5) (n/2 gaps)", complexity_space="O(1)",
        description="Generalization of insertion sort that allows the exchange "
                    "of items that are far apart.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SortContext",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
