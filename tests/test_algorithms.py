"""Tests for the sorting coroutines and the algorithm registry.

Every algorithm is driven on a VirtualScheduler, so the suite runs the
real suspension chain without waiting on wall-clock delays.
"""

from __future__ import annotations

import asyncio
import random

import pytest

from algorithms import REGISTRY, SortContext, algorithms_by_tag, get_algorithm, list_algorithms
from algorithms.bucket import bucket_count, bucket_index
from algorithms.shell import gap_sequence
from dataset import Dataset
from engine import VirtualScheduler
from ui import RecordingRenderer

from conftest import run_sort, tagged


ALL_KEYS = list(REGISTRY)

INPUTS = {
    "empty":     [],
    "single":    [42],
    "pair":      [2, 1],
    "all_equal": [7, 7, 7, 7, 7],
    "sorted":    [1, 2, 3, 4, 5, 6],
    "reverse":   [9, 8, 7, 6, 5, 4, 3, 2, 1],
    "dupes":     [3, 1, 3, 0, 2, 1, 3],
    "wide":      [100, 1, 55, 10, 99, 1, 37],
}


# ── registry ────────────────────────────────────────────────────────


class TestRegistry:
    def test_all_ten_algorithms_registered(self) -> None:
        assert ALL_KEYS == [
            "bubble", "selection", "insertion", "merge", "quick",
            "heap", "counting", "radix", "bucket", "shell",
        ]

    def test_lookup(self) -> None:
        assert get_algorithm("merge").label == "Merge Sort"
        assert get_algorithm("bogo") is None
        assert [a.key for a in list_algorithms()] == ALL_KEYS

    def test_non_negative_only_flags(self) -> None:
        flagged = {a.key for a in list_algorithms() if a.non_negative_only}
        assert flagged == {"counting", "radix"}

    def test_every_entry_has_metadata(self) -> None:
        for info in list_algorithms():
            assert info.pseudocode, info.key
            assert info.description, info.key
            assert info.complexity_time, info.key

    def test_by_tag(self) -> None:
        assert "counting" in {a.key for a in algorithms_by_tag("non-comparison")}


# ── universal properties ────────────────────────────────────────────


@pytest.mark.parametrize("key", ALL_KEYS)
@pytest.mark.parametrize("name", list(INPUTS))
def test_sorts_and_finishes_green(key, name) -> None:
    values = INPUTS[name]
    ctx, renderer = run_sort(REGISTRY[key].fn, values)

    assert ctx.values == sorted(values)
    # the bars mirror the data exactly
    assert renderer.values == ctx.values
    assert renderer.transient_indices() == []
    assert renderer.all_sorted()


@pytest.mark.parametrize("key", ALL_KEYS)
def test_random_inputs(key) -> None:
    rng = random.Random(ALL_KEYS.index(key))
    for _ in range(5):
        values = [rng.randint(1, 100) for _ in range(rng.randint(0, 40))]
        ctx, renderer = run_sort(REGISTRY[key].fn, values)
        assert ctx.values == sorted(values)
        assert renderer.values == ctx.values
        assert renderer.all_sorted()


@pytest.mark.parametrize("key", ALL_KEYS)
def test_result_is_permutation(key) -> None:
    values = [5, 3, 5, 1, 4, 1, 2]
    ctx, _ = run_sort(REGISTRY[key].fn, values)
    assert sorted(ctx.values) == sorted(values)
    assert len(ctx.values) == len(values)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_empty_input_never_suspends(key) -> None:
    ctx, renderer = run_sort(REGISTRY[key].fn, [])
    assert ctx.metrics["suspensions"] == 0
    assert ctx.scheduler.suspensions == 0
    assert renderer.flushes == 0


@pytest.mark.parametrize("key", ALL_KEYS)
def test_every_suspension_flushes_first(key) -> None:
    ctx, renderer = run_sort(REGISTRY[key].fn, [4, 1, 3, 2, 5])
    assert renderer.flushes == ctx.scheduler.suspensions == ctx.metrics["suspensions"]


@pytest.mark.parametrize("key", ["bubble", "selection", "insertion", "merge", "quick", "shell"])
def test_comparison_sorts_handle_negatives(key) -> None:
    values = [3, -2, 0, -7, 5]
    ctx, _ = run_sort(REGISTRY[key].fn, values)
    assert ctx.values == [-7, -2, 0, 3, 5]


# ── algorithm-specific behaviour ────────────────────────────────────


class TestBubble:
    def test_pass_and_comparison_counts(self) -> None:
        ctx, _ = run_sort(REGISTRY["bubble"].fn, [5, 3, 8, 1])
        assert ctx.values == [1, 3, 5, 8]
        assert ctx.metrics["passes"] == 3
        assert ctx.metrics["comparisons"] == 6
        assert ctx.metrics["suspensions"] == 6

    def test_sorted_input_never_swaps(self) -> None:
        ctx, _ = run_sort(REGISTRY["bubble"].fn, [1, 2, 3, 4])
        assert ctx.metrics["swaps"] == 0
        assert ctx.metrics["writes"] == 0


class TestQuick:
    def test_all_equal_never_exchanges_distinct_values(self) -> None:
        renderer = RecordingRenderer()
        renderer.reset(3)
        ctx = SortContext(Dataset.from_values([2, 2, 2]), renderer, VirtualScheduler())
        asyncio.run(REGISTRY["quick"].fn(ctx))

        heights = [op for frame in renderer.frames for op in frame.ops if op[0] == "h"]
        assert all(op[2] == 2 for op in heights)
        assert ctx.values == [2, 2, 2]


class TestStability:
    @pytest.mark.parametrize("key", ["bubble", "insertion", "merge", "radix", "bucket"])
    def test_equal_keys_keep_relative_order(self, key) -> None:
        values = tagged([3, 1, 3, 2, 1, 3, 2, 0])
        ctx, _ = run_sort(REGISTRY[key].fn, values)

        assert ctx.values == sorted(values)
        for v in set(ctx.values):
            origins = [x.origin for x in ctx.values if x == v]
            assert origins == sorted(origins), f"{key} reordered equal key {v}"

    def test_stable_flags_match_behaviour(self) -> None:
        stable = {a.key for a in list_algorithms() if a.stable}
        assert stable == {"bubble", "insertion", "merge", "radix", "bucket"}


class TestNonComparison:
    def test_counting_handles_zero(self) -> None:
        ctx, _ = run_sort(REGISTRY["counting"].fn, [0, 3, 0, 1])
        assert ctx.values == [0, 0, 1, 3]
        assert ctx.metrics["comparisons"] == 0

    def test_radix_multi_digit(self) -> None:
        ctx, _ = run_sort(REGISTRY["radix"].fn, [170, 45, 75, 90, 802, 24, 2, 66])
        assert ctx.values == [2, 24, 45, 66, 75, 90, 170, 802]
        # one counting pass per digit of the largest value
        assert ctx.metrics["passes"] == 3

    def test_radix_all_zero(self) -> None:
        ctx, renderer = run_sort(REGISTRY["radix"].fn, [0, 0, 0])
        assert ctx.values == [0, 0, 0]
        assert renderer.all_sorted()


class TestBucketHelpers:
    @pytest.mark.parametrize("n, k", [(0, 1), (1, 1), (3, 1), (4, 2), (50, 7), (100, 10)])
    def test_bucket_count(self, n, k) -> None:
        assert bucket_count(n) == k

    def test_bucket_index_bounds(self) -> None:
        k = 7
        assert bucket_index(1, 1, 100, k) == 0
        assert bucket_index(100, 1, 100, k) == k - 1
        assert all(0 <= bucket_index(v, 1, 100, k) < k for v in range(1, 101))

    def test_bucket_index_single_value_range(self) -> None:
        assert bucket_index(5, 5, 5, 3) == 0


class TestShell:
    def test_gap_sequence(self) -> None:
        assert gap_sequence(10) == [5, 2, 1]
        assert gap_sequence(1) == []
        assert gap_sequence(0) == []
