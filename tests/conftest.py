"""Shared fixtures for the visualizer test suite."""

from __future__ import annotations

import asyncio
import random

import pytest

from dataset import Dataset
from algorithms import SortContext
from engine import VirtualScheduler
from ui import BarRenderer


class Tagged(int):
    """An int that remembers where it started, for stability checks."""

    def __new__(cls, value: int, origin: int) -> "Tagged":
        obj = super().__new__(cls, value)
        obj.origin = origin
        return obj


def tagged(values):
    return [Tagged(v, i) for i, v in enumerate(values)]


def run_sort(fn, values, delay_ms: int = 1):
    """Run one algorithm coroutine over `values`; return (ctx, renderer)."""
    dataset = Dataset.from_values(values)
    renderer = BarRenderer()
    renderer.reset(dataset.size)
    for i, v in enumerate(dataset.values):
        renderer.set_height(i, v)
    ctx = SortContext(dataset, renderer, VirtualScheduler(), lambda: delay_ms)
    asyncio.run(fn(ctx))
    return ctx, renderer


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
