"""
dataset.py — Value Sequence Container & Generator
==================================================
Single source of truth for the numbers being sorted.  Algorithms mutate
`values` in place; the renderer mirrors it bar-for-bar.

Responsibilities:
  1. Hold the ordered, mutable value list         (values / size)
  2. Random generation factory                    (generate_random)
  3. Construction from explicit values            (from_values)
  4. Domain checks used at the run boundary       (has_negative / require_non_negative)
  5. Serialisation round-trip                     (to_dict / from_dict)

Design decisions:
  - `values` is a plain list and is handed to algorithms as-is, so a
    write through the sort context is immediately a write to the dataset.
  - Any int (or int subclass) is accepted.  Generation only ever
    produces [low, high]; negative numbers are rejected where it matters
    (counting / radix), not here.
"""

import random
from typing import Iterable, List, Optional

from config import settings


class DatasetError(ValueError):
    """Raised for values the visualizer cannot hold."""


class NegativeValueError(DatasetError):
    """Raised when a negative value would reach a non-negative-only algorithm."""


class Dataset:
    """
    Attributes:
        values : The sequence being sorted, mutated in place during a run.
    """

    def __init__(self, values: Optional[List[int]] = None):
        self.values: List[int] = values if values is not None else []

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        low: Optional[int] = None,
        high: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "Dataset":
        """Fresh dataset of `size` uniform integers in [low, high] (settings fill the gaps)."""
        size = settings.DEFAULT_SIZE if size is None else size
        low  = settings.VALUE_MIN if low is None else low
        high = settings.VALUE_MAX if high is None else high
        if size < 0:
            raise DatasetError(f"Dataset size must be >= 0, got {size}")
        if low > high:
            raise DatasetError(f"Empty value range [{low}, {high}]")
        if rng is None:
            rng = random.Random(seed)
        return cls([rng.randint(low, high) for _ in range(size)])

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Dataset":
        """Copy `values` into a new dataset; every item must be an integer."""
        items = list(values)
        for i, v in enumerate(items):
            if isinstance(v, bool) or not isinstance(v, int):
                raise DatasetError(f"Value at index {i} is not an integer: {v!r}")
        return cls(items)

    # ==================================================================
    # QUERIES
    # ==================================================================
    @property
    def size(self) -> int:
        return len(self.values)

    def max_value(self) -> int:
        return max(self.values)

    def min_value(self) -> int:
        return min(self.values)

    def is_sorted(self) -> bool:
        return all(self.values[i] <= self.values[i + 1] for i in range(len(self.values) - 1))

    def has_negative(self) -> bool:
        return any(v < 0 for v in self.values)

    def require_non_negative(self) -> None:
        """Reject negative values before a counting-style algorithm sees them."""
        for i, v in enumerate(self.values):
            if v < 0:
                raise NegativeValueError(
                    f"Negative value {v} at index {i}; only non-negative integers are supported"
                )

    def copy(self) -> "Dataset":
        return Dataset(list(self.values))

    # ==================================================================
    # SERIALISATION  (for the Flask session)
    # ==================================================================
    def to_dict(self) -> dict:
        return {"values": [int(v) for v in self.values]}

    @classmethod
    def from_dict(cls, data: dict) -> "Dataset":
        return cls.from_values(data.get("values", []))

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __repr__(self) -> str:
        return f"Dataset(size={self.size}, values={self.values!r})"
