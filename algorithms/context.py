"""
context.py — Per-Run Sort Context
==================================
Every algorithm receives exactly one argument: a SortContext.  It bundles
what used to be shared mutable state (the array, the bars, the speed) into
one object owned by the SessionController for the duration of a run.

Usage inside an algorithm coroutine:
    a = ctx.values
    ctx.set_colors((j, j + 1), VisualTag.COMPARING)
    await ctx.pause()
    if ctx.greater(a[j], a[j + 1]):
        ctx.swap(j, j + 1)

Invariants the helpers maintain:
  - write() / swap() change the data and the bar height together, with
    the same value, so dataset and renderer never drift apart.
  - pause() flushes the renderer BEFORE suspending, so everything issued
    before a suspension point is visible while the algorithm waits.
  - delay_ms is re-read from the delay source at every pause; speed is the
    one control that stays live during a run.
"""

from typing import TYPE_CHECKING, Callable, Dict, Iterable, List

from dataset import Dataset, VisualTag

if TYPE_CHECKING:
    from engine.scheduler import Scheduler
    from ui.renderer import Renderer


DEFAULT_DELAY_MS: int = 51      # speed 50


class SortContext:
    """
    Attributes:
        dataset   : The Dataset being sorted (mutated in place).
        renderer  : Bar renderer mirroring the dataset.
        scheduler : Suspension primitive.
        metrics   : Running tally: comparisons, writes, swaps, suspensions, passes.
    """

    def __init__(
        self,
        dataset: Dataset,
        renderer: "Renderer",
        scheduler: "Scheduler",
        delay_source: Callable[[], int] = lambda: DEFAULT_DELAY_MS,
    ):
        self.dataset:   Dataset     = dataset
        self.renderer:  "Renderer"  = renderer
        self.scheduler: "Scheduler" = scheduler
        self._delay_source          = delay_source
        self.metrics: Dict[str, int] = {
            "comparisons": 0,
            "writes":      0,
            "swaps":       0,
            "suspensions": 0,
            "passes":      0,
        }

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[int]:
        return self.dataset.values

    def __len__(self) -> int:
        return len(self.dataset.values)

    @property
    def delay_ms(self) -> int:
        return self._delay_source()

    # ------------------------------------------------------------------
    # Counted comparisons
    # ------------------------------------------------------------------
    def greater(self, a: int, b: int) -> bool:
        self.metrics["comparisons"] += 1
        return a > b

    def less(self, a: int, b: int) -> bool:
        self.metrics["comparisons"] += 1
        return a < b

    def less_equal(self, a: int, b: int) -> bool:
        self.metrics["comparisons"] += 1
        return a <= b

    # ------------------------------------------------------------------
    # Mutation (data + bar height together)
    # ------------------------------------------------------------------
    def write(self, index: int, value: int) -> None:
        self.dataset.values[index] = value
        self.renderer.set_height(index, value)
        self.metrics["writes"] += 1

    def swap(self, i: int, j: int) -> None:
        a = self.dataset.values
        a[i], a[j] = a[j], a[i]
        self.renderer.set_height(i, a[i])
        self.renderer.set_height(j, a[j])
        self.metrics["writes"] += 2
        self.metrics["swaps"]  += 1

    # ------------------------------------------------------------------
    # Colour
    # ------------------------------------------------------------------
    def set_color(self, index: int, tag: VisualTag) -> None:
        self.renderer.set_color(index, tag)

    def set_colors(self, indices: Iterable[int], tag: VisualTag) -> None:
        for i in indices:
            self.renderer.set_color(i, tag)

    def mark_all_sorted(self) -> None:
        self.set_colors(range(len(self)), VisualTag.SORTED)

    # ------------------------------------------------------------------
    # Suspension point
    # ------------------------------------------------------------------
    async def pause(self) -> None:
        delay = self.delay_ms
        self.renderer.flush(delay)
        await self.scheduler.delay(delay)
        self.metrics["suspensions"] += 1

    def count_pass(self) -> None:
        self.metrics["passes"] += 1
