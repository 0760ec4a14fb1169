"""
session.py — Sort Session Controller
=====================================
Orchestrates exactly one sort run at a time over the current dataset.

State machine:
    IDLE     →  start()             →  RUNNING
    RUNNING  →  (algorithm returns) →  IDLE
    RUNNING  →  (algorithm raises)  →  IDLE   (error propagates)

A run cannot be paused or cancelled; it finishes when the algorithm's
suspension chain finishes.

One run at a time:
  - `start()` refuses to begin while RUNNING (SessionBusyError).
    It also refuses while the ControlPanel says it cannot start.
  - The controls that could start a second run or mutate the dataset
    (new array, size, algorithm selector, start) are disabled for the
    whole run and re-enabled afterwards, even on error.
  - `regenerate()` / `load()` also refuse while RUNNING.

Timing:
  Elapsed time is measured with the scheduler's clock, so a run recorded
  on a VirtualScheduler reports the time its playback will take.
"""

import logging
import random
from dataclasses import dataclass, asdict
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from config import settings
from dataset import Dataset
from algorithms import AlgoInfo, SortContext, get_algorithm
from engine.scheduler import Scheduler, speed_to_delay
from ui.renderer import Renderer

if TYPE_CHECKING:
    from ui.controls import ControlPanel


logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


class SessionBusyError(RuntimeError):
    """Raised when a run, or a dataset change, is requested mid-run."""


# ---------------------------------------------------------------------------
# RunResult — what gets reported after every run
# ---------------------------------------------------------------------------
@dataclass
class RunResult:
    algo_key:    str   = ""
    algo_label:  str   = ""
    size:        int   = 0
    elapsed_ms:  float = 0.0
    comparisons: int   = 0
    writes:      int   = 0
    swaps:       int   = 0
    suspensions: int   = 0
    passes:      int   = 0

    @property
    def elapsed_display(self) -> str:
        """Elapsed milliseconds with two decimals, e.g. '1234.57'."""
        return f"{self.elapsed_ms:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["elapsed_display"] = self.elapsed_display
        return data


# ---------------------------------------------------------------------------
# SessionController
# ---------------------------------------------------------------------------
class SessionController:
    """
    Attributes:
        dataset     : The Dataset currently on screen.
        renderer    : Renderer mirroring the dataset.
        scheduler   : Suspension primitive handed to every run.
        controls    : Optional ControlPanel (algorithm / speed / size + enable state).
        state       : Current SessionState.
        last_result : RunResult of the most recent completed run.
    """

    def __init__(
        self,
        renderer: Renderer,
        scheduler: Optional[Scheduler] = None,
        controls: Optional["ControlPanel"] = None,
        dataset: Optional[Dataset] = None,
        rng: Optional[random.Random] = None,
    ):
        self.renderer:    Renderer               = renderer
        self.scheduler:   Scheduler              = scheduler or Scheduler()
        self.controls:    Optional["ControlPanel"] = controls
        self.state:       SessionState           = SessionState.IDLE
        self.last_result: Optional[RunResult]    = None
        self._rng:        random.Random          = rng or random.Random()
        self._speed:      int                    = settings.DEFAULT_SPEED

        if controls is not None:
            controls.subscribe(self._on_control_event)

        if dataset is None:
            self.regenerate()
        else:
            self._install(dataset)

    # ------------------------------------------------------------------
    # Dataset lifecycle
    # ------------------------------------------------------------------
    def regenerate(self, size: Optional[int] = None) -> Dataset:
        """Fresh random values and a full renderer reset."""
        self._require_idle("regenerate the dataset")
        if size is None:
            size = self.controls.size if self.controls is not None else settings.DEFAULT_SIZE
        dataset = Dataset.generate_random(size, rng=self._rng)
        logger.debug("Generated new dataset of size %d", size)
        return self._install(dataset)

    def load(self, values: Iterable[int]) -> Dataset:
        """Replace the dataset with explicit values (full renderer reset)."""
        self._require_idle("load a dataset")
        return self._install(Dataset.from_values(values))

    def _install(self, dataset: Dataset) -> Dataset:
        self.dataset = dataset
        self.renderer.reset(dataset.size)
        for i, v in enumerate(dataset.values):
            self.renderer.set_height(i, v)
        return dataset

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == SessionState.RUNNING

    async def start(self, algo_key: Optional[str] = None, speed: Optional[int] = None) -> RunResult:
        """Run one algorithm to completion over the current dataset."""
        self._require_idle("start a run")
        if self.controls is not None and not self.controls.can_start:
            raise SessionBusyError("Cannot start a run while the controls are disabled")

        if algo_key is None:
            algo_key = self.controls.algorithm if self.controls is not None else settings.DEFAULT_ALGORITHM
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        if speed is not None:
            if self.controls is not None:
                self.controls.set_speed(speed)
            else:
                speed_to_delay(speed)
                self._speed = speed
        if info.non_negative_only:
            self.dataset.require_non_negative()

        self.state = SessionState.RUNNING
        if self.controls is not None:
            self.controls.disable()

        logger.info("Starting %s on %d values", info.label, self.dataset.size)
        try:
            ctx = SortContext(self.dataset, self.renderer, self.scheduler, self._current_delay)
            started = self.scheduler.now()
            await info.fn(ctx)
            finished = self.scheduler.now()
        finally:
            self.state = SessionState.IDLE
            if self.controls is not None:
                self.controls.enable()

        result = self._build_result(info, ctx, finished - started)
        self.last_result = result
        logger.info(
            "Finished %s in %s ms (%d comparisons, %d writes)",
            info.label, result.elapsed_display, result.comparisons, result.writes,
        )
        return result

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _current_delay(self) -> int:
        if self.controls is not None:
            return speed_to_delay(self.controls.speed)
        return speed_to_delay(self._speed)

    def _require_idle(self, action: str) -> None:
        if self.state == SessionState.RUNNING:
            raise SessionBusyError(f"Cannot {action} while a sort is running")

    def _on_control_event(self, event: str, value: Any) -> None:
        if event in ("size", "new_array"):
            self.regenerate()

    def _build_result(self, info: AlgoInfo, ctx: SortContext, elapsed_ms: float) -> RunResult:
        m = ctx.metrics
        return RunResult(
            algo_key=info.key,
            algo_label=info.label,
            size=len(ctx),
            elapsed_ms=round(elapsed_ms, 2),
            comparisons=m["comparisons"],
            writes=m["writes"],
            swaps=m["swaps"],
            suspensions=m["suspensions"],
            passes=m["passes"],
        )
