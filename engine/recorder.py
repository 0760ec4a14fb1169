"""
recorder.py — Run Recorder & Comparison
========================================
Records a complete sort run as a list of Frames, instantly, so the
browser can replay it with the real per-step delays.

A run is recorded by driving an ordinary SessionController with:
  • a RecordingRenderer  – every flush closes one Frame
  • a VirtualScheduler   – delays are simulated, the clock still advances

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=[5, 3, 8, 1], speed=80)
    result = rec.run_to_completion()     # RunResult, elapsed == playback time
    rec.export()                         # JSON-ready frames + result

Comparison Mode:
    Record two algorithms on the SAME starting values, then
    compare(rec1, rec2) → ComparisonResult.
"""

import asyncio
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from config import settings
from dataset import Dataset
from algorithms import AlgoInfo, get_algorithm
from engine.scheduler import VirtualScheduler, speed_to_delay
from engine.session import RunResult, SessionController
from ui.renderer import Frame, RecordingRenderer


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunResult = field(default_factory=RunResult)
    right: RunResult = field(default_factory=RunResult)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_writes:      str = ""   # which algo wrote less
    winner_time:        str = ""   # which algo animates faster

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["left"]  = self.left.to_dict()
        data["right"] = self.right.to_dict()
        return data


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        frames       : Recorded Frames (available after run_to_completion).
        result       : RunResult of the recorded run.
        final_values : Dataset contents after the run.
    """

    def __init__(self):
        self.frames:       List[Frame]         = []
        self.result:       Optional[RunResult] = None
        self.final_values: List[int]           = []

        self._algo_info:  Optional[AlgoInfo]          = None
        self._initial:    List[int]                   = []
        self._speed:      int                         = settings.DEFAULT_SPEED
        self._renderer:   Optional[RecordingRenderer] = None
        self._controller: Optional[SessionController] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: List[int], speed: Optional[int] = None) -> None:
        """Prepare a controller for this run; nothing is sorted yet."""
        if speed is None:
            speed = settings.DEFAULT_SPEED
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        speed_to_delay(speed)

        self._algo_info = info
        self._initial   = list(values)
        self._speed     = speed
        self.frames     = []
        self.result     = None

        self._renderer   = RecordingRenderer()
        self._controller = SessionController(
            renderer=self._renderer,
            scheduler=VirtualScheduler(),
            dataset=Dataset.from_values(values),
        )
        # the initial bar layout is sent separately; frames start at the run
        self._renderer.clear_frames()

    def run_to_completion(self) -> RunResult:
        """Drive the run on a fresh event loop and keep every frame."""
        if self._controller is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        self.result = asyncio.run(
            self._controller.start(self._algo_info.key, speed=self._speed)
        )
        self.frames       = self._renderer.frames
        self.final_values = list(self._controller.dataset.values)
        return self.result

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key":     self._algo_info.key if self._algo_info else "",
            "speed":        self._speed,
            "initial":      list(self._initial),
            "final":        list(self.final_values),
            "result":       self.result.to_dict() if self.result else {},
            "frames":       [f.to_dict() for f in self.frames],
        }


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.result  or RunResult()
    r = right.result or RunResult()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_writes=winner(l.writes, r.writes, l.algo_label, r.algo_label),
        winner_time=winner(l.elapsed_ms, r.elapsed_ms, l.algo_label, r.algo_label),
    )
