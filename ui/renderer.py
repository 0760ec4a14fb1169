"""
renderer.py — Bar Renderers
============================
The renderer maps every dataset index to one visual bar.  Algorithms
never touch it directly; they go through the SortContext, which keeps
heights and data in lock-step.

Interface (what the engine calls):
    reset(size)              – discard and recreate `size` idle, zero-height bars
    set_height(index, value) – bar height proportional to `value`
    set_color(index, tag)    – apply one VisualTag
    flush(delay_ms)          – called right before every suspension point;
                               everything issued so far must be visible
                               before the algorithm resumes

Implementations:
  • BarRenderer       – in-memory model (heights + tags), used by the server
                        to render SVG snapshots and by tests.
  • RecordingRenderer – BarRenderer that also groups every operation into
                        Frames (one per flush) for browser playback.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from dataset import VisualTag


HEIGHT_SCALE: int = 3     # px per unit of value


class Renderer:
    """Base renderer.  Subclasses override the four operations."""

    def reset(self, size: int) -> None:
        raise NotImplementedError

    def set_height(self, index: int, value: int) -> None:
        raise NotImplementedError

    def set_color(self, index: int, tag: VisualTag) -> None:
        raise NotImplementedError

    def flush(self, delay_ms: int = 0) -> None:
        """Make pending updates visible.  No-op for immediate renderers."""


# ---------------------------------------------------------------------------
# BarRenderer — in-memory bar model
# ---------------------------------------------------------------------------
class BarRenderer(Renderer):
    """
    Attributes:
        values  : Raw value last written to each bar (mirror of the dataset).
        heights : Presentation heights (value × scale).
        tags    : Current VisualTag per bar.
        flushes : Number of flushes so far (== suspension points seen).
    """

    def __init__(self, scale: int = HEIGHT_SCALE):
        self.scale:   int             = scale
        self.values:  List[int]       = []
        self.heights: List[int]       = []
        self.tags:    List[VisualTag] = []
        self.flushes: int             = 0

    def reset(self, size: int) -> None:
        self.values  = [0] * size
        self.heights = [0] * size
        self.tags    = [VisualTag.IDLE] * size

    def set_height(self, index: int, value: int) -> None:
        self.values[index]  = value
        self.heights[index] = int(value) * self.scale

    def set_color(self, index: int, tag: VisualTag) -> None:
        self.tags[index] = tag

    def flush(self, delay_ms: int = 0) -> None:
        self.flushes += 1

    # -- read-only helpers --
    @property
    def size(self) -> int:
        return len(self.tags)

    def transient_indices(self) -> List[int]:
        """Indices still tagged COMPARING / PIVOT."""
        return [i for i, t in enumerate(self.tags) if t.is_transient]

    def all_sorted(self) -> bool:
        return all(t is VisualTag.SORTED for t in self.tags)


# ---------------------------------------------------------------------------
# Frames — what the browser replays
# ---------------------------------------------------------------------------
@dataclass
class Frame:
    """
    Attributes:
        ops      : Renderer calls since the previous flush, in order:
                     ("h", index, value)  – set_height
                     ("c", index, tag)    – set_color (tag value string)
        delay_ms : How long the browser waits after applying `ops`.
    """

    ops:      List[Tuple[str, int, Any]] = field(default_factory=list)
    delay_ms: int                        = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"ops": [list(op) for op in self.ops], "delay_ms": self.delay_ms}


class RecordingRenderer(BarRenderer):
    """
    Records every operation.  A frame is closed on each flush; whatever is
    issued after the last flush (the final "mark everything sorted" pass)
    becomes a trailing zero-delay frame when `frames` is read.
    """

    def __init__(self, scale: int = HEIGHT_SCALE):
        super().__init__(scale)
        self._frames:  List[Frame]               = []
        self._pending: List[Tuple[str, int, Any]] = []

    def reset(self, size: int) -> None:
        super().reset(size)
        self._frames  = []
        self._pending = []

    def set_height(self, index: int, value: int) -> None:
        super().set_height(index, value)
        self._pending.append(("h", index, int(value)))

    def set_color(self, index: int, tag: VisualTag) -> None:
        super().set_color(index, tag)
        self._pending.append(("c", index, tag.value))

    def flush(self, delay_ms: int = 0) -> None:
        super().flush(delay_ms)
        self._frames.append(Frame(ops=self._pending, delay_ms=max(0, int(delay_ms))))
        self._pending = []

    def clear_frames(self) -> None:
        """Drop recorded history but keep the current bar model."""
        self._frames  = []
        self._pending = []

    @property
    def frames(self) -> List[Frame]:
        if self._pending:
            return self._frames + [Frame(ops=list(self._pending), delay_ms=0)]
        return list(self._frames)
