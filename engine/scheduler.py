"""
scheduler.py — Animation Suspension Primitive
==============================================
Every suspension point in every algorithm ends up here:

    await scheduler.delay(duration_ms)

The coroutine gives control back to the asyncio event loop and resumes
at the exact call site afterwards, with the algorithm's locals and its
recursion stack untouched.

Speed mapping:
    delay_ms = 101 - speed        speed ∈ [1, 100]
    so 1 → 100 ms per step (slowest), 100 → 1 ms per step (fastest).

Two schedulers share the same contract:
  • Scheduler        – real wall-clock sleeps (asyncio.sleep).
  • VirtualScheduler – yields once per delay and advances a virtual
                       clock instead of sleeping.  The server uses it to
                       record a whole run instantly; the browser then
                       replays the recorded delays for real.

Neither can be cancelled mid-wait.
"""

import asyncio
import time


SPEED_MIN: int = 1
SPEED_MAX: int = 100


def speed_to_delay(speed: int) -> int:
    """Invert the speed setting into a per-step delay in milliseconds."""
    if not SPEED_MIN <= speed <= SPEED_MAX:
        raise ValueError(f"Speed must be in [{SPEED_MIN}, {SPEED_MAX}], got {speed}")
    return (SPEED_MAX + 1) - speed


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------
class Scheduler:
    """
    Attributes:
        suspensions : Number of delay() calls completed.
        total_delay_ms : Sum of requested delays.
    """

    def __init__(self):
        self.suspensions:    int   = 0
        self.total_delay_ms: float = 0.0

    async def delay(self, duration_ms: float) -> None:
        """Suspend the caller for `duration_ms`.  0 still yields once."""
        duration_ms = max(0.0, duration_ms)
        await self._wait(duration_ms)
        self.suspensions    += 1
        self.total_delay_ms += duration_ms

    def now(self) -> float:
        """Milliseconds on a monotonic, high-resolution clock."""
        return time.perf_counter() * 1000.0

    async def _wait(self, duration_ms: float) -> None:
        await asyncio.sleep(duration_ms / 1000.0)


# ---------------------------------------------------------------------------
# VirtualScheduler
# ---------------------------------------------------------------------------
class VirtualScheduler(Scheduler):
    """Yields to the loop without sleeping; the clock jumps by the delay."""

    def __init__(self):
        super().__init__()
        self._virtual_ms: float = 0.0

    def now(self) -> float:
        return super().now() + self._virtual_ms

    async def _wait(self, duration_ms: float) -> None:
        await asyncio.sleep(0)
        self._virtual_ms += duration_ms
