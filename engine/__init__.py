"""
engine/
-------
Scheduling, run orchestration & recording layer.

    from engine import SessionController, Scheduler, Recorder, compare
"""

from engine.scheduler import Scheduler, VirtualScheduler, speed_to_delay, SPEED_MIN, SPEED_MAX
from engine.session   import SessionController, SessionState, SessionBusyError, RunResult
from engine.recorder  import Recorder, ComparisonResult, compare

__all__ = [
    "Scheduler",
    "VirtualScheduler",
    "speed_to_delay",
    "SPEED_MIN",
    "SPEED_MAX",
    "SessionController",
    "SessionState",
    "SessionBusyError",
    "RunResult",
    "Recorder",
    "ComparisonResult",
    "compare",
]
