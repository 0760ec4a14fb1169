"""
controls.py — Controls Surface & UI Panels
============================================
Two halves:

  1. ControlPanel — the live control values the SessionController reads
     (algorithm, speed, size), their enabled/disabled state, and the
     change / activation events it listens to.

  2. Every UI panel is a pure function that takes state and returns HTML:
       • algorithm_selector   – dropdown + Start button
       • array_controls       – size slider + New Array button
       • speed_control        – speed slider (stays live during a run)
       • time_panel           – elapsed time of the last run
       • description_panel    – one-liner + complexity for the algorithm
       • analytics_panel      – counters of the last run
       • comparison_panel     – side-by-side results of two runs
       • pseudocode_viewer    – algorithm pseudocode

Design:
  - Panels are stateless render functions; state is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import TYPE_CHECKING, Any, Callable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from config import settings
from engine.scheduler import SPEED_MIN, SPEED_MAX

if TYPE_CHECKING:
    from engine import RunResult, ComparisonResult


class ControlsDisabledError(RuntimeError):
    """Raised when a locked control is changed while a run is in flight."""


# ---------------------------------------------------------------------------
# ControlPanel — live control state
# ---------------------------------------------------------------------------
class ControlPanel:
    """
    Attributes:
        algorithm : Selected registry key.
        speed     : 1 (slow) … 100 (fast).  Never locked.
        size      : Number of bars, clamped to [min_size, max_size].
        disabled  : True while a run is active; locks algorithm, size,
                    new-array and start.

    Events delivered to subscribers as callback(event, value):
        "algorithm", "speed", "size", "new_array"
    """

    def __init__(
        self,
        algorithm: str = settings.DEFAULT_ALGORITHM,
        speed: int = settings.DEFAULT_SPEED,
        size: int = settings.DEFAULT_SIZE,
        min_size: int = settings.MIN_SIZE,
        max_size: int = settings.MAX_SIZE,
    ):
        if get_algorithm(algorithm) is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self.min_size:  int  = min_size
        self.max_size:  int  = max_size
        self.algorithm: str  = algorithm
        self.speed:     int  = _clamp(int(speed), SPEED_MIN, SPEED_MAX)
        self.size:      int  = _clamp(int(size), min_size, max_size)
        self.disabled:  bool = False
        self._listeners: List[Callable[[str, Any], None]] = []

    # -- events --
    def subscribe(self, callback: Callable[[str, Any], None]) -> None:
        self._listeners.append(callback)

    def _emit(self, event: str, value: Any) -> None:
        for callback in list(self._listeners):
            callback(event, value)

    # -- enable / disable --
    def disable(self) -> None:
        self.disabled = True

    def enable(self) -> None:
        self.disabled = False

    @property
    def can_start(self) -> bool:
        return not self.disabled

    # -- setters --
    def select_algorithm(self, key: str) -> str:
        self._require_enabled("algorithm")
        if get_algorithm(key) is None:
            raise ValueError(f"Unknown algorithm: {key}")
        self.algorithm = key
        self._emit("algorithm", key)
        return key

    def set_speed(self, speed: int) -> int:
        self.speed = _clamp(int(speed), SPEED_MIN, SPEED_MAX)
        self._emit("speed", self.speed)
        return self.speed

    def set_size(self, size: int) -> int:
        self._require_enabled("size")
        self.size = _clamp(int(size), self.min_size, self.max_size)
        self._emit("size", self.size)
        return self.size

    def request_new_array(self) -> None:
        self._require_enabled("new array")
        self._emit("new_array", self.size)

    def _require_enabled(self, control: str) -> None:
        if self.disabled:
            raise ControlsDisabledError(f"The {control} control is disabled while sorting")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    disabled: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(f'<option value="{algo.key}" {sel}>{algo.label}</option>')

    dis = 'disabled' if disabled else ''
    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algo-selector" {dis}>
        {''.join(options)}
      </select>
      <button id="btn-run" class="btn-primary" {dis}>▶ Sort</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(
    size: int = 50,
    min_size: int = 5,
    max_size: int = 200,
    disabled: bool = False,
) -> str:
    dis = 'disabled' if disabled else ''
    return f"""
    <div class="panel array-controls">
      <h3>Array</h3>
      <label>Size: <span id="size-val">{size}</span>
        <input type="range" id="size-input" min="{min_size}" max="{max_size}" value="{size}" {dis}>
      </label>
      <button id="btn-new-array" class="btn-secondary" {dis}>Generate New Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Control
# ---------------------------------------------------------------------------
def speed_control(speed: int = 50) -> str:
    return f"""
    <div class="panel speed-control">
      <h3>Speed</h3>
      <label>Speed: <span id="speed-val">{speed}</span>
        <input type="range" id="speed-input" min="{SPEED_MIN}" max="{SPEED_MAX}" value="{speed}">
      </label>
      <p class="hint">Delay per step: <span id="delay-val">{SPEED_MAX + 1 - speed}</span> ms</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Time Panel
# ---------------------------------------------------------------------------
def time_panel(result: Optional["RunResult"] = None) -> str:
    elapsed = result.elapsed_display if result else "0"
    return f"""
    <div class="panel time-panel">
      <h3>Time Taken</h3>
      <p><strong id="time-taken">{elapsed}</strong> ms</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Description Panel
# ---------------------------------------------------------------------------
def description_panel(algo: Optional[AlgoInfo] = None) -> str:
    if not algo:
        return """<div class="algorithm-description placeholder">Select an algorithm.</div>"""

    badges = []
    if algo.stable:
        badges.append('<span class="badge">stable</span>')
    if algo.non_negative_only:
        badges.append('<span class="badge">non-negative integers</span>')

    return f"""
    <div class="algorithm-description">
      <p><strong>{algo.label}:</strong> {algo.description}</p>
      <p class="complexity">Time {algo.complexity_time} · Space {algo.complexity_space} {''.join(badges)}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(result: Optional["RunResult"] = None) -> str:
    if not result:
        return """
        <div class="panel analytics-panel">
          <h3>Analytics</h3>
          <p class="placeholder">Sort the array to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>Analytics — {result.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{result.size}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{result.comparisons}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{result.writes}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{result.swaps}</strong></td></tr>
        <tr><td>Animation Steps:</td><td><strong>{result.suspensions}</strong></td></tr>
        <tr><td>Passes:</td><td><strong>{result.passes}</strong></td></tr>
        <tr><td>Time Taken:</td><td><strong>{result.elapsed_display} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional["ComparisonResult"] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>Comparison</h3>
          <p class="placeholder">Sort the same array with two algorithms to compare.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "Tie"
        return winner_label

    return f"""
    <div class="panel comparison-panel">
      <h3>Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Writes</td>
            <td>{left.writes}</td>
            <td>{right.writes}</td>
            <td>{winner_badge(comp.winner_writes)}</td>
          </tr>
          <tr>
            <td>Time Taken</td>
            <td>{left.elapsed_display} ms</td>
            <td>{right.elapsed_display} ms</td>
            <td>{winner_badge(comp.winner_time)}</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        line_escaped = line.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
        lines_html.append(f'<div class="code-line" data-line="{i}">{line_escaped}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
