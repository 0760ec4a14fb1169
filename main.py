"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/array/generate     – generate a new random array
  POST /api/config/size        – change array size (regenerates)
  POST /api/config/speed       – change animation speed
  POST /api/config/algo        – select algorithm
  POST /api/run                – record a sort run, return frames for playback
  POST /api/compare            – record two algorithms on the same array
  GET  /api/state              – current app state

Run model:
  The server records the whole run instantly (VirtualScheduler +
  RecordingRenderer) and returns the frames.  The browser replays them,
  waiting (101 - speed) ms after each frame, with the array controls
  disabled until playback ends.

State management:
  All state is stored in the Flask session.  Each user's session holds:
    • values          – the current array
    • size / speed
    • selected_algo
    • last_result     – RunResult of the last run
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import settings
from logging_config import setup_logging
from dataset import Dataset, DatasetError
from algorithms import get_algorithm, list_algorithms
from engine import Recorder, RunResult, SessionBusyError, compare, speed_to_delay
from ui import (
    ControlPanel,
    ControlsDisabledError,
    render_bars,
    tag_palette,
    algorithm_selector,
    array_controls,
    speed_control,
    time_panel,
    description_panel,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
)


logger = logging.getLogger("main")

app = Flask(__name__)
app.secret_key = settings.SECRET_KEY or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_controls() -> ControlPanel:
    """Rebuild the control values from the session (clamped on the way in)."""
    algo = session.get("selected_algo", settings.DEFAULT_ALGORITHM)
    if get_algorithm(algo) is None:
        algo = settings.DEFAULT_ALGORITHM
    return ControlPanel(
        algorithm=algo,
        speed=session.get("speed", settings.DEFAULT_SPEED),
        size=session.get("size", settings.DEFAULT_SIZE),
    )


def save_controls(controls: ControlPanel):
    session["selected_algo"] = controls.algorithm
    session["speed"]         = controls.speed
    session["size"]          = controls.size


def get_dataset() -> Dataset:
    """Deserialise the array from session, or create a fresh one."""
    if "values" not in session:
        save_dataset(new_dataset(get_controls().size))
    return Dataset.from_dict({"values": session["values"]})


def save_dataset(dataset: Dataset):
    session["values"] = dataset.to_dict()["values"]


def new_dataset(size: int) -> Dataset:
    return Dataset.generate_random(size, low=settings.VALUE_MIN, high=settings.VALUE_MAX)


def get_last_result():
    data = session.get("last_result")
    return RunResult(**data) if data else None


def get_state():
    """Return current app state as a dict."""
    controls = get_controls()
    return {
        "selected_algo": controls.algorithm,
        "speed":         controls.speed,
        "size":          controls.size,
        "values":        get_dataset().values,
        "last_result":   session.get("last_result"),
    }


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    controls = get_controls()
    dataset  = get_dataset()
    algo     = get_algorithm(controls.algorithm)
    result   = get_last_result()

    html = render_template_string(
        INDEX_TEMPLATE,
        svg=render_bars(dataset.values),
        algo_selector=algorithm_selector(list_algorithms(), controls.algorithm),
        array=array_controls(controls.size, controls.min_size, controls.max_size),
        speed=speed_control(controls.speed),
        time=time_panel(result),
        description=description_panel(algo),
        pseudocode=pseudocode_viewer(algo.pseudocode if algo else []),
        analytics=analytics_panel(result),
        comparison=comparison_panel(None),
        algorithms=list_algorithms(),
        palette=tag_palette(),
    )
    return html


# ---------------------------------------------------------------------------
# API: Array
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = request.get_json(silent=True) or {}
    controls = get_controls()

    try:
        if "size" in data:
            controls.set_size(int(data["size"]))
    except (TypeError, ValueError) as e:
        return error(str(e))

    dataset = new_dataset(controls.size)
    save_controls(controls)
    save_dataset(dataset)
    session.pop("last_result", None)
    logger.debug("New array of %d values", controls.size)

    return jsonify({"svg": render_bars(dataset.values), "values": dataset.values, "size": controls.size})


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    data = request.get_json(silent=True) or {}
    controls = get_controls()
    try:
        controls.set_size(int(data.get("size", controls.size)))
    except (TypeError, ValueError) as e:
        return error(str(e))

    dataset = new_dataset(controls.size)
    save_controls(controls)
    save_dataset(dataset)
    session.pop("last_result", None)

    return jsonify({"svg": render_bars(dataset.values), "values": dataset.values, "size": controls.size})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data = request.get_json(silent=True) or {}
    controls = get_controls()
    try:
        speed = controls.set_speed(int(data.get("speed", controls.speed)))
    except (TypeError, ValueError) as e:
        return error(str(e))
    save_controls(controls)
    return jsonify({"speed": speed, "delay_ms": speed_to_delay(speed)})


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    data = request.get_json(silent=True) or {}
    controls = get_controls()
    try:
        algo_key = controls.select_algorithm(data.get("algo_key", settings.DEFAULT_ALGORITHM))
    except ValueError as e:
        return error(str(e))
    save_controls(controls)

    algo = get_algorithm(algo_key)
    return jsonify({
        "algo_key":    algo_key,
        "description": description_panel(algo),
        "pseudocode":  pseudocode_viewer(algo.pseudocode),
    })


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = request.get_json(silent=True) or {}
    controls = get_controls()
    dataset  = get_dataset()
    algo_key = data.get("algo_key", controls.algorithm)

    rec = Recorder()
    try:
        rec.start(algo_key, dataset.values, speed=controls.speed)
        result = rec.run_to_completion()
    except (ValueError, SessionBusyError, ControlsDisabledError) as e:
        # DatasetError / NegativeValueError are ValueErrors
        return error(str(e))

    save_dataset(Dataset.from_values(rec.final_values))
    session["last_result"] = {k: v for k, v in result.to_dict().items() if k != "elapsed_display"}

    payload = rec.export()
    payload.update({
        "analytics": analytics_panel(result),
        "time":      result.elapsed_display,
        "svg":       render_bars(payload["initial"]),
    })
    return jsonify(payload)


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = request.get_json(silent=True) or {}
    controls = get_controls()
    dataset  = get_dataset()

    left_key  = data.get("left", controls.algorithm)
    right_key = data.get("right", "merge")

    recorders = []
    try:
        for key in (left_key, right_key):
            rec = Recorder()
            rec.start(key, dataset.values, speed=controls.speed)
            rec.run_to_completion()
            recorders.append(rec)
    except (DatasetError, ValueError) as e:
        return error(str(e))

    comp = compare(recorders[0], recorders[1])
    return jsonify({
        "comparison": comp.to_dict(),
        "html":       comparison_panel(comp),
    })


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: flex-end;
      justify-content: center;
      padding: 24px;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 320px;
      overflow: auto;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 16px;
    }
    .panel h3 { font-size: 14px; margin-bottom: 10px; color: var(--text-secondary); }
    select, input[type=range], button { width: 100%; margin-top: 8px; }
    button {
      padding: 8px;
      border-radius: 8px;
      border: 1px solid var(--border);
      background: var(--bg-dark);
      color: var(--text-primary);
      cursor: pointer;
    }
    .btn-primary { background: var(--accent-cyan); border-color: var(--accent-cyan); }
    button:disabled, select:disabled, input:disabled { opacity: 0.5; cursor: not-allowed; }
    .code-line { font-family: monospace; white-space: pre; font-size: 13px; }
    .placeholder, .hint, .complexity { color: var(--text-secondary); font-size: 13px; }
    .badge { border: 1px solid var(--border); border-radius: 6px; padding: 0 6px; margin-left: 4px; }
    table { width: 100%; font-size: 13px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    {{ array|safe }}
    {{ speed|safe }}
    <div id="time">{{ time|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div class="panel">
      <h3>Compare With</h3>
      <select id="compare-selector">
        {% for algo in algorithms %}<option value="{{ algo.key }}">{{ algo.label }}</option>{% endfor %}
      </select>
      <button id="btn-compare" class="btn-secondary">Compare</button>
    </div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div>
        <h3>Description</h3>
        <div id="algorithm-description">{{ description|safe }}</div>
      </div>
      <div>
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    const PALETTE = {{ palette|tojson }};
    let playing = false;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    function sleep(ms) {
      return new Promise(resolve => setTimeout(resolve, ms));
    }

    function currentDelay() {
      return 101 - (+document.getElementById('speed-input').value);
    }

    // Everything that could start a second run or change the array
    function setControlsEnabled(enabled) {
      ['btn-run', 'algo-selector', 'size-input', 'btn-new-array', 'btn-compare']
        .forEach(id => { const el = document.getElementById(id); if (el) el.disabled = !enabled; });
    }

    function applyOp(svg, scale, op) {
      const [kind, index, value] = op;
      const bar = svg.querySelector('#bar-' + index);
      if (!bar) return;
      if (kind === 'h') {
        const maxH = +svg.getAttribute('height');
        const h = Math.min(maxH, value * scale);
        bar.setAttribute('height', h);
        bar.setAttribute('y', maxH - h);
        bar.dataset.value = value;
      } else {
        bar.setAttribute('fill', PALETTE[value] || PALETTE.idle);
      }
    }

    async function playFrames(frames) {
      const svg = document.querySelector('#canvas-svg svg');
      const scale = +svg.dataset.scale;
      for (const frame of frames) {
        frame.ops.forEach(op => applyOp(svg, scale, op));
        if (frame.delay_ms > 0) await sleep(currentDelay());
      }
    }

    document.getElementById('btn-run')?.addEventListener('click', async () => {
      if (playing) return;
      // locked from the click until playback ends, including the request itself
      playing = true;
      setControlsEnabled(false);
      try {
        const data = await post('/api/run', {});
        if (data.error) { alert(data.error); return; }
        document.getElementById('time-taken').textContent = '0';
        const started = performance.now();
        try {
          document.getElementById('canvas-svg').innerHTML = data.svg;
          await playFrames(data.frames);
        } finally {
          const elapsed = (performance.now() - started).toFixed(2);
          document.getElementById('time-taken').textContent = elapsed;
          if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
        }
      } finally {
        setControlsEnabled(true);
        playing = false;
      }
    });

    document.getElementById('btn-new-array')?.addEventListener('click', async () => {
      const data = await post('/api/array/generate', {});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('time-taken').textContent = '0';
    });

    document.getElementById('size-input')?.addEventListener('input', async (e) => {
      document.getElementById('size-val').textContent = e.target.value;
      const data = await post('/api/config/size', {size: +e.target.value});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('time-taken').textContent = '0';
    });

    document.getElementById('speed-input')?.addEventListener('input', async (e) => {
      document.getElementById('speed-val').textContent = e.target.value;
      document.getElementById('delay-val').textContent = currentDelay();
      await post('/api/config/speed', {speed: +e.target.value});
    });

    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.description) document.getElementById('algorithm-description').innerHTML = data.description;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
    });

    document.getElementById('btn-compare')?.addEventListener('click', async () => {
      const data = await post('/api/compare', {
        left: document.getElementById('algo-selector').value,
        right: document.getElementById('compare-selector').value,
      });
      if (data.error) { alert(data.error); return; }
      document.getElementById('comparison').innerHTML = data.html;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    logger.info("Sorting Algorithm Visualizer on http://localhost:%d", settings.PORT)
    app.run(debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)
