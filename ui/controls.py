"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – skip-start / step-back / pause / step / skip-end / speed
  • algorithm_selector  – one button per registered sort
  • array_generator     – array size + generate
  • canvas_size_panel   – canvas width / height
  • analytics_panel     – actions, swaps, writes, record time
  • pseudocode_viewer   – pseudocode of the selected algorithm

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from engine import RunMetrics, SPEED_PRESETS


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    state: str = "idle",
    cursor: int = 0,
    total: int = 0,
    speed: float = SPEED_PRESETS["medium"],
) -> str:
    running = state == "running"
    pause_label = "Pause" if running or state == "idle" else "Resume"
    disabled = "disabled" if running else ""

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-skip-start" title="Skip to start" {disabled}>⏮</button>
        <button id="btn-prev" title="Step back" {disabled}>◀</button>
        <button id="btn-pause" title="Pause / Resume">{pause_label}</button>
        <button id="btn-next" title="Step forward" {disabled}>▶</button>
        <button id="btn-skip-end" title="Skip to end" {disabled}>⏭</button>
      </div>
      <div class="step-info">
        Action <span id="cursor">{cursor}</span> / <span id="total">{total}</span>
        <span id="state-badge" class="badge">{state.upper()}</span>
      </div>
      <div class="speed-control">
        <label for="speed-slider">Speed:</label>
        <input type="range" id="speed-slider" min="1" max="100" value="{int(speed)}">
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: Optional[str] = None) -> str:
    buttons = []
    for algo in algorithms:
        active = 'active' if algo.key == selected_key else ''
        buttons.append(
            f'<button class="algo-btn {active}" data-algo="{algo.key}" '
            f'title="{algo.description}">{algo.label}<small>{algo.complexity_time}</small></button>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Sort</h3>
      <div class="algo-grid">
        {''.join(buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Generator
# ---------------------------------------------------------------------------
def array_generator(size: int = 50, max_size: int = 200) -> str:
    return f"""
    <div class="panel array-generator">
      <h3>🎲 Array</h3>
      <label>Size: <span id="size-val">{size}</span></label>
      <input type="range" id="array-size" min="0" max="{max_size}" value="{size}">
      <button id="btn-generate" class="btn-primary">Generate New Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Canvas Size
# ---------------------------------------------------------------------------
def canvas_size_panel(width: int = 800, height: int = 400) -> str:
    return f"""
    <div class="panel canvas-size">
      <h3>📐 Canvas</h3>
      <label>Width <input type="number" id="canvas-width" min="50" value="{width}"></label>
      <label>Height <input type="number" id="canvas-height" min="50" value="{height}"></label>
      <button id="btn-resize">Apply</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if metrics is None:
        return """
        <div class="panel analytics">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run a sort to see its action counts.</p>
        </div>
        """

    return f"""
    <div class="panel analytics">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table class="metrics-table">
        <tr><td>Array size</td><td>{metrics.array_size}</td></tr>
        <tr><td>Recorded actions</td><td>{metrics.total_actions}</td></tr>
        <tr><td>Swaps</td><td>{metrics.swaps}</td></tr>
        <tr><td>Writes</td><td>{metrics.writes}</td></tr>
        <tr><td>Record time</td><td>{metrics.wall_time_ms} ms</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], algo_label: str = "") -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Pick a sort to view its pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        line_escaped = line.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
        lines_html.append(f'<div class="code-line" data-line="{i}">{line_escaped}</div>')

    return f"""
    <div class="code-block" title="{algo_label}">
      {''.join(lines_html)}
    </div>
    """
