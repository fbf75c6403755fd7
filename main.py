"""
main.py — Sorting Visualizer Flask App
=======================================
The web server that powers the visualizer.

Routes:
  GET  /                        – main UI
  GET  /api/algorithms          – registry listing
  GET  /api/state               – current frame + playback status (polled)
  GET  /api/log                 – recorded actions of the current session
  POST /api/array/generate      – new random array
  POST /api/run                 – record a sort and start auto-play
  POST /api/pause               – RUNNING → PAUSED
  POST /api/resume              – PAUSED → RUNNING
  POST /api/toggle              – the Pause/Resume button
  POST /api/step/next           – apply one action
  POST /api/step/prev           – go back one action
  POST /api/step/goto           – scrub to action N
  POST /api/skip/start          – back to the pre-sort array
  POST /api/skip/end            – apply every remaining action
  POST /api/config/speed        – speed slider / preset
  POST /api/config/canvas       – canvas width / height

State management:
  One PlaybackController per app (a local, single-user tool).  It lives
  on an asyncio loop in a background thread; every route hands its call
  to that loop through LoopThread.call(), so auto-play ticks and manual
  requests never interleave mid-step.  The SvgRenderer keeps the latest
  frame, which the page polls while a sort is running.
"""

import atexit
import secrets
from typing import Any, Dict, Optional

import structlog
from flask import Flask, jsonify, render_template_string, request

from algorithms import get_algorithm, list_algorithms
from config import AppConfig
from engine import CallTimeout, InvalidTransition, LoopThread, PlaybackController
from logconfig import setup_logging
from ui import (
    SvgRenderer,
    algorithm_selector,
    analytics_panel,
    array_generator,
    canvas_size_panel,
    playback_controls,
    pseudocode_viewer,
)

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[AppConfig] = None) -> Flask:
    cfg = config or AppConfig.from_env()
    setup_logging(cfg.log_level, cfg.log_json)

    app = Flask(__name__)
    app.secret_key = secrets.token_hex(32)

    loop       = LoopThread()
    renderer   = SvgRenderer(cfg.canvas_width, cfg.canvas_height)
    controller = PlaybackController(
        clock=loop.clock,
        renderer=renderer,
        canvas_width=cfg.canvas_width,
        canvas_height=cfg.canvas_height,
        speed=cfg.speed,
        array_size=cfg.array_size,
        seed=cfg.seed,
    )
    loop.start()
    atexit.register(loop.stop)
    loop.call(controller.generate, cfg.array_size)

    app.extensions["sortviz"] = {"loop": loop, "controller": controller, "renderer": renderer}

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------
    def body() -> Dict[str, Any]:
        return request.get_json(silent=True) or {}

    def frame() -> Dict[str, Any]:
        """Controller status + latest SVG, read on the loop thread."""
        def read():
            snap = controller.snapshot()
            snap["svg"]       = renderer.svg
            snap["highlight"] = renderer.highlight
            snap["playback"]  = playback_controls(
                state=snap["state"], cursor=snap["cursor"], total=snap["total"], speed=snap["speed"],
            )
            return snap
        return loop.call(read)

    def int_field(data: Dict[str, Any], name: str, default: Any = None) -> int:
        raw = data.get(name, default)
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"'{name}' must be an integer, got {raw!r}")

    # -----------------------------------------------------------------------
    # Errors
    # -----------------------------------------------------------------------
    @app.errorhandler(InvalidTransition)
    def handle_invalid_transition(exc: InvalidTransition):
        return jsonify({"error": str(exc), "operation": exc.operation, "state": exc.state}), 409

    @app.errorhandler(ValueError)
    def handle_value_error(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(CallTimeout)
    def handle_call_timeout(exc: CallTimeout):
        log.warning("loop_call_timeout", path=request.path)
        return jsonify({"error": "Playback loop is busy, try again"}), 503

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        state = frame()
        metrics = loop.call(lambda: controller.metrics)
        algo_info = get_algorithm(state["algo"]) if state["algo"] else None

        html = render_template_string(
            INDEX_TEMPLATE,
            svg=state["svg"],
            playback=state["playback"],
            algo_selector=algorithm_selector(list_algorithms(), state["algo"]),
            generator=array_generator(size=state["size"], max_size=cfg.max_array_size),
            canvas_size=canvas_size_panel(state["canvas"]["width"], state["canvas"]["height"]),
            analytics=analytics_panel(metrics),
            pseudocode=pseudocode_viewer(
                algo_info.pseudocode if algo_info else [],
                algo_label=algo_info.label if algo_info else "",
            ),
        )
        return html

    # -----------------------------------------------------------------------
    # API: read-only
    # -----------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "key":              a.key,
                "label":            a.label,
                "tags":             a.tags,
                "stable":           a.stable,
                "in_place":         a.in_place,
                "complexity_time":  a.complexity_time,
                "complexity_space": a.complexity_space,
                "description":      a.description,
            }
            for a in list_algorithms()
        ])

    @app.route("/api/state")
    def api_state():
        return jsonify(frame())

    @app.route("/api/log")
    def api_log():
        def read():
            session = controller.timeline.session
            return {
                "algo":    session.algo_key if session else None,
                "cursor":  controller.timeline.cursor,
                "actions": session.log.to_list() if session else [],
            }
        return jsonify(loop.call(read))

    # -----------------------------------------------------------------------
    # API: array & run
    # -----------------------------------------------------------------------
    @app.route("/api/array/generate", methods=["POST"])
    def api_generate():
        data = body()
        size = int_field(data, "size", cfg.array_size)
        if not 0 <= size <= cfg.max_array_size:
            return jsonify({"error": f"size must be between 0 and {cfg.max_array_size}"}), 400
        seed = data.get("seed")
        loop.call(controller.generate, size, None if seed is None else int_field(data, "seed"))
        out = frame()
        out["analytics"] = analytics_panel(None)
        return jsonify(out)

    @app.route("/api/run", methods=["POST"])
    def api_run():
        algo_key = body().get("algo", "")

        def run():
            return controller.start(algo_key), controller.metrics

        started, metrics = loop.call(run, timeout=None)
        out = frame()
        out["started"] = started
        if started:
            info = get_algorithm(algo_key)
            out["analytics"]  = analytics_panel(metrics)
            out["pseudocode"] = pseudocode_viewer(info.pseudocode, algo_label=info.label)
        return jsonify(out)

    # -----------------------------------------------------------------------
    # API: play / pause
    # -----------------------------------------------------------------------
    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        loop.call(controller.pause)
        return jsonify(frame())

    @app.route("/api/resume", methods=["POST"])
    def api_resume():
        loop.call(controller.resume)
        return jsonify(frame())

    @app.route("/api/toggle", methods=["POST"])
    def api_toggle():
        loop.call(controller.toggle_pause)
        return jsonify(frame())

    # -----------------------------------------------------------------------
    # API: manual navigation
    # -----------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        touched = loop.call(controller.step_forward)
        out = frame()
        out["touched"] = touched
        return jsonify(out)

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        moved = loop.call(controller.step_back)
        out = frame()
        out["moved"] = moved
        return jsonify(out)

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        idx = int_field(body(), "index", 0)
        if not loop.call(controller.scrub_to, idx):
            return jsonify({"error": "Invalid action index"}), 400
        return jsonify(frame())

    @app.route("/api/skip/start", methods=["POST"])
    def api_skip_start():
        loop.call(controller.skip_to_start)
        return jsonify(frame())

    @app.route("/api/skip/end", methods=["POST"])
    def api_skip_end():
        applied = loop.call(controller.skip_to_end)
        out = frame()
        out["applied"] = applied
        return jsonify(out)

    # -----------------------------------------------------------------------
    # API: config changes
    # -----------------------------------------------------------------------
    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        data = body()
        if "preset" not in data:
            try:
                raw = float(data.get("speed"))
            except (TypeError, ValueError):
                raise ValueError(f"'speed' must be a number, got {data.get('speed')!r}")

        def apply():
            if "preset" in data:
                speed = controller.set_speed_preset(data["preset"])
            else:
                speed = controller.set_speed(raw)
            return speed, controller.interval

        speed, interval = loop.call(apply)
        return jsonify({"speed": speed, "interval_ms": round(interval * 1000, 3)})

    @app.route("/api/config/canvas", methods=["POST"])
    def api_config_canvas():
        data = body()
        loop.call(controller.resize, int_field(data, "width"), int_field(data, "height"))
        return jsonify(frame())

    log.info("app_created", array_size=cfg.array_size, canvas=f"{cfg.canvas_width}x{cfg.canvas_height}")
    return app


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
      --accent-rose: #f43f5e;
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
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel { padding: 20px; background: var(--bg-dark); max-height: 280px; overflow-y: auto; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 12px;
      color: var(--accent-cyan);
    }

    button {
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 10px;
      cursor: pointer;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-cyan); border-color: var(--accent-cyan); width: 100%; margin-top: 8px; }

    .button-row { display: flex; gap: 6px; justify-content: space-between; }
    .algo-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 6px; }
    .algo-btn small { display: block; color: var(--text-secondary); font-size: 10px; }
    .algo-btn.active { border-color: var(--accent-cyan); }

    .step-info { margin: 10px 0; font-family: monospace; color: var(--text-secondary); }
    .badge { margin-left: 8px; color: var(--accent-rose); }
    .speed-control, .canvas-size label { display: block; margin-top: 8px; }
    input[type=range] { width: 100%; }
    input[type=number] { width: 80px; background: var(--bg-darker); color: var(--text-primary); border: 1px solid var(--border); }

    .metrics-table td { padding: 2px 8px 2px 0; color: var(--text-secondary); }
    .placeholder { color: var(--text-secondary); font-size: 13px; }

    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 8px; white-space: pre; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-selector">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="generator">{{ generator|safe }}</div>
    <div id="canvas-size">{{ canvas_size|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom-panel">
      <div id="pseudocode">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <script>
    let polling = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function show(data) {
      if (data.error) { console.warn(data.error); return; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.playback) {
        document.getElementById('playback').innerHTML = data.playback;
        bindPlayback();
      }
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.state === 'running') startPolling(); else stopPolling();
    }

    function startPolling() {
      if (polling) return;
      polling = setInterval(async () => {
        const res = await fetch('/api/state');
        show(await res.json());
      }, 50);
    }

    function stopPolling() {
      if (polling) { clearInterval(polling); polling = null; }
    }

    function bindPlayback() {
      const on = (id, fn) => document.getElementById(id)?.addEventListener('click', fn);
      on('btn-skip-start', async () => show(await post('/api/skip/start')));
      on('btn-prev',       async () => show(await post('/api/step/prev')));
      on('btn-pause',      async () => show(await post('/api/toggle')));
      on('btn-next',       async () => show(await post('/api/step/next')));
      on('btn-skip-end',   async () => show(await post('/api/skip/end')));
      document.getElementById('speed-slider')?.addEventListener('input', async (e) => {
        await post('/api/config/speed', {speed: +e.target.value});
      });
    }
    bindPlayback();

    document.querySelectorAll('.algo-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        document.querySelectorAll('.algo-btn').forEach(b => b.classList.remove('active'));
        btn.classList.add('active');
        show(await post('/api/run', {algo: btn.dataset.algo}));
      });
    });

    document.getElementById('array-size')?.addEventListener('input', (e) => {
      document.getElementById('size-val').textContent = e.target.value;
    });
    document.getElementById('btn-generate')?.addEventListener('click', async () => {
      show(await post('/api/array/generate', {size: +document.getElementById('array-size').value}));
    });
    document.getElementById('btn-resize')?.addEventListener('click', async () => {
      show(await post('/api/config/canvas', {
        width: +document.getElementById('canvas-width').value,
        height: +document.getElementById('canvas-height').value,
      }));
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, threaded=True)
